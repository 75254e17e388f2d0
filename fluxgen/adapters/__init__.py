"""Invokers — how the generator process is launched.

Public re-exports for convenient access.
"""

from fluxgen.adapters.base import ExecutionContext, Invoker
from fluxgen.adapters.mock import MockInvoker
from fluxgen.adapters.process import ProcessInvoker

__all__ = [
    "ExecutionContext",
    "Invoker",
    "MockInvoker",
    "ProcessInvoker",
]
