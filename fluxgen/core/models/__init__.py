"""
Domain models — Pydantic types for a generator invocation.

    from fluxgen.core.models import GeneratorConfig, ProcessReceipt
"""

from fluxgen.core.models.configuration import (
    GENERATOR_NAME,
    ExitStatusPolicy,
    GeneratorConfig,
    LaunchErrorPolicy,
)
from fluxgen.core.models.receipt import ProcessReceipt

__all__ = [
    "ExitStatusPolicy",
    "GENERATOR_NAME",
    "GeneratorConfig",
    "LaunchErrorPolicy",
    "ProcessReceipt",
]
