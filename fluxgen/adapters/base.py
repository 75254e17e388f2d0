"""
Invoker base — the contract between the generate use case and a process runner.

The use case only talks to the generator through this protocol, never
through ``subprocess`` directly, so tests can swap in a mock.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from fluxgen.core.models.receipt import ProcessReceipt


class ExecutionContext(BaseModel):
    """Everything an invoker needs to run the generator once."""

    command: list[str]
    working_dir: str | None = None
    env: dict[str, str] = Field(default_factory=dict)

    @property
    def executable(self) -> str:
        """The program to launch (first argument)."""
        return self.command[0] if self.command else ""


class Invoker(ABC):
    """Abstract base class for generator invokers.

    Invokers launch a process and return receipts.  They NEVER raise;
    launch failures and interrupted waits are captured in the receipt.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The invoker identifier (e.g., 'process', 'mock')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the invoker can launch anything at all.

        Should be fast and never raise.
        """

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Validate that the command can be launched.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> ProcessReceipt:
        """Launch the command, wait for it, and return a receipt.

        MUST never raise exceptions.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
