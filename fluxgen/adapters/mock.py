"""
Mock invoker — test double for the generator process.

Records every context it receives and returns a configurable receipt
without launching anything.
"""

from __future__ import annotations

from fluxgen.adapters.base import ExecutionContext, Invoker
from fluxgen.core.models.receipt import ProcessReceipt


class MockInvoker(Invoker):
    """Invoker that pretends to run the generator.

    By default every call exits with status 0.  Use ``set_exit_code``,
    ``set_launch_failure`` or ``set_interrupted`` to change the outcome.
    """

    def __init__(self, invoker_name: str = "mock", available: bool = True, exit_code: int = 0):
        self._name = invoker_name
        self._available = available
        self._exit_code = exit_code
        self._outcome = "terminated"
        self._error = ""
        self._call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[ExecutionContext]:
        """All execution contexts this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def is_available(self) -> bool:
        return self._available

    def set_exit_code(self, exit_code: int) -> None:
        self._outcome = "terminated"
        self._exit_code = exit_code

    def set_launch_failure(self, error: str = "Mock launch failure") -> None:
        self._outcome = "launch_failed"
        self._error = error

    def set_interrupted(self) -> None:
        self._outcome = "interrupted"

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        return True, ""

    def execute(self, context: ExecutionContext) -> ProcessReceipt:
        self._call_log.append(context)
        command = list(context.command)

        if self._outcome == "launch_failed":
            return ProcessReceipt.launch_failure(command, self._error)
        if self._outcome == "interrupted":
            return ProcessReceipt.interrupted(command)
        return ProcessReceipt.completed(command, self._exit_code)

    def reset(self) -> None:
        """Clear the call log and go back to exiting with 0."""
        self._call_log.clear()
        self._outcome = "terminated"
        self._exit_code = 0
        self._error = ""
