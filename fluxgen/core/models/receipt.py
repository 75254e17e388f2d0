"""
Process receipt — what the Process Invoker reports back.

The invoker never raises; launch failures and interrupted waits are
captured here and judged afterwards by the result policy.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class ProcessReceipt(BaseModel):
    """Outcome of one generator subprocess."""

    status: Literal["terminated", "launch_failed", "interrupted"] = "terminated"
    exit_code: int | None = None
    command: list[str] = Field(default_factory=list)
    error: str | None = None

    started_at: str = Field(default_factory=_now_iso)
    ended_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0

    @property
    def terminated(self) -> bool:
        """Whether the process ran to completion and reported a status."""
        return self.status == "terminated"

    @classmethod
    def completed(cls, command: list[str], exit_code: int, **kwargs: Any) -> ProcessReceipt:
        """Create a receipt for a process that exited."""
        return cls(status="terminated", command=command, exit_code=exit_code, **kwargs)

    @classmethod
    def launch_failure(cls, command: list[str], error: str, **kwargs: Any) -> ProcessReceipt:
        """Create a receipt for a process that could not be started."""
        return cls(status="launch_failed", command=command, error=error, **kwargs)

    @classmethod
    def interrupted(cls, command: list[str], error: str = "wait interrupted", **kwargs: Any) -> ProcessReceipt:
        """Create a receipt for an interrupted wait."""
        return cls(status="interrupted", command=command, error=error, **kwargs)
