"""
Generate use case — one complete generator invocation.

This is the entry point a host build calls with a fully populated
configuration and its resolved runtime classpath:

    result = run_generate(config, classpath_entries)

Stages run strictly forward; nothing is cached between invocations.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from fluxgen.adapters.base import ExecutionContext, Invoker
from fluxgen.adapters.process import ProcessInvoker
from fluxgen.core.errors import FluxgenError
from fluxgen.core.models.configuration import GeneratorConfig
from fluxgen.core.models.receipt import ProcessReceipt
from fluxgen.core.services.classpath import build_classpath
from fluxgen.core.services.command import compose_command
from fluxgen.core.services.paths import resolve_paths
from fluxgen.core.services.result_policy import apply_result_policy

logger = logging.getLogger(__name__)


class InvocationState(str, Enum):
    """Where an invocation has got to."""

    IDLE = "idle"
    PATHS_RESOLVED = "paths_resolved"
    CLASSPATH_BUILT = "classpath_built"
    COMMAND_COMPOSED = "command_composed"
    PROCESS_RUNNING = "process_running"
    TERMINATED = "terminated"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class GenerateResult:
    """Result of a generator invocation (or a dry-run plan)."""

    state: InvocationState = InvocationState.IDLE
    config: GeneratorConfig | None = None
    classpath: str = ""
    command: list[str] = field(default_factory=list)
    receipt: ProcessReceipt | None = None
    history: list[InvocationState] = field(default_factory=lambda: [InvocationState.IDLE])

    @property
    def succeeded(self) -> bool:
        return self.state == InvocationState.SUCCESS

    def advance(self, state: InvocationState) -> None:
        self.state = state
        self.history.append(state)

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "succeeded": self.succeeded,
            "command": self.command,
            "config": self.config.to_options() if self.config else None,
            "exit_code": self.receipt.exit_code if self.receipt else None,
            "receipt_status": self.receipt.status if self.receipt else None,
            "error": self.receipt.error if self.receipt else None,
            "duration_ms": self.receipt.duration_ms if self.receipt else 0,
        }


def plan_generate(
    config: GeneratorConfig,
    classpath_entries: Sequence[str],
) -> GenerateResult:
    """Resolve paths, build the classpath and compose the command.

    Raises:
        ConfigurationError: Base dir unresolvable or required field empty.
        ClasspathError: No classpath entries.
    """
    result = GenerateResult()

    resolved = resolve_paths(config)
    result.config = resolved
    result.advance(InvocationState.PATHS_RESOLVED)

    classpath = build_classpath(classpath_entries, resolved.classpath_separator)
    result.classpath = classpath
    result.advance(InvocationState.CLASSPATH_BUILT)

    result.command = compose_command(resolved, classpath)
    result.advance(InvocationState.COMMAND_COMPOSED)
    return result


def run_generate(
    config: GeneratorConfig,
    classpath_entries: Sequence[str],
    invoker: Invoker | None = None,
) -> GenerateResult:
    """Run the generator once and judge the outcome.

    Args:
        config: Host configuration; directories may be left unset.
        classpath_entries: Ordered runtime classpath from the host.
        invoker: Process runner (default: ProcessInvoker).

    Returns:
        GenerateResult in state SUCCESS, or FAILED when the failure was
        suppressed by ``ignore_errors`` or the launch-error policy.

    Raises:
        ConfigurationError, ClasspathError: Before anything is launched.
        GenerationFailure: Failed exit status without ``ignore_errors``.
        LaunchError, InvocationInterrupted: Only with launch policy "fail".
    """
    result = plan_generate(config, classpath_entries)
    assert result.config is not None  # set by plan_generate

    runner = invoker or ProcessInvoker()
    context = ExecutionContext(command=result.command, working_dir=result.config.project_base_dir)

    result.advance(InvocationState.PROCESS_RUNNING)
    receipt = runner.execute(context)
    result.receipt = receipt
    result.advance(InvocationState.TERMINATED)

    try:
        ok = apply_result_policy(receipt, result.config)
    except FluxgenError:
        result.advance(InvocationState.FAILED)
        raise

    result.advance(InvocationState.SUCCESS if ok else InvocationState.FAILED)
    logger.debug("Invocation finished in state %s", result.state.value)
    return result
