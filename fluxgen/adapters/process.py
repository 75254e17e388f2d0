"""
Process invoker — run the generator as a child process.

The child inherits the parent's console: stdin and stdout are passed
straight through and stderr is merged into stdout, so the generator's
output appears live and is never buffered here.  The wait has no
timeout; a hung generator blocks the invocation.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from pathlib import Path

from fluxgen.adapters.base import ExecutionContext, Invoker
from fluxgen.core.models.receipt import ProcessReceipt
from fluxgen.core.services.command import format_command

logger = logging.getLogger(__name__)

# Bound on the wait for a child after the parent was interrupted
REAP_TIMEOUT_SECONDS = 5


class ProcessInvoker(Invoker):
    """Launch the generator with inherited console I/O and wait for it."""

    @property
    def name(self) -> str:
        return "process"

    def is_available(self) -> bool:
        return True

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        executable = context.executable
        if not executable:
            return False, "Missing generator executable"

        path = Path(executable)
        if not path.exists():
            return False, f"Generator executable not found: {executable}"
        if not path.is_file():
            return False, f"Generator executable is not a file: {executable}"
        if not os.access(path, os.X_OK):
            return False, f"Generator executable is not executable: {executable}"

        if context.working_dir and not Path(context.working_dir).is_dir():
            return False, f"Working directory does not exist: {context.working_dir}"

        return True, ""

    def execute(self, context: ExecutionContext) -> ProcessReceipt:
        command = list(context.command)
        logger.info(format_command(command))

        valid, error = self.validate(context)
        if not valid:
            logger.debug("Cannot launch generator: %s", error)
            return ProcessReceipt.launch_failure(command, error)

        env = None
        if context.env:
            env = {**os.environ, **context.env}

        start = time.monotonic()

        try:
            proc = subprocess.Popen(
                command,
                stderr=subprocess.STDOUT,
                cwd=context.working_dir,
                env=env,
            )
        except OSError as e:
            logger.debug("Popen failed for %s: %s", command[0], e)
            return ProcessReceipt.launch_failure(command, f"Cannot start generator: {e}")

        try:
            exit_code = proc.wait()
        except KeyboardInterrupt:
            elapsed_ms = int((time.monotonic() - start) * 1000)
            logger.warning("Interrupted while waiting for generator (pid %d)", proc.pid)
            _reap(proc)
            return ProcessReceipt.interrupted(command, duration_ms=elapsed_ms)

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.debug("Generator exited with %d after %dms", exit_code, elapsed_ms)
        return ProcessReceipt.completed(command, exit_code, duration_ms=elapsed_ms)


def _reap(proc: subprocess.Popen) -> None:
    """Give an interrupted child a moment to exit so it is not left a zombie."""
    try:
        proc.wait(timeout=REAP_TIMEOUT_SECONDS)
    except (subprocess.TimeoutExpired, KeyboardInterrupt):
        proc.poll()
