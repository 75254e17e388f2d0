"""
Error taxonomy for a generator invocation.

Every stage raises a subclass of ``FluxgenError`` so the CLI and host
builds can catch the whole family in one place:

    ConfigurationError     unresolvable base dir, required field left empty
    ClasspathError         empty classpath entry list (or an empty entry)
    LaunchError            the generator could not be started
    InvocationInterrupted  the wait for the generator was interrupted
    GenerationFailure      the exit status was judged a failure

ConfigurationError and ClasspathError always stop the invocation before
a subprocess is launched.  LaunchError and InvocationInterrupted are only
raised when the launch-error policy is ``fail``.
"""

from __future__ import annotations


GENERATION_FAILURE_MESSAGE = "unable to execute fluxtion-statemachine generator"


class FluxgenError(Exception):
    """Base class for all invocation errors."""


class ConfigurationError(FluxgenError):
    """Raised when the configuration cannot be resolved or is incomplete."""


class ClasspathError(FluxgenError):
    """Raised when the host supplied no usable classpath entries."""


class LaunchError(FluxgenError):
    """Raised when the generator executable could not be started."""


class InvocationInterrupted(FluxgenError):
    """Raised when waiting on the generator process was interrupted."""


class GenerationFailure(FluxgenError):
    """Raised when the generator's exit status is treated as a failure."""

    def __init__(self, exit_code: int | None = None, message: str = GENERATION_FAILURE_MESSAGE):
        super().__init__(message)
        self.exit_code = exit_code
