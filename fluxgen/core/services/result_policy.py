"""
Result policy — decide whether a generator run fails the build.

Two explicit policies drive the decision:

    exit_status_policy   "nonzero"  any status other than 0 is a failure
                         "negative" only a status below 0 is a failure
                                    (historical comparison; real exit
                                    statuses are non-negative, so this
                                    effectively never fails)

    launch_error_policy  "log"      launch failures and interrupted waits
                                    are logged and the build continues
                                    "fail"     they are raised

``ignore_errors`` suppresses GenerationFailure whatever the status.
"""

from __future__ import annotations

import logging

from fluxgen.core.errors import GenerationFailure, InvocationInterrupted, LaunchError
from fluxgen.core.models.configuration import ExitStatusPolicy, GeneratorConfig
from fluxgen.core.models.receipt import ProcessReceipt

logger = logging.getLogger(__name__)


def is_failure_status(exit_code: int, policy: ExitStatusPolicy = "nonzero") -> bool:
    """Whether ``exit_code`` counts as a failed generation under ``policy``."""
    if policy == "negative":
        return exit_code < 0
    return exit_code != 0


def apply_result_policy(receipt: ProcessReceipt, config: GeneratorConfig) -> bool:
    """Judge a receipt.

    Returns:
        True if the generation succeeded, False if it failed but the
        failure is suppressed by configuration.

    Raises:
        GenerationFailure: Failed exit status and ``ignore_errors`` unset.
        LaunchError: Launch failed and the launch-error policy is "fail".
        InvocationInterrupted: Wait interrupted and the policy is "fail".
    """
    if receipt.status == "launch_failed":
        logger.error("error while invoking Fluxtion generator: %s", receipt.error)
        if config.launch_error_policy == "fail":
            raise LaunchError(receipt.error or "generator could not be started")
        return False

    if receipt.status == "interrupted":
        logger.error("interrupted while waiting for Fluxtion generator")
        if config.launch_error_policy == "fail":
            raise InvocationInterrupted(receipt.error or "wait interrupted")
        return False

    exit_code = receipt.exit_code if receipt.exit_code is not None else 0
    if not is_failure_status(exit_code, config.exit_status_policy):
        return True

    if config.ignore_errors:
        logger.warning(
            "Fluxtion generator exited with %d; continuing because ignoreErrors is set",
            exit_code,
        )
        return False

    raise GenerationFailure(exit_code=exit_code)
