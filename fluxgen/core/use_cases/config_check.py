"""
Config check use case — validate fluxgen.yml and report issues.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fluxgen.core.config.loader import find_config_file, load_config
from fluxgen.core.errors import ConfigurationError
from fluxgen.core.models.configuration import GeneratorConfig
from fluxgen.core.services.paths import resolve_paths


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: GeneratorConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "config": self.config.to_options() if self.config else None,
        }


def check_config(
    config_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> ConfigCheckResult:
    """Validate generator configuration and report issues.

    Args:
        config_path: Optional explicit path to fluxgen.yml.
        overrides: Option values that take precedence over the file.

    Returns:
        ConfigCheckResult with the resolved config and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
    result.config_path = config_path

    if config_path is None and not overrides:
        result.errors.append("No fluxgen.yml found.")
        return result

    try:
        config = load_config(config_path, overrides)
    except ConfigurationError as e:
        result.errors.append(str(e))
        return result

    try:
        resolved = resolve_paths(config)
    except ConfigurationError as e:
        result.config = config
        result.errors.append(str(e))
        return result

    result.config = resolved

    # Semantic checks
    exe = Path(resolved.executable_path)
    if not exe.is_file():
        result.warnings.append(f"Generator executable not found: {exe}")
    elif not os.access(exe, os.X_OK):
        result.warnings.append(f"Generator executable is not executable: {exe}")

    if not resolved.bias_config:
        result.warnings.append("No biasConfig set; the generator receives an empty value.")

    if resolved.ignore_errors:
        result.warnings.append("ignoreErrors is set; generator failures will not stop the build.")

    if resolved.exit_status_policy == "negative":
        result.warnings.append(
            "exitStatusPolicy 'negative' only fails on negative exit statuses, "
            "which ordinary processes never return."
        )

    result.valid = len(result.errors) == 0
    return result
