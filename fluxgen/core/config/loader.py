"""
Configuration loader — reads fluxgen.yml into a GeneratorConfig.

The file uses the host option names:

    fluxtionExe: tools/fluxtion
    packageName: com.example.generated
    className: PriceBiasMonitor
    biasConfig: com.example.BiasConfig
    logDebug: false
    ignoreErrors: false
    classpathFile: target/classpath.txt

Everything may also sit under a top-level ``fluxgen:`` key.  Values
passed on the command line override the file.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fluxgen.core.errors import ConfigurationError
from fluxgen.core.models.configuration import GeneratorConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "fluxgen.yml"

# Keys the loader understands that are not GeneratorConfig fields
HOST_KEYS = ("classpath", "classpathFile")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for fluxgen.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to fluxgen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """Read and parse a config file into a plain mapping.

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a
            YAML mapping.
    """
    if not path.is_file():
        raise ConfigurationError(f"Config file not found: {path}")

    logger.debug("Loading generator config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "fluxgen" key or be flat
    if "fluxgen" in data:
        section = data["fluxgen"]
        if not isinstance(section, dict):
            raise ConfigurationError(f"Expected a mapping under 'fluxgen' in {path}")
        data = section

    # Relative paths in the file are relative to the file, not the cwd
    data.setdefault("projectBaseDir", str(path.parent.resolve()))
    return data


def build_config(
    values: Mapping[str, Any],
    overrides: Mapping[str, Any] | None = None,
) -> GeneratorConfig:
    """Validate option values (plus non-None overrides) into a config.

    Raises:
        ConfigurationError: If a required option is missing or a value
            has the wrong type.
    """
    merged = {k: v for k, v in values.items() if k not in HOST_KEYS}
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value

    try:
        return GeneratorConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid generator configuration: {e}") from e


def load_config(
    path: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> GeneratorConfig:
    """Load and validate the generator configuration.

    Args:
        path: Explicit path to fluxgen.yml. If None, searches upward; when
            nothing is found only ``overrides`` are used.
        overrides: Option values (host names) that take precedence.

    Raises:
        ConfigurationError: If the file or the merged values are invalid.
    """
    if path is None:
        path = find_config_file()

    values: dict[str, Any] = read_config_file(path) if path is not None else {}
    config = build_config(values, overrides)
    logger.info("Loaded generator config for %s.%s", config.package_name, config.class_name)
    return config


def classpath_settings(path: Path | None) -> tuple[list[str], Path | None]:
    """Classpath entries and classpath file declared in a config file.

    Returns:
        (entries, classpath_file).  ``classpath_file`` is anchored at the
        config file's directory.
    """
    if path is None:
        return [], None

    data = read_config_file(path)
    entries = data.get("classpath") or []
    if isinstance(entries, str):
        entries = [entries]
    if not isinstance(entries, list):
        raise ConfigurationError(f"'classpath' must be a list in {path}")

    classpath_file = data.get("classpathFile")
    file_path = None
    if classpath_file:
        file_path = Path(classpath_file)
        if not file_path.is_absolute():
            file_path = path.parent.resolve() / file_path

    return [str(e) for e in entries], file_path
