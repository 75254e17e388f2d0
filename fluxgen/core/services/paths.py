"""
Path resolution — default output directories from the project base dir.

Unset (or empty) directories get the conventional Maven-style layout:

    outputDirectory           {base}/target/generated-sources/fluxtionFx
    resourcesOutputDirectory  {base}/target/generated-sources/fluxtionFx-meta
    buildDirectory            {base}/target/classes

Nothing here touches the filesystem beyond canonicalizing the base dir;
creating the directories is the generator's job.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fluxgen.core.errors import ConfigurationError
from fluxgen.core.models.configuration import GENERATOR_NAME, GeneratorConfig

logger = logging.getLogger(__name__)


def canonical_base_dir(project_base_dir: str) -> Path:
    """Resolve the project base dir to a canonical, existing directory.

    Raises:
        ConfigurationError: If the path does not exist, cannot be
            accessed, or is not a directory.
    """
    try:
        base = Path(project_base_dir).expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise ConfigurationError(
            f"Cannot resolve project base directory {project_base_dir!r}: {e}"
        ) from e

    if not base.is_dir():
        raise ConfigurationError(f"Project base directory is not a directory: {base}")
    return base


def default_directories(base: Path) -> dict[str, str]:
    """The conventional directories for a canonical base dir."""
    generated = base / "target" / "generated-sources"
    return {
        "output_directory": str(generated / GENERATOR_NAME),
        "build_directory": str(base / "target" / "classes"),
        "resources_output_directory": str(generated / f"{GENERATOR_NAME}-meta"),
    }


def _anchor(value: str, base: Path) -> str:
    """Keep absolute paths as given; anchor relative ones at ``base``.

    A relative directory set by the host is rewritten to an absolute one
    so every resolved directory is absolute, matching how the generator
    would read it from the project base dir.
    """
    if Path(value).is_absolute():
        return value
    path = Path(value).expanduser()
    if path.is_absolute():
        return str(path)
    return str(base / path)


def resolve_paths(config: GeneratorConfig) -> GeneratorConfig:
    """Return a copy of ``config`` with every directory resolved.

    Also checks that the required fields survived configuration: an
    empty executable path, package name or class name is a
    configuration error raised here, before anything is launched.

    Raises:
        ConfigurationError: Unresolvable base dir or empty required field.
    """
    for field_name, option in (
        ("executable_path", "fluxtionExe"),
        ("package_name", "packageName"),
        ("class_name", "className"),
    ):
        if not getattr(config, field_name).strip():
            raise ConfigurationError(f"Required option '{option}' is empty")

    base = canonical_base_dir(config.project_base_dir)
    defaults = default_directories(base)

    updates: dict[str, str] = {"project_base_dir": str(base)}
    for field_name, default in defaults.items():
        current = getattr(config, field_name)
        if current:
            updates[field_name] = _anchor(current, base)
        else:
            logger.debug("Defaulting %s to %s", field_name, default)
            updates[field_name] = default

    updates["executable_path"] = _anchor(config.executable_path, base)

    return config.model_copy(update=updates)
