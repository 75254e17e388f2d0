"""
Shared test fixtures and configuration.
"""

import stat
from collections.abc import Callable
from pathlib import Path

import pytest

from fluxgen.core.models.configuration import GeneratorConfig


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """An existing project base directory."""
    root = tmp_path / "proj"
    root.mkdir()
    return root


@pytest.fixture
def make_generator(tmp_path: Path) -> Callable[..., tuple[Path, Path]]:
    """Factory for fake generator scripts.

    The script writes each argument on its own line to an args file,
    runs ``body`` and exits with ``exit_code``.  Returns
    (script_path, args_file).
    """

    def _make(exit_code: int = 0, body: str = "", name: str = "fluxtion") -> tuple[Path, Path]:
        args_file = tmp_path / f"{name}.args"
        script = tmp_path / name
        script.write_text(
            "#!/bin/sh\n"
            f"printf '%s\\n' \"$@\" > '{args_file}'\n"
            f"{body}\n"
            f"exit {exit_code}\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script, args_file

    return _make


@pytest.fixture
def make_config(base_dir: Path) -> Callable[..., GeneratorConfig]:
    """Factory for configs rooted at ``base_dir`` with required fields set."""

    def _make(**options) -> GeneratorConfig:
        values = {
            "projectBaseDir": str(base_dir),
            "fluxtionExe": "/opt/fluxtion/bin/fluxtion",
            "packageName": "com.example.generated",
            "className": "PriceBiasMonitor",
        }
        values.update(options)
        return GeneratorConfig.model_validate(values)

    return _make
