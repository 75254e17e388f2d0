"""
Generator configuration — the single input record of an invocation.

Field aliases are the option names a host build presents
(``fluxtionExe``, ``packageName``, ...).  Snake-case names are accepted
too, so the model can be built from Python code or a YAML mapping.

The model is frozen: path resolution returns a new instance rather than
mutating this one.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Directory name the generator writes under target/generated-sources
GENERATOR_NAME = "fluxtionFx"

ExitStatusPolicy = Literal["nonzero", "negative"]
LaunchErrorPolicy = Literal["log", "fail"]


class GeneratorConfig(BaseModel):
    """Everything one generator invocation needs from the host build."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    project_base_dir: str = Field(default=".", alias="projectBaseDir")
    executable_path: str = Field(alias="fluxtionExe")
    bias_config: str | None = Field(default=None, alias="biasConfig")
    package_name: str = Field(alias="packageName")
    class_name: str = Field(alias="className")

    output_directory: str | None = Field(default=None, alias="outputDirectory")
    build_directory: str | None = Field(default=None, alias="buildDirectory")
    resources_output_directory: str | None = Field(
        default=None, alias="resourcesOutputDirectory"
    )

    log_debug: bool = Field(default=False, alias="logDebug")
    ignore_errors: bool = Field(default=False, alias="ignoreErrors")

    # "negative" keeps the historical `exit < 0` comparison
    exit_status_policy: ExitStatusPolicy = Field(default="nonzero", alias="exitStatusPolicy")
    launch_error_policy: LaunchErrorPolicy = Field(default="log", alias="launchErrorPolicy")

    # None means the running platform's os.pathsep
    classpath_separator: str | None = Field(default=None, alias="classpathSeparator")

    @property
    def directories_resolved(self) -> bool:
        """Whether all three output directories are set."""
        return bool(
            self.output_directory
            and self.build_directory
            and self.resources_output_directory
        )

    def to_options(self) -> dict[str, object]:
        """Dump using the host option names."""
        return self.model_dump(by_alias=True)
