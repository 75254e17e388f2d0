"""
Command composition — the generator's command line.

    <exe> [--debug] -outDirectory <dir> -buildDirectory <dir>
          -outResDirectory <dir> -outPackage <pkg> -outClass <class>
          -biasConfig <config> -cp <classpath>

The generator reads flagged arguments in this order and takes everything
after ``-cp`` as the classpath, so ``-cp`` always closes the command.
"""

from __future__ import annotations

from fluxgen.core.models.configuration import GeneratorConfig

DEBUG_FLAG = "--debug"
CLASSPATH_FLAG = "-cp"


def compose_command(config: GeneratorConfig, classpath: str) -> list[str]:
    """Build the argument list for a resolved configuration."""
    args = [config.executable_path]
    if config.log_debug:
        args.append(DEBUG_FLAG)

    pairs = (
        ("-outDirectory", config.output_directory),
        ("-buildDirectory", config.build_directory),
        ("-outResDirectory", config.resources_output_directory),
        ("-outPackage", config.package_name),
        ("-outClass", config.class_name),
        ("-biasConfig", config.bias_config),
    )
    for flag, value in pairs:
        args.extend((flag, value or ""))

    # must be at end
    args.extend((CLASSPATH_FLAG, classpath))
    return args


def format_command(args: list[str]) -> str:
    """The command as one space-joined line, as it is logged."""
    return " ".join(args)
