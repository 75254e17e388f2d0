"""
fluxgen — CLI entrypoint.

Usage:
    python -m fluxgen.main --help
    python -m fluxgen.main generate -e target/classes -e lib/dep.jar
    python -m fluxgen.main command --classpath-file target/classpath.txt
    python -m fluxgen.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any

import click

from fluxgen import __version__
from fluxgen.core.errors import FluxgenError, GenerationFailure
from fluxgen.core.observability.logging_config import DEFAULT_LEVEL, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="fluxgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Only report errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to fluxgen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """fluxgen — run the Fluxtion generator as a build step."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("FLUXGEN_LOG_LEVEL", DEFAULT_LEVEL)

    setup_logging(
        level=level,
        log_file=os.environ.get("FLUXGEN_LOG_FILE"),
        log_file_level=os.environ.get("FLUXGEN_LOG_FILE_LEVEL"),
    )


# ── Shared generator options ────────────────────────────────────


_GENERATOR_OPTIONS = (
    click.option("--fluxtion-exe", "fluxtionExe", default=None, help="Path to the Fluxtion generator executable."),
    click.option("--package-name", "packageName", default=None, help="Package of the generated class."),
    click.option("--class-name", "className", default=None, help="Simple name of the generated class."),
    click.option("--bias-config", "biasConfig", default=None, help="Bias config passed through to the generator."),
    click.option("--base-dir", "projectBaseDir", default=None, help="Project base directory."),
    click.option("--output-directory", "outputDirectory", default=None, help="Generated sources directory."),
    click.option("--build-directory", "buildDirectory", default=None, help="Build output directory."),
    click.option(
        "--resources-output-directory",
        "resourcesOutputDirectory",
        default=None,
        help="Generated resources (meta-data) directory.",
    ),
    click.option("--log-debug/--no-log-debug", "logDebug", default=None, help="Run the generator with --debug."),
    click.option(
        "--ignore-errors/--no-ignore-errors",
        "ignoreErrors",
        default=None,
        help="Continue even if the generator reports an error.",
    ),
    click.option(
        "--exit-status-policy",
        "exitStatusPolicy",
        type=click.Choice(["nonzero", "negative"]),
        default=None,
        help="Which exit statuses count as a failure.",
    ),
    click.option(
        "--launch-error-policy",
        "launchErrorPolicy",
        type=click.Choice(["log", "fail"]),
        default=None,
        help="Whether launch failures and interrupts fail the build.",
    ),
    click.option("--classpath-separator", "classpathSeparator", default=None, help="Override os.pathsep."),
    click.option(
        "--classpath-entry",
        "-e",
        "classpath_entries",
        multiple=True,
        help="Runtime classpath entry (repeatable, order preserved).",
    ),
    click.option(
        "--classpath-file",
        type=click.Path(exists=False),
        default=None,
        help="File listing the runtime classpath (e.g. from mvn dependency:build-classpath).",
    ),
)


def generator_options(func):
    """Options shared by every command that builds a GeneratorConfig."""
    for option in reversed(_GENERATOR_OPTIONS):
        func = option(func)
    return func


_HOST_OPTION_NAMES = (
    "fluxtionExe",
    "packageName",
    "className",
    "biasConfig",
    "projectBaseDir",
    "outputDirectory",
    "buildDirectory",
    "resourcesOutputDirectory",
    "logDebug",
    "ignoreErrors",
    "exitStatusPolicy",
    "launchErrorPolicy",
    "classpathSeparator",
)


def _split_options(options: dict[str, Any]) -> tuple[dict[str, Any], tuple[str, ...], str | None]:
    """Separate config overrides from classpath options."""
    overrides = {name: options.get(name) for name in _HOST_OPTION_NAMES}
    return overrides, tuple(options.get("classpath_entries") or ()), options.get("classpath_file")


def _load_invocation(
    ctx: click.Context,
    overrides: dict[str, Any],
    entries: tuple[str, ...],
    classpath_file: str | None,
):
    """Load config and classpath entries from file + CLI options."""
    from fluxgen.core.config.loader import classpath_settings, find_config_file, load_config
    from fluxgen.core.services.classpath import read_classpath_file

    config_path: Path | None = ctx.obj.get("config_path") or find_config_file()
    config = load_config(config_path, overrides)

    file_entries, file_classpath = classpath_settings(config_path)
    classpath_entries = list(entries) if entries else file_entries

    listing = Path(classpath_file) if classpath_file else file_classpath
    if listing is not None:
        classpath_entries.extend(read_classpath_file(listing, config.classpath_separator))

    return config, classpath_entries


def _fail(message: str) -> None:
    click.secho(f"❌ {message}", fg="red", err=True)
    sys.exit(1)


@cli.command()
@generator_options
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output the result as JSON.")
@click.pass_context
def generate(ctx: click.Context, as_json: bool, **options: Any) -> None:
    """Run the Fluxtion generator."""
    from fluxgen.core.use_cases.generate import run_generate

    overrides, entries, classpath_file = _split_options(options)

    try:
        config, classpath_entries = _load_invocation(ctx, overrides, entries, classpath_file)
        result = run_generate(config, classpath_entries)
    except GenerationFailure as e:
        _fail(f"{e} (exit status {e.exit_code})")
        return
    except FluxgenError as e:
        _fail(str(e))
        return

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if result.succeeded:
        if not ctx.obj.get("quiet"):
            click.secho("✅ Fluxtion generation complete", fg="green")
    else:
        click.secho(f"⚠️  Fluxtion generation did not succeed ({result.state.value})", fg="yellow", err=True)


@cli.command()
@generator_options
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output the argument list as JSON.")
@click.pass_context
def command(ctx: click.Context, as_json: bool, **options: Any) -> None:
    """Print the generator command line without running it."""
    from fluxgen.core.services.command import format_command
    from fluxgen.core.use_cases.generate import plan_generate

    overrides, entries, classpath_file = _split_options(options)

    try:
        config, classpath_entries = _load_invocation(ctx, overrides, entries, classpath_file)
        plan = plan_generate(config, classpath_entries)
    except FluxgenError as e:
        _fail(str(e))
        return

    if as_json:
        click.echo(json.dumps(plan.command, indent=2))
        return

    click.echo(format_command(plan.command))


@cli.group()
def config() -> None:
    """Generator configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate fluxgen.yml and show the resolved directories."""
    from fluxgen.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        cfg = result.config
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Generator:  {cfg.executable_path}")
        click.echo(f"   Class:      {cfg.package_name}.{cfg.class_name}")
        click.echo(f"   Sources:    {cfg.output_directory}")
        click.echo(f"   Resources:  {cfg.resources_output_directory}")
        click.echo(f"   Build:      {cfg.build_directory}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


if __name__ == "__main__":
    cli()
