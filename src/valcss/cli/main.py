"""valcss CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable

import click

from valcss import __version__
from valcss.compiler import CompileContext, Compiler
from valcss.config import ValcssConfig, find_config, load_config, write_default_config
from valcss.errors import ValcssError
from valcss.extraction import BuildResult, generate_css
from valcss.files import read_documents, resolve_files
from valcss.injector import inject_css, write_css
from valcss.model.diagnostic import Diagnostic
from valcss.watcher import FileWatcher

logger = logging.getLogger(__name__)

_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file (default: valcss.config.py or valcss.config.json)",
)


def _echo_diagnostics(diagnostics: Iterable[Diagnostic]) -> None:
    for diag in diagnostics:
        click.echo(str(diag), err=True)


def _build(config: ValcssConfig, output: str | None, dry_run: bool) -> BuildResult | None:
    """Run one full build for *config*; returns None when no files matched."""
    context = CompileContext.from_config(config)
    _echo_diagnostics(context.diagnostics)

    files = resolve_files(config.files)
    if not files:
        click.echo("No matching files found.", err=True)
        return None

    click.echo(f"Generating CSS for {len(files)} file(s)...")
    result = generate_css(read_documents(files), context)
    _echo_diagnostics(result.diagnostics)

    if dry_run:
        click.echo(result.css)
        return result

    output_path = output or config.output
    if config.inject is not None and config.inject.targets:
        inject_css(result.css, output_path, config.inject.mode, config.inject.targets)
    else:
        write_css(output_path, result.css)
    click.echo(f"Compiled {len(result.classes)} class(es) into {output_path}")
    return result


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="valcss")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """valcss - compile utility class names in HTML into CSS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        ctx.invoke(build)


@cli.command()
@_config_option
@click.option("--output", "-o", default=None, help="Write final CSS to this file")
@click.option("--dry-run", is_flag=True, help="Print CSS instead of writing files")
@click.option("--watch", "-w", is_flag=True, help="Rebuild when input files change")
@click.option("--interval", default=0.5, type=float, help="Watch polling interval (seconds)")
def build(
    config_path: str | None = None,
    output: str | None = None,
    dry_run: bool = False,
    watch: bool = False,
    interval: float = 0.5,
) -> None:
    """Extract classes from the configured files and generate CSS."""
    try:
        config = load_config(config_path)
        _build(config, output, dry_run)
    except ValcssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if not watch:
        return

    watched = resolve_files(config.files)
    if config.path:
        watched.append(config.path)

    def rebuild(changed: list[str]) -> None:
        # Reload so edited plugins and breakpoints apply to a fresh context.
        try:
            _build(load_config(config_path), output, dry_run)
        except ValcssError as exc:
            click.echo(f"Error: {exc}", err=True)

    click.echo("Watching files for changes...")
    try:
        FileWatcher(watched).run(rebuild, interval=interval)
    except KeyboardInterrupt:
        click.echo("Stopped watching.")


@cli.command()
def init() -> None:
    """Create a default valcss.config.py in the current directory."""
    try:
        path = write_default_config()
    except ValcssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"{path.name} created!")


@cli.command("compile")
@click.argument("tokens", nargs=-1, required=True)
@_config_option
def compile_tokens(tokens: tuple[str, ...], config_path: str | None) -> None:
    """Print the CSS for each class TOKEN.

    Uses breakpoints and plugins from the config file when one is found.
    """
    try:
        if config_path is not None or find_config() is not None:
            context = CompileContext.from_config(load_config(config_path))
        else:
            context = CompileContext.create()
    except ValcssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    _echo_diagnostics(context.diagnostics)
    compiler = Compiler(context)
    failed = 0
    for token in tokens:
        result = compiler.compile(token)
        _echo_diagnostics(result.diagnostics)
        if result.css is None:
            failed += 1
            continue
        click.echo(result.css)
    if failed == len(tokens):
        sys.exit(1)
