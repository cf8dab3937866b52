"""CLI entry point for Fixture Warden."""

import sys
from pathlib import Path, PurePath

import click

from . import __version__
from .config import load_config
from .engines import create_engine
from .errors import ConfigError, EngineError
from .models import Session
from .report import ConsoleReporter, make_console
from .resolver import Resolver
from .runner import FixtureRunner
from .store import DiskStore
from .walker import FixtureWalker


@click.command()
@click.version_option(version=__version__)
@click.option("--testpath", required=True, type=click.Path(path_type=Path), help="Path to test files")
@click.option("--no-color", is_flag=True, help="Don't use colors")
@click.option("--editor", help="Editor for opening fixtures (default: $EDITOR)")
@click.option(
    "--engine",
    "engine_command",
    help="External engine command, '{path}' is replaced by the fixture path (default: built-in Python engine)",
)
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, path_type=Path), help="Config file path")
@click.pass_context
def main(
    ctx: click.Context,
    testpath: Path,
    no_color: bool,
    editor: str | None,
    engine_command: str | None,
    config_path: Path | None,
) -> None:
    """Interactively validate diagnostic test fixtures.

    Every file under TESTPATH is a fixture: source text, a '// ----' line,
    and the diagnostics the engine is expected to report. Failing fixtures
    can be edited, updated with the obtained diagnostics, skipped, or the
    run can be stopped.
    """
    try:
        config = load_config(
            config_path,
            color=False if no_color else None,
            editor=editor,
            engine={"command": engine_command} if engine_command else None,
        )
    except ConfigError as e:
        click.echo(str(e), err=True)
        ctx.exit(1)

    store = DiskStore()
    if not store.exists(testpath):
        click.echo("test path does not exist", err=True)
        ctx.exit(1)

    session = Session()
    reporter = ConsoleReporter(make_console(config.color), make_console(config.color, stderr=True))
    resolver = Resolver(store, reporter, config.fixture, editor=config.editor)
    runner = FixtureRunner(create_engine(config), store, reporter, resolver, session, config.fixture)

    if store.is_dir(testpath):
        walker = FixtureWalker(testpath, store, runner, session, config.discovery)
        relative = PurePath()
    else:
        walker = FixtureWalker(testpath.parent, store, runner, session, config.discovery)
        relative = PurePath(testpath.name)

    try:
        walker.walk(relative)
    except EngineError as e:
        reporter.console.print()
        click.echo(f"Engine error: {e}", err=True)
        ctx.exit(1)

    reporter.summary(session)
    ctx.exit(session.exit_code)


def run() -> None:
    """Console script entry point; usage errors exit with status 1."""
    try:
        code = main.main(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(1)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
    sys.exit(code or 0)


if __name__ == "__main__":
    run()
