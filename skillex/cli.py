"""CLI entry point for skillex"""

import logging
from pathlib import Path

import click
from textual.logging import TextualHandler

from skillex import __version__
from skillex.config import default_local_dirs, default_plugins_file


def _configure_logging(level: int = logging.WARNING) -> None:
    """Route log records through Textual so they never draw over the TUI"""
    logging.basicConfig(level=level, handlers=[TextualHandler()])


@click.command()
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx):
    """skillex - browse the Claude Code skills installed on this machine"""
    try:
        home = Path.home()
    except RuntimeError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        cwd = Path.cwd()
    except OSError:
        cwd = None

    _configure_logging()

    from skillex.tui import SkillexApp

    app = SkillexApp(
        plugins_file=default_plugins_file(home),
        local_dirs=default_local_dirs(home, cwd),
    )
    app.run()

    state = app.browser_state
    if state.fatal and state.load_error:
        click.echo(f"Error: {state.load_error}", err=True)
    ctx.exit(app.return_code or 0)


def main():
    cli()


if __name__ == "__main__":
    main()
