# steam_deploy/cli/main.py
"""Main CLI entry point for steam-deploy"""

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT
from ..models import ActionConfig

# Import all commands
from .commands import (
    publish,
    manifest,
)

console = Console(stderr=True)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True,
    )

    # Adjust third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiofiles").setLevel(logging.WARNING)


class Context:
    """CLI context object

    Holds the global flags and builds the ActionConfig on demand, so each
    command can layer its own path overrides on top of the environment.
    """

    def __init__(self):
        self.verbose: bool = False
        self.debug: bool = False

    def action_config(self,
                      steam_dir: Optional[str] = None,
                      runner_temp: Optional[str] = None,
                      workspace: Optional[str] = None,
                      steamcmd: Optional[str] = None) -> ActionConfig:
        """Build config from the environment plus explicit overrides"""
        config = ActionConfig.from_env()

        if steam_dir:
            config.steam_dir = steam_dir
        if runner_temp:
            config.runner_temp = runner_temp
        if workspace:
            config.workspace = workspace
        if steamcmd:
            config.steamcmd = steamcmd
        config.debug = config.debug or self.debug

        # Re-run path coercion after overrides
        config.__post_init__()
        return config


@click.group(name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True,
              help='Enable debug output and always print steamcmd logs')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all diagnostics except errors')
@click.version_option(version=__version__, prog_name=APP_NAME)
@click.pass_context
def cli(ctx, verbose, debug, quiet):
    """Steam Deploy - Publish builds and workshop items with steamcmd

    Inputs are read from command line options or from the INPUT_<NAME>
    environment variables set by the CI platform.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context()
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(publish.publish)
cli.add_command(manifest.manifest)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {escape(str(e))}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
