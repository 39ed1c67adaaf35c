"""Decorators binding action inputs to click options"""

from typing import Any, Callable, Dict, Iterable

import click

from ...constants import (
    ENV_RUNNER_TEMP,
    ENV_STEAM_DIR,
    ENV_STEAMCMD,
    ENV_WORKSPACE,
    INPUT_NAMES,
)
from ...services.config_service import input_env_name

INPUT_HELP = {
    "username": "Steam account username",
    "password": "Steam account password (not needed with --config)",
    "shared_secret": "Shared secret for Steam Guard codes (not needed with --config)",
    "config": "Base64 encoded config.vdf for password-less login",
    "app_build": "Path to an existing app build manifest",
    "workshop_item": "Path to an existing workshop item manifest",
    "app_id": "Steam app id",
    "content_root": "Content root directory (defaults to the workspace)",
    "description": "Build description or workshop change note",
    "workshop_item_id": "Published workshop item id",
    "set_live": "Branch to set the build live on",
    "depot_file_exclusions": "File exclusion patterns, one per line",
    "install_scripts": "Install scripts, one per line",
    "depots": "Depot build scripts, one per line",
}


def action_inputs(names: Iterable[str] = tuple(INPUT_NAMES)) -> Callable:
    """
    Add one option per action input, each bound to its INPUT_<NAME> variable

    Args:
        names: Inputs to expose

    Example:
        @click.command()
        @action_inputs(["app_id", "content_root"])
        def my_command(app_id, content_root):
            ...
    """
    names = list(names)

    def decorator(func: Callable) -> Callable:
        # click applies decorators bottom-up, reverse to keep help in input order
        for name in reversed(names):
            func = click.option(
                '--' + name.replace('_', '-'),
                name,
                envvar=input_env_name(name),
                default=None,
                show_envvar=True,
                help=INPUT_HELP.get(name),
            )(func)
        return func

    return decorator


def environment_options(func: Callable) -> Callable:
    """Add options overriding environment-derived paths"""
    options = [
        click.option('--steam-dir', envvar=ENV_STEAM_DIR, default=None,
                     type=click.Path(file_okay=False),
                     help='steamcmd state directory (config and logs)'),
        click.option('--runner-temp', envvar=ENV_RUNNER_TEMP, default=None,
                     type=click.Path(file_okay=False),
                     help='Temp directory for generated manifests'),
        click.option('--workspace', envvar=ENV_WORKSPACE, default=None,
                     type=click.Path(file_okay=False),
                     help='Default content root'),
        click.option('--steamcmd', envvar=ENV_STEAMCMD, default=None,
                     help='steamcmd executable'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def collect_inputs(kwargs: Dict[str, Any]) -> Dict[str, Any]:
    """Pick action input values out of command keyword arguments"""
    return {name: kwargs[name] for name in INPUT_NAMES if name in kwargs}
