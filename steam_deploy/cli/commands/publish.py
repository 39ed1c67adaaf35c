"""Publish command implementation"""

import sys

import click
from rich.markup import escape
from rich.panel import Panel

from ..decorators import action_inputs, collect_inputs, environment_options
from ..utils.output import console, format_publish_result
from ...api import Publisher
from ...api.exceptions import ConfigError
from ...models import PublishRequest
from ...services import ConfigService
from ...utils.output import WorkflowReporter


@click.command()
@action_inputs()
@environment_options
@click.option('--inputs-file', type=click.Path(exists=True, dir_okay=False), default=None,
              help='YAML file with input values; options and INPUT_* variables win')
@click.pass_context
def publish(ctx, inputs_file, steam_dir, runner_temp, workspace, steamcmd, **options):
    """Publish an app build or a workshop item

    The publishing mode is the first that applies: an existing app build
    manifest (--app-build), an existing workshop item manifest
    (--workshop-item), a generated workshop item manifest
    (--workshop-item-id), or a generated app build manifest.

    Examples:
        # Build from parameters, logging in with a Steam Guard code
        steam-deploy publish --username bot --password ... --shared-secret ... \\
            --app-id 480 --content-root ./build

        # Upload a workshop item using a stored session
        steam-deploy publish --username bot --config "$STEAM_CONFIG_VDF" \\
            --app-id 480 --workshop-item-id 123456 --content-root ./mod

        # Inside a CI step, every input comes from INPUT_<NAME>
        steam-deploy publish
    """
    try:
        inputs = ConfigService(inputs_file).resolve(collect_inputs(options))
    except ConfigError as e:
        console.print(Panel(
            f"[red]{escape(str(e))}[/red]",
            title="[bold red]Configuration Error[/bold red]",
            border_style="red"
        ))
        sys.exit(1)

    config = ctx.obj.action_config(
        steam_dir=steam_dir,
        runner_temp=runner_temp,
        workspace=workspace,
        steamcmd=steamcmd,
    )
    request = PublishRequest.from_inputs(inputs)

    publisher = Publisher(config, WorkflowReporter())
    result = publisher.publish(request)

    format_publish_result(result)
    if not result.success:
        sys.exit(1)
