"""Manifest generation commands"""

import sys

import click

from ..decorators import action_inputs, collect_inputs, environment_options
from ..utils.output import print_error, print_manifest_written
from ...api import Publisher
from ...api.exceptions import MissingInputError, SteamDeployError
from ...models import PublishRequest
from ...utils.output import WorkflowReporter

BUILD_INPUTS = [
    "app_id",
    "content_root",
    "description",
    "set_live",
    "depot_file_exclusions",
    "install_scripts",
    "depots",
]
WORKSHOP_INPUTS = ["app_id", "workshop_item_id", "content_root", "description"]


@click.group()
def manifest():
    """Generate steamcmd manifests without publishing"""
    pass


def _write(ctx, generate, required, paths, options, show):
    request = PublishRequest.from_inputs(collect_inputs(options))
    config = ctx.obj.action_config(**paths)
    publisher = Publisher(config, WorkflowReporter())

    try:
        for name in required:
            if not getattr(request, name):
                raise MissingInputError(name)
        path = generate(publisher, request)
    except SteamDeployError as e:
        print_error("Failed to generate manifest", e)
        sys.exit(1)

    print_manifest_written(path, path.read_text(encoding='utf-8') if show else None)


@manifest.command()
@action_inputs(BUILD_INPUTS)
@environment_options
@click.option('--show', is_flag=True, help='Print the generated manifest')
@click.pass_context
def build(ctx, steam_dir, runner_temp, workspace, steamcmd, show, **options):
    """Write app_build.vdf to the scratch directory"""
    paths = dict(steam_dir=steam_dir, runner_temp=runner_temp, workspace=workspace, steamcmd=steamcmd)
    _write(ctx, Publisher.generate_build_manifest, ["app_id"], paths, options, show)


@manifest.command()
@action_inputs(WORKSHOP_INPUTS)
@environment_options
@click.option('--show', is_flag=True, help='Print the generated manifest')
@click.pass_context
def workshop(ctx, steam_dir, runner_temp, workspace, steamcmd, show, **options):
    """Write workshop_item.vdf to the scratch directory"""
    paths = dict(steam_dir=steam_dir, runner_temp=runner_temp, workspace=workspace, steamcmd=steamcmd)
    _write(ctx, Publisher.generate_workshop_manifest, ["app_id", "workshop_item_id"], paths, options, show)
