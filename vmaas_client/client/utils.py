# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""Helpers shared by the vmaas command groups."""

import json

import click
import yaml

from vmaas_client.client.vmaas_api import VMwareAsAServiceApiV1
from vmaas_client.common.constants.shared_constants import OutputFormat
from vmaas_client.common.utils.model_utils import model_to_dict
from vmaas_client.logging.logger import CLIENT_LOGGER


def get_client(ctx) -> VMwareAsAServiceApiV1:
    """Return the client stored on the context, building it on first use.

    The client is built from the credentials file or the environment.
    """
    ctx.ensure_object(dict)
    if ctx.obj.get('client') is None:
        ctx.obj['client'] = VMwareAsAServiceApiV1.new_instance()
    return ctx.obj['client']


def load_spec_file(file_name):
    """Read a yaml or json specification file into a dict."""
    with open(file_name) as spec_file:
        spec = yaml.safe_load(spec_file)
    if spec is None:
        spec = {}
    if not isinstance(spec, (dict, list)):
        raise ValueError(f"'{file_name}' should hold a mapping or a list")
    return spec


def format_output(value, output=OutputFormat.YAML.value):
    value = model_to_dict(value)
    if output == OutputFormat.JSON.value:
        return json.dumps(value, indent=2)
    return yaml.safe_dump(value, default_flow_style=False, sort_keys=False)


def stdout(detailed_response, ctx, message=None):
    """Print the result of a call in the selected output format."""
    result = detailed_response.get_result()
    if result is None:
        if message is None:
            message = f"Request accepted, status code: " \
                      f"{detailed_response.get_status_code()}"
        click.echo(message)
        return
    output = (ctx.obj or {}).get('output', OutputFormat.YAML.value)
    click.echo(format_output(result, output))


def stderr(error, ctx):
    """Print an error and exit with a non zero status."""
    click.secho(str(error), err=True, fg='red')
    ctx.exit(1)


def run_command(ctx, call):
    """Run call() and print its result, or the error it raised."""
    CLIENT_LOGGER.debug(f'Executing command: {ctx.command_path}')
    try:
        detailed_response = call(get_client(ctx))
    except Exception as e:
        CLIENT_LOGGER.error(str(e))
        stderr(e, ctx)
        return
    CLIENT_LOGGER.debug(detailed_response)
    stdout(detailed_response, ctx)
