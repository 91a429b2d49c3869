# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

import click

import vmaas_client.client.utils as client_utils
import vmaas_client.models.options as options_models
from vmaas_client.models.vdc_models import NewVDCDirectorSite
from vmaas_client.models.vdc_models import NewVDCEdge
from vmaas_client.models.vdc_models import NewVDCResourceGroup


@click.group(name='vdc', short_help='Manage virtual data centers')
@click.pass_context
def vdc_group(ctx):
    """Manage the virtual data centers deployed on director sites."""
    pass


@vdc_group.command('list', short_help='List virtual data centers')
@click.pass_context
def list_vdcs(ctx):
    client_utils.run_command(
        ctx,
        lambda client: client.list_vdcs(options_models.ListVdcsOptions()))


@vdc_group.command('info', short_help='Display a virtual data center')
@click.pass_context
@click.argument('vdc_id', metavar='VDC_ID')
def vdc_info(ctx, vdc_id):
    client_utils.run_command(
        ctx,
        lambda client: client.get_vdc(
            options_models.GetVdcOptions(vdc_id=vdc_id)))


@vdc_group.command('create', short_help='Create a virtual data center')
@click.pass_context
@click.option(
    '-f',
    '--file',
    'spec_file',
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    metavar='SPEC_FILE',
    help='YAML or JSON file with name, director_site and optionally edge '
         'and resource_group')
def create_vdc(ctx, spec_file):
    """Create a virtual data center.

\b
Example
    vmaas vdc create -f vdc.yaml
        vdc.yaml:
        name: vdc-1
        director_site:
          id: 7c8f7b9e
          cluster:
            id: 1
        edge:
          type: shared
    """
    def _create(client):
        spec = client_utils.load_spec_file(spec_file)
        director_site = spec.get('director_site')
        edge = spec.get('edge')
        resource_group = spec.get('resource_group')
        options = options_models.CreateVdcOptions(
            name=spec.get('name'),
            director_site=NewVDCDirectorSite.from_dict(
                director_site, infer_missing=True)
            if director_site is not None else None,
            edge=NewVDCEdge.from_dict(edge, infer_missing=True)
            if edge is not None else None,
            resource_group=NewVDCResourceGroup.from_dict(
                resource_group, infer_missing=True)
            if resource_group is not None else None)
        return client.create_vdc(options)
    client_utils.run_command(ctx, _create)


@vdc_group.command('delete', short_help='Delete a virtual data center')
@click.pass_context
@click.argument('vdc_id', metavar='VDC_ID')
@click.confirmation_option(prompt='Are you sure you want to delete the '
                                  'virtual data center?')
def delete_vdc(ctx, vdc_id):
    client_utils.run_command(
        ctx,
        lambda client: client.delete_vdc(
            options_models.DeleteVdcOptions(vdc_id=vdc_id)))


@vdc_group.command('update', short_help='Update a virtual data center')
@click.pass_context
@click.argument('vdc_id', metavar='VDC_ID')
@click.option(
    '-f',
    '--file',
    'patch_file',
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    metavar='PATCH_FILE',
    help='YAML or JSON file with a JSON merge patch')
def update_vdc(ctx, vdc_id, patch_file):
    """Apply a JSON merge patch to a virtual data center."""
    def _update(client):
        patch = client_utils.load_spec_file(patch_file)
        if not isinstance(patch, dict):
            raise ValueError(f"'{patch_file}' should hold a mapping")
        options = options_models.UpdateVdcOptions(vdc_id=vdc_id,
                                                  vdc_patch=patch)
        return client.update_vdc(options)
    client_utils.run_command(ctx, _update)
