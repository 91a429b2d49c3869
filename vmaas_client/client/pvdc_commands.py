# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

import click

import vmaas_client.client.utils as client_utils
from vmaas_client.models.director_site_models import ClusterOrderInfo
import vmaas_client.models.options as options_models


@click.group(name='pvdc', short_help='Manage provider virtual data centers')
@click.pass_context
def pvdc_group(ctx):
    """Manage the provider virtual data centers of a director site."""
    pass


@pvdc_group.command('list', short_help='List the PVDCs of a director site')
@click.pass_context
@click.argument('site_id', metavar='SITE_ID')
def list_pvdcs(ctx, site_id):
    client_utils.run_command(
        ctx,
        lambda client: client.list_director_sites_pvdcs(
            options_models.ListDirectorSitesPvdcsOptions(site_id=site_id)))


@pvdc_group.command('info', short_help='Display a PVDC')
@click.pass_context
@click.argument('site_id', metavar='SITE_ID')
@click.argument('pvdc_id', metavar='PVDC_ID')
def pvdc_info(ctx, site_id, pvdc_id):
    client_utils.run_command(
        ctx,
        lambda client: client.get_director_sites_pvdcs(
            options_models.GetDirectorSitesPvdcsOptions(site_id=site_id,
                                                        pvdc_id=pvdc_id)))


@pvdc_group.command('create', short_help='Add a PVDC to a director site')
@click.pass_context
@click.argument('site_id', metavar='SITE_ID')
@click.option(
    '-f',
    '--file',
    'spec_file',
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    metavar='SPEC_FILE',
    help='YAML or JSON file with name, data_center and clusters')
def create_pvdc(ctx, site_id, spec_file):
    """Add a provider virtual data center to a director site.

\b
Example
    vmaas pvdc create 7c8f7b9e -f pvdc.yaml
    """
    def _create(client):
        spec = client_utils.load_spec_file(spec_file)
        options = options_models.CreateDirectorSitesPvdcsOptions(
            site_id=site_id,
            name=spec.get('name'),
            data_center=spec.get('data_center'),
            clusters=[ClusterOrderInfo.from_dict(cluster, infer_missing=True)
                      for cluster in spec.get('clusters') or []])
        return client.create_director_sites_pvdcs(options)
    client_utils.run_command(ctx, _create)
