# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

import click

import vmaas_client.client.utils as client_utils
from vmaas_client.models.director_site_models import PVDCOrderInfo
import vmaas_client.models.options as options_models


@click.group(name='director-site', short_help='Manage director sites')
@click.pass_context
def director_site_group(ctx):
    """Manage director site instances.

\b
A director site is a single tenant VMware Cloud Director instance with
one or more provider virtual data centers.
    """
    pass


@director_site_group.command('list', short_help='List director sites')
@click.pass_context
def list_director_sites(ctx):
    """List the director site instances of the account.

\b
Example
    vmaas director-site list
    """
    client_utils.run_command(
        ctx,
        lambda client: client.list_director_sites(
            options_models.ListDirectorSitesOptions()))


@director_site_group.command('info', short_help='Display a director site')
@click.pass_context
@click.argument('site_id', metavar='SITE_ID')
def director_site_info(ctx, site_id):
    """Display the details of a director site instance."""
    client_utils.run_command(
        ctx,
        lambda client: client.get_director_site(
            options_models.GetDirectorSiteOptions(site_id=site_id)))


@director_site_group.command('create', short_help='Order a director site')
@click.pass_context
@click.option(
    '-f',
    '--file',
    'spec_file',
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    metavar='SPEC_FILE',
    help='YAML or JSON file with name, resource_group and pvdcs')
def create_director_site(ctx, spec_file):
    """Order a director site instance.

\b
Example
    vmaas director-site create -f site.yaml
        site.yaml holds the site name, the resource group id and the
        provider virtual data centers with their clusters.
    """
    def _create(client):
        spec = client_utils.load_spec_file(spec_file)
        options = options_models.CreateDirectorSitesOptions(
            name=spec.get('name'),
            resource_group=spec.get('resource_group'),
            pvdcs=[PVDCOrderInfo.from_dict(pvdc, infer_missing=True)
                   for pvdc in spec.get('pvdcs') or []])
        return client.create_director_sites(options)
    client_utils.run_command(ctx, _create)


@director_site_group.command('delete', short_help='Delete a director site')
@click.pass_context
@click.argument('site_id', metavar='SITE_ID')
@click.confirmation_option(prompt='Are you sure you want to delete the '
                                  'director site?')
def delete_director_site(ctx, site_id):
    """Delete a director site instance and all of its resources."""
    client_utils.run_command(
        ctx,
        lambda client: client.delete_director_site(
            options_models.DeleteDirectorSiteOptions(site_id=site_id)))


@director_site_group.command('reset-password',
                             short_help='Reset the organization admin '
                                        'password')
@click.pass_context
@click.argument('site_id', metavar='SITE_ID')
def reset_password(ctx, site_id):
    """Replace the admin password of the director site organization."""
    client_utils.run_command(
        ctx,
        lambda client: client.replace_org_admin_password(
            options_models.ReplaceOrgAdminPasswordOptions(site_id=site_id)))
