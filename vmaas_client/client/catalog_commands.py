# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""Read only command groups: regions, host profiles and prices."""

import click

import vmaas_client.client.utils as client_utils
from vmaas_client.models.director_site_models import PVDCOrderInfo
import vmaas_client.models.options as options_models


@click.group(name='region', short_help='Director site regions')
@click.pass_context
def region_group(ctx):
    """Display the regions where director sites can be deployed."""
    pass


@region_group.command('list', short_help='List regions and data centers')
@click.pass_context
def list_regions(ctx):
    client_utils.run_command(
        ctx,
        lambda client: client.list_director_site_regions(
            options_models.ListDirectorSiteRegionsOptions()))


@click.group(name='host-profile', short_help='Director site host profiles')
@click.pass_context
def host_profile_group(ctx):
    """Display the host profiles available for clusters."""
    pass


@host_profile_group.command('list', short_help='List host profiles')
@click.pass_context
def list_host_profiles(ctx):
    client_utils.run_command(
        ctx,
        lambda client: client.list_director_site_host_profiles(
            options_models.ListDirectorSiteHostProfilesOptions()))


@click.group(name='price', short_help='Director site pricing')
@click.pass_context
def price_group(ctx):
    """Display director site prices and quote orders."""
    pass


@price_group.command('list', short_help='List director site prices')
@click.pass_context
def list_prices(ctx):
    client_utils.run_command(
        ctx,
        lambda client: client.list_prices(options_models.ListPricesOptions()))


@price_group.command('quote', short_help='Quote a director site order')
@click.pass_context
@click.option(
    '-f',
    '--file',
    'spec_file',
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    metavar='SPEC_FILE',
    help='Director site order file, as used by director-site create')
def quote(ctx, spec_file):
    """Quote the price of a director site order."""
    def _quote(client):
        spec = client_utils.load_spec_file(spec_file)
        options = options_models.GetVcddPriceOptions(
            name=spec.get('name'),
            resource_group=spec.get('resource_group'),
            pvdcs=[PVDCOrderInfo.from_dict(pvdc, infer_missing=True)
                   for pvdc in spec.get('pvdcs') or []])
        return client.get_vcdd_price(options)
    client_utils.run_command(ctx, _quote)
