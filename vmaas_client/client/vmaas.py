# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

import click

from vmaas_client.client.catalog_commands import host_profile_group
from vmaas_client.client.catalog_commands import price_group
from vmaas_client.client.catalog_commands import region_group
from vmaas_client.client.cluster_commands import cluster_group
from vmaas_client.client.director_site_commands import director_site_group
from vmaas_client.client.pvdc_commands import pvdc_group
from vmaas_client.client.vdc_commands import vdc_group
from vmaas_client.common.constants.shared_constants import OutputFormat
from vmaas_client.logging.logger import configure_all_file_loggers


@click.group(name='vmaas', short_help='Manage VMware as a Service resources')
@click.option(
    '-o',
    '--output',
    'output',
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.YAML.value,
    help='Output format')
@click.pass_context
def vmaas(ctx, output):
    """Manage VMware as a Service director sites and virtual data centers.

\b
Service url and credentials are read from ~/.vmaas/credentials.yaml (or
the file named by VMAAS_CREDENTIALS_FILE) or from environment variables
such as V_MWARE_AS_A_SERVICE_API_APIKEY.
    """
    configure_all_file_loggers()
    ctx.ensure_object(dict)
    ctx.obj['output'] = output


# director site commands
vmaas.add_command(director_site_group)

# provider virtual data center commands
vmaas.add_command(pvdc_group)

# cluster commands
vmaas.add_command(cluster_group)

# virtual data center commands
vmaas.add_command(vdc_group)

# catalog commands
vmaas.add_command(region_group)
vmaas.add_command(host_profile_group)
vmaas.add_command(price_group)


def main():
    vmaas(obj={})
