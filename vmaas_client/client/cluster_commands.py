# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

import click

import vmaas_client.client.utils as client_utils
from vmaas_client.models.director_site_models import FileShares
from vmaas_client.models.json_patch_models import JSONPatchOperation
import vmaas_client.models.options as options_models


@click.group(name='cluster', short_help='Manage director site clusters')
@click.pass_context
def cluster_group(ctx):
    """Manage the clusters of a provider virtual data center."""
    pass


@cluster_group.command('list', short_help='List the clusters of a PVDC')
@click.pass_context
@click.argument('site_id', metavar='SITE_ID')
@click.argument('pvdc_id', metavar='PVDC_ID')
def list_clusters(ctx, site_id, pvdc_id):
    client_utils.run_command(
        ctx,
        lambda client: client.list_director_sites_pvdcs_clusters(
            options_models.ListDirectorSitesPvdcsClustersOptions(
                site_id=site_id, pvdc_id=pvdc_id)))


@cluster_group.command('info', short_help='Display a cluster')
@click.pass_context
@click.argument('site_id', metavar='SITE_ID')
@click.argument('pvdc_id', metavar='PVDC_ID')
@click.argument('cluster_id', metavar='CLUSTER_ID')
def cluster_info(ctx, site_id, pvdc_id, cluster_id):
    client_utils.run_command(
        ctx,
        lambda client: client.get_director_instances_pvdcs_cluster(
            options_models.GetDirectorInstancesPvdcsClusterOptions(
                site_id=site_id, cluster_id=cluster_id, pvdc_id=pvdc_id)))


@cluster_group.command('create', short_help='Add a cluster to a PVDC')
@click.pass_context
@click.argument('site_id', metavar='SITE_ID')
@click.argument('pvdc_id', metavar='PVDC_ID')
@click.option(
    '-f',
    '--file',
    'spec_file',
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    metavar='SPEC_FILE',
    help='YAML or JSON file with name, host_count, host_profile, '
         'file_shares and optionally storage_type')
def create_cluster(ctx, site_id, pvdc_id, spec_file):
    """Add a cluster to a provider virtual data center."""
    def _create(client):
        spec = client_utils.load_spec_file(spec_file)
        file_shares = spec.get('file_shares')
        options = options_models.CreateDirectorSitesPvdcsClustersOptions(
            site_id=site_id,
            pvdc_id=pvdc_id,
            name=spec.get('name'),
            host_count=spec.get('host_count'),
            host_profile=spec.get('host_profile'),
            file_shares=FileShares.from_dict(file_shares)
            if file_shares is not None else None,
            storage_type=spec.get('storage_type'))
        return client.create_director_sites_pvdcs_clusters(options)
    client_utils.run_command(ctx, _create)


@cluster_group.command('delete', short_help='Delete a cluster')
@click.pass_context
@click.argument('site_id', metavar='SITE_ID')
@click.argument('pvdc_id', metavar='PVDC_ID')
@click.argument('cluster_id', metavar='CLUSTER_ID')
@click.confirmation_option(prompt='Are you sure you want to delete the '
                                  'cluster?')
def delete_cluster(ctx, site_id, pvdc_id, cluster_id):
    client_utils.run_command(
        ctx,
        lambda client: client.delete_director_sites_pvdcs_cluster(
            options_models.DeleteDirectorSitesPvdcsClusterOptions(
                site_id=site_id, cluster_id=cluster_id, pvdc_id=pvdc_id)))


@cluster_group.command('update', short_help='Patch a cluster')
@click.pass_context
@click.argument('site_id', metavar='SITE_ID')
@click.argument('pvdc_id', metavar='PVDC_ID')
@click.argument('cluster_id', metavar='CLUSTER_ID')
@click.option(
    '-f',
    '--file',
    'patch_file',
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    metavar='PATCH_FILE',
    help='YAML or JSON file with a list of JSON Patch operations')
def update_cluster(ctx, site_id, pvdc_id, cluster_id, patch_file):
    """Apply a JSON Patch to a cluster.

\b
Example
    vmaas cluster update SITE_ID PVDC_ID CLUSTER_ID -f patch.yaml
        patch.yaml:
        - op: replace
          path: /host_count
          value: 4
    """
    def _update(client):
        patch = client_utils.load_spec_file(patch_file)
        if not isinstance(patch, list):
            raise ValueError(f"'{patch_file}' should hold a list of "
                             f"JSON Patch operations")
        options = options_models.UpdateDirectorSitesPvdcsClusterOptions(
            site_id=site_id,
            cluster_id=cluster_id,
            pvdc_id=pvdc_id,
            body=[JSONPatchOperation.from_dict(op, infer_missing=True)
                  for op in patch])
        return client.update_director_sites_pvdcs_cluster(options)
    client_utils.run_command(ctx, _update)
