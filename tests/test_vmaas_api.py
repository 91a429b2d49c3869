# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

import gzip
import json

import pytest

from vmaas_client.client.vmaas_api import VMwareAsAServiceApiV1
from vmaas_client.exception.exceptions import ConfigurationError
from vmaas_client.exception.exceptions import ResponseProcessingError
from vmaas_client.exception.exceptions import ServiceResponseError
from vmaas_client.exception.exceptions import TransportError
from vmaas_client.exception.exceptions import ValidationError
from vmaas_client.lib.core.authenticators import BearerTokenAuthenticator
from vmaas_client.lib.core.authenticators import NoAuthAuthenticator
from vmaas_client.models.director_site_models import ClusterOrderInfo
from vmaas_client.models.director_site_models import DirectorSite
from vmaas_client.models.director_site_models import FileShares
from vmaas_client.models.director_site_models import PVDCOrderInfo
from vmaas_client.models.json_patch_models import JSONPatchOperation
import vmaas_client.models.options as options_models
from vmaas_client.models.vdc_models import NewVDCDirectorSite
from vmaas_client.models.vdc_models import NewVDCEdge
from vmaas_client.models.vdc_models import VDCDirectorSiteCluster


def _pvdcs():
    return [PVDCOrderInfo(
        name='pvdc-1',
        data_center='dal10',
        clusters=[ClusterOrderInfo(
            name='cluster-1',
            storage_type='nfs',
            host_count=2,
            file_shares=FileShares(storage_two_iops_gb=100),
            host_profile='BM_2S_20_CORES_192_GB')])]


def test_create_director_sites_returns_decoded_site(service, mock_server):
    mock_server.respond(202, {'id': 'ID'})

    response = service.create_director_sites(
        options_models.CreateDirectorSitesOptions(
            name='site-1', resource_group='rg-1', pvdcs=_pvdcs()))

    assert isinstance(response.get_result(), DirectorSite)
    assert response.get_result().id == 'ID'
    assert response.get_status_code() == 202

    request = mock_server.last_request
    assert request.method == 'POST'
    assert request.path == '/director_sites'
    assert request.headers['Content-Type'] == 'application/json'
    assert json.loads(request.body) == {
        'name': 'site-1',
        'resource_group': 'rg-1',
        'pvdcs': [{
            'name': 'pvdc-1',
            'data_center': 'dal10',
            'clusters': [{
                'name': 'cluster-1',
                'storage_type': 'nfs',
                'host_count': 2,
                'file_shares': {'STORAGE_TWO_IOPS_GB': 100},
                'host_profile': 'BM_2S_20_CORES_192_GB'
            }]
        }]
    }


@pytest.mark.parametrize('enable_retries', [False, True])
def test_deadline_exceeded(service, mock_server, enable_retries):
    if enable_retries:
        service.enable_retries(max_retries=2, retry_interval=0.1)
    mock_server.respond(200, {'director_sites': []}, delay=0.1)

    with pytest.raises(TransportError) as err:
        service.list_director_sites(
            options_models.ListDirectorSitesOptions(), timeout=0.08)

    assert 'deadline exceeded' in str(err.value)
    assert err.value.response is None
    assert len(mock_server.requests) == 1


def test_default_timeout_applies(service, mock_server):
    service.set_http_config(timeout=0.05)
    mock_server.respond(200, {'director_sites': []}, delay=0.2)

    with pytest.raises(TransportError, match='deadline exceeded'):
        service.list_director_sites(options_models.ListDirectorSitesOptions())


@pytest.mark.parametrize('operation', [
    'create_director_sites',
    'list_director_sites',
    'get_director_site',
    'delete_director_site',
    'list_director_sites_pvdcs',
    'create_director_sites_pvdcs',
    'get_director_sites_pvdcs',
    'list_director_sites_pvdcs_clusters',
    'create_director_sites_pvdcs_clusters',
    'get_director_instances_pvdcs_cluster',
    'delete_director_sites_pvdcs_cluster',
    'update_director_sites_pvdcs_cluster',
    'list_director_site_regions',
    'list_director_site_host_profiles',
    'replace_org_admin_password',
    'list_prices',
    'get_vcdd_price',
    'list_vdcs',
    'create_vdc',
    'get_vdc',
    'delete_vdc',
    'update_vdc',
])
def test_none_options_rejected_without_request(service, mock_server,
                                               operation):
    with pytest.raises(ValidationError) as err:
        getattr(service, operation)(None)

    assert 'cannot be None' in str(err.value)
    assert err.value.response is None
    assert mock_server.requests == []


@pytest.mark.parametrize('operation, options', [
    ('get_director_site',
     options_models.GetDirectorSiteOptions(site_id=None)),
    ('get_director_site',
     options_models.GetDirectorSiteOptions(site_id='')),
    ('get_director_sites_pvdcs',
     options_models.GetDirectorSitesPvdcsOptions(site_id='s', pvdc_id='')),
    ('create_director_sites',
     options_models.CreateDirectorSitesOptions(name='n', resource_group=None,
                                               pvdcs=[])),
    ('delete_vdc', options_models.DeleteVdcOptions(vdc_id='')),
    ('update_vdc', options_models.UpdateVdcOptions(vdc_id='v',
                                                   vdc_patch=None)),
])
def test_missing_required_field_rejected(service, mock_server, operation,
                                         options):
    with pytest.raises(ValidationError):
        getattr(service, operation)(options)

    assert mock_server.requests == []


def test_nested_required_field_rejected(service, mock_server):
    pvdcs = _pvdcs()
    pvdcs[0].clusters[0].host_profile = None

    with pytest.raises(ValidationError) as err:
        service.create_director_sites(
            options_models.CreateDirectorSitesOptions(
                name='site-1', resource_group='rg-1', pvdcs=pvdcs))

    assert 'host_profile' in str(err.value)
    assert mock_server.requests == []


@pytest.mark.parametrize('enable_retries', [False, True])
def test_invalid_json_raises_with_response(service, mock_server,
                                           enable_retries):
    if enable_retries:
        service.enable_retries(max_retries=2, retry_interval=0.1)
    mock_server.respond(200, '{"director_sites": [',
                        headers={'Content-Type': 'application/json'})

    with pytest.raises(ResponseProcessingError) as err:
        service.list_director_sites(options_models.ListDirectorSitesOptions())

    assert err.value.response is not None
    assert err.value.status_code == 200


def test_non_json_content_type_raises_with_response(service, mock_server):
    mock_server.respond(200, 'plain text',
                        headers={'Content-Type': 'text/plain'})

    with pytest.raises(ResponseProcessingError) as err:
        service.list_prices(options_models.ListPricesOptions())

    assert err.value.response is not None


def test_empty_body_yields_none_result(service, mock_server):
    mock_server.respond(202)

    response = service.delete_director_site(
        options_models.DeleteDirectorSiteOptions(site_id='site-1'))

    assert response.get_result() is None
    assert response.get_status_code() == 202


def test_missing_service_url(service, mock_server):
    service.set_service_url('')

    with pytest.raises(ValidationError) as err:
        service.list_director_sites(options_models.ListDirectorSitesOptions())

    assert 'service URL is missing' in str(err.value)
    assert err.value.response is None
    assert mock_server.requests == []


def test_error_status_raises_service_response_error(service, mock_server):
    mock_server.respond(404, {'errors': [{'code': 'not_found',
                                          'message': 'Site not found'}]})

    with pytest.raises(ServiceResponseError) as err:
        service.get_director_site(
            options_models.GetDirectorSiteOptions(site_id='missing'))

    assert err.value.status_code == 404
    assert err.value.message == 'Site not found'
    assert err.value.response.status_code == 404


def test_error_status_without_body(service, mock_server):
    mock_server.respond(401)

    with pytest.raises(ServiceResponseError) as err:
        service.list_vdcs(options_models.ListVdcsOptions())

    assert err.value.status_code == 401
    assert 'Unauthorized' in err.value.message


@pytest.mark.parametrize('operation, options, method, path', [
    ('list_director_sites', options_models.ListDirectorSitesOptions(),
     'GET', '/director_sites'),
    ('get_director_site',
     options_models.GetDirectorSiteOptions(site_id='s1'),
     'GET', '/director_sites/s1'),
    ('delete_director_site',
     options_models.DeleteDirectorSiteOptions(site_id='s1'),
     'DELETE', '/director_sites/s1'),
    ('list_director_sites_pvdcs',
     options_models.ListDirectorSitesPvdcsOptions(site_id='s1'),
     'GET', '/director_sites/s1/pvdcs'),
    ('get_director_sites_pvdcs',
     options_models.GetDirectorSitesPvdcsOptions(site_id='s1', pvdc_id='p1'),
     'GET', '/director_sites/s1/pvdcs/p1'),
    ('list_director_sites_pvdcs_clusters',
     options_models.ListDirectorSitesPvdcsClustersOptions(site_id='s1',
                                                          pvdc_id='p1'),
     'GET', '/director_sites/s1/pvdcs/p1/clusters'),
    ('get_director_instances_pvdcs_cluster',
     options_models.GetDirectorInstancesPvdcsClusterOptions(
         site_id='s1', cluster_id='c1', pvdc_id='p1'),
     'GET', '/director_sites/s1/pvdcs/p1/clusters/c1'),
    ('delete_director_sites_pvdcs_cluster',
     options_models.DeleteDirectorSitesPvdcsClusterOptions(
         site_id='s1', cluster_id='c1', pvdc_id='p1'),
     'DELETE', '/director_sites/s1/pvdcs/p1/clusters/c1'),
    ('list_director_site_regions',
     options_models.ListDirectorSiteRegionsOptions(),
     'GET', '/director_site_regions'),
    ('list_director_site_host_profiles',
     options_models.ListDirectorSiteHostProfilesOptions(),
     'GET', '/director_site_host_profiles'),
    ('list_prices', options_models.ListPricesOptions(),
     'GET', '/director_site_pricing'),
    ('list_vdcs', options_models.ListVdcsOptions(), 'GET', '/vdcs'),
    ('get_vdc', options_models.GetVdcOptions(vdc_id='v1'),
     'GET', '/vdcs/v1'),
    ('delete_vdc', options_models.DeleteVdcOptions(vdc_id='v1'),
     'DELETE', '/vdcs/v1'),
])
def test_bodyless_request_construction(service, mock_server, operation,
                                       options, method, path):
    getattr(service, operation)(options)

    request = mock_server.last_request
    assert request.method == method
    assert request.path == path
    assert request.body == b''
    assert request.headers['Accept'] == 'application/json'
    assert 'Content-Type' not in request.headers


def test_path_parameters_are_escaped(service, mock_server):
    service.get_director_site(
        options_models.GetDirectorSiteOptions(site_id='a/b c'))

    assert mock_server.last_request.path == '/director_sites/a%2Fb%20c'


def test_request_headers(service, mock_server):
    options = options_models.ListDirectorSitesOptions() \
        .set_accept_language('de') \
        .set_x_global_transaction_id('tx-1') \
        .set_headers({'X-Custom': 'custom', 'Accept': 'text/plain'})

    service.list_director_sites(options)

    headers = mock_server.last_request.headers
    assert headers['X-Custom'] == 'custom'
    assert headers['Accept'] == 'application/json'
    assert headers['Accept-Language'] == 'de'
    assert headers['X-Global-Transaction-ID'] == 'tx-1'
    assert headers['User-Agent'].startswith('vmaas-client/')
    assert headers['X-IBMCloud-SDK-Analytics'] == \
        'service_name=v_mware_as_a_service_api;service_version=V1;' \
        'operation_id=ListDirectorSites'


def test_default_headers_are_overridden_by_call_headers(service,
                                                        mock_server):
    service.set_default_headers({'X-Team': 'a', 'X-Default': 'd'})

    service.list_vdcs(options_models.ListVdcsOptions(
        headers={'X-Team': 'b'}))

    headers = mock_server.last_request.headers
    assert headers['X-Team'] == 'b'
    assert headers['X-Default'] == 'd'


def test_bearer_token_is_sent(mock_server):
    service = VMwareAsAServiceApiV1(
        authenticator=BearerTokenAuthenticator('token-1'),
        service_url=mock_server.url)

    service.list_vdcs(options_models.ListVdcsOptions())

    assert mock_server.last_request.headers['Authorization'] == \
        'Bearer token-1'


def test_create_director_sites_pvdcs(service, mock_server):
    mock_server.respond(201, {'id': 'p1', 'status': 'Creating'})

    response = service.create_director_sites_pvdcs(
        options_models.CreateDirectorSitesPvdcsOptions(
            site_id='s1', name='pvdc-2', data_center='dal10',
            clusters=_pvdcs()[0].clusters))

    assert response.get_result().status == 'Creating'
    request = mock_server.last_request
    assert request.path == '/director_sites/s1/pvdcs'
    body = json.loads(request.body)
    assert body['name'] == 'pvdc-2'
    assert body['clusters'][0]['host_count'] == 2


def test_create_director_sites_pvdcs_clusters(service, mock_server):
    mock_server.respond(201, {'id': 'c2', 'host_count': 3})

    response = service.create_director_sites_pvdcs_clusters(
        options_models.CreateDirectorSitesPvdcsClustersOptions(
            site_id='s1', pvdc_id='p1', name='cluster-2', host_count=3,
            host_profile='BM_2S_20_CORES_192_GB',
            file_shares=FileShares(storage_four_iops_gb=200)))

    assert response.get_result().host_count == 3
    request = mock_server.last_request
    assert request.method == 'POST'
    assert request.path == '/director_sites/s1/pvdcs/p1/clusters'
    assert json.loads(request.body) == {
        'name': 'cluster-2',
        'host_count': 3,
        'host_profile': 'BM_2S_20_CORES_192_GB',
        'file_shares': {'STORAGE_FOUR_IOPS_GB': 200}
    }


def test_update_cluster_sends_json_patch(service, mock_server):
    mock_server.respond(202, {'message': 'updating'})

    response = service.update_director_sites_pvdcs_cluster(
        options_models.UpdateDirectorSitesPvdcsClusterOptions(
            site_id='s1', cluster_id='c1', pvdc_id='p1',
            body=[JSONPatchOperation(op='replace', path='/host_count',
                                     value=4)]))

    assert response.get_result().message == 'updating'
    request = mock_server.last_request
    assert request.method == 'PATCH'
    assert request.path == '/director_sites/s1/pvdcs/p1/clusters/c1'
    assert request.headers['Content-Type'] == 'application/json-patch+json'
    assert json.loads(request.body) == [
        {'op': 'replace', 'path': '/host_count', 'value': 4}]


def test_replace_org_admin_password(service, mock_server):
    mock_server.respond(200, {'password': 'new-password'})

    response = service.replace_org_admin_password(
        options_models.ReplaceOrgAdminPasswordOptions(site_id='s1'))

    assert response.get_result().password == 'new-password'
    request = mock_server.last_request
    assert request.method == 'PUT'
    assert request.path == '/director_site_password'
    assert request.query == {'site_id': ['s1']}


def test_get_vcdd_price(service, mock_server):
    mock_server.respond(200, {
        'currency': 'USD',
        'total': 123.5,
        'base_charge': {'name': 'base', 'price': 10.0},
        'clusters': [{'name': 'cluster-1', 'items': [
            {'name': 'hosts', 'items': [{'name': 'host', 'count': 2}]}]}]
    })

    response = service.get_vcdd_price(options_models.GetVcddPriceOptions(
        name='site-1', resource_group='rg-1', pvdcs=_pvdcs()))

    result = response.get_result()
    assert result.total == 123.5
    assert result.base_charge.name == 'base'
    assert result.clusters[0].items[0].items[0].count == 2
    assert mock_server.last_request.path == '/director_site_price_quote'


def test_list_director_site_regions(service, mock_server):
    mock_server.respond(200, {'director_site_regions': {
        'us-south': {'endpoint': 'https://us-south.example.com',
                     'data_centers': [{'name': 'dal10',
                                       'display_name': 'Dallas 10',
                                       'uplink_speed': '35000'}]}}})

    response = service.list_director_site_regions(
        options_models.ListDirectorSiteRegionsOptions())

    region = response.get_result().director_site_regions['us-south']
    assert region.data_centers[0].name == 'dal10'


def test_create_vdc(service, mock_server):
    mock_server.respond(202, {'id': 'v1', 'status': 'Creating',
                              'created_time': '2022-07-01T10:00:00Z'})

    response = service.create_vdc(options_models.CreateVdcOptions(
        name='vdc-1',
        director_site=NewVDCDirectorSite(
            id='s1', cluster=VDCDirectorSiteCluster(id='c1')),
        edge=NewVDCEdge(type='shared')))

    result = response.get_result()
    assert result.id == 'v1'
    assert result.created_time.year == 2022
    assert json.loads(mock_server.last_request.body) == {
        'name': 'vdc-1',
        'director_site': {'id': 's1', 'cluster': {'id': 'c1'}},
        'edge': {'type': 'shared'}
    }


def test_update_vdc_sends_merge_patch(service, mock_server):
    mock_server.respond(202, {'id': 'v1', 'name': 'renamed'})

    response = service.update_vdc(options_models.UpdateVdcOptions(
        vdc_id='v1', vdc_patch={'name': 'renamed'}))

    assert response.get_result().name == 'renamed'
    request = mock_server.last_request
    assert request.method == 'PATCH'
    assert request.path == '/vdcs/v1'
    assert request.headers['Content-Type'] == 'application/merge-patch+json'
    assert json.loads(request.body) == {'name': 'renamed'}


def test_update_vdc_keeps_null_members(service, mock_server):
    mock_server.respond(202, {'id': 'v1', 'name': 'n'})

    service.update_vdc(options_models.UpdateVdcOptions(
        vdc_id='v1', vdc_patch={'name': 'n', 'edge': None}))

    assert json.loads(mock_server.last_request.body) == {'name': 'n',
                                                         'edge': None}


def test_vdc_options_have_no_transaction_id():
    with pytest.raises(AttributeError):
        options_models.ListVdcsOptions().set_x_global_transaction_id('tx')


def test_gzip_compression(service, mock_server):
    service.set_enable_gzip_compression(True)
    assert service.get_enable_gzip_compression()

    service.update_vdc(options_models.UpdateVdcOptions(
        vdc_id='v1', vdc_patch={'name': 'renamed'}))

    request = mock_server.last_request
    assert request.headers['Content-Encoding'] == 'gzip'
    assert json.loads(gzip.decompress(request.body)) == {'name': 'renamed'}


def test_retries_on_service_unavailable(service, mock_server):
    service.enable_retries(max_retries=2, retry_interval=0.1)
    mock_server.enqueue(503)
    mock_server.respond(200, {'vdcs': []})

    response = service.list_vdcs(options_models.ListVdcsOptions())

    assert response.get_result().vdcs == []
    assert len(mock_server.requests) == 2


def test_not_implemented_is_not_retried(service, mock_server):
    service.enable_retries(max_retries=2, retry_interval=0.1)
    mock_server.respond(501)

    with pytest.raises(ServiceResponseError) as err:
        service.list_vdcs(options_models.ListVdcsOptions())

    assert err.value.status_code == 501
    assert len(mock_server.requests) == 1


def test_disable_retries(service, mock_server):
    service.enable_retries(max_retries=2, retry_interval=0.1)
    service.disable_retries()
    mock_server.respond(503)

    with pytest.raises(ServiceResponseError):
        service.list_vdcs(options_models.ListVdcsOptions())

    assert len(mock_server.requests) == 1


def test_clone(service):
    clone = service.clone()

    assert clone is not service
    assert clone.session is not service.session
    assert clone.get_service_url() == service.get_service_url()
    assert clone.authenticator is service.authenticator

    clone.set_service_url('https://other.example.com/v1')
    assert service.get_service_url() != clone.get_service_url()


def test_construction_requires_authenticator():
    with pytest.raises(ConfigurationError):
        VMwareAsAServiceApiV1(authenticator=None)


@pytest.mark.parametrize('service_url', [
    '{https://example.com}',
    '"https://example.com"',
    'example.com/v1',
])
def test_construction_rejects_invalid_url(service_url):
    with pytest.raises(ConfigurationError):
        VMwareAsAServiceApiV1(authenticator=NoAuthAuthenticator(),
                              service_url=service_url)


def test_default_service_url():
    service = VMwareAsAServiceApiV1(authenticator=NoAuthAuthenticator())

    assert service.get_service_url() == \
        'https://v-mware-as-a-service-api.cloud.ibm.com/v1'


def test_trailing_slash_is_dropped():
    service = VMwareAsAServiceApiV1(authenticator=NoAuthAuthenticator(),
                                    service_url='https://example.com/v1/')

    assert service.get_service_url() == 'https://example.com/v1'
