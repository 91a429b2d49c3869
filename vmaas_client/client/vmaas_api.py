# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""Client for the VMware as a Service API (v1).

Every operation takes an options object and an optional timeout in seconds,
and returns a DetailedResponse whose result is the decoded model, or None
when the service replied with an empty body.
"""

import vmaas_client.common.constants.shared_constants as shared_constants
from vmaas_client.common.constants.shared_constants import MediaType
from vmaas_client.common.constants.shared_constants import RequestHeader
from vmaas_client.common.constants.shared_constants import RequestMethod
from vmaas_client.common.utils.core_utils import get_sdk_headers
from vmaas_client.common.utils.model_utils import model_to_dict
from vmaas_client.exception.exceptions import ResponseProcessingError
from vmaas_client.exception.exceptions import ValidationError
from vmaas_client.lib.core.authenticators import Authenticator
from vmaas_client.lib.core.base_service import BaseService
from vmaas_client.lib.core.base_service import DetailedResponse
from vmaas_client.lib.core.external_config import configure_service
from vmaas_client.lib.core.external_config import get_authenticator_from_environment  # noqa: E501
import vmaas_client.models.director_site_models as director_site_models
import vmaas_client.models.options as options_models
import vmaas_client.models.pricing_models as pricing_models
import vmaas_client.models.vdc_models as vdc_models

_DIRECTOR_SITES = '/director_sites'
_DIRECTOR_SITE = f"{_DIRECTOR_SITES}/{{site_id}}"
_PVDCS = f"{_DIRECTOR_SITE}/pvdcs"
_PVDC = f"{_PVDCS}/{{pvdc_id}}"
_CLUSTERS = f"{_PVDC}/clusters"
_CLUSTER = f"{_CLUSTERS}/{{cluster_id}}"
_REGIONS = '/director_site_regions'
_HOST_PROFILES = '/director_site_host_profiles'
_PASSWORD = '/director_site_password'
_PRICING = '/director_site_pricing'
_PRICE_QUOTE = '/director_site_price_quote'
_VDCS = '/vdcs'
_VDC = f"{_VDCS}/{{vdc_id}}"


class VMwareAsAServiceApiV1(BaseService):
    """Director sites, PVDCs, clusters, VDCs and pricing."""

    DEFAULT_SERVICE_URL = shared_constants.DEFAULT_SERVICE_URL
    DEFAULT_SERVICE_NAME = shared_constants.DEFAULT_SERVICE_NAME

    def __init__(self,
                 authenticator: Authenticator = None,
                 service_url: str = DEFAULT_SERVICE_URL):
        """Construct a client.

        :param Authenticator authenticator: adds credentials to requests
        :param str service_url: base url of the service

        :raises ConfigurationError: if the authenticator is missing or
            invalid, or the url is malformed.
        """
        super().__init__(service_url=service_url,
                         authenticator=authenticator)

    @classmethod
    def new_instance(cls,
                     service_name: str = DEFAULT_SERVICE_NAME,
                     authenticator: Authenticator = None,
                     service_url: str = None):
        """Construct a client from external configuration.

        Properties are read from the credentials file or the environment
        under service_name. An explicit authenticator or service_url takes
        precedence.

        :raises ConfigurationError: if no valid authenticator can be built.
        """
        if authenticator is None:
            authenticator = get_authenticator_from_environment(service_name)
        service = cls(authenticator=authenticator)
        configure_service(service, service_name)
        if service_url:
            service.set_service_url(service_url)
        return service

    def _invoke(self,
                options,
                options_name,
                operation_id,
                method,
                path,
                result_type,
                path_params=None,
                params=None,
                body=None,
                content_type=MediaType.JSON.value,
                timeout=None) -> DetailedResponse:
        if options is None:
            raise ValidationError(f"{options_name} cannot be None")
        options.validate(options_name)

        headers = {}
        if options.headers:
            headers.update(options.headers)
        headers.update(get_sdk_headers(
            service_name=self.DEFAULT_SERVICE_NAME,
            service_version=shared_constants.SERVICE_VERSION,
            operation_id=operation_id))
        headers[RequestHeader.ACCEPT.value] = MediaType.JSON.value
        if body is not None:
            headers[RequestHeader.CONTENT_TYPE.value] = content_type
        headers.update(options.get_header_params())

        request = self.prepare_request(method,
                                       path,
                                       path_params=path_params,
                                       headers=headers,
                                       params=params,
                                       data=body)
        self.LOGGER.debug(f"{operation_id}: {method.value} {request.url}")
        response = self.send(request, timeout=timeout)
        response.result = self._to_model(response, result_type)
        return response

    @staticmethod
    def _to_model(response: DetailedResponse, result_type):
        result = response.get_result()
        if result is None:
            return None
        if not isinstance(result, dict):
            raise ResponseProcessingError(
                f"Expected a json object for {result_type.__name__}, got "
                f"{type(result).__name__}",
                response=response.response)
        try:
            return result_type.from_dict(result)
        except (AttributeError, KeyError, TypeError, ValueError) as err:
            raise ResponseProcessingError(
                f"Unable to decode {result_type.__name__}: {err}",
                response=response.response,
                cause=err)

    #########################
    # Director sites
    #########################

    def create_director_sites(self,
                              options: options_models.CreateDirectorSitesOptions,  # noqa: E501
                              timeout=None) -> DetailedResponse:
        """Create a director site instance.

        Provisioning is asynchronous, the returned site is in the Creating
        state.

        :rtype: DetailedResponse with DirectorSite result
        """
        body = None
        if options is not None:
            body = {
                'name': options.name,
                'resource_group': options.resource_group,
                'pvdcs': model_to_dict(options.pvdcs),
            }
        return self._invoke(options,
                            'createDirectorSitesOptions',
                            'CreateDirectorSites',
                            RequestMethod.POST,
                            _DIRECTOR_SITES,
                            director_site_models.DirectorSite,
                            body=body,
                            timeout=timeout)

    def list_director_sites(self,
                            options: options_models.ListDirectorSitesOptions,
                            timeout=None) -> DetailedResponse:
        """List the director site instances of the account.

        :rtype: DetailedResponse with ListDirectorSites result
        """
        return self._invoke(options,
                            'listDirectorSitesOptions',
                            'ListDirectorSites',
                            RequestMethod.GET,
                            _DIRECTOR_SITES,
                            director_site_models.ListDirectorSites,
                            timeout=timeout)

    def get_director_site(self,
                          options: options_models.GetDirectorSiteOptions,
                          timeout=None) -> DetailedResponse:
        return self._invoke(options,
                            'getDirectorSiteOptions',
                            'GetDirectorSite',
                            RequestMethod.GET,
                            _DIRECTOR_SITE,
                            director_site_models.DirectorSite,
                            path_params=_path_params(options, 'site_id'),
                            timeout=timeout)

    def delete_director_site(self,
                             options: options_models.DeleteDirectorSiteOptions,  # noqa: E501
                             timeout=None) -> DetailedResponse:
        """Delete a director site instance and everything it contains.

        :rtype: DetailedResponse with DirectorSite result
        """
        return self._invoke(options,
                            'deleteDirectorSiteOptions',
                            'DeleteDirectorSite',
                            RequestMethod.DELETE,
                            _DIRECTOR_SITE,
                            director_site_models.DirectorSite,
                            path_params=_path_params(options, 'site_id'),
                            timeout=timeout)

    #########################
    # Provider virtual data centers
    #########################

    def list_director_sites_pvdcs(self,
                                  options: options_models.ListDirectorSitesPvdcsOptions,  # noqa: E501
                                  timeout=None) -> DetailedResponse:
        return self._invoke(options,
                            'listDirectorSitesPvdcsOptions',
                            'ListDirectorSitesPvdcs',
                            RequestMethod.GET,
                            _PVDCS,
                            director_site_models.ListPVDCs,
                            path_params=_path_params(options, 'site_id'),
                            timeout=timeout)

    def create_director_sites_pvdcs(self,
                                    options: options_models.CreateDirectorSitesPvdcsOptions,  # noqa: E501
                                    timeout=None) -> DetailedResponse:
        """Create a provider virtual data center in a director site.

        :rtype: DetailedResponse with PVDCResponse result
        """
        body = None
        if options is not None:
            body = {
                'name': options.name,
                'data_center': options.data_center,
                'clusters': model_to_dict(options.clusters),
            }
        return self._invoke(options,
                            'createDirectorSitesPvdcsOptions',
                            'CreateDirectorSitesPvdcs',
                            RequestMethod.POST,
                            _PVDCS,
                            director_site_models.PVDCResponse,
                            path_params=_path_params(options, 'site_id'),
                            body=body,
                            timeout=timeout)

    def get_director_sites_pvdcs(self,
                                 options: options_models.GetDirectorSitesPvdcsOptions,  # noqa: E501
                                 timeout=None) -> DetailedResponse:
        return self._invoke(options,
                            'getDirectorSitesPvdcsOptions',
                            'GetDirectorSitesPvdcs',
                            RequestMethod.GET,
                            _PVDC,
                            director_site_models.PVDCSummary,
                            path_params=_path_params(options, 'site_id',
                                                     'pvdc_id'),
                            timeout=timeout)

    #########################
    # Clusters
    #########################

    def list_director_sites_pvdcs_clusters(self,
                                           options: options_models.ListDirectorSitesPvdcsClustersOptions,  # noqa: E501
                                           timeout=None) -> DetailedResponse:  # noqa: E501
        return self._invoke(options,
                            'listDirectorSitesPvdcsClustersOptions',
                            'ListDirectorSitesPvdcsClusters',
                            RequestMethod.GET,
                            _CLUSTERS,
                            director_site_models.ListClusters,
                            path_params=_path_params(options, 'site_id',
                                                     'pvdc_id'),
                            timeout=timeout)

    def create_director_sites_pvdcs_clusters(self,
                                             options: options_models.CreateDirectorSitesPvdcsClustersOptions,  # noqa: E501
                                             timeout=None) -> DetailedResponse:  # noqa: E501
        """Add a cluster to a provider virtual data center.

        :rtype: DetailedResponse with Cluster result
        """
        body = None
        if options is not None:
            body = {
                'name': options.name,
                'host_count': options.host_count,
                'host_profile': options.host_profile,
                'file_shares': model_to_dict(options.file_shares),
            }
            if options.storage_type is not None:
                body['storage_type'] = options.storage_type
        return self._invoke(options,
                            'createDirectorSitesPvdcsClustersOptions',
                            'CreateDirectorSitesPvdcsClusters',
                            RequestMethod.POST,
                            _CLUSTERS,
                            director_site_models.Cluster,
                            path_params=_path_params(options, 'site_id',
                                                     'pvdc_id'),
                            body=body,
                            timeout=timeout)

    def get_director_instances_pvdcs_cluster(self,
                                             options: options_models.GetDirectorInstancesPvdcsClusterOptions,  # noqa: E501
                                             timeout=None) -> DetailedResponse:  # noqa: E501
        return self._invoke(options,
                            'getDirectorInstancesPvdcsClusterOptions',
                            'GetDirectorInstancesPvdcsCluster',
                            RequestMethod.GET,
                            _CLUSTER,
                            director_site_models.Cluster,
                            path_params=_path_params(options, 'site_id',
                                                     'pvdc_id', 'cluster_id'),
                            timeout=timeout)

    def delete_director_sites_pvdcs_cluster(self,
                                            options: options_models.DeleteDirectorSitesPvdcsClusterOptions,  # noqa: E501
                                            timeout=None) -> DetailedResponse:  # noqa: E501
        """Delete a cluster from a provider virtual data center.

        :rtype: DetailedResponse with PVDCResponse result
        """
        return self._invoke(options,
                            'deleteDirectorSitesPvdcsClusterOptions',
                            'DeleteDirectorSitesPvdcsCluster',
                            RequestMethod.DELETE,
                            _CLUSTER,
                            director_site_models.PVDCResponse,
                            path_params=_path_params(options, 'site_id',
                                                     'pvdc_id', 'cluster_id'),
                            timeout=timeout)

    def update_director_sites_pvdcs_cluster(self,
                                            options: options_models.UpdateDirectorSitesPvdcsClusterOptions,  # noqa: E501
                                            timeout=None) -> DetailedResponse:  # noqa: E501
        """Apply a JSON Patch to a cluster, e.g. to change its host count.

        :rtype: DetailedResponse with UpdateClusterResponse result
        """
        body = None
        if options is not None and options.body is not None:
            body = model_to_dict(options.body)
        return self._invoke(options,
                            'updateDirectorSitesPvdcsClusterOptions',
                            'UpdateDirectorSitesPvdcsCluster',
                            RequestMethod.PATCH,
                            _CLUSTER,
                            director_site_models.UpdateClusterResponse,
                            path_params=_path_params(options, 'site_id',
                                                     'pvdc_id', 'cluster_id'),
                            body=body,
                            content_type=MediaType.JSON_PATCH.value,
                            timeout=timeout)

    #########################
    # Regions, host profiles and passwords
    #########################

    def list_director_site_regions(self,
                                   options: options_models.ListDirectorSiteRegionsOptions,  # noqa: E501
                                   timeout=None) -> DetailedResponse:
        return self._invoke(options,
                            'listDirectorSiteRegionsOptions',
                            'ListDirectorSiteRegions',
                            RequestMethod.GET,
                            _REGIONS,
                            director_site_models.DirectorSiteRegions,
                            timeout=timeout)

    def list_director_site_host_profiles(self,
                                         options: options_models.ListDirectorSiteHostProfilesOptions,  # noqa: E501
                                         timeout=None) -> DetailedResponse:
        return self._invoke(options,
                            'listDirectorSiteHostProfilesOptions',
                            'ListDirectorSiteHostProfiles',
                            RequestMethod.GET,
                            _HOST_PROFILES,
                            director_site_models.ListHostProfiles,
                            timeout=timeout)

    def replace_org_admin_password(self,
                                   options: options_models.ReplaceOrgAdminPasswordOptions,  # noqa: E501
                                   timeout=None) -> DetailedResponse:
        """Reset the admin password of the director site organization.

        :rtype: DetailedResponse with NewPassword result
        """
        params = None
        if options is not None:
            params = {'site_id': options.site_id}
        return self._invoke(options,
                            'replaceOrgAdminPasswordOptions',
                            'ReplaceOrgAdminPassword',
                            RequestMethod.PUT,
                            _PASSWORD,
                            director_site_models.NewPassword,
                            params=params,
                            timeout=timeout)

    #########################
    # Pricing
    #########################

    def list_prices(self,
                    options: options_models.ListPricesOptions,
                    timeout=None) -> DetailedResponse:
        return self._invoke(options,
                            'listPricesOptions',
                            'ListPrices',
                            RequestMethod.GET,
                            _PRICING,
                            pricing_models.DirectorSitePricingInfo,
                            timeout=timeout)

    def get_vcdd_price(self,
                       options: options_models.GetVcddPriceOptions,
                       timeout=None) -> DetailedResponse:
        """Quote the price of a director site order.

        :rtype: DetailedResponse with DirectorSitePriceQuoteResponse result
        """
        body = None
        if options is not None:
            body = {
                'name': options.name,
                'resource_group': options.resource_group,
                'pvdcs': model_to_dict(options.pvdcs),
            }
        return self._invoke(options,
                            'getVcddPriceOptions',
                            'GetVcddPrice',
                            RequestMethod.POST,
                            _PRICE_QUOTE,
                            pricing_models.DirectorSitePriceQuoteResponse,
                            body=body,
                            timeout=timeout)

    #########################
    # Virtual data centers
    #########################

    def list_vdcs(self,
                  options: options_models.ListVdcsOptions,
                  timeout=None) -> DetailedResponse:
        return self._invoke(options,
                            'listVdcsOptions',
                            'ListVdcs',
                            RequestMethod.GET,
                            _VDCS,
                            vdc_models.ListVDCs,
                            timeout=timeout)

    def create_vdc(self,
                   options: options_models.CreateVdcOptions,
                   timeout=None) -> DetailedResponse:
        """Create a virtual data center on a director site cluster.

        :rtype: DetailedResponse with VDC result
        """
        body = None
        if options is not None:
            body = {
                'name': options.name,
                'director_site': model_to_dict(options.director_site),
            }
            if options.edge is not None:
                body['edge'] = model_to_dict(options.edge)
            if options.resource_group is not None:
                body['resource_group'] = model_to_dict(options.resource_group)
        return self._invoke(options,
                            'createVdcOptions',
                            'CreateVdc',
                            RequestMethod.POST,
                            _VDCS,
                            vdc_models.VDC,
                            body=body,
                            timeout=timeout)

    def get_vdc(self,
                options: options_models.GetVdcOptions,
                timeout=None) -> DetailedResponse:
        return self._invoke(options,
                            'getVdcOptions',
                            'GetVdc',
                            RequestMethod.GET,
                            _VDC,
                            vdc_models.VDC,
                            path_params=_path_params(options, 'vdc_id'),
                            timeout=timeout)

    def delete_vdc(self,
                   options: options_models.DeleteVdcOptions,
                   timeout=None) -> DetailedResponse:
        return self._invoke(options,
                            'deleteVdcOptions',
                            'DeleteVdc',
                            RequestMethod.DELETE,
                            _VDC,
                            vdc_models.VDC,
                            path_params=_path_params(options, 'vdc_id'),
                            timeout=timeout)

    def update_vdc(self,
                   options: options_models.UpdateVdcOptions,
                   timeout=None) -> DetailedResponse:
        """Apply a JSON merge patch to a virtual data center.

        :rtype: DetailedResponse with VDC result
        """
        body = None
        if options is not None and options.vdc_patch is not None:
            body = model_to_dict(options.vdc_patch)
        return self._invoke(options,
                            'updateVdcOptions',
                            'UpdateVdc',
                            RequestMethod.PATCH,
                            _VDC,
                            vdc_models.VDC,
                            path_params=_path_params(options, 'vdc_id'),
                            body=body,
                            content_type=MediaType.MERGE_PATCH.value,
                            timeout=timeout)


def _path_params(options, *names):
    if options is None:
        return None
    return {name: getattr(options, name) for name in names}
