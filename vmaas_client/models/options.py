# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""Per-operation option containers.

Positional fields are the operation's required parameters. Optional
parameters are keyword fields and can also be set through the chainable
setters of BaseOptions.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import vmaas_client.common.constants.shared_constants as shared_constants
from vmaas_client.common.utils.model_utils import required_field
from vmaas_client.common.utils.model_utils import validate_required
from vmaas_client.models.director_site_models import ClusterOrderInfo
from vmaas_client.models.director_site_models import FileShares
from vmaas_client.models.director_site_models import PVDCOrderInfo
from vmaas_client.models.json_patch_models import JSONPatchOperation
from vmaas_client.models.vdc_models import NewVDCDirectorSite
from vmaas_client.models.vdc_models import NewVDCEdge
from vmaas_client.models.vdc_models import NewVDCResourceGroup

# option field -> request header
_HEADER_FIELDS = {
    'accept_language': shared_constants.RequestHeader.ACCEPT_LANGUAGE.value,
    'x_global_transaction_id':
        shared_constants.RequestHeader.TRANSACTION_ID.value,
}


class BaseOptions:
    """Behaviour shared by all option containers."""

    def set(self, **kwargs):
        """Set fields by name and return self.

        :raises AttributeError: if a name is not a field of these options.
        """
        names = {f.name for f in dataclasses.fields(self)}
        for name, value in kwargs.items():
            if name not in names:
                raise AttributeError(
                    f"{type(self).__name__} has no field '{name}'")
            setattr(self, name, value)
        return self

    def set_headers(self, headers: Dict[str, str]):
        return self.set(headers=headers)

    def set_accept_language(self, accept_language: str):
        return self.set(accept_language=accept_language)

    def set_x_global_transaction_id(self, x_global_transaction_id: str):
        return self.set(x_global_transaction_id=x_global_transaction_id)

    def validate(self, name=None):
        validate_required(self, name or type(self).__name__)

    def get_header_params(self):
        """Headers carried by dedicated option fields."""
        headers = {}
        for field_name, header_name in _HEADER_FIELDS.items():
            value = getattr(self, field_name, None)
            if value is not None:
                headers[header_name] = str(value)
        return headers


@dataclass
class CreateDirectorSitesOptions(BaseOptions):
    name: str = required_field()
    resource_group: str = required_field()
    pvdcs: List[PVDCOrderInfo] = required_field()
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class ListDirectorSitesOptions(BaseOptions):
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class GetDirectorSiteOptions(BaseOptions):
    site_id: str = required_field(non_empty=True)
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class DeleteDirectorSiteOptions(BaseOptions):
    site_id: str = required_field(non_empty=True)
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class ListDirectorSitesPvdcsOptions(BaseOptions):
    site_id: str = required_field(non_empty=True)
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class CreateDirectorSitesPvdcsOptions(BaseOptions):
    site_id: str = required_field(non_empty=True)
    name: str = required_field()
    data_center: str = required_field()
    clusters: List[ClusterOrderInfo] = required_field()
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class GetDirectorSitesPvdcsOptions(BaseOptions):
    site_id: str = required_field(non_empty=True)
    pvdc_id: str = required_field(non_empty=True)
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class ListDirectorSitesPvdcsClustersOptions(BaseOptions):
    site_id: str = required_field(non_empty=True)
    pvdc_id: str = required_field(non_empty=True)
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class CreateDirectorSitesPvdcsClustersOptions(BaseOptions):
    site_id: str = required_field(non_empty=True)
    pvdc_id: str = required_field(non_empty=True)
    name: str = required_field()
    host_count: int = required_field()
    host_profile: str = required_field()
    file_shares: FileShares = required_field()
    storage_type: Optional[str] = None
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class GetDirectorInstancesPvdcsClusterOptions(BaseOptions):
    site_id: str = required_field(non_empty=True)
    cluster_id: str = required_field(non_empty=True)
    pvdc_id: str = required_field(non_empty=True)
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class DeleteDirectorSitesPvdcsClusterOptions(BaseOptions):
    site_id: str = required_field(non_empty=True)
    cluster_id: str = required_field(non_empty=True)
    pvdc_id: str = required_field(non_empty=True)
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class UpdateDirectorSitesPvdcsClusterOptions(BaseOptions):
    site_id: str = required_field(non_empty=True)
    cluster_id: str = required_field(non_empty=True)
    pvdc_id: str = required_field(non_empty=True)
    body: List[JSONPatchOperation] = required_field()
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class ListDirectorSiteRegionsOptions(BaseOptions):
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class ListDirectorSiteHostProfilesOptions(BaseOptions):
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class ReplaceOrgAdminPasswordOptions(BaseOptions):
    site_id: str = required_field(non_empty=True)
    headers: Optional[Dict[str, str]] = None


@dataclass
class ListPricesOptions(BaseOptions):
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class GetVcddPriceOptions(BaseOptions):
    name: str = required_field()
    resource_group: str = required_field()
    pvdcs: List[PVDCOrderInfo] = required_field()
    accept_language: Optional[str] = None
    x_global_transaction_id: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class ListVdcsOptions(BaseOptions):
    accept_language: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class CreateVdcOptions(BaseOptions):
    name: str = required_field()
    director_site: NewVDCDirectorSite = required_field()
    edge: Optional[NewVDCEdge] = None
    resource_group: Optional[NewVDCResourceGroup] = None
    accept_language: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class GetVdcOptions(BaseOptions):
    vdc_id: str = required_field(non_empty=True)
    accept_language: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class DeleteVdcOptions(BaseOptions):
    vdc_id: str = required_field(non_empty=True)
    accept_language: Optional[str] = None
    headers: Optional[Dict[str, str]] = None


@dataclass
class UpdateVdcOptions(BaseOptions):
    vdc_id: str = required_field(non_empty=True)
    vdc_patch: Dict[str, Any] = required_field()
    accept_language: Optional[str] = None
    headers: Optional[Dict[str, str]] = None
