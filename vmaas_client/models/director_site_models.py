# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""Director site, provider virtual data center and cluster models."""

from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from enum import Enum
from enum import unique
from typing import Dict, List, Optional

from dataclasses_json import config
from dataclasses_json import dataclass_json
from dataclasses_json import Undefined

from vmaas_client.common.utils.model_utils import datetime_field
from vmaas_client.common.utils.model_utils import required_field


@unique
class DirectorSiteStatus(str, Enum):
    CREATING = 'Creating'
    DELETED = 'Deleted'
    DELETING = 'Deleting'
    READY_TO_USE = 'ReadyToUse'
    UPDATING = 'Updating'


@unique
class PVDCStatus(str, Enum):
    CREATING = 'Creating'
    DELETED = 'Deleted'
    DELETING = 'Deleting'
    FAILED = 'Failed'
    MODIFYING = 'Modifying'
    READY_TO_USE = 'ReadyToUse'


@unique
class StorageType(str, Enum):
    NFS = 'nfs'


@unique
class BillingPlan(str, Enum):
    MONTHLY = 'monthly'


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class FileShares:
    """Chosen storage policies and their sizes in GB."""

    storage_point_two_five_iops_gb: Optional[int] = field(
        default=None,
        metadata=config(field_name='STORAGE_POINT_TWO_FIVE_IOPS_GB'))
    storage_two_iops_gb: Optional[int] = field(
        default=None, metadata=config(field_name='STORAGE_TWO_IOPS_GB'))
    storage_four_iops_gb: Optional[int] = field(
        default=None, metadata=config(field_name='STORAGE_FOUR_IOPS_GB'))
    storage_ten_iops_gb: Optional[int] = field(
        default=None, metadata=config(field_name='STORAGE_TEN_IOPS_GB'))


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class ClusterOrderInfo:
    """Cluster to be created as part of a director site or PVDC order."""

    name: str = required_field()
    storage_type: str = required_field()
    host_count: int = required_field()
    file_shares: FileShares = required_field()
    host_profile: str = required_field()


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class PVDCOrderInfo:
    """Provider virtual data center to be created with a director site."""

    name: str = required_field()
    data_center: str = required_field()
    clusters: List[ClusterOrderInfo] = required_field()


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class ClusterSummary:
    name: Optional[str] = None
    storage_type: Optional[str] = None
    host_count: Optional[int] = None
    file_shares: Optional[FileShares] = None
    host_profile: Optional[str] = None
    id: Optional[str] = None
    href: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class PVDCSummary:
    name: Optional[str] = None
    data_center: Optional[str] = None
    id: Optional[str] = None
    href: Optional[str] = None
    clusters: Optional[List[ClusterSummary]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class PVDCResponse:
    name: Optional[str] = None
    data_center: Optional[str] = None
    id: Optional[str] = None
    href: Optional[str] = None
    clusters: Optional[List[ClusterSummary]] = None
    status: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class DirectorSite:
    crn: Optional[str] = None
    href: Optional[str] = None
    id: Optional[str] = None
    instance_ordered: Optional[datetime] = datetime_field()
    instance_created: Optional[datetime] = datetime_field()
    name: Optional[str] = None
    status: Optional[str] = None
    resource_group: Optional[str] = None
    creator: Optional[str] = None
    resource_group_id: Optional[str] = None
    resource_group_crn: Optional[str] = None
    pvdcs: Optional[List[PVDCSummary]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class Cluster:
    id: Optional[str] = None
    name: Optional[str] = None
    href: Optional[str] = None
    instance_ordered: Optional[datetime] = datetime_field()
    instance_created: Optional[datetime] = datetime_field()
    host_count: Optional[int] = None
    status: Optional[str] = None
    pvdc_id: Optional[str] = None
    director_site: Optional[str] = None
    host_profile: Optional[str] = None
    storage_type: Optional[str] = None
    billing_plan: Optional[str] = None
    file_shares: Optional[FileShares] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class ListDirectorSites:
    director_sites: Optional[List[DirectorSite]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class ListPVDCs:
    pvdcs: Optional[List[PVDCSummary]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class ListClusters:
    clusters: Optional[List[Cluster]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class DataCenterInfo:
    display_name: Optional[str] = None
    name: Optional[str] = None
    uplink_speed: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class RegionDetail:
    data_centers: Optional[List[DataCenterInfo]] = None
    endpoint: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class DirectorSiteRegions:
    director_site_regions: Optional[Dict[str, RegionDetail]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class HostProfile:
    id: Optional[str] = None
    cpu: Optional[int] = None
    family: Optional[str] = None
    processor: Optional[str] = None
    ram: Optional[int] = None
    socket: Optional[int] = None
    speed: Optional[str] = None
    manufacturer: Optional[str] = None
    features: Optional[List[str]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class ListHostProfiles:
    director_site_host_profiles: Optional[List[HostProfile]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class NewPassword:
    password: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class UpdateClusterResponse:
    message: Optional[str] = None
