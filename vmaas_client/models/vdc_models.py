# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""Virtual data center models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from enum import unique
from typing import List, Optional

from dataclasses_json import dataclass_json
from dataclasses_json import Undefined

from vmaas_client.common.utils.model_utils import datetime_field
from vmaas_client.common.utils.model_utils import required_field


@unique
class AllocationModel(str, Enum):
    PAYGO = 'paygo'


@unique
class VDCStatus(str, Enum):
    CREATING = 'Creating'
    DELETED = 'Deleted'
    DELETING = 'Deleting'
    FAILED = 'Failed'
    MODIFYING = 'Modifying'
    READY_TO_USE = 'ReadyToUse'


@unique
class VDCType(str, Enum):
    DEDICATED = 'dedicated'


@unique
class EdgeSize(str, Enum):
    MEDIUM = 'medium'
    LARGE = 'large'
    EXTRA_LARGE = 'extra_large'


@unique
class EdgeType(str, Enum):
    DEDICATED = 'dedicated'
    SHARED = 'shared'


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class VDCDirectorSiteCluster:
    id: str = required_field()


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class NewVDCDirectorSite:
    """Director site on which a new VDC is deployed."""

    id: str = required_field()
    cluster: VDCDirectorSiteCluster = required_field()


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class NewVDCEdge:
    """Edge gateway requested for a new VDC."""

    type: str = required_field()
    size: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class NewVDCResourceGroup:
    id: str = required_field()


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class VDCDirectorSite:
    id: Optional[str] = None
    cluster: Optional[VDCDirectorSiteCluster] = None
    url: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class Edge:
    id: Optional[str] = None
    public_ips: Optional[List[str]] = None
    size: Optional[str] = None
    type: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class Error:
    code: Optional[str] = None
    message: Optional[str] = None
    more_info: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class VDC:
    id: Optional[str] = None
    allocation_model: Optional[str] = None
    created_time: Optional[datetime] = datetime_field()
    crn: Optional[str] = None
    deleted_time: Optional[datetime] = datetime_field()
    director_site: Optional[VDCDirectorSite] = None
    edges: Optional[List[Edge]] = None
    errors: Optional[List[Error]] = None
    name: Optional[str] = None
    ordered_time: Optional[datetime] = datetime_field()
    org_name: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class ListVDCs:
    vdcs: Optional[List[VDC]] = None
