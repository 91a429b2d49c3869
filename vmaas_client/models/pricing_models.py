# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""Director site pricing and price quote models."""

from dataclasses import dataclass
from typing import List, Optional

from dataclasses_json import dataclass_json
from dataclasses_json import Undefined


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class DirectorSitePriceItem:
    price: Optional[float] = None
    quantity_tier: Optional[int] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class DirectorSitePriceListItem:
    country: Optional[str] = None
    currency: Optional[str] = None
    prices: Optional[List[DirectorSitePriceItem]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class DirectorSitePriceMetric:
    metric: Optional[str] = None
    description: Optional[str] = None
    price_list: Optional[List[DirectorSitePriceListItem]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class DirectorSitePricingInfo:
    director_site_pricing: Optional[List[DirectorSitePriceMetric]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class PriceInfoBaseCharge:
    name: Optional[str] = None
    currency: Optional[str] = None
    price: Optional[float] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class PriceInfoClusterSubItem:
    name: Optional[str] = None
    count: Optional[int] = None
    currency: Optional[str] = None
    price: Optional[float] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class PriceInfoClusterItem:
    name: Optional[str] = None
    currency: Optional[str] = None
    price: Optional[float] = None
    items: Optional[List[PriceInfoClusterSubItem]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class PriceInfoClusterCharge:
    name: Optional[str] = None
    currency: Optional[str] = None
    price: Optional[float] = None
    items: Optional[List[PriceInfoClusterItem]] = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass(frozen=True)
class DirectorSitePriceQuoteResponse:
    base_charge: Optional[PriceInfoBaseCharge] = None
    clusters: Optional[List[PriceInfoClusterCharge]] = None
    currency: Optional[str] = None
    total: Optional[float] = None
