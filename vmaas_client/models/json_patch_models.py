# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""JSON Patch (RFC 6902) operations and helpers to build them."""

from collections import OrderedDict
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from enum import unique
from typing import Any, List, Optional

from dataclasses_json import config
from dataclasses_json import dataclass_json
from dataclasses_json import Undefined

from vmaas_client.common.utils.model_utils import model_to_dict
from vmaas_client.common.utils.model_utils import required_field
from vmaas_client.models.director_site_models import UpdateClusterResponse


@unique
class PatchOperation(str, Enum):
    ADD = 'add'
    REMOVE = 'remove'
    REPLACE = 'replace'
    MOVE = 'move'
    COPY = 'copy'
    TEST = 'test'


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class JSONPatchOperation:
    """A single JSON Patch operation."""

    op: str = required_field()
    path: str = required_field()
    from_: Optional[str] = field(default=None,
                                 metadata=config(field_name='from'))
    value: Optional[Any] = None


# field name -> JSON pointer, in the order operations are emitted
UPDATE_CLUSTER_RESPONSE_PATCH_PATHS = OrderedDict([
    ('message', '/message'),
])


def create_patch(old, new, path_map) -> List[JSONPatchOperation]:
    """Compute the JSON Patch turning ``old`` into ``new``.

    Both objects must be instances of the same model. Only the fields named in
    ``path_map`` are compared, one operation is emitted per differing field:
    ``add`` when the field is only set on ``new``, ``remove`` when it is only
    set on ``old`` and ``replace`` when the values differ.

    :param old: original model instance, None is treated as a model with no
        field set.
    :param new: updated model instance
    :param OrderedDict path_map: field name to JSON pointer mapping

    :rtype: List[JSONPatchOperation]
    """
    if old is not None and new is not None and type(old) is not type(new):
        raise TypeError(f"Cannot diff {type(old).__name__} against "
                        f"{type(new).__name__}")
    patch = []
    for field_name, path in path_map.items():
        old_value = getattr(old, field_name, None)
        new_value = getattr(new, field_name, None)
        if old_value == new_value:
            continue
        if old_value is None:
            patch.append(JSONPatchOperation(
                op=PatchOperation.ADD.value,
                path=path,
                value=model_to_dict(new_value)))
        elif new_value is None:
            patch.append(JSONPatchOperation(
                op=PatchOperation.REMOVE.value,
                path=path))
        else:
            patch.append(JSONPatchOperation(
                op=PatchOperation.REPLACE.value,
                path=path,
                value=model_to_dict(new_value)))
    return patch


def new_update_cluster_response_patch(
        update_cluster_response: UpdateClusterResponse):
    """Build the patch that sets every populated field of the response."""
    return create_patch(None, update_cluster_response,
                        UPDATE_CLUSTER_RESPONSE_PATCH_PATHS)
