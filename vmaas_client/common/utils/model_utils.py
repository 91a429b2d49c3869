# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""Helpers shared by the request and response models."""

import dataclasses
from datetime import datetime

from dataclasses_json import config

from vmaas_client.exception.exceptions import ValidationError


def _encode_datetime(value):
    if value is None:
        return None
    return value.isoformat().replace('+00:00', 'Z')


def _decode_datetime(value):
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace('Z', '+00:00'))


def datetime_field():
    """Dataclass field holding an RFC 3339 timestamp."""
    return dataclasses.field(
        default=None,
        metadata=config(encoder=_encode_datetime, decoder=_decode_datetime))


def required_field(**kwargs):
    """Dataclass field that must be set before a request is sent.

    :param bool non_empty: also reject the empty string, used for path
        parameters.
    """
    non_empty = kwargs.pop('non_empty', False)
    metadata = dict(kwargs.pop('metadata', {}))
    metadata['required'] = True
    metadata['non_empty'] = non_empty
    return dataclasses.field(metadata=metadata, **kwargs)


def _wire_name(field):
    letter_case = field.metadata.get('dataclasses_json', {}).get('letter_case')
    return letter_case(field.name) if letter_case else field.name


def _strip_unset(value, encoded):
    if dataclasses.is_dataclass(value):
        return model_to_dict(value)
    if isinstance(value, list):
        return [_strip_unset(item, encoded_item)
                for item, encoded_item in zip(value, encoded)]
    if isinstance(value, dict):
        return {k: _strip_unset(v, encoded[k]) for k, v in value.items()}
    return encoded


def model_to_dict(model):
    """Convert a model (or a list/dict of models) to a json ready dict.

    Unset fields of models are omitted. None values held in plain dicts and
    lists are kept, they are meaningful in merge patches and patch values.
    """
    if isinstance(model, list):
        return [model_to_dict(item) for item in model]
    if isinstance(model, dict):
        return {k: model_to_dict(v) for k, v in model.items()}
    if not dataclasses.is_dataclass(model):
        return model
    encoded = model.to_dict(encode_json=True)
    result = {}
    for field in dataclasses.fields(model):
        value = getattr(model, field.name)
        if value is None:
            continue
        name = _wire_name(field)
        result[name] = _strip_unset(value, encoded[name])
    return result


def validate_required(obj, name):
    """Validate the required fields of a dataclass instance.

    Nested dataclasses, including the ones held in lists, are validated too.

    :param obj: dataclass instance to validate
    :param str name: name used in the error message

    :raises ValidationError: if a required field is unset, or a non empty
        field is the empty string.
    """
    if obj is None:
        raise ValidationError(f"{name} cannot be None")
    if not dataclasses.is_dataclass(obj):
        return
    for field in dataclasses.fields(obj):
        value = getattr(obj, field.name)
        if field.metadata.get('required'):
            if value is None:
                raise ValidationError(
                    f"{name}: required field '{field.name}' is not set")
            if field.metadata.get('non_empty') and value == '':
                raise ValidationError(
                    f"{name}: field '{field.name}' cannot be empty")
        if dataclasses.is_dataclass(value):
            validate_required(value, f"{name}.{field.name}")
        elif isinstance(value, list):
            for index, item in enumerate(value):
                if dataclasses.is_dataclass(item):
                    validate_required(item, f"{name}.{field.name}[{index}]")
