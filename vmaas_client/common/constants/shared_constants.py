# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""Constants shared between the client library and the CLI."""

from enum import Enum
from enum import unique


SDK_NAME = 'vmaas-client'
SDK_VERSION = '1.0.0'

DEFAULT_SERVICE_URL = 'https://v-mware-as-a-service-api.cloud.ibm.com/v1'
DEFAULT_SERVICE_NAME = 'v_mware_as_a_service_api'
SERVICE_VERSION = 'V1'

# error messages
ERROR_SERVICE_URL_MISSING = 'service URL is missing'
ERROR_DEADLINE_EXCEEDED = 'deadline exceeded'
UNKNOWN_ERROR_MESSAGE = 'Unknown error'

# keys looked up in json error bodies, in order
ERROR_RESPONSE_KEYS = ['error', 'message', 'errorMessage']
ERRORS_KEY = 'errors'
RESPONSE_MESSAGE_KEY = 'message'


@unique
class RequestMethod(str, Enum):
    GET = 'GET'
    HEAD = 'HEAD'
    POST = 'POST'
    PUT = 'PUT'
    DELETE = 'DELETE'
    OPTIONS = 'OPTIONS'
    PATCH = 'PATCH'


@unique
class RequestHeader(str, Enum):
    ACCEPT = 'Accept'
    ACCEPT_LANGUAGE = 'Accept-Language'
    AUTHORIZATION = 'Authorization'
    CONTENT_ENCODING = 'Content-Encoding'
    CONTENT_TYPE = 'Content-Type'
    SDK_ANALYTICS = 'X-IBMCloud-SDK-Analytics'
    TRANSACTION_ID = 'X-Global-Transaction-ID'
    USER_AGENT = 'User-Agent'


@unique
class MediaType(str, Enum):
    JSON = 'application/json'
    JSON_PATCH = 'application/json-patch+json'
    MERGE_PATCH = 'application/merge-patch+json'
    FORM_URLENCODED = 'application/x-www-form-urlencoded'


@unique
class OutputFormat(str, Enum):
    YAML = 'yaml'
    JSON = 'json'
