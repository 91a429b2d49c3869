# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""Keys and defaults used to resolve client configuration."""

from enum import Enum
from enum import unique


# Client environment variables
ENV_VMAAS_CLIENT_WIRE_LOGGING = 'VMAAS_CLIENT_WIRE_LOGGING'
ENV_VMAAS_CREDENTIALS_FILE = 'VMAAS_CREDENTIALS_FILE'

DEFAULT_CREDENTIALS_FILE_NAME = 'credentials.yaml'
DEFAULT_CREDENTIALS_DIR_NAME = '.vmaas'

# retry policy defaults
DEFAULT_MAX_RETRIES = 4
DEFAULT_RETRY_INTERVAL = 30.0
RETRY_BACKOFF_FACTOR = 1.0
RETRY_STATUS_CODES = [429, 500, 502, 503, 504]

# seconds; (connect, read)
DEFAULT_TIMEOUT = (60.0, 60.0)

DEFAULT_IAM_URL = 'https://iam.cloud.ibm.com'
IAM_TOKEN_PATH = '/identity/token'
IAM_APIKEY_GRANT_TYPE = 'urn:ibm:params:oauth:grant-type:apikey'
# fraction of the token lifetime after which a token is refreshed
IAM_REFRESH_WINDOW = 0.8


@unique
class AuthType(str, Enum):
    NOAUTH = 'noauth'
    BASIC = 'basic'
    BEARER_TOKEN = 'bearertoken'
    IAM = 'iam'


@unique
class PropertyKey(str, Enum):
    """Service property names, lower-cased env var suffixes."""

    URL = 'url'
    AUTH_TYPE = 'auth_type'
    USERNAME = 'username'
    PASSWORD = 'password'
    BEARER_TOKEN = 'bearer_token'
    APIKEY = 'apikey'
    AUTH_URL = 'auth_url'
    CLIENT_ID = 'client_id'
    CLIENT_SECRET = 'client_secret'
    SCOPE = 'scope'
    AUTH_DISABLE_SSL = 'auth_disable_ssl'
    DISABLE_SSL = 'disable_ssl'
    ENABLE_GZIP = 'enable_gzip'
    ENABLE_RETRIES = 'enable_retries'
    MAX_RETRIES = 'max_retries'
    RETRY_INTERVAL = 'retry_interval'
