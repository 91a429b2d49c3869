# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""Resolve service properties from a credentials file or the environment.

Credentials file (yaml), keyed by service name:

    v_mware_as_a_service_api:
      url: https://v-mware-as-a-service-api.cloud.ibm.com/v1
      auth_type: iam
      apikey: <api key>

Environment variables use the upper cased service name as prefix, e.g.
V_MWARE_AS_A_SERVICE_API_URL, V_MWARE_AS_A_SERVICE_API_APIKEY.
"""

import os
from pathlib import Path

import yaml

import vmaas_client.common.constants.config_constants as config_constants
from vmaas_client.common.constants.config_constants import AuthType
from vmaas_client.common.constants.config_constants import PropertyKey
from vmaas_client.common.utils.core_utils import str_to_bool
from vmaas_client.exception.exceptions import ConfigurationError
from vmaas_client.lib.core.authenticators import BasicAuthenticator
from vmaas_client.lib.core.authenticators import BearerTokenAuthenticator
from vmaas_client.lib.core.authenticators import IamAuthenticator
from vmaas_client.lib.core.authenticators import NoAuthAuthenticator
from vmaas_client.logging.logger import CLIENT_LOGGER


def get_credentials_file_path():
    """Return the credentials file to read, None if there is none.

    :raises ConfigurationError: if VMAAS_CREDENTIALS_FILE names a missing
        file.
    """
    file_name = os.getenv(config_constants.ENV_VMAAS_CREDENTIALS_FILE)
    if file_name:
        if not Path(file_name).is_file():
            raise ConfigurationError(
                f"Credentials file '{file_name}' not found")
        return file_name
    default_path = Path.home() / config_constants.DEFAULT_CREDENTIALS_DIR_NAME / config_constants.DEFAULT_CREDENTIALS_FILE_NAME  # noqa: E501
    if default_path.is_file():
        return str(default_path)
    return None


def read_credentials_file(file_name, service_name):
    with open(file_name) as credentials_file:
        try:
            credentials = yaml.safe_load(credentials_file) or {}
        except yaml.YAMLError as err:
            raise ConfigurationError(
                f"Unable to parse credentials file '{file_name}': {err}")
    if not isinstance(credentials, dict):
        raise ConfigurationError(
            f"Credentials file '{file_name}' should hold a mapping")
    service_properties = credentials.get(service_name) or {}
    return {str(k).lower(): v for k, v in service_properties.items()}


def read_environment(service_name):
    prefix = f"{service_name.upper().replace('-', '_')}_"
    return {k[len(prefix):].lower(): v for k, v in os.environ.items()
            if k.startswith(prefix) and len(k) > len(prefix)}


def get_service_properties(service_name: str) -> dict:
    """Return the properties configured for service_name.

    The credentials file wins over the environment; the first source that
    has properties for the service is used.

    :param str service_name: e.g. v_mware_as_a_service_api

    :return: property name (lower case) to value
    :rtype: dict
    """
    if not service_name:
        raise ConfigurationError("Service name shouldn't be empty")
    file_name = get_credentials_file_path()
    if file_name:
        properties = read_credentials_file(file_name, service_name)
        if properties:
            CLIENT_LOGGER.debug(
                f"Read '{service_name}' properties from '{file_name}'")
            return properties
    properties = read_environment(service_name)
    if properties:
        CLIENT_LOGGER.debug(
            f"Read '{service_name}' properties from environment")
    return properties


def get_authenticator_from_environment(service_name: str):
    """Build the authenticator described by the service properties.

    auth_type defaults to iam when an apikey is configured.

    :raises ConfigurationError: if the auth type is missing or unknown or
        the credentials are invalid.
    """
    properties = get_service_properties(service_name)
    auth_type = properties.get(PropertyKey.AUTH_TYPE.value)
    if not auth_type:
        if properties.get(PropertyKey.APIKEY.value):
            auth_type = AuthType.IAM.value
        else:
            raise ConfigurationError(
                f"No authentication type configured for service "
                f"'{service_name}'")
    auth_type = str(auth_type).lower()

    if auth_type == AuthType.NOAUTH:
        return NoAuthAuthenticator()
    if auth_type == AuthType.BASIC:
        return BasicAuthenticator(
            properties.get(PropertyKey.USERNAME.value),
            properties.get(PropertyKey.PASSWORD.value))
    if auth_type == AuthType.BEARER_TOKEN:
        return BearerTokenAuthenticator(
            properties.get(PropertyKey.BEARER_TOKEN.value))
    if auth_type == AuthType.IAM:
        return IamAuthenticator(
            properties.get(PropertyKey.APIKEY.value),
            url=properties.get(PropertyKey.AUTH_URL.value),
            client_id=properties.get(PropertyKey.CLIENT_ID.value),
            client_secret=properties.get(PropertyKey.CLIENT_SECRET.value),
            disable_ssl_verification=str_to_bool(
                properties.get(PropertyKey.AUTH_DISABLE_SSL.value)),
            scope=properties.get(PropertyKey.SCOPE.value))
    raise ConfigurationError(
        f"Unrecognized authentication type '{auth_type}' for service "
        f"'{service_name}'")


def configure_service(service, service_name: str):
    """Apply url, ssl, gzip and retry properties to a service.

    :param vmaas_client.lib.core.base_service.BaseService service:
    :param str service_name:
    """
    properties = get_service_properties(service_name)
    url = properties.get(PropertyKey.URL.value)
    if url:
        service.set_service_url(url)
    if PropertyKey.DISABLE_SSL.value in properties:
        service.set_disable_ssl_verification(
            str_to_bool(properties[PropertyKey.DISABLE_SSL.value]))
    if PropertyKey.ENABLE_GZIP.value in properties:
        service.set_enable_gzip_compression(
            str_to_bool(properties[PropertyKey.ENABLE_GZIP.value]))
    if str_to_bool(properties.get(PropertyKey.ENABLE_RETRIES.value)):
        try:
            max_retries = int(properties.get(
                PropertyKey.MAX_RETRIES.value,
                config_constants.DEFAULT_MAX_RETRIES))
            retry_interval = float(properties.get(
                PropertyKey.RETRY_INTERVAL.value,
                config_constants.DEFAULT_RETRY_INTERVAL))
        except ValueError as err:
            raise ConfigurationError(
                f"Invalid retry configuration for service "
                f"'{service_name}': {err}")
        service.enable_retries(max_retries=max_retries,
                               retry_interval=retry_interval)
