# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""Authenticators decorate outgoing requests with credentials."""

import base64

from vmaas_client.common.constants.config_constants import AuthType
import vmaas_client.common.constants.shared_constants as shared_constants
from vmaas_client.exception.exceptions import ConfigurationError
from vmaas_client.lib.iam.iam_token_service import IamTokenService

_AUTHORIZATION = shared_constants.RequestHeader.AUTHORIZATION.value


def has_bad_first_or_last_char(value):
    return value is not None and value != '' and \
        (value[0] in '{"' or value[-1] in '}"')


class Authenticator:
    """Base class for authenticators."""

    auth_type = None

    def authenticate(self, request, timeout=None):
        """Add credentials to a requests.Request before it is sent.

        :param timeout: bounds any request the authenticator makes to obtain
            its credentials
        """
        raise NotImplementedError()

    def validate(self):
        """Check the configuration.

        :raises ConfigurationError: if the configuration is invalid.
        """
        raise NotImplementedError()


class NoAuthAuthenticator(Authenticator):
    auth_type = AuthType.NOAUTH.value

    def authenticate(self, request, timeout=None):
        pass

    def validate(self):
        pass


class BasicAuthenticator(Authenticator):
    auth_type = AuthType.BASIC.value

    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password
        self.validate()
        credentials = f"{username}:{password}".encode('utf-8')
        self._authorization = \
            f"Basic {base64.b64encode(credentials).decode('ascii')}"

    def validate(self):
        if not self.username or not self.password:
            raise ConfigurationError(
                "The username and password shouldn't be None or empty.")
        if has_bad_first_or_last_char(self.username) or \
                has_bad_first_or_last_char(self.password):
            raise ConfigurationError(
                "The username and password shouldn't start or end with "
                "curly brackets or quotes. Please remove any surrounding {, }"
                ", or \" characters.")

    def authenticate(self, request, timeout=None):
        request.headers[_AUTHORIZATION] = self._authorization


class BearerTokenAuthenticator(Authenticator):
    auth_type = AuthType.BEARER_TOKEN.value

    def __init__(self, bearer_token: str):
        self.bearer_token = bearer_token
        self.validate()

    def validate(self):
        if not self.bearer_token:
            raise ConfigurationError(
                "The bearer token shouldn't be None or empty.")

    def set_bearer_token(self, bearer_token: str):
        self.bearer_token = bearer_token
        self.validate()

    def authenticate(self, request, timeout=None):
        request.headers[_AUTHORIZATION] = f"Bearer {self.bearer_token}"


class IamAuthenticator(Authenticator):
    auth_type = AuthType.IAM.value

    def __init__(self,
                 apikey: str,
                 url: str = None,
                 client_id: str = None,
                 client_secret: str = None,
                 disable_ssl_verification: bool = False,
                 scope: str = None):
        self.token_service = IamTokenService(
            apikey=apikey,
            url=url,
            client_id=client_id,
            client_secret=client_secret,
            scope=scope,
            disable_ssl_verification=disable_ssl_verification)
        self.validate()

    def validate(self):
        token_service = self.token_service
        if not token_service.apikey:
            raise ConfigurationError("The apikey shouldn't be None.")
        if has_bad_first_or_last_char(token_service.apikey):
            raise ConfigurationError(
                "The apikey shouldn't start or end with curly brackets or "
                "quotes. Please remove any surrounding {, }, or \" "
                "characters.")
        if bool(token_service.client_id) != \
                bool(token_service.client_secret):
            raise ConfigurationError(
                "Both client_id and client_secret should be initialized.")

    def authenticate(self, request, timeout=None):
        request.headers[_AUTHORIZATION] = \
            f"Bearer {self.token_service.get_token(timeout=timeout)}"
