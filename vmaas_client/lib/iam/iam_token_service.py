# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

import json
import logging
import threading
import time

import requests

import vmaas_client.common.constants.config_constants as config_constants
import vmaas_client.common.constants.shared_constants as shared_constants
from vmaas_client.exception.exceptions import AuthenticationError
from vmaas_client.exception.exceptions import TransportError
from vmaas_client.logging.logger import NULL_LOGGER


class IamTokenService:
    """API client for the IAM /identity/token endpoint.

    Exchanges an API key for an access token and caches the token until
    IAM_REFRESH_WINDOW of its lifetime has elapsed. Token requests are
    serialized so that concurrent callers share one exchange.
    """

    def __init__(self,
                 apikey: str,
                 url: str = None,
                 client_id: str = None,
                 client_secret: str = None,
                 scope: str = None,
                 disable_ssl_verification: bool = False,
                 logger_wire: logging.Logger = NULL_LOGGER):
        self.apikey = apikey
        self.url = (url or config_constants.DEFAULT_IAM_URL).rstrip('/')
        self.client_id = client_id
        self.client_secret = client_secret
        self.scope = scope
        self.disable_ssl_verification = disable_ssl_verification
        self.LOGGER_WIRE = logger_wire

        self._lock = threading.Lock()
        self._access_token = None
        self._refresh_time = 0
        self._expire_time = 0

    def _get_token_url(self):
        url = self.url
        if not url.endswith(config_constants.IAM_TOKEN_PATH):
            url += config_constants.IAM_TOKEN_PATH
        return url

    def request_token(self, timeout=None):
        """Request a new access token from IAM.

        :param timeout: seconds, either a number or a (connect, read) tuple.
            DEFAULT_TIMEOUT is used when not set.

        :return: token response body with keys access_token, expires_in,
            expiration, token_type and refresh_token.
        :rtype: dict

        :raises AuthenticationError: if IAM rejects the request or its
            response carries no access token.
        :raises TransportError: if IAM can't be reached or doesn't answer
            in time.
        """
        payload = {
            'grant_type': config_constants.IAM_APIKEY_GRANT_TYPE,
            'apikey': self.apikey,
            'response_type': 'cloud_iam'
        }
        if self.scope:
            payload['scope'] = self.scope
        headers = {
            shared_constants.RequestHeader.ACCEPT.value:
                shared_constants.MediaType.JSON.value,
            shared_constants.RequestHeader.CONTENT_TYPE.value:
                shared_constants.MediaType.FORM_URLENCODED.value
        }
        auth = None
        if self.client_id and self.client_secret:
            auth = (self.client_id, self.client_secret)
        if timeout is None:
            timeout = config_constants.DEFAULT_TIMEOUT

        token_url = self._get_token_url()
        self.LOGGER_WIRE.debug(f"Request uri : POST {token_url}")
        try:
            response = requests.request(
                shared_constants.RequestMethod.POST.value,
                token_url,
                headers=headers,
                data=payload,
                auth=auth,
                timeout=timeout,
                verify=not self.disable_ssl_verification)
        except requests.exceptions.Timeout as err:
            raise TransportError(
                f"{shared_constants.ERROR_DEADLINE_EXCEEDED}: IAM token "
                f"request to {token_url} timed out: {err}", cause=err)
        except requests.exceptions.RequestException as err:
            raise TransportError(
                f"Unable to reach IAM token service: {err}", cause=err)

        self.LOGGER_WIRE.debug(f"Response status code: {response.status_code}")  # noqa: E501
        try:
            body = json.loads(response.text)
        except ValueError:
            body = None
        if not response.ok:
            message = response.text or response.reason
            if isinstance(body, dict):
                message = body.get('errorMessage') or \
                    body.get('message') or message
            raise AuthenticationError(response.status_code, message, response)
        if body is None:
            raise AuthenticationError(
                response.status_code,
                "IAM token response is not valid JSON",
                response)
        if not isinstance(body, dict) or not body.get('access_token'):
            raise AuthenticationError(
                response.status_code,
                "IAM token response has no access_token",
                response)
        return body

    def _save_token(self, token_response):
        self._access_token = token_response['access_token']
        now = time.time()
        expires_in = token_response.get('expires_in')
        expiration = token_response.get('expiration')
        if expires_in is None and expiration is not None:
            expires_in = expiration - now
        if expires_in is None:
            expires_in = 0
        self._expire_time = now + expires_in
        self._refresh_time = \
            now + expires_in * config_constants.IAM_REFRESH_WINDOW

    def _needs_refresh(self):
        return self._access_token is None or \
            time.time() >= self._refresh_time

    def get_token(self, timeout=None):
        """Return a valid access token, requesting a new one if needed.

        :param timeout: passed to request_token
        """
        if self._needs_refresh():
            with self._lock:
                if self._needs_refresh():
                    self._save_token(self.request_token(timeout=timeout))
        return self._access_token
