# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

from copy import copy
from copy import deepcopy
import gzip
import json
import logging
from typing import Dict, Optional
from urllib import parse

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

import vmaas_client.common.constants.config_constants as config_constants
import vmaas_client.common.constants.shared_constants as shared_constants
from vmaas_client.common.utils.core_utils import is_environment_variable_enabled  # noqa: E501
from vmaas_client.exception.exceptions import ConfigurationError
from vmaas_client.exception.exceptions import ResponseProcessingError
from vmaas_client.exception.exceptions import ServiceResponseError
from vmaas_client.exception.exceptions import TransportError
from vmaas_client.exception.exceptions import ValidationError
from vmaas_client.lib.core.authenticators import Authenticator
from vmaas_client.lib.core.authenticators import has_bad_first_or_last_char
from vmaas_client.logging.logger import CLIENT_LOGGER
from vmaas_client.logging.logger import CLIENT_WIRE_LOGGER
from vmaas_client.logging.logger import NULL_LOGGER


def get_wire_logger():
    if is_environment_variable_enabled(
            config_constants.ENV_VMAAS_CLIENT_WIRE_LOGGING):
        return CLIENT_WIRE_LOGGER
    return NULL_LOGGER


class DetailedResponse:
    """Outcome of a successful call.

    ``result`` is the decoded body, None when the body was empty.
    ``response`` is the raw requests.Response.
    """

    def __init__(self, result=None, response: requests.Response = None):
        self.result = result
        self.response = response

    def get_result(self):
        return self.result

    def get_headers(self):
        return self.response.headers if self.response is not None else None

    def get_status_code(self):
        return self.response.status_code if self.response is not None \
            else None

    def __str__(self):
        return json.dumps({'result': str(self.result),
                           'status_code': self.get_status_code()})


class BaseService:
    """HTTP core shared by the service clients.

    Owns the service URL, the authenticator and a requests.Session. Builds
    requests, applies authentication, compression, retries and timeouts
    and turns responses into DetailedResponse objects or exceptions.
    """

    def __init__(self,
                 service_url: str = None,
                 authenticator: Authenticator = None,
                 disable_ssl_verification: bool = False,
                 enable_gzip_compression: bool = False,
                 logger_debug: logging.Logger = CLIENT_LOGGER,
                 logger_wire: logging.Logger = None):
        if authenticator is None:
            raise ConfigurationError("authenticator must be provided")
        if not isinstance(authenticator, Authenticator):
            raise ConfigurationError(
                "authenticator should be of type Authenticator")
        authenticator.validate()
        self.authenticator = authenticator

        self.service_url = None
        self.set_service_url(service_url)
        self.disable_ssl_verification = disable_ssl_verification
        self.enable_gzip_compression = enable_gzip_compression
        self.default_headers: Dict[str, str] = {}
        self.timeout = config_constants.DEFAULT_TIMEOUT
        self.LOGGER = logger_debug
        self.LOGGER_WIRE = logger_wire or get_wire_logger()

        self._retry: Optional[Retry] = None
        self.session = requests.Session()

    def set_service_url(self, service_url: str):
        """Set the base url, a trailing slash is dropped.

        :raises ConfigurationError: if the url is malformed.
        """
        if service_url:
            if has_bad_first_or_last_char(service_url):
                raise ConfigurationError(
                    "The service url shouldn't start or end with curly "
                    "brackets or quotes. Be sure to remove any {, }, or \" "
                    "characters surrounding your service url")
            parsed = parse.urlparse(service_url)
            if parsed.scheme not in ('http', 'https') or not parsed.netloc:
                raise ConfigurationError(
                    f"Invalid service url: '{service_url}'")
            service_url = service_url.rstrip('/')
        self.service_url = service_url

    def get_service_url(self):
        return self.service_url

    def set_default_headers(self, headers: Dict[str, str]):
        if headers is not None and not isinstance(headers, dict):
            raise TypeError("headers should be a dictionary")
        self.default_headers = dict(headers or {})

    def set_enable_gzip_compression(self, should_enable_compression: bool):
        self.enable_gzip_compression = should_enable_compression

    def get_enable_gzip_compression(self):
        return self.enable_gzip_compression

    def set_disable_ssl_verification(self, status: bool = False):
        self.disable_ssl_verification = status

    def set_http_config(self, timeout=None):
        """Set the default timeout used when a call doesn't pass one.

        :param timeout: seconds, either a number or a (connect, read) tuple
        """
        if timeout is not None:
            self.timeout = timeout

    def enable_retries(self,
                       max_retries: int = config_constants.DEFAULT_MAX_RETRIES,
                       retry_interval: float = config_constants.DEFAULT_RETRY_INTERVAL):  # noqa: E501
        """Retry throttled and failed requests.

        429 and 5xx responses other than 501 are retried for every method
        with exponential backoff capped at retry_interval seconds. A
        Retry-After header takes precedence over the backoff. Read timeouts
        are raised immediately.
        """
        self._retry = Retry(
            total=max_retries,
            read=False,
            backoff_factor=config_constants.RETRY_BACKOFF_FACTOR,
            backoff_max=retry_interval,
            status_forcelist=config_constants.RETRY_STATUS_CODES,
            allowed_methods=None,
            respect_retry_after_header=True,
            raise_on_status=False)
        self._mount_adapters()

    def disable_retries(self):
        self._retry = None
        self._mount_adapters()

    def _mount_adapters(self):
        if self._retry is not None:
            adapter = HTTPAdapter(max_retries=self._retry)
        else:
            adapter = HTTPAdapter()
        self.session.mount('http://', adapter)
        self.session.mount('https://', adapter)

    def clone(self):
        """Return a copy with its own session and the same authenticator."""
        other = copy(self)
        other.default_headers = deepcopy(self.default_headers)
        other.session = requests.Session()
        if self._retry is not None:
            other._mount_adapters()
        return other

    def resolve_request_url(self, path: str, path_params: Dict[str, str] = None):  # noqa: E501
        """Expand path against the service url.

        Path parameters are url escaped.

        :raises ValidationError: if the service url isn't set.
        """
        if not self.service_url:
            raise ValidationError(shared_constants.ERROR_SERVICE_URL_MISSING)
        if path_params:
            escaped = {k: parse.quote(str(v), safe='')
                       for k, v in path_params.items()}
            path = path.format(**escaped)
        return self.service_url + path

    def prepare_request(self,
                        method: shared_constants.RequestMethod,
                        path: str,
                        path_params: Dict[str, str] = None,
                        headers: Dict[str, str] = None,
                        params: Dict[str, str] = None,
                        data=None) -> requests.Request:
        """Build the request for an operation.

        :param shared_constants.RequestMethod method: HTTP verb
        :param str path: path relative to the service url, with {name}
            placeholders for path parameters
        :param dict path_params: values for the placeholders
        :param dict headers: request headers, these override the default
            headers
        :param dict params: query parameters, None values are dropped
        :param data: request body, json encoded unless it is already a
            str or bytes

        :rtype: requests.Request

        :raises ValidationError: if the service url isn't set.
        """
        url = self.resolve_request_url(path, path_params)

        request_headers = deepcopy(self.default_headers)
        if headers:
            request_headers.update(headers)

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        if data is not None and not isinstance(data, (str, bytes)):
            data = json.dumps(data)
        if isinstance(data, str):
            data = data.encode('utf-8')

        return requests.Request(method.value,
                                url,
                                headers=request_headers,
                                params=params or None,
                                data=data)

    def _compress(self, request: requests.Request):
        content_encoding = \
            shared_constants.RequestHeader.CONTENT_ENCODING.value
        if not self.enable_gzip_compression or request.data is None:
            return
        if request.headers.get(content_encoding) == 'gzip':
            return
        request.data = gzip.compress(request.data)
        request.headers[content_encoding] = 'gzip'

    def send(self, request: requests.Request, timeout=None) -> DetailedResponse:  # noqa: E501
        """Send a prepared request and decode its response.

        :param requests.Request request: request built by prepare_request
        :param timeout: seconds, overrides the service default

        :return: result is the decoded json body, or None when the body is
            empty.
        :rtype: DetailedResponse

        :raises TransportError: if the request can't be sent or times out.
        :raises ServiceResponseError: if the status code is not 2xx.
        :raises ResponseProcessingError: if a 2xx body can't be decoded.
        """
        if timeout is None:
            timeout = self.timeout
        self.authenticator.authenticate(request, timeout=timeout)
        self._compress(request)
        prepared = self.session.prepare_request(request)
        settings = self.session.merge_environment_settings(
            prepared.url, {}, None, not self.disable_ssl_verification, None)

        self.LOGGER_WIRE.debug(f"Request uri : {prepared.method} {prepared.url}")  # noqa: E501
        self.LOGGER_WIRE.debug(f"Request headers : {prepared.headers}")
        self.LOGGER_WIRE.debug(f"Request body : {prepared.body}")
        try:
            response = self.session.send(
                prepared,
                timeout=timeout,
                **settings)
        except requests.exceptions.Timeout as err:
            self.LOGGER.debug(f"{prepared.method} {prepared.url}: {err}")
            raise TransportError(
                f"{shared_constants.ERROR_DEADLINE_EXCEEDED}: {err}",
                cause=err)
        except requests.exceptions.RequestException as err:
            self.LOGGER.debug(f"{prepared.method} {prepared.url}: {err}")
            raise TransportError(str(err), cause=err)

        self.LOGGER_WIRE.debug(f"Response status code: {response.status_code}")  # noqa: E501
        self.LOGGER_WIRE.debug(f"Response headers : {response.headers}")
        self.LOGGER_WIRE.debug(f"Response body : {response.text}")

        if not 200 <= response.status_code < 300:
            raise response_to_exception(response)
        return DetailedResponse(deserialize_response_content(response),
                                response)


def is_json_mimetype(mimetype):
    if not mimetype:
        return False
    mimetype = mimetype.split(';')[0].strip().lower()
    return mimetype == shared_constants.MediaType.JSON.value or \
        (mimetype.startswith('application/') and mimetype.endswith('+json'))


def deserialize_response_content(response: requests.Response):
    """Decode the json body of a successful response.

    :return: decoded body, None if the body is empty

    :raises ResponseProcessingError: if the body isn't json.
    """
    if not response.content:
        return None
    content_type = response.headers.get(
        shared_constants.RequestHeader.CONTENT_TYPE.value)
    if not is_json_mimetype(content_type):
        raise ResponseProcessingError(
            f"Unexpected response content type: '{content_type}'",
            response=response)
    try:
        return json.loads(response.content.decode('utf-8'))
    except ValueError as err:
        raise ResponseProcessingError(
            f"An error occurred while processing the operation response: "
            f"{err}",
            response=response,
            cause=err)


def _get_error_message(response_dict):
    errors = response_dict.get(shared_constants.ERRORS_KEY)
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        message = errors[0].get(shared_constants.RESPONSE_MESSAGE_KEY)
        if message:
            return message
    for key in shared_constants.ERROR_RESPONSE_KEYS:
        message = response_dict.get(key)
        if isinstance(message, str) and message:
            return message
    return None


def response_to_exception(response: requests.Response):
    """Return exception object with appropriate messages.

    :param requests.Response response: non 2xx response

    :rtype: ServiceResponseError
    """
    error_message = None
    content_type = response.headers.get(
        shared_constants.RequestHeader.CONTENT_TYPE.value)
    if response.content and is_json_mimetype(content_type):
        try:
            response_dict = json.loads(response.content.decode('utf-8'))
            if isinstance(response_dict, dict):
                error_message = _get_error_message(response_dict)
        except ValueError as err:
            CLIENT_LOGGER.debug(f"Unable to decode error response: {err}")

    if not error_message:
        if response.status_code == requests.codes.unauthorized:
            error_message = 'Unauthorized: Access is denied due to ' \
                            'invalid credentials.'
        elif response.status_code == requests.codes.too_many_requests:
            error_message = 'Server is busy. Please try again later.'
        else:
            error_message = response.reason

    return ServiceResponseError(response.status_code, error_message, response)
