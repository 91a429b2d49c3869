# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

import vmaas_client.common.constants.shared_constants as shared_constants


class VmaasError(Exception):
    """Base class for all vmaas client exceptions.

    ``response`` is the raw ``requests.Response`` when the error was raised
    after a response was received, otherwise None.
    """

    def __init__(self, message=None, response=None):
        self.message = message
        self.response = response
        super().__init__(message)

    def __str__(self):
        return str(self.message)


class ValidationError(VmaasError):
    """Raised when an operation is invoked with invalid or missing input.

    No request is sent when this error is raised.
    """


class ConfigurationError(VmaasError):
    """Raised when a service or authenticator can't be configured."""


class TransportError(VmaasError):
    """Raised when the request could not be sent or timed out."""

    def __init__(self, message=None, cause=None):
        super().__init__(message)
        self.cause = cause


class ResponseProcessingError(VmaasError):
    """Raised when a successful response body can't be decoded."""

    def __init__(self, message=None, response=None, cause=None):
        super().__init__(message, response)
        self.cause = cause

    @property
    def status_code(self):
        return self.response.status_code if self.response is not None \
            else None


class ServiceResponseError(VmaasError):
    """Raised when the service replies with a non 2xx status code."""

    def __init__(self, status_code, message=None, response=None):
        if not message:
            message = shared_constants.UNKNOWN_ERROR_MESSAGE
        super().__init__(message, response)
        self.status_code = status_code

    def __str__(self):
        return f"Error: {self.message}, Status code: {self.status_code}"


class AuthenticationError(ServiceResponseError):
    """Raised when an access token could not be obtained."""
