# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""Basic utility methods to perform data transformation."""

import os
import platform

import vmaas_client.common.constants.shared_constants as shared_constants


def run_once(f):
    """Ensure that a function is only run once using this decorator."""
    def wrapper(*args, **kwargs):
        if not wrapper.has_run:
            wrapper.has_run = True
            return f(*args, **kwargs)
    wrapper.has_run = False
    return wrapper


def str_to_bool(s):
    """Convert string boolean values to bool.

    The conversion is case insensitive.

    :param s: input string

    :return: True if val is 'true' otherwise False
    """
    return str(s).lower() == 'true'


def is_environment_variable_enabled(env_var_name):
    """Check if the environment variable is set.

    :param str env_var_name: Name of the environment variable
    :rtype: bool
    """
    return str_to_bool(os.getenv(env_var_name))


def get_user_agent():
    return f"{shared_constants.SDK_NAME}/{shared_constants.SDK_VERSION} " \
           f"(lang=python; arch={platform.machine()}; " \
           f"os={platform.system()}; python.version={platform.python_version()})"  # noqa: E501


def get_sdk_headers(service_name, service_version, operation_id):
    """Get the headers sent with every request of an operation.

    :param str service_name: name of the service, e.g.
        v_mware_as_a_service_api
    :param str service_version: version of the service, e.g. V1
    :param str operation_id: name of the operation, e.g. ListDirectorSites

    :rtype: dict
    """
    return {
        shared_constants.RequestHeader.USER_AGENT.value: get_user_agent(),
        shared_constants.RequestHeader.SDK_ANALYTICS.value:
            f"service_name={service_name};"
            f"service_version={service_version};"
            f"operation_id={operation_id}"
    }
