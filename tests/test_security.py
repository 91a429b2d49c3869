# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

import logging

from vmaas_client.logging.logger import CLIENT_WIRE_LOGGER
from vmaas_client.logging.logger import CLIENT_WIRE_LOGGER_NAME
from vmaas_client.security.security import RedactingFilter


def test_redact_dictionary_keys():
    redacted = RedactingFilter().redact({
        'Authorization': 'Bearer secret-token',
        'Accept': 'application/json',
        'nested': {'password': 'hunter2'}
    })

    assert redacted == {
        'Authorization': '[REDACTED]',
        'Accept': 'application/json',
        'nested': {'password': '[REDACTED]'}
    }


def test_redact_form_body():
    redacted = RedactingFilter().redact(
        'grant_type=urn%3Aibm&apikey=my-api-key&response_type=cloud_iam')

    assert 'my-api-key' not in redacted
    assert 'apikey=[REDACTED]' in redacted
    assert 'response_type=cloud_iam' in redacted


def test_redact_header_dump():
    redacted = RedactingFilter().redact(
        "{'User-Agent': 'vmaas-client/1.0.0', "
        "'Authorization': 'Bearer secret-token'}")

    assert 'secret-token' not in redacted
    assert 'vmaas-client/1.0.0' in redacted


def test_redact_json_body():
    redacted = RedactingFilter().redact('{"password": "new-password"}')

    assert 'new-password' not in redacted


def test_redact_iterables():
    redacted = RedactingFilter().redact(['password: abc', 'plain'])

    assert redacted == ('password: [REDACTED]', 'plain')


def test_filter_redacts_record():
    record = logging.LogRecord('test', logging.DEBUG, __file__, 1,
                               'Request headers : %s',
                               ({'Authorization': 'Basic dXNlcjpwYXNz'},),
                               None)

    assert RedactingFilter().filter(record)
    assert 'dXNlcjpwYXNz' not in record.getMessage()


def test_wire_logger_redacts_without_file_handlers(caplog):
    caplog.set_level(logging.DEBUG, logger=CLIENT_WIRE_LOGGER_NAME)

    CLIENT_WIRE_LOGGER.debug("Request headers : %s",
                             {'Authorization': 'Bearer secret-token'})

    assert 'secret-token' not in caplog.text
    assert '[REDACTED]' in caplog.text
