# vmaas-client
# Copyright (c) 2022 VMware, Inc. All Rights Reserved.
# SPDX-License-Identifier: BSD-2-Clause

"""
conftest.py is used by pytest to automatically find shared fixtures.

Fixtures defined here can be used without importing.
"""
from collections import deque
from collections import namedtuple
from http.server import BaseHTTPRequestHandler
from http.server import ThreadingHTTPServer
import json
import os
import threading
import time
from urllib import parse

from click.testing import CliRunner
import pytest
from requests.structures import CaseInsensitiveDict

from vmaas_client.client.vmaas_api import VMwareAsAServiceApiV1
from vmaas_client.lib.core.authenticators import NoAuthAuthenticator

RecordedRequest = namedtuple('RecordedRequest',
                             'method path query headers body')
CannedResponse = namedtuple('CannedResponse', 'status headers body delay')


class _MockHandler(BaseHTTPRequestHandler):
    def _handle(self):
        length = int(self.headers.get('Content-Length') or 0)
        body = self.rfile.read(length) if length else b''
        parsed = parse.urlsplit(self.path)
        mock = self.server.mock
        mock.requests.append(RecordedRequest(
            method=self.command,
            path=parsed.path,
            query=parse.parse_qs(parsed.query),
            headers=CaseInsensitiveDict(self.headers.items()),
            body=body))

        canned = mock.next_response()
        if canned.delay:
            time.sleep(canned.delay)
        self.send_response(canned.status)
        for name, value in canned.headers.items():
            self.send_header(name, value)
        self.send_header('Content-Length', str(len(canned.body)))
        self.end_headers()
        if canned.body:
            self.wfile.write(canned.body)

    do_GET = _handle
    do_POST = _handle
    do_PUT = _handle
    do_PATCH = _handle
    do_DELETE = _handle

    def log_message(self, format, *args):
        pass


class _MockHTTPServer(ThreadingHTTPServer):
    daemon_threads = True

    def handle_error(self, request, client_address):
        # the client hung up first, e.g. after a timeout
        pass


class MockServer:
    """Local http server replying with canned responses.

    Responses queued with enqueue() are served first, in order. The
    response set with respond() is served once the queue is empty.
    Every received request is recorded in ``requests``.
    """

    def __init__(self):
        self.requests = []
        self._queue = deque()
        self._default = self._canned(200, None, None, 0)
        self._lock = threading.Lock()
        self._server = _MockHTTPServer(('127.0.0.1', 0), _MockHandler)
        self._server.mock = self
        self._thread = threading.Thread(target=self._server.serve_forever,
                                        daemon=True)

    @property
    def url(self):
        host, port = self._server.server_address[:2]
        return f"http://{host}:{port}"

    @staticmethod
    def _canned(status, body, headers, delay):
        headers = dict(headers or {})
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
            headers.setdefault('Content-Type', 'application/json')
        if isinstance(body, str):
            body = body.encode('utf-8')
        return CannedResponse(status, headers, body or b'', delay)

    def respond(self, status=200, body=None, headers=None, delay=0):
        self._default = self._canned(status, body, headers, delay)

    def enqueue(self, status=200, body=None, headers=None, delay=0):
        self._queue.append(self._canned(status, body, headers, delay))

    def next_response(self):
        with self._lock:
            if self._queue:
                return self._queue.popleft()
            return self._default

    @property
    def last_request(self):
        return self.requests[-1]

    def start(self):
        self._thread.start()

    def stop(self):
        self._server.shutdown()
        self._server.server_close()


@pytest.fixture
def mock_server():
    """Fixture to run a local http server for the duration of a test.

    Usage: add the parameter 'mock_server' to the test function, set the
        reply with mock_server.respond(...) and inspect
        mock_server.requests after the call.
    """
    server = MockServer()
    server.start()
    yield server
    server.stop()


@pytest.fixture
def service(mock_server):
    """Fixture to provide a client pointing at the mock server."""
    return VMwareAsAServiceApiV1(authenticator=NoAuthAuthenticator(),
                                 service_url=mock_server.url)


@pytest.fixture
def clean_environment(monkeypatch, tmp_path):
    """Fixture to isolate a test from the user's configuration.

    Removes the service environment variables and the credentials file
    variable, and points the home directory at an empty tmp directory.
    """
    for name in list(os.environ):
        if name.startswith('V_MWARE_AS_A_SERVICE_API_') or \
                name.startswith('VMAAS_'):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv('HOME', str(tmp_path))
    yield tmp_path


@pytest.fixture
def cli_runner():
    return CliRunner()
