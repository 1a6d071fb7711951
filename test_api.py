#!/usr/bin/env python3
"""Tests for the Vercel WSGI bridge"""

import http.client
import json
import threading
from http.server import HTTPServer

import pytest

from api.index import build_environ, call_wsgi, handler


def _request(method, path, body=b"", headers=None):
    headers = headers or {}
    headers.setdefault("host", "demo.example.com")
    if body:
        headers.setdefault("content-type", "application/json")
    return call_wsgi(build_environ(method, path, headers, body))


def test_build_environ():
    environ = build_environ(
        "POST",
        "/api/auth/demo-access?x=1",
        {"host": "demo.example.com:443", "content-type": "application/json", "x-forwarded-proto": "http"},
        b"{}",
    )
    assert environ["PATH_INFO"] == "/api/auth/demo-access"
    assert environ["QUERY_STRING"] == "x=1"
    assert environ["SERVER_NAME"] == "demo.example.com"
    assert environ["CONTENT_LENGTH"] == "2"
    assert environ["wsgi.url_scheme"] == "http"
    assert "HTTP_CONTENT_TYPE" not in environ


def test_health_through_bridge():
    status, _, _, payload = _request("GET", "/health")
    assert status == 200
    assert json.loads(payload)["status"] == "healthy"


def test_demo_access_through_bridge():
    status, _, headers, payload = _request("POST", "/api/auth/demo-access", b'{"accessCode": "wrong"}')
    assert status == 401
    assert json.loads(payload) == {"error": "Invalid access code", "accessGranted": False}
    assert any(name.lower() == "content-type" for name, _ in headers)


def test_malformed_body_through_bridge():
    status, _, _, payload = _request("POST", "/api/auth/demo-access", b"not json")
    assert status == 500
    assert json.loads(payload) == {"error": "Internal server error"}


@pytest.fixture
def loopback_server():
    server = HTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()


def _send(server, method, path, body=None):
    host, port = server.server_address
    conn = http.client.HTTPConnection(host, port, timeout=5)
    try:
        headers = {"Content-Type": "application/json"} if body is not None else {}
        conn.request(method, path, body=body, headers=headers)
        response = conn.getresponse()
        return response.status, response.read()
    finally:
        conn.close()


def test_handler_grants_access(loopback_server):
    status, payload = _send(loopback_server, "POST", "/api/auth/demo-access", b'{"accessCode": "demo2024"}')
    assert status == 200
    assert json.loads(payload) == {"message": "Access granted", "accessGranted": True}


@pytest.mark.parametrize("method", ["PUT", "DELETE", "PATCH"])
def test_handler_unsupported_method_is_json_405(loopback_server, method):
    """Every method reaches Flask, so unsupported ones get the JSON 405"""
    status, payload = _send(loopback_server, method, "/api/auth/demo-access", b"{}")
    assert status == 405
    assert json.loads(payload)["error"] == "Method not allowed"
