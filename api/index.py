#!/usr/bin/env python3
"""WSGI entry point for Vercel deployment."""

import logging
import sys
from http.server import BaseHTTPRequestHandler
from io import BytesIO
from typing import Dict, List, Tuple
from urllib.parse import urlsplit

from access_gate.server import app

logger = logging.getLogger(__name__)

wsgi_app = app


def build_environ(method: str, path: str, headers, body: bytes, protocol: str = "HTTP/1.1") -> dict:
    """Translate a raw HTTP request into a WSGI environ"""
    split_url = urlsplit(path)
    environ = {
        "wsgi.version": (1, 0),
        "wsgi.url_scheme": "https",
        "wsgi.input": BytesIO(body),
        "wsgi.errors": sys.stderr,
        "wsgi.multithread": False,
        "wsgi.multiprocess": False,
        "wsgi.run_once": False,
        "REQUEST_METHOD": method,
        "SCRIPT_NAME": "",
        "PATH_INFO": split_url.path,
        "QUERY_STRING": split_url.query or "",
        "SERVER_NAME": headers.get("host", "localhost").split(":")[0],
        "SERVER_PORT": "443",
        "SERVER_PROTOCOL": protocol,
        "CONTENT_TYPE": headers.get("content-type", ""),
        "CONTENT_LENGTH": str(len(body)),
    }

    for key, value in headers.items():
        header_key = f"HTTP_{key.upper().replace('-', '_')}"
        if header_key in ("HTTP_CONTENT_TYPE", "HTTP_CONTENT_LENGTH"):
            continue
        environ[header_key] = value

    if "HTTP_X_FORWARDED_PROTO" in environ:
        environ["wsgi.url_scheme"] = environ["HTTP_X_FORWARDED_PROTO"]

    return environ


def call_wsgi(environ: dict) -> Tuple[int, str, List[Tuple[str, str]], bytes]:
    """Run the Flask app for one request and collect the response"""
    status_headers: Dict[str, object] = {}
    chunks: List[bytes] = []

    def start_response(status: str, response_headers: List[Tuple[str, str]], exc_info=None):
        status_headers["status"] = status
        status_headers["headers"] = list(response_headers)
        return chunks.append

    result = wsgi_app(environ, start_response)
    try:
        for data in result:
            chunks.append(data if isinstance(data, bytes) else data.encode("utf-8"))
    finally:
        if hasattr(result, "close"):
            result.close()

    status = str(status_headers.get("status", "500 Internal Server Error"))
    status_code, _, status_text = status.partition(" ")
    return int(status_code), status_text, status_headers.get("headers", []), b"".join(chunks)


class handler(BaseHTTPRequestHandler):
    server_version = "VercelPythonWSGI/1.0"

    def _read_body(self) -> bytes:
        length = int(self.headers.get("content-length", 0) or 0)
        if length > 0:
            return self.rfile.read(length)
        return b""

    def _dispatch(self):
        body = self._read_body()
        environ = build_environ(self.command, self.path, self.headers, body, self.request_version)
        status_code, status_text, headers, payload = call_wsgi(environ)

        self.send_response(status_code, status_text)
        header_names = {name.lower() for name, _ in headers}
        if "content-length" not in header_names:
            headers.append(("Content-Length", str(len(payload))))
        for name, value in headers:
            self.send_header(name, value)
        self.end_headers()
        if payload:
            self.wfile.write(payload)

    def do_OPTIONS(self):
        self._dispatch()

    def do_GET(self):
        self._dispatch()

    def do_POST(self):
        self._dispatch()

    def do_PUT(self):
        self._dispatch()

    def do_DELETE(self):
        self._dispatch()

    def do_PATCH(self):
        self._dispatch()

    def log_message(self, format, *args):
        logger.info(f"{self.address_string()} - {format % args}")
