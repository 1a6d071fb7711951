#!/usr/bin/env python3
"""
Demo access gate.
Compares a client-submitted access code with the configured secret and turns
the outcome into a typed AccessResult. Nothing is raised to the caller.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Union

from access_gate.models.access_result import (
    AccessRequest,
    AccessResult,
    MalformedRequestError,
    UnexpectedFaultError,
)

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_access_request(raw_body: Union[bytes, str, None]) -> AccessRequest:
    """
    Parse a raw request body into an AccessRequest

    Raises:
        MalformedRequestError: If the body is unreadable, not JSON, or JSON null
    """
    if raw_body is None:
        raise MalformedRequestError("Request body is empty")

    try:
        data = json.loads(raw_body, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedRequestError(f"Request body is not valid JSON: {e}") from e

    if data is None:
        raise MalformedRequestError("Request body is JSON null")

    return AccessRequest.from_dict(data)


class AccessGate:
    """Single-secret access check. Holds no per-request state."""

    def __init__(self, access_code: str):
        if not access_code:
            raise ValueError("access_code must be a non-empty string")
        self._access_code = access_code

    def check(self, access_request: AccessRequest) -> AccessResult:
        """Decide on an already parsed request"""
        if access_request.is_missing:
            return AccessResult.missing_code()

        if access_request.access_code == self._access_code:
            return AccessResult.granted_result()

        return AccessResult.denied()

    def handle(self, raw_body: Union[bytes, str, None]) -> AccessResult:
        """
        Evaluate one raw request body

        Args:
            raw_body: Body bytes (or text) as received

        Returns:
            AccessResult with status code and JSON body
        """
        try:
            access_request = parse_access_request(raw_body)
            return self.check(access_request)
        except MalformedRequestError as e:
            logger.error(f"Error verifying demo access: {e}")
            return AccessResult.internal_error(e)
        except Exception as e:
            logger.error(f"Error verifying demo access: {e}", exc_info=True)
            return AccessResult.internal_error(UnexpectedFaultError(str(e)))
