#!/usr/bin/env python3
"""
Configuration for the Demo Access Gate service.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Access code
ACCESS_CODE_ENV_VAR = "DEMO_ACCESS_CODE"
DEFAULT_ACCESS_CODE = "demo2024"

# Default values
DEFAULT_PORT = 5000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "INFO"

SERVICE_NAME = "demo-access-gate"
DEMO_ACCESS_ROUTE = "/api/auth/demo-access"

# Response messages (user-facing, no internal details)
RESPONSE_MESSAGES = {
    "code_required": "Access code is required",
    "access_granted": "Access granted",
    "invalid_code": "Invalid access code",
    "internal_error": "Internal server error",
    "not_found": "Not found",
    "method_not_allowed": "Method not allowed",
}

# Logging configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class GateConfig:
    """Process-wide settings, resolved once at startup."""

    access_code: str = DEFAULT_ACCESS_CODE
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    debug: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def _resolve_log_level(value: str) -> str:
    """Return a known logging level name, or the default for anything else"""
    level = value.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


def load_config(environ: Optional[Mapping[str, str]] = None) -> GateConfig:
    """
    Build a GateConfig from environment variables

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Resolved configuration
    """
    env = os.environ if environ is None else environ

    # An empty DEMO_ACCESS_CODE falls back to the default as well
    access_code = env.get(ACCESS_CODE_ENV_VAR) or DEFAULT_ACCESS_CODE

    return GateConfig(
        access_code=access_code,
        host=env.get("HOST", DEFAULT_HOST),
        port=int(env.get("PORT", DEFAULT_PORT)),
        debug=env.get("DEBUG", "False").lower() == "true",
        log_level=_resolve_log_level(env.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)),
    )
