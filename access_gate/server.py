#!/usr/bin/env python3
"""
Demo Access Gate Server.
Exposes the demo access check over HTTP and answers every route with JSON.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv
from flask import Flask, Response, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from access_gate.config import (
    DEFAULT_LOG_LEVEL,
    DEMO_ACCESS_ROUTE,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    RESPONSE_MESSAGES,
    SERVICE_NAME,
    GateConfig,
    load_config,
)
from access_gate.gate import AccessGate

PROJECT_ROOT = Path(__file__).resolve().parent.parent
env_path = PROJECT_ROOT / ".env"
if env_path.exists():
    load_dotenv(env_path)

logging.basicConfig(
    level=DEFAULT_LOG_LEVEL,
    format=LOG_FORMAT,
    datefmt=LOG_DATE_FORMAT,
)
logger = logging.getLogger(__name__)


def create_app(config: Optional[GateConfig] = None) -> Flask:
    """Build the Flask app around an AccessGate for the given configuration"""
    if config is None:
        config = load_config()

    app = Flask(__name__)
    CORS(app)
    app.config["GATE_CONFIG"] = config
    gate = AccessGate(config.access_code)

    @app.errorhandler(404)
    def not_found(error):
        return (
            jsonify(
                {
                    "error": RESPONSE_MESSAGES["not_found"],
                    "message": "The requested resource was not found",
                }
            ),
            404,
        )

    @app.errorhandler(405)
    def method_not_allowed(error):
        return (
            jsonify(
                {
                    "error": RESPONSE_MESSAGES["method_not_allowed"],
                    "message": f"{request.method} is not supported on {request.path}",
                }
            ),
            405,
        )

    @app.errorhandler(Exception)
    def handle_exception(error):
        if isinstance(error, HTTPException):
            return jsonify({"error": error.name, "message": error.description}), error.code
        logger.error(f"Unhandled exception: {error}", exc_info=True)
        return jsonify({"error": RESPONSE_MESSAGES["internal_error"]}), 500

    @app.route("/health", methods=["GET"])
    def health() -> Tuple[Response, int]:
        """Health check endpoint"""
        return jsonify({"status": "healthy", "service": SERVICE_NAME}), 200

    @app.route(DEMO_ACCESS_ROUTE, methods=["POST"])
    def demo_access() -> Tuple[Response, int]:
        """Check a demo access code

        Returns:
            Tuple of (JSON response, status code)
        """
        # Read raw so malformed bodies reach the gate instead of Flask's 400
        result = gate.handle(request.get_data(cache=False))
        if result.granted:
            logger.info("Demo access granted")
        else:
            logger.debug(f"Demo access not granted: {result.outcome.name}")
        return jsonify(result.body), result.status_code

    @app.route("/", methods=["GET"])
    def index() -> Response:
        """Describe the service"""
        return jsonify(
            {
                "service": SERVICE_NAME,
                "endpoints": {
                    f"POST {DEMO_ACCESS_ROUTE}": "Check a demo access code",
                    "GET /health": "Health check",
                },
            }
        )

    return app


app = create_app()


def main() -> None:
    """Run the Flask server"""
    config: GateConfig = app.config["GATE_CONFIG"]
    logging.getLogger().setLevel(config.log_level)

    logger.info("=" * 60)
    logger.info("Demo Access Gate Server")
    logger.info("=" * 60)
    logger.info(f"Server starting on http://{config.host}:{config.port}")
    logger.info(f"Debug mode: {config.debug}")
    logger.info(f"Access check: POST {DEMO_ACCESS_ROUTE}")
    logger.info("=" * 60)

    app.run(host=config.host, port=config.port, debug=config.debug)


if __name__ == "__main__":
    main()
