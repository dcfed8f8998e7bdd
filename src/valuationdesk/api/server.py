"""
Flask Application Factory

Creates and configures the Flask application around a backend instance.
"""

from typing import Optional

from flask import Flask

from valuationdesk.api.routes import BACKEND_EXTENSION, register_routes
from valuationdesk.backend.mock_api import MockBackend, create_backend
from valuationdesk.config import get_config
from valuationdesk.logging_config import setup_logging, get_logger

logger = get_logger(__name__)


def create_app(test_config=None, backend: Optional[MockBackend] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        test_config: Optional test configuration dict.
        backend: Backend to serve. A new one is built from config if omitted.

    Returns:
        Configured Flask application.
    """
    config = get_config()

    setup_logging()

    app = Flask(__name__)
    app.config["DEBUG"] = config.api.debug
    # Keep response keys in insertion order
    app.json.sort_keys = False

    if test_config:
        app.config.update(test_config)

    # Enable CORS
    try:
        from flask_cors import CORS
        CORS(app)
    except ImportError:
        logger.warning("flask-cors not installed, CORS not enabled")

    app.extensions[BACKEND_EXTENSION] = backend if backend is not None else create_backend()

    register_routes(app)

    logger.info("Flask app created")
    return app


def run_server(host: str = None, port: int = None, debug: bool = None):
    """Run the Flask development server.

    Args:
        host: Host to bind to.
        port: Port to bind to.
        debug: Enable debug mode.
    """
    config = get_config()

    host = host or config.api.host
    port = port or config.api.port
    debug = debug if debug is not None else config.api.debug

    app = create_app()

    logger.info("Starting server on %s:%d", host, port)
    app.run(host=host, port=port, debug=debug)
