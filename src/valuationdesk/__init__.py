"""
Valuation Desk

Submit and browse property valuation requests against an in-memory mock
service with simulated network latency.

Main components:
- utils.validation: field rules for new requests
- backend: mock service holding states, requests and the session
- controller: login/logout, loading, filtering and submission
- api: Flask JSON facade over the backend
- cli: Command-line interfaces

Usage:
    from valuationdesk import config
    from valuationdesk.backend import MockBackend
    from valuationdesk.controller import AppController
"""

__version__ = "1.0.0"

from valuationdesk.config import get_config
from valuationdesk.logging_config import setup_logging

__all__ = [
    "__version__",
    "get_config",
    "setup_logging",
]
