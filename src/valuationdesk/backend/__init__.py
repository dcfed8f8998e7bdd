"""
Mock valuation backend.

Simulates the remote service the application talks to: login/logout, the
reference state list, and listing/creating valuation requests.
"""

from valuationdesk.backend.mock_api import MockBackend, create_backend

__all__ = [
    "MockBackend",
    "create_backend",
]
