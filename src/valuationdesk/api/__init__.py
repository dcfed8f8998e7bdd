"""
Flask REST API for the valuation desk.

Provides endpoints for:
- Login, logout and session state
- The reference state list
- Listing and creating valuation requests
"""

from valuationdesk.api.server import create_app
from valuationdesk.api.routes import register_routes

__all__ = [
    "create_app",
    "register_routes",
]
