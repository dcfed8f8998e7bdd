"""
Application controller and request filtering.
"""

from valuationdesk.controller.app_controller import AppController, SubmissionResult, ViewPhase
from valuationdesk.controller.filters import RequestFilters, filter_requests

__all__ = [
    "AppController",
    "SubmissionResult",
    "ViewPhase",
    "RequestFilters",
    "filter_requests",
]
