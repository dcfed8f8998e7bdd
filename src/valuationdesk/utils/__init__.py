"""
Utility modules for the Valuation Desk.

Provides payload validation and the debounce timer used by search input.
"""

from valuationdesk.utils.debounce import Debouncer
from valuationdesk.utils.validation import (
    validate,
    is_valid,
    parse_payload,
)

__all__ = [
    "Debouncer",
    "validate",
    "is_valid",
    "parse_payload",
]
