"""
Custom Exceptions for the Valuation Desk

Provides a hierarchy of exceptions for standardized error handling across all modules.

Exception Hierarchy:
    ValuationDeskError (base)
    ├── ConfigurationError
    ├── SessionStoreError
    │   └── SessionStoreConnectionError
    ├── AuthenticationError
    │   └── InvalidCredentialsError
    ├── ValidationError
    ├── DataLoadError
    └── ControllerStateError
"""

from typing import Dict, Optional


class ValuationDeskError(Exception):
    """Base exception for all Valuation Desk errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


# Configuration Errors
class ConfigurationError(ValuationDeskError):
    """Raised when there's a configuration problem."""

    pass


# Session Store Errors
class SessionStoreError(ValuationDeskError):
    """Base exception for session store errors."""

    pass


class SessionStoreConnectionError(SessionStoreError):
    """Raised when unable to open the session database."""

    pass


# Authentication Errors
class AuthenticationError(ValuationDeskError):
    """Base exception for login/session errors."""

    pass


class InvalidCredentialsError(AuthenticationError):
    """Raised when login is attempted with missing credentials.

    Deliberately carries no field name so callers can only report a
    generic login failure.
    """

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


# Validation Errors
class ValidationError(ValuationDeskError):
    """Raised when a request payload fails field validation."""

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        self.errors = dict(errors or {})
        super().__init__(message)

    @property
    def fields(self):
        """Names of the fields that failed."""
        return sorted(self.errors)


# Loading Errors
class DataLoadError(ValuationDeskError):
    """Raised when reference data or requests could not be loaded."""

    pass


# Controller Errors
class ControllerStateError(ValuationDeskError):
    """Raised when an operation is not allowed in the current view phase."""

    def __init__(self, message: str, phase: str = None):
        self.phase = phase
        super().__init__(message)
