"""
Core modules for the Valuation Desk.

Contains data models, shared constants, SQLite helpers and session stores.
"""

from valuationdesk.core.constants import (
    MALAYSIAN_STATES,
    DEFAULT_REQUESTER_NAME,
)
from valuationdesk.core.models import (
    PropertyType,
    RequestStatus,
    State,
    User,
    Session,
    CreateRequestPayload,
    ValuationRequest,
)
from valuationdesk.core.session_store import (
    SessionStore,
    MemorySessionStore,
    SqliteSessionStore,
    create_session_store,
)

__all__ = [
    "MALAYSIAN_STATES",
    "DEFAULT_REQUESTER_NAME",
    "PropertyType",
    "RequestStatus",
    "State",
    "User",
    "Session",
    "CreateRequestPayload",
    "ValuationRequest",
    "SessionStore",
    "MemorySessionStore",
    "SqliteSessionStore",
    "create_session_store",
]
