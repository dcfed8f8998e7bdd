"""
Mock Valuation Backend

In-memory stand-in for the remote valuation service. Every asynchronous call
waits a short, fixed latency before answering so callers behave as they
would against a network API.

The store is an explicit object with an init/reset lifecycle rather than
module-level state, so tests and the HTTP facade each get their own.

Usage:
    backend = MockBackend().init()
    session = await backend.login("alice@example.com", "secret")
    created = await backend.create_request(payload)
"""

import asyncio
import secrets
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from valuationdesk.config import get_config
from valuationdesk.core.constants import (
    DEFAULT_REQUESTER_NAME,
    DEMO_REQUESTS,
    MALAYSIAN_STATES,
    REQUEST_ID_PREFIX,
    TOKEN_PREFIX,
    USER_ID_PREFIX,
)
from valuationdesk.core.models import (
    CreateRequestPayload,
    Session,
    State,
    User,
    ValuationRequest,
    find_state,
)
from valuationdesk.core.session_store import SessionStore, create_session_store
from valuationdesk.exceptions import InvalidCredentialsError
from valuationdesk.logging_config import get_logger

logger = get_logger(__name__)


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _unique_suffix() -> str:
    return secrets.token_hex(5)


class MockBackend:
    """Process-local valuation service with simulated network latency.

    Args:
        latency: Seconds to wait on each asynchronous call. Defaults to config.
        session_store: Where the current session is persisted. Defaults to the
            store named in config.
        states: Reference states as (id, name, code) rows.
        seed_demo_data: Whether init/reset load the demo requests.
    """

    def __init__(
        self,
        latency: Optional[float] = None,
        session_store: Optional[SessionStore] = None,
        states: Optional[Sequence[Tuple[str, str, str]]] = None,
        seed_demo_data: Optional[bool] = None,
    ):
        config = get_config()
        self.latency = config.backend.latency if latency is None else latency
        self.seed_demo_data = (
            config.backend.seed_demo_data if seed_demo_data is None else seed_demo_data
        )
        self.session_store = session_store if session_store is not None else create_session_store()
        self._states: Tuple[State, ...] = tuple(
            State(id=row[0], name=row[1], code=row[2])
            for row in (states if states is not None else MALAYSIAN_STATES)
        )
        self._requests: List[ValuationRequest] = []
        self._session: Optional[Session] = None

    # Lifecycle

    def init(self) -> "MockBackend":
        """Seed the request store and restore any persisted session."""
        self._requests = self._seed_requests()

        token = self.session_store.get_token()
        user = self.session_store.get_user()
        if token and user:
            self._session = Session(token=token, user=user)
            logger.info("Restored session for %s", user.email)
        else:
            self._session = None

        logger.info(
            "Backend initialized with %d states and %d requests",
            len(self._states), len(self._requests),
        )
        return self

    def reset(self) -> None:
        """Drop created requests and the current session."""
        self._requests = self._seed_requests()
        self._session = None
        self.session_store.clear()
        logger.debug("Backend reset")

    def _seed_requests(self) -> List[ValuationRequest]:
        if not self.seed_demo_data:
            return []
        return [ValuationRequest.from_dict(item) for item in DEMO_REQUESTS]

    async def _simulate_latency(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    # Session

    async def login(self, email: str, password: str) -> Session:
        """Open a session for any non-empty email/password pair.

        Raises:
            InvalidCredentialsError: If either field is empty.
        """
        await self._simulate_latency()

        if not email or not password:
            logger.info("Rejected login with missing credentials")
            raise InvalidCredentialsError()

        stamp = _timestamp_ms()
        user = User.from_email(f"{USER_ID_PREFIX}-{stamp}", email)
        token = f"{TOKEN_PREFIX}-{stamp}-{_unique_suffix()}"

        self._session = Session(token=token, user=user)
        self.session_store.set_token(token)
        self.session_store.set_user(user)

        logger.info("User %s logged in", user.email)
        return self._session

    def logout(self) -> None:
        """Clear the current session. Safe to call without one."""
        if self._session is not None:
            logger.info("User %s logged out", self._session.user.email)
        self._session = None
        self.session_store.clear()

    def is_authenticated(self) -> bool:
        return self._session is not None

    def get_current_user(self) -> Optional[User]:
        return self._session.user if self._session else None

    def get_token(self) -> Optional[str]:
        return self._session.token if self._session else None

    # Data

    async def list_states(self) -> List[State]:
        await self._simulate_latency()
        return list(self._states)

    async def list_requests(self) -> List[ValuationRequest]:
        """All stored requests, oldest first."""
        await self._simulate_latency()
        return list(self._requests)

    async def create_request(
        self,
        payload: Union[CreateRequestPayload, Mapping[str, Any]],
    ) -> ValuationRequest:
        """Store a new request and return it.

        The payload is not validated here; callers are expected to have run
        it through validation first.
        """
        await self._simulate_latency()

        if not isinstance(payload, CreateRequestPayload):
            payload = CreateRequestPayload.from_dict(dict(payload))

        state = find_state(self._states, payload.state_id)
        user = self.get_current_user()

        request = ValuationRequest(
            id=self._new_request_id(),
            property_address=payload.property_address,
            property_type=payload.property_type,
            state_id=payload.state_id,
            state_name=state.name if state else "",
            purpose=payload.purpose,
            estimated_value=payload.estimated_value,
            status=payload.status,
            requested_by_name=user.name if user else DEFAULT_REQUESTER_NAME,
            created_at=_utc_now_iso(),
        )
        self._requests.append(request)

        logger.info("Created valuation request %s (%s)", request.id, request.property_type.value)
        return request

    def _new_request_id(self) -> str:
        existing = {r.id for r in self._requests}
        while True:
            candidate = f"{REQUEST_ID_PREFIX}-{_timestamp_ms()}-{_unique_suffix()}"
            if candidate not in existing:
                return candidate

    def snapshot(self) -> Dict[str, Any]:
        """Summary of the store, used by the health endpoint."""
        return {
            "states": len(self._states),
            "requests": len(self._requests),
            "authenticated": self.is_authenticated(),
        }


def create_backend(session_store: Optional[SessionStore] = None) -> MockBackend:
    """Build and initialize a backend from config."""
    return MockBackend(session_store=session_store).init()
