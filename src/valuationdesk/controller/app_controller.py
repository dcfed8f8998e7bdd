"""
Application Controller

UI-independent orchestration of the valuation desk: login/logout, loading
reference data and requests, filtering, and submitting new requests.

View phases:
    UNAUTHENTICATED -> LOADING          on successful login
    LOADING         -> READY            when states and requests are loaded
    LOADING         -> LOAD_FAILED      when either fetch fails
    READY           -> SUBMITTING       while a create is in flight
    SUBMITTING      -> READY            when the create finishes
    any             -> UNAUTHENTICATED  on logout
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from valuationdesk.backend.mock_api import MockBackend
from valuationdesk.config import ControllerConfig, get_config
from valuationdesk.controller.filters import RequestFilters, filter_requests
from valuationdesk.core.constants import (
    CREATE_FAILED_MESSAGE,
    CREATE_SUCCESS_MESSAGE,
    LOAD_FAILED_MESSAGE,
    LOGIN_FAILED_MESSAGE,
)
from valuationdesk.core.models import State, User, ValuationRequest
from valuationdesk.exceptions import (
    ControllerStateError,
    DataLoadError,
    InvalidCredentialsError,
    ValidationError,
)
from valuationdesk.logging_config import get_logger
from valuationdesk.utils.debounce import Debouncer
from valuationdesk.utils.validation import parse_payload

logger = get_logger(__name__)


class ViewPhase(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    LOADING = "loading"
    READY = "ready"
    SUBMITTING = "submitting"
    LOAD_FAILED = "load_failed"


@dataclass
class SubmissionResult:
    """Outcome of a submit attempt."""

    request: Optional[ValuationRequest] = None
    errors: Dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.request is not None


class AppController:
    """Holds the view state of one user's session against a backend."""

    def __init__(self, backend: MockBackend, config: Optional[ControllerConfig] = None):
        config = config or get_config().controller
        self.backend = backend
        self.success_message_ttl = config.success_message_ttl

        self.phase = ViewPhase.UNAUTHENTICATED
        self.user: Optional[User] = None
        self.states: List[State] = []
        self.requests: List[ValuationRequest] = []
        self.filters = RequestFilters()
        self.applied_search = ""

        self.field_errors: Dict[str, str] = {}
        self.login_error: Optional[str] = None
        self.error: Optional[str] = None
        self.success_message: Optional[str] = None

        self._search_debouncer = Debouncer(config.search_debounce, self._apply_search)
        self._success_timer: Optional[asyncio.TimerHandle] = None

    # Derived state

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def active_filters(self) -> RequestFilters:
        """Filters as applied, with the debounced search term."""
        return self.filters.with_value("search", self.applied_search)

    @property
    def visible_requests(self) -> List[ValuationRequest]:
        return filter_requests(self.requests, self.active_filters)

    # Session

    async def start(self) -> None:
        """Pick up a session the backend already holds, if any."""
        if self.backend.is_authenticated():
            self.user = self.backend.get_current_user()
            logger.info("Resuming session for %s", self.user.name)
            await self.load_data()

    async def login(self, email: str, password: str) -> bool:
        """Log in and load data.

        Returns:
            True on success. On failure ``login_error`` holds a generic
            message and the phase stays UNAUTHENTICATED.
        """
        if self.phase is not ViewPhase.UNAUTHENTICATED:
            raise ControllerStateError("Already logged in", phase=self.phase.value)

        self.login_error = None
        try:
            session = await self.backend.login(email, password)
        except InvalidCredentialsError as e:
            logger.warning("Login failed: %s", e)
            self.login_error = LOGIN_FAILED_MESSAGE
            return False

        self.user = session.user
        await self.load_data()
        return True

    def logout(self) -> None:
        """Log out and drop everything cached for the session."""
        self.backend.logout()
        self._search_debouncer.cancel()
        self._cancel_success_timer()

        self.phase = ViewPhase.UNAUTHENTICATED
        self.user = None
        self.states = []
        self.requests = []
        self.filters = RequestFilters()
        self.applied_search = ""
        self.field_errors = {}
        self.login_error = None
        self.error = None
        self.success_message = None

    # Loading

    async def _fetch_all(self) -> Tuple[List[ValuationRequest], List[State]]:
        try:
            requests, states = await asyncio.gather(
                self.backend.list_requests(),
                self.backend.list_states(),
            )
        except Exception as e:
            raise DataLoadError(f"Could not load data: {e}") from e
        return requests, states

    async def load_data(self) -> bool:
        """Fetch states and requests together. Safe to call again to retry.

        Returns:
            True if both loaded.
        """
        if self.user is None:
            raise ControllerStateError("Login required", phase=self.phase.value)

        user = self.user
        self.phase = ViewPhase.LOADING
        self.error = None
        try:
            requests, states = await self._fetch_all()
        except DataLoadError as e:
            if self._load_superseded(user):
                return False
            logger.error("%s", e, exc_info=True)
            self.requests = []
            self.states = []
            self.error = LOAD_FAILED_MESSAGE
            self.phase = ViewPhase.LOAD_FAILED
            return False

        if self._load_superseded(user):
            logger.debug("Discarding data loaded for a session that has ended")
            return False

        # Backend returns oldest first; display newest first
        self.requests = list(reversed(requests))
        self.states = states
        self.phase = ViewPhase.READY
        logger.debug("Loaded %d requests and %d states", len(requests), len(states))
        return True

    def _load_superseded(self, user: User) -> bool:
        # A logout, or a logout and fresh login, happened while fetching
        return self.user is not user or self.phase is not ViewPhase.LOADING

    # Filtering

    def set_filter(self, key: str, value: str) -> None:
        """Change one filter by its camelCase key.

        The search term is debounced; the other filters apply at once.
        """
        if key == "search":
            self.set_search(value)
            return
        self.filters = self.filters.with_value(key, value)

    def set_search(self, term: str) -> None:
        """Record the search input and apply it after the quiet period.

        Must be called from inside a running event loop.
        """
        self.filters = self.filters.with_value("search", term)
        self._search_debouncer.call(term or "")

    def flush_search(self) -> None:
        self._search_debouncer.flush()

    def clear_filters(self) -> None:
        self._search_debouncer.cancel()
        self.filters = RequestFilters()
        self.applied_search = ""

    def _apply_search(self, term: str) -> None:
        self.applied_search = term

    # Submission

    async def submit_request(self, payload: Mapping[str, Any]) -> SubmissionResult:
        """Validate and create a valuation request.

        Invalid payloads never reach the backend; their field errors are
        returned and kept in ``field_errors``.

        Raises:
            ControllerStateError: If not READY, including while another
                submission is in flight.
        """
        if self.phase is not ViewPhase.READY:
            raise ControllerStateError(
                f"Cannot submit while {self.phase.value}", phase=self.phase.value
            )

        try:
            parsed = parse_payload(payload)
        except ValidationError as e:
            self.field_errors = e.errors
            return SubmissionResult(errors=e.errors)

        self.field_errors = {}
        self.error = None
        self.phase = ViewPhase.SUBMITTING
        try:
            created = await self.backend.create_request(parsed)
        except Exception as e:
            logger.error("Failed to create request: %s", e, exc_info=True)
            self.error = CREATE_FAILED_MESSAGE
            return SubmissionResult(error=CREATE_FAILED_MESSAGE)
        finally:
            # A logout during the create already moved us to UNAUTHENTICATED
            if self.phase is ViewPhase.SUBMITTING:
                self.phase = ViewPhase.READY

        if self.phase is not ViewPhase.READY:
            return SubmissionResult(request=created)

        self.requests = [created] + self.requests
        self._show_success(CREATE_SUCCESS_MESSAGE)
        return SubmissionResult(request=created)

    def _show_success(self, message: str) -> None:
        self._cancel_success_timer()
        self.success_message = message
        if self.success_message_ttl > 0:
            loop = asyncio.get_running_loop()
            self._success_timer = loop.call_later(self.success_message_ttl, self._clear_success)

    def _clear_success(self) -> None:
        self._success_timer = None
        self.success_message = None

    def _cancel_success_timer(self) -> None:
        if self._success_timer is not None:
            self._success_timer.cancel()
            self._success_timer = None
