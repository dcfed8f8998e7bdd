"""
Pytest Configuration and Fixtures

Provides shared fixtures for all tests.
"""

import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from valuationdesk.backend.mock_api import MockBackend
from valuationdesk.config import ControllerConfig
from valuationdesk.controller.app_controller import AppController
from valuationdesk.core.session_store import MemorySessionStore


@pytest.fixture(autouse=True)
def test_config(monkeypatch):
    """Fresh configuration per test with no simulated latency.

    Yields:
        Config object configured for testing.
    """
    monkeypatch.setenv("VALUATIONDESK_LATENCY", "0")
    monkeypatch.setenv("VALUATIONDESK_SESSION_STORE", "memory")
    monkeypatch.setenv("VALUATIONDESK_LOG_LEVEL", "DEBUG")

    from valuationdesk.config import reset_config, get_config
    reset_config()

    config = get_config()
    yield config

    reset_config()


@pytest.fixture(scope="function")
def temp_db() -> Generator[str, None, None]:
    """Path to a temporary SQLite file for the session store."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = f.name

    yield db_path

    try:
        os.unlink(db_path)
    except (OSError, PermissionError):
        pass


@pytest.fixture(scope="function")
def session_store() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture(scope="function")
def backend(session_store) -> MockBackend:
    """Zero-latency backend seeded with the demo requests."""
    return MockBackend(latency=0, session_store=session_store, seed_demo_data=True).init()


@pytest.fixture(scope="function")
def empty_backend(session_store) -> MockBackend:
    """Zero-latency backend with no stored requests."""
    return MockBackend(latency=0, session_store=session_store, seed_demo_data=False).init()


@pytest.fixture(scope="function")
def controller_config() -> ControllerConfig:
    """Short timers so debounce and message expiry are quick to observe."""
    return ControllerConfig(search_debounce=0.05, success_message_ttl=0.05)


@pytest.fixture(scope="function")
def controller(backend, controller_config) -> AppController:
    return AppController(backend, controller_config)


@pytest.fixture(scope="function")
def valid_payload() -> dict:
    """A payload that passes every validation rule."""
    return {
        "propertyAddress": "123 Test Street",
        "propertyType": "Residential",
        "stateId": "1",
        "purpose": "Purchase financing",
        "estimatedValue": 500000,
        "status": "Draft",
    }


@pytest.fixture(scope="function")
def app(backend):
    """Flask app serving the zero-latency backend."""
    from valuationdesk.api.server import create_app
    return create_app({"TESTING": True}, backend=backend)


@pytest.fixture(scope="function")
def client(app):
    return app.test_client()
