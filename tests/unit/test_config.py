"""
Unit tests for config module.
"""

from valuationdesk.config import get_config, reset_config


def test_defaults(monkeypatch):
    monkeypatch.delenv("VALUATIONDESK_LATENCY", raising=False)
    monkeypatch.delenv("VALUATIONDESK_LOG_LEVEL", raising=False)
    reset_config()

    config = get_config()

    assert config.backend.latency == 0.1
    assert config.backend.seed_demo_data is True
    assert config.controller.search_debounce == 0.3
    assert config.controller.success_message_ttl == 3.0
    assert config.session.store == "memory"
    assert config.logging.level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("VALUATIONDESK_LATENCY", "0.25")
    monkeypatch.setenv("VALUATIONDESK_SEED_DEMO_DATA", "false")
    monkeypatch.setenv("VALUATIONDESK_API_PORT", "8080")
    reset_config()

    config = get_config()

    assert config.backend.latency == 0.25
    assert config.backend.seed_demo_data is False
    assert config.api.port == 8080


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("VALUATIONDESK_LOG_LEVEL", "chatty")
    monkeypatch.setenv("VALUATIONDESK_SESSION_STORE", "redis")
    monkeypatch.setenv("VALUATIONDESK_LATENCY", "-1")
    reset_config()

    config = get_config()

    assert config.logging.level == "INFO"
    assert config.session.store == "memory"
    assert config.backend.latency == 0.0


def test_singleton():
    assert get_config() is get_config()
