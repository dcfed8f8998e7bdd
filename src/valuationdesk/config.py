"""
Centralized Configuration Module

Provides configuration classes and environment variable loading for all components.

Usage:
    from valuationdesk.config import get_config

    config = get_config()
    latency = config.backend.latency
    api_port = config.api.port
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()


def _get_project_root() -> Path:
    """Get the project root directory."""
    # Go up: config.py -> valuationdesk -> src -> project_root
    return Path(__file__).resolve().parent.parent.parent


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class BackendConfig:
    """Mock backend configuration."""

    latency: float = field(default_factory=lambda: float(os.getenv(
        "VALUATIONDESK_LATENCY", "0.1"
    )))
    seed_demo_data: bool = field(default_factory=lambda: _env_flag(
        "VALUATIONDESK_SEED_DEMO_DATA", "true"
    ))

    def __post_init__(self):
        # Negative sleeps make no sense
        if self.latency < 0:
            self.latency = 0.0


@dataclass
class SessionConfig:
    """Session store configuration."""

    store: str = field(default_factory=lambda: os.getenv(
        "VALUATIONDESK_SESSION_STORE", "memory"
    ).lower())
    db_path: str = field(default_factory=lambda: os.getenv(
        "VALUATIONDESK_SESSION_DB_PATH",
        str(_get_project_root() / "valuationdesk_session.db")
    ))

    def __post_init__(self):
        if self.store not in ("memory", "sqlite"):
            self.store = "memory"
        # Resolve relative paths
        if not os.path.isabs(self.db_path):
            self.db_path = str(_get_project_root() / self.db_path)


@dataclass
class ControllerConfig:
    """Application controller timing configuration."""

    search_debounce: float = field(default_factory=lambda: float(os.getenv(
        "VALUATIONDESK_SEARCH_DEBOUNCE", "0.3"
    )))
    success_message_ttl: float = field(default_factory=lambda: float(os.getenv(
        "VALUATIONDESK_SUCCESS_MESSAGE_TTL", "3"
    )))


@dataclass
class APIConfig:
    """API server configuration."""

    host: str = field(default_factory=lambda: os.getenv(
        "VALUATIONDESK_API_HOST", "127.0.0.1"
    ))
    port: int = field(default_factory=lambda: int(os.getenv(
        "VALUATIONDESK_API_PORT", "5000"
    )))
    debug: bool = field(default_factory=lambda: _env_flag(
        "VALUATIONDESK_DEBUG", "false"
    ))


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv(
        "VALUATIONDESK_LOG_LEVEL", "INFO"
    ).upper())
    log_file: Optional[str] = field(default_factory=lambda: os.getenv(
        "VALUATIONDESK_LOG_FILE"
    ))

    def __post_init__(self):
        # Validate log level
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.level not in valid_levels:
            self.level = "INFO"


@dataclass
class Config:
    """Main configuration container."""

    backend: BackendConfig = field(default_factory=BackendConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    controller: ControllerConfig = field(default_factory=ControllerConfig)
    api: APIConfig = field(default_factory=APIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Singleton instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance.

    Returns:
        Config: The application configuration.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the configuration (useful for testing)."""
    global _config
    _config = None
