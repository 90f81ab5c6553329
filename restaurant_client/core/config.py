"""
Client Configuration Module

Centralizes all configuration using environment variables with Pydantic Settings.
The only required knob is the backend origin; everything else has a sane
local-development default.

Token storage backends:
    - MEMORY: Token lives for the lifetime of the process
    - FILE: Token persisted to a JSON file on disk (survives restarts)

Usage:
    from restaurant_client.core.config import get_settings

    settings = get_settings()
    print(settings.api_base)   # http://127.0.0.1:5000/api

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
import sys
from enum import Enum
from typing import Optional
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_ORIGIN = "http://127.0.0.1:5000"
API_PREFIX = "/api"


class TokenStoreBackend(str, Enum):
    """
    Where the auth token is persisted.

    Attributes:
        MEMORY: In-process only, lost on exit
        FILE: JSON file on disk, shared by every process using the same path
    """
    MEMORY = "memory"
    FILE = "file"


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.

    Attributes:
        debug: Enable verbose logging

        # Backend
        api_url: Backend origin override (``/api`` is appended)
        request_timeout: Default per-request timeout in seconds

        # Token storage
        token_store: Token storage backend (memory/file)
        token_file: Path of the JSON token file (file backend)
        token_key: Key under which the token is stored
        token_lock_timeout: Seconds to wait for the token file lock
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # APPLICATION
    # ==========================================================================

    app_name: str = Field(
        default="Restaurant API Client",
        description="Client display name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Client version"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging"
    )

    # ==========================================================================
    # BACKEND
    # ==========================================================================

    api_url: Optional[str] = Field(
        default=None,
        description="Backend origin, e.g. https://restaurant.example.com"
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Default request timeout in seconds"
    )

    # ==========================================================================
    # TOKEN STORAGE
    # ==========================================================================

    token_store: TokenStoreBackend = Field(
        default=TokenStoreBackend.MEMORY,
        description="Auth token storage backend"
    )
    token_file: str = Field(
        default=str(Path.home() / ".restaurant_client" / "session.json"),
        description="Token file used by the file backend"
    )
    token_key: str = Field(
        default="token",
        min_length=1,
        description="Key the token is stored under"
    )
    token_lock_timeout: float = Field(
        default=10.0,
        description="Seconds to wait for the token file lock"
    )

    # ==========================================================================
    # VALIDATORS
    # ==========================================================================

    @field_validator("token_store", mode="before")
    @classmethod
    def validate_token_store(cls, v: str) -> TokenStoreBackend:
        """Convert string to TokenStoreBackend enum."""
        if isinstance(v, TokenStoreBackend):
            return v
        try:
            return TokenStoreBackend(v.lower())
        except ValueError:
            valid = [e.value for e in TokenStoreBackend]
            raise ValueError(f"Invalid token_store. Must be one of: {valid}")

    @field_validator("api_url", mode="before")
    @classmethod
    def validate_api_url(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty override as absent."""
        if v is None:
            return None
        v = v.strip().rstrip("/")
        return v or None

    # ==========================================================================
    # COMPUTED PROPERTIES
    # ==========================================================================

    @property
    def api_base(self) -> str:
        """Base URL every resource path is appended to."""
        origin = self.api_url or DEFAULT_API_ORIGIN
        return f"{origin}{API_PREFIX}"

    @property
    def user_agent(self) -> str:
        return f"restaurant-client/{self.app_version}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached client settings.

    Returns:
        Settings: Configured client settings

    Example:
        >>> settings = get_settings()
        >>> print(settings.token_store)
        TokenStoreBackend.MEMORY
    """
    return Settings()


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure client-wide logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured package logger
    """
    settings = get_settings()

    if settings.debug:
        level = logging.DEBUG

    log_format = "%(asctime)s │ %(levelname)-8s │ %(name)-25s │ %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("filelock").setLevel(logging.WARNING)

    return logging.getLogger("restaurant_client")


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
