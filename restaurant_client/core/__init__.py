"""
Core module initialization.
Exports configuration, logging utilities and error types.
"""

from restaurant_client.core.config import (
    get_settings,
    setup_logging,
    Settings,
    TokenStoreBackend,
)
from restaurant_client.core.errors import ApiError, NetworkError, TokenStoreError

__all__ = [
    "get_settings",
    "setup_logging",
    "Settings",
    "TokenStoreBackend",
    "ApiError",
    "NetworkError",
    "TokenStoreError",
]
