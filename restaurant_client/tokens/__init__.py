"""
Token Store Factory

Provides a single entry point for obtaining the process-wide token store.
Automatically selects the memory or file backend based on TOKEN_STORE.

Usage:
    from restaurant_client.tokens import set_auth_token, get_auth_token

    set_auth_token("abc")
    get_auth_token()    # 'abc'

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from functools import lru_cache
from typing import Optional

from restaurant_client.core.config import get_settings, TokenStoreBackend
from restaurant_client.tokens.base import BaseTokenStore
from restaurant_client.tokens.memory import MemoryTokenStore
from restaurant_client.tokens.file import FileTokenStore

logger = logging.getLogger(__name__)


@lru_cache()
def get_token_store() -> BaseTokenStore:
    """
    Get the configured token store instance.

    Returns:
        BaseTokenStore: MemoryTokenStore or FileTokenStore depending on
        the TOKEN_STORE setting
    """
    settings = get_settings()

    if settings.token_store == TokenStoreBackend.FILE:
        logger.info(f"Token Store: Using FileTokenStore ({settings.token_file})")
        return FileTokenStore(
            settings.token_file,
            key=settings.token_key,
            lock_timeout=settings.token_lock_timeout,
        )

    logger.info("Token Store: Using MemoryTokenStore")
    return MemoryTokenStore()


def reset_token_store() -> None:
    """
    Clear the cached token store instance.

    Useful for testing or when configuration changes at runtime.
    """
    get_token_store.cache_clear()
    logger.debug("Token store cache cleared")


def get_auth_token() -> Optional[str]:
    """Return the token held by the default store, or None."""
    return get_token_store().read()


def set_auth_token(token: str) -> None:
    """Persist a token in the default store, replacing any previous one."""
    get_token_store().write(token)


def clear_auth_token() -> None:
    """Remove the token from the default store."""
    get_token_store().clear()


__all__ = [
    "get_token_store",
    "reset_token_store",
    "get_auth_token",
    "set_auth_token",
    "clear_auth_token",
    "BaseTokenStore",
    "MemoryTokenStore",
    "FileTokenStore",
]
