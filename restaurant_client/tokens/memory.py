"""
In-Memory Token Store

Keeps the token for the lifetime of the process. Default backend, and the
one to inject in tests.

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from typing import Optional

from restaurant_client.tokens.base import BaseTokenStore

logger = logging.getLogger(__name__)


class MemoryTokenStore(BaseTokenStore):
    """Process-local token holder."""

    def __init__(self, token: Optional[str] = None):
        self._token = token or None

    @property
    def backend_name(self) -> str:
        """Return the backend name."""
        return "memory"

    def read(self) -> Optional[str]:
        return self._token

    def write(self, token: str) -> None:
        self._token = token or None
        logger.debug("Memory: Token stored")

    def clear(self) -> None:
        self._token = None
        logger.debug("Memory: Token cleared")
