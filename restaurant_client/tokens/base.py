"""
Token Store Abstract Base Class

Defines the interface contract for auth token storage.
Both MemoryTokenStore and FileTokenStore must implement these methods.

At most one token is held at a time. Writing replaces any previous value;
there is no refresh or rotation logic.

Author: Khalil Bannouri
Version: 1.0.0
"""

from abc import ABC, abstractmethod
from typing import Optional


class BaseTokenStore(ABC):
    """
    Abstract base class for auth token storage.

    Example:
        >>> store = get_token_store()
        >>> store.write("abc")
        >>> store.read()
        'abc'
        >>> store.clear()
        >>> store.read() is None
        True
    """

    #: True when read/write/clear do disk or network I/O; async callers then
    #: run them in a worker thread.
    blocking = False

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """
        Return the name of the storage backend.

        Returns:
            str: Backend name (e.g., "memory", "file")
        """
        pass

    @abstractmethod
    def read(self) -> Optional[str]:
        """
        Return the stored token.

        Called on every outgoing request.

        Returns:
            Optional[str]: The token, or None when nothing is stored
        """
        pass

    @abstractmethod
    def write(self, token: str) -> None:
        """
        Persist a token, overwriting any previous value.

        Args:
            token: Opaque bearer token returned by login/registration
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove the stored token. A no-op when nothing is stored."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(backend={self.backend_name!r})"
