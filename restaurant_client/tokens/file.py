"""
File Token Store with Concurrency Control

Persists the token as a small JSON document on disk so that a session
survives process restarts, the way a browser keeps it in local storage:

    {"token": "<opaque bearer token>"}

Every read and write takes a file lock, so several processes can share one
session file safely.

Author: Khalil Bannouri
Version: 1.0.0
"""

import json
import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Union

from filelock import FileLock, Timeout

from restaurant_client.core.errors import TokenStoreError
from restaurant_client.tokens.base import BaseTokenStore

logger = logging.getLogger(__name__)


class FileTokenStore(BaseTokenStore):
    """
    Lock-protected JSON file token store.

    Attributes:
        path: Location of the JSON session file
        key: Key the token is stored under
        lock_timeout: Seconds to wait for the lock before giving up

    Example:
        >>> store = FileTokenStore("/tmp/session.json")
        >>> store.write("abc")
        >>> FileTokenStore("/tmp/session.json").read()
        'abc'
    """

    blocking = True

    def __init__(
        self,
        path: Union[str, Path],
        key: str = "token",
        lock_timeout: float = 10.0,
    ):
        self.path = Path(path).expanduser()
        self.key = key
        self.lock_timeout = lock_timeout
        self._lock = FileLock(str(self.path) + ".lock", timeout=lock_timeout)

        logger.debug(f"FileTokenStore initialized (path={self.path})")

    @property
    def backend_name(self) -> str:
        """Return the backend name."""
        return "file"

    def _load(self) -> dict:
        """
        Read the session document.

        A missing, empty or unreadable file counts as an empty session.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise TokenStoreError(f"Could not read token file {self.path}: {e}") from e

        if not raw.strip():
            return {}

        try:
            document = json.loads(raw)
        except ValueError:
            logger.warning(f"File: Ignoring malformed token file {self.path}")
            return {}

        return document if isinstance(document, dict) else {}

    def _dump(self, document: dict) -> None:
        """Atomically replace the session document."""
        fd, tmp_path = tempfile.mkstemp(
            dir=str(self.path.parent),
            prefix=self.path.name,
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise TokenStoreError(f"Could not write token file {self.path}: {e}") from e

    @contextmanager
    def _locked(self):
        """Hold the file lock, creating the session directory if needed."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TokenStoreError(f"Could not create {self.path.parent}: {e}") from e

        try:
            with self._lock:
                yield
        except Timeout as e:
            raise TokenStoreError(
                f"Timed out after {self.lock_timeout}s waiting for {self.path}"
            ) from e

    def read(self) -> Optional[str]:
        with self._locked():
            token = self._load().get(self.key)

        return token if isinstance(token, str) and token else None

    def write(self, token: str) -> None:
        with self._locked():
            document = self._load()
            document[self.key] = token
            self._dump(document)

        logger.debug(f"File: Token stored in {self.path}")

    def clear(self) -> None:
        with self._locked():
            document = self._load()
            if self.key not in document:
                return
            del document[self.key]
            if document:
                self._dump(document)
            else:
                self.path.unlink(missing_ok=True)

        logger.debug(f"File: Token cleared from {self.path}")
