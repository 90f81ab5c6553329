"""
Restaurant API Client

Single choke point for every outbound call to the restaurant backend.
Resource families (user, auth, table, reservation, payment, notification,
menu) hang off the client and all delegate to ApiClient.request().

Request pipeline:
    1. URL = base + path (+ "?" + query string when params are given)
    2. Content-Type: application/json, then caller header overrides
    3. Authorization: Bearer <token> when the token store holds one
    4. Multipart bodies are sent as form data without Content-Type;
       anything else is serialized to JSON
    5. Response body parsed as JSON (empty / non-JSON -> None)
    6. Status >= 400 -> ApiError(message, status, data)
    7. Any other failure -> NetworkError (status 0)

Usage:
    async with ApiClient() as client:
        await client.auth.login({"email": "...", "password": "..."})
        tables = await client.table.get_available()

Author: Khalil Bannouri
Version: 1.0.0
"""

import json
import logging
import webbrowser
from functools import lru_cache
from typing import Any, Optional

import anyio
import httpx
from pydantic import BaseModel

from restaurant_client.core.config import Settings, get_settings
from restaurant_client.core.errors import ApiError, NetworkError
from restaurant_client.schemas import Multipart, QueryParams, RequestOptions
from restaurant_client.tokens import BaseTokenStore, get_token_store
from restaurant_client.resources import (
    AuthResource,
    MenuResource,
    NotificationResource,
    PaymentResource,
    ReservationResource,
    TableResource,
    UserResource,
)

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def build_url(base_url: str, path: str, params: Optional[QueryParams] = None) -> str:
    """
    Compose the full request URL.

    Args:
        base_url: Backend base, e.g. http://127.0.0.1:5000/api
        path: Resource path starting with "/"
        params: Query parameters; a sequence of pairs or list values keep
            repeated keys in order

    Returns:
        str: ``base_url + path``, with ``?query`` only when params encode
        to a non-empty query string
    """
    url = base_url + path
    if params:
        query = str(httpx.QueryParams(params))
        if query:
            url += f"?{query}"
    return url


def serialize_body(body: Any) -> str:
    """Serialize a JSON body. Pydantic models are dumped in JSON mode."""
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json")
    return json.dumps(body)


class ApiClient:
    """
    Async client for the restaurant backend.

    Holds its own token store and connection pool, so several clients
    (e.g. two users in one test) never share credentials by accident.

    Attributes:
        base_url: Root every resource path is appended to
        token_store: Where the bearer token is read from on every request
        user, auth, table, reservation, payment, notification, menu:
            Resource method catalogs

    Example:
        >>> client = ApiClient(token_store=MemoryTokenStore("abc"))
        >>> me = await client.user.get_me()
        >>> await client.aclose()
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_store: Optional[BaseTokenStore] = None,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Overrides the configured API base
            token_store: Token store to use (default: configured store)
            settings: Settings instance (default: cached settings)
            transport: Custom httpx transport, e.g. httpx.MockTransport
            timeout: Default request timeout in seconds
        """
        self.settings = settings or get_settings()
        self.base_url = (base_url or self.settings.api_base).rstrip("/")
        self.token_store = token_store if token_store is not None else get_token_store()

        self._http = httpx.AsyncClient(
            transport=transport,
            timeout=timeout if timeout is not None else self.settings.request_timeout,
            headers={"User-Agent": self.settings.user_agent},
            follow_redirects=True,
        )

        self.user = UserResource(self)
        self.auth = AuthResource(self)
        self.table = TableResource(self)
        self.reservation = ReservationResource(self)
        self.payment = PaymentResource(self)
        self.notification = NotificationResource(self)
        self.menu = MenuResource(self)

        logger.debug(
            f"ApiClient initialized (base_url={self.base_url}, "
            f"token_store={self.token_store.backend_name})"
        )

    # ==========================================================================
    # TOKEN MANAGEMENT
    # ==========================================================================

    def get_auth_token(self) -> Optional[str]:
        return self.token_store.read()

    def set_auth_token(self, token: str) -> None:
        self.token_store.write(token)

    def clear_auth_token(self) -> None:
        self.token_store.clear()

    async def _run_store(self, func, *args):
        """Run a token store call, off the event loop when the store blocks."""
        if self.token_store.blocking:
            return await anyio.to_thread.run_sync(func, *args)
        return func(*args)

    async def aclear_auth_token(self) -> None:
        """Clear the token without blocking the event loop."""
        await self._run_store(self.token_store.clear)

    # ==========================================================================
    # REQUEST EXECUTOR
    # ==========================================================================

    def _build_headers(self, options: RequestOptions, token: Optional[str]) -> httpx.Headers:
        headers = httpx.Headers({"Content-Type": JSON_CONTENT_TYPE})
        headers.update(options.headers)

        if token:
            headers["Authorization"] = f"Bearer {token}"

        if options.is_multipart and "Content-Type" in headers:
            # httpx writes the multipart boundary itself
            del headers["Content-Type"]

        return headers

    def _build_body(self, options: RequestOptions) -> dict:
        """Translate the body into httpx.request() keyword arguments."""
        body = options.body
        if body is None:
            return {}
        if isinstance(body, Multipart):
            return {"files": body.files, "data": body.data or None}
        return {"content": serialize_body(body)}

    async def request(
        self,
        path: str,
        options: Optional[RequestOptions] = None,
        **fields: Any,
    ) -> Any:
        """
        Issue one request against the backend.

        Args:
            path: Path relative to the API base, e.g. "/table/tables"
            options: Request descriptor. Alternatively pass its fields as
                keyword arguments (method=..., body=..., params=...).

        Returns:
            Any: Parsed JSON payload, or None for an empty / non-JSON body

        Raises:
            ApiError: The backend answered with status >= 400
            NetworkError: No response was obtained (status 0)
            TokenStoreError: The token could not be read
        """
        if options is None:
            options = RequestOptions(**fields)
        elif fields:
            raise TypeError("Pass either a RequestOptions instance or keyword fields, not both")

        token = await self._run_store(self.token_store.read)

        try:
            url = build_url(self.base_url, path, options.params)
            headers = self._build_headers(options, token)

            logger.debug(f"{options.method} {path}")

            response = await self._http.request(
                options.method,
                url,
                headers=headers,
                **self._build_body(options),
                **options.extensions,
            )

            try:
                payload = response.json()
            except ValueError:
                payload = None

            if response.is_error:
                error = ApiError.from_response(response, payload)
                logger.warning(
                    f"{options.method} {path} failed - {error.status} {error.message}"
                )
                raise error

            return payload

        except ApiError:
            raise

        except Exception as e:
            logger.error(f"{options.method} {path} transport error - {e!r}")
            raise NetworkError.from_exception(e) from e

    # ==========================================================================
    # REDIRECTS
    # ==========================================================================

    @property
    def google_login_url(self) -> str:
        return f"{self.base_url}/auth/google/login"

    def open_in_browser(self, url: str) -> None:
        """Hand a URL to the system browser (OAuth flows)."""
        logger.info(f"Opening browser at {url}")
        webbrowser.open(url)

    # ==========================================================================
    # LIFECYCLE
    # ==========================================================================

    async def aclose(self) -> None:
        """Release the connection pool."""
        await self._http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"ApiClient(base_url={self.base_url!r})"


@lru_cache()
def get_api_client() -> ApiClient:
    """
    Get the shared client instance.

    Uses the configured API base and the process-wide token store.

    Returns:
        ApiClient: Cached client
    """
    return ApiClient()


def reset_api_client() -> None:
    """
    Clear the cached client instance.

    The previous instance is not closed; call ``aclose()`` on it first if
    it is still referenced.
    """
    get_api_client.cache_clear()
    logger.debug("API client cache cleared")
