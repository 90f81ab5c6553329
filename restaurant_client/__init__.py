"""
                Restaurant API Client

Async client for the restaurant-management backend: one request executor
with bearer-token auth and structured errors, plus resource catalogs for
users, auth, tables, reservations, payments, notifications and the menu.

Author: Khalil_Bannouri
Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Khalil_Bannouri"

from restaurant_client.core.errors import ApiError, NetworkError, TokenStoreError
from restaurant_client.schemas import Multipart, RequestOptions
from restaurant_client.tokens import (
    clear_auth_token,
    get_auth_token,
    set_auth_token,
    MemoryTokenStore,
    FileTokenStore,
)
from restaurant_client.client import ApiClient, get_api_client, reset_api_client

__all__ = [
    "ApiClient",
    "get_api_client",
    "reset_api_client",
    "ApiError",
    "NetworkError",
    "TokenStoreError",
    "Multipart",
    "RequestOptions",
    "get_auth_token",
    "set_auth_token",
    "clear_auth_token",
    "MemoryTokenStore",
    "FileTokenStore",
]
