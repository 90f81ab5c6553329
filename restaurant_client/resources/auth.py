"""
Auth Resource

Registration, login, logout and password recovery.

logout() drops the local token before contacting the backend, so the
session is gone locally even when the network call fails.

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from typing import Any

from restaurant_client.resources.base import DATA, Endpoint, Resource

logger = logging.getLogger(__name__)


class AuthResource(Resource):
    """Endpoints under /auth."""

    name = "auth"

    register = Endpoint("POST", "/auth/register", body=DATA)
    login = Endpoint("POST", "/auth/login", body=DATA)
    forgot_password = Endpoint("POST", "/auth/forgot-password", body=("email",))
    reset_password = Endpoint(
        "POST", "/auth/reset-password", body=("token", "new_password")
    )

    async def logout(self) -> Any:
        """Clear the stored token, then notify the backend."""
        await self.client.aclear_auth_token()
        logger.info("Auth: Local session cleared")
        return await self.client.request("/auth/logout")

    def google_login(self) -> None:
        """Send the user to the backend's Google OAuth entry point."""
        self.client.open_in_browser(self.client.google_login_url)
