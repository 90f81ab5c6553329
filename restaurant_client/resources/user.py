"""
User Resource

Profile management for the signed-in user plus the admin-only user
administration endpoints (status, role, promotion).

Author: Khalil Bannouri
Version: 1.0.0
"""

from typing import Any

from restaurant_client.resources.base import DATA, Endpoint, Resource
from restaurant_client.schemas import Multipart, RequestOptions


class UserResource(Resource):
    """Endpoints under /user."""

    name = "user"

    # Current user
    get_me = Endpoint("GET", "/user/me")
    update = Endpoint("PATCH", "/user/update", body=DATA)
    delete = Endpoint("DELETE", "/user/delete")
    welcome = Endpoint("GET", "/user/welcome")

    # Directory
    get_all = Endpoint("GET", "/user/")
    get_by_id = Endpoint("GET", "/user/{id}")
    count = Endpoint("GET", "/user/count")
    count_by_role = Endpoint("GET", "/user/count/by-role")
    count_by_status = Endpoint("GET", "/user/count/by-status")
    list_by_status = Endpoint("GET", "/user/list/{status}")

    # Administration
    change_status = Endpoint(
        "PATCH",
        "/user/status/{user_id}",
        body=("status", "days"),
        optional=("days",),
        summary="Set account status; ``days`` bounds a suspension.",
    )
    change_role = Endpoint("PATCH", "/user/role/{user_id}", body=("role",))
    promote = Endpoint("PUT", "/user/{user_id}/promote")
    demote = Endpoint("PUT", "/user/{user_id}/demote")
    unban = Endpoint("PUT", "/user/{user_id}/unban")
    unsuspend = Endpoint("PUT", "/user/{user_id}/unsuspend")
    delete_by_admin = Endpoint("DELETE", "/user/delete/{user_id}")

    async def upload_avatar(self, file: Any) -> Any:
        """
        Upload a new avatar image.

        Args:
            file: bytes, an open binary file, or a
                ``(filename, content, content_type)`` tuple

        Returns:
            Any: Backend payload (usually the updated profile)
        """
        return await self.client.request(
            "/user/avatar",
            RequestOptions(method="POST", body=Multipart.single("avatar", file)),
        )
