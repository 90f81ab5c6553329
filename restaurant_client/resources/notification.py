"""
Notification Resource

Author: Khalil Bannouri
Version: 1.0.0
"""

from restaurant_client.resources.base import DATA, Endpoint, Resource


class NotificationResource(Resource):
    """Endpoints under /notifications."""

    name = "notification"

    get_all = Endpoint("GET", "/notifications", query=True)
    unread_count = Endpoint("GET", "/notifications/unread-count")
    mark_read = Endpoint("PATCH", "/notifications/{id}/read")
    mark_all_read = Endpoint("PATCH", "/notifications/mark-all-read")
    create = Endpoint("POST", "/notifications", body=DATA)
    delete = Endpoint("DELETE", "/notifications/{id}")
