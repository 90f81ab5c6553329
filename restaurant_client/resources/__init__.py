"""
                        Resources Module

One catalog per backend resource family. Each catalog is a table of
Endpoint declarations bound to an ApiClient at runtime.

Resources:
    - user: Profile and user administration
    - auth: Registration, login, logout, password recovery
    - table: Dining tables and occupancy
    - reservation: Bookings and availability checks
    - payment: Payments and adjustments
    - notification: In-app notifications
    - menu: Categories, items, orders, order items
"""

from restaurant_client.resources.base import DATA, Endpoint, Resource
from restaurant_client.resources.user import UserResource
from restaurant_client.resources.auth import AuthResource
from restaurant_client.resources.table import TableResource
from restaurant_client.resources.reservation import ReservationResource
from restaurant_client.resources.payment import PaymentResource
from restaurant_client.resources.notification import NotificationResource
from restaurant_client.resources.menu import MenuResource

RESOURCES = {
    cls.name: cls
    for cls in (
        UserResource,
        AuthResource,
        TableResource,
        ReservationResource,
        PaymentResource,
        NotificationResource,
        MenuResource,
    )
}

__all__ = [
    "DATA",
    "Endpoint",
    "Resource",
    "RESOURCES",
    "UserResource",
    "AuthResource",
    "TableResource",
    "ReservationResource",
    "PaymentResource",
    "NotificationResource",
    "MenuResource",
]
