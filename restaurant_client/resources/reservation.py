"""
Reservation Resource

Author: Khalil Bannouri
Version: 1.0.0
"""

from restaurant_client.resources.base import DATA, Endpoint, Resource


class ReservationResource(Resource):
    """Endpoints under /reservations."""

    name = "reservation"

    create = Endpoint("POST", "/reservations", body=DATA)
    get_all = Endpoint("GET", "/reservations", query=True)
    get = Endpoint("GET", "/reservations/{id}")
    update = Endpoint("PUT", "/reservations/{id}", body=DATA)
    delete = Endpoint("DELETE", "/reservations/{id}")
    change_status = Endpoint("PATCH", "/reservations/{id}/status", body=("status",))
    check_availability = Endpoint(
        "POST",
        "/reservations/check-availability",
        body=DATA,
        summary="Ask the backend whether a slot can be booked.",
    )
    upcoming = Endpoint("GET", "/reservations/upcoming", query=True)
