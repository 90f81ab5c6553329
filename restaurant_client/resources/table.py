"""
Table Resource

Dining table CRUD, status transitions and occupancy views.

Author: Khalil Bannouri
Version: 1.0.0
"""

from restaurant_client.resources.base import DATA, Endpoint, Resource


class TableResource(Resource):
    """Endpoints under /table."""

    name = "table"

    create = Endpoint("POST", "/table/tables", body=DATA)
    get_all = Endpoint("GET", "/table/tables")
    get = Endpoint("GET", "/table/tables/{id}")
    update = Endpoint("PUT", "/table/tables/{id}", body=DATA)
    delete = Endpoint("DELETE", "/table/tables/{id}")
    change_status = Endpoint("PATCH", "/table/tables/{id}/status", body=("status",))
    get_available = Endpoint("GET", "/table/tables/available")

    # Floor overview
    stats = Endpoint("GET", "/table/status")
    reserved = Endpoint("GET", "/table/reserved")
    occupied = Endpoint("GET", "/table/occupied")

    # Signed-in customer
    my_reservations = Endpoint("GET", "/table/my-reservations")
    my_occupied = Endpoint("GET", "/table/my-occupied")
    my_tables = Endpoint("GET", "/table/my-tables")
    my_table_by_reservation = Endpoint("GET", "/table/my-tables/{reservation_id}")
