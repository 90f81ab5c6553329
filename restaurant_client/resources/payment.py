"""
Payment Resource

Author: Khalil Bannouri
Version: 1.0.0
"""

from restaurant_client.resources.base import DATA, Endpoint, Resource


class PaymentResource(Resource):
    """Endpoints under /payments."""

    name = "payment"

    get_all = Endpoint("GET", "/payments")
    get = Endpoint("GET", "/payments/{id}")
    create = Endpoint("POST", "/payments", body=DATA)
    update = Endpoint("PUT", "/payments/{id}", body=DATA)
    adjust = Endpoint(
        "POST",
        "/payments/{id}/adjust",
        body=DATA,
        summary="Apply a discount, surcharge or correction to a payment.",
    )
    delete = Endpoint("DELETE", "/payments/{id}")
