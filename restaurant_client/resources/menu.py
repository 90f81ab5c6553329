"""
Menu Resource

Categories, menu items, orders and order line items. Each sub-collection
follows the same shape:

    GET    /menu/<sub>          list (items, orders, order-items take params)
    GET    /menu/<sub>/{id}     fetch one
    POST   /menu/<sub>          create
    PUT    /menu/<sub>/{id}     update
    DELETE /menu/<sub>/{id}     delete

Author: Khalil Bannouri
Version: 1.0.0
"""

from restaurant_client.resources.base import DATA, Endpoint, Resource


class MenuResource(Resource):
    """Endpoints under /menu."""

    name = "menu"

    # Categories
    get_categories = Endpoint("GET", "/menu/categories")
    get_category = Endpoint("GET", "/menu/categories/{id}")
    create_category = Endpoint("POST", "/menu/categories", body=DATA)
    update_category = Endpoint("PUT", "/menu/categories/{id}", body=DATA)
    delete_category = Endpoint("DELETE", "/menu/categories/{id}")

    # Items
    get_items = Endpoint("GET", "/menu/items", query=True)
    get_item = Endpoint("GET", "/menu/items/{id}")
    create_item = Endpoint("POST", "/menu/items", body=DATA)
    update_item = Endpoint("PUT", "/menu/items/{id}", body=DATA)
    delete_item = Endpoint("DELETE", "/menu/items/{id}")

    # Orders
    get_orders = Endpoint("GET", "/menu/orders", query=True)
    get_order = Endpoint("GET", "/menu/orders/{id}")
    create_order = Endpoint("POST", "/menu/orders", body=DATA)
    update_order = Endpoint("PUT", "/menu/orders/{id}", body=DATA)
    delete_order = Endpoint("DELETE", "/menu/orders/{id}")

    # Order line items
    get_order_items = Endpoint("GET", "/menu/order-items", query=True)
    get_order_item = Endpoint("GET", "/menu/order-items/{id}")
    create_order_item = Endpoint("POST", "/menu/order-items", body=DATA)
    update_order_item = Endpoint("PUT", "/menu/order-items/{id}", body=DATA)
    delete_order_item = Endpoint("DELETE", "/menu/order-items/{id}")
