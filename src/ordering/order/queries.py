"""Order read path: single orders with product resolution, the full listing and the dashboard.

Orders are rendered with the camelCase keys of the public order contract.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.order.order import Order, OrderStatus
from ordering.product.product import Product

_PAGE_SIZE = 100


def _isoformat(value):
    return value.isoformat() if value is not None else None


def order_item_to_dict(item) -> dict:
    return {
        "id": str(item.id),
        "product": str(item.product_id),
        "name": item.name,
        "qty": item.quantity,
        "price": item.price,
        "image": item.image,
    }


def order_to_dict(order: Order) -> dict:
    """Serialize an Order to its public JSON shape."""
    details = order.customer_details
    payment = order.payment_result
    return {
        "id": str(order.id),
        "customerDetails": {
            "name": details.name,
            "email": details.email,
            "address": details.address,
            "phone": details.phone,
        }
        if details
        else None,
        "orderItems": [order_item_to_dict(item) for item in order.items],
        "itemsPrice": order.items_price,
        "taxPrice": order.tax_price,
        "shippingPrice": order.shipping_price,
        "totalPrice": order.total_price,
        "status": order.status,
        "isPaid": bool(order.is_paid),
        "paidAt": _isoformat(order.paid_at),
        "paymentResult": {
            "id": payment.payment_id,
            "status": payment.status,
            "update_time": payment.update_time,
            "email_address": payment.email_address,
        }
        if payment
        else None,
        "isDelivered": bool(order.is_delivered),
        "deliveredAt": _isoformat(order.delivered_at),
        "createdAt": _isoformat(order.created_at),
        "updatedAt": _isoformat(order.updated_at),
    }


def _resolve_product(product_id):
    try:
        return current_domain.repository_for(Product).get(product_id).snapshot()
    except ObjectNotFoundError:
        return None


def get_order_by_id(order_id) -> dict:
    """Return an order with each item's product reference resolved.

    Raises:
        ObjectNotFoundError: when no order has this id.
    """
    order = current_domain.repository_for(Order).get(order_id)
    data = order_to_dict(order)
    resolved = {}
    for item in data["orderItems"]:
        product_id = item["product"]
        if product_id not in resolved:
            resolved[product_id] = _resolve_product(product_id)
        item["product"] = resolved[product_id]
    return data


def list_orders() -> list[dict]:
    """Return every order, oldest first. Storage is read page by page."""
    query = current_domain.repository_for(Order)._dao.query.order_by("created_at")
    orders = []
    offset = 0
    while True:
        page = query.offset(offset).limit(_PAGE_SIZE).all()
        orders.extend(page.items)
        if len(page.items) < _PAGE_SIZE:
            break
        offset += _PAGE_SIZE
    return [order_to_dict(order) for order in orders]


def summarize_orders(orders: list[dict]) -> dict:
    """Admin dashboard figures over serialized orders."""
    return {
        "orderCount": len(orders),
        "totalRevenue": sum(order["totalPrice"] or 0.0 for order in orders),
        "pendingOrders": sum(1 for order in orders if order["status"] == OrderStatus.PENDING.value),
        "deliveredOrders": sum(1 for order in orders if order["status"] == OrderStatus.DELIVERED.value),
    }
