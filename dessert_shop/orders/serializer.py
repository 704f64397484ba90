"""Order payload builders for the view layer."""
from datetime import datetime
from typing import Any, Dict, Optional

from dessert_shop.cart.models import LineItem
from dessert_shop.orders.models import Order
from dessert_shop.services.money import format_money, round_money, to_float


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def build_item_payload(item: LineItem) -> Dict[str, Any]:
    """
    Build a line item payload for the order confirmation view.

    Args:
        item: Line item from an order snapshot or the cart

    Returns:
        Formatted item payload dict
    """
    line_total = round_money(item.line_total)
    return {
        "dessert_id": item.dessert.id,
        "name": item.dessert.name,
        "category": item.dessert.category.value,
        "image": item.dessert.image,
        "quantity": item.quantity,
        "unit_price": to_float(item.dessert.price),
        "unit_price_formatted": format_money(item.dessert.price),
        "line_total": to_float(line_total),
        "line_total_formatted": format_money(line_total),
    }


def build_order_payload(order: Order) -> Dict[str, Any]:
    """
    Build order payload for the view layer.

    Args:
        order: Order from the order manager

    Returns:
        Formatted order payload dict
    """
    details = order.details
    return {
        "id": order.id,
        "status": order.status.value,
        "item_count": details.item_count,
        "items": [build_item_payload(item) for item in details.items],
        "subtotal": to_float(details.subtotal),
        "tax": to_float(details.tax),
        "total": to_float(details.total),
        "total_formatted": format_money(details.total),
        "created_at": _iso(details.created_at),
        "confirmed_at": _iso(order.confirmed_at),
        "cancelled_at": _iso(order.cancelled_at),
        "completed_at": _iso(order.completed_at),
    }
