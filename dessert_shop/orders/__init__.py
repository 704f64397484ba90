"""Order processing module."""
from .checkout import checkout, start_new_order
from .manager import OrderManager
from .models import (
    ORDER_TRANSITIONS,
    REVENUE_STATUSES,
    TERMINAL_STATUSES,
    Order,
    OrderDetails,
    OrderStatistics,
    OrderStatus,
)
from .serializer import build_item_payload, build_order_payload

__all__ = [
    "ORDER_TRANSITIONS",
    "REVENUE_STATUSES",
    "TERMINAL_STATUSES",
    "Order",
    "OrderDetails",
    "OrderManager",
    "OrderStatistics",
    "OrderStatus",
    "build_item_payload",
    "build_order_payload",
    "checkout",
    "start_new_order",
]
