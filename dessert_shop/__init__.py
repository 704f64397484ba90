"""
Dessert Shop Core

In-memory shopping cart and order lifecycle for a fixed dessert catalog:
- catalog: read-only dessert records
- cart: line items, change notifications, totals
- orders: order snapshots and status transitions
"""
from dessert_shop.cart import ShoppingCart
from dessert_shop.catalog import DESSERTS, get_dessert, list_desserts
from dessert_shop.models import Dessert, DessertCategory
from dessert_shop.orders import OrderManager, OrderStatus

__all__ = [
    "DESSERTS",
    "Dessert",
    "DessertCategory",
    "OrderManager",
    "OrderStatus",
    "ShoppingCart",
    "get_dessert",
    "list_desserts",
]
