"""Cart package: models, events, and the shopping cart."""
from .events import (
    CartCleared,
    CartEvent,
    CartEventType,
    CartListener,
    CartTotalChanged,
    ItemAdded,
    ItemRemoved,
    QuantityUpdated,
)
from .models import CartSummary, LineItem
from .service import ShoppingCart

__all__ = [
    "CartCleared",
    "CartEvent",
    "CartEventType",
    "CartListener",
    "CartSummary",
    "CartTotalChanged",
    "ItemAdded",
    "ItemRemoved",
    "LineItem",
    "QuantityUpdated",
    "ShoppingCart",
]
