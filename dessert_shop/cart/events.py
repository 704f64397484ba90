"""Cart change notifications delivered to subscribed listeners."""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, ClassVar

from dessert_shop.cart.models import LineItem


class CartEventType(str, Enum):
    """Kinds of cart notifications."""
    ITEM_ADDED = "item-added"
    ITEM_REMOVED = "item-removed"
    QUANTITY_UPDATED = "quantity-updated"
    CART_CLEARED = "cart-cleared"
    CART_TOTAL_CHANGED = "cart-total-changed"


@dataclass(frozen=True)
class CartEvent:
    """Base class for cart notifications."""
    type: ClassVar[CartEventType]


@dataclass(frozen=True)
class ItemAdded(CartEvent):
    type: ClassVar[CartEventType] = CartEventType.ITEM_ADDED
    item: LineItem


@dataclass(frozen=True)
class ItemRemoved(CartEvent):
    type: ClassVar[CartEventType] = CartEventType.ITEM_REMOVED
    dessert_id: str


@dataclass(frozen=True)
class QuantityUpdated(CartEvent):
    type: ClassVar[CartEventType] = CartEventType.QUANTITY_UPDATED
    dessert_id: str
    new_quantity: int


@dataclass(frozen=True)
class CartCleared(CartEvent):
    type: ClassVar[CartEventType] = CartEventType.CART_CLEARED


@dataclass(frozen=True)
class CartTotalChanged(CartEvent):
    type: ClassVar[CartEventType] = CartEventType.CART_TOTAL_CHANGED
    total: Decimal


CartListener = Callable[[CartEvent], None]
