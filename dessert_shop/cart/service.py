"""In-memory shopping cart with synchronous change notifications."""
from dataclasses import replace
from decimal import Decimal
from typing import Callable, Iterator, Optional

from dessert_shop.cart.events import (
    CartCleared,
    CartEvent,
    CartListener,
    CartTotalChanged,
    ItemAdded,
    ItemRemoved,
    QuantityUpdated,
)
from dessert_shop.cart.models import CartSummary, LineItem, is_quantity
from dessert_shop.config import get_settings, validate_tax_rate
from dessert_shop.errors import InvalidQuantityError, OutOfStockError
from dessert_shop.logging import get_logger, sanitize_id_for_logging
from dessert_shop.models import Dessert
from dessert_shop.services.money import Number, calculate_totals

logger = get_logger(__name__)


class ShoppingCart:
    """
    Owns the line items of the current shopping session.

    Features:
    - One line item per dessert id; re-adding bumps the quantity
    - Items iterate in first-add order
    - Listeners are notified synchronously, in subscription order,
      after the cart state is fully updated
    """

    def __init__(self, tax_rate: Optional[Number] = None):
        self._items: dict[str, LineItem] = {}
        # dict keys keep subscription order with set semantics
        self._listeners: dict[CartListener, None] = {}
        self.tax_rate = validate_tax_rate(tax_rate) if tax_rate is not None else get_settings().tax_rate

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_item(self, dessert: Dessert, quantity: int = 1) -> None:
        """Add a dessert, or increase its quantity if already in the cart."""
        if not is_quantity(quantity) or quantity <= 0:
            logger.warning(f"Rejected add of {sanitize_id_for_logging(dessert.id)}: quantity={quantity!r}")
            raise InvalidQuantityError(quantity)
        if not dessert.in_stock:
            logger.warning(f"Rejected add of {sanitize_id_for_logging(dessert.id)}: out of stock")
            raise OutOfStockError(dessert.id)

        existing = self._items.get(dessert.id)
        if existing:
            updated = replace(existing, quantity=existing.quantity + quantity)
            self._items[dessert.id] = updated
            logger.debug(f"Cart: {sanitize_id_for_logging(dessert.id)} quantity -> {updated.quantity}")
            self._emit(QuantityUpdated(dessert_id=dessert.id, new_quantity=updated.quantity))
        else:
            item = LineItem(dessert=dessert, quantity=quantity)
            self._items[dessert.id] = item
            logger.debug(f"Cart: added {sanitize_id_for_logging(dessert.id)} x{quantity}")
            self._emit(ItemAdded(item=item))

        self._emit(CartTotalChanged(total=self.get_total()))

    def remove_item(self, dessert_id: str) -> None:
        """Remove a line item; does nothing if the dessert is not in the cart."""
        if self._items.pop(dessert_id, None) is None:
            return
        logger.debug(f"Cart: removed {sanitize_id_for_logging(dessert_id)}")
        self._emit(ItemRemoved(dessert_id=dessert_id))
        self._emit(CartTotalChanged(total=self.get_total()))

    def update_quantity(self, dessert_id: str, new_quantity: int) -> None:
        """Set a line item's quantity. Zero or less removes it."""
        if not is_quantity(new_quantity):
            raise InvalidQuantityError(new_quantity)
        if new_quantity <= 0:
            self.remove_item(dessert_id)
            return

        existing = self._items.get(dessert_id)
        if existing is None:
            return
        self._items[dessert_id] = replace(existing, quantity=new_quantity)
        logger.debug(f"Cart: {sanitize_id_for_logging(dessert_id)} quantity -> {new_quantity}")
        self._emit(QuantityUpdated(dessert_id=dessert_id, new_quantity=new_quantity))
        self._emit(CartTotalChanged(total=self.get_total()))

    def increment_item(self, dessert_id: str) -> None:
        item = self._items.get(dessert_id)
        if item:
            self.update_quantity(dessert_id, item.quantity + 1)

    def decrement_item(self, dessert_id: str) -> None:
        item = self._items.get(dessert_id)
        if item:
            self.update_quantity(dessert_id, item.quantity - 1)

    def clear(self) -> None:
        """Empty the cart. Always notifies, even when already empty."""
        self._items.clear()
        logger.debug("Cart: cleared")
        self._emit(CartCleared())
        self._emit(CartTotalChanged(total=self.get_total()))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_total(self) -> Decimal:
        """Subtotal (price * quantity summed) rounded to cents."""
        return calculate_totals(self._items.values(), self.tax_rate).subtotal

    def get_item_count(self) -> int:
        """Sum of quantities, not the number of distinct desserts."""
        return sum(item.quantity for item in self._items.values())

    def get_items(self) -> tuple[LineItem, ...]:
        return tuple(self._items.values())

    def get_item(self, dessert_id: str) -> Optional[LineItem]:
        return self._items.get(dessert_id)

    def has_item(self, dessert_id: str) -> bool:
        return dessert_id in self._items

    def get_summary(self) -> CartSummary:
        """Item count, totals and items computed from the same state."""
        items = self.get_items()
        totals = calculate_totals(items, self.tax_rate)
        return CartSummary(
            item_count=sum(item.quantity for item in items),
            subtotal=totals.subtotal,
            tax=totals.tax,
            total=totals.total,
            items=items,
        )

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def size(self) -> int:
        """Number of distinct line items."""
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, dessert_id: object) -> bool:
        return dessert_id in self._items

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self.get_items())

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """
        Register a listener for all future notifications.

        Subscribing the same listener twice registers it once.

        Returns:
            Callable that removes the listener
        """
        self._listeners[listener] = None

        def unsubscribe() -> None:
            self._listeners.pop(listener, None)

        return unsubscribe

    def _emit(self, event: CartEvent) -> None:
        # Snapshot so listeners may (un)subscribe during delivery
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(f"Cart listener {listener!r} failed on {event.type.value}")
