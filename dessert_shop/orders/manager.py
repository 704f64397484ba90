"""
Order Manager

Creates orders from line-item snapshots and drives their status
transitions. Holds no reference to the cart.
"""
import itertools
import time
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, Optional, Union

from dessert_shop.cart.models import LineItem
from dessert_shop.config import get_settings, validate_tax_rate
from dessert_shop.errors import (
    ERROR_INVALID_TRANSITION,
    ERROR_ORDER_NOT_FOUND,
    EmptyOrderError,
    InvalidTransitionError,
    OrderNotFoundError,
)
from dessert_shop.logging import get_logger, sanitize_id_for_logging
from dessert_shop.orders.models import (
    ORDER_TRANSITIONS,
    REVENUE_STATUSES,
    Order,
    OrderDetails,
    OrderStatistics,
    OrderStatus,
)
from dessert_shop.services.money import Number, add, calculate_totals, round_money

logger = get_logger(__name__)

# Timestamp field stamped when an order enters each status
_STATUS_STAMPS = {
    OrderStatus.CONFIRMED: "confirmed_at",
    OrderStatus.CANCELLED: "cancelled_at",
    OrderStatus.COMPLETED: "completed_at",
}


class OrderManager:
    """Owns the order table for the session."""

    def __init__(self, tax_rate: Optional[Number] = None, id_prefix: Optional[str] = None):
        settings = get_settings()
        self.tax_rate = validate_tax_rate(tax_rate) if tax_rate is not None else settings.tax_rate
        self.id_prefix = id_prefix or settings.order_id_prefix
        self._orders: dict[str, Order] = {}
        self._counter = itertools.count(1)

    def _next_id(self) -> str:
        return f"{self.id_prefix}-{time.time_ns() // 1_000_000}-{next(self._counter)}"

    def create_order(self, line_items: Iterable[LineItem]) -> Order:
        """
        Create a pending order from a snapshot of line items.

        Totals are computed from the given items, not from any live cart.

        Raises:
            EmptyOrderError: if no line items were given
        """
        # Line items are frozen, so a tuple of them is an independent snapshot
        items = tuple(line_items)
        if not items:
            logger.warning("Rejected order creation: no line items")
            raise EmptyOrderError()

        totals = calculate_totals(items, self.tax_rate)
        order = Order(
            id=self._next_id(),
            details=OrderDetails(
                items=items,
                subtotal=totals.subtotal,
                tax=totals.tax,
                total=totals.total,
                created_at=datetime.now(timezone.utc),
            ),
        )
        self._orders[order.id] = order
        logger.info(f"Created order {order.id}: {len(items)} line items, total={totals.total}")
        return order

    def _require(self, order_id: str) -> Order:
        order = self._orders.get(order_id)
        if order is None:
            logger.warning(f"Order {sanitize_id_for_logging(order_id)} not found")
            raise OrderNotFoundError(order_id)
        return order

    def can_transition(self, order_id: str, target: Union[OrderStatus, str]) -> tuple[bool, Optional[str]]:
        """
        Check if an order can move to the target status.

        Returns:
            (can_transition, reason_if_not)
        """
        order = self._orders.get(order_id)
        if order is None:
            return False, ERROR_ORDER_NOT_FOUND

        try:
            target_status = OrderStatus(target)
        except ValueError:
            return False, f"{ERROR_INVALID_TRANSITION}: unknown status {target!r}"

        allowed = ORDER_TRANSITIONS[order.status]
        if target_status not in allowed:
            allowed_names = sorted(s.value for s in allowed)
            return False, (
                f"Cannot transition from '{order.status.value}' to '{target_status.value}'. "
                f"Allowed: {allowed_names}"
            )
        return True, None

    def _transition(self, order_id: str, target: OrderStatus) -> Order:
        order = self._require(order_id)
        if target not in ORDER_TRANSITIONS[order.status]:
            logger.warning(f"Cannot move order {order_id} from {order.status.value} to {target.value}")
            raise InvalidTransitionError(order_id, order.status.value, target.value)

        updated = replace(order, status=target, **{_STATUS_STAMPS[target]: datetime.now(timezone.utc)})
        self._orders[order_id] = updated
        logger.info(f"Order {order_id}: {order.status.value} -> {target.value}")
        return updated

    def confirm_order(self, order_id: str) -> Order:
        """Move a pending order to confirmed and stamp the confirmation time."""
        return self._transition(order_id, OrderStatus.CONFIRMED)

    def cancel_order(self, order_id: str) -> Order:
        """Cancel a pending or confirmed order."""
        return self._transition(order_id, OrderStatus.CANCELLED)

    def complete_order(self, order_id: str) -> Order:
        """Complete a confirmed order."""
        return self._transition(order_id, OrderStatus.COMPLETED)

    def get_order(self, order_id: str) -> Optional[Order]:
        return self._orders.get(order_id)

    def get_all_orders(self) -> tuple[Order, ...]:
        return tuple(self._orders.values())

    def get_orders_by_status(self, status: Union[OrderStatus, str]) -> tuple[Order, ...]:
        wanted = OrderStatus(status)
        return tuple(order for order in self._orders.values() if order.status == wanted)

    def get_total_revenue(self) -> Decimal:
        """Sum of totals over confirmed and completed orders."""
        revenue = Decimal("0")
        for order in self._orders.values():
            if order.status in REVENUE_STATUSES:
                revenue = add(revenue, order.total)
        return round_money(revenue)

    def get_statistics(self) -> OrderStatistics:
        by_status = {status: 0 for status in OrderStatus}
        for order in self._orders.values():
            by_status[order.status] += 1
        return OrderStatistics(
            total_orders=len(self._orders),
            total_revenue=self.get_total_revenue(),
            by_status=by_status,
        )

    def clear_all(self) -> None:
        """Drop every order and restart the id counter (session reset)."""
        count = len(self._orders)
        self._orders.clear()
        self._counter = itertools.count(1)
        logger.info(f"Cleared {count} orders")

    def __len__(self) -> int:
        return len(self._orders)
