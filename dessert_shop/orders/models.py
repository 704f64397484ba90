"""Order snapshots and status lifecycle."""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from dessert_shop.cart.models import LineItem
from dessert_shop.services.money import to_float


class OrderStatus(str, Enum):
    """Order status lifecycle."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


# Allowed target statuses per current status
ORDER_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.CANCELLED, OrderStatus.COMPLETED}),
    OrderStatus.CANCELLED: frozenset(),  # Final state
    OrderStatus.COMPLETED: frozenset(),  # Final state
}

TERMINAL_STATUSES = frozenset(s for s, targets in ORDER_TRANSITIONS.items() if not targets)

# Statuses whose totals count as revenue
REVENUE_STATUSES = frozenset({OrderStatus.CONFIRMED, OrderStatus.COMPLETED})


@dataclass(frozen=True)
class OrderDetails:
    """Items and totals captured when the order was created. Never changes."""
    items: tuple[LineItem, ...]
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    created_at: datetime

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)


@dataclass(frozen=True)
class Order:
    """An order; only status and its timestamps move after creation."""
    id: str
    details: OrderDetails
    status: OrderStatus = OrderStatus.PENDING
    confirmed_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def total(self) -> Decimal:
        return self.details.total

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES


@dataclass(frozen=True)
class OrderStatistics:
    """Order counts per status plus revenue."""
    total_orders: int
    total_revenue: Decimal
    by_status: dict[OrderStatus, int] = field(default_factory=dict)

    @property
    def pending(self) -> int:
        return self.by_status.get(OrderStatus.PENDING, 0)

    @property
    def confirmed(self) -> int:
        return self.by_status.get(OrderStatus.CONFIRMED, 0)

    @property
    def cancelled(self) -> int:
        return self.by_status.get(OrderStatus.CANCELLED, 0)

    @property
    def completed(self) -> int:
        return self.by_status.get(OrderStatus.COMPLETED, 0)

    def to_dict(self) -> dict:
        return {
            "total_orders": self.total_orders,
            **{status.value: self.by_status.get(status, 0) for status in OrderStatus},
            "total_revenue": to_float(self.total_revenue),
        }
