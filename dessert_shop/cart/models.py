"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from dessert_shop.errors import InvalidQuantityError
from dessert_shop.models import Dessert
from dessert_shop.services.money import multiply, round_money, to_float


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_quantity(value: object) -> bool:
    """True for ints (not bools)."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class LineItem:
    """One dessert in the cart with its quantity. Never holds quantity < 1."""
    dessert: Dessert
    quantity: int
    added_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if not is_quantity(self.quantity) or self.quantity < 1:
            raise InvalidQuantityError(self.quantity)

    @property
    def dessert_id(self) -> str:
        return self.dessert.id

    @property
    def line_total(self) -> Decimal:
        """Unrounded price * quantity."""
        return multiply(self.dessert.price, self.quantity)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "dessert_id": self.dessert.id,
            "name": self.dessert.name,
            "quantity": self.quantity,
            "unit_price": to_float(self.dessert.price),
            "line_total": to_float(round_money(self.line_total)),
            "added_at": self.added_at.isoformat(),
        }


@dataclass(frozen=True)
class CartSummary:
    """Consistent view of the cart totals and contents."""
    item_count: int
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    items: tuple[LineItem, ...]

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_dict(self) -> dict:
        """Convert to dictionary for the view layer."""
        return {
            "is_empty": self.is_empty,
            "item_count": self.item_count,
            "items": [item.to_dict() for item in self.items],
            "subtotal": to_float(self.subtotal),
            "tax": to_float(self.tax),
            "total": to_float(self.total),
        }
