"""
Shop Errors

Centralized error messages and the exception hierarchy raised by the
cart and order manager. All failures are raised before any state change.
"""
from typing import Optional

# Cart errors
ERROR_INVALID_QUANTITY = "Quantity must be a positive integer"
ERROR_OUT_OF_STOCK = "Dessert is not in stock"

# Order errors
ERROR_EMPTY_ORDER = "Cannot create order with empty cart"
ERROR_ORDER_NOT_FOUND = "Order not found"
ERROR_INVALID_TRANSITION = "Invalid order status transition"


class ShopError(Exception):
    """Base error for cart and order operations."""

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class CartError(ShopError):
    """Cart operation rejected."""


class InvalidQuantityError(CartError):
    """Quantity is not a positive integer."""

    def __init__(self, quantity: object) -> None:
        super().__init__(f"{ERROR_INVALID_QUANTITY}, got {quantity!r}", code="INVALID_QUANTITY")
        self.quantity = quantity


class OutOfStockError(CartError):
    """Dessert is flagged as unavailable."""

    def __init__(self, dessert_id: str) -> None:
        super().__init__(f"{ERROR_OUT_OF_STOCK}: {dessert_id}", code="OUT_OF_STOCK")
        self.dessert_id = dessert_id


class OrderError(ShopError):
    """Order operation rejected."""


class EmptyOrderError(OrderError):
    """Order requested from no line items."""

    def __init__(self) -> None:
        super().__init__(ERROR_EMPTY_ORDER, code="EMPTY_ORDER")


class OrderNotFoundError(OrderError):
    """No order with the given id."""

    def __init__(self, order_id: str) -> None:
        super().__init__(f"{ERROR_ORDER_NOT_FOUND}: {order_id}", code="ORDER_NOT_FOUND")
        self.order_id = order_id


class InvalidTransitionError(OrderError):
    """Status change not allowed from the order's current status."""

    def __init__(self, order_id: str, current: str, target: str) -> None:
        super().__init__(
            f"{ERROR_INVALID_TRANSITION}: order {order_id} is {current}, cannot become {target}",
            code="INVALID_TRANSITION",
        )
        self.order_id = order_id
        self.current = current
        self.target = target


__all__ = [
    "ERROR_INVALID_QUANTITY",
    "ERROR_OUT_OF_STOCK",
    "ERROR_EMPTY_ORDER",
    "ERROR_ORDER_NOT_FOUND",
    "ERROR_INVALID_TRANSITION",
    "ShopError",
    "CartError",
    "InvalidQuantityError",
    "OutOfStockError",
    "OrderError",
    "EmptyOrderError",
    "OrderNotFoundError",
    "InvalidTransitionError",
]
