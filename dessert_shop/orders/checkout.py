"""
Checkout flow connecting the cart to the order manager.

The confirm button creates an order from the cart contents and confirms it
straight away; "start new order" clears the cart.
"""
from dessert_shop.cart.service import ShoppingCart
from dessert_shop.logging import get_logger
from dessert_shop.orders.manager import OrderManager
from dessert_shop.orders.models import Order

logger = get_logger(__name__)


def checkout(cart: ShoppingCart, manager: OrderManager) -> Order:
    """
    Create and confirm an order from the current cart contents.

    The cart is left untouched so the confirmation view can still show it.

    Raises:
        EmptyOrderError: if the cart is empty
    """
    order = manager.create_order(cart.get_items())
    confirmed = manager.confirm_order(order.id)
    logger.info(f"Checkout complete: order {confirmed.id}, {cart.get_item_count()} items")
    return confirmed


def start_new_order(cart: ShoppingCart) -> None:
    """Reset the cart for the next order."""
    cart.clear()
