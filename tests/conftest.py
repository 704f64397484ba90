"""Pytest configuration and fixtures"""
import pytest

from dessert_shop.cart import ShoppingCart
from dessert_shop.catalog import get_dessert
from dessert_shop.config import get_settings
from dessert_shop.models import Dessert, DessertCategory
from dessert_shop.orders import OrderManager


@pytest.fixture(autouse=True)
def reset_settings():
    """Reload settings around every test so env changes don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def waffle() -> Dessert:
    """Waffle with Berries, 6.50"""
    return get_dessert("waffle-berries")


@pytest.fixture
def macaron() -> Dessert:
    """Macaron Mix of Five, 8.00"""
    return get_dessert("macaron-mix")


@pytest.fixture
def baklava() -> Dessert:
    """Pistachio Baklava, 4.00"""
    return get_dessert("baklava")


@pytest.fixture
def sold_out() -> Dessert:
    """Dessert flagged as unavailable"""
    return Dessert(
        id="cake-sold-out",
        name="Sold Out Cake",
        category=DessertCategory.CAKE,
        price="9.99",
        image="images/image-cake-desktop.jpg",
        in_stock=False,
    )


@pytest.fixture
def cart() -> ShoppingCart:
    """Empty cart with 10% tax"""
    return ShoppingCart(tax_rate="0.10")


class EventRecorder:
    """Listener that keeps every event it receives."""

    def __init__(self):
        self.events = []

    def __call__(self, event):
        self.events.append(event)

    @property
    def types(self):
        return [event.type.value for event in self.events]

    def reset(self):
        self.events.clear()


@pytest.fixture
def recorder(cart) -> EventRecorder:
    """Event recorder subscribed to the cart fixture"""
    rec = EventRecorder()
    cart.subscribe(rec)
    return rec


@pytest.fixture
def order_manager() -> OrderManager:
    """Empty order manager with 10% tax"""
    return OrderManager(tax_rate="0.10")
