"""
Dessert Catalog

Fixed, read-only, ordered sequence of desserts loaded once at import.
The view layer reads it directly and passes chosen records to the cart.
"""
from typing import Optional

from dessert_shop.models import Dessert, DessertCategory

DESSERTS: tuple[Dessert, ...] = (
    Dessert(
        id="waffle-berries",
        name="Waffle with Berries",
        category=DessertCategory.WAFFLE,
        price="6.50",
        image="images/image-waffle-desktop.jpg",
        description="Fresh waffle topped with mixed berries and syrup",
    ),
    Dessert(
        id="creme-brulee",
        name="Vanilla Bean Crème Brûlée",
        category=DessertCategory.CREME_BRULEE,
        price="7.00",
        image="images/image-creme-brulee-desktop.jpg",
        description="Classic French dessert with caramelized sugar top",
    ),
    Dessert(
        id="macaron-mix",
        name="Macaron Mix of Five",
        category=DessertCategory.MACARON,
        price="8.00",
        image="images/image-macaron-desktop.jpg",
        description="Assortment of five colorful French macarons",
    ),
    Dessert(
        id="tiramisu",
        name="Classic Tiramisu",
        category=DessertCategory.TIRAMISU,
        price="5.50",
        image="images/image-tiramisu-desktop.jpg",
        description="Traditional Italian coffee-flavored dessert",
    ),
    Dessert(
        id="baklava",
        name="Pistachio Baklava",
        category=DessertCategory.BAKLAVA,
        price="4.00",
        image="images/image-baklava-desktop.jpg",
        description="Sweet pastry with pistachios",
    ),
    Dessert(
        id="pie-lemon",
        name="Lemon Meringue Pie",
        category=DessertCategory.PIE,
        price="5.00",
        image="images/image-meringue-desktop.jpg",
        description="Tangy lemon filling topped with fluffy meringue",
    ),
    Dessert(
        id="cake-red-velvet",
        name="Red Velvet Cake",
        category=DessertCategory.CAKE,
        price="4.50",
        image="images/image-cake-desktop.jpg",
        description="Rich red velvet cake with cream cheese frosting",
    ),
    Dessert(
        id="brownie-salted-caramel",
        name="Salted Caramel Brownie",
        category=DessertCategory.BROWNIE,
        price="5.50",
        image="images/image-brownie-desktop.jpg",
        description="Fudgy brownie with salted caramel drizzle",
    ),
    Dessert(
        id="panna-cotta",
        name="Vanilla Panna Cotta",
        category=DessertCategory.PANNA_COTTA,
        price="6.50",
        image="images/image-panna-cotta-desktop.jpg",
        description="Creamy Italian dessert with vanilla bean",
    ),
)

_BY_ID: dict[str, Dessert] = {dessert.id: dessert for dessert in DESSERTS}


def get_dessert(dessert_id: str) -> Optional[Dessert]:
    """Look up a dessert by id, None if unknown."""
    return _BY_ID.get(dessert_id)


def list_desserts(
    category: Optional[DessertCategory] = None,
    in_stock_only: bool = False,
) -> tuple[Dessert, ...]:
    """Desserts in catalog order, optionally filtered."""
    return tuple(
        dessert
        for dessert in DESSERTS
        if (category is None or dessert.category == category)
        and (not in_stock_only or dessert.in_stock)
    )
