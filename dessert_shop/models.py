"""
Pydantic Models - catalog records.

Desserts are immutable reference data: the catalog builds them once and
callers hand them to the cart as-is.
"""
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dessert_shop.services.money import has_cent_precision, to_decimal


class DessertCategory(str, Enum):
    """Dessert category tag shown above the dessert name."""
    WAFFLE = "Waffle"
    CREME_BRULEE = "Crème Brûlée"
    MACARON = "Macaron"
    TIRAMISU = "Tiramisu"
    BAKLAVA = "Baklava"
    PIE = "Pie"
    CAKE = "Cake"
    BROWNIE = "Brownie"
    PANNA_COTTA = "Panna Cotta"


class Dessert(BaseModel):
    """Catalog item record."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1)
    name: str
    category: DessertCategory
    price: Decimal
    image: str
    description: Optional[str] = None
    in_stock: bool = True

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        # Floats go through str; everything else is left to pydantic
        if isinstance(v, float):
            return to_decimal(v)
        return v

    @field_validator("price")
    @classmethod
    def check_price(cls, v: Decimal) -> Decimal:
        if not v.is_finite() or v < 0:
            raise ValueError("price must be a non-negative amount")
        if not has_cent_precision(v):
            raise ValueError("price must not have more than 2 decimal places")
        return v
