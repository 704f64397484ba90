"""
Shop configuration.

Values are read from the environment once and cached:

    SHOP_TAX_RATE         Tax rate applied to the subtotal (default 0.10)
    SHOP_ORDER_ID_PREFIX  Prefix for generated order ids (default ORD)

LOG_LEVEL is read by dessert_shop.logging when the root logger is set up.
"""
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import cache
from typing import Union

DEFAULT_TAX_RATE = Decimal("0.10")
DEFAULT_ORDER_ID_PREFIX = "ORD"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the cart and order manager."""
    tax_rate: Decimal = DEFAULT_TAX_RATE
    order_id_prefix: str = DEFAULT_ORDER_ID_PREFIX


def validate_tax_rate(value: Union[str, int, float, Decimal]) -> Decimal:
    """
    Parse and check a tax rate.

    Raises:
        ValueError: if the value is not a finite number in [0, 1)
    """
    if isinstance(value, bool):
        raise ValueError(f"tax rate must be a decimal number, got {value!r}")
    try:
        rate = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError(f"tax rate must be a decimal number, got {value!r}")
    if not rate.is_finite() or rate < 0 or rate >= 1:
        raise ValueError(f"tax rate must be in [0, 1), got {value!r}")
    return rate


@cache
def get_settings() -> Settings:
    """Load settings from environment (cached; use get_settings.cache_clear() to reload)."""
    tax_rate = validate_tax_rate(os.environ.get("SHOP_TAX_RATE", str(DEFAULT_TAX_RATE)))
    prefix = os.environ.get("SHOP_ORDER_ID_PREFIX", DEFAULT_ORDER_ID_PREFIX).strip()
    return Settings(
        tax_rate=tax_rate,
        order_id_prefix=prefix or DEFAULT_ORDER_ID_PREFIX,
    )
