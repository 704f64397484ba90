"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout. Floats are
only produced at the view-layer boundary via to_float().
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Iterable, Union

Number = Union[str, int, float, Decimal]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

CURRENCY_SYMBOL = "$"


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        if isinstance(value, float):
            # Go through str so 6.5 becomes Decimal("6.5"), not its binary expansion
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Number) -> Decimal:
    """Round a monetary value to cents using round-half-up."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def has_cent_precision(value: Number) -> bool:
    """True if the value has no digits beyond the cent."""
    decimal_value = to_decimal(value)
    return decimal_value == decimal_value.quantize(MONEY_PRECISION)


def format_money(value: Number) -> str:
    """Format monetary value with the currency symbol, e.g. $1,234.50."""
    return f"{CURRENCY_SYMBOL}{round_money(value):,.2f}"


def to_float(value: Number) -> float:
    """
    Convert Decimal to float for JSON serialization.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))


def add(a: Number, b: Number) -> Decimal:
    """Safe addition of monetary values."""
    return to_decimal(a) + to_decimal(b)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


@dataclass(frozen=True)
class Totals:
    """Subtotal, tax and grand total, each rounded to cents."""
    subtotal: Decimal
    tax: Decimal
    total: Decimal


ZERO_TOTALS = Totals(Decimal("0.00"), Decimal("0.00"), Decimal("0.00"))


def raw_subtotal(line_items: Iterable) -> Decimal:
    """Unrounded sum of price * quantity over line items."""
    subtotal = Decimal("0")
    for item in line_items:
        subtotal = add(subtotal, multiply(item.dessert.price, item.quantity))
    return subtotal


def calculate_totals(line_items: Iterable, tax_rate: Number) -> Totals:
    """
    Compute subtotal, tax and total for a sequence of line items.

    Every derived value is computed from the unrounded subtotal and
    rounded exactly once.

    Args:
        line_items: Objects exposing .dessert.price and .quantity
        tax_rate: Fraction of the subtotal charged as tax (e.g. 0.10)

    Returns:
        Totals rounded to cents
    """
    subtotal = raw_subtotal(line_items)
    tax = multiply(subtotal, tax_rate)
    return Totals(
        subtotal=round_money(subtotal),
        tax=round_money(tax),
        total=round_money(add(subtotal, tax)),
    )
