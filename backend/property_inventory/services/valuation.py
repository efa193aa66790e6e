"""Valuation Service

Derives the stored total price of a property from its size and unit price.
"""

from decimal import Decimal, ROUND_HALF_UP

# Matches the two fractional digits of the total_price column
CENTS = Decimal("0.01")


def compute_total_price(price_per_square_meter: Decimal, square_meters: Decimal) -> Decimal:
    """Return price_per_square_meter * square_meters rounded half-up to cents.

    Inputs carry at most two decimals each, so the exact product has at most
    four; rounding only affects sub-cent remainders.
    """
    total = Decimal(price_per_square_meter) * Decimal(square_meters)
    return total.quantize(CENTS, rounding=ROUND_HALF_UP)


# Largest total with at most 15 significant digits; every such value
# survives the round trip through a JSON (binary float) number unchanged
MAX_TOTAL_PRICE = Decimal("9999999999999.99")


def as_json_number(value: Decimal):
    """Render a cents amount as an int when whole, otherwise as a float"""
    if value == value.to_integral_value():
        return int(value)
    return float(value)
