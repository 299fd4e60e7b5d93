from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")
ZERO = Decimal("0")


def round_money(amount: Decimal) -> Decimal:
    """Round to two decimal places, half-up (the only rounding mode used for prices)."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
