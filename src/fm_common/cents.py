"""Integer arithmetic utilities for cents-based balances and prices.

Balances and job prices are stored as int cents. Decimal only appears at the
API boundary, where client-supplied amounts are rounded to 2 fractional
digits and converted once.
"""

from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation

_CENT = Decimal("0.01")
# Client amounts needing more digits than this are rejected as too large
_AMOUNT_CONTEXT = Context(prec=60)


def amount_to_cents(amount: Decimal | int | float | str) -> int:
    """Round a monetary amount half-up to 2 digits and return it as int cents.

    Raises ValueError for non-numeric, non-finite, oversized (beyond 60 significant
    digits once rounded), or non-positive (after rounding) amounts.
    """
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation:
        raise ValueError(f"Amount is not a number: {amount!r}") from None
    if not value.is_finite():
        raise ValueError(f"Amount must be finite, got {amount!r}")
    try:
        rounded = value.quantize(_CENT, rounding=ROUND_HALF_UP, context=_AMOUNT_CONTEXT)
    except InvalidOperation:
        raise ValueError(f"Amount is too large: {amount!r}") from None
    cents = int(rounded.scaleb(2, context=_AMOUNT_CONTEXT))
    if cents <= 0:
        raise ValueError(f"Amount must be positive after rounding, got {amount!r}")
    return cents


def cents_to_decimal(cents: int) -> Decimal:
    """Convert cents to a 2-digit Decimal: 5001 -> Decimal('50.01')."""
    return (Decimal(cents) / 100).quantize(_CENT)


def cents_to_display(cents: int) -> str:
    """Convert cents to display string: 6500 -> '$65.00', -1200 -> '-$12.00'."""
    if cents < 0:
        abs_cents = -cents
        return f"-${abs_cents // 100:,}.{abs_cents % 100:02d}"
    return f"${cents // 100:,}.{cents % 100:02d}"


def apply_bps(amount_cents: int, rate_bps: int) -> int:
    """Apply a basis-point rate with floor division.

    floor(amount * rate_bps / 10000). For a whole-cent candidate x,
    x <= amount * rate_bps / 10000  <=>  x <= apply_bps(amount, rate_bps).
    """
    if amount_cents == 0 or rate_bps == 0:
        return 0
    return (amount_cents * rate_bps) // 10000
