"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation, getcontext
import math
import re

ZERO = Decimal("0")

# Leading numeric prefix, the way API amount strings like "1500.00" are read
_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _within_context(amount: Decimal) -> Decimal:
    """Return amount if arithmetic on it cannot overflow, else zero."""
    if not amount.is_finite():
        return ZERO
    context = getcontext()
    if amount.is_zero() or not (context.Emin <= amount.adjusted() <= context.Emax):
        return ZERO
    return amount


def to_decimal(value: object) -> Decimal:
    """Convert an API amount to a Decimal without ever failing.

    Amounts arrive as strings ("1500.00"), occasionally as numbers, and
    sometimes not at all. Anything that does not start with a number
    becomes zero; trailing garbage after a numeric prefix is ignored.
    Values whose exponent lies outside the decimal context are zero too.

    Args:
        value: Raw amount value from an API payload

    Returns:
        Decimal amount, ``Decimal("0")`` when unparseable
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return _within_context(value)
    if isinstance(value, int):
        return _within_context(Decimal(value))
    if isinstance(value, float):
        return Decimal(str(value)) if math.isfinite(value) else ZERO

    match = _NUMERIC_PREFIX.match(str(value))
    if match is None:
        return ZERO
    try:
        return _within_context(Decimal(match.group(1)))
    except InvalidOperation:
        return ZERO
