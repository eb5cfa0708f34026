"""Money helpers using Decimal with BRL display rules."""

from contextlib import AbstractContextManager
from decimal import (
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
    getcontext,
    localcontext,
)

MONEY_PRECISION = Decimal("0.01")
ZERO = Decimal("0")


def quiet_context() -> AbstractContextManager[Context]:
    """Return a local decimal context where invalid operations yield NaN.

    Inside it ``Infinity - Infinity`` gives NaN instead of raising, and any
    ordering comparison involving NaN is False.
    """

    context: Context = getcontext().copy()
    context.traps[InvalidOperation] = False
    return localcontext(context)


def quantize_money(value: Decimal) -> Decimal:
    """Return value rounded to two decimal places with HALF_UP strategy."""

    return value.quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    """Render money as string with exactly two decimal places."""

    return f"{quantize_money(value):.2f}"


def to_brl(value: Decimal) -> str:
    """Format amount as BRL string, e.g. ``R$ -33,33``."""

    normalized = format_money(value).replace(".", ",")
    return f"R$ {normalized}"


def is_settled(amount: Decimal, epsilon: Decimal) -> bool:
    """Return whether amount is small enough to be treated as zero.

    NaN is never settled.
    """

    with quiet_context():
        return abs(amount) < epsilon
