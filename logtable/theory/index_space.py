from __future__ import annotations

"""Table row mapping: index -> argument text and logarithm text.

Index ``i`` in 1..100 stands for the argument ``1 + i/100`` (1.01 .. 2.00).
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext


INDEX_MIN = 1
INDEX_MAX = 100

# Significant digits of the ground-truth logarithm text.
LOG_PRECISION = 20


def _check_index(index: int) -> None:
    if index < INDEX_MIN or index > INDEX_MAX:
        raise ValueError(f"index must be {INDEX_MIN}..{INDEX_MAX}, got {index}")


def argument_text(index: int) -> str:
    """Return the argument for a table row as fixed-width text.

    Args:
        index: Row index (1..100).

    Returns:
        Text like "1.05" or "2.00".
    """
    _check_index(index)
    return f"{1 + index // 100}.{index % 100:02d}"


def logarithm_text(index: int) -> str:
    """Return log10 of the row argument with LOG_PRECISION significant digits.

    Decimal's log10 is correctly rounded, so the text is the same on every
    platform.
    """
    _check_index(index)
    with localcontext() as ctx:
        ctx.prec = LOG_PRECISION
        value = (Decimal(100 + index) / Decimal(100)).log10()
    return format(value, "f")


def index_from_argument(text: str) -> int:
    """Parse an argument like "1.37" back into its row index.

    The value is rounded to the nearest row (half away from zero); the caller
    checks the range.
    """
    try:
        value = Decimal(str(text).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid argument: {text!r}") from e
    if not value.is_finite():
        raise ValueError(f"Invalid argument: {text!r}")
    try:
        return int(((value - 1) * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    except InvalidOperation as e:
        # quantize fails once the integer part outgrows the context precision
        raise ValueError(f"Invalid argument: {text!r}") from e
