"""Decimal rounding for reported values.

Python's ``round()`` uses banker's rounding on the binary float, which turns
``2.675`` into ``2.67``. Reported values instead go through ``Decimal`` built
from the float's shortest repr and are rounded half-up, so ``2.255 -> 2.26``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal

_TWO_PLACES = Decimal("0.01")
_MIN_PRECISION = 28


def _quantize(value: float, quantum: Decimal) -> Decimal:
    exact = Decimal(repr(value))
    if not exact.is_finite():
        msg = f"cannot round non-finite value {value!r}"
        raise ValueError(msg)
    # Integer digits plus the requested decimals must fit in the context.
    digits = exact.adjusted() + 1 - quantum.as_tuple().exponent
    context = Context(prec=max(_MIN_PRECISION, digits + 1), rounding=ROUND_HALF_UP)
    return exact.quantize(quantum, context=context)


def round_half_up(value: float, places: int = 2) -> float:
    """Round ``value`` to ``places`` decimals, halves away from zero.

    Raises:
        ValueError: If ``value`` is infinite or NaN.
    """
    quantum = _TWO_PLACES if places == 2 else Decimal(1).scaleb(-places)
    return float(_quantize(value, quantum))


def format_two_places(value: float) -> str:
    """Render a rounded value with exactly two decimals (``2.3 -> '2.30'``)."""
    return str(_quantize(value, _TWO_PLACES))
