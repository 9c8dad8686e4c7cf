"""Asking-price decay functions.

All arithmetic on the elapsed/total time ratio uses Decimal so the linear
schedule does not accumulate floating-point error.  Prices are rounded to
whole units with ROUND_HALF_UP and always clamped to [floor, initial].
"""

from collections.abc import Callable
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from seller_agent.domain.models import ListingTerms
from seller_agent.domain.types import DecayMode

WHOLE_UNITS = Decimal("1")

_MICROSECOND = timedelta(microseconds=1)

DecayFunction = Callable[[ListingTerms, datetime], int]


def _elapsed_and_total(terms: ListingTerms, now: datetime) -> tuple[int, int]:
    """Return (elapsed, total) listing time in whole microseconds."""
    elapsed = (now - terms.start_time) // _MICROSECOND
    total = (terms.deadline - terms.start_time) // _MICROSECOND
    return elapsed, total


def _clamp(price: int, terms: ListingTerms) -> int:
    return max(terms.floor_price, min(terms.initial_price, price))


def linear_price(terms: ListingTerms, now: datetime) -> int:
    """Price falling proportionally with elapsed time.

    Formula: initial - price_range * elapsed / total, with the drop rounded
    half-up to whole units.  Equals the initial price at the start time and
    the floor price at (and after) the deadline.

    Args:
        terms: The listing's sale terms.
        now: The observation time.

    Returns:
        The asking price at *now*.
    """
    elapsed, total = _elapsed_and_total(terms, now)
    if elapsed <= 0:
        return terms.initial_price
    if elapsed >= total:
        return terms.floor_price
    drop = Decimal(terms.price_range) * Decimal(elapsed) / Decimal(total)
    rounded = int(drop.quantize(WHOLE_UNITS, rounding=ROUND_HALF_UP))
    return _clamp(terms.initial_price - rounded, terms)


def legacy_price(terms: ListingTerms, now: datetime) -> int:
    """Price using a truncated whole-number elapsed/total ratio.

    The ratio is zero for the whole listing period, so the price stays at
    the initial price until the deadline.  Kept for compatibility with
    sellers that rely on that behaviour.
    """
    elapsed, total = _elapsed_and_total(terms, now)
    ratio = max(elapsed, 0) // total
    return _clamp(terms.initial_price - terms.price_range * ratio, terms)


_DECAY_FUNCTIONS: dict[DecayMode, DecayFunction] = {
    DecayMode.LINEAR: linear_price,
    DecayMode.LEGACY: legacy_price,
}


def get_decay_function(mode: DecayMode) -> DecayFunction:
    """Look up the decay function for *mode*.

    Raises:
        ValueError: If *mode* has no registered decay function.
    """
    try:
        return _DECAY_FUNCTIONS[mode]
    except KeyError:
        raise ValueError(f"Unknown decay mode: {mode}") from None
