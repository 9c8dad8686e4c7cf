"""Asking-price decay for listed items.

Re-exports key functions for convenient access:
    from seller_agent.pricing import get_decay_function, linear_price
"""

from seller_agent.pricing.decay import (
    DecayFunction,
    get_decay_function,
    legacy_price,
    linear_price,
)

__all__ = [
    "DecayFunction",
    "get_decay_function",
    "legacy_price",
    "linear_price",
]
