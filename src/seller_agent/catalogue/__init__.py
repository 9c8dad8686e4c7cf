"""Listings currently for sale and the timers that price them."""

from seller_agent.catalogue.store import Catalogue
from seller_agent.catalogue.timer import (
    DEFAULT_TICK_INTERVAL,
    EXPIRY_MESSAGE,
    PriceDecayTimer,
)

__all__ = [
    "DEFAULT_TICK_INTERVAL",
    "EXPIRY_MESSAGE",
    "Catalogue",
    "PriceDecayTimer",
]
