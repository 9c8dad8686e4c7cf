"""Listing lifecycle state machine with transition validation."""

from seller_agent.state_machine.machine import ListingStateMachine
from seller_agent.state_machine.transitions import (
    TERMINAL_STATES,
    TRANSITIONS,
    ListingEvent,
)

__all__ = [
    "TERMINAL_STATES",
    "TRANSITIONS",
    "ListingEvent",
    "ListingStateMachine",
]
