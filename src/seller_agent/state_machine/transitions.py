"""Transition map defining all valid (state, event) -> state mappings."""

from enum import StrEnum

from seller_agent.domain.types import ListingState


class ListingEvent(StrEnum):
    """Events that can end a listing."""

    SELL = "sell"
    EXPIRE = "expire"
    WITHDRAW = "withdraw"


# Any pair not in this dict is an invalid transition.
TRANSITIONS: dict[tuple[ListingState, str], ListingState] = {
    (ListingState.RUNNING, ListingEvent.SELL): ListingState.SOLD,
    (ListingState.RUNNING, ListingEvent.EXPIRE): ListingState.EXPIRED,
    (ListingState.RUNNING, ListingEvent.WITHDRAW): ListingState.WITHDRAWN,
}

# States that reject all events -- no outgoing transitions allowed.
TERMINAL_STATES: frozenset[ListingState] = frozenset(
    {ListingState.SOLD, ListingState.EXPIRED, ListingState.WITHDRAWN}
)
