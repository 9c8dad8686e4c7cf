"""Domain-specific exception classes for the seller agent."""

from seller_agent.domain.types import ListingState


class SellerError(Exception):
    """Base class for all domain errors in the seller agent."""


class InvalidTransitionError(SellerError):
    """Raised when an invalid listing state transition is attempted.

    Attributes:
        current_state: The state the listing was in when the transition was attempted.
        event: The event that was rejected.
    """

    def __init__(self, current_state: ListingState, event: str) -> None:
        self.current_state = current_state
        self.event = event
        super().__init__(
            f"Cannot apply event '{event}' in state '{current_state}'"
        )


class DuplicateListingError(SellerError):
    """Raised when an item is put up for sale while already listed.

    Attributes:
        title: The title that is already in the catalogue.
    """

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"'{title}' is already listed for sale")
