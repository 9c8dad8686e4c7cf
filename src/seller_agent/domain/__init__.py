"""Domain types, models, and errors for the seller agent."""

from seller_agent.domain.errors import (
    DuplicateListingError,
    InvalidTransitionError,
    SellerError,
)
from seller_agent.domain.models import ListingTerms, Proposal
from seller_agent.domain.types import DecayMode, ListingState, Performative

__all__ = [
    "DecayMode",
    "DuplicateListingError",
    "InvalidTransitionError",
    "ListingState",
    "ListingTerms",
    "Performative",
    "Proposal",
    "SellerError",
]
