"""Domain enumerations for the seller agent."""

from enum import StrEnum


class Performative(StrEnum):
    """Semantic type of a protocol message exchanged with buyers."""

    CFP = "cfp"
    PROPOSE = "propose"
    REFUSE = "refuse"
    ACCEPT_PROPOSAL = "accept_proposal"
    CONFIRM = "confirm"
    DISCONFIRM = "disconfirm"
    NOT_UNDERSTOOD = "not_understood"


class ListingState(StrEnum):
    """States in a listing's lifecycle."""

    RUNNING = "running"
    SOLD = "sold"
    EXPIRED = "expired"
    WITHDRAWN = "withdrawn"


class DecayMode(StrEnum):
    """How the asking price moves from the initial price toward the floor."""

    # Proportional to elapsed time, reaching the floor at the deadline.
    LINEAR = "linear"
    # Whole-number elapsed/total ratio: the price holds until the deadline.
    LEGACY = "legacy"
