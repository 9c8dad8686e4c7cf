"""Pydantic v2 models for domain data structures in the seller agent."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class ListingTerms(BaseModel):
    """Sale terms of one listed item.

    Prices are whole currency units.  Both timestamps must be timezone-aware
    so that elapsed time is well defined.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    initial_price: int
    floor_price: int
    start_time: datetime
    deadline: datetime

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Ensure the title is not empty or whitespace-only."""
        if not v.strip():
            raise ValueError("title must not be empty")
        return v

    @field_validator("floor_price")
    @classmethod
    def floor_must_not_be_negative(cls, v: int) -> int:
        """Ensure the floor price is zero or more."""
        if v < 0:
            raise ValueError("floor_price must not be negative")
        return v

    @field_validator("start_time", "deadline")
    @classmethod
    def must_be_timezone_aware(cls, v: datetime) -> datetime:
        """Reject naive datetimes."""
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError("timestamps must be timezone-aware")
        return v

    @model_validator(mode="after")
    def floor_must_not_exceed_initial(self) -> "ListingTerms":
        """Ensure floor_price does not exceed initial_price."""
        if self.floor_price > self.initial_price:
            raise ValueError(
                f"floor_price ({self.floor_price}) must not exceed "
                f"initial_price ({self.initial_price})"
            )
        return self

    @model_validator(mode="after")
    def deadline_must_follow_start(self) -> "ListingTerms":
        """Ensure the deadline is strictly after the start time."""
        if self.deadline <= self.start_time:
            raise ValueError(
                f"deadline ({self.deadline.isoformat()}) must be after "
                f"start_time ({self.start_time.isoformat()})"
            )
        return self

    @property
    def price_range(self) -> int:
        """Total amount the price may drop over the listing's life."""
        return self.initial_price - self.floor_price


class Proposal(BaseModel):
    """A buyer's acceptance of a quoted price for an item."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    offered_price: int
