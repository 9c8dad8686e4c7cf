"""The seller's catalogue of items currently for sale."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from seller_agent.domain.errors import DuplicateListingError

if TYPE_CHECKING:
    from seller_agent.catalogue.timer import PriceDecayTimer


class Catalogue:
    """Mapping from item title to the running timer that prices it.

    Entries are the live ``PriceDecayTimer`` objects, not snapshots, so a
    lookup always observes the current asking price.  A title is present
    exactly while its timer is running.

    Callers must not await between a lookup and the mutation that depends on
    it; within one event loop that keeps every read-then-write atomic.
    """

    def __init__(self) -> None:
        self._listings: dict[str, PriceDecayTimer] = {}

    def add(self, timer: PriceDecayTimer) -> None:
        """Register a running timer under its title.

        Raises:
            DuplicateListingError: If the title is already listed.
        """
        if timer.title in self._listings:
            raise DuplicateListingError(timer.title)
        self._listings[timer.title] = timer

    def get(self, title: str) -> PriceDecayTimer | None:
        """Return the timer for *title*, or ``None`` if it is not for sale."""
        return self._listings.get(title)

    def remove(self, title: str) -> bool:
        """Take *title* off sale.

        Returns:
            ``True`` if the title was listed, ``False`` otherwise.
        """
        return self._listings.pop(title, None) is not None

    def titles(self) -> list[str]:
        """Return the listed titles in sorted order."""
        return sorted(self._listings)

    def __contains__(self, title: object) -> bool:
        return title in self._listings

    def __len__(self) -> int:
        return len(self._listings)

    def __iter__(self) -> Iterator[PriceDecayTimer]:
        """Iterate over a snapshot, so entries may be removed while iterating."""
        return iter(list(self._listings.values()))
