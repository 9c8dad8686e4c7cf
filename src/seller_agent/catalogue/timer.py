"""Per-listing price decay and expiry.

A ``PriceDecayTimer`` owns one listing for its whole life: it puts the item
in the catalogue when started, lowers the asking price on every tick, and
takes the item off sale when the deadline passes.  A sale ends it early via
``stop()``, seller shutdown via ``withdraw()``.  The listing reaches a
terminal state exactly once.
"""

from __future__ import annotations

import structlog

from seller_agent.catalogue.store import Catalogue
from seller_agent.domain.models import ListingTerms
from seller_agent.domain.types import DecayMode, ListingState
from seller_agent.pricing.decay import get_decay_function
from seller_agent.runtime.clock import Clock, utc_now
from seller_agent.runtime.notifier import UserNotifier
from seller_agent.runtime.scheduler import PeriodicHandle, Scheduler
from seller_agent.state_machine import ListingEvent, ListingStateMachine

logger = structlog.get_logger()

# How often to wake up and lower the price, in seconds.
DEFAULT_TICK_INTERVAL = 60.0

EXPIRY_MESSAGE = "Cannot sell the item {title}."


class PriceDecayTimer:
    """Periodic process pricing and expiring one listing.

    Args:
        terms: The listing's sale terms.
        catalogue: The seller's catalogue; the timer inserts itself on
            ``start()`` and removes itself on expiry.
        notifier: Receives the expiry notification.
        clock: Source of the current time.
        decay_mode: Which decay function computes the asking price.
    """

    def __init__(
        self,
        terms: ListingTerms,
        catalogue: Catalogue,
        notifier: UserNotifier,
        clock: Clock = utc_now,
        decay_mode: DecayMode = DecayMode.LINEAR,
    ) -> None:
        self._terms = terms
        self._catalogue = catalogue
        self._notifier = notifier
        self._clock = clock
        self._decay = get_decay_function(decay_mode)
        self._machine = ListingStateMachine()
        self._handle: PeriodicHandle | None = None
        self._started = False
        self._current_price = terms.initial_price

    @property
    def title(self) -> str:
        return self._terms.title

    @property
    def terms(self) -> ListingTerms:
        return self._terms

    @property
    def current_price(self) -> int:
        """The asking price as of the most recent tick."""
        return self._current_price

    @property
    def state(self) -> ListingState:
        return self._machine.state

    @property
    def is_running(self) -> bool:
        return not self._machine.is_terminal

    @property
    def history(self) -> list[tuple[ListingState, str, ListingState]]:
        return self._machine.history

    def start(
        self,
        scheduler: Scheduler | None = None,
        interval: float = DEFAULT_TICK_INTERVAL,
    ) -> None:
        """Put the item on sale and begin ticking.

        Without a *scheduler* the owner is expected to call ``tick()``.

        Raises:
            RuntimeError: If the timer was already started.
            DuplicateListingError: If the title is already in the catalogue.
        """
        if self._started:
            raise RuntimeError(f"Timer for '{self.title}' already started")
        self._catalogue.add(self)
        if scheduler is not None:
            try:
                self._handle = scheduler.schedule_periodic(interval, self.tick)
            except Exception:
                self._catalogue.remove(self.title)
                raise
        self._started = True
        logger.info(
            "Listing started",
            title=self.title,
            initial_price=self._terms.initial_price,
            floor_price=self._terms.floor_price,
            deadline=self._terms.deadline.isoformat(),
        )

    def tick(self) -> None:
        """Expire the listing if the deadline has passed, else reprice it.

        Expiry only happens here, so an item stays listed, and can still be
        bought at its last asking price, from the deadline until the next tick.
        That window is at most one tick interval.  Has no effect once the
        listing has ended.
        """
        if not self.is_running:
            return

        now = self._clock()
        if now > self._terms.deadline:
            self._expire()
            return

        new_price = self._decay(self._terms, now)
        if new_price != self._current_price:
            logger.debug(
                "Price lowered",
                title=self.title,
                old_price=self._current_price,
                new_price=new_price,
            )
        # Never raise the price, whatever the decay function returns.
        self._current_price = min(self._current_price, new_price)

    def stop(self) -> bool:
        """End the listing because the item was sold.

        Idempotent: calling it on a sold or expired listing does nothing.
        No expiry notification is ever emitted after a successful stop.

        Returns:
            ``True`` if this call ended the listing, ``False`` otherwise.
        """
        if not self.is_running:
            return False
        self._machine.trigger(ListingEvent.SELL)
        self._cancel_schedule()
        logger.info("Listing stopped", title=self.title, price=self._current_price)
        return True

    def withdraw(self) -> bool:
        """Take the item off sale without a sale or a notification.

        Returns:
            ``True`` if this call ended the listing, ``False`` otherwise.
        """
        if not self.is_running:
            return False
        self._catalogue.remove(self.title)
        self._machine.trigger(ListingEvent.WITHDRAW)
        self._cancel_schedule()
        logger.info("Listing withdrawn", title=self.title)
        return True

    def _expire(self) -> None:
        self._catalogue.remove(self.title)
        self._machine.trigger(ListingEvent.EXPIRE)
        self._cancel_schedule()
        logger.info("Listing expired unsold", title=self.title)
        self._notifier.notify_user(EXPIRY_MESSAGE.format(title=self.title))

    def _cancel_schedule(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
