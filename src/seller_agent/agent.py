"""The seller process: one catalogue shared by its timers and handlers.

``SellerAgent`` wires the collaborators together and exposes
``put_for_sale`` to whatever creates listings.  All of its tasks run on a
single event loop, which is what keeps catalogue updates atomic.
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Any

import structlog

from seller_agent.catalogue import Catalogue, PriceDecayTimer
from seller_agent.config import Settings
from seller_agent.domain.models import ListingTerms
from seller_agent.protocol import AcceptanceHandler, InquiryHandler
from seller_agent.runtime.clock import Clock, utc_now
from seller_agent.runtime.notifier import UserNotifier
from seller_agent.runtime.scheduler import Scheduler
from seller_agent.runtime.transport import MessageTransport

logger = structlog.get_logger()


class SellerAgent:
    """Seller process selling items at a price that decays toward a floor.

    Args:
        settings: Pricing and identity settings.
        transport: Buyer message transport.
        notifier: Receives sale and expiry notifications.
        scheduler: Drives each listing's price ticks.
        clock: Source of the current time.
    """

    def __init__(
        self,
        settings: Settings,
        transport: MessageTransport,
        notifier: UserNotifier,
        scheduler: Scheduler,
        clock: Clock = utc_now,
    ) -> None:
        self._settings = settings
        self._notifier = notifier
        self._scheduler = scheduler
        self._clock = clock
        self.catalogue = Catalogue()
        self.inquiry_handler = InquiryHandler(
            self.catalogue, transport, seller_name=settings.seller_name
        )
        self.acceptance_handler = AcceptanceHandler(
            self.catalogue, transport, notifier, seller_name=settings.seller_name
        )
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def name(self) -> str:
        return self._settings.seller_name

    def put_for_sale(
        self,
        title: str,
        initial_price: int,
        floor_price: int,
        deadline: datetime,
    ) -> PriceDecayTimer:
        """List a new item and start its price decay.

        Args:
            title: Unique item title.
            initial_price: Asking price right now.
            floor_price: Lowest price the seller will accept.
            deadline: When the item comes off sale if unsold.

        Returns:
            The running timer for the new listing.

        Raises:
            pydantic.ValidationError: If the terms are inconsistent.
            DuplicateListingError: If *title* is already for sale.
        """
        terms = ListingTerms(
            title=title,
            initial_price=initial_price,
            floor_price=floor_price,
            start_time=self._clock(),
            deadline=deadline,
        )
        timer = PriceDecayTimer(
            terms,
            self.catalogue,
            self._notifier,
            clock=self._clock,
            decay_mode=self._settings.decay_mode,
        )
        timer.start(self._scheduler, interval=self._settings.tick_interval_seconds)
        return timer

    async def run(self) -> None:
        """Serve price inquiries and acceptances until cancelled."""
        logger.info("Seller agent running", seller=self.name)
        loop = asyncio.get_running_loop()
        for server in (self.inquiry_handler, self.acceptance_handler):
            task = loop.create_task(server.run())
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
        await asyncio.gather(*self._tasks)

    def shutdown(self) -> None:
        """Withdraw every listing and stop serving messages.

        Withdrawn listings produce no notification.
        """
        for timer in self.catalogue:
            timer.withdraw()
        for task in list(self._tasks):
            task.cancel()
        logger.info("Seller agent terminating", seller=self.name)
