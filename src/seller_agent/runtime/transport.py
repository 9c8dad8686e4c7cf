"""Message transport between the seller and its buyers.

The handlers depend only on the ``MessageTransport`` protocol.
``InMemoryTransport`` is an in-process implementation: one queue per inbound
performative, so a receiver waiting for CFPs never consumes an
accept-proposal, plus an outbox collecting every reply the seller sends.
"""

from __future__ import annotations

import asyncio
from typing import Protocol

import structlog

from seller_agent.domain.types import Performative
from seller_agent.protocol.messages import (
    INBOUND_PERFORMATIVES,
    Message,
    PriceInquiry,
    PurchaseAcceptance,
    Reply,
    parse_inbound,
)

logger = structlog.get_logger()


class MessageTransport(Protocol):
    """Inbound delivery filtered by performative plus outbound replies."""

    async def receive(
        self, performative: Performative
    ) -> PriceInquiry | PurchaseAcceptance: ...

    async def send(self, message: Reply) -> None: ...


class InMemoryTransport:
    """Queue-backed transport living inside one event loop.

    ``receive`` suspends the calling task until a matching message is
    delivered; it never times out.
    """

    def __init__(self) -> None:
        self._inboxes: dict[
            Performative, asyncio.Queue[PriceInquiry | PurchaseAcceptance]
        ] = {
            performative: asyncio.Queue() for performative in INBOUND_PERFORMATIVES
        }
        self._outbox: asyncio.Queue[Reply] = asyncio.Queue()

    def deliver(
        self, message: PriceInquiry | PurchaseAcceptance | dict[str, object] | str
    ) -> None:
        """Queue an inbound message for the receiver of its performative.

        Raw message data (a mapping or JSON string) is parsed into its
        inbound variant first.

        Raises:
            pydantic.ValidationError: If raw data is not an inbound message.
            ValueError: If the message's performative is not an inbound one.
        """
        if not isinstance(message, Message):
            message = parse_inbound(message)
        inbox = self._inboxes.get(message.performative)
        if inbox is None:
            raise ValueError(f"No receiver for performative '{message.performative}'")
        inbox.put_nowait(message)

    async def receive(
        self, performative: Performative
    ) -> PriceInquiry | PurchaseAcceptance:
        return await self._inboxes[performative].get()

    async def send(self, message: Reply) -> None:
        logger.debug(
            "Reply sent",
            performative=str(message.performative),
            receiver=message.receiver,
            conversation_id=message.conversation_id,
        )
        self._outbox.put_nowait(message)

    async def next_reply(self) -> Reply:
        """Wait for and return the next reply the seller sent."""
        return await self._outbox.get()

    def pending_replies(self) -> list[Reply]:
        """Drain and return every reply sent so far without waiting."""
        replies: list[Reply] = []
        while not self._outbox.empty():
            replies.append(self._outbox.get_nowait())
        return replies
