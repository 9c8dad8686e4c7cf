"""Receive-reply loop shared by the seller's protocol handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

import structlog

from seller_agent.catalogue.store import Catalogue
from seller_agent.domain.types import Performative
from seller_agent.protocol.messages import PriceInquiry, PurchaseAcceptance, Reply

if TYPE_CHECKING:
    from seller_agent.runtime.transport import MessageTransport

logger = structlog.get_logger()

DEFAULT_SELLER_NAME = "seller"

InboundT = TypeVar("InboundT", PriceInquiry, PurchaseAcceptance)


class MessageServer(ABC, Generic[InboundT]):
    """Serves one inbound message type, one message at a time.

    ``handle`` is synchronous: the catalogue lookup and any mutation it
    triggers complete before the reply is awaited, so no other task can
    observe a half-applied change.

    Args:
        catalogue: The seller's catalogue.
        transport: Where messages are received from and replies sent to.
        seller_name: Sender name put on every reply.
    """

    message_type: type[InboundT]
    performative: Performative

    def __init__(
        self,
        catalogue: Catalogue,
        transport: MessageTransport,
        seller_name: str = DEFAULT_SELLER_NAME,
    ) -> None:
        self._catalogue = catalogue
        self._transport = transport
        self._seller_name = seller_name

    @abstractmethod
    def handle(self, message: InboundT) -> Reply:
        """Apply *message* to the catalogue and build the reply."""

    def _reply(
        self, message: InboundT, performative: Performative, content: str | None = None
    ) -> Reply:
        return message.create_reply(
            performative, sender=self._seller_name, content=content
        )

    async def serve_one(self) -> Reply:
        """Wait for the next matching message, handle it and send the reply.

        Raises:
            TypeError: If the transport returned a message of another type.
        """
        message = await self._transport.receive(self.performative)
        if not isinstance(message, self.message_type):
            raise TypeError(
                f"Expected {self.message_type.__name__}, got {type(message).__name__}"
            )
        reply = self.handle(message)
        await self._transport.send(reply)
        return reply

    async def run(self) -> None:
        """Serve messages until cancelled.

        A failure while handling one message is logged and the loop moves on
        to the next message.
        """
        logger.info("Message server started", performative=str(self.performative))
        while True:
            try:
                await self.serve_one()
            except Exception:
                logger.exception(
                    "Failed to serve message", performative=str(self.performative)
                )
