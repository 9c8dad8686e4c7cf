"""Answers buyers' calls for proposal with the current asking price."""

from __future__ import annotations

import structlog

from seller_agent.domain.types import Performative
from seller_agent.protocol.messages import PriceInquiry, Reply
from seller_agent.protocol.server import MessageServer

logger = structlog.get_logger()


class InquiryHandler(MessageServer[PriceInquiry]):
    """Serve CFPs: PROPOSE the current price if listed, REFUSE otherwise.

    Read-only with respect to the catalogue.
    """

    message_type = PriceInquiry
    performative = Performative.CFP

    def handle(self, message: PriceInquiry) -> Reply:
        title = message.title
        timer = self._catalogue.get(title)

        if timer is None:
            logger.info("Price inquiry refused", title=title, sender=message.sender)
            return self._reply(message, Performative.REFUSE)

        price = timer.current_price
        logger.info("Price proposed", title=title, price=price, sender=message.sender)
        return self._reply(message, Performative.PROPOSE, content=str(price))
