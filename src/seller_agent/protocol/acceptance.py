"""Settles buyers' acceptances of a quoted price.

An acceptance succeeds only while the item is still listed and the offered
price is at least the live asking price.  On success the sale is committed
in one uninterrupted step: the listing's timer is stopped, the title leaves
the catalogue, and the seller is notified.  A later acceptance for the same
title therefore always finds it gone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from seller_agent.catalogue.store import Catalogue
from seller_agent.catalogue.timer import PriceDecayTimer
from seller_agent.domain.models import Proposal
from seller_agent.domain.types import Performative
from seller_agent.protocol.messages import PurchaseAcceptance, Reply
from seller_agent.protocol.server import DEFAULT_SELLER_NAME, MessageServer
from seller_agent.runtime.notifier import UserNotifier

if TYPE_CHECKING:
    from seller_agent.runtime.transport import MessageTransport

logger = structlog.get_logger()

SALE_MESSAGE = "Item {title} has been sold for {price}."


def decode_proposal(content: str | None) -> Proposal | None:
    """Decode a JSON ``Proposal`` body, returning ``None`` if it is malformed."""
    if content is None:
        return None
    try:
        return Proposal.model_validate_json(content)
    except ValidationError:
        return None


class AcceptanceHandler(MessageServer[PurchaseAcceptance]):
    """Serve accept-proposals with CONFIRM, DISCONFIRM or NOT_UNDERSTOOD.

    An acceptance for a title that is not listed is answered with
    DISCONFIRM, the same as one whose price is too low.

    Args:
        catalogue: The seller's catalogue.
        transport: Where messages are received from and replies sent to.
        notifier: Receives a notification for every completed sale.
        seller_name: Sender name put on every reply.
    """

    message_type = PurchaseAcceptance
    performative = Performative.ACCEPT_PROPOSAL

    def __init__(
        self,
        catalogue: Catalogue,
        transport: MessageTransport,
        notifier: UserNotifier,
        seller_name: str = DEFAULT_SELLER_NAME,
    ) -> None:
        super().__init__(catalogue, transport, seller_name)
        self._notifier = notifier

    def handle(self, message: PurchaseAcceptance) -> Reply:
        proposal = decode_proposal(message.content)
        if proposal is None:
            logger.warning("Undecodable acceptance", sender=message.sender)
            return self._reply(message, Performative.NOT_UNDERSTOOD)

        timer = self._catalogue.get(proposal.title)
        if timer is None or proposal.offered_price < timer.current_price:
            logger.info(
                "Acceptance disconfirmed",
                title=proposal.title,
                offered_price=proposal.offered_price,
                current_price=timer.current_price if timer is not None else None,
                sender=message.sender,
            )
            return self._reply(message, Performative.DISCONFIRM)

        self._commit_sale(timer, proposal)
        return self._reply(message, Performative.CONFIRM)

    def _commit_sale(self, timer: PriceDecayTimer, proposal: Proposal) -> None:
        timer.stop()
        self._catalogue.remove(proposal.title)
        logger.info("Item sold", title=proposal.title, price=proposal.offered_price)
        self._notifier.notify_user(
            SALE_MESSAGE.format(title=proposal.title, price=proposal.offered_price)
        )
