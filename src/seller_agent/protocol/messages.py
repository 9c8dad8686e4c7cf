"""Protocol messages exchanged between the seller and buyers.

Inbound messages form a closed set of variants discriminated on
``performative``: a ``PriceInquiry`` (CFP carrying an item title) or a
``PurchaseAcceptance`` (accept-proposal carrying an encoded ``Proposal``).
Everything the seller sends back is a ``Reply``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from seller_agent.domain.types import Performative


class Message(BaseModel):
    """Envelope fields shared by every protocol message.

    Attributes:
        sender: Name of the sending agent.
        receiver: Name of the receiving agent, if addressed.
        content: Message body; its meaning depends on the performative.
        conversation_id: Identifier tying together one negotiation.
        reply_with: Token the other party should echo in ``in_reply_to``.
        in_reply_to: The ``reply_with`` token of the message being answered.
    """

    model_config = ConfigDict(frozen=True)

    performative: Performative
    sender: str
    receiver: str | None = None
    content: str | None = None
    conversation_id: str | None = None
    reply_with: str | None = None
    in_reply_to: str | None = None

    def create_reply(
        self,
        performative: Performative,
        *,
        sender: str,
        content: str | None = None,
    ) -> Reply:
        """Build a reply from *sender* addressed back to this message's sender."""
        return Reply(
            performative=performative,
            sender=sender,
            receiver=self.sender,
            content=content,
            conversation_id=self.conversation_id,
            in_reply_to=self.reply_with,
        )


class PriceInquiry(Message):
    """A call for proposal: "what is your current price for this title?"."""

    performative: Literal[Performative.CFP] = Performative.CFP

    @property
    def title(self) -> str:
        return self.content or ""


class PurchaseAcceptance(Message):
    """A buyer accepting a previously quoted price.

    ``content`` is expected to hold a JSON-encoded ``Proposal``; decoding is
    left to the acceptance handler so a malformed body can be answered with
    NOT_UNDERSTOOD.
    """

    performative: Literal[Performative.ACCEPT_PROPOSAL] = Performative.ACCEPT_PROPOSAL


class Reply(Message):
    """A message sent by the seller in answer to an inbound message."""


InboundMessage = Annotated[
    PriceInquiry | PurchaseAcceptance,
    Field(discriminator="performative"),
]

_inbound_adapter: TypeAdapter[PriceInquiry | PurchaseAcceptance] = TypeAdapter(
    InboundMessage
)

INBOUND_PERFORMATIVES: frozenset[Performative] = frozenset(
    {Performative.CFP, Performative.ACCEPT_PROPOSAL}
)


def parse_inbound(data: dict[str, object] | str) -> PriceInquiry | PurchaseAcceptance:
    """Parse raw message data into its inbound variant.

    Args:
        data: A mapping of message fields, or the same as a JSON string.

    Returns:
        A ``PriceInquiry`` or ``PurchaseAcceptance``.

    Raises:
        pydantic.ValidationError: If the performative is not an inbound one
            or required fields are missing.
    """
    if isinstance(data, str):
        return _inbound_adapter.validate_json(data)
    return _inbound_adapter.validate_python(data)
