"""Tests for protocol message types and inbound parsing."""

import pytest
from pydantic import ValidationError

from seller_agent.domain.types import Performative
from seller_agent.protocol.messages import (
    PriceInquiry,
    PurchaseAcceptance,
    Reply,
    parse_inbound,
)


class TestCreateReply:
    def test_reply_is_addressed_back(self) -> None:
        inquiry = PriceInquiry(
            sender="buyer-1",
            receiver="seller",
            content="Dune",
            conversation_id="book-trade",
            reply_with="cfp-1",
        )
        reply = inquiry.create_reply(
            Performative.PROPOSE, sender="seller", content="100"
        )

        assert isinstance(reply, Reply)
        assert reply.performative == Performative.PROPOSE
        assert reply.sender == "seller"
        assert reply.receiver == "buyer-1"
        assert reply.content == "100"
        assert reply.conversation_id == "book-trade"
        assert reply.in_reply_to == "cfp-1"

    def test_reply_without_content(self) -> None:
        reply = PriceInquiry(sender="buyer-1", content="Dune").create_reply(
            Performative.REFUSE, sender="bookshop"
        )
        assert reply.content is None
        assert reply.sender == "bookshop"

    def test_reply_sender_ignores_inbound_receiver(self) -> None:
        inquiry = PriceInquiry(
            sender="buyer-1", receiver="someone-else", content="Dune"
        )
        reply = inquiry.create_reply(Performative.REFUSE, sender="seller")
        assert reply.sender == "seller"


class TestVariants:
    def test_inquiry_defaults_to_cfp(self) -> None:
        inquiry = PriceInquiry(sender="buyer-1", content="Dune")
        assert inquiry.performative == Performative.CFP
        assert inquiry.title == "Dune"

    def test_inquiry_without_content_has_empty_title(self) -> None:
        assert PriceInquiry(sender="buyer-1").title == ""

    def test_acceptance_defaults_to_accept_proposal(self) -> None:
        acceptance = PurchaseAcceptance(sender="buyer-1", content="{}")
        assert acceptance.performative == Performative.ACCEPT_PROPOSAL

    def test_messages_are_frozen(self) -> None:
        inquiry = PriceInquiry(sender="buyer-1", content="Dune")
        with pytest.raises(ValidationError):
            inquiry.content = "Emma"  # type: ignore[misc]


class TestParseInbound:
    def test_parses_inquiry(self) -> None:
        message = parse_inbound(
            {"performative": Performative.CFP, "sender": "buyer-1", "content": "Dune"}
        )
        assert isinstance(message, PriceInquiry)
        assert message.title == "Dune"

    def test_parses_acceptance(self) -> None:
        message = parse_inbound(
            {
                "performative": Performative.ACCEPT_PROPOSAL,
                "sender": "buyer-1",
                "content": '{"title": "Dune", "offered_price": 100}',
            }
        )
        assert isinstance(message, PurchaseAcceptance)

    def test_rejects_outbound_performative(self) -> None:
        with pytest.raises(ValidationError):
            parse_inbound({"performative": Performative.CONFIRM, "sender": "buyer-1"})

    def test_rejects_missing_sender(self) -> None:
        with pytest.raises(ValidationError):
            parse_inbound({"performative": Performative.CFP, "content": "Dune"})
