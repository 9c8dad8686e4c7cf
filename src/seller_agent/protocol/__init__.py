"""Buyer-facing protocol: message types and the seller's handlers."""

from seller_agent.protocol.acceptance import (
    SALE_MESSAGE,
    AcceptanceHandler,
    decode_proposal,
)
from seller_agent.protocol.inquiry import InquiryHandler
from seller_agent.protocol.messages import (
    InboundMessage,
    Message,
    PriceInquiry,
    PurchaseAcceptance,
    Reply,
    parse_inbound,
)
from seller_agent.protocol.server import MessageServer

__all__ = [
    "SALE_MESSAGE",
    "AcceptanceHandler",
    "InboundMessage",
    "InquiryHandler",
    "Message",
    "MessageServer",
    "PriceInquiry",
    "PurchaseAcceptance",
    "Reply",
    "decode_proposal",
    "parse_inbound",
]
