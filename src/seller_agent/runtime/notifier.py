"""User-facing notification surface."""

from __future__ import annotations

from typing import Protocol

import structlog

logger = structlog.get_logger()


class UserNotifier(Protocol):
    """Delivers a human-readable notification to the seller."""

    def notify_user(self, text: str) -> None: ...


class LogNotifier:
    """Notifier that writes each notification to the structured log.

    Args:
        seller_name: Name of the seller the notifications belong to.
    """

    def __init__(self, seller_name: str) -> None:
        self._seller_name = seller_name

    def notify_user(self, text: str) -> None:
        logger.info("User notification", seller=self._seller_name, text=text)
