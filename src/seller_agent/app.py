"""Application entry point for a standalone seller process.

Configures:
- **structlog** with JSON rendering (production) or colored console (development)
- **SellerAgent** with the in-process transport, log notifier and asyncio scheduler

Hosting runtimes that deliver buyer messages themselves build a
``SellerAgent`` via ``create_seller_agent`` with their own transport.
"""

from __future__ import annotations

import asyncio
import logging

import structlog

from seller_agent.agent import SellerAgent
from seller_agent.config import Settings, get_settings
from seller_agent.runtime.notifier import LogNotifier
from seller_agent.runtime.scheduler import AsyncioScheduler
from seller_agent.runtime.transport import InMemoryTransport, MessageTransport

logger = structlog.get_logger()


def configure_logging(production: bool = False) -> None:
    """Configure structlog for production (JSON) or development (console).

    Production mode (*production=True*): JSON rendering at INFO level.
    Development mode: colored console rendering at DEBUG level.

    Args:
        production: Enable production mode if ``True``.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        log_level = logging.INFO
    else:
        renderer = structlog.dev.ConsoleRenderer()
        log_level = logging.DEBUG

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service="seller-agent")


def create_seller_agent(
    settings: Settings | None = None,
    transport: MessageTransport | None = None,
) -> SellerAgent:
    """Build a ``SellerAgent`` with the default collaborators.

    Args:
        settings: Application settings.  If ``None``, ``get_settings()`` is used.
        transport: Buyer message transport.  Defaults to an ``InMemoryTransport``.

    Returns:
        A seller agent that is not yet serving messages.
    """
    if settings is None:
        settings = get_settings()
    return SellerAgent(
        settings=settings,
        transport=transport if transport is not None else InMemoryTransport(),
        notifier=LogNotifier(settings.seller_name),
        scheduler=AsyncioScheduler(),
    )


async def main() -> None:
    """Main entry point: serve buyers until cancelled, then withdraw listings."""
    settings = get_settings()
    configure_logging(production=settings.production)
    logger.info(
        "Application starting",
        seller=settings.seller_name,
        decay_mode=str(settings.decay_mode),
        tick_interval_seconds=settings.tick_interval_seconds,
    )

    agent = create_seller_agent(settings)
    try:
        await agent.run()
    finally:
        agent.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
