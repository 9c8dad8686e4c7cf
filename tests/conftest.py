"""Shared pytest fixtures for the seller agent test suite."""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta

import pytest
from fakes import START, FakeClock, ManualScheduler, RecordingNotifier

from seller_agent.catalogue import Catalogue, PriceDecayTimer
from seller_agent.config import Settings
from seller_agent.domain.models import ListingTerms
from seller_agent.domain.types import DecayMode
from seller_agent.runtime.transport import InMemoryTransport


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def catalogue() -> Catalogue:
    return Catalogue()


@pytest.fixture
def transport() -> InMemoryTransport:
    return InMemoryTransport()


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any ``.env`` file."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def dune_terms() -> ListingTerms:
    """Dune at 100, floor 40, for sale for one minute from START."""
    return ListingTerms(
        title="Dune",
        initial_price=100,
        floor_price=40,
        start_time=START,
        deadline=START + timedelta(seconds=60),
    )


@pytest.fixture
def make_timer(
    catalogue: Catalogue, notifier: RecordingNotifier, clock: FakeClock
) -> Callable[..., PriceDecayTimer]:
    """Factory for timers sharing the test catalogue, notifier and clock."""

    def _make(
        terms: ListingTerms, decay_mode: DecayMode = DecayMode.LINEAR
    ) -> PriceDecayTimer:
        return PriceDecayTimer(
            terms, catalogue, notifier, clock=clock, decay_mode=decay_mode
        )

    return _make
