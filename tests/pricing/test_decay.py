"""Tests for the asking-price decay functions."""

from datetime import datetime, timedelta

import pytest
from fakes import START

from seller_agent.domain.models import ListingTerms
from seller_agent.domain.types import DecayMode
from seller_agent.pricing.decay import get_decay_function, legacy_price, linear_price


def _at(seconds: float) -> datetime:
    return START + timedelta(seconds=seconds)


class TestLinearPrice:
    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, 100),
            (1, 99),
            (10, 90),
            (15, 85),
            (30, 70),
            (45, 55),
            (59, 41),
            (60, 40),
            (120, 40),
        ],
        ids=["start", "1s", "10s", "15s", "half", "45s", "59s", "deadline", "after"],
    )
    def test_proportional_decay(
        self, dune_terms: ListingTerms, seconds: float, expected: int
    ) -> None:
        assert linear_price(dune_terms, _at(seconds)) == expected

    def test_before_start_is_initial_price(self, dune_terms: ListingTerms) -> None:
        assert linear_price(dune_terms, _at(-5)) == 100

    def test_drop_rounds_half_up(self) -> None:
        terms = ListingTerms(
            title="Emma",
            initial_price=1,
            floor_price=0,
            start_time=START,
            deadline=START + timedelta(seconds=2),
        )
        # drop of 0.5 rounds up to 1
        assert linear_price(terms, _at(1)) == 0

    def test_fractional_drop_rounds_down_below_half(self) -> None:
        terms = ListingTerms(
            title="Emma",
            initial_price=10,
            floor_price=0,
            start_time=START,
            deadline=START + timedelta(seconds=3),
        )
        # drop of 3.33 rounds to 3
        assert linear_price(terms, _at(1)) == 7

    def test_sub_second_elapsed_time(self, dune_terms: ListingTerms) -> None:
        assert linear_price(dune_terms, _at(0.4)) == 100
        assert linear_price(dune_terms, _at(0.5)) == 99

    def test_monotonic_and_bounded(self, dune_terms: ListingTerms) -> None:
        prices = [linear_price(dune_terms, _at(s / 4)) for s in range(0, 280)]
        assert all(40 <= p <= 100 for p in prices)
        assert all(a >= b for a, b in zip(prices, prices[1:]))

    def test_flat_price_range(self) -> None:
        terms = ListingTerms(
            title="Emma",
            initial_price=50,
            floor_price=50,
            start_time=START,
            deadline=START + timedelta(seconds=60),
        )
        assert linear_price(terms, _at(30)) == 50


class TestLegacyPrice:
    def test_holds_initial_price_until_deadline(self, dune_terms: ListingTerms) -> None:
        assert legacy_price(dune_terms, _at(0)) == 100
        assert legacy_price(dune_terms, _at(30)) == 100
        assert legacy_price(dune_terms, _at(59.9)) == 100

    def test_drops_to_floor_at_deadline(self, dune_terms: ListingTerms) -> None:
        assert legacy_price(dune_terms, _at(60)) == 40

    def test_never_below_floor(self, dune_terms: ListingTerms) -> None:
        assert legacy_price(dune_terms, _at(600)) == 40


class TestGetDecayFunction:
    def test_linear(self) -> None:
        assert get_decay_function(DecayMode.LINEAR) is linear_price

    def test_legacy(self) -> None:
        assert get_decay_function(DecayMode.LEGACY) is legacy_price

    def test_unknown_mode(self) -> None:
        with pytest.raises(ValueError, match="Unknown decay mode"):
            get_decay_function("exponential")  # type: ignore[arg-type]
