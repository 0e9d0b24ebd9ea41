"""
Unit tests for engine/derived.py
Tests card code building and the derived attribute computation.
"""

import pytest
from engine.derived import build_code, compute_density, compute_gdp_per_capita, compute_derived, finalize_card
from engine.models import Card


class TestBuildCode:
    """Tests for the card code helper."""

    def test_code_is_state_plus_zero_padded_city(self):
        assert build_code("A", 3) == "A03"
        assert build_code("H", 4) == "H04"
        assert build_code("C", 12) == "C12"


class TestComputeDerived:
    """Tests for density and GDP per capita."""

    def test_reference_cards(self):
        """
        Card 1: pop 1000, area 100, gdp 50000 -> density 10, gdp per capita 50
        Card 2: pop 2000, area 50, gdp 40000 -> density 40, gdp per capita 20
        """
        card1 = compute_derived(Card("A", 1, "Alpha", 1000, 100.0, 50000.0, 5))
        card2 = compute_derived(Card("B", 2, "Beta", 2000, 50.0, 40000.0, 3))

        assert card1.density == 10.0
        assert card1.gdp_per_capita == 50.0
        assert card2.density == 40.0
        assert card2.gdp_per_capita == 20.0

    @pytest.mark.parametrize("population", [0, 1, 5000])
    def test_zero_area_gives_zero_density(self, population):
        assert compute_density(population, 0.0) == 0.0

    @pytest.mark.parametrize("gdp", [0.0, 1.5, 1e9])
    def test_zero_population_gives_zero_gdp_per_capita(self, gdp):
        assert compute_gdp_per_capita(gdp, 0) == 0.0

    def test_zeroed_card_has_zero_derived_values(self):
        """A freshly constructed card derives to zeros without raising."""
        card = compute_derived(Card())

        assert card.density == 0.0
        assert card.gdp_per_capita == 0.0


class TestFinalizeCard:
    """Tests for keeping code and derived fields in line with raw fields."""

    def test_sets_code_and_derived_fields(self):
        card = finalize_card(Card("A", 1, "Alpha", 1000, 100.0, 50000.0, 5))

        assert card.code == "A01"
        assert card.density == 10.0
        assert card.gdp_per_capita == 50.0

    def test_rerun_after_raw_change(self):
        """
        Derived fields follow the raw fields only after finalize_card runs again.
        """
        # Arrange
        card = finalize_card(Card("A", 1, "Alpha", 1000, 100.0, 50000.0, 5))

        # Act: change raw fields and re-derive
        card.area = 0.0
        card.city_index = 4
        finalize_card(card)

        # Assert
        assert card.code == "A04"
        assert card.density == 0.0
        assert card.gdp_per_capita == 50.0

    def test_returns_same_card(self):
        card = Card("B", 2)
        assert finalize_card(card) is card
