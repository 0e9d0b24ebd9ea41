"""
Shared fixtures: the two reference city cards used across the suites.
"""

import pytest

from engine.derived import finalize_card
from engine.models import Card


def make_card(state="A", city_index=1, name="Cidade", population=0, area=0.0, gdp=0.0, tourist_spots=0) -> Card:
    """Build a finalized card; unspecified fields are zero."""
    return finalize_card(Card(state, city_index, name, population, area, gdp, tourist_spots))


@pytest.fixture
def card_builder():
    return make_card


@pytest.fixture
def card1():
    # density = 10, gdp_per_capita = 50
    return make_card("A", 1, "Alpha", population=1000, area=100.0, gdp=50000.0, tourist_spots=5)


@pytest.fixture
def card2():
    # density = 40, gdp_per_capita = 20
    return make_card("B", 2, "Beta", population=2000, area=50.0, gdp=40000.0, tourist_spots=3)
