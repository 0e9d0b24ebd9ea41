"""
Derived attribute computation for cards.
Deterministic and unit-testable.
"""

import logging

from engine.models import Card

logger = logging.getLogger(__name__)


def build_code(state: str, city_index: int) -> str:
    """
    Build the card code from its state letter and city index.

    Example:
        >>> build_code("A", 3)
        'A03'
    """
    return f"{state}{city_index:02d}"


def compute_density(population: int, area: float) -> float:
    """Population per km², defined as 0 when the area is 0."""
    return population / area if area != 0 else 0.0


def compute_gdp_per_capita(gdp: float, population: int) -> float:
    """GDP per inhabitant, defined as 0 when the population is 0."""
    return gdp / population if population != 0 else 0.0


def compute_derived(card: Card) -> Card:
    """
    Write density and gdp_per_capita onto the card from its raw fields.

    Division by zero is not an error: both values are defined as 0 in that case.

    Returns:
        The same Card, for chaining
    """
    card.density = compute_density(card.population, card.area)
    card.gdp_per_capita = compute_gdp_per_capita(card.gdp, card.population)
    return card


def finalize_card(card: Card) -> Card:
    """
    Bring the code and both derived fields in line with the raw fields.

    Must run again whenever a raw field changes.

    Example:
        >>> card = finalize_card(Card("A", 1, "Alpha", 1000, 100.0, 50000.0, 5))
        >>> card.code, card.density, card.gdp_per_capita
        ('A01', 10.0, 50.0)
    """
    card.code = build_code(card.state, card.city_index)
    compute_derived(card)
    logger.debug(
        "Card %s: density=%s gdp_per_capita=%s",
        card.code, card.density, card.gdp_per_capita,
    )
    return card
