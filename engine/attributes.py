"""
Attribute table.
Each comparable attribute is one record: its menu selector, display labels,
how to read the value from a card, and whether higher or lower values win.
Adding an attribute is a table change, not a comparator change.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Union

from engine.errors import InvalidAttributeError
from engine.models import Attribute, Card, Direction

Number = Union[int, float]


@dataclass(frozen=True)
class AttributeSpec:
    """
    Definition of one comparable attribute.

    Fields:
    - attribute: the Attribute enum member
    - label: short name used in partial results (e.g. "PIB")
    - menu_label: text shown in the single-attribute menu
    - short_menu_label: text shown in the two-attribute menu
    - extract: reads the compared value from a Card
    - direction: HIGHER_WINS or LOWER_WINS
    """
    attribute: Attribute
    label: str
    menu_label: str
    short_menu_label: str
    extract: Callable[[Card], Number]
    direction: Direction

    @property
    def selector(self) -> int:
        return self.attribute.value


ATTRIBUTE_TABLE: List[AttributeSpec] = [
    AttributeSpec(Attribute.POPULATION, "Populacao",
                  "Populacao (maior vence)", "Populacao (maior)",
                  lambda c: int(c.population), Direction.HIGHER_WINS),
    AttributeSpec(Attribute.AREA, "Area",
                  "Area (maior vence)", "Area (maior)",
                  lambda c: float(c.area), Direction.HIGHER_WINS),
    AttributeSpec(Attribute.GDP, "PIB",
                  "PIB (maior vence)", "PIB (maior)",
                  lambda c: float(c.gdp), Direction.HIGHER_WINS),
    AttributeSpec(Attribute.TOURIST_SPOTS, "Pontos turisticos",
                  "Pontos turisticos (maior vence)", "Pontos turisticos (maior)",
                  lambda c: int(c.tourist_spots), Direction.HIGHER_WINS),
    AttributeSpec(Attribute.DENSITY, "Densidade",
                  "Densidade populacional (menor vence)", "Densidade populacional (menor)",
                  lambda c: float(c.density), Direction.LOWER_WINS),
    AttributeSpec(Attribute.GDP_PER_CAPITA, "PIB per capita",
                  "PIB per capita (maior vence)", "PIB per capita (maior)",
                  lambda c: float(c.gdp_per_capita), Direction.HIGHER_WINS),
]

_SPECS: Dict[Attribute, AttributeSpec] = {spec.attribute: spec for spec in ATTRIBUTE_TABLE}


def attribute_from_selector(selector) -> Attribute:
    """
    Map a menu selector (1-6) to its Attribute.

    Raises:
        InvalidAttributeError: If the selector is not an integer in range
    """
    if isinstance(selector, bool) or not isinstance(selector, int):
        raise InvalidAttributeError(selector)
    try:
        return Attribute(selector)
    except ValueError as exc:
        raise InvalidAttributeError(selector) from exc


def get_spec(attribute: Attribute) -> AttributeSpec:
    """Return the table record for an attribute."""
    try:
        return _SPECS[attribute]
    except KeyError as exc:
        raise InvalidAttributeError(attribute) from exc


def menu_lines(short: bool = False) -> List[str]:
    """
    Menu entries in selector order, e.g. "1) Populacao (maior vence)".

    With short=True the two-attribute menu wording is used ("1) Populacao (maior)").
    """
    return [
        f"{spec.selector}) {spec.short_menu_label if short else spec.menu_label}"
        for spec in ATTRIBUTE_TABLE
    ]
