"""
Data models for the Super Trunfo card comparison game.
All models are dataclasses and enums for simplicity and type safety.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class Attribute(Enum):
    """Comparable dimensions of a card. Values are the menu selectors."""
    POPULATION = 1
    AREA = 2
    GDP = 3
    TOURIST_SPOTS = 4
    DENSITY = 5
    GDP_PER_CAPITA = 6


class Direction(Enum):
    HIGHER_WINS = "higher"
    LOWER_WINS = "lower"


class Outcome(Enum):
    """Three-way result of comparing two cards on one attribute."""
    FIRST_WINS = "first"
    SECOND_WINS = "second"
    TIE = "tie"


class Tier(Enum):
    NOVICE = 1
    ADVENTURER = 2
    MASTER = 3


class DecisionStatus(Enum):
    DECIDED = "decided"
    INVALID_CHOICE = "invalid_choice"


@dataclass
class Card:
    """
    Represents one city card.

    Fields:
    - state: single uppercase letter ('A'..'H', not enforced)
    - city_index: city number inside the state (1..4, not enforced)
    - name: free-text city name
    - population: number of inhabitants (>= 0)
    - area: area in km² (may be 0)
    - gdp: GDP in R$
    - tourist_spots: number of tourist spots

    Derived (written by engine.derived.finalize_card):
    - code: state + zero-padded city index (e.g. "A03")
    - density: population / area, 0 when area is 0
    - gdp_per_capita: gdp / population, 0 when population is 0
    """
    state: str = ""
    city_index: int = 0
    name: str = ""
    population: int = 0
    area: float = 0.0
    gdp: float = 0.0
    tourist_spots: int = 0
    code: str = field(default="", init=False)
    density: float = field(default=0.0, init=False)
    gdp_per_capita: float = field(default=0.0, init=False)


@dataclass
class AttributeResult:
    """Outcome of one attribute comparison, kept for the partial results report."""
    attribute: Attribute
    outcome: Outcome


@dataclass
class Decision:
    """
    The final result of one game.

    Fields:
    - tier: difficulty tier that produced this decision
    - status: DECIDED, or INVALID_CHOICE when a selector was out of range
    - winner: 1 or 2, None for a tie or an invalid choice
    - attributes: compared attributes, in selection order
    - partials: one AttributeResult per comparison
    - scores: (points for card 1, points for card 2)
    - selectors: raw selectors as typed by the user (empty for tier 1)
    """
    tier: Tier
    status: DecisionStatus
    winner: Optional[int] = None
    attributes: List[Attribute] = field(default_factory=list)
    partials: List[AttributeResult] = field(default_factory=list)
    scores: Tuple[int, int] = (0, 0)
    selectors: List[int] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.status == DecisionStatus.DECIDED

    @property
    def is_tie(self) -> bool:
        return self.is_valid and self.winner is None
