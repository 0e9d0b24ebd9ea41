"""
Attribute comparator.
A pure function of two cards and an attribute: one table lookup and one
directional inequality check.
"""

import logging

from engine.attributes import get_spec
from engine.models import Attribute, Card, Direction, Outcome

logger = logging.getLogger(__name__)


def compare(card_a: Card, card_b: Card, attribute: Attribute) -> Outcome:
    """
    Compare two cards on one attribute.

    Rules:
    - Higher-wins attributes: FIRST_WINS iff a > b, SECOND_WINS iff a < b
    - Density (lower-wins): the inequality is reversed
    - Exact equality is a TIE; no tolerance is applied to floats

    Args:
        card_a: First card (finalized)
        card_b: Second card (finalized)
        attribute: Attribute to compare on

    Returns:
        Outcome.FIRST_WINS, Outcome.SECOND_WINS or Outcome.TIE

    Raises:
        InvalidAttributeError: If attribute is not a known Attribute
    """
    spec = get_spec(attribute)
    value_a = spec.extract(card_a)
    value_b = spec.extract(card_b)

    a, b = value_a, value_b
    if spec.direction == Direction.LOWER_WINS:
        a, b = b, a

    if a > b:
        outcome = Outcome.FIRST_WINS
    elif a < b:
        outcome = Outcome.SECOND_WINS
    else:
        outcome = Outcome.TIE

    logger.debug(
        "compare %s (%s wins): %r vs %r -> %s",
        attribute.name, spec.direction.value, value_a, value_b, outcome.name,
    )
    return outcome
