"""
Scoring and decision engine for the three difficulty tiers.
Orchestrates attribute comparisons and turns their outcomes into a Decision.
"""

import logging
from typing import List, Sequence

from engine.attributes import attribute_from_selector
from engine.comparator import compare
from engine.config import DEFAULT_CONFIG
from engine.errors import InvalidAttributeError
from engine.models import (
    Attribute,
    AttributeResult,
    Card,
    Decision,
    DecisionStatus,
    Outcome,
    Tier,
)

logger = logging.getLogger(__name__)

_WINNER_BY_OUTCOME = {
    Outcome.FIRST_WINS: 1,
    Outcome.SECOND_WINS: 2,
    Outcome.TIE: None,
}


def tier_from_choice(choice: int) -> Tier:
    """
    Map the startup menu choice to a tier.

    1 is Novice, 2 is Adventurer; any other integer falls back to Master.
    """
    if choice == 1:
        return Tier.NOVICE
    if choice == 2:
        return Tier.ADVENTURER
    return Tier.MASTER


def decide_single(
    tier: Tier,
    card1: Card,
    card2: Card,
    attribute: Attribute,
    selectors: Sequence[int] = (),
) -> Decision:
    """
    Decide a game on one attribute: the comparison outcome is the result.

    Args:
        tier: Tier to record on the decision
        card1: First card (finalized)
        card2: Second card (finalized)
        attribute: Attribute to compare on
        selectors: Raw selectors typed by the user, if any

    Returns:
        Decision with a single partial result
    """
    outcome = compare(card1, card2, attribute)
    return Decision(
        tier=tier,
        status=DecisionStatus.DECIDED,
        winner=_WINNER_BY_OUTCOME[outcome],
        attributes=[attribute],
        partials=[AttributeResult(attribute, outcome)],
        scores=_score([outcome]),
        selectors=list(selectors),
    )


def play_novice(card1: Card, card2: Card, config: dict = None) -> Decision:
    """Tier 1: always compare the fixed attribute (GDP, higher wins)."""
    if config is None:
        config = DEFAULT_CONFIG

    attribute = config.get("fixed_attribute", Attribute.GDP)
    return decide_single(Tier.NOVICE, card1, card2, attribute)


def play_adventurer(card1: Card, card2: Card, selector: int) -> Decision:
    """
    Tier 2: compare one attribute chosen by the user.

    An out-of-range selector is a terminal INVALID_CHOICE decision, not a retry.
    """
    try:
        attribute = attribute_from_selector(selector)
    except InvalidAttributeError as exc:
        return _invalid(Tier.ADVENTURER, [selector], exc)

    return decide_single(Tier.ADVENTURER, card1, card2, attribute, [selector])


def play_master(card1: Card, card2: Card, selectors: Sequence[int], config: dict = None) -> Decision:
    """
    Tier 3: compare the chosen attributes and accumulate a score.

    Rules:
    - Card 1 scores one point per FIRST_WINS, card 2 one per SECOND_WINS
    - Higher score wins; equal scores (including 0-0) are an overall tie
    - The same attribute may be picked twice, doubling its weight
    - Any out-of-range selector makes the whole tier INVALID_CHOICE

    Args:
        card1: First card (finalized)
        card2: Second card (finalized)
        selectors: Attribute selectors as typed, one per pick
        config: Optional config dict (uses defaults if not provided)

    Returns:
        Decision with one partial result per selector

    Raises:
        ValueError: If the number of selectors does not match master_picks
    """
    if config is None:
        config = DEFAULT_CONFIG

    picks = config.get("master_picks", 2)
    if len(selectors) != picks:
        raise ValueError(f"Master tier needs exactly {picks} selectors, got {len(selectors)}.")

    attributes: List[Attribute] = []
    for selector in selectors:
        try:
            attributes.append(attribute_from_selector(selector))
        except InvalidAttributeError as exc:
            return _invalid(Tier.MASTER, selectors, exc)

    partials = [AttributeResult(attr, compare(card1, card2, attr)) for attr in attributes]
    score1, score2 = _score([p.outcome for p in partials])
    logger.debug("Master score: card 1=%d card 2=%d", score1, score2)

    if score1 > score2:
        winner = 1
    elif score2 > score1:
        winner = 2
    else:
        winner = None

    return Decision(
        tier=Tier.MASTER,
        status=DecisionStatus.DECIDED,
        winner=winner,
        attributes=attributes,
        partials=partials,
        scores=(score1, score2),
        selectors=list(selectors),
    )


def play(tier: Tier, card1: Card, card2: Card, selectors: Sequence[int] = (), config: dict = None) -> Decision:
    """
    Run the comparison stage for the given tier.

    Args:
        tier: Tier to play
        card1: First card (finalized)
        card2: Second card (finalized)
        selectors: Attribute selectors (none for Novice, one for Adventurer)
        config: Optional config dict (uses defaults if not provided)

    Returns:
        The final Decision
    """
    if tier == Tier.NOVICE:
        return play_novice(card1, card2, config)
    if tier == Tier.ADVENTURER:
        if len(selectors) != 1:
            raise ValueError(f"Adventurer tier needs exactly 1 selector, got {len(selectors)}.")
        return play_adventurer(card1, card2, selectors[0])
    return play_master(card1, card2, selectors, config)


def _score(outcomes: Sequence[Outcome]) -> tuple:
    """Count (FIRST_WINS, SECOND_WINS) over a list of outcomes."""
    score1 = sum(1 for o in outcomes if o == Outcome.FIRST_WINS)
    score2 = sum(1 for o in outcomes if o == Outcome.SECOND_WINS)
    return score1, score2


def _invalid(tier: Tier, selectors: Sequence, exc: InvalidAttributeError) -> Decision:
    logger.warning("Invalid attribute choice %s: %s", exc.details.get("selector"), exc.message)
    return Decision(
        tier=tier,
        status=DecisionStatus.INVALID_CHOICE,
        selectors=list(selectors),
    )
