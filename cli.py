"""
Command-line interface for the Super Trunfo card comparison game.
Collects two city cards from the terminal, runs the chosen tier and prints the result.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from pydantic import ValidationError

from engine.attributes import get_spec, menu_lines
from engine.config import DEFAULT_CONFIG, LogConfig
from engine.models import Card, Decision, Direction, Outcome, Tier
from engine.schemas import CHOICE_ADAPTER, CardInput, parse_field
from engine.scoring import play, tier_from_choice

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]

BANNER = [
    "===== Super Trunfo — Cidades (Comparação de Cartas) =====",
    "1) Novato (atributo fixo)",
    "2) Aventureiro (1 atributo à escolha)",
    "3) Mestre (2 atributos)",
]

# (field name, prompt) in the order they are asked
CARD_PROMPTS = [
    ("state", "Estado (A-H, 1 letra): "),
    ("city_index", "Cidade (1-4): "),
    ("name", "Nome da cidade: "),
    ("population", "Populacao: "),
    ("area", "Area (km2): "),
    ("gdp", "PIB (R$): "),
    ("tourist_spots", "Pontos turisticos: "),
]

OUTCOME_LABELS = {
    Outcome.FIRST_WINS: "Carta 1",
    Outcome.SECOND_WINS: "Carta 2",
    Outcome.TIE: "Empate",
}


# ----------------------------------------------------------------------
# Input collection
# ----------------------------------------------------------------------
def prompt_field(field_name: str, prompt: str, read: Optional[Reader] = None):
    """
    Prompt for one card field until a value of the right type is typed.

    Raises:
        EOFError: If standard input is closed
    """
    if read is None:
        read = input

    while True:
        raw = read(prompt)
        try:
            return parse_field(field_name, raw)
        except ValidationError as exc:
            logger.warning("Rejected %s value %r: %s", field_name, raw, exc.errors()[0]["msg"])


def prompt_int(prompt: str, read: Optional[Reader] = None) -> int:
    """Prompt until an integer is typed (used for menus)."""
    if read is None:
        read = input

    while True:
        raw = read(prompt)
        try:
            return CHOICE_ADAPTER.validate_python(raw.strip())
        except ValidationError as exc:
            logger.warning("Rejected menu choice %r: %s", raw, exc.errors()[0]["msg"])


def collect_card(title: str, read: Optional[Reader] = None) -> Card:
    """
    Read all raw fields of one card and return it finalized.

    Args:
        title: Header shown before the prompts (e.g. "Carta 1")
        read: Function used to read a line (defaults to input)

    Returns:
        Card with code and derived fields computed
    """
    print(f"\n--- {title} ---")
    values = {name: prompt_field(name, prompt, read) for name, prompt in CARD_PROMPTS}
    return CardInput(**values).to_card()


# ----------------------------------------------------------------------
# Presentation
# ----------------------------------------------------------------------
def format_card(card: Card, config: dict = None) -> List[str]:
    """Render a card as display lines."""
    if config is None:
        config = DEFAULT_CONFIG

    area_d = config.get("area_decimals", 2)
    money_d = config.get("money_decimals", 2)
    derived_d = config.get("derived_decimals", 4)

    return [
        f"[{card.code}] {card.name}",
        f"Estado: {card.state} | Cidade: {card.city_index}",
        f"Populacao: {card.population}",
        f"Area: {card.area:.{area_d}f}",
        f"PIB: {card.gdp:.{money_d}f}",
        f"Pontos turisticos: {card.tourist_spots}",
        f"Densidade: {card.density:.{derived_d}f}",
        f"PIB per capita: {card.gdp_per_capita:.{derived_d}f}",
    ]


def print_cards(card1: Card, card2: Card) -> None:
    for n, card in ((1, card1), (2, card2)):
        print(f"\n=== CARTA {n} ===")
        for line in format_card(card):
            print(line)


def winner_line(decision: Decision, card1: Card, card2: Card) -> str:
    """Text naming the winning card with its code, e.g. "Carta 1 (A01)"."""
    card = card1 if decision.winner == 1 else card2
    return f"Carta {decision.winner} ({card.code})"


def print_menu(short: bool = False) -> None:
    for line in menu_lines(short):
        print(line)


def print_single_result(decision: Decision, card1: Card, card2: Card, tie_text: str) -> None:
    if decision.is_tie:
        print(tie_text)
    else:
        print(f"Vencedora: {winner_line(decision, card1, card2)}")


def print_master_result(decision: Decision, card1: Card, card2: Card) -> None:
    print("\n=== RESULTADOS PARCIAIS ===")
    for partial in decision.partials:
        print(f"{get_spec(partial.attribute).label}: {OUTCOME_LABELS[partial.outcome]}")

    score1, score2 = decision.scores
    print(f"\n=== PLACAR ===\nCarta 1: {score1}  |  Carta 2: {score2}")

    print("\n=== VENCEDOR FINAL ===")
    print("Empate geral" if decision.is_tie else winner_line(decision, card1, card2))


def print_decision(decision: Decision, card1: Card, card2: Card) -> None:
    """Print the result block for the tier that produced the decision."""
    if not decision.is_valid:
        print("Opcao invalida.")
        return

    if decision.tier == Tier.NOVICE:
        spec = get_spec(decision.attributes[0])
        rule = "maior" if spec.direction == Direction.HIGHER_WINS else "menor"
        print(f"\n=== COMPARACAO (Atributo: {spec.label} — {rule} vence) ===")
        print_single_result(decision, card1, card2, f"Empate no atributo {spec.label}.")
    elif decision.tier == Tier.ADVENTURER:
        print("\n=== RESULTADO ===")
        print_single_result(decision, card1, card2, "Empate no atributo escolhido.")
    else:
        print_master_result(decision, card1, card2)


# ----------------------------------------------------------------------
# Tiers
# ----------------------------------------------------------------------
def read_selectors(tier: Tier, read: Optional[Reader] = None) -> List[int]:
    """
    Show the attribute menu(s) for a tier and read the selectors as typed.

    Novice reads nothing, Adventurer one selector, Master two. Range checks
    happen later, in the scoring engine.
    """
    if tier == Tier.NOVICE:
        return []

    if tier == Tier.ADVENTURER:
        print("\n=== MENU DE COMPARACAO ===")
        print_menu()
        return [prompt_int("Escolha: ", read)]

    print("\n=== MENU (escolha DOIS atributos) ===")
    print_menu(short=True)
    first = prompt_int("Primeiro atributo (1-6): ", read)
    print_menu(short=True)
    second = prompt_int("Segundo atributo (1-6): ", read)
    return [first, second]


def run_game(read: Optional[Reader] = None) -> Decision:
    """
    Play one full game: tier menu, two cards, comparison, verdict.

    Returns:
        The final Decision
    """
    for line in BANNER:
        print(line)
    tier = tier_from_choice(prompt_int("Escolha: ", read))
    logger.info("Starting %s tier", tier.name)

    card1 = collect_card("Carta 1", read)
    card2 = collect_card("Carta 2", read)
    print_cards(card1, card2)

    selectors = read_selectors(tier, read)
    decision = play(tier, card1, card2, selectors)
    print_decision(decision, card1, card2)

    logger.info("Game finished: status=%s winner=%s", decision.status.value, decision.winner)
    return decision


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Super Trunfo - city card comparison game",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG | INFO | WARNING | ERROR); overrides TRUNFO_LOG_LEVEL",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LogConfig.resolve_level(args.log_level),
        format=LogConfig.FORMAT,
        stream=sys.stderr,
    )

    try:
        run_game()
    except (EOFError, KeyboardInterrupt):
        print()
        logger.info("Input closed; game aborted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
