"""Table-rule checks over parsed games.

Every rule runs on every game so that one pass reports all of a game's
defects. Violations come back in rule order.
"""

from dataclasses import dataclass
from enum import Enum, auto

from rayshoe.game import Game
from rayshoe.hand import Double, Hit, Seat, Split

SPLIT_HANDS = 2
MIN_SPLIT_CARDS = 2


class Rule(Enum):
    """Rules a game can violate."""

    MISSING_GAME = auto()
    BET_OUTCOME_COUNT = auto()
    SPLIT_ELIGIBILITY = auto()
    ACTION_ELIGIBILITY = auto()
    MANDATORY_SEAT = auto()
    SEAT_UNIQUENESS = auto()
    SPLIT_STRUCTURE = auto()


@dataclass(frozen=True, slots=True)
class Violation:
    """A single broken rule with a readable message."""

    rule: Rule
    message: str

    def __str__(self) -> str:
        return self.message


def validate(game: Game | None) -> list[Violation]:
    """
    Check a game against the table rules.

    Args:
        game: Parsed game, or None

    Returns:
        All violations found, empty if the game is valid
    """
    if game is None:
        return [Violation(Rule.MISSING_GAME, "game is missing.")]

    violations: list[Violation] = []
    violations.extend(_check_outcome_count(game))
    violations.extend(_check_split_eligibility(game))
    violations.extend(_check_action_eligibility(game))
    violations.extend(_check_mandatory_seats(game))
    violations.extend(_check_unique_seats(game))
    violations.extend(_check_split_structure(game))
    return violations


def is_valid(game: Game | None) -> bool:
    """Check if a game passes every rule."""
    return not validate(game)


def _check_outcome_count(game: Game) -> list[Violation]:
    you = game.you
    you_split = you is not None and you.is_split
    expected = len(game.bets) + 1 if you_split else len(game.bets)
    found = len(game.outcomes)

    if found == expected:
        return []
    prefix = "You split, expected" if you_split else "expected"
    return [
        Violation(
            Rule.BET_OUTCOME_COUNT,
            f"{prefix} outcomes={expected} but found {found}.",
        )
    ]


def _check_split_eligibility(game: Game) -> list[Violation]:
    return [
        Violation(Rule.SPLIT_ELIGIBILITY, f"{hand.seat} cannot split (P!).")
        for hand in game.hands
        if hand.is_split and not hand.seat.may_split
    ]


def _check_action_eligibility(game: Game) -> list[Violation]:
    return [
        Violation(
            Rule.ACTION_ELIGIBILITY,
            f"{hand.seat} cannot use directive {hand.directive.letter}!.",
        )
        for hand in game.hands
        if isinstance(hand.directive, (Hit, Double)) and not hand.seat.may_draw
    ]


def _check_mandatory_seats(game: Game) -> list[Violation]:
    seats = set(game.seats)
    return [
        Violation(Rule.MANDATORY_SEAT, f"missing {seat} player.")
        for seat in (Seat.YOU, Seat.DEALER)
        if seat not in seats
    ]


def _check_unique_seats(game: Game) -> list[Violation]:
    violations = []
    seen: set[Seat] = set()
    for seat in game.seats:
        if seat in seen:
            violations.append(
                Violation(Rule.SEAT_UNIQUENESS, f"player {seat} is duplicated.")
            )
        seen.add(seat)
    return violations


def _check_split_structure(game: Game) -> list[Violation]:
    violations = []
    for hand in game.hands:
        if not isinstance(hand.directive, Split):
            continue

        sub_hands = hand.directive.hands
        if len(sub_hands) != SPLIT_HANDS:
            violations.append(
                Violation(
                    Rule.SPLIT_STRUCTURE,
                    f"split error: {hand.seat} has {len(sub_hands)} subhands, "
                    f"expected {SPLIT_HANDS}.",
                )
            )

        for number, sub in enumerate(sub_hands, start=1):
            if len(sub) < MIN_SPLIT_CARDS:
                violations.append(
                    Violation(
                        Rule.SPLIT_STRUCTURE,
                        f"split error: {hand.seat} subhand #{number} has only "
                        f"{len(sub)} card(s), expected at least {MIN_SPLIT_CARDS}.",
                    )
                )
    return violations
