"""Pytest fixtures for notation compiler tests."""

import pytest
from random import Random

from rayshoe.cards import FixedSuitSource, RandomSuitSource, Suit
from rayshoe.notation import parse
from rayshoe.shoe import ShoeGenerator


SPLIT_LINE = "T1 {5}: You 7+7+P!{2+4,5+9} | Dealer 10+6 >> WIN{5}, PUSH{5}"
IMPLICIT_HIT_LINE = "T9 {5}: You 3+2+J+2 | Dealer 7+10+4 >> LOSE{5}"
THREE_PLAYER_LINE = "T8 {5,15}: You 3+3 | Dewey 9+2+5 | Dealer 10+7 >> Win{5}, Win{15}"
FULL_TABLE_LINE = (
    "T4 {5,15}: Dealer 10+7 | Dewey 9+2+H!5 | You 8+8+P!{8+3,8+10} | Huey 10+2+D!7"
    " >> WIN{5}, LOSE{5}, WIN{15}"
)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def suit_source(rng):
    """A seeded random suit source."""
    return RandomSuitSource(rng)


@pytest.fixture
def hearts():
    """A suit source that only deals hearts."""
    return FixedSuitSource([Suit.HEARTS])


@pytest.fixture
def generator(hearts):
    """A generator dealing all hearts."""
    return ShoeGenerator(hearts)


@pytest.fixture
def split_game():
    """You split sevens against a dealer 16."""
    return parse(SPLIT_LINE)


@pytest.fixture
def implicit_hit_game():
    """Both You and the dealer draw without a directive."""
    return parse(IMPLICIT_HIT_LINE)


@pytest.fixture
def three_player_game():
    """You, Dewey and the dealer, two bets."""
    return parse(THREE_PLAYER_LINE)


@pytest.fixture
def full_table_game():
    """All four seats, listed out of dealing order, each with a directive."""
    return parse(FULL_TABLE_LINE)


@pytest.fixture
def games_file(tmp_path):
    """A notation file with comments, blank lines and three valid games."""
    path = tmp_path / "games.ray"
    path.write_text(
        "\n".join(
            [
                "# sample shoe",
                SPLIT_LINE,
                "",
                IMPLICIT_HIT_LINE,
                "   # indented comment",
                THREE_PLAYER_LINE,
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    return path
