"""Round notation parser, validator and shoe generator."""

from rayshoe.cards import Card, FixedSuitSource, RandomSuitSource, Suit, SuitSource
from rayshoe.hand import Double, Hand, Hit, Seat, Split
from rayshoe.game import Game, Outcome, Result

__all__ = [
    "Card",
    "FixedSuitSource",
    "RandomSuitSource",
    "Suit",
    "SuitSource",
    "Double",
    "Hand",
    "Hit",
    "Seat",
    "Split",
    "Game",
    "Outcome",
    "Result",
]
