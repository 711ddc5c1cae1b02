"""Suits, dealt cards, and the random suit sources that feed the shoe."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from itertools import cycle
from random import Random
from typing import Iterable


class Suit(Enum):
    """Card suits, in draw order."""

    HEARTS = auto()
    SPADES = auto()
    DIAMONDS = auto()
    CLUBS = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
        }
        return symbols[self]


SUITS: tuple[Suit, ...] = tuple(Suit)


@dataclass(frozen=True, slots=True)
class Card:
    """A rank token paired with the suit it was dealt in."""

    rank: str
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank}, {self.suit.name})"


class SuitSource(ABC):
    """Source of suits for dealt cards."""

    @abstractmethod
    def draw(self) -> Suit:
        """Return the suit for the next card leaving the shoe."""
        ...


class RandomSuitSource(SuitSource):
    """Uniform suit source backed by a ``random.Random``."""

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize the source.

        Args:
            rng: Random number generator; pass a seeded one for reproducible shoes
        """
        self._rng = rng or Random()

    @classmethod
    def seeded(cls, seed: int | None) -> "RandomSuitSource":
        """Create a source from a seed (None seeds from system time)."""
        return cls(Random(seed))

    def draw(self) -> Suit:
        return self._rng.choice(SUITS)


class FixedSuitSource(SuitSource):
    """Suit source that cycles through a fixed sequence."""

    def __init__(self, suits: Iterable[Suit]) -> None:
        suits = tuple(suits)
        if not suits:
            raise ValueError("FixedSuitSource needs at least one suit")
        self._suits = cycle(suits)

    def draw(self) -> Suit:
        return next(self._suits)
