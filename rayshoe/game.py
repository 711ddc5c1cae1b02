"""Game records: one parsed round of the notation."""

from dataclasses import dataclass
from enum import Enum

from rayshoe.hand import Hand, Seat


class Result(Enum):
    """Settlement results."""

    WIN = "WIN"
    LOSE = "LOSE"
    PUSH = "PUSH"
    BUST = "BUST"
    BJ = "BJ"
    BLACKJACK = "BLACKJACK"
    CHARLIE = "CHARLIE"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_word(cls, word: str) -> "Result":
        """
        Look up a result word, ignoring case.

        Raises:
            ValueError: If the word is not a result
        """
        return cls(word.strip().upper())


@dataclass(frozen=True, slots=True)
class Outcome:
    """Settlement of one bet."""

    result: Result
    amount: int

    def __str__(self) -> str:
        return f"{self.result}{{{self.amount}}}"


@dataclass(frozen=True)
class Game:
    """
    One round: label, bets, the seated hands, and outcomes.

    Hands keep their input order. Duplicate seats are allowed here and
    reported by validation.
    """

    label: str
    bets: tuple[int, ...]
    hands: tuple[Hand, ...] = ()
    outcomes: tuple[Outcome, ...] = ()

    def hand_for(self, seat: Seat) -> Hand | None:
        """Return the first hand for a seat, or None if the seat is empty."""
        for hand in self.hands:
            if hand.seat is seat:
                return hand
        return None

    @property
    def you(self) -> Hand | None:
        """Return the You hand, or None."""
        return self.hand_for(Seat.YOU)

    @property
    def dealer(self) -> Hand | None:
        """Return the dealer hand, or None."""
        return self.hand_for(Seat.DEALER)

    @property
    def seats(self) -> list[Seat]:
        """Return the seats in input order, duplicates included."""
        return [hand.seat for hand in self.hands]

    def __str__(self) -> str:
        bets = ",".join(str(bet) for bet in self.bets)
        hands = " | ".join(str(hand) for hand in self.hands)
        outcomes = ", ".join(str(outcome) for outcome in self.outcomes)
        return f"{self.label} {{{bets}}}: {hands} >> {outcomes}"
