"""Seats, hands, and the directives a hand can carry."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class Seat(Enum):
    """The fixed seats at the table, in dealing order."""

    HUEY = "Huey"
    YOU = "You"
    DEWEY = "Dewey"
    DEALER = "Dealer"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Seat":
        """
        Look up a seat by name, ignoring case.

        Raises:
            KeyError: If the name is not a seat
        """
        return _SEATS_BY_NAME[name.strip().lower()]

    @property
    def may_split(self) -> bool:
        """Check if this seat is allowed to split."""
        return self is Seat.YOU

    @property
    def may_draw(self) -> bool:
        """Check if this seat is allowed to hit or double down."""
        return self is not Seat.DEALER


_SEATS_BY_NAME: dict[str, Seat] = {seat.value.lower(): seat for seat in Seat}

# Fixed order in which seats receive cards.
DEAL_ORDER: tuple[Seat, ...] = (Seat.HUEY, Seat.YOU, Seat.DEWEY, Seat.DEALER)


@dataclass(frozen=True, slots=True)
class Split:
    """Split into sub-hands, each listing the cards dealt after the split."""

    letter: ClassVar[str] = "P"

    hands: tuple[tuple[str, ...], ...]

    def __str__(self) -> str:
        groups = ",".join("+".join(sub) for sub in self.hands)
        return f"P!{{{groups}}}"

    @property
    def num_cards(self) -> int:
        """Return the number of cards across all sub-hands."""
        return sum(len(sub) for sub in self.hands)


@dataclass(frozen=True, slots=True)
class Double:
    """Double down, with the card(s) dealt for it."""

    letter: ClassVar[str] = "D"

    cards: tuple[str, ...]

    def __str__(self) -> str:
        return "D!" + "+".join(self.cards)


@dataclass(frozen=True, slots=True)
class Hit:
    """Hit, with the card(s) dealt for it."""

    letter: ClassVar[str] = "H"

    cards: tuple[str, ...]

    def __str__(self) -> str:
        return "H!" + "+".join(self.cards)


Directive = Split | Double | Hit


@dataclass(frozen=True, slots=True)
class Hand:
    """One seat's cards in a round, with an optional directive."""

    seat: Seat
    cards: tuple[str, ...] = ()
    directive: Directive | None = None

    @property
    def is_split(self) -> bool:
        """Check if the hand carries a split directive."""
        return isinstance(self.directive, Split)

    @property
    def draw_cards(self) -> tuple[str, ...]:
        """
        Return the cards dealt after the initial two.

        Explicit hit or double directives win; otherwise any cards past the
        first two are an implicit hit. Split hands report nothing here since
        their extra cards live in the sub-hands.
        """
        if isinstance(self.directive, (Hit, Double)):
            return self.directive.cards
        if self.directive is None:
            return self.cards[2:]
        return ()

    def __str__(self) -> str:
        parts = list(self.cards)
        if self.directive is not None:
            parts.append(str(self.directive))
        return f"{self.seat} {'+'.join(parts)}"
