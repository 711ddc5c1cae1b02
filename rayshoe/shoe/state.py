"""Generator state enumeration."""

from enum import Enum, auto


class GeneratorState(Enum):
    """
    Shoe generator states.

    Flow: IDLE → FIRST_ROUND → SECOND_ROUND → REPLAY → DONE
    """

    # Ready for a game
    IDLE = auto()

    # Initial deal, one card per seat per round
    FIRST_ROUND = auto()
    SECOND_ROUND = auto()

    # Splits, hits and doubles in seat order
    REPLAY = auto()

    # Shoe complete
    DONE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
