"""Deal events and the emitter that publishes them."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

from rayshoe.cards import Card, Suit
from rayshoe.hand import Seat


class DealPhase(Enum):
    """Why a card left the shoe."""

    FIRST_ROUND = auto()
    SECOND_ROUND = auto()
    SPLIT = auto()
    DOUBLE = auto()
    HIT = auto()
    IMPLICIT_HIT = auto()

    @property
    def is_initial(self) -> bool:
        """Check if this phase belongs to the initial two-round deal."""
        return self in (DealPhase.FIRST_ROUND, DealPhase.SECOND_ROUND)


@dataclass(frozen=True)
class DealEvent:
    """
    One card leaving the shoe.

    The order of events is the contract of the generator; seat, phase and
    sub-hand are context for whoever formats them.
    """

    card: Card
    seat: Seat
    phase: DealPhase
    sub_hand: int | None = None

    @property
    def rank(self) -> str:
        return self.card.rank

    @property
    def suit(self) -> Suit:
        return self.card.suit

    def __str__(self) -> str:
        where = str(self.seat)
        if self.sub_hand is not None:
            where += f" #{self.sub_hand}"
        return f"{self.phase.name}: {where} {self.card}"


# Type alias for event handlers
EventHandler = Callable[[DealEvent], None]


class EventEmitter:
    """
    Simple event emitter for deal events.

    Allows subscribing to specific phases or all events.
    """

    def __init__(self) -> None:
        """Initialize the event emitter."""
        self._handlers: dict[DealPhase | None, list[EventHandler]] = {}
        self._event_history: list[DealEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        phase: DealPhase | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when a card is dealt
            phase: Specific phase to subscribe to, or None for all events
        """
        self._handlers.setdefault(phase, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        phase: DealPhase | None = None,
    ) -> None:
        """
        Unsubscribe from events.

        Args:
            handler: Handler to remove
            phase: Phase the handler was subscribed to
        """
        handlers = self._handlers.get(phase, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: DealEvent) -> None:
        """
        Emit an event to all subscribers.

        Args:
            event: The event to emit
        """
        self._event_history.append(event)

        # Phase-specific handlers first, then catch-all handlers
        for handler in self._handlers.get(event.phase, []):
            handler(event)
        for handler in self._handlers.get(None, []):
            handler(event)

    @property
    def history(self) -> list[DealEvent]:
        """Return the event history."""
        return self._event_history.copy()

    def clear_history(self) -> None:
        """Clear the event history."""
        self._event_history.clear()
