"""Replays a game record into the ordered cards of a shoe."""

import logging
from typing import Callable

from transitions import Machine

from rayshoe.cards import Card, RandomSuitSource, SuitSource
from rayshoe.game import Game
from rayshoe.hand import DEAL_ORDER, Double, Hand, Hit, Seat, Split
from rayshoe.shoe.events import DealEvent, DealPhase, EventEmitter
from rayshoe.shoe.state import GeneratorState

log = logging.getLogger(__name__)

_DRAW_PHASES: dict[type, DealPhase] = {
    Hit: DealPhase.HIT,
    Double: DealPhase.DOUBLE,
}


class ShoeGenerator:
    """
    Shoe generator using a state machine.

    Deals the initial two rounds in seat order, then replays each seat's
    splits, hits and doubles. Suits come from the injected source, so a
    seeded source makes the shoe reproducible. The input game is only read.
    """

    # State machine states
    STATES = [s.name.lower() for s in GeneratorState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_deal", "source": "idle", "dest": "first_round"},
        {"trigger": "deal_second_round", "source": "first_round", "dest": "second_round"},
        {"trigger": "start_replay", "source": "second_round", "dest": "replay"},
        {"trigger": "finish", "source": "replay", "dest": "done"},
        {"trigger": "rewind", "source": "*", "dest": "idle"},
    ]

    def __init__(self, suit_source: SuitSource | None = None) -> None:
        """
        Initialize the generator.

        Args:
            suit_source: Where suits come from (unseeded random if not provided)
        """
        self.suit_source = suit_source or RandomSuitSource()
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="idle",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GeneratorState:
        """Get current generator state as enum."""
        return GeneratorState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[DealEvent], None],
        phase: DealPhase | None = None,
    ) -> None:
        """Subscribe to deal events."""
        self.events.subscribe(handler, phase)

    def unsubscribe(
        self,
        handler: Callable[[DealEvent], None],
        phase: DealPhase | None = None,
    ) -> None:
        """Stop sending deal events to a handler."""
        self.events.unsubscribe(handler, phase)

    def generate(self, game: Game) -> list[DealEvent]:
        """
        Deal a validated game.

        Args:
            game: Game that already passed validation

        Returns:
            The deal events, in the order the cards leave the shoe
        """
        self.rewind()
        self.events.clear_history()

        hands = self._seated_hands(game)

        self.start_deal()
        self._deal_round(hands, 0, DealPhase.FIRST_ROUND)

        self.deal_second_round()
        self._deal_round(hands, 1, DealPhase.SECOND_ROUND)

        self.start_replay()
        for hand in hands:
            self._replay(hand)

        self.finish()

        history = self.events.history
        log.debug("Generated %d cards for %s", len(history), game.label)
        return history

    @staticmethod
    def _seated_hands(game: Game) -> list[Hand]:
        """Return the hand of each occupied seat, in dealing order."""
        hands = []
        for seat in DEAL_ORDER:
            hand = game.hand_for(seat)
            if hand is not None:
                hands.append(hand)
        return hands

    def _deal_round(self, hands: list[Hand], index: int, phase: DealPhase) -> None:
        """Deal the card at ``index`` to every seat that has one."""
        for hand in hands:
            if index < len(hand.cards):
                self._deal(hand.cards[index], hand.seat, phase)

    def _replay(self, hand: Hand) -> None:
        """Deal the cards a seat drew after the initial two."""
        if isinstance(hand.directive, Split):
            for number, sub_hand in enumerate(hand.directive.hands, start=1):
                for rank in sub_hand:
                    self._deal(rank, hand.seat, DealPhase.SPLIT, number)
            return

        phase = _DRAW_PHASES.get(type(hand.directive), DealPhase.IMPLICIT_HIT)
        for rank in hand.draw_cards:
            self._deal(rank, hand.seat, phase)

    def _deal(
        self,
        rank: str,
        seat: Seat,
        phase: DealPhase,
        sub_hand: int | None = None,
    ) -> None:
        card = Card(rank, self.suit_source.draw())
        self.events.emit(DealEvent(card=card, seat=seat, phase=phase, sub_hand=sub_hand))


def generate(game: Game, suit_source: SuitSource) -> list[DealEvent]:
    """
    Deal a validated game into an ordered list of events.

    Args:
        game: Game that already passed validation
        suit_source: Source of suits, owned by this call

    Returns:
        The deal events in shoe order
    """
    return ShoeGenerator(suit_source).generate(game)
