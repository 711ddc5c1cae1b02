"""Pydantic schemas for JSON export of games and shoes."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from rayshoe.game import Game
from rayshoe.hand import Directive, Double, Hand, Hit, Split
from rayshoe.shoe.events import DealEvent


class SplitSchema(BaseModel):
    """Split directive."""

    kind: Literal["split"] = "split"
    hands: list[list[str]]


class DoubleSchema(BaseModel):
    """Double-down directive."""

    kind: Literal["double"] = "double"
    cards: list[str]


class HitSchema(BaseModel):
    """Hit directive."""

    kind: Literal["hit"] = "hit"
    cards: list[str]


DirectiveSchema = Annotated[
    SplitSchema | DoubleSchema | HitSchema,
    Field(discriminator="kind"),
]


class HandSchema(BaseModel):
    """Hand representation."""

    seat: Literal["Huey", "You", "Dewey", "Dealer"]
    cards: list[str]
    directive: DirectiveSchema | None = None

    @classmethod
    def from_hand(cls, hand: Hand) -> "HandSchema":
        return cls(
            seat=hand.seat.value,
            cards=list(hand.cards),
            directive=_directive_schema(hand.directive),
        )


class OutcomeSchema(BaseModel):
    """Settled bet."""

    result: Literal["WIN", "LOSE", "PUSH", "BUST", "BJ", "BLACKJACK", "CHARLIE"]
    amount: int = Field(..., ge=0)


class GameSchema(BaseModel):
    """Parsed game record."""

    label: str
    bets: list[int] = Field(..., min_length=1, max_length=2)
    hands: list[HandSchema]
    outcomes: list[OutcomeSchema]

    @classmethod
    def from_game(cls, game: Game) -> "GameSchema":
        return cls(
            label=game.label,
            bets=list(game.bets),
            hands=[HandSchema.from_hand(hand) for hand in game.hands],
            outcomes=[
                OutcomeSchema(result=outcome.result.value, amount=outcome.amount)
                for outcome in game.outcomes
            ],
        )


class DealEventSchema(BaseModel):
    """One card leaving the shoe."""

    rank: str
    suit: Literal["HEARTS", "SPADES", "DIAMONDS", "CLUBS"]
    seat: str
    phase: str
    sub_hand: int | None = None

    @classmethod
    def from_event(cls, event: DealEvent) -> "DealEventSchema":
        return cls(
            rank=event.rank,
            suit=event.suit.name,
            seat=event.seat.value,
            phase=event.phase.name,
            sub_hand=event.sub_hand,
        )


class ShoeRecord(BaseModel):
    """A game together with the shoe generated for it."""

    game: GameSchema
    shoe: list[DealEventSchema]

    @classmethod
    def build(cls, game: Game, events: list[DealEvent]) -> "ShoeRecord":
        return cls(
            game=GameSchema.from_game(game),
            shoe=[DealEventSchema.from_event(event) for event in events],
        )


def _directive_schema(directive: Directive | None) -> SplitSchema | DoubleSchema | HitSchema | None:
    if isinstance(directive, Split):
        return SplitSchema(hands=[list(sub) for sub in directive.hands])
    if isinstance(directive, Double):
        return DoubleSchema(cards=list(directive.cards))
    if isinstance(directive, Hit):
        return HitSchema(cards=list(directive.cards))
    return None
