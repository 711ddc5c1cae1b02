"""Shoe generation from game records."""

from rayshoe.shoe.events import DealEvent, DealPhase, EventEmitter
from rayshoe.shoe.state import GeneratorState
from rayshoe.shoe.generator import ShoeGenerator, generate

__all__ = [
    "DealEvent",
    "DealPhase",
    "EventEmitter",
    "GeneratorState",
    "ShoeGenerator",
    "generate",
]
