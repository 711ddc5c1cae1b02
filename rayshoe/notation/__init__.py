"""Notation parsing and validation."""

from rayshoe.notation.parser import NotationSyntaxError, parse
from rayshoe.notation.validator import Rule, Violation, is_valid, validate

__all__ = [
    "NotationSyntaxError",
    "parse",
    "Rule",
    "Violation",
    "is_valid",
    "validate",
]
