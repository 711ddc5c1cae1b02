"""Parser for the one-line round notation.

A line looks like::

    T1 {5}: You 7+7+P!{2+4,5+9} | Dealer 10+6 >> WIN{5}, PUSH{5}

The parser only checks structure. Whether a seat may split, how many
outcomes a round needs and the like are left to the validator.
"""

import logging
import re

from rayshoe.game import Game, Outcome, Result
from rayshoe.hand import Directive, Double, Hand, Hit, Seat, Split

log = logging.getLogger(__name__)

OUTCOME_SEPARATOR = ">>"
HEADER_SEPARATOR = ":"
HAND_SEPARATOR = "|"
LIST_SEPARATOR = ","
CARD_SEPARATOR = "+"
DIRECTIVE_MARKER = "!"

_HEADER_RE = re.compile(r"(\w+)\s*\{\s*(\d+)\s*(?:,\s*(\d+)\s*)?\}")
_HAND_RE = re.compile(r"(\w+)\s+(.+)", re.DOTALL)
_OUTCOME_RE = re.compile(r"(\w+)\s*\{\s*(\d+)\s*\}")
_SPLIT_RE = re.compile(r"P!\{([^{}]*)\}")
_RANK_RE = re.compile(r"[A-Za-z0-9]+")
_WHITESPACE_RE = re.compile(r"\s")
_SEPARATOR_SPACE_RE = re.compile(r"\s*([+,!{}])\s*")


class NotationSyntaxError(ValueError):
    """A line does not follow the notation grammar."""

    def __init__(self, message: str, fragment: str) -> None:
        super().__init__(f"{message}: {fragment!r}")
        self.fragment = fragment


def parse(line: str) -> Game:
    """
    Parse one line of notation into a Game.

    Args:
        line: A single round, e.g. ``T9 {5}: You 3+2+J | Dealer 7+10 >> LOSE{5}``

    Returns:
        The parsed game

    Raises:
        NotationSyntaxError: If any part of the line is malformed
    """
    line = line.strip()

    parts = line.split(OUTCOME_SEPARATOR)
    if len(parts) < 2:
        raise NotationSyntaxError(f"Missing '{OUTCOME_SEPARATOR}' outcome separator", line)
    if len(parts) > 2:
        raise NotationSyntaxError(f"More than one '{OUTCOME_SEPARATOR}' separator", line)
    left, right = parts[0].strip(), parts[1].strip()

    header, colon, body = left.partition(HEADER_SEPARATOR)
    if not colon:
        raise NotationSyntaxError(f"Missing '{HEADER_SEPARATOR}' after bet section", left)

    label, bets = parse_header(header.strip())
    hands = parse_body(body.strip())
    outcomes = parse_outcomes(right)

    game = Game(label=label, bets=bets, hands=hands, outcomes=outcomes)
    log.debug("Parsed %s", game)
    return game


def parse_header(text: str) -> tuple[str, tuple[int, ...]]:
    """Parse ``LABEL {N}`` or ``LABEL {N,M}`` into the label and bets."""
    m = _HEADER_RE.fullmatch(text)
    if m is None:
        raise NotationSyntaxError("Invalid label/bet format", text)

    bets = [int(m.group(2))]
    if m.group(3) is not None:
        bets.append(int(m.group(3)))
    return m.group(1), tuple(bets)


def parse_body(text: str) -> tuple[Hand, ...]:
    """Parse the ``|``-separated hands. An empty body has no hands."""
    if not text:
        return ()
    return tuple(parse_hand(part.strip()) for part in text.split(HAND_SEPARATOR))


def parse_hand(text: str) -> Hand:
    """
    Parse a single hand such as ``You 7+7+P!{2+4,5+9}`` or ``Dealer 10+6``.

    Raises:
        NotationSyntaxError: On an unknown seat or malformed cards/directive
    """
    m = _HAND_RE.fullmatch(text)
    if m is None:
        raise NotationSyntaxError("Invalid hand format", text)

    try:
        seat = Seat.from_name(m.group(1))
    except KeyError:
        raise NotationSyntaxError("Unknown player", m.group(1)) from None

    cards_part = _SEPARATOR_SPACE_RE.sub(r"\1", m.group(2).strip())
    if _WHITESPACE_RE.search(cards_part):
        raise NotationSyntaxError("Ranks must be joined by '+'", cards_part)

    marker = cards_part.find(DIRECTIVE_MARKER)
    if marker < 0:
        return Hand(seat=seat, cards=_parse_ranks(cards_part))

    # The directive letter sits right before the marker and must open its own token.
    if marker == 0 or (marker > 1 and cards_part[marker - 2] != CARD_SEPARATOR):
        raise NotationSyntaxError("Malformed directive", cards_part)

    cards = _parse_ranks(cards_part[: marker - 1])
    directive = parse_directive(cards_part[marker - 1 :])
    return Hand(seat=seat, cards=cards, directive=directive)


def parse_directive(text: str) -> Directive:
    """
    Parse a directive: ``P!{2+4,5+9}``, ``D!10`` or ``H!5+3``.

    Raises:
        NotationSyntaxError: On an unknown letter or malformed body
    """
    if len(text) < 2 or text[1] != DIRECTIVE_MARKER:
        raise NotationSyntaxError("Invalid directive syntax", text)

    letter = text[0].upper()

    if letter == Split.letter:
        m = _SPLIT_RE.fullmatch(Split.letter + text[1:])
        if m is None:
            raise NotationSyntaxError("Invalid split directive", text)
        groups = m.group(1).split(LIST_SEPARATOR)
        return Split(hands=tuple(_parse_ranks(group) for group in groups))

    if letter in (Double.letter, Hit.letter):
        extras = _parse_ranks(text[2:])
        if not extras:
            raise NotationSyntaxError("Directive has no cards", text)
        if letter == Double.letter:
            return Double(cards=extras)
        return Hit(cards=extras)

    raise NotationSyntaxError("Unknown directive type", text[0])


def parse_outcomes(text: str) -> tuple[Outcome, ...]:
    """Parse one or more comma-separated outcomes, e.g. ``WIN{5}, PUSH{10}``."""
    return tuple(parse_outcome(part.strip()) for part in text.split(LIST_SEPARATOR))


def parse_outcome(text: str) -> Outcome:
    """Parse ``RESULT{amount}``; the result word is case-insensitive."""
    m = _OUTCOME_RE.fullmatch(text)
    if m is None:
        raise NotationSyntaxError("Invalid outcome format", text)

    try:
        result = Result.from_word(m.group(1))
    except ValueError:
        raise NotationSyntaxError("Unknown outcome", m.group(1)) from None

    return Outcome(result=result, amount=int(m.group(2)))


def _parse_ranks(text: str) -> tuple[str, ...]:
    """Split ``+``-joined ranks, dropping empty tokens."""
    ranks = []
    for token in text.split(CARD_SEPARATOR):
        token = token.strip()
        if not token:
            continue
        if _RANK_RE.fullmatch(token) is None:
            raise NotationSyntaxError("Invalid rank", token)
        ranks.append(token.upper())
    return tuple(ranks)
