"""Batch compiler: notation file in, shoe statements out.

Usage::

    ray games.ray [shoe.txt] [--seed N] [--format statements|json] [--check]

Blank lines and lines starting with ``#`` are skipped. The first line that
fails to parse or validate aborts the run with exit code 1; all of that
line's problems are reported on stderr as ``lineno: message``.
"""

import argparse
import logging
import sys
from typing import Iterable

from compiler.schemas import ShoeRecord
from compiler.sink import ShoeWriter, format_statement
from config import config
from rayshoe.cards import RandomSuitSource
from rayshoe.game import Game
from rayshoe.notation import NotationSyntaxError, parse, validate
from rayshoe.shoe import ShoeGenerator

log = logging.getLogger(__name__)


class CompileError(Exception):
    """A notation line could not be compiled."""

    def __init__(self, lineno: int, messages: list[str]) -> None:
        super().__init__(f"line {lineno}: " + "; ".join(messages))
        self.lineno = lineno
        self.messages = messages


def compile_lines(lines: Iterable[str], comment_marker: str = "#") -> list[Game]:
    """
    Parse and validate every game line.

    Args:
        lines: Raw input lines
        comment_marker: Prefix of lines to skip

    Returns:
        The games, in input order

    Raises:
        CompileError: On the first line with a syntax error or rule violations
    """
    games = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith(comment_marker):
            continue

        try:
            game = parse(line)
        except NotationSyntaxError as e:
            raise CompileError(lineno, [str(e)]) from e

        violations = validate(game)
        if violations:
            raise CompileError(lineno, [str(v) for v in violations])

        games.append(game)
    return games


def write_shoe(
    games: Iterable[Game],
    generator: ShoeGenerator,
    writer: ShoeWriter,
    output_format: str = "statements",
    indent: int = 4,
) -> int:
    """Generate each game's cards and write them; returns the number of cards."""
    total = 0
    for game in games:
        events = generator.generate(game)
        total += len(events)
        if output_format == "json":
            writer.write(ShoeRecord.build(game, events).model_dump_json())
        else:
            writer.write_all(format_statement(event, indent) for event in events)
    return total


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ray",
        description="Compile round notation into a shoe of dealt cards.",
    )
    parser.add_argument("input", help="notation file, one game per line")
    parser.add_argument("output", nargs="?", help="output file (default: stdout)")
    parser.add_argument(
        "--seed",
        type=int,
        default=config.shoe.seed,
        help="seed for suit selection (default: $RAY_SEED, else time-based)",
    )
    parser.add_argument(
        "--format",
        choices=("statements", "json"),
        default="statements",
        help="output format",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="parse and validate only",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log progress",
    )
    return parser


def report_error(lineno: int, message: str) -> None:
    print(f"{lineno}: {message}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else config.logging.level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        with open(args.input, encoding="utf-8") as f:
            games = compile_lines(f, config.shoe.comment_marker)
        log.info("Compiled %d game(s) from %s", len(games), args.input)

        if args.check:
            return 0

        generator = ShoeGenerator(RandomSuitSource.seeded(args.seed))
        stream = open(args.output, "w", encoding="utf-8") if args.output else None
        with ShoeWriter(stream) as writer:
            cards = write_shoe(
                games,
                generator,
                writer,
                output_format=args.format,
                indent=config.shoe.indent,
            )
        log.info("Wrote %d card(s) to %s", cards, args.output or "stdout")
    except CompileError as e:
        for message in e.messages:
            report_error(e.lineno, message)
        return 1
    except OSError as e:
        report_error(0, str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
