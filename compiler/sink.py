"""Statement sink that writes a generated shoe out."""

import sys
from typing import Iterable, TextIO

from rayshoe.shoe.events import DealEvent


def format_statement(event: DealEvent, indent: int = 4) -> str:
    """Render a deal event as a ``cards.add(new Card(RANK, SUIT));`` statement."""
    return f"{' ' * indent}cards.add(new Card({event.rank}, {event.suit.name}));"


class ShoeWriter:
    """Writes statements one per line, in order."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """
        Initialize the writer.

        Args:
            stream: Destination (stdout if not provided)
        """
        self._stream = stream or sys.stdout
        self._closed = False
        self.statements_written = 0

    def write(self, statement: str) -> None:
        """Write a single statement."""
        if self._closed:
            raise ValueError("Cannot write to a closed ShoeWriter")
        self._stream.write(statement + "\n")
        self.statements_written += 1

    def write_all(self, statements: Iterable[str]) -> None:
        """Write statements in order."""
        for statement in statements:
            self.write(statement)

    def close(self) -> None:
        """Flush and release the stream; standard streams stay open."""
        if self._closed:
            return
        self._closed = True
        self._stream.flush()
        if self._stream not in (sys.stdout, sys.stderr):
            self._stream.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "ShoeWriter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
