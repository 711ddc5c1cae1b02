"""Tests for the statement sink."""

import io
import sys

import pytest

from compiler.sink import ShoeWriter, format_statement
from rayshoe.cards import Card, Suit
from rayshoe.hand import Seat
from rayshoe.shoe import DealEvent, DealPhase, generate


def make_event(rank="J", suit=Suit.SPADES):
    return DealEvent(card=Card(rank, suit), seat=Seat.YOU, phase=DealPhase.FIRST_ROUND)


class TestFormatStatement:
    """Tests for statement rendering."""

    def test_default_indent(self):
        """Test the default four-space indent."""
        assert format_statement(make_event()) == "    cards.add(new Card(J, SPADES));"

    def test_custom_indent(self):
        """Test a different indent width."""
        statement = format_statement(make_event("10", Suit.HEARTS), indent=0)
        assert statement == "cards.add(new Card(10, HEARTS));"


class TestShoeWriter:
    """Tests for the ShoeWriter class."""

    def test_writes_in_order(self, split_game, hearts):
        """Test one line per statement, in order."""
        stream = io.StringIO()
        writer = ShoeWriter(stream)
        writer.write_all(format_statement(e) for e in generate(split_game, hearts))

        lines = stream.getvalue().splitlines()
        assert len(lines) == 8
        assert lines[0] == "    cards.add(new Card(7, HEARTS));"
        assert lines[-1] == "    cards.add(new Card(9, HEARTS));"
        assert writer.statements_written == 8

    def test_close_releases_stream(self):
        """Test that closing closes a file stream."""
        stream = io.StringIO()
        writer = ShoeWriter(stream)
        writer.write("a")
        writer.close()
        assert writer.closed
        assert stream.closed

    def test_close_twice(self):
        """Test that close is idempotent."""
        writer = ShoeWriter(io.StringIO())
        writer.close()
        writer.close()
        assert writer.closed

    def test_write_after_close_raises(self):
        """Test that a closed writer rejects statements."""
        writer = ShoeWriter(io.StringIO())
        writer.close()
        with pytest.raises(ValueError):
            writer.write("a")

    def test_stdout_left_open(self, capsys):
        """Test that the default stream is stdout and stays open."""
        with ShoeWriter() as writer:
            writer.write("hello")
        assert capsys.readouterr().out == "hello\n"
        assert not sys.stdout.closed

    def test_context_manager_closes(self, tmp_path):
        """Test writing to a file through the context manager."""
        path = tmp_path / "shoe.txt"
        with ShoeWriter(open(path, "w", encoding="utf-8")) as writer:
            writer.write_all(["one", "two"])
        assert path.read_text(encoding="utf-8") == "one\ntwo\n"
