"""Tests for the JSON export schemas."""

import json

import pytest
from pydantic import ValidationError

from compiler.schemas import GameSchema, HandSchema, OutcomeSchema, ShoeRecord
from rayshoe.shoe import generate


class TestGameSchema:
    """Tests for game export."""

    def test_from_game(self, split_game):
        """Test converting a parsed game."""
        schema = GameSchema.from_game(split_game)
        assert schema.label == "T1"
        assert schema.bets == [5]
        assert schema.hands[0].seat == "You"
        assert schema.hands[0].directive.kind == "split"
        assert schema.hands[0].directive.hands == [["2", "4"], ["5", "9"]]
        assert schema.hands[1].directive is None
        assert [o.result for o in schema.outcomes] == ["WIN", "PUSH"]

    def test_directive_kinds(self, full_table_game):
        """Test that each directive exports with its kind."""
        kinds = {h.seat: h.directive.kind for h in GameSchema.from_game(full_table_game).hands if h.directive}
        assert kinds == {"You": "split", "Dewey": "hit", "Huey": "double"}

    def test_directive_discriminator(self):
        """Test loading a hand picks the directive model from its kind."""
        hand = HandSchema.model_validate(
            {"seat": "Huey", "cards": ["10", "2"], "directive": {"kind": "double", "cards": ["7"]}}
        )
        assert hand.directive.cards == ["7"]

    def test_rejects_unknown_result(self):
        """Test that results are a closed set."""
        with pytest.raises(ValidationError):
            OutcomeSchema(result="LOSER", amount=5)

    def test_rejects_negative_amount(self):
        """Test that amounts are non-negative."""
        with pytest.raises(ValidationError):
            OutcomeSchema(result="WIN", amount=-1)


class TestShoeRecord:
    """Tests for game-plus-shoe records."""

    def test_json_round_trip(self, implicit_hit_game, hearts):
        """Test dumping and reloading a record."""
        record = ShoeRecord.build(implicit_hit_game, generate(implicit_hit_game, hearts))
        data = json.loads(record.model_dump_json())

        assert data["game"]["label"] == "T9"
        assert len(data["shoe"]) == 7
        assert data["shoe"][0] == {
            "rank": "3",
            "suit": "HEARTS",
            "seat": "You",
            "phase": "FIRST_ROUND",
            "sub_hand": None,
        }
        assert ShoeRecord.model_validate(data) == record
