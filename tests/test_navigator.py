"""
Tests for the Navigator state machine.

These tests verify that:
1. Legal moves follow the children of the current room
2. Illegal or malformed requests change nothing
3. Clues are indexed on every entry, idempotently
"""

import pytest

from case_data import MANSION_LAYOUT
from models import MansionLayout, Move
from navigator import Navigator, parse_move, step
from room_map import RoomMap


class TestParseMove:
    """Operator token parsing."""

    @pytest.mark.parametrize("token,expected", [
        ("l", Move.LEFT), ("LEFT", Move.LEFT), (" e ", Move.LEFT),
        ("r", Move.RIGHT), ("Right", Move.RIGHT), ("d", Move.RIGHT),
        ("q", Move.END), ("end", Move.END), ("s", Move.END),
    ])
    def test_known_tokens(self, token, expected):
        assert parse_move(token) is expected

    @pytest.mark.parametrize("token", ["", "x", "go left", "ll", None, 3])
    def test_unknown_tokens(self, token):
        assert parse_move(token) is None

    def test_move_passthrough(self):
        assert parse_move(Move.RIGHT) is Move.RIGHT


class TestStep:
    """The pure transition function."""

    def test_left_enters_child(self, three_room_map):
        t = step(three_room_map, three_room_map.root, Move.LEFT)
        assert t.accepted and t.entered and not t.ended
        assert three_room_map.name(t.room_id) == "B"

    def test_missing_child_is_refused(self, three_room_map):
        leaf = three_room_map.left(three_room_map.root)
        t = step(three_room_map, leaf, Move.RIGHT)
        assert not t.accepted
        assert t.room_id == leaf
        assert "no path" in t.reason

    def test_end(self, three_room_map):
        t = step(three_room_map, three_room_map.root, Move.END)
        assert t.accepted and t.ended
        assert t.room_id == three_room_map.root

    def test_none_is_refused(self, three_room_map):
        t = step(three_room_map, three_room_map.root, None)
        assert not t.accepted
        assert t.reason == "unrecognised move"


class TestNavigator:
    """Stateful traversal with clue collection."""

    def test_starts_at_root_and_indexes_its_clue(self, three_room_map):
        nav = Navigator(three_room_map)
        assert nav.current_room.name == "A"
        assert list(nav.clue_index) == ["X1"]
        assert nav.opening_clue == "X1"

    def test_legal_moves(self, three_room_map):
        nav = Navigator(three_room_map)
        assert nav.legal_moves() == [Move.LEFT, Move.RIGHT, Move.END]
        nav.request(Move.LEFT)
        assert nav.legal_moves() == [Move.END]

    def test_leaf_does_not_auto_terminate(self, three_room_map):
        nav = Navigator(three_room_map)
        outcome = nav.request("l")
        assert outcome.accepted and not outcome.ended
        assert not nav.ended

    def test_room_without_clue_adds_nothing(self, three_room_map):
        nav = Navigator(three_room_map)
        outcome = nav.request(Move.LEFT)
        assert outcome.new_clue is None
        assert list(nav.clue_index) == ["X1"]

    def test_new_clue_is_reported(self, three_room_map):
        nav = Navigator(three_room_map)
        outcome = nav.request(Move.RIGHT)
        assert outcome.new_clue == "X2"
        assert list(nav.clue_index) == ["X1", "X2"]

    @pytest.mark.parametrize("bad", ["", "zzz", None, 42, "left please"])
    def test_malformed_request_changes_nothing(self, three_room_map, bad):
        nav = Navigator(three_room_map)
        before = (nav.current, list(nav.clue_index))
        outcome = nav.request(bad)
        assert not outcome.accepted
        assert (nav.current, list(nav.clue_index)) == before

    def test_illegal_move_keeps_state(self, three_room_map):
        nav = Navigator(three_room_map)
        nav.request(Move.RIGHT)
        outcome = nav.request(Move.LEFT)
        assert not outcome.accepted
        assert outcome.room.name == "C"
        assert nav.current_room.name == "C"

    def test_end_is_terminal(self, three_room_map):
        nav = Navigator(three_room_map)
        assert nav.request(Move.END).ended
        assert nav.ended
        assert nav.legal_moves() == []

        outcome = nav.request(Move.LEFT)
        assert not outcome.accepted
        assert outcome.reason == "exploration is over"
        assert nav.current_room.name == "A"

    def test_restart(self, three_room_map):
        nav = Navigator(three_room_map)
        nav.request(Move.RIGHT)
        nav.request(Move.END)
        nav.restart()
        assert not nav.ended
        assert nav.current_room.name == "A"
        assert list(nav.clue_index) == ["X1"]


class TestIdempotentRevisit:
    """Entering the same clue room twice equals entering it once."""

    def test_reentering_same_clue_text(self):
        """Two rooms sharing a clue text contribute a single entry."""
        layout = MansionLayout.model_validate({
            "root": "Hall",
            "rooms": [
                {"name": "Hall", "clue": "ash", "left": "Study"},
                {"name": "Study", "clue": "ash", "left": "Attic"},
                {"name": "Attic", "clue": "ash"},
            ],
        })
        nav = Navigator(RoomMap.build(layout))
        first = list(nav.clue_index)
        nav.request(Move.LEFT)
        nav.request(Move.LEFT)
        assert list(nav.clue_index) == first == ["ash"]

    def test_restart_revisit_matches_single_visit(self):
        room_map = RoomMap.build(MANSION_LAYOUT)
        once = Navigator(room_map)
        once.request(Move.LEFT)

        twice = Navigator(room_map, once.clue_index)
        twice.request(Move.LEFT)
        assert list(twice.clue_index) == list(once.clue_index)
        assert len(twice.clue_index) == 2
