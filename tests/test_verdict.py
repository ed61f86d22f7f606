"""
Tests for the Verdict Engine.

These tests verify that:
1. The tally counts only clues resolving to the accused
2. The tally does not depend on traversal order
3. The threshold classification and the blank-accusation rule hold
"""

import itertools

import pytest

from clue_index import ClueIndex
from config import GAME_CONFIG
from models import Verdict
from suspect_directory import SuspectDirectory
from verdict import classify, judge, tally


@pytest.fixture
def directory():
    d = SuspectDirectory()
    d.insert("footprints", "Mr. Almeida")
    d.insert("clock", "Mrs. Helena")
    d.insert("glass", "Mrs. Helena")
    d.insert("safe", "Mr. Almeida")
    return d


class TestTally:
    """Counting implicating clues."""

    def test_counts_matching_suspect(self, directory):
        clues = ClueIndex(["footprints", "clock", "glass"])
        assert tally(clues, directory, "Mrs. Helena") == 2
        assert tally(clues, directory, "Mr. Almeida") == 1

    def test_unregistered_clue_does_not_count(self, directory):
        clues = ClueIndex(["clock", "a clue nobody registered"])
        assert tally(clues, directory, "Mrs. Helena") == 1

    def test_match_is_exact(self, directory):
        clues = ClueIndex(["clock", "glass"])
        assert tally(clues, directory, "mrs. helena") == 0
        assert tally(clues, directory, " Mrs. Helena") == 0

    def test_unknown_suspect(self, directory):
        assert tally(ClueIndex(["clock"]), directory, "Nobody") == 0

    def test_order_independent(self, directory):
        clues = ["footprints", "clock", "glass", "safe", "stray"]
        counts = {
            tally(perm, directory, "Mrs. Helena")
            for perm in itertools.permutations(clues)
        }
        assert counts == {2}


class TestClassify:
    """Threshold classification."""

    @pytest.mark.parametrize("count,expected", [
        (0, Verdict.NOT_GUILTY),
        (1, Verdict.NOT_GUILTY),
        (2, Verdict.GUILTY),
        (5, Verdict.GUILTY),
    ])
    def test_threshold(self, count, expected):
        assert classify(count) is expected

    def test_default_threshold_is_two(self):
        assert GAME_CONFIG.verdict_threshold == 2


class TestJudge:
    """Full accusation handling."""

    def test_guilty(self, directory):
        result = judge(ClueIndex(["clock", "glass"]), directory, "Mrs. Helena")
        assert result.count == 2
        assert result.verdict is Verdict.GUILTY
        assert result.guilty

    def test_not_guilty(self, directory):
        result = judge(ClueIndex(["clock"]), directory, "Mrs. Helena")
        assert result.count == 1
        assert not result.guilty

    @pytest.mark.parametrize("accused", ["", "   "])
    def test_blank_accusation_renders_nothing(self, directory, accused):
        assert judge(ClueIndex(["clock", "glass"]), directory, accused) is None

    def test_empty_index(self, directory):
        result = judge(ClueIndex(), directory, "Mrs. Helena")
        assert result.count == 0
        assert result.verdict is Verdict.NOT_GUILTY


class TestScenarioDirectory:
    """The three-room directory: X1 and X2 both point at Sam."""

    def test_both_clues_convict(self, sam_directory):
        assert judge(ClueIndex(["X2", "X1"]), sam_directory, "Sam").guilty

    def test_one_clue_does_not(self, sam_directory):
        assert tally(ClueIndex(["X1"]), sam_directory, "Sam") == 1
