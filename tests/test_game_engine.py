"""
Tests for DetectiveQuestGame.

These tests verify the end-to-end session flow: exploration, clue
collection, accusation and reset.
"""

from case_data import BROKEN_GLASS, STOPPED_CLOCK, WET_FOOTPRINTS
from game_engine import DetectiveQuestGame
from models import Move, Verdict


# =============================================================================
# END-TO-END SCENARIOS
# =============================================================================

class TestScenarios:
    """The three-room scenarios: A (X1) -> left B (none), right C (X2)."""

    def test_left_then_end_is_insufficient(self, three_room_layout):
        game = DetectiveQuestGame(three_room_layout)
        game.move(Move.LEFT)
        game.move(Move.END)

        assert game.collected_clues() == ["X1"]
        result = game.accuse("Sam")
        assert result.count == 1
        assert result.verdict is Verdict.NOT_GUILTY

    def test_right_then_end_is_sufficient(self, three_room_layout):
        game = DetectiveQuestGame(three_room_layout)
        game.move(Move.RIGHT)
        game.move(Move.END)

        assert game.collected_clues() == ["X1", "X2"]
        result = game.accuse("Sam")
        assert result.count == 2
        assert result.verdict is Verdict.GUILTY

    def test_empty_accusation_renders_no_verdict(self, three_room_layout):
        game = DetectiveQuestGame(three_room_layout)
        game.move(Move.RIGHT)
        game.move(Move.END)

        assert game.accuse("") is None
        assert game.state.verdict is None
        assert game.state.accusation is None


# =============================================================================
# SESSION TESTS
# =============================================================================

class TestSession:
    """Counters, refusals and reset on the built-in mansion."""

    def test_starts_in_entrance_hall(self):
        game = DetectiveQuestGame()
        assert game.current_room().name == "Entrance Hall"
        assert game.collected_clues() == [WET_FOOTPRINTS]
        assert game.state.rooms_entered == ["Entrance Hall"]

    def test_tokens_are_accepted(self):
        game = DetectiveQuestGame()
        outcome = game.move("r")
        assert outcome.accepted
        assert outcome.new_clue == BROKEN_GLASS
        assert game.current_room().name == "Kitchen"

    def test_rejections_are_counted(self):
        game = DetectiveQuestGame()
        assert not game.move("sideways").accepted
        game.move("l")
        game.move("r")  # Garden, a leaf
        assert not game.move("l").accepted
        assert game.state.rejected_moves == 2
        assert game.state.moves_made == 2
        assert game.current_room().name == "Garden"

    def test_clues_sorted_and_distinct(self):
        game = DetectiveQuestGame()
        game.move("l")
        game.move("r")
        assert game.collected_clues() == sorted([WET_FOOTPRINTS, STOPPED_CLOCK])

    def test_helena_clues_sit_on_separate_branches(self):
        """The clock and the glass cannot both be reached in one walk down the tree."""
        game = DetectiveQuestGame()
        game.move("l")      # Living Room: clock
        game.end_exploration()
        assert game.accuse("Mrs. Helena").count == 1

        game.reset()
        game.move("r")      # Kitchen: glass
        game.end_exploration()
        assert game.accuse("Mrs. Helena").count == 1

    def test_no_moves_after_end(self):
        game = DetectiveQuestGame()
        game.end_exploration()
        assert game.exploration_over
        assert game.legal_moves() == []
        outcome = game.move("l")
        assert not outcome.accepted
        assert game.state.rejected_moves == 1

    def test_accuse_ends_exploration(self):
        game = DetectiveQuestGame()
        result = game.accuse("Mr. Almeida")
        assert game.exploration_over
        assert result.count == 1
        assert game.state.accusation == "Mr. Almeida"
        assert game.state.verdict == result

    def test_suspects(self):
        assert DetectiveQuestGame().suspects() == [
            "Mr. Almeida", "Mrs. Helena", "Prof. Braga", "Unknown Suspect",
        ]

    def test_reset(self):
        game = DetectiveQuestGame()
        game.move("r")
        game.move("l")
        game.accuse("Mr. Almeida")

        game.reset()
        assert not game.exploration_over
        assert game.current_room().name == "Entrance Hall"
        assert game.collected_clues() == [WET_FOOTPRINTS]
        assert game.state.moves_made == 0
        assert game.state.verdict is None
        assert game.state.rooms_entered == ["Entrance Hall"]

    def test_almeida_guilty_via_basement(self):
        """Hall footprints + basement safe both point to Mr. Almeida."""
        game = DetectiveQuestGame()
        game.move("r")
        game.move("l")
        result = game.accuse("Mr. Almeida")
        assert result.count == 2
        assert result.guilty
