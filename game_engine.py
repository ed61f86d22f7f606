"""
game_engine.py
==============
Core game engine for Detective Quest: The Final Judgement.

Contains:
  DetectiveQuestGame: the single orchestrating class that wires together
                       the room map, the navigator (and its clue index) and
                       the suspect directory, and exposes a clean API
                       consumed by both the Streamlit UI (app.py) and the
                       CLI runner (cli.py).

Public API summary:
    game = DetectiveQuestGame()
    game.current_room()           → Room
    game.legal_moves()            → [Move, ...]
    game.move(token_or_move)      → MoveOutcome
    game.end_exploration()        → MoveOutcome
    game.collected_clues()        → [str, ...]  (ascending)
    game.suspects()               → [str, ...]
    game.accuse(name)             → VerdictResult | None
    game.reset()                  → None

Logging
-------
Every significant event is emitted through the standard ``logging`` module
so that the host application (Streamlit, CLI, or any test harness) can route,
filter, and aggregate log output without changing this file.

Configure log level and destination once at your entry point, e.g.:

    import logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

The logger name for this module is ``detective_quest.game_engine``.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from case_data import MANSION_LAYOUT
from config import GAME_CONFIG
from models import MansionLayout, Move, SessionState, VerdictResult
from navigator import MoveOutcome, Navigator
from room_map import Room, RoomMap
from suspect_directory import SuspectDirectory
from verdict import judge

# ---------------------------------------------------------------------------
# Module-level logger
#
# Every module logs under "detective_quest.*" so callers can configure the
# parent logger once, or silence a single module.
# ---------------------------------------------------------------------------
logger = logging.getLogger("detective_quest.game_engine")


class DetectiveQuestGame:
    """
    Main game engine.

    Owns the immutable room map and suspect directory built at setup, plus
    the per-session Navigator and SessionState. Front ends interact with this
    class exclusively.

    Attributes:
        layout:    The validated MansionLayout the game was built from.
        room_map:  Immutable RoomMap.
        directory: Immutable SuspectDirectory (insert-once during setup only).
        navigator: Session navigator; owns the ClueIndex.
        state:     Current SessionState (counters, verdict).
    """

    def __init__(self, layout: Optional[MansionLayout] = None) -> None:
        self.layout = layout if layout is not None else MANSION_LAYOUT
        self.room_map = RoomMap.build(self.layout)
        self.directory = SuspectDirectory.from_associations(
            self.layout.associations, GAME_CONFIG.directory_buckets
        )
        self.state = SessionState()
        self.navigator = Navigator(self.room_map)
        self.state.enter(self.navigator.current_room.name)

        logger.info(
            "DetectiveQuestGame initialised — root=%r, rooms=%d, directory_entries=%d",
            self.layout.root,
            len(self.room_map),
            len(self.directory),
        )

    # ------------------------------------------------------------------
    # Exploration
    # ------------------------------------------------------------------

    def current_room(self) -> Room:
        """Return the Room the player is standing in."""
        return self.navigator.current_room

    def legal_moves(self) -> List[Move]:
        """Moves available from the current room (empty once exploration ended)."""
        return self.navigator.legal_moves()

    @property
    def exploration_over(self) -> bool:
        return self.state.exploration_over

    def move(self, request: Union[Move, str, None]) -> MoveOutcome:
        """
        Forward one move request to the navigator and update the counters.

        Args:
            request: A Move, or a raw operator token such as "l" or "right".

        Returns:
            The MoveOutcome describing what happened; refusals are ordinary
            outcomes, never exceptions.
        """
        outcome = self.navigator.request(request)

        if not outcome.accepted:
            self.state.rejected_moves += 1
            return outcome

        if outcome.ended:
            self.state.exploration_over = True
            logger.info(
                "Exploration over — moves=%d, rooms_entered=%d, clues=%d",
                self.state.moves_made,
                len(self.state.rooms_entered),
                len(self.navigator.clue_index),
            )
        else:
            self.state.moves_made += 1
            self.state.enter(outcome.room.name)
        return outcome

    def end_exploration(self) -> MoveOutcome:
        """Shortcut for the end-exploration move."""
        return self.move(Move.END)

    def collected_clues(self) -> List[str]:
        """Collected clue texts in ascending order."""
        return list(self.navigator.clue_index.in_order())

    # ------------------------------------------------------------------
    # Judgement
    # ------------------------------------------------------------------

    def suspects(self) -> List[str]:
        """Names that appear in the suspect directory, sorted."""
        return self.directory.suspects()

    def accuse(self, accused: str) -> Optional[VerdictResult]:
        """
        Accuse a suspect and render the verdict.

        Exploration is ended first if it is still running. The name is
        matched exactly against directory values; any trimming is the
        caller's business. A blank name renders no verdict.

        Returns:
            The VerdictResult, or None when the accusation was blank.
        """
        if not self.state.exploration_over:
            self.end_exploration()

        result = judge(self.navigator.clue_index, self.directory, accused)
        if result is None:
            return None

        self.state.accusation = accused
        self.state.verdict = result
        logger.info(
            "Accusation complete — accused=%r, count=%d, guilty=%s",
            accused,
            result.count,
            result.guilty,
        )
        return result

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """
        Reset the game for a new playthrough.

        Clears SessionState and the clue index and returns the player to the
        root room. The map and the directory are reused as-is.
        """
        logger.info("Game reset requested — clearing session state.")
        self.state.reset()
        self.navigator.restart()
        self.state.enter(self.navigator.current_room.name)
        logger.info("Game reset complete.")
