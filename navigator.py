"""
navigator.py
============
Traversal state machine over the room map.

The machine has a single state, AtRoom(current), and three move requests:
go-left, go-right and end-exploration. `step()` is the pure transition
function; `Navigator` wraps it, owns the session's ClueIndex and performs the
one side effect the machine has: indexing the clue of every room entered.

Nothing here blocks or reads input. An outer loop (cli.py, app.py) collects
move requests and feeds them in one at a time.

Public API summary:
    parse_move(token)                 → Move | None
    step(room_map, room_id, move)     → Transition
    nav = Navigator(room_map)
    nav.legal_moves()                 → [Move, ...]
    nav.request(move_or_token)        → MoveOutcome
    nav.clue_index                    → ClueIndex
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from clue_index import ClueIndex
from config import MOVE_TOKENS
from models import Move
from room_map import Room, RoomMap

logger = logging.getLogger("detective_quest.navigator")


def parse_move(token: Union[str, Move, None]) -> Optional[Move]:
    """
    Translate an operator token into a Move.

    Tokens are trimmed and matched case-insensitively against MOVE_TOKENS.
    Anything unrecognised (including None and non-string values) yields None.
    """
    if isinstance(token, Move):
        return token
    if not isinstance(token, str):
        return None
    name = MOVE_TOKENS.get(token.strip().lower())
    return Move(name) if name else None


# ---------------------------------------------------------------------------
# Pure transition function
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Transition:
    """
    Result of applying one move request to AtRoom(room_id).

    Attributes:
        room_id:  Room the machine is in after the request.
        accepted: False when the request was refused (state unchanged).
        entered:  True when a new AtRoom state was entered.
        ended:    True when the request was end-exploration.
        reason:   Human-readable refusal reason, empty when accepted.
    """

    room_id:  int
    accepted: bool
    entered:  bool = False
    ended:    bool = False
    reason:   str = ""


def step(room_map: RoomMap, room_id: int, move: Optional[Move]) -> Transition:
    """Apply `move` to AtRoom(room_id) without touching any other state."""
    if move is Move.END:
        return Transition(room_id, accepted=True, ended=True)

    if move is Move.LEFT:
        target = room_map.left(room_id)
    elif move is Move.RIGHT:
        target = room_map.right(room_id)
    else:
        return Transition(room_id, accepted=False, reason="unrecognised move")

    if target is None:
        return Transition(
            room_id,
            accepted=False,
            reason=f"there is no path to the {move.value} of {room_map.name(room_id)}",
        )
    return Transition(target, accepted=True, entered=True)


# ---------------------------------------------------------------------------
# Stateful navigator
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MoveOutcome:
    """
    What the operator should be told after a move request.

    Attributes:
        accepted: False when the request was refused.
        ended:    True once exploration is over.
        room:     The room the player is in after the request.
        new_clue: Clue text added to the index by this request, if any.
        reason:   Refusal reason, empty when accepted.
    """

    accepted: bool
    ended:    bool
    room:     Room
    new_clue: Optional[str] = None
    reason:   str = ""


class Navigator:
    """
    Drives AtRoom(current) transitions and collects clues into a ClueIndex.

    The navigator holds the only mutable handle to its clue index for the
    duration of a session. The room map is shared read-only.
    """

    def __init__(self, room_map: RoomMap, clue_index: Optional[ClueIndex] = None) -> None:
        self.room_map = room_map
        self.clue_index = clue_index if clue_index is not None else ClueIndex()
        self._current = room_map.root
        self._ended = False
        self._opening_clue = self._enter(self._current)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def current(self) -> int:
        return self._current

    @property
    def current_room(self) -> Room:
        return self.room_map.room(self._current)

    @property
    def ended(self) -> bool:
        return self._ended

    @property
    def opening_clue(self) -> Optional[str]:
        """Clue indexed when the starting room was entered, if any."""
        return self._opening_clue

    def legal_moves(self) -> List[Move]:
        """
        Moves the current room offers.

        A room without children offers only END; once exploration has ended
        nothing is legal.
        """
        if self._ended:
            return []
        moves = []
        if self.room_map.left(self._current) is not None:
            moves.append(Move.LEFT)
        if self.room_map.right(self._current) is not None:
            moves.append(Move.RIGHT)
        moves.append(Move.END)
        return moves

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def request(self, move: Union[Move, str, None]) -> MoveOutcome:
        """
        Apply one move request.

        Malformed or illegal requests are refused with a reason and leave the
        room and the clue index untouched.
        """
        if self._ended:
            return MoveOutcome(
                accepted=False,
                ended=True,
                room=self.current_room,
                reason="exploration is over",
            )

        parsed = parse_move(move)
        transition = step(self.room_map, self._current, parsed)

        if not transition.accepted:
            logger.info(
                "Move %r rejected in %s: %s",
                move,
                self.room_map.name(self._current),
                transition.reason,
            )
            return MoveOutcome(
                accepted=False,
                ended=False,
                room=self.current_room,
                reason=transition.reason,
            )

        if transition.ended:
            self._ended = True
            logger.info(
                "Exploration ended in %s with %d clue(s) indexed.",
                self.room_map.name(self._current),
                len(self.clue_index),
            )
            return MoveOutcome(accepted=True, ended=True, room=self.current_room)

        self._current = transition.room_id
        new_clue = self._enter(self._current)
        return MoveOutcome(
            accepted=True,
            ended=False,
            room=self.current_room,
            new_clue=new_clue,
        )

    def _enter(self, room_id: int) -> Optional[str]:
        """Index the clue of the room just entered; return it if it was new."""
        clue = self.room_map.clue(room_id)
        logger.debug("Entered %s (clue=%r)", self.room_map.name(room_id), clue)
        if clue and self.clue_index.insert(clue):
            logger.info("Clue collected in %s: %r", self.room_map.name(room_id), clue)
            return clue
        return None

    def restart(self) -> None:
        """Start a new session: empty the index and return to the root."""
        self.clue_index.clear()
        self._current = self.room_map.root
        self._ended = False
        self._opening_clue = self._enter(self._current)
