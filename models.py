"""
models.py
=========
Shared data models for Detective Quest: The Final Judgement.

Contains:
  - RoomSpec / ClueAssociation / MansionLayout : Pydantic schemas for the
                      static setup configuration (map shape and clue ->
                      suspect associations).
  - Move            : The three legal move requests.
  - Verdict         : Outcome classification of an accusation.
  - VerdictResult   : Dataclass returned by the verdict engine.
  - SessionState    : Mutable dataclass tracking per-session player progress.

Keeping these in one module guarantees a single source of truth for data
shapes used across room_map.py, navigator.py, verdict.py, game_engine.py and
the two front ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Pydantic setup schema
# ---------------------------------------------------------------------------

class RoomSpec(BaseModel):
    """
    One room of the mansion as written in the setup configuration.

    Fields:
        name:  Unique display name, also used as the room's key.
        clue:  Clue text found in the room. An empty or missing value means
               the room holds no clue.
        left:  Name of the room reached by going left, if any.
        right: Name of the room reached by going right, if any.
    """

    name: str
    clue: Optional[str] = None
    left: Optional[str] = None
    right: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("room name must not be blank")
        return value

    @field_validator("clue")
    @classmethod
    def _empty_clue_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class ClueAssociation(BaseModel):
    """A single clue -> suspect link registered in the Suspect Directory."""

    clue: str
    suspect: str


class MansionLayout(BaseModel):
    """
    Validated setup configuration: the room tree plus the clue associations.

    The validator guarantees the rooms form an out-tree rooted at `root`:
    names are unique, every child reference resolves, no room has two
    parents, the root has none, and every room is reachable from the root.
    Duplicate association keys are accepted here; the directory keeps the
    first one.
    """

    root: str
    rooms: List[RoomSpec]
    associations: List[ClueAssociation] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_tree_shape(self) -> "MansionLayout":
        by_name: Dict[str, RoomSpec] = {}
        for room in self.rooms:
            if room.name in by_name:
                raise ValueError(f"duplicate room name: {room.name!r}")
            by_name[room.name] = room

        if self.root not in by_name:
            raise ValueError(f"root room {self.root!r} is not defined")

        parent_of: Dict[str, str] = {}
        for room in self.rooms:
            for child in (room.left, room.right):
                if child is None:
                    continue
                if child not in by_name:
                    raise ValueError(
                        f"room {room.name!r} links to unknown room {child!r}"
                    )
                if child in parent_of:
                    raise ValueError(
                        f"room {child!r} has two parents: "
                        f"{parent_of[child]!r} and {room.name!r}"
                    )
                parent_of[child] = room.name

        if self.root in parent_of:
            raise ValueError(f"root room {self.root!r} must not have a parent")

        reached = set()
        pending = [self.root]
        while pending:
            name = pending.pop()
            reached.add(name)
            room = by_name[name]
            pending.extend(c for c in (room.left, room.right) if c is not None)

        unreachable = sorted(set(by_name) - reached)
        if unreachable:
            raise ValueError(f"rooms not reachable from the root: {unreachable}")
        return self


# ---------------------------------------------------------------------------
# Moves and verdicts
# ---------------------------------------------------------------------------

class Move(Enum):
    """Move requests accepted by the navigator."""

    LEFT = "left"
    RIGHT = "right"
    END = "end"


class Verdict(Enum):
    """Classification of an accusation's tally."""

    GUILTY = "guilty"
    NOT_GUILTY = "not guilty"


@dataclass(frozen=True)
class VerdictResult:
    """
    Outcome of judging one accusation.

    Attributes:
        accused:  The accused name exactly as handed to the engine.
        count:    Distinct collected clues whose directory entry names the accused.
        verdict:  GUILTY when count reaches the threshold, otherwise NOT_GUILTY.
    """

    accused: str
    count:   int
    verdict: Verdict

    @property
    def guilty(self) -> bool:
        return self.verdict is Verdict.GUILTY


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------

@dataclass
class SessionState:
    """
    Mutable snapshot of the player's progress through one investigation.

    Owned by DetectiveQuestGame and mutated in place as moves arrive.
    Front ends read it for status displays.

    Attributes:
        moves_made:       Accepted left/right moves.
        rejected_moves:   Move requests that were refused.
        rooms_entered:    Room names in the order they were entered,
                          including the starting room and revisits.
        exploration_over: True once the end move has been accepted.
        accusation:       The last non-blank accusation, if any.
        verdict:          The verdict rendered for that accusation.
    """

    moves_made:       int  = 0
    rejected_moves:   int  = 0
    rooms_entered:    List[str] = field(default_factory=list)
    exploration_over: bool = False
    accusation:       Optional[str] = None
    verdict:          Optional[VerdictResult] = None

    def enter(self, room_name: str) -> None:
        """Record that the player entered `room_name`."""
        self.rooms_entered.append(room_name)

    def reset(self) -> None:
        """Reset all mutable fields to their initial values for a new game."""
        self.moves_made       = 0
        self.rejected_moves   = 0
        self.rooms_entered    = []
        self.exploration_over = False
        self.accusation       = None
        self.verdict          = None
