"""
room_map.py
===========
The mansion map: a fixed binary tree of rooms.

Rooms live in a flat arena and refer to their children by index, so no room
holds a reference to its parent and traversal is strictly top-down. The map
is built once from a validated MansionLayout and has no mutation API
afterwards; any number of readers may share it.

Public API summary:
    room_map = RoomMap.build(layout)
    room_map.root                 → int
    room_map.left(room_id)        → int | None
    room_map.right(room_id)       → int | None
    room_map.name(room_id)        → str
    room_map.clue(room_id)        → str | None
    room_map.room(room_id)        → Room
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from models import MansionLayout

logger = logging.getLogger("detective_quest.room_map")


@dataclass(frozen=True)
class Room:
    """
    A single room of the mansion.

    Attributes:
        id:    Arena index of the room.
        name:  Display name.
        clue:  Clue text, or None when the room holds nothing.
        left:  Arena index of the left child, if any.
        right: Arena index of the right child, if any.
    """

    id:    int
    name:  str
    clue:  Optional[str] = None
    left:  Optional[int] = None
    right: Optional[int] = None


class RoomMap:
    """Immutable binary tree of rooms addressed by arena index."""

    def __init__(self, rooms: Tuple[Room, ...], root: int) -> None:
        self._rooms = rooms
        self._root = root

    @classmethod
    def build(cls, layout: MansionLayout) -> "RoomMap":
        """
        Build the map from a validated layout.

        The root is placed at index 0 and the remaining rooms follow in
        breadth-first order, which keeps indices stable for a given layout.
        """
        specs = {spec.name: spec for spec in layout.rooms}

        order: List[str] = []
        queue = [layout.root]
        while queue:
            name = queue.pop(0)
            order.append(name)
            spec = specs[name]
            queue.extend(c for c in (spec.left, spec.right) if c is not None)

        index: Dict[str, int] = {name: i for i, name in enumerate(order)}
        rooms = tuple(
            Room(
                id=index[name],
                name=name,
                clue=specs[name].clue or None,
                left=index[specs[name].left] if specs[name].left else None,
                right=index[specs[name].right] if specs[name].right else None,
            )
            for name in order
        )

        logger.info(
            "Room map built — rooms=%d, root=%r, with_clues=%d",
            len(rooms),
            layout.root,
            sum(1 for r in rooms if r.clue),
        )
        return cls(rooms, 0)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def root(self) -> int:
        return self._root

    def room(self, room_id: int) -> Room:
        return self._rooms[room_id]

    def left(self, room_id: int) -> Optional[int]:
        return self._rooms[room_id].left

    def right(self, room_id: int) -> Optional[int]:
        return self._rooms[room_id].right

    def name(self, room_id: int) -> str:
        return self._rooms[room_id].name

    def clue(self, room_id: int) -> Optional[str]:
        return self._rooms[room_id].clue

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms)
