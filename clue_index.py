"""
clue_index.py
=============
Ordered, duplicate-free index of the clues the player has collected.

The index is a binary search tree keyed by plain lexicographic comparison of
the clue text. Nodes live in an arena list and point at their children by
index; nothing points back at a parent. Inserting text that is already
present leaves the tree untouched, so callers can offer the same clue as
often as they like.

The tree is not balanced. The number of clues in a mansion is tiny and the
worst case (a chain of depth n) only costs n comparisons.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

logger = logging.getLogger("detective_quest.clue_index")


@dataclass
class _Node:
    text:  str
    left:  Optional[int] = None
    right: Optional[int] = None


class ClueIndex:
    """
    Binary search tree of distinct clue texts.

    Empty strings are refused: an empty clue means "no clue", never a value.
    """

    def __init__(self, clues: Iterable[str] = ()) -> None:
        self._nodes: List[_Node] = []
        for text in clues:
            self.insert(text)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, text: str) -> bool:
        """
        Add `text` to the index.

        Returns:
            True if a new entry was created, False if the text was empty or
            already indexed.
        """
        if not text:
            return False

        if not self._nodes:
            self._nodes.append(_Node(text))
            logger.debug("Clue indexed at depth 0: %r", text)
            return True

        current = 0
        depth = 0
        while True:
            node = self._nodes[current]
            depth += 1
            if text == node.text:
                logger.debug("Clue already indexed: %r", text)
                return False
            if text < node.text:
                if node.left is None:
                    node.left = self._append(text)
                    break
                current = node.left
            else:
                if node.right is None:
                    node.right = self._append(text)
                    break
                current = node.right

        logger.debug("Clue indexed at depth %d: %r", depth, text)
        return True

    def _append(self, text: str) -> int:
        self._nodes.append(_Node(text))
        return len(self._nodes) - 1

    def clear(self) -> None:
        """Drop every entry, e.g. when a new session begins."""
        self._nodes = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, text: str) -> bool:
        current = 0 if self._nodes else None
        while current is not None:
            node = self._nodes[current]
            if text == node.text:
                return True
            current = node.left if text < node.text else node.right
        return False

    def in_order(self) -> Iterator[str]:
        """
        Yield the clue texts in ascending order.

        Each call returns a fresh generator, so the sequence can be walked as
        many times as needed. The walk is iterative and does not recurse.
        """
        stack: List[int] = []
        current = 0 if self._nodes else None
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = self._nodes[current].left
            node = self._nodes[stack.pop()]
            yield node.text
            current = node.right

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.contains(text)

    def __iter__(self) -> Iterator[str]:
        return self.in_order()

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __repr__(self) -> str:
        return f"ClueIndex({list(self.in_order())!r})"
