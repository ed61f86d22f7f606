"""
suspect_directory.py
====================
Fixed mapping from clue text to the suspect that clue implicates.

Implemented as a hash table with separate chaining: the djb2 string hash
picks a bucket and each bucket is a short list of (clue, suspect) pairs
scanned by exact text equality. The order of entries inside a bucket is an
implementation detail and nothing may depend on it.

Insertion is insert-once: the first suspect registered for a clue is
authoritative and later attempts to rebind that clue are dropped.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from config import GAME_CONFIG
from models import ClueAssociation

logger = logging.getLogger("detective_quest.suspect_directory")


def djb2(text: str) -> int:
    """
    Return the djb2 hash of `text` over its UTF-8 bytes, as a 64-bit value.

    hash = hash * 33 + byte, starting from 5381.
    """
    value = 5381
    for byte in text.encode("utf-8"):
        value = ((value << 5) + value + byte) & 0xFFFFFFFFFFFFFFFF
    return value


class SuspectDirectory:
    """
    Chained hash table of clue -> suspect associations.

    Attributes:
        bucket_count: Number of buckets; defaults to GameConfig.directory_buckets.
    """

    def __init__(self, bucket_count: int = GAME_CONFIG.directory_buckets) -> None:
        if bucket_count < 1:
            raise ValueError("bucket_count must be at least 1")
        self.bucket_count = bucket_count
        self._buckets: List[List[Tuple[str, str]]] = [
            [] for _ in range(bucket_count)
        ]
        self._size = 0

    @classmethod
    def from_associations(
        cls,
        associations: Iterable[ClueAssociation],
        bucket_count: int = GAME_CONFIG.directory_buckets,
    ) -> "SuspectDirectory":
        """Build a directory from setup associations, first writer winning."""
        directory = cls(bucket_count)
        for assoc in associations:
            directory.insert(assoc.clue, assoc.suspect)
        logger.info(
            "Suspect directory built — entries=%d, suspects=%d",
            len(directory),
            len(directory.suspects()),
        )
        return directory

    def _bucket_for(self, clue: str) -> List[Tuple[str, str]]:
        return self._buckets[djb2(clue) % self.bucket_count]

    def insert(self, clue: str, suspect: str) -> bool:
        """
        Register `clue` as implicating `suspect`.

        Returns:
            True if the association was stored, False if the clue already had
            an entry (the existing suspect is kept).
        """
        bucket = self._bucket_for(clue)
        for key, existing in bucket:
            if key == clue:
                if existing != suspect:
                    logger.warning(
                        "Ignoring rebinding of clue %r to %r; already bound to %r.",
                        clue,
                        suspect,
                        existing,
                    )
                return False
        bucket.append((clue, suspect))
        self._size += 1
        logger.debug(
            "Directory entry added — bucket=%d, clue=%r, suspect=%r",
            djb2(clue) % self.bucket_count,
            clue,
            suspect,
        )
        return True

    def lookup(self, clue: str) -> Optional[str]:
        """Return the suspect implicated by `clue`, or None if unregistered."""
        for key, suspect in self._bucket_for(clue):
            if key == clue:
                return suspect
        return None

    def suspects(self) -> List[str]:
        """Distinct suspect names in the directory, sorted."""
        return sorted({s for bucket in self._buckets for _, s in bucket})

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.lookup(clue) is not None

    def __len__(self) -> int:
        return self._size
