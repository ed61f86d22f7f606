"""
verdict.py
==========
Deterministic, side-effect-free verdict logic.

Joins the collected clues with the suspect directory: every indexed clue is
resolved to its suspect and counted when that suspect is the accused. The
threshold lives in GameConfig so game balance can change without touching
this module.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from config import GAME_CONFIG
from models import Verdict, VerdictResult
from suspect_directory import SuspectDirectory

logger = logging.getLogger("detective_quest.verdict")


def tally(clues: Iterable[str], directory: SuspectDirectory, accused: str) -> int:
    """
    Count the clues whose directory entry names `accused`.

    Matching is exact string equality: case-sensitive, no trimming. Clues
    with no directory entry simply do not count. The result does not depend
    on the order in which `clues` is walked.

    Args:
        clues:     Distinct collected clue texts (normally a ClueIndex).
        directory: The clue -> suspect directory.
        accused:   Name the player accused.

    Returns:
        Number of clues implicating the accused.

    Examples:
        >>> d = SuspectDirectory()
        >>> d.insert("X1", "Sam")
        True
        >>> d.insert("X2", "Sam")
        True
        >>> tally(["X1", "X2"], d, "Sam")
        2
        >>> tally(["X1", "X3"], d, "sam")
        0
    """
    return sum(1 for clue in clues if directory.lookup(clue) == accused)


def classify(count: int, threshold: int = GAME_CONFIG.verdict_threshold) -> Verdict:
    """GUILTY when `count` reaches `threshold`, NOT_GUILTY otherwise."""
    return Verdict.GUILTY if count >= threshold else Verdict.NOT_GUILTY


def judge(
    clues: Iterable[str],
    directory: SuspectDirectory,
    accused: str,
) -> Optional[VerdictResult]:
    """
    Render a verdict on `accused`.

    A blank accusation (empty or whitespace only) renders no verdict and
    returns None; the tally is not computed at all.

    Returns:
        VerdictResult with the tally and its classification, or None.
    """
    if not accused or not accused.strip():
        logger.info("Blank accusation — no verdict rendered.")
        return None

    count = tally(clues, directory, accused)
    verdict = classify(count)
    logger.info(
        "Verdict — accused=%r, implicating_clues=%d, verdict=%s",
        accused,
        count,
        verdict.value,
    )
    return VerdictResult(accused=accused, count=count, verdict=verdict)
