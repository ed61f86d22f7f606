"""
config.py
=========
Central configuration module for Detective Quest: The Final Judgement.

All tunable constants, game-balance parameters and accepted operator tokens
live here so they can be adjusted without touching business logic.

Usage:
    from config import GAME_CONFIG, LOG_CONFIG, MOVE_TOKENS
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict


# ---------------------------------------------------------------------------
# Game-balance parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Top-level game-balance settings.

    Attributes:
        verdict_threshold:   Minimum number of distinct collected clues that
                             must implicate the accused for a guilty verdict.
        directory_buckets:   Bucket count of the clue -> suspect hash table.
                             A prime keeps the djb2 remainders well spread.
        accusation_example:  Example name shown in the accusation prompt.
    """
    verdict_threshold: int = 2
    directory_buckets: int = 101

    accusation_example: str = "Mrs. Helena"


# ---------------------------------------------------------------------------
# Logging parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LogConfig:
    """
    Logging defaults applied by the entry points (cli.py, app.py).

    Attributes:
        env_var:       Environment variable that overrides the level.
        cli_level:     Default level for the terminal game. Kept at WARNING
                       so log lines do not interleave with play.
        app_level:     Default level for the Streamlit app.
        format:        Record format passed to logging.basicConfig.
        datefmt:       Timestamp format passed to logging.basicConfig.
    """
    env_var:   str = "DETECTIVE_QUEST_LOG_LEVEL"
    cli_level: str = "WARNING"
    app_level: str = "INFO"
    format:    str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    datefmt:   str = "%Y-%m-%d %H:%M:%S"

    def level_for(self, default: str) -> str:
        """
        Return the level named in the environment, or `default`.

        Names that logging does not know (e.g. "VERBOSE") fall back to
        `default` instead of failing basicConfig at startup.
        """
        level = os.environ.get(self.env_var, "").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            return default
        return level


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

GAME_CONFIG = GameConfig()
LOG_CONFIG  = LogConfig()


# ---------------------------------------------------------------------------
# Operator move tokens
# ---------------------------------------------------------------------------

MOVE_TOKENS: Dict[str, str] = {
    # go-left
    "l": "left", "left": "left", "e": "left",
    # go-right
    "r": "right", "right": "right", "d": "right",
    # end-exploration
    "q": "end", "quit": "end", "end": "end", "s": "end", "stop": "end",
}
"""
Accepted operator tokens, matched case-insensitively after trimming.

Values are the names of models.Move members. The single letters e / d / s
are the esquerda / direita / sair keys players of the Portuguese edition
are used to.
"""
