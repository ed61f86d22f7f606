"""
cli.py
======
Command-line interface for Detective Quest: The Final Judgement.

Provides the text-based game loop. All game logic is delegated to
DetectiveQuestGame; this module only handles I/O.

Usage:
    python cli.py
    python cli.py --layout my_case.yaml

Commands during exploration:
    l / left   : take the left path
    r / right  : take the right path
    q / end    : stop exploring and go to the judgement
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from case_data import TITLE
from config import GAME_CONFIG, LOG_CONFIG
from game_engine import DetectiveQuestGame
from layout_loader import load_layout
from ui_helpers import describe_moves, describe_room, format_clue_list, format_verdict

logger = logging.getLogger("detective_quest.cli")


def _read(prompt: str) -> Optional[str]:
    """input() that maps end-of-file to None."""
    try:
        return input(prompt)
    except EOFError:
        return None


def explore(game: DetectiveQuestGame) -> None:
    """Run the exploration loop until the player ends it or input runs out."""
    room = game.current_room()
    while True:
        print()
        print("\n".join(describe_room(room)))
        print()
        print("\n".join(describe_moves(game.room_map, room)))

        choice = _read("Choice: ")
        if choice is None:
            choice = "q"

        outcome = game.move(choice)
        if not outcome.accepted:
            print("Invalid option or missing path. Try again.")
            continue
        if outcome.ended:
            print("\nEnding the exploration. Taking the clues to the judgement...")
            return
        room = outcome.room


def judgement(game: DetectiveQuestGame) -> None:
    """List the collected clues, read the accusation and print the verdict."""
    print("\n" + "=" * 26)
    print("Collected clues (sorted):")
    print("\n".join(format_clue_list(game.collected_clues())))
    print("=" * 26)

    accused = _read(
        "\nName the suspect you want to accuse "
        f"(e.g. '{GAME_CONFIG.accusation_example}'): "
    )
    result = game.accuse((accused or "").strip())
    if result is None:
        print("No suspect named. Closing without a verdict.")
        return

    print()
    print("\n".join(format_verdict(result)))


def run_cli(layout_path: Optional[str] = None) -> int:
    """
    Main CLI game loop.

    Builds the game from the built-in mansion (or `layout_path`), runs the
    exploration, then the judgement.

    Returns:
        Process exit status: 0 on a completed session, 2 when the layout
        could not be loaded.
    """
    try:
        game = (
            DetectiveQuestGame(load_layout(layout_path))
            if layout_path
            else DetectiveQuestGame()
        )
    except (OSError, ValueError) as exc:
        logger.error("Could not load layout %r: %s", layout_path, exc)
        print(f"Error: could not load layout {layout_path!r}: {exc}")
        return 2

    print(f"=== {TITLE} ===")
    print(f"You begin your investigation in the {game.current_room().name}.")

    explore(game)
    judgement(game)

    print(f"\nThanks for playing {TITLE.title()}!")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="detective-quest",
        description="Explore the mansion, collect clues and accuse a suspect.",
    )
    parser.add_argument(
        "--layout",
        metavar="PATH",
        help="YAML or JSON mansion layout to play instead of the built-in one",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, configure logging and play one session."""
    load_dotenv()
    args = create_parser().parse_args(argv)

    # Configure logging at the entry point so all detective_quest.* loggers
    # share one handler. Defaults to WARNING so logs do not interleave with play.
    logging.basicConfig(
        level=LOG_CONFIG.level_for(LOG_CONFIG.cli_level),
        format=LOG_CONFIG.format,
        datefmt=LOG_CONFIG.datefmt,
    )
    return run_cli(args.layout)


if __name__ == "__main__":
    sys.exit(main())
