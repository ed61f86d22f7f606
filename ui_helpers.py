"""
ui_helpers.py
=============
Stateless presentation helpers shared by the CLI and the Streamlit app.

These functions turn game values into display text but carry no game state
of their own; they receive all required data as arguments. Keeping them out
of cli.py and app.py means they can be imported and tested in isolation
without a terminal or a live Streamlit session.

Contains:
  - describe_room()    : room name and clue lines for a room entry
  - describe_moves()   : the available paths out of a room
  - room_card_html()   : the escaped HTML room card for the Streamlit app
  - format_clue_list() : the ascending list of collected clues
  - format_verdict()   : tally and verdict lines for an accusation
  - build_css()        : returns the dark-noir CSS string
"""

from __future__ import annotations

import html
from typing import Iterable, List

from models import VerdictResult
from room_map import Room, RoomMap


# ---------------------------------------------------------------------------
# Exploration text
# ---------------------------------------------------------------------------

def describe_room(room: Room) -> List[str]:
    """
    Lines shown every time the player enters `room`.

    Example:
        >>> describe_room(Room(id=0, name="Garden"))
        ['You are in: Garden', '  (There is no clue in this room)']
    """
    lines = [f"You are in: {room.name}"]
    if room.clue:
        lines.append(f'  >> You found a clue: "{room.clue}"')
    else:
        lines.append("  (There is no clue in this room)")
    return lines


def describe_moves(room_map: RoomMap, room: Room) -> List[str]:
    """
    Lines listing the paths out of `room`, followed by the end option.

    The tokens shown are the short forms accepted by navigator.parse_move().
    """
    lines = ["Available paths:"]
    if room.left is not None:
        lines.append(f" (l) Go to {room_map.name(room.left)} (left)")
    if room.right is not None:
        lines.append(f" (r) Go to {room_map.name(room.right)} (right)")
    lines.append(" (q) Stop exploring and go to the judgement")
    return lines


def room_card_html(room: Room) -> str:
    """
    HTML room card for the Streamlit main panel.

    Room names and clues can come from a user-supplied layout file, so both
    are escaped before they reach unsafe_allow_html.
    """
    if room.clue:
        clue_html = (
            f'<p class="clue-found">🔎 You found a clue: “'
            f'{html.escape(room.clue)}”</p>'
        )
    else:
        clue_html = '<p class="no-clue">There is no clue in this room.</p>'
    return (
        f'<div class="room-card"><h3>📍 {html.escape(room.name)}</h3>'
        f"{clue_html}</div>"
    )


# ---------------------------------------------------------------------------
# Judgement text
# ---------------------------------------------------------------------------

def format_clue_list(clues: Iterable[str]) -> List[str]:
    """One bullet per collected clue, or a placeholder when there are none."""
    lines = [f" - {clue}" for clue in clues]
    return lines or [" (no clues collected)"]


def format_verdict(result: VerdictResult) -> List[str]:
    """
    Tally and verdict lines for a rendered accusation.

    Example:
        >>> from models import Verdict
        >>> format_verdict(VerdictResult("Sam", 1, Verdict.NOT_GUILTY))[-1]
        '>>> VERDICT: Insufficient evidence. Sam cannot be found guilty.'
    """
    lines = [
        f"You accused: {result.accused}",
        f"Collected clues pointing to {result.accused}: {result.count}",
    ]
    if result.guilty:
        lines.append(
            f">>> VERDICT: Sufficient evidence! {result.accused} is found guilty."
        )
    else:
        lines.append(
            f">>> VERDICT: Insufficient evidence. "
            f"{result.accused} cannot be found guilty."
        )
    return lines


# ---------------------------------------------------------------------------
# Dark-noir CSS
# ---------------------------------------------------------------------------

def build_css() -> str:
    """
    Return the dark-noir CSS string injected into the Streamlit app.

    Returns:
        A raw CSS string (without <style> tags; the caller wraps it).
    """
    return """
    @import url('https://fonts.googleapis.com/css2?family=Special+Elite&family=Courier+Prime:wght@400;700&display=swap');

    /* ── Global dark background ── */
    html, body, .stApp, .main, .block-container {
        background: linear-gradient(180deg, #0a0a0a 0%, #141414 60%, #0d0d0d 100%) !important;
        color: #c0c0c0 !important;
    }

    /* ── Sidebar ── */
    [data-testid="stSidebar"],
    section[data-testid="stSidebar"] > div {
        background: #0d0d0d !important;
        border-right: 1px solid #222 !important;
    }
    [data-testid="stSidebar"] p,
    [data-testid="stSidebar"] span,
    [data-testid="stSidebar"] li,
    [data-testid="stSidebar"] h3 { color: #c0c0c0 !important; }
    .sidebar-header {
        color: #8B0000; font-family: 'Special Elite', cursive;
        letter-spacing: 2px; text-align: center; padding: 10px;
        border-bottom: 1px solid #333;
    }

    /* ── Typography ── */
    .main-header {
        text-align: center; color: #8B0000;
        font-family: 'Special Elite', cursive;
        text-shadow: 2px 2px 4px #000; letter-spacing: 3px;
    }
    .sub-header {
        text-align: center; color: #666;
        font-family: 'Courier Prime', monospace; font-style: italic;
    }

    /* ── Room card ── */
    .room-card {
        background: linear-gradient(145deg, #1a1a1a, #2d2d2d);
        padding: 25px; border-radius: 5px;
        border-left: 4px solid #8B0000; border-top: 1px solid #333;
        box-shadow: 0 4px 15px rgba(0,0,0,0.5);
        font-family: 'Courier Prime', monospace;
    }
    .room-card h3 { color: #8B0000; font-family: 'Special Elite', cursive; letter-spacing: 2px; }
    .clue-found { color: #d4c27a; font-family: 'Special Elite', cursive; }
    .no-clue { color: #666; font-style: italic; }

    /* ── Verdict display ── */
    .verdict-display {
        font-size: 40px; font-weight: bold; text-align: center;
        color: #8B0000; font-family: 'Special Elite', cursive;
        text-shadow: 2px 2px 4px #000;
    }

    /* ── Buttons ── */
    .stButton > button {
        background: linear-gradient(145deg, #2d2d2d, #1a1a1a);
        color: #c0c0c0; border: 1px solid #444;
        font-family: 'Courier Prime', monospace; transition: all 0.3s ease;
        min-height: 60px !important; white-space: normal !important;
    }
    .stButton > button:hover { border-color: #8B0000; color: #8B0000; box-shadow: 0 0 10px rgba(139,0,0,0.3); }
    .stButton > button[kind="primary"] {
        background: linear-gradient(145deg, #8B0000, #5a0000); color: #fff; border: none;
    }

    /* ── Inputs ── */
    .stTextInput input {
        background-color: #141414 !important; color: #c0c0c0 !important;
        border: 1px solid #333 !important; border-radius: 8px !important;
        font-family: 'Courier Prime', monospace;
    }

    /* ── Vignette overlay ── */
    .vignette {
        position: fixed; top: 0; left: 0; width: 100%; height: 100%;
        pointer-events: none;
        background: radial-gradient(ellipse at center, transparent 40%, rgba(0,0,0,0.6) 100%);
        z-index: 0;
    }
"""
