"""
app.py
======
Streamlit web UI for Detective Quest: The Final Judgement.

Responsibilities:
  - Configure and render the Streamlit page (layout, dark-noir theme).
  - Manage session state initialisation and reset.
  - Render sidebar components (collected clues, exploration status).
  - Render main-panel components (room card, path buttons, accusation form,
    verdict screen).

This file contains only UI logic. All game logic lives in game_engine.py,
all narrative data in case_data.py, and all shared text helpers in
ui_helpers.py.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import logging

import streamlit as st
from dotenv import load_dotenv

# Load .env before any game code runs so DETECTIVE_QUEST_LOG_LEVEL is visible.
load_dotenv()

from config import GAME_CONFIG, LOG_CONFIG

# ---------------------------------------------------------------------------
# Logging configuration
#
# basicConfig is called here, the Streamlit entry point, so it runs exactly
# once per process regardless of how many times Streamlit reruns the script.
# All modules under "detective_quest.*" emit to this handler.
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_CONFIG.level_for(LOG_CONFIG.app_level),
    format=LOG_CONFIG.format,
    datefmt=LOG_CONFIG.datefmt,
)
logger = logging.getLogger("detective_quest.app")

from case_data import TITLE
from game_engine import DetectiveQuestGame
from models import Move
from ui_helpers import build_css, format_clue_list, format_verdict, room_card_html


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(
    page_title="Detective Quest",
    page_icon="🔍",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(
    f"<style>{build_css()}</style><div class='vignette'></div>",
    unsafe_allow_html=True,
)


# ============================================================
# SESSION STATE
# ============================================================

def init_session_state() -> None:
    """
    Initialise all Streamlit session state variables on first run.

    Uses a defaults dict so new keys can be added in one place without
    multiple scattered `if key not in st.session_state` guards.
    """
    defaults: dict = {
        "game":       DetectiveQuestGame(),
        "journal":    [],      # "Room: clue" lines, one per room entry
        "last_error": None,    # reason of the last refused move
        "game_over":  False,
        "verdict":    None,
        "no_verdict": False,   # True when a blank accusation was submitted
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value
    if not st.session_state.journal:
        _log_entry(st.session_state.game.current_room())


def reset_game() -> None:
    """Reset the game and all per-investigation UI state."""
    st.session_state.game.reset()
    st.session_state.journal    = []
    st.session_state.last_error = None
    st.session_state.game_over  = False
    st.session_state.verdict    = None
    st.session_state.no_verdict = False
    _log_entry(st.session_state.game.current_room())
    logger.info("UI session reset.")


def _log_entry(room) -> None:
    clue = room.clue or "no clue"
    st.session_state.journal.append(f"{room.name}: {clue}")


# ============================================================
# SIDEBAR
# ============================================================

def render_sidebar() -> None:
    """Render the collected clues and the exploration status."""
    game  = st.session_state.game
    state = game.state

    st.sidebar.markdown(
        '<div class="sidebar-header">🗂️ COLLECTED CLUES</div>',
        unsafe_allow_html=True,
    )
    st.sidebar.markdown("\n".join(format_clue_list(game.collected_clues())))

    st.sidebar.markdown("---")
    st.sidebar.markdown(f"**Moves made:** {state.moves_made}")
    st.sidebar.markdown(f"**Rooms entered:** {len(state.rooms_entered)}")
    st.sidebar.markdown(f"**Refused moves:** {state.rejected_moves}")

    with st.sidebar.expander("🧭 Route so far", expanded=False):
        for line in st.session_state.journal:
            st.markdown(f"- {line}")

    st.sidebar.markdown("---")
    if st.sidebar.button("🔄 NEW CASE", use_container_width=True):
        reset_game()
        st.rerun()


# ============================================================
# EXPLORATION
# ============================================================

def render_room() -> None:
    """Render the current room card and one button per legal move."""
    game = st.session_state.game
    room = game.current_room()

    st.markdown(room_card_html(room), unsafe_allow_html=True)
    st.markdown("")

    if st.session_state.last_error:
        st.warning(f"Move refused: {st.session_state.last_error}")

    legal = game.legal_moves()
    col1, col2, col3 = st.columns(3)
    with col1:
        label = (
            f"⬅️ {game.room_map.name(room.left)}"
            if room.left is not None
            else "⬅️ No path"
        )
        if st.button(label, key="go_left", use_container_width=True,
                     disabled=Move.LEFT not in legal):
            _submit_move(Move.LEFT)
    with col2:
        if st.button("⚖️ Go to the judgement", key="go_end", type="primary",
                     use_container_width=True):
            _submit_move(Move.END)
    with col3:
        label = (
            f"{game.room_map.name(room.right)} ➡️"
            if room.right is not None
            else "No path ➡️"
        )
        if st.button(label, key="go_right", use_container_width=True,
                     disabled=Move.RIGHT not in legal):
            _submit_move(Move.RIGHT)


def _submit_move(move: Move) -> None:
    """Apply a move and rerun so the page reflects the new room."""
    outcome = st.session_state.game.move(move)
    st.session_state.last_error = None if outcome.accepted else outcome.reason
    if outcome.accepted and not outcome.ended:
        _log_entry(outcome.room)
    st.rerun()


# ============================================================
# JUDGEMENT
# ============================================================

def render_accusation_form() -> None:
    """
    Render the accusation form once exploration has ended.

    Known suspects are offered in a selectbox; the free-text field, when
    filled, takes precedence and is matched exactly.
    """
    game = st.session_state.game

    st.markdown("""
    <div style="text-align: center; padding: 20px;">
        <span style="font-family: 'Special Elite', cursive; font-size: 28px; color: #8B0000;">
            ⚖️ THE FINAL JUDGEMENT
        </span>
    </div>
    """, unsafe_allow_html=True)

    st.markdown("**Collected clues (sorted):**")
    st.markdown("\n".join(format_clue_list(game.collected_clues())))

    options = [""] + game.suspects()
    chosen = st.selectbox("Who do you accuse?", options=options)
    typed  = st.text_input(
        "…or type a name exactly:",
        placeholder=f"e.g. {GAME_CONFIG.accusation_example}",
    )

    if st.button("🔨 I ACCUSE…", type="primary", use_container_width=True):
        accused = typed.strip() or chosen
        result  = game.accuse(accused)
        st.session_state.game_over  = True
        st.session_state.verdict    = result
        st.session_state.no_verdict = result is None
        st.rerun()


def render_verdict() -> None:
    """Render the verdict screen (or the no-verdict notice)."""
    st.markdown("---")
    if st.session_state.no_verdict:
        st.info("No suspect named. The case closes without a verdict.")
        return

    result = st.session_state.verdict
    if result.guilty:
        st.balloons()
    banner = "GUILTY" if result.guilty else "NOT GUILTY"
    st.markdown(
        f'<div class="verdict-display">{banner}</div>',
        unsafe_allow_html=True,
    )
    for line in format_verdict(result):
        st.markdown(line)


# ============================================================
# ENTRY POINT
# ============================================================

def main() -> None:
    """
    Entry point, called by Streamlit on every render pass.

    Flow:
      1. Initialise session state on first run.
      2. Render the page header and sidebar.
      3. Render the room while exploring, then the accusation form, then
         the verdict.
    """
    init_session_state()

    st.markdown(f"""
    <h1 class='main-header'>🔍 {TITLE}</h1>
    <h3 class='sub-header'>Follow the clues. Name the culprit.</h3>
    """, unsafe_allow_html=True)

    render_sidebar()

    game = st.session_state.game
    if st.session_state.game_over:
        render_verdict()
    elif game.exploration_over:
        render_accusation_form()
    else:
        render_room()


if __name__ == "__main__":
    main()
