"""
case_data.py
============
All narrative content for the Detective Quest mansion.

Centralising the map and the clue -> suspect associations here means you can
swap out the entire mystery without touching the navigator, the verdict
engine or either front end.

To create a new case:
    1. Replace MANSION_DATA below, or write a YAML / JSON file of the same
       shape and pass it with `python cli.py --layout my_case.yaml`.
    2. Keep every room reachable from the root and give each room at most
       one parent; MansionLayout rejects anything else.
"""

from __future__ import annotations

from typing import Any, Dict

from models import MansionLayout


# ---------------------------------------------------------------------------
# Clue texts
# ---------------------------------------------------------------------------

WET_FOOTPRINTS = "Wet footprints on the rug"
STOPPED_CLOCK  = "Clock stopped at 3:15"
BROKEN_GLASS   = "Broken glass with wine residue"
TORN_PAGE      = "Torn page from a novel"
DAMAGED_SAFE   = "Locked safe with a damaged combination"
BLACK_FIBRE    = "Black fabric fibre caught in the window"


# ---------------------------------------------------------------------------
# Mansion layout (the static setup configuration)
# ---------------------------------------------------------------------------

MANSION_DATA: Dict[str, Any] = {
    "root": "Entrance Hall",

    #                 Entrance Hall
    #               /               \
    #        Living Room           Kitchen
    #        /        \           /       \
    #    Library    Garden    Basement   Tower
    "rooms": [
        {"name": "Entrance Hall", "clue": WET_FOOTPRINTS,
         "left": "Living Room", "right": "Kitchen"},
        {"name": "Living Room", "clue": STOPPED_CLOCK,
         "left": "Library", "right": "Garden"},
        {"name": "Kitchen", "clue": BROKEN_GLASS,
         "left": "Basement", "right": "Tower"},
        {"name": "Library", "clue": TORN_PAGE},
        {"name": "Garden", "clue": ""},
        {"name": "Basement", "clue": DAMAGED_SAFE},
        {"name": "Tower", "clue": BLACK_FIBRE},
    ],

    # The garden has no clue, so it has no association either.
    "associations": [
        {"clue": WET_FOOTPRINTS, "suspect": "Mr. Almeida"},
        {"clue": STOPPED_CLOCK,  "suspect": "Mrs. Helena"},
        {"clue": BROKEN_GLASS,   "suspect": "Mrs. Helena"},
        {"clue": TORN_PAGE,      "suspect": "Prof. Braga"},
        {"clue": DAMAGED_SAFE,   "suspect": "Mr. Almeida"},
        {"clue": BLACK_FIBRE,    "suspect": "Unknown Suspect"},
    ],
}

MANSION_LAYOUT: MansionLayout = MansionLayout.model_validate(MANSION_DATA)
"""
The built-in mansion, validated once at import.

DetectiveQuestGame uses it whenever no other layout is supplied.
"""

TITLE: str = "DETECTIVE QUEST: THE FINAL JUDGEMENT"
