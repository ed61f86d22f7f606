"""Shared fixtures for the Detective Quest tests."""

import copy

import pytest

from models import MansionLayout
from room_map import RoomMap
from suspect_directory import SuspectDirectory


THREE_ROOM_DATA = {
    "root": "A",
    "rooms": [
        {"name": "A", "clue": "X1", "left": "B", "right": "C"},
        {"name": "B"},
        {"name": "C", "clue": "X2"},
    ],
    "associations": [
        {"clue": "X1", "suspect": "Sam"},
        {"clue": "X2", "suspect": "Sam"},
    ],
}


@pytest.fixture
def three_room_data():
    """Raw setup data for the three-room scenario."""
    return copy.deepcopy(THREE_ROOM_DATA)


@pytest.fixture
def three_room_layout():
    """A -> left B (no clue), A -> right C; both clues point at Sam."""
    return MansionLayout.model_validate(THREE_ROOM_DATA)


@pytest.fixture
def three_room_map(three_room_layout):
    return RoomMap.build(three_room_layout)


@pytest.fixture
def sam_directory(three_room_layout):
    return SuspectDirectory.from_associations(three_room_layout.associations)
