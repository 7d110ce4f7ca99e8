import json

from adventure.state import GameState

DEFAULT_SAVE_FILE = "savegame.json"


def save_game(state, path=DEFAULT_SAVE_FILE):
    """Writes the state as JSON. Lets OSError through to the caller."""
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(state.to_dict(), f)


def load_game(path=DEFAULT_SAVE_FILE, rooms=None):
    """
    Reads a save file back into a new GameState.
    Raises OSError for a missing/unreadable file and ValueError for bad JSON,
    a wrong shape, or a currentRoom that is not on the map.
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    state = GameState.from_dict(data)
    if rooms is not None and state.current_room not in rooms:
        raise ValueError(f"unknown room '{state.current_room}'")
    return state
