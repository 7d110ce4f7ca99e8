from adventure.world import START_ROOM

# Save-file counters and their values for a new game
COUNTER_DEFAULTS = {
    'playerLevel': 1,
    'experience': 0,
    'health': 100,
    'puzzlesSolved': 0,
}


class GameState:
    def __init__(self, current_room=START_ROOM, inventory=None, game_active=True,
                 player_level=1, experience=0, health=100, puzzles_solved=0):
        self.current_room = current_room
        self.inventory = list(inventory) if inventory else []
        self.game_active = game_active

        # Progress counters. Nothing in the game raises these yet, they are
        # carried through save files unchanged.
        self.player_level = player_level
        self.experience = experience
        self.health = health
        self.puzzles_solved = puzzles_solved

    def has_item(self, name):
        return name in self.inventory

    def to_dict(self):
        """Save-file shape. Keys are camelCase to match existing save files."""
        return {
            'currentRoom': self.current_room,
            'inventory': self.inventory[:],
            'gameActive': self.game_active,
            'playerLevel': self.player_level,
            'experience': self.experience,
            'health': self.health,
            'puzzlesSolved': self.puzzles_solved,
        }

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ValueError("save data must be a JSON object")

        current_room = data.get('currentRoom')
        if not isinstance(current_room, str):
            raise ValueError("save data has no currentRoom")

        inventory = data.get('inventory', [])
        if not isinstance(inventory, list):
            raise ValueError("inventory must be a list")
        if not all(isinstance(item, str) for item in inventory):
            raise ValueError("inventory items must be strings")

        game_active = data.get('gameActive', True)
        if not isinstance(game_active, bool):
            raise ValueError("gameActive must be true or false")

        counters = {}
        for key, default in COUNTER_DEFAULTS.items():
            value = data.get(key, default)
            # bool is an int subclass, but true/false is not a count
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{key} must be a whole number")
            counters[key] = value

        return cls(
            current_room=current_room,
            inventory=inventory,
            game_active=game_active,
            player_level=counters['playerLevel'],
            experience=counters['experience'],
            health=counters['health'],
            puzzles_solved=counters['puzzlesSolved'],
        )

    def __eq__(self, other):
        if not isinstance(other, GameState):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"GameState({self.to_dict()!r})"
