# ==========================================
# ROOM GRAPH
# ==========================================

GENERIC_ITEM_DESCRIPTION = "You see nothing special about this item."

ITEM_DESCRIPTIONS = {
    "ancient book": "A dusty tome filled with mysterious symbols and ancient knowledge. It seems to glow faintly.",
    "rusty key": "An old iron key covered in rust. Despite its age, it looks like it might still work.",
}


def describe_item(name):
    return ITEM_DESCRIPTIONS.get(name, GENERIC_ITEM_DESCRIPTION)


class Room:
    def __init__(self, room_id, data):
        self.id = room_id
        self.description = data.get('description', "")
        self.directions = dict(data.get('directions', {}))
        self.item = data.get('item')


class RoomGraph:
    def __init__(self, data):
        """
        The static map for one play session.
        Only the room items change: once taken, an item is gone from its room.
        """
        self.rooms = {room_id: Room(room_id, room_data) for room_id, room_data in data.items()}

    def __contains__(self, room_id):
        return room_id in self.rooms

    def get(self, room_id):
        return self.rooms[room_id]

    def describe(self, room_id):
        room = self.rooms[room_id]
        lines = [room.description]
        if room.item:
            lines.append(f"You see a {room.item} here.")
        return lines

    def resolve_direction(self, room_id, direction):
        # None means there is no such exit
        return self.rooms[room_id].directions.get(direction)

    def take_item(self, room_id):
        room = self.rooms[room_id]
        item, room.item = room.item, None
        return item


# Data for the shipped map
DEFAULT_MAP = {
    'start': {
        'description': "You are in a dark, cold room with two doors. One leads to the north and another to the east.",
        'directions': {'north': 'library', 'east': 'kitchen'},
    },
    'library': {
        'description': "You find yourself surrounded by shelves of ancient books. There is a door to the south.",
        'directions': {'south': 'start'},
        'item': "ancient book",
    },
    'kitchen': {
        'description': "A seemingly abandoned kitchen. There's a door to the west and a strange, glowing portal that seems to lead nowhere.",
        'directions': {'west': 'start', 'portal': 'secretRoom'},
        'item': "rusty key",
    },
    'secretRoom': {
        'description': "You step through the portal and enter a secret room filled with treasure.",
        'directions': {'portal': 'kitchen'},
    },
}

START_ROOM = 'start'
DIRECTIONS = ('north', 'south', 'east', 'west', 'portal')


def default_rooms():
    # Fresh copy per session so taken items don't leak between games
    return RoomGraph(DEFAULT_MAP)
