import json

from rich.markup import escape
from rich.panel import Panel

from adventure.persistence import DEFAULT_SAVE_FILE, load_game, save_game
from adventure.world import DIRECTIONS, describe_item

# Available commands, in the order 'help' lists them
COMMANDS = {
    "help": "Shows this help message",
    "look": "Look around the current room",
    "inventory": "Show your inventory",
    "take": "Take an item (usage: take [item])",
    "examine": "Examine an item or object (usage: examine [item])",
    "save": "Save your game progress",
    "load": "Load your saved game",
    "quit": "Exit the game",
}

VICTORY_ITEM = "ancient book"
PUZZLES_TO_WIN = 3


class Game:
    def __init__(self, rooms, state, console, save_path=DEFAULT_SAVE_FILE, debug=False):
        """
        The command dispatcher. Owns the game state for one session;
        'load' swaps in a whole new state object.
        """
        self.rooms = rooms
        self.state = state
        self.console = console
        self.save_path = save_path
        self.debug = debug

    # ==========================================
    # COMMANDS
    # ==========================================

    def look(self):
        for line in self.rooms.describe(self.state.current_room):
            self.console.print(line)

    def show_help(self):
        self.console.print("\n[info]Available Commands:[/info]")
        for command, description in COMMANDS.items():
            self.console.print(f"{command}: {escape(description)}")
        self.console.print(f"\nDirections you can use when available: {', '.join(DIRECTIONS)}")

    def show_inventory(self):
        if not self.state.inventory:
            self.console.print("Your inventory is empty.")
            return
        self.console.print("\n[info]Inventory:[/info]")
        for item in self.state.inventory:
            self.console.print(f"- {escape(item)}")

    def take(self):
        item = self.rooms.take_item(self.state.current_room)
        if item:
            self.state.inventory.append(item)
            self.console.print(f"You picked up the {item}.")
        else:
            self.console.print("There's nothing here to take.")

    def examine(self, item):
        if self.state.has_item(item):
            self.console.print(describe_item(item))
        else:
            self.console.print("You don't have that item in your inventory.")

    def move(self, direction):
        destination = self.rooms.resolve_direction(self.state.current_room, direction)
        if destination is None:
            self.console.print("You can't go that way.")
            return False
        self.state.current_room = destination
        self.look()
        return True

    def save(self):
        try:
            save_game(self.state, self.save_path)
        except OSError as e:
            self.console.print(f"[warning]Failed to save the game:[/warning] {escape(str(e))}")
            return
        self.console.print("[success]Game saved successfully![/success]")

    def load(self):
        try:
            state = load_game(self.save_path, self.rooms)
        except (OSError, ValueError) as e:
            # Keep playing with the state we already have
            self.console.print(f"[warning]No saved game found or error loading save:[/warning] {escape(str(e))}")
            return
        self.state = state
        self.console.print("[success]Game loaded successfully![/success]")
        self.look()

    def quit(self):
        self.state.game_active = False

    def check_victory(self):
        # puzzles_solved is never raised by any command, so this cannot fire in normal play
        if self.state.puzzles_solved >= PUZZLES_TO_WIN and self.state.has_item(VICTORY_ITEM):
            self.console.print("\n[success]:tada: Congratulations! You've won the game! :tada:[/success]")
            self.console.print("You've solved all the puzzles and obtained the ancient knowledge!")
            self.state.game_active = False
            return True
        return False

    # ==========================================
    # DISPATCH
    # ==========================================

    def parse(self, text):
        if not self.state.game_active:
            return

        tokens = text.lower().split()
        if not tokens:
            self.console.print("Invalid command. Type 'help' for available commands.")
            return

        command, args = tokens[0], tokens[1:]

        if command == 'quit':
            self.quit()
        elif command == 'help':
            self.show_help()
        elif command == 'look':
            self.look()
        elif command == 'inventory':
            self.show_inventory()
        elif command == 'take':
            self.take()
        elif command == 'examine':
            if args:
                self.examine(" ".join(args))
            else:
                self.console.print("What would you like to examine?")
        elif command == 'save':
            self.save()
        elif command == 'load':
            self.load()
        elif command in DIRECTIONS:
            if self.move(command):
                self.check_victory()
        else:
            self.console.print("Invalid command. Type 'help' for available commands.")

        if self.debug:
            self.console.print(Panel(
                escape(json.dumps(self.state.to_dict(), indent=2)),
                title="[DEBUG: Game State]",
                border_style="dim"
            ))

    # ==========================================
    # LOOP
    # ==========================================

    def play(self, read_line):
        """
        Runs until quit, victory, or the input runs out.
        read_line is called with no arguments and returns one line of input.
        """
        self.console.print(Panel(
            "[info]Welcome to the Text Adventure Game![/info]\n[dim]Type 'help' to see available commands.[/dim]",
            border_style="info"
        ))
        self.look()

        while self.state.game_active:
            try:
                line = read_line()
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break
            self.parse(line)
