import yaml
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

from adventure.config import DEFAULTS, load_config
from adventure.game import Game
from adventure.state import GameState
from adventure.theme import make_console
from adventure.world import default_rooms

console = make_console()


def read_command():
    return Prompt.ask("[info]>[/info]", console=console)


def start_game(config):
    # 1. FRESH SESSION (map and state both start from scratch)
    rooms = default_rooms()
    state = GameState()

    # 2. RUN THE LOOP
    game = Game(
        rooms,
        state,
        console,
        save_path=config.get('save_file', DEFAULTS['save_file']),
        debug=config.get('debug_mode', False)
    )
    game.play(read_command)
    return game


# ============================================
# MAIN
# ============================================
def main():
    try:
        config = load_config()
    except (OSError, yaml.YAMLError) as e:
        console.print(Panel(
            f"[warning]CONFIG ERROR:[/]\nUsing defaults.\nDetails: {escape(str(e))}",
            border_style="warning"
        ))
        config = dict(DEFAULTS)

    start_game(config)


if __name__ == "__main__":
    main()
