from rich.console import Console
from rich.theme import Theme

# Candle-lit palette for the dark rooms
custom_theme = Theme({
    "info": "bold #e0c080",
    "dim": "dim",
    "warning": "bold #e07a5f",
    "success": "bold #81b29a",
})


def make_console(**kwargs):
    """Console with the game's styles. kwargs go straight to rich's Console (file=, width=, ...)."""
    return Console(theme=custom_theme, **kwargs)
