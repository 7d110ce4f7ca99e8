import os
import yaml

from adventure.persistence import DEFAULT_SAVE_FILE

CONFIG_PATH = "config.yaml"

DEFAULT_CONFIG_YAML = f"""
# DARK ROOM CONFIGURATION
# -----------------------
# save_file: where 'save' writes and 'load' reads the game state.
# debug_mode: print the game state after every command.

save_file: {DEFAULT_SAVE_FILE}
debug_mode: false
"""

DEFAULTS = {
    'save_file': DEFAULT_SAVE_FILE,
    'debug_mode': False,
}

CONFIG_TYPES = {
    'save_file': str,
    'debug_mode': bool,
}


def load_config(config_path=CONFIG_PATH):
    """
    Loads config.yaml or creates default if missing.
    Missing keys fall back to DEFAULTS. Raises yaml.YAMLError on a malformed file.
    """
    if not os.path.exists(config_path):
        with open(config_path, "w") as f:
            f.write(DEFAULT_CONFIG_YAML.strip() + "\n")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise yaml.YAMLError(f"{config_path} must hold a mapping, got {type(data).__name__}")

    config = dict(DEFAULTS)
    for key, expected in CONFIG_TYPES.items():
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, expected):
            raise yaml.YAMLError(f"{config_path}: {key} must be a {expected.__name__}, got {value!r}")
        config[key] = value
    return config
