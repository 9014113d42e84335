import json
import logging
import os


logger = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "ecstable")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "ecstable.log")

# default settings
QUIT_KEY_DEFAULT = "q"
SELECTED_COLUMN_DEFAULT = 1
LOG_LEVEL_DEFAULT = "WARNING"
DEBUG_CANVAS_DEFAULT = False

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def valid_quit_key(key):
    # must arrive from the terminal as a bare key event: single printable
    # ASCII, no whitespace, no shifted letter
    return (
        isinstance(key, str)
        and len(key) == 1
        and key.isascii()
        and key.isprintable()
        and not key.isspace()
        and not key.isupper()
    )


def load_config():
    cfg = {
        "QUIT_KEY": QUIT_KEY_DEFAULT,
        "SELECTED_COLUMN": SELECTED_COLUMN_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
        "DEBUG_CANVAS": DEBUG_CANVAS_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_JSON, exc)
        return cfg

    if not isinstance(data, dict):
        return cfg

    quit_key = data.get("quit_key")
    if valid_quit_key(quit_key):
        cfg["QUIT_KEY"] = quit_key
    elif quit_key is not None:
        logger.warning("Ignoring quit_key %r: not a plain unshifted key", quit_key)

    if "selected_column" in data:
        col = data["selected_column"]
        if col is None or (
            isinstance(col, int) and not isinstance(col, bool) and col >= 0
        ):
            cfg["SELECTED_COLUMN"] = col

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        cfg["LOG_LEVEL"] = level.upper()

    debug_canvas = data.get("debug_canvas")
    if isinstance(debug_canvas, bool):
        cfg["DEBUG_CANVAS"] = debug_canvas

    return cfg
