import json
import logging
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "tailgrid")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "tailgrid.log")
EXPORT_DIR = os.path.join(CONFIG_DIR, "exports")

# default settings
MAX_ROWS_DEFAULT = 100_000
HEADER_COLOR_DEFAULT = "white"
POLL_INTERVAL_DEFAULT = 0.1
KEYBINDINGS_DEFAULT = {}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)
    os.makedirs(EXPORT_DIR, exist_ok=True)


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def load_config():
    cfg = {
        "MAX_ROWS": MAX_ROWS_DEFAULT,
        "HEADER_COLOR": HEADER_COLOR_DEFAULT,
        "POLL_INTERVAL": POLL_INTERVAL_DEFAULT,
        "KEYBINDINGS": dict(KEYBINDINGS_DEFAULT),
        "EXPORT_DIR": EXPORT_DIR,
        "LOG_FILE": LOG_PATH,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg
    if not isinstance(data, dict):
        return cfg

    max_rows = data.get("max_rows")
    if isinstance(max_rows, int) and not isinstance(max_rows, bool) and max_rows > 0:
        cfg["MAX_ROWS"] = max_rows

    header_color = data.get("header_color")
    if isinstance(header_color, str) or (
        isinstance(header_color, int) and not isinstance(header_color, bool) and 0 <= header_color <= 255
    ):
        cfg["HEADER_COLOR"] = header_color

    poll = data.get("poll_interval")
    if _is_number(poll) and 0 < poll <= 1:
        cfg["POLL_INTERVAL"] = float(poll)

    bindings = data.get("keybindings")
    if isinstance(bindings, dict):
        for key, action in bindings.items():
            if isinstance(key, str) and isinstance(action, str):
                cfg["KEYBINDINGS"][key] = action

    for name, cfg_key in (("export_dir", "EXPORT_DIR"), ("log_file", "LOG_FILE")):
        value = data.get(name)
        if isinstance(value, str) and value.strip():
            cfg[cfg_key] = os.path.expanduser(value)

    return cfg


def configure_logging(path=None, level=logging.INFO):
    """Send log records to a file; the terminal belongs to curses."""
    path = path or LOG_PATH
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level)
    return handler
