import curses
from enum import Enum


class Key(Enum):
    UP = "up"
    DOWN = "down"
    RESIZE = "resize"


class Action(Enum):
    QUIT = "quit"
    TOGGLE_PAUSE = "toggle_pause"
    CURSOR_UP = "cursor_up"
    CURSOR_DOWN = "cursor_down"
    TOGGLE_SELECTION = "toggle_selection"
    EXPORT = "export"
    REDRAW = "redraw"


DEFAULT_KEYBINDINGS = {
    "q": Action.QUIT,
    "p": Action.TOGGLE_PAUSE,
    Key.UP: Action.CURSOR_UP,
    "k": Action.CURSOR_UP,
    Key.DOWN: Action.CURSOR_DOWN,
    "j": Action.CURSOR_DOWN,
    " ": Action.TOGGLE_SELECTION,
    "e": Action.EXPORT,
    Key.RESIZE: Action.REDRAW,
}

_CURSES_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_RESIZE: Key.RESIZE,
}

_NAMED_TOKENS = {
    "up": Key.UP,
    "key_up": Key.UP,
    "down": Key.DOWN,
    "key_down": Key.DOWN,
    "space": " ",
}


def normalize_key(code):
    """Turn a curses getch() code into a key token (None when no key)."""
    if code is None or code == -1:
        return None
    if isinstance(code, str):
        return code if len(code) == 1 else None
    if code in _CURSES_KEYS:
        return _CURSES_KEYS[code]
    # getch() hands out bytes; anything past 255 is an unmapped KEY_* code
    if 0 <= code < 256:
        return chr(code)
    return None


def parse_key_token(text):
    if isinstance(text, Key):
        return text
    if not isinstance(text, str) or text == "":
        raise ValueError(f"invalid key: {text!r}")
    if len(text) == 1:
        return text
    token = _NAMED_TOKENS.get(text.lower())
    if token is None:
        raise ValueError(f"unknown key name: {text!r}")
    return token


def parse_action(name):
    if isinstance(name, Action):
        return name
    try:
        return Action(str(name).lower())
    except ValueError:
        known = ", ".join(a.value for a in Action)
        raise ValueError(f"unknown action {name!r} (expected one of: {known})") from None


def parse_keybindings(mapping) -> dict:
    return {parse_key_token(key): parse_action(action) for key, action in mapping.items()}


def merge_keybindings(overrides=None) -> dict:
    bindings = dict(DEFAULT_KEYBINDINGS)
    if overrides:
        bindings.update(parse_keybindings(overrides))
    return bindings


class InputHandler:
    """Maps key tokens to table actions."""

    def __init__(self, keybindings, ui):
        self.keybindings = keybindings
        self.ui = ui

    def action_for(self, key):
        if key is None:
            return None
        return self.keybindings.get(key)

    def handle_input(self, key) -> bool:
        action = self.action_for(key)
        if action is None:
            return False

        ui = self.ui
        if action is Action.QUIT:
            ui.quit()
        elif action is Action.TOGGLE_PAUSE:
            ui.toggle_pause()
        elif action is Action.CURSOR_UP:
            ui.navigate_up()
        elif action is Action.CURSOR_DOWN:
            # freeze the rows before the user starts scrolling through them
            if not ui.paused:
                ui.toggle_pause()
            ui.navigate_down()
        elif action is Action.TOGGLE_SELECTION:
            ui.toggle_selection()
        elif action is Action.EXPORT:
            ui.export()
        elif action is Action.REDRAW:
            ui.draw()
        return True
