import time

from input_handler import DEFAULT_KEYBINDINGS, Action

_HELP_ACTIONS = [
    (Action.TOGGLE_PAUSE, "pause/unpause"),
    (Action.TOGGLE_SELECTION, "select"),
    (Action.EXPORT, "export"),
    (Action.QUIT, "quit"),
]


def _key_label(key):
    if key == " ":
        return "space"
    if isinstance(key, str):
        return f"'{key}'"
    return key.value


def help_text(keybindings) -> str:
    """Describe the bound keys, e.g. "Press 'p' to pause/unpause, ..."."""
    hints = []
    for action, label in _HELP_ACTIONS:
        keys = [_key_label(k) for k, a in keybindings.items() if a is action]
        if keys:
            hints.append(f"{'/'.join(keys)} to {label}")
    if not hints:
        return ""
    return "Press " + ", ".join(hints)


DEFAULT_HELP = help_text(DEFAULT_KEYBINDINGS)


def render_status(context, width):
    """
    context keys: status_msg, status_until, paused, selected, rows, max_rows, help
    """
    text = ""
    now = time.time()
    if context.get("status_msg") and now < context.get("status_until", 0):
        text = f" {context['status_msg']}"
    else:
        status = "PAUSED" if context.get("paused") else "RUNNING"
        selected = context.get("selected", 0)
        rows = context.get("rows", 0)
        max_rows = context.get("max_rows", rows)
        text = f"Status: {status} | {selected} rows selected | {rows}/{max_rows} rows"
        hint = context.get("help", DEFAULT_HELP)
        if hint:
            text += f" | {hint}"

    return text.ljust(width)[:width]
