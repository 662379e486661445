import time

from input_handler import Action, Key, merge_keybindings
from status_bar import DEFAULT_HELP, help_text, render_status


def test_running_status_line():
    text = render_status({"paused": False, "selected": 2, "rows": 10, "max_rows": 100}, 200)
    assert text.startswith("Status: RUNNING | 2 rows selected | 10/100 rows | ")
    assert DEFAULT_HELP in text
    assert len(text) == 200


def test_paused_status_is_clipped_to_width():
    text = render_status({"paused": True}, 20)
    assert text == "Status: PAUSED | 0 r"


def test_live_message_wins():
    ctx = {"status_msg": "Exported 3 rows", "status_until": time.time() + 5, "paused": True}
    assert render_status(ctx, 30) == " Exported 3 rows".ljust(30)


def test_expired_message_is_ignored():
    ctx = {"status_msg": "old", "status_until": time.time() - 1}
    assert render_status(ctx, 40).startswith("Status: RUNNING")


def test_default_help_names_default_keys():
    assert DEFAULT_HELP == "Press 'p' to pause/unpause, space to select, 'e' to export, 'q' to quit"


def test_help_follows_overridden_bindings():
    bindings = merge_keybindings({"x": "quit", "q": "export", "p": "cursor_up", "down": "toggle_pause"})
    hint = help_text(bindings)
    assert hint == "Press down to pause/unpause, space to select, 'q'/'e' to export, 'x' to quit"
    assert "'p'" not in hint


def test_unbound_actions_are_left_out():
    assert help_text({Key.UP: Action.CURSOR_UP}) == ""
    text = render_status({"rows": 1, "max_rows": 1, "help": ""}, 80)
    assert text.rstrip() == "Status: RUNNING | 0 rows selected | 1/1 rows"
