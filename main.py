import os
import random
import sys
import threading
import time

import config_paths
from streaming_table import StreamingTable

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"


USAGE = (
    "tailgrid - live scrolling table for log streams\n\n"
    "Usage:\n  tailgrid [path]\n  tailgrid -v\n  tailgrid -h\n\n"
    "Without a path a demo stream is shown.\n"
)

COLUMNS = [
    {"name": "time", "width": 8},
    {"name": "level", "width": 5},
    {"name": "message", "width": 100},
]

LEVEL_COLORS = {
    "DEBUG": "blue",
    "INFO": "green",
    "WARN": "yellow",
    "WARNING": "yellow",
    "ERROR": "red",
    "ERR": "red",
    "FATAL": "magenta",
    "CRITICAL": "magenta",
}

FOLLOW_INTERVAL = 0.2


def parse_line(line, now=None):
    """Turn a log line into a row; a leading level word gets its color."""
    stamp = time.strftime("%H:%M:%S", time.localtime(now))
    text = line.rstrip("\r\n")
    level = ""
    head, _, rest = text.partition(" ")
    word = head.strip("[]:").upper()
    if word in LEVEL_COLORS:
        level = word
        text = rest
    return {
        "time": stamp,
        "level": {"value": level, "color": LEVEL_COLORS.get(level)},
        "message": text,
    }


def follow_file(path, table, stop_event, interval=FOLLOW_INTERVAL):
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        pending = ""
        while not stop_event.is_set():
            chunk = f.readline()
            if not chunk:
                time.sleep(interval)
                continue
            pending += chunk
            if not pending.endswith("\n"):
                continue
            table.add_row(parse_line(pending))
            pending = ""


def demo_stream(table, stop_event, rng=None):
    rng = rng or random.Random(1337)
    services = [("api", "cyan"), ("db", "magenta"), ("auth", 208)]
    levels = ["DEBUG", "INFO", "INFO", "INFO", "WARN", "ERROR"]
    counter = 0
    while not stop_event.is_set():
        counter += 1
        service, color = rng.choice(services)
        level = rng.choice(levels)
        table.add_row(
            {
                "time": time.strftime("%H:%M:%S"),
                "level": {"value": level, "color": LEVEL_COLORS[level]},
                "message": [
                    {"value": f"[{service}] ", "color": color},
                    f"event #{counter} handled in {rng.randint(1, 900)}ms",
                ],
            }
        )
        time.sleep(rng.uniform(0.05, 0.4))


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args or len(args) > 1:
        print(USAGE)
        return

    path = args[0] if args else None

    config_paths.ensure_config_dirs()
    cfg = config_paths.load_config()
    config_paths.configure_logging(cfg["LOG_FILE"])

    try:
        table = StreamingTable(
            columns=COLUMNS,
            max_rows=cfg["MAX_ROWS"],
            keybindings=cfg["KEYBINDINGS"],
            header_color=cfg["HEADER_COLOR"],
            poll_interval=cfg["POLL_INTERVAL"],
            export_dir=cfg["EXPORT_DIR"],
        )
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        sys.exit(2)

    if path:
        if not os.path.isfile(path):
            print(f"No such file: {path}", file=sys.stderr)
            sys.exit(1)
        target, producer_args = follow_file, (path, table)
    else:
        target, producer_args = demo_stream, (table,)

    stop_event = threading.Event()
    producer = threading.Thread(
        target=target, args=producer_args + (stop_event,), daemon=True
    )

    table.start()
    try:
        producer.start()
        table.wait()
        # keys are dead but the stream keeps showing until Ctrl+C
        while table.input_error is not None:
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass
    finally:
        stop_event.set()
        table.stop()

    if table.input_error is not None:
        print(f"Input handling stopped: {table.input_error}", file=sys.stderr)


if __name__ == "__main__":
    main()
