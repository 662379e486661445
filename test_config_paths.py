import json
import logging
import tempfile
from pathlib import Path

import config_paths


def _load_with(cfg_path):
    orig_json = config_paths.CONFIG_JSON
    try:
        config_paths.CONFIG_JSON = str(cfg_path)
        return config_paths.load_config()
    finally:
        config_paths.CONFIG_JSON = orig_json


def test_load_config_defaults_without_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg = _load_with(Path(tmp) / "config.json")
        assert cfg["MAX_ROWS"] == 100_000
        assert cfg["HEADER_COLOR"] == "white"
        assert cfg["POLL_INTERVAL"] == 0.1
        assert cfg["KEYBINDINGS"] == {}
        assert cfg["EXPORT_DIR"] == config_paths.EXPORT_DIR
        assert cfg["LOG_FILE"] == config_paths.LOG_PATH


def test_load_config_reads_json_overrides():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "config.json"
        cfg_path.write_text(
            json.dumps(
                {
                    "max_rows": 500,
                    "header_color": 214,
                    "poll_interval": 0.05,
                    "keybindings": {"x": "quit", "down": "cursor_down"},
                    "export_dir": "/tmp/tailgrid-exports",
                }
            )
        )
        cfg = _load_with(cfg_path)
        assert cfg["MAX_ROWS"] == 500
        assert cfg["HEADER_COLOR"] == 214
        assert cfg["POLL_INTERVAL"] == 0.05
        assert cfg["KEYBINDINGS"] == {"x": "quit", "down": "cursor_down"}
        assert cfg["EXPORT_DIR"] == "/tmp/tailgrid-exports"


def test_load_config_ignores_bad_values():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "config.json"
        cfg_path.write_text(
            json.dumps(
                {
                    "max_rows": -3,
                    "header_color": 999,
                    "poll_interval": "fast",
                    "keybindings": {"x": 1},
                    "log_file": "",
                }
            )
        )
        cfg = _load_with(cfg_path)
        assert cfg["MAX_ROWS"] == 100_000
        assert cfg["HEADER_COLOR"] == "white"
        assert cfg["POLL_INTERVAL"] == 0.1
        assert cfg["KEYBINDINGS"] == {}
        assert cfg["LOG_FILE"] == config_paths.LOG_PATH


def test_load_config_survives_broken_json():
    with tempfile.TemporaryDirectory() as tmp:
        cfg_path = Path(tmp) / "config.json"
        cfg_path.write_text("{not json")
        assert _load_with(cfg_path)["MAX_ROWS"] == 100_000


def test_configure_logging_writes_to_file():
    with tempfile.TemporaryDirectory() as tmp:
        log_path = Path(tmp) / "logs" / "tailgrid.log"
        handler = config_paths.configure_logging(str(log_path))
        try:
            logging.getLogger("tailgrid.test").info("hello")
            handler.flush()
            assert "hello" in log_path.read_text()
        finally:
            logging.getLogger().removeHandler(handler)
            handler.close()
