from __future__ import annotations

import json
import logging

from pathtui.config import AppConfig, load_config, save_config
from pathtui.shell_command import ShellKind


def test_load_config_missing_file(tmp_path) -> None:
    path = tmp_path / "config.json"
    config, error = load_config(path)
    assert error is None
    assert config == AppConfig()


def test_save_and_load_config_roundtrip(tmp_path) -> None:
    path = tmp_path / "nested" / "config.json"
    config = AppConfig(shell="fish", notify_missing=True, log_level="DEBUG")
    error = save_config(config, path)
    assert error is None
    loaded, error = load_config(path)
    assert error is None
    assert loaded == config
    assert loaded.shell_kind == ShellKind.FISH
    assert loaded.logging_level == logging.DEBUG


def test_load_config_invalid_json(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not-json", encoding="utf-8")
    config, error = load_config(path)
    assert config == AppConfig()
    assert error is not None


def test_load_config_non_object(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    config, error = load_config(path)
    assert config == AppConfig()
    assert error is not None and "JSON object" in error


def test_load_config_ignores_bad_fields(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"shell": "tcsh", "notify_missing": "yes", "log_level": "info"}),
        encoding="utf-8",
    )
    config, error = load_config(path)
    assert error is None
    assert config.shell is None
    assert config.shell_kind is None
    assert config.notify_missing is None
    assert config.log_level == "INFO"


def test_default_logging_level() -> None:
    assert AppConfig().logging_level == logging.WARNING
