"""Unit tests for vaultlift.utils."""

import logging
from pathlib import Path

from vaultlift.utils.expand_path import expand_path
from vaultlift.utils.get_home_dir import get_home_dir
from vaultlift.utils.logger import configure_logging, get_logger


def test_get_home_dir_uses_env(vaultlift_home):
    assert get_home_dir() == vaultlift_home
    assert get_home_dir("config.json") == vaultlift_home / "config.json"


def test_get_home_dir_default(monkeypatch, tmp_path):
    monkeypatch.delenv("VAULTLIFT_HOME")
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_home_dir() == tmp_path / ".vaultlift"


def test_expand_path(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))

    assert expand_path("~/vault") == tmp_path / "vault"
    assert expand_path("relative").is_absolute()


def test_get_logger_namespace():
    assert get_logger("convert").name == "vaultlift.convert"


def test_configure_logging_writes_log_file(isolated_logging, vaultlift_home: Path):
    configure_logging(level=logging.DEBUG)
    configure_logging()

    get_logger("test").info("hello log")
    for handler in isolated_logging.handlers:
        handler.flush()

    assert len(isolated_logging.handlers) == 1
    assert "hello log" in (vaultlift_home / "vaultlift.log").read_text(encoding="utf-8")
