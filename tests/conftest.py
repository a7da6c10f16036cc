"""Shared pytest configuration and fixtures for all tests."""

import json
import logging
from pathlib import Path

import pytest

from vaultlift.api.config.VaultliftConfig import VaultliftConfig


def pytest_configure(config):
    for marker in ("unit", "integration", "convert", "config", "store", "vault"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(vault_dir: Path, store_root: Path) -> dict:
    """Minimal valid vaultlift configuration with a directory store."""
    return {
        "vault": {
            "type": "obsidian",
            "base_dir": str(vault_dir),
        },
        "store": {
            "type": "directory",
            "prefix": "attachments",
            "public_base_url": "https://cdn.example.com/files",
            "proxy_url": "http://localhost:4998",
            "data": {"root": str(store_root)},
        },
    }


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def write_file(path: Path, content: str | bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def vaultlift_home(tmp_path: Path, monkeypatch) -> Path:
    """Point VAULTLIFT_HOME at a per-test directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("VAULTLIFT_HOME", str(home))
    return home


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch):
    """Give each test an unconfigured ``vaultlift`` logger and restore it afterwards."""
    from vaultlift.utils import logger as logger_module

    root = logging.getLogger("vaultlift")
    saved_handlers = list(root.handlers)
    saved_level = root.level
    root.handlers = []
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    vault = tmp_path / "vault"
    vault.mkdir()
    return vault


@pytest.fixture
def store_root(tmp_path: Path) -> Path:
    return tmp_path / "store"


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture(vault_dir: Path, store_root: Path) -> dict:
    return minimal_config_dict(vault_dir, store_root)


@pytest.fixture
def minimal_config(minimal_config_dict: dict) -> VaultliftConfig:
    return VaultliftConfig(**minimal_config_dict)


@pytest.fixture
def write_config(vaultlift_home: Path, minimal_config_dict: dict):
    """Write config.json into VAULTLIFT_HOME; keyword arguments replace whole sections."""

    def _write(**sections) -> Path:
        config = {**minimal_config_dict, **sections}
        config = {key: value for key, value in config.items() if value is not None}
        path = vaultlift_home / "config.json"
        path.write_text(json.dumps(config), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def vault(minimal_config: VaultliftConfig):
    """Open obsidian vault over ``vault_dir``."""
    from vaultlift.api.vault.Vault import Vault

    with Vault(minimal_config.vault) as opened:
        yield opened


@pytest.fixture
def store(minimal_config: VaultliftConfig):
    """Open directory object store over ``store_root``."""
    from vaultlift.api.store.ObjectStore import ObjectStore

    assert minimal_config.store is not None
    with ObjectStore(minimal_config.store) as opened:
        yield opened
