"""Unit tests for convert cmd_urls."""

import pytest

from tests.conftest import run_cmd, write_file
from vaultlift.api.convert.cmd_urls import cmd_urls

pytestmark = pytest.mark.convert


def test_urls_maps_links_back_to_keys(vault_dir, write_config):
    write_config()
    write_file(
        vault_dir / "note.md",
        "![](http://localhost:4998/attachments/a-1.png)\n"
        "[Doc](https://cdn.example.com/files/attachments/my%20doc-2.pdf#page=3)\n"
        "![](https://elsewhere.example.com/b.png)\n"
        "![](http://localhost:4998/attachments/a-1.png)\n",
    )
    write_file(vault_dir / "other.md", "![](http://localhost:4998/attachments/a-1.png)")

    result = run_cmd(cmd_urls, scope="vault")

    assert result.success
    assert result.output["notes_scanned"] == 2
    assert result.output["urls"] == [
        {"note": "note.md", "url": "http://localhost:4998/attachments/a-1.png", "key": "attachments/a-1.png"},
        {
            "note": "note.md",
            "url": "https://cdn.example.com/files/attachments/my%20doc-2.pdf#page=3",
            "key": "attachments/my doc-2.pdf",
        },
    ]


def test_urls_requires_store(vault_dir, write_config):
    write_config(store=None)
    write_file(vault_dir / "note.md", "")

    result = run_cmd(cmd_urls, scope="vault")

    assert not result.success
    assert result.output["errors"] == ["No object store configured. Check the store section of your config."]


def test_urls_invalid_scope(write_config):
    write_config()

    result = run_cmd(cmd_urls, scope="galaxy")

    assert not result.success
    assert "scope" in result.output["errors"][0]
