"""Unit tests for config cmd_show."""

import pytest

from tests.conftest import run_cmd
from vaultlift.api.config.cmd_show import cmd_show

pytestmark = pytest.mark.config


class TestCmdShow:
    def test_lists_sections(self, write_config):
        write_config()

        result = run_cmd(cmd_show, "")

        assert result.success
        assert result.output["content"] == {"sections": ["vault", "store", "mime", "convert"]}

    def test_valid_section(self, write_config, store_root):
        write_config()

        result = run_cmd(cmd_show, "store")

        assert result.success
        assert result.output["section"] == "store"
        assert result.output["content"]["type"] == "directory"
        assert result.output["content"]["data"] == {"root": str(store_root)}

    def test_unknown_section(self, write_config):
        write_config()

        result = run_cmd(cmd_show, "bogus")

        assert not result.success
        assert result.output["errors"] == ["Unknown section: bogus"]

    def test_unconfigured_store_is_a_warning(self, write_config):
        write_config(store=None)

        result = run_cmd(cmd_show, "store")

        assert result.success
        assert result.output["content"] == {}
        assert result.output["warnings"] == ["Section 'store' is not configured"]

    def test_missing_config_file(self, vaultlift_home):
        result = run_cmd(cmd_show, "vault")

        assert result.success is False
        assert result.output["section"] == "vault"
        assert result.output["config_path"] == str(vaultlift_home / "config.json")
        assert "Configuration file not found" in result.output["errors"][0]
