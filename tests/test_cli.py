"""
Tests for CLI commands — install, install-on, platform, backends, tools.
"""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from adaptive.main import cli


@pytest.fixture(autouse=True)
def _no_user_config(tmp_path: Path, monkeypatch):
    """Never pick up the developer's own ~/.config/adaptive/config.yml."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


@pytest.fixture
def invoke(make_installer):
    """Invoke the CLI with a mock installer pinned to a platform."""

    def _invoke(args, platform="debian", **packages):
        installer = make_installer(**packages)
        runner = CliRunner()
        return runner.invoke(
            cli,
            ["--platform", platform, *args],
            obj={"installer": installer},
        )

    return _invoke


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "install developer tools" in result.output
        for command in ("install", "install-on", "platform", "backends", "tools"):
            assert command in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_bad_platform(self, invoke):
        result = invoke(["platform"], platform="beos")
        assert result.exit_code == 2
        assert "Unknown platform" in result.output

    def test_missing_config(self, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(tmp_path / "nope.yml"), "platform"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_config_platform(self, tmp_path: Path):
        config = tmp_path / "config.yml"
        config.write_text("platform: alpine\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "platform", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["platform"] == "alpine"
        assert data["chain"] == ["apk", "snap", "nix", "cargo"]


class TestInstallOnCommand:
    def test_installs(self, invoke):
        result = invoke(["install-on", "debian", "jq"], apt={"jq"})
        assert result.exit_code == 0
        assert "Installed jq using apt" in result.output

    def test_prefer_flag_anywhere(self, invoke):
        result = invoke(["install-on", "debian", "jq", "--prefer-snap"], apt={"jq"}, snap={"jq"})
        assert result.exit_code == 0
        assert "using snap" in result.output

    def test_no_package(self, invoke):
        result = invoke(["install-on", "debian", "--prefer-snap"])
        assert result.exit_code == 1
        assert "no package provided to install_on_debian()!" in result.output

    def test_total_failure(self, invoke):
        result = invoke(["install-on", "windows", "nosuchpkg"])
        assert result.exit_code == 1
        assert "unsure how to install 'nosuchpkg' on this windows system" in result.output

    def test_json(self, invoke):
        result = invoke(["install-on", "alpine", "--json", "jq"], apk={"jq"})
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["backend"] == "apk"
        assert data["exit_code"] == 0

    def test_dry_run(self, invoke, call_log):
        result = invoke(["install-on", "debian", "--dry-run", "jq"], apt={"jq"})
        assert result.exit_code == 0
        assert "[dry-run] would install jq using apt" in result.output
        assert "apt:install:jq" not in call_log

    def test_unknown_os(self, invoke):
        result = invoke(["install-on", "beos", "jq"])
        assert result.exit_code == 2

    def test_verbose_lists_attempts(self, make_installer):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["-v", "--platform", "debian", "install-on", "debian", "jq"],
            obj={"installer": make_installer(unavailable={"nala"}, snap={"jq"})},
        )
        assert result.exit_code == 0
        assert "nala" in result.output
        assert "unavailable" in result.output


class TestInstallCommand:
    def test_catalog_tool(self, invoke):
        result = invoke(["install", "fd"], apt={"fd-find"})
        assert result.exit_code == 0
        assert "Installed fd-find using apt" in result.output

    def test_leading_prefer_flag(self, invoke):
        result = invoke(["install", "--prefer-cargo", "ripgrep"], apt={"ripgrep"}, cargo={"ripgrep"})
        assert result.exit_code == 0
        assert "using cargo" in result.output

    def test_windows_variant(self, invoke):
        result = invoke(["install", "jq", "--json"], platform="windows", winget={"jqlang.jq"})
        assert result.exit_code == 0
        assert json.loads(result.output)["package"] == "jqlang.jq"

    def test_second_name_is_usage_error(self, invoke, call_log):
        result = invoke(["install", "jq", "ripgrep", "--json"], apt={"jq", "ripgrep"})
        assert result.exit_code == 2
        assert "install takes one tool" in result.output
        assert call_log == []

    def test_unknown_tool(self, invoke):
        result = invoke(["install", "nosuchtool"])
        assert result.exit_code == 1
        assert "unknown tool 'nosuchtool'" in result.output

    def test_quiet_success_prints_nothing(self, make_installer):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["-q", "--platform", "debian", "install", "jq"],
            obj={"installer": make_installer(apt={"jq"})},
        )
        assert result.exit_code == 0
        assert result.output == ""


class TestPlatformCommand:
    def test_json(self, invoke):
        result = invoke(["platform", "--json"], platform="windows")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["platform"] == "windows"
        assert data["chain"] == ["winget", "choco", "scoop"]

    def test_text(self, invoke):
        result = invoke(["platform"], platform="fedora")
        assert result.exit_code == 0
        assert "dnf → yum → nix → cargo" in result.output


class TestBackendsCommand:
    def test_list(self, invoke):
        result = invoke(["backends", "list"], unavailable={"nala"})
        assert result.exit_code == 0
        assert "1. ❌ nala" in result.output
        assert "2. ✅ apt" in result.output

    def test_list_json(self, invoke):
        result = invoke(["backends", "list", "--json"], platform="windows")
        data = json.loads(result.output)
        assert [b["name"] for b in data["backends"]] == ["winget", "choco", "scoop"]

    def test_list_unknown_platform(self, invoke):
        result = invoke(["backends", "list"], platform="unknown")
        assert result.exit_code == 0
        assert "No package managers known" in result.output

    def test_search(self, invoke, call_log):
        result = invoke(["backends", "search", "jq"], apt={"jq"}, nix={"jq"})
        assert result.exit_code == 0
        assert "apt" in result.output
        assert not any(":install:" in entry for entry in call_log)

    def test_search_json(self, invoke):
        result = invoke(["backends", "search", "--json", "jq"], platform="alpine", apk={"jq"})
        data = json.loads(result.output)
        assert data[0]["backend"] == "apk"
        assert data[0]["status"] == "would_install"

    def test_search_miss(self, invoke):
        result = invoke(["backends", "search", "nosuchpkg"])
        assert result.exit_code == 1


class TestToolsCommand:
    def test_list(self, invoke):
        result = invoke(["tools", "list"], platform="windows")
        assert result.exit_code == 0
        assert "jqlang.jq" in result.output

    def test_list_json(self, invoke):
        result = invoke(["tools", "list", "--json"], platform="debian")
        data = json.loads(result.output)
        assert data["fd"] == ["fd-find", "fd"]

    def test_show(self, invoke):
        result = invoke(["tools", "show", "yq", "--json"])
        data = json.loads(result.output)
        assert data["name"] == "yq"
        assert data["install"]["windows"] == ["MikeFarah.yq", "yq"]

    def test_show_unknown(self, invoke):
        result = invoke(["tools", "show", "nosuchtool"])
        assert result.exit_code == 1
        assert "Unknown tool" in result.output

    def test_configured_tool_listed(self, tmp_path: Path, make_installer):
        config = tmp_path / "config.yml"
        config.write_text("tools:\n  just:\n    install:\n      _default: [just]\n")
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["--config", str(config), "--platform", "debian", "tools", "list"],
            obj={"installer": make_installer()},
        )
        assert result.exit_code == 0
        assert "just" in result.output
