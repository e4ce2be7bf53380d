"""
Tests for the backend protocol and every package-manager backend.
"""

import pytest

from adaptive.adapters.mock import MockBackend, MockRunner
from adaptive.adapters.packages import (
    ApkBackend,
    AptBackend,
    BrewBackend,
    CargoBackend,
    ChocoBackend,
    DnfBackend,
    FinkBackend,
    NalaBackend,
    NixBackend,
    PacmanBackend,
    PortBackend,
    ScoopBackend,
    SnapBackend,
    WingetBackend,
    YayBackend,
    default_registry,
)
from adaptive.adapters.packages.base import first_tokens
from adaptive.core.errors import NoPackageError

# ── Backend.try_install ──────────────────────────────────────────────


class TestTryInstall:
    def test_unavailable_skips_search(self):
        log = []
        backend = MockBackend("apt", available=False, packages={"jq"}, call_log=log)
        attempt = backend.try_install(["jq"])
        assert attempt.status == "unavailable"
        assert not attempt.ok
        assert log == ["apt:available"]

    def test_probes_availability_once(self):
        log = []
        backend = MockBackend("apt", packages={"c"}, call_log=log)
        backend.try_install(["a", "b", "c"])
        assert log.count("apt:available") == 1

    def test_first_found_candidate_wins(self):
        log = []
        backend = MockBackend("apt", packages={"rg", "ripgrep"}, call_log=log)
        attempt = backend.try_install(["ripgrep", "rg"])
        assert attempt.status == "installed"
        assert attempt.package == "ripgrep"
        assert attempt.probed == ["ripgrep"]
        assert log == ["apt:available", "apt:search:ripgrep", "apt:install:ripgrep"]

    def test_searches_in_order(self):
        log = []
        backend = MockBackend("apt", packages={"rg"}, call_log=log)
        attempt = backend.try_install(["ripgrep", "rg"])
        assert attempt.package == "rg"
        assert attempt.probed == ["ripgrep", "rg"]
        assert log == ["apt:available", "apt:search:ripgrep", "apt:search:rg", "apt:install:rg"]

    def test_not_found(self):
        backend = MockBackend("apt")
        attempt = backend.try_install(["a", "b"])
        assert attempt.status == "not_found"
        assert attempt.probed == ["a", "b"]
        assert attempt.package is None

    def test_install_failure_is_final(self):
        log = []
        backend = MockBackend("apt", packages={"a", "b"}, failing={"a"}, call_log=log)
        attempt = backend.try_install(["a", "b"])
        assert attempt.status == "install_failed"
        assert attempt.package == "a"
        assert "failed" in attempt.error
        assert "apt:search:b" not in log

    def test_dry_run_skips_install(self):
        log = []
        backend = MockBackend("apt", packages={"jq"}, call_log=log)
        attempt = backend.try_install(["jq"], dry_run=True)
        assert attempt.status == "would_install"
        assert attempt.ok
        assert "apt:install:jq" not in log

    def test_empty_candidates_raises(self):
        with pytest.raises(NoPackageError, match="no package provided"):
            MockBackend("apt").try_install([])


class TestMockBackend:
    def test_installed_excludes_failures(self):
        backend = MockBackend("apt", packages={"a"})
        backend.add_package("b", failing=True)
        backend.try_install(["b"])
        backend.try_install(["a"])
        assert backend.installed == ["a"]

    def test_reset(self):
        backend = MockBackend("apt")
        backend.try_install(["x"])
        backend.reset()
        assert backend.call_log == []

    def test_repr(self):
        assert "apt" in repr(MockBackend("apt"))


# ── Package-manager backends ─────────────────────────────────────────


def _runner(executable: str) -> MockRunner:
    return MockRunner(available={executable})


class TestAvailability:
    @pytest.mark.parametrize("backend_type", [AptBackend, NalaBackend, SnapBackend, WingetBackend])
    def test_missing_executable(self, backend_type):
        runner = MockRunner()
        attempt = backend_type(runner).try_install(["jq"])
        assert attempt.status == "unavailable"
        assert runner.calls == []

    def test_apt_probes_apt_get(self):
        assert AptBackend(MockRunner(available={"apt-get"})).is_available()
        assert not AptBackend(MockRunner(available={"apt"})).is_available()


class TestDebianBackends:
    def test_apt_search_and_install(self):
        runner = _runner("apt-get")
        runner.respond(["apt-cache", "show", "jq"], stdout="Package: jq\n")
        runner.respond(["apt-get", "install", "-y", "jq"])
        attempt = AptBackend(runner).try_install(["jq"])
        assert attempt.status == "installed"
        assert runner.calls[-1] == (["apt-get", "install", "-y", "jq"], True)

    def test_apt_empty_show_is_not_found(self):
        runner = _runner("apt-get")
        runner.respond(["apt-cache", "show", "jq"], stdout="")
        assert AptBackend(runner).try_install(["jq"]).status == "not_found"

    def test_nala_installs_with_nala(self):
        runner = _runner("nala")
        runner.respond(["apt-cache", "show", "jq"], stdout="Package: jq\n")
        runner.respond(["nala", "install", "-y", "jq"])
        assert NalaBackend(runner).try_install(["jq"]).ok
        assert runner.commands[-1] == ["nala", "install", "-y", "jq"]

    def test_install_failure_reports_stderr(self):
        runner = _runner("apt-get")
        runner.respond(["apt-cache", "show", "jq"], stdout="Package: jq\n")
        runner.respond(["apt-get", "install", "-y", "jq"], returncode=100, stderr="E: Could not get lock")
        attempt = AptBackend(runner).try_install(["jq"])
        assert attempt.status == "install_failed"
        assert attempt.error == "E: Could not get lock"


class TestUniversalBackends:
    def test_snap_info_exit_code_decides(self):
        runner = _runner("snap")
        runner.respond(["snap", "info", "jq"], stdout="name: jq\n")
        runner.respond(["snap", "install", "jq"])
        assert SnapBackend(runner).try_install(["jq"]).ok
        assert runner.calls[-1] == (["snap", "install", "jq"], True)

    def test_nix_uses_attribute_path(self):
        runner = _runner("nix-env")
        runner.respond(["nix-env", "-qaP", "-A", "nixpkgs.jq"], stdout="nixpkgs.jq  jq-1.7\n")
        runner.respond(["nix-env", "-iA", "nixpkgs.jq"])
        assert NixBackend(runner).try_install(["jq"]).ok
        assert runner.calls[-1] == (["nix-env", "-iA", "nixpkgs.jq"], False)

    def test_cargo_requires_exact_crate(self):
        runner = _runner("cargo")
        runner.respond(
            ["cargo", "search", "--limit", "1", "rg"],
            stdout='rg-fuzzy = "0.1.0"    # not ripgrep\n',
        )
        runner.respond(
            ["cargo", "search", "--limit", "1", "ripgrep"],
            stdout='ripgrep = "14.1.0"    # line-oriented search tool\n',
        )
        runner.respond(["cargo", "install", "ripgrep"])
        attempt = CargoBackend(runner).try_install(["rg", "ripgrep"])
        assert attempt.package == "ripgrep"
        assert attempt.probed == ["rg", "ripgrep"]


class TestAlpineBackend:
    @pytest.mark.parametrize("output,found", [
        ("jq-1.7.1-r0\n", True),
        ("jq\n", True),
        ("jq-doc-1.7.1-r0\n", False),
        ("", False),
    ])
    def test_match(self, output, found):
        runner = _runner("apk")
        runner.respond(["apk", "search", "-e", "jq"], stdout=output)
        assert ApkBackend(runner).exists("jq") is found

    def test_install_is_privileged(self):
        runner = _runner("apk")
        runner.respond(["apk", "search", "-e", "jq"], stdout="jq-1.7.1-r0\n")
        runner.respond(["apk", "add", "jq"])
        assert ApkBackend(runner).try_install(["jq"]).ok
        assert runner.calls[-1] == (["apk", "add", "jq"], True)


class TestFedoraAndArchBackends:
    def test_dnf(self):
        runner = _runner("dnf")
        runner.respond(["dnf", "info", "jq"], stdout="Name : jq\n")
        runner.respond(["dnf", "install", "-y", "jq"])
        assert DnfBackend(runner).try_install(["jq"]).ok
        assert runner.calls[-1] == (["dnf", "install", "-y", "jq"], True)

    def test_pacman_is_privileged(self):
        runner = _runner("pacman")
        runner.respond(["pacman", "-Si", "jq"])
        runner.respond(["pacman", "-S", "--noconfirm", "jq"])
        assert PacmanBackend(runner).try_install(["jq"]).ok
        assert runner.calls[-1] == (["pacman", "-S", "--noconfirm", "jq"], True)

    def test_aur_helper_is_not_privileged(self):
        runner = _runner("yay")
        runner.respond(["yay", "-Si", "jq"])
        runner.respond(["yay", "-S", "--noconfirm", "jq"])
        assert YayBackend(runner).try_install(["jq"]).ok
        assert runner.calls[-1] == (["yay", "-S", "--noconfirm", "jq"], False)


class TestMacBackends:
    def test_brew(self):
        runner = _runner("brew")
        runner.respond(["brew", "info", "jq"], stdout="==> jq: stable 1.7.1\n")
        runner.respond(["brew", "install", "jq"])
        assert BrewBackend(runner).try_install(["jq"]).ok
        assert runner.calls[-1] == (["brew", "install", "jq"], False)

    def test_port_first_column(self):
        runner = _runner("port")
        runner.respond(["port", "search", "--exact", "jq"], stdout="jq @1.7.1 (sysutils)\n")
        assert PortBackend(runner).exists("jq")

    def test_fink_any_column(self):
        runner = _runner("fink")
        runner.respond(["fink", "list", "jq"], stdout=" i   jq   1.6-1   JSON processor\n")
        assert FinkBackend(runner).exists("jq")


class TestWindowsBackends:
    def test_winget_case_insensitive_id(self):
        runner = _runner("winget")
        runner.respond(
            WingetBackend(runner).search_command("jqlang.jq"),
            stdout="Name  Id         Version\n----\njq    jqlang.JQ  1.7.1\n",
        )
        assert WingetBackend(runner).exists("jqlang.jq")

    def test_winget_no_match_banner(self):
        runner = _runner("winget")
        runner.respond(
            WingetBackend(runner).search_command("jq"),
            stdout="No package found matching input criteria.\n",
        )
        assert not WingetBackend(runner).exists("jq")

    def test_winget_install_is_silent(self):
        cmd = WingetBackend(MockRunner()).install_command("jqlang.jq")
        assert cmd[:5] == ["winget", "install", "--exact", "--id", "jqlang.jq"]
        assert "--silent" in cmd

    def test_choco_limit_output(self):
        runner = _runner("choco")
        runner.respond(["choco", "search", "jq", "--exact", "--limit-output"], stdout="jq|1.7.1\n")
        runner.respond(["choco", "install", "jq", "-y"])
        assert ChocoBackend(runner).try_install(["jq"]).ok

    def test_scoop_first_column(self):
        runner = _runner("scoop")
        runner.respond(["scoop", "search", "jq"], stdout="jq 1.7.1 main\n")
        assert ScoopBackend(runner).exists("jq")


class TestFirstTokens:
    def test_skips_blank_lines(self):
        assert first_tokens("a 1\n\n  b 2\n") == ["a", "b"]

    def test_extra_separators(self):
        assert first_tokens("jq|1.7\n", "|") == ["jq"]


class TestDefaultRegistry:
    def test_every_chain_backend_is_registered(self):
        from adaptive.core.services.install.chains import DEFAULT_CHAINS

        registry = default_registry(MockRunner())
        for chain in DEFAULT_CHAINS.values():
            for name in chain:
                assert name in registry
