"""End-to-end CLI coverage for the public commands exposed by lib-config-paths.

These tests exercise the documented CLI workflows (resolve, sanitize,
metadata lookups) through Click's runner and through ``main`` so exit-code
handling via ``lib_cli_exit_tools`` stays covered.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from click.testing import CliRunner

from lib_config_paths import cli
from lib_config_paths.domain.errors import InvalidArgument


def _runner() -> CliRunner:
    """Return a fresh CLI runner so each test starts from a clean state."""

    return CliRunner()


def test_cli_resolve_explicit_executable(tmp_path: Path) -> None:
    """`resolve --exe-path` should print the pinned application and its config file."""

    exe = tmp_path / "widget"
    exe.write_text("", encoding="utf-8")

    result = _runner().invoke(cli.cli, ["resolve", "--exe-path", str(exe), "--indent", "2"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["application_uri"] == os.path.abspath(str(exe))
    assert payload["application_config_uri"] == os.path.abspath(str(exe)) + ".config"
    assert payload["roaming_config_file"] is None
    assert payload["product_name"] == ""


def test_cli_resolve_missing_executable(tmp_path: Path) -> None:
    """A missing pinned executable must surface as InvalidArgument."""

    result = _runner().invoke(cli.cli, ["resolve", "--exe-path", str(tmp_path / "missing")])

    assert result.exit_code != 0
    assert isinstance(result.exception, InvalidArgument)


def test_cli_resolve_without_user_config() -> None:
    """`--no-user-config` should report no user paths but flag them as not attempted."""

    result = _runner().invoke(cli.cli, ["resolve", "--no-user-config", "--platform", "linux"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["includes_user_config"] is False
    assert payload["roaming_config_directory"] is None
    assert payload["has_roaming_config"] is True


def test_cli_resolve_rejects_unknown_platform() -> None:
    result = _runner().invoke(cli.cli, ["resolve", "--platform", "amiga"])

    assert result.exit_code == 2
    assert "Platform must be one of" in result.output


def test_cli_sanitize_limits_length() -> None:
    result = _runner().invoke(cli.cli, ["sanitize", "x" * 40])

    assert result.exit_code == 0
    assert result.output.strip() == "x" * 25


def test_cli_sanitize_without_limit() -> None:
    result = _runner().invoke(cli.cli, ["sanitize", "--no-limit", "Acme Corp: " + "y" * 30])

    assert result.exit_code == 0
    assert result.output.strip() == "Acme_Corp__" + "y" * 30


def test_cli_info_reports_name() -> None:
    result = _runner().invoke(cli.cli, ["info"])

    assert result.exit_code == 0
    assert "lib_config_paths" in result.output


def test_main_returns_non_zero_for_missing_executable(tmp_path: Path) -> None:
    """`main` should translate InvalidArgument into a failing exit code."""

    code = cli.main(["resolve", "--exe-path", str(tmp_path / "missing")])

    assert code != 0


def test_main_returns_zero_on_success() -> None:
    assert cli.main(["sanitize", "Acme"]) == 0
