# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

import importlib
import importlib.metadata

import pytest

import hwreport
from hwreport import cli


@pytest.fixture
def calls(monkeypatch):
    recorded = {}

    def fake_report(install=True, debug=False):
        recorded["report"] = {"install": install, "debug": debug}
        return 0

    def fake_logging(verbose=False, debug=False, log_file=None):
        recorded["logging"] = {"verbose": verbose, "debug": debug, "log_file": log_file}

    monkeypatch.setattr(cli, "run_hardware_report", fake_report)
    monkeypatch.setattr(cli, "setup_command_logging", fake_logging)
    return recorded


def test_non_root_exits_with_message_only(monkeypatch, capsys, calls):
    monkeypatch.setattr(cli.os, "geteuid", lambda: 1000, raising=False)

    assert cli.main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == "This tool must be run as root.\n"
    assert calls == {}


def test_root_runs_report_with_install(monkeypatch, calls):
    monkeypatch.setattr(cli.os, "geteuid", lambda: 0, raising=False)

    assert cli.main([]) == 0
    assert calls["report"] == {"install": True, "debug": False}
    assert calls["logging"] == {"verbose": False, "debug": False, "log_file": None}


def test_flags_are_passed_through(monkeypatch, calls, tmp_path):
    monkeypatch.setattr(cli.os, "geteuid", lambda: 0, raising=False)
    log_file = str(tmp_path / "hwreport.log")

    assert cli.main(["--no-install", "-d", "--log-file", log_file]) == 0
    assert calls["report"] == {"install": False, "debug": True}
    assert calls["logging"]["log_file"] == log_file


def test_version_flag_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--version"])
    assert exc_info.value.code == 0
    assert "hwreport" in capsys.readouterr().out


def test_version_is_unknown_when_not_installed(monkeypatch):
    def not_installed(name):
        raise importlib.metadata.PackageNotFoundError(name)

    monkeypatch.setattr(importlib.metadata, "version", not_installed)
    try:
        assert importlib.reload(hwreport).__version__ == "unknown"
    finally:
        monkeypatch.undo()
        importlib.reload(hwreport)
