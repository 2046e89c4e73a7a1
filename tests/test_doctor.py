from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler
from typer.testing import CliRunner

import cli.doctor as doctor
from cli.doctor import app

runner = CliRunner()
ENV = {"TZCLOCK_LOCAL_ZONE": "UTC", "COLUMNS": "200"}


def test_zones_with_prefix() -> None:
    result = runner.invoke(app, ["zones", "--prefix", "Asia/"], env=ENV)

    assert result.exit_code == 0
    names = result.output.splitlines()
    assert "Asia/Kolkata" in names
    assert all(n.startswith("Asia/") for n in names)
    assert names == sorted(names)


def test_run_with_valid_config(write_config) -> None:
    path = write_config("Asia/Kolkata\n")

    result = runner.invoke(app, ["run", str(path)], env=ENV)

    assert result.exit_code == 0, result.output
    assert "Config entries" in result.output
    assert "Asia/Kolkata" in result.output


def test_run_with_invalid_config(write_config) -> None:
    path = write_config("Not/AZone\n")

    result = runner.invoke(app, ["run", str(path)], env=ENV)

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_run_without_home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(doctor, "get_home_dir", lambda: None)

    result = runner.invoke(app, ["run"], env=ENV)

    assert result.exit_code == 1
    assert "No home directory!" in result.output


def test_run_configures_logging(monkeypatch: pytest.MonkeyPatch, write_config) -> None:
    root = logging.getLogger("tzclock")
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "propagate", True)
    monkeypatch.setattr(root, "level", root.level)
    path = write_config("UTC\n")

    result = runner.invoke(app, ["run", str(path)], env={**ENV, "TZCLOCK_LOG_LEVEL": "INFO"})

    assert result.exit_code == 0, result.output
    assert any(isinstance(h, RichHandler) for h in root.handlers)
    assert root.level == logging.INFO
