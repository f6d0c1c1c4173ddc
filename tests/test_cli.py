"""Tests for the slicekit CLI."""

import logging
from pathlib import Path

from typer.testing import CliRunner

from slicekit.cli.main import app
from slicekit.core.log import configure_logging

runner = CliRunner()


def test_stat_existing(tmp_path: Path) -> None:
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "b.bin").write_bytes(b"x" * 7)
    result = runner.invoke(app, ["stat", "/a/b.bin", "--root", str(tmp_path)])
    assert result.exit_code == 0
    assert "200" in result.output
    assert "Content-Length: 7" in result.output
    assert 'filename="b.bin"' in result.output


def test_stat_without_leading_slash(tmp_path: Path) -> None:
    (tmp_path / "f.txt").write_bytes(b"abc")
    result = runner.invoke(app, ["stat", "f.txt", "--root", str(tmp_path)])
    assert result.exit_code == 0
    assert "Content-Length: 3" in result.output


def test_stat_missing(tmp_path: Path) -> None:
    result = runner.invoke(app, ["stat", "/missing.bin", "--root", str(tmp_path)])
    assert result.exit_code == 1


def test_stat_root_from_env(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "env.bin").write_bytes(b"12")
    monkeypatch.setenv("SLICEKIT_STORAGE_ROOT", str(tmp_path))
    result = runner.invoke(app, ["stat", "/env.bin"])
    assert result.exit_code == 0
    assert "Content-Length: 2" in result.output


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging("DEBUG")
    configure_logging("WARNING")
    assert logger.level == logging.WARNING
    assert len([h for h in logger.handlers if h.get_name() == "slicekit"]) == 1
