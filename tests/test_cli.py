"""Tests for the smart-izin CLI and settings."""

from __future__ import annotations

import logging
import sys

import pandas as pd
import pytest

from smartizin.config import RosterSettings
from smartizin.logging_config import setup_logging
from smartizin.roster.cli import main


class TestRosterSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch) -> None:
        for name in ("ROSTER_HOME_BASE", "ROSTER_REFERENCE_YEAR", "ROSTER_DEFAULT_MONTH"):
            monkeypatch.delenv(name, raising=False)
        settings = RosterSettings.from_env()
        assert settings.home_base == "CGK"
        assert settings.reference_year == 2025
        assert settings.default_month == 6

    def test_env_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("ROSTER_HOME_BASE", "sub")
        monkeypatch.setenv("ROSTER_REFERENCE_YEAR", "2026")
        settings = RosterSettings.from_env()
        assert settings.home_base == "SUB"
        assert settings.reference_year == 2026

    def test_arguments_beat_env(self, monkeypatch) -> None:
        monkeypatch.setenv("ROSTER_HOME_BASE", "SUB")
        assert RosterSettings.from_env(home_base="KNO").home_base == "KNO"

    def test_invalid_year(self, monkeypatch) -> None:
        monkeypatch.setenv("ROSTER_REFERENCE_YEAR", "twenty")
        with pytest.raises(ValueError, match="ROSTER_REFERENCE_YEAR"):
            RosterSettings.from_env()

    def test_invalid_default_month(self) -> None:
        with pytest.raises(ValueError):
            RosterSettings(default_month=12)


class TestCli:
    """Tests for main()."""

    def test_prints_period(self, tmp_path, scenario_text: str, capsys) -> None:
        roster = tmp_path / "roster.txt"
        roster.write_text(scenario_text, encoding="utf-8")

        main([str(roster), "--now", "2026-10-18"])

        out = capsys.readouterr().out
        assert "Start: 30 Wed (30 Juli 2025)" in out
        assert "Days: 2" in out
        assert "duty day pertama" in out
        assert "- IU857 BTH-CGK (ETD 1200)" in out

    def test_writes_csv(self, tmp_path, scenario_text: str) -> None:
        roster = tmp_path / "roster.txt"
        roster.write_text(scenario_text, encoding="utf-8")
        output = tmp_path / "period.csv"

        main([str(roster), "--now", "2026-10-18", "-o", str(output)])

        df = pd.read_csv(output)
        assert list(df["flight"]) == ["IU856", "IU857"]

    def test_multiple_photos(self, tmp_path, capsys) -> None:
        first = tmp_path / "photo1.txt"
        first.write_text("29 Tue\nOFF\n30 Wed\nIU856 0730 CGK BTH 0910", encoding="utf-8")
        second = tmp_path / "photo2.txt"
        second.write_text("31 Thu\nIU857 1200 BTH CGK 1340", encoding="utf-8")

        main([str(first), str(second), "--now", "2025-07-01", "--days"])

        out = capsys.readouterr().out
        assert "29 Tue" in out
        assert "Start: 31 Thu" in out
        assert "duty day kedua" in out

    def test_no_period_exits(self, tmp_path, capsys) -> None:
        roster = tmp_path / "roster.txt"
        roster.write_text("nothing useful here", encoding="utf-8")

        with pytest.raises(SystemExit) as exc:
            main([str(roster), "--now", "2025-07-01"])
        assert exc.value.code == 1
        assert "No upcoming flight period" in capsys.readouterr().err

    def test_invalid_now_exits(self, tmp_path) -> None:
        roster = tmp_path / "roster.txt"
        roster.write_text("29 Tue", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main([str(roster), "--now", "yesterday"])
        assert exc.value.code == 1

    def test_missing_file_exits(self, tmp_path, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing.txt"), "--now", "2025-07-01"])
        assert exc.value.code == 1
        assert "Cannot read roster text" in capsys.readouterr().err


class TestSetupLogging:
    """Tests for console logging setup."""

    def test_single_stderr_handler(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("debug")
            setup_logging("debug")
            assert len(root.handlers) == 1
            handler = root.handlers[0]
            assert handler.stream is sys.stderr
            assert handler.level == logging.DEBUG
            assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
