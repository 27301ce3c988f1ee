"""Tests for the command-line interface."""

import sys

import pytest

from miqat.cli import create_parser, main

JAIPUR_ARGS = ["--lat", "26.9124", "--lng", "75.7873", "--tz", "5.5"]


def run_cli(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    """Run the CLI with the given arguments."""
    monkeypatch.setattr(sys, "argv", ["miqat", *args])
    return main()


class TestParser:
    """Argument parser tests."""

    def test_times_defaults(self) -> None:
        """Test default options."""
        args = create_parser().parse_args(["times", "--lat", "1", "--lng", "2"])
        assert args.days == 1
        assert args.method == "MWL"
        assert args.school == "shafi"
        assert args.lang == "en"
        assert args.tz is None
        assert args.date is None

    def test_coordinates_are_required(self) -> None:
        """Test missing coordinates exit with an error."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["qibla", "--lat", "1"])

    def test_invalid_school(self) -> None:
        """Test school choices."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["times", "--lat", "1", "--lng", "2", "--school", "x"])


class TestTimesCommand:
    """times command tests."""

    def test_single_day(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        """Test the Jaipur reference day table."""
        code = run_cli(monkeypatch, "times", *JAIPUR_ARGS, "--date", "2024-03-20")
        assert code == 0

        out = capsys.readouterr().out
        assert "UTC+5.5" in out
        assert "20.03.2024" in out
        assert "10 Ramadan 1445" in out
        for clock in ("05:13", "06:31", "12:35", "16:01", "18:38", "19:51"):
            assert clock in out
        assert "20 March 2024, Wednesday" in out

    def test_multiple_days(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        """Test a multi-day table."""
        code = run_cli(monkeypatch, "times", *JAIPUR_ARGS, "--date", "2024-03-20", "--days", "3")
        assert code == 0

        out = capsys.readouterr().out
        assert "21.03.2024" in out
        assert "22.03.2024" in out

    def test_arabic_labels(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        """Test Arabic column headers."""
        run_cli(monkeypatch, "times", *JAIPUR_ARGS, "--date", "2024-03-20", "--lang", "ar")
        assert "الفجر" in capsys.readouterr().out

    def test_polar_warning(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        """Test missing events are marked."""
        code = run_cli(
            monkeypatch,
            "times",
            "--lat", "51.5074",
            "--lng", "-0.1278",
            "--tz", "1",
            "--date", "2024-06-21",
        )  # fmt: skip
        assert code == 0

        out = capsys.readouterr().out
        assert "--:--" in out
        assert "⚠️" in out

    def test_invalid_tune(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        """Test value errors are reported on stderr."""
        code = run_cli(monkeypatch, "times", *JAIPUR_ARGS, "--tune", "1,2")
        assert code == 2
        assert "Geçersiz ince ayar" in capsys.readouterr().err

    def test_invalid_latitude(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        """Test out of range coordinates."""
        code = run_cli(monkeypatch, "times", "--lat", "95", "--lng", "0", "--tz", "0")
        assert code == 2
        assert "Geçersiz enlem" in capsys.readouterr().err


class TestQiblaCommand:
    """qibla command tests."""

    def test_qibla(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        """Test London Qibla output."""
        code = run_cli(monkeypatch, "qibla", "--lat", "51.5074", "--lng", "-0.1278")
        assert code == 0

        out = capsys.readouterr().out
        assert "118.99°" in out
        assert "ESE" in out
        assert "4,793.8 km" in out


class TestOtherCommands:
    """methods and help tests."""

    def test_methods(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        """Test method listing."""
        assert run_cli(monkeypatch, "methods") == 0

        out = capsys.readouterr().out
        assert "Muslim World League" in out
        assert "+90 dk" in out
        assert "19.5°" in out

    def test_no_command(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        """Test help is shown without a command."""
        assert run_cli(monkeypatch) == 1
        assert "usage" in capsys.readouterr().out
