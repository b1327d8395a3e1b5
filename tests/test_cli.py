"""Tests for the command line entry point."""

import pytest

from pomogauge import __main__ as cli
from pomogauge.errors import TerminalError
from pomogauge.scheduler import Idle


@pytest.fixture
def captured(monkeypatch):
    """Replace the UI with a stub that records the session it was given."""
    sessions = []

    def fake_run_ui(session):
        sessions.append(session)
        return 0

    monkeypatch.setattr(cli, "run_ui", fake_run_ui)
    return sessions


class TestArguments:
    """Test argument parsing."""

    def test_defaults(self):
        args = cli.build_parser().parse_args([])
        assert (args.work, args.short, args.long, args.cycles) == (25, 5, 20, 4)
        assert args.dark_mode is False
        assert args.log_file is None

    def test_short_flags(self):
        args = cli.build_parser().parse_args(["-w", "50", "-s", "10", "-l", "30", "-c", "2"])
        assert (args.work, args.short, args.long, args.cycles) == (50, 10, 30, 2)

    def test_non_integer_rejected(self):
        with pytest.raises(SystemExit) as exc:
            cli.build_parser().parse_args(["--work", "ten"])
        assert exc.value.code == 2


class TestMain:
    """Test main() exit paths."""

    def test_runs_idle_session(self, captured):
        """The UI receives a fresh idle session built from the arguments."""
        assert cli.main(["--work", "40", "--cycles", "3", "--dark-mode"]) == 0

        (session,) = captured
        assert session.phase == Idle()
        assert session.settings.work_duration_ms == 40 * 60_000
        assert session.settings.cycles_per_set == 3
        assert session.settings.dark_mode is True

    @pytest.mark.parametrize("flag", ["--work", "--short", "--long", "--cycles"])
    def test_non_positive_is_usage_error(self, captured, flag, capsys):
        """Invalid settings exit before the UI starts."""
        with pytest.raises(SystemExit) as exc:
            cli.main([flag, "0"])
        assert exc.value.code == 2
        assert "positive" in capsys.readouterr().err
        assert captured == []

    def test_terminal_error(self, monkeypatch, capsys):
        """Terminal failures are reported and exit with status 1."""

        def broken_run_ui(session):
            raise TerminalError("terminal I/O failed: bad fd")

        monkeypatch.setattr(cli, "run_ui", broken_run_ui)
        assert cli.main([]) == 1
        assert "bad fd" in capsys.readouterr().err

    def test_keyboard_interrupt(self, monkeypatch):
        def interrupted(session):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "run_ui", interrupted)
        assert cli.main([]) == 0

    def test_log_file(self, captured, tmp_path):
        """A log file path is accepted and the UI still runs."""
        log_file = tmp_path / "pomogauge.log"
        assert cli.main(["--log-file", str(log_file)]) == 0
        assert len(captured) == 1
