"""Integration tests for the command-line entry point."""

import io
from unittest.mock import patch

import pytest

from healthprod.__main__ import main, parse_args
from healthprod.app import HealthProdApp
from healthprod.navigation import Page


class TestParseArgs:
    """Tests for parse_args()."""

    def test_defaults(self) -> None:
        args = parse_args([])
        assert args.profile is None
        assert args.mock is False
        assert args.transcripts is None

    def test_flags(self) -> None:
        args = parse_args(["--profile", "test", "--mock", "--demo", "--transcripts", "-"])
        assert args.profile == "test"
        assert args.mock is True
        assert args.demo is True
        assert args.transcripts == "-"

    def test_bad_profile(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--profile", "staging"])


class TestMain:
    """Tests for main()."""

    def test_dry_run(self) -> None:
        assert main(["--profile", "test", "--dry-run"]) == 0

    def test_missing_config(self, tmp_path) -> None:
        assert main(["--config", str(tmp_path / "nope.yaml")]) == 1

    def test_session_from_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("dashboard\nquit\n"))
        assert main(["--profile", "test", "--mock", "--demo"]) == 0
        out = capsys.readouterr().out
        assert "HealthProd - AI Life Companion" in out
        assert "Coins: 150" in out

    def test_transcripts_from_stdin_skip_shell(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("reminders\nhey ai add new task\n"))
        created: list[HealthProdApp] = []
        build = HealthProdApp.from_config

        def capture(*args, **kwargs) -> HealthProdApp:
            app = build(*args, **kwargs)
            created.append(app)
            return app

        monkeypatch.setattr(HealthProdApp, "from_config", staticmethod(capture))
        with patch("healthprod.app.shell.HealthProdShell") as shell:
            assert main(["--profile", "test", "--transcripts", "-"]) == 0

        shell.assert_not_called()
        assert "interactive shell disabled" in capsys.readouterr().out
        app = created[0]
        assert app.view.page == Page.TASKS
        assert app.listener.is_listening is False
