"""
Tests for mdslides.cli
"""

import logging

import pytest

from mdslides import __version__, cli
from mdslides.errors import TerminalError
from mdslides.ui.app import SlideshowApp
from mdslides.utils.config import Config


@pytest.fixture
def shown(monkeypatch):
    """Record presentations instead of opening a terminal."""
    presentations = []

    def fake_run(self):
        presentations.append(self.presentation)

    monkeypatch.setattr(SlideshowApp, "run", fake_run)
    return presentations


class TestMain:

    def test_no_arguments_prints_help(self, capsys, shown):
        assert cli.main([]) == 2
        assert "usage: mdslides" in capsys.readouterr().out
        assert shown == []

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_runs_slideshow(self, sample_file, shown):
        assert cli.main([str(sample_file)]) == 0
        assert len(shown) == 1
        assert shown[0].title == "Title"

    def test_missing_file(self, tmp_path, capsys, shown):
        assert cli.main([str(tmp_path / "nope.md")]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: Cannot read")
        assert shown == []

    def test_terminal_error(self, sample_file, capsys, monkeypatch):
        def broken_run(self):
            raise TerminalError("Terminal operation failed")

        monkeypatch.setattr(SlideshowApp, "run", broken_run)
        assert cli.main([str(sample_file)]) == 1
        assert "Terminal operation failed" in capsys.readouterr().err

    def test_invalid_config(self, sample_file, capsys, monkeypatch, shown):
        monkeypatch.setattr(Config, "POLL_INTERVAL_MS", 0)
        assert cli.main([str(sample_file)]) == 1
        assert "MDSLIDES_POLL_INTERVAL_MS" in capsys.readouterr().err
        assert shown == []


class TestSetupLogging:

    def test_without_file_configures_nothing(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        cli.setup_logging(None)
        assert calls == []

    def test_log_file(self, tmp_path, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        cli.setup_logging(str(tmp_path / "run.log"), verbose=True)
        assert calls[0]["filename"] == str(tmp_path / "run.log")
        assert calls[0]["level"] == logging.DEBUG
