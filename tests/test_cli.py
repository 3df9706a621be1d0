"""Tests for the md-reader command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from mdreader import __version__
from mdreader.cli.main import EXIT_NOT_FOUND, EXIT_USAGE, EXIT_WATCH_SETUP, app
from mdreader.errors import WatchSetupError
from mdreader.watcher import ChangeWatcher

runner = CliRunner()


class FakeUvicorn:
    """Stands in for uvicorn.run and remembers the app it was given."""

    def __init__(self) -> None:
        self.calls: list[dict] = []

    def __call__(self, server_app, **kwargs) -> None:
        self.calls.append({"app": server_app, **kwargs})

    @property
    def app(self):
        return self.calls[-1]["app"]


@pytest.fixture
def fake_uvicorn(monkeypatch: pytest.MonkeyPatch) -> FakeUvicorn:
    fake = FakeUvicorn()
    monkeypatch.setattr("mdreader.cli.main.uvicorn.run", fake)
    monkeypatch.setattr("mdreader.cli.main.webbrowser.open", lambda url: True)
    return fake


def flat(output: str) -> str:
    return output.replace("\n", "")


class TestStartupErrors:
    def test_no_path_prints_usage(self, fake_uvicorn: FakeUvicorn) -> None:
        result = runner.invoke(app, [])

        assert result.exit_code == EXIT_USAGE
        assert "Usage: md-reader <file.md>" in result.output
        assert fake_uvicorn.calls == []

    def test_no_path_does_not_resolve(
        self, fake_uvicorn: FakeUvicorn, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fail(*args, **kwargs):
            raise AssertionError("filesystem accessed")

        monkeypatch.setattr("mdreader.resolver.path_resolver.require_existing", fail)

        assert runner.invoke(app, []).exit_code == EXIT_USAGE

    def test_missing_file(
        self, fake_uvicorn: FakeUvicorn, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["missing.md", "--no-open"])

        assert result.exit_code == EXIT_NOT_FOUND
        assert "File not found" in flat(result.output)
        assert "missing.md" in flat(result.output)
        assert fake_uvicorn.calls == []

    def test_invalid_theme(self, fake_uvicorn: FakeUvicorn, md_file: Path) -> None:
        result = runner.invoke(app, [str(md_file), "--theme", "neon", "--no-open"])

        assert result.exit_code == EXIT_USAGE
        assert "Invalid theme" in flat(result.output)

    def test_unknown_log_level(self, fake_uvicorn: FakeUvicorn, md_file: Path) -> None:
        result = runner.invoke(app, [str(md_file), "--no-open", "--log-level", "verbose"])

        assert result.exit_code == EXIT_USAGE
        assert not isinstance(result.exception, ValueError)
        assert "Configuration error" in flat(result.output)
        assert "Invalid log level: verbose" in flat(result.output)
        assert fake_uvicorn.calls == []

    def test_server_failure_exits_cleanly(
        self, md_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def crash(server_app, **kwargs):
            raise RuntimeError("lifespan exploded")

        monkeypatch.setattr("mdreader.cli.main.uvicorn.run", crash)

        result = runner.invoke(app, [str(md_file), "--no-open"])

        assert result.exit_code == 1
        assert "lifespan exploded" in flat(result.output)

    def test_watch_setup_failure_is_fatal(
        self, fake_uvicorn: FakeUvicorn, md_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def broken_start(self):
            raise WatchSetupError(self.watch_dir, "permission denied")

        monkeypatch.setattr(ChangeWatcher, "start", broken_start)

        result = runner.invoke(app, [str(md_file), "--no-open"])

        assert result.exit_code == EXIT_WATCH_SETUP
        assert "permission denied" in flat(result.output)
        assert fake_uvicorn.calls == []


class TestServe:
    def test_absolute_path(self, fake_uvicorn: FakeUvicorn, md_file: Path) -> None:
        result = runner.invoke(app, [str(md_file), "--no-open", "--port", "8123"])

        assert result.exit_code == 0, result.output
        call = fake_uvicorn.calls[0]
        assert call["port"] == 8123
        assert call["host"] == "127.0.0.1"
        assert fake_uvicorn.app.state.config.file_path == md_file

    def test_relative_path_found_in_parent(
        self, fake_uvicorn: FakeUvicorn, md_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        nested = md_file.parent / "src-app"
        nested.mkdir()
        monkeypatch.chdir(nested)

        result = runner.invoke(app, ["notes.md", "--no-open"])

        assert result.exit_code == 0, result.output
        assert fake_uvicorn.app.state.config.file_path == md_file.resolve()

    def test_watcher_is_stopped_after_server_exits(
        self, fake_uvicorn: FakeUvicorn, md_file: Path
    ) -> None:
        runner.invoke(app, [str(md_file), "--no-open"])

        watcher = fake_uvicorn.app.state.watcher
        assert watcher is not None
        assert watcher.is_running is False

    def test_no_reload_skips_watcher(self, fake_uvicorn: FakeUvicorn, md_file: Path) -> None:
        result = runner.invoke(app, [str(md_file), "--no-open", "--no-reload"])

        assert result.exit_code == 0, result.output
        assert fake_uvicorn.app.state.watcher is None

    def test_log_level_is_passed_to_uvicorn(self, fake_uvicorn: FakeUvicorn, md_file: Path) -> None:
        runner.invoke(app, [str(md_file), "--no-open", "--log-level", "DEBUG"])
        assert fake_uvicorn.calls[0]["log_level"] == "debug"


def test_version() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
