"""Tests for the command line front end."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from flexterm.cli import create_app
from flexterm.layout_file import load_layout


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def app():
    return create_app()


class TestRender:
    """Tests for `flexterm render`."""

    def test_minimal(self, runner, app, layout_file: Path) -> None:
        result = runner.invoke(app, ["render", str(layout_file)])
        assert result.exit_code == 0, result.output
        assert "=========\nleftright\n─────────" in result.stdout

    def test_with_width(self, runner, app, layout_file: Path) -> None:
        result = runner.invoke(app, ["render", str(layout_file), "--width", "12"])
        assert result.exit_code == 0, result.output
        assert "left   right" in result.stdout

    def test_insufficient_space(self, runner, app, layout_file: Path) -> None:
        result = runner.invoke(app, ["render", str(layout_file), "--width", "3"])
        assert result.exit_code == 1
        assert "Cannot render" in result.output

    def test_invalid_layout(self, runner, app, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"flexbox": {"flow": "diagonal"}}', encoding="utf-8")
        result = runner.invoke(app, ["render", str(path)])
        assert result.exit_code == 1
        assert "Invalid layout file" in result.output

    def test_non_utf8_layout(self, runner, app, tmp_path: Path) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"text": "\xff\xfe"}')
        result = runner.invoke(app, ["render", str(path)])
        assert result.exit_code == 1
        assert "Invalid layout file" in result.output
        assert "UTF-8" in result.output

    def test_missing_file(self, runner, app, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", str(tmp_path / "nope.json")])
        assert result.exit_code != 0


class TestSize:
    """Tests for `flexterm size`."""

    def test_json(self, runner, app, layout_file: Path) -> None:
        result = runner.invoke(app, ["size", str(layout_file), "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == {"height": {"fixed": 3}, "width": {"stretch": 9}}

    def test_text(self, runner, app, layout_file: Path) -> None:
        result = runner.invoke(app, ["size", str(layout_file)])
        assert result.exit_code == 0, result.output
        assert "height: 3" in result.stdout
        assert "width:  9+" in result.stdout


class TestDemo:
    """Tests for `flexterm demo`."""

    def test_renders(self, runner, app) -> None:
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0, result.output
        assert "nuh-uh!" in result.stdout
        assert "╯" in result.stdout

    def test_size(self, runner, app) -> None:
        result = runner.invoke(app, ["demo", "--size"])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "13+ x 27+"

    def test_extent(self, runner, app) -> None:
        result = runner.invoke(app, ["demo", "--height", "15", "--width", "30"])
        assert result.exit_code == 0, result.output
        lines = result.stdout.rstrip("\n").split("\n")
        assert len(lines) == 15
        assert all(len(line) == 30 for line in lines)

    def test_export(self, runner, app, tmp_path: Path) -> None:
        path = tmp_path / "demo.json"
        result = runner.invoke(app, ["demo", "--export", str(path)])
        assert result.exit_code == 0, result.output
        assert load_layout(path).size().width.min == 27

    def test_verbose(self, runner, app) -> None:
        result = runner.invoke(app, ["--verbose", "demo"])
        assert result.exit_code == 0, result.output
        assert "nuh-uh!" in result.stdout


class TestEnvironment:
    """Settings picked up from FLEXTERM_* variables."""

    def test_rule_override(self, runner, app) -> None:
        result = runner.invoke(app, ["demo"], env={"FLEXTERM_HRULE": "~"})
        assert result.exit_code == 0, result.output
        assert "~" in result.stdout

    def test_invalid_log_level(self, runner, app) -> None:
        result = runner.invoke(app, ["demo", "--size"], env={"FLEXTERM_LOG_LEVEL": "loud"})
        assert result.exit_code == 1
        assert "Invalid environment settings" in result.output
        assert "Traceback" not in result.output

    def test_invalid_rule_character(self, runner, app) -> None:
        result = runner.invoke(app, ["demo"], env={"FLEXTERM_VRULE": "||"})
        assert result.exit_code == 1
        assert "Invalid environment settings" in result.output
