"""Pytest configuration and shared layout fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest

from flexterm import Element, Size


SAMPLE_LAYOUT: dict[str, Any] = {
    "flexbox": {
        "flow": "vertical",
        "align": "stretch",
        "items": [
            {"hrule": "="},
            {
                "flexbox": {
                    "flow": "horizontal",
                    "justify": "space-between",
                    "items": ["left", "right"],
                }
            },
            {"hrule": None},
        ],
    }
}


class StubElement(Element):
    """Element with a declared size that renders whatever lines it was given."""

    def __init__(self, size: Size, lines: list[str]) -> None:
        self._size = size
        self._lines = lines

    def size(self) -> Size:
        return self._size

    def render(self, height: int, width: int) -> list[str]:
        return list(self._lines)


@pytest.fixture
def sample_layout() -> dict[str, Any]:
    """Decoded sample layout: a split header between two rules."""
    return json.loads(json.dumps(SAMPLE_LAYOUT))


@pytest.fixture
def layout_file(tmp_path: Path, sample_layout: dict[str, Any]) -> Path:
    """Sample layout written to a JSON file."""
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(sample_layout), encoding="utf-8")
    return path


def assert_grid(lines: list[str], height: int, width: int) -> None:
    """Every render result must be exactly height x width characters."""
    assert len(lines) == height
    assert all(len(line) == width for line in lines), lines
