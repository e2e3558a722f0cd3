"""Load and save element trees as JSON layout descriptions.

Each node is a single-key object naming its element kind:

{
  "flexbox": {
    "flow": "vertical",
    "justify": "space-between",
    "align": "center",
    "items": [
      "plain text is a text node",
      {"text": "so is this"},
      {"hrule": "═"},
      {"vrule": null},
      {"spacer": {"height": {"fixed": 1}, "width": {"stretch": 0}}},
      {"minimal": {"flexbox": {"items": []}}}
    ]
  }
}

Rules with a null (or missing) character use the defaults from Settings.
Size components are {"fixed": n}, {"stretch": min} or {"minmax": [min, max]}.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from flexterm.config import Settings
from flexterm.element import (
    Element,
    HorizontalRule,
    Minimal,
    Spacer,
    Text,
    VerticalRule,
)
from flexterm.errors import InvalidSizeError, LayoutFileError
from flexterm.flexbox import Flexbox
from flexterm.policy import ContentAlign, ContentJustify, Flow
from flexterm.size import Size

logger = logging.getLogger(__name__)

NODE_KINDS = ("text", "spacer", "hrule", "vrule", "minimal", "flexbox")


def element_from_dict(
    node: Any,
    settings: Optional[Settings] = None,
    where: str = "$",
) -> Element:
    """Build an element tree from a decoded layout description."""
    settings = settings or Settings()

    if isinstance(node, str):
        return Text(node)
    if not isinstance(node, dict) or len(node) != 1:
        raise LayoutFileError("expected a string or a single-key object", where)

    (kind, body), = node.items()
    if kind not in NODE_KINDS:
        raise LayoutFileError(f"unknown node kind {kind!r} (expected one of {', '.join(NODE_KINDS)})", where)
    where = f"{where}.{kind}"

    if kind == "text":
        if not isinstance(body, str):
            raise LayoutFileError("text must be a string", where)
        return Text(body)

    if kind == "spacer":
        try:
            return Spacer(Size.from_dict(body))
        except InvalidSizeError as e:
            raise LayoutFileError(str(e), where) from e

    if kind in ("hrule", "vrule"):
        default = settings.horizontal_rule if kind == "hrule" else settings.vertical_rule
        rule = HorizontalRule if kind == "hrule" else VerticalRule
        try:
            return rule(default if body is None else body)
        except ValueError as e:
            raise LayoutFileError(str(e), where) from e

    if kind == "minimal":
        return Minimal(element_from_dict(body, settings, where))

    return _flexbox_from_dict(body, settings, where)


def _flexbox_from_dict(body: Any, settings: Settings, where: str) -> Flexbox:
    if not isinstance(body, dict):
        raise LayoutFileError("flexbox must be an object", where)

    unknown = set(body) - {"flow", "justify", "align", "items"}
    if unknown:
        raise LayoutFileError(f"unknown flexbox keys: {', '.join(sorted(unknown))}", where)

    flow = _enum_value(Flow, body.get("flow", "vertical"), f"{where}.flow")
    justify = _enum_value(ContentJustify, body.get("justify", "start"), f"{where}.justify")
    align = _enum_value(ContentAlign, body.get("align", "start"), f"{where}.align")

    items = body.get("items", [])
    if not isinstance(items, list):
        raise LayoutFileError("items must be a list", f"{where}.items")

    children = tuple(
        element_from_dict(item, settings, f"{where}.items[{i}]")
        for i, item in enumerate(items)
    )
    return Flexbox(children=children, flow=flow, justify_content=justify, align_content=align)


def _enum_value(enum_type: Any, value: Any, where: str) -> Any:
    try:
        return enum_type(value)
    except ValueError as e:
        choices = ", ".join(member.value for member in enum_type)
        raise LayoutFileError(f"invalid value {value!r} (expected one of {choices})", where) from e


def element_to_dict(element: Element) -> Any:
    """Describe an element tree in the layout file format."""
    if isinstance(element, Text):
        return {"text": element.content}
    if isinstance(element, Spacer):
        return {"spacer": element.size().to_dict()}
    if isinstance(element, HorizontalRule):
        return {"hrule": element.char}
    if isinstance(element, VerticalRule):
        return {"vrule": element.char}
    if isinstance(element, Minimal):
        return {"minimal": element_to_dict(element.child)}
    if isinstance(element, Flexbox):
        return {
            "flexbox": {
                "flow": element.flow.value,
                "justify": element.justify_content.value,
                "align": element.align_content.value,
                "items": [element_to_dict(child) for child in element.children],
            }
        }
    raise LayoutFileError(f"cannot describe {type(element).__name__} in a layout file")


def loads_layout(text: str, settings: Optional[Settings] = None) -> Element:
    """Parse a JSON layout description."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LayoutFileError(f"invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    return element_from_dict(data, settings)


def load_layout(path: str | Path, settings: Optional[Settings] = None) -> Element:
    """Load a JSON layout description from disk."""
    path = Path(path)
    logger.debug("Loading layout from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise LayoutFileError(f"not valid UTF-8 (byte {e.start})") from e
    except OSError as e:
        raise LayoutFileError(f"cannot read {path}: {e.strerror or e}") from e
    return loads_layout(text, settings)


def dumps_layout(element: Element, indent: int = 2) -> str:
    """Serialize an element tree to JSON."""
    return json.dumps(element_to_dict(element), indent=indent, ensure_ascii=False)
