"""Element capability and the leaf elements built on it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from flexterm.block import blank_block, to_text
from flexterm.errors import InsufficientSpaceError
from flexterm.size import Fixed, Size, Stretch


class Element(ABC):
    """
    Anything that can report a Size and render itself into a text block.

    Third parties add new element kinds by subclassing. ``render`` receives
    the concrete extent chosen by the parent and returns a list of lines.
    Offering less than ``size()``'s minimum raises InsufficientSpaceError.
    """

    @abstractmethod
    def size(self) -> Size:
        """Sizing contract of this element."""

    @abstractmethod
    def render(self, height: int, width: int) -> list[str]:
        """Render into at most ``height`` lines of ``width`` characters."""

    def render_minimal(self) -> list[str]:
        """Render at the element's own minimum size."""
        size = self.size()
        return self.render(size.height.min, size.width.min)

    def render_text(self, height: Optional[int] = None, width: Optional[int] = None) -> str:
        """Render to a printable string; omitted extents fall back to the minimum."""
        size = self.size()
        return to_text(self.render(
            size.height.min if height is None else height,
            size.width.min if width is None else width,
        ))


def check_space(size: Size, height: int, width: int) -> None:
    """Raise InsufficientSpaceError if (height, width) is below the minimum of ``size``."""
    if height < size.height.min:
        raise InsufficientSpaceError("height", size.height.min, height)
    if width < size.width.min:
        raise InsufficientSpaceError("width", size.width.min, width)


def as_element(value: Any) -> Element:
    """Use ``value`` as an Element, wrapping anything else as Text."""
    if isinstance(value, Element):
        return value
    return Text(value)


def _split_lines(text: str) -> list[str]:
    """Split on newlines only; CRLF endings lose their carriage return, no trailing empty line."""
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class Text(Element):
    """Plain text; sized to the bounding box of its lines and rendered verbatim."""

    def __init__(self, content: Any) -> None:
        self.content = str(content)
        self._lines = _split_lines(self.content)

    def size(self) -> Size:
        return Size.fixed(len(self._lines), max((len(line) for line in self._lines), default=0))

    def render(self, height: int, width: int) -> list[str]:
        check_space(self.size(), height, width)
        return list(self._lines)

    def __repr__(self) -> str:
        return f"Text({self.content!r})"


class Spacer(Element):
    """Blank filler with an arbitrary declared size."""

    def __init__(self, size: Size) -> None:
        self._size = size

    def size(self) -> Size:
        return self._size

    def render(self, height: int, width: int) -> list[str]:
        check_space(self._size, height, width)
        return blank_block(height, width)

    def __repr__(self) -> str:
        return f"Spacer({self._size})"


def _single_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"Rule character must be a single character, got {char!r}")
    return char


class HorizontalRule(Element):
    """One line of a repeated character spanning the offered width."""

    def __init__(self, char: str = '─') -> None:
        self.char = _single_char(char)

    def size(self) -> Size:
        return Size(Fixed(1), Stretch(0))

    def render(self, height: int, width: int) -> list[str]:
        check_space(self.size(), height, width)
        return [self.char * width]

    def __repr__(self) -> str:
        return f"HorizontalRule({self.char!r})"


class VerticalRule(Element):
    """A one-character column spanning the offered height."""

    def __init__(self, char: str = '│') -> None:
        self.char = _single_char(char)

    def size(self) -> Size:
        return Size(Stretch(0), Fixed(1))

    def render(self, height: int, width: int) -> list[str]:
        check_space(self.size(), height, width)
        return [self.char for _ in range(height)]

    def __repr__(self) -> str:
        return f"VerticalRule({self.char!r})"


class Minimal(Element):
    """
    Pins a child to its minimum size.

    Useful for keeping a flexible subtree (such as a stretching Flexbox)
    from growing inside a larger stretch context.

    Example:
        >>> from flexterm import Minimal, vertical, ContentJustify
        >>> box = vertical().justify_content(ContentJustify.STRETCH).add_item("hi").build()
        >>> str(box.size())
        '1+ x 2'
        >>> str(Minimal(box).size())
        '1 x 2'
    """

    def __init__(self, child: Any) -> None:
        self.child = as_element(child)

    def size(self) -> Size:
        return self.child.size().minimal()

    def render(self, height: int, width: int) -> list[str]:
        check_space(self.size(), height, width)
        return self.child.render_minimal()

    def __repr__(self) -> str:
        return f"Minimal({self.child!r})"
