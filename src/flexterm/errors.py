"""Exceptions raised by the layout engine."""

from __future__ import annotations


class FlexError(Exception):
    """Base class for all flexterm errors."""


class InvalidSizeError(FlexError, ValueError):
    """A size component was built with impossible bounds."""


class InsufficientSpaceError(FlexError, ValueError):
    """An element was asked to render into less space than it needs."""

    def __init__(self, axis: str, required: int, available: int) -> None:
        self.axis = axis
        self.required = required
        self.available = available
        super().__init__(
            f"insufficient space: {axis} needs {required}, got {available} "
            f"(short by {self.deficit})"
        )

    @property
    def deficit(self) -> int:
        return self.required - self.available


class LayoutFileError(FlexError, ValueError):
    """A layout description could not be turned into an element tree."""

    def __init__(self, message: str, where: str = "$") -> None:
        self.where = where
        super().__init__(f"{where}: {message}")
