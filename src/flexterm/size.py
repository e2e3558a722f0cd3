"""Size algebra - per-axis sizing contracts and the combinators that fold them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from flexterm.errors import InvalidSizeError


class SizeComponent(ABC):
    """
    Sizing behaviour of a node along one axis.

    One of three variants:
    - Fixed(n): exactly n cells
    - Stretch(min): at least min cells, takes any extra space offered
    - MinMax(min, max): between min and max cells inclusive

    ``min`` is the minimum acceptable extent regardless of variant.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def min(self) -> int:
        """Minimum acceptable extent."""

    @property
    @abstractmethod
    def max(self) -> Optional[int]:
        """Upper bound, or None when the component is unbounded."""

    @property
    def is_flexible(self) -> bool:
        """True if the component can absorb space beyond its minimum."""
        upper = self.max
        return upper is None or upper > self.min

    def room(self, taken: int = 0) -> Optional[int]:
        """Extra cells still absorbable after ``taken`` extra were granted."""
        upper = self.max
        if upper is None:
            return None
        return max(0, upper - self.min - taken)

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Layout file form of this component."""

    def __str__(self) -> str:
        """Compact form: "3" for Fixed, "3+" for Stretch, "3..5" for MinMax."""
        if isinstance(self, Fixed):
            return str(self.min)
        if self.max is None:
            return f"{self.min}+"
        return f"{self.min}..{self.max}"

    @staticmethod
    def from_dict(data: dict[str, Any]) -> SizeComponent:
        """Parse ``{"fixed": n}``, ``{"stretch": min}`` or ``{"minmax": [min, max]}``."""
        if not isinstance(data, dict) or len(data) != 1:
            raise InvalidSizeError(f"Expected a single-key size component, got {data!r}")
        (kind, value), = data.items()
        if kind == "fixed":
            return Fixed(_extent(value))
        if kind == "stretch":
            return Stretch(_extent(value))
        if kind == "minmax":
            if not isinstance(value, (list, tuple)) or len(value) != 2:
                raise InvalidSizeError(f"minmax needs [min, max], got {value!r}")
            return MinMax(_extent(value[0]), _extent(value[1]))
        raise InvalidSizeError(f"Unknown size component: {kind!r}")


def _extent(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidSizeError(f"Extent must be an integer, got {value!r}")
    return value


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise InvalidSizeError(f"{name} must be >= 0, got {value}")


@dataclass(frozen=True, slots=True)
class Fixed(SizeComponent):
    """Exactly ``value`` cells."""
    value: int

    def __post_init__(self) -> None:
        _check_non_negative("Fixed value", self.value)

    @property
    def min(self) -> int:
        return self.value

    @property
    def max(self) -> Optional[int]:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        return {"fixed": self.value}


@dataclass(frozen=True, slots=True)
class Stretch(SizeComponent):
    """At least ``minimum`` cells; happily consumes more."""
    minimum: int = 0

    def __post_init__(self) -> None:
        _check_non_negative("Stretch minimum", self.minimum)

    @property
    def min(self) -> int:
        return self.minimum

    @property
    def max(self) -> Optional[int]:
        return None

    def to_dict(self) -> dict[str, Any]:
        return {"stretch": self.minimum}


@dataclass(frozen=True, slots=True)
class MinMax(SizeComponent):
    """Between ``minimum`` and ``maximum`` cells inclusive."""
    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        _check_non_negative("MinMax minimum", self.minimum)
        if self.minimum > self.maximum:
            raise InvalidSizeError(
                f"MinMax minimum ({self.minimum}) exceeds maximum ({self.maximum})"
            )

    @property
    def min(self) -> int:
        return self.minimum

    @property
    def max(self) -> Optional[int]:
        return self.maximum

    def to_dict(self) -> dict[str, Any]:
        return {"minmax": [self.minimum, self.maximum]}


def combine_sequential(a: SizeComponent, b: SizeComponent) -> SizeComponent:
    """
    Size of two components placed one after another along an axis.

    Fixed + Fixed stays Fixed, anything involving Stretch becomes Stretch,
    and a MinMax absorbs a Fixed neighbour into both of its bounds.
    """
    if isinstance(a, Stretch) or isinstance(b, Stretch):
        return Stretch(a.min + b.min)
    if isinstance(a, Fixed) and isinstance(b, Fixed):
        return Fixed(a.value + b.value)
    # Remaining pairs all have at least one MinMax and finite bounds
    return MinMax(a.min + b.min, a.max + b.max)


def combine_parallel(a: SizeComponent, b: SizeComponent) -> SizeComponent:
    """
    Size of two components sharing the same extent on the cross axis.

    The result needs the larger minimum; mixed variants degrade toward the
    more flexible one (Stretch over everything, MinMax over Fixed).
    """
    if isinstance(a, Stretch) or isinstance(b, Stretch):
        return Stretch(max(a.min, b.min))
    if isinstance(a, Fixed) and isinstance(b, Fixed):
        return Fixed(max(a.value, b.value))
    return MinMax(max(a.min, b.min), max(a.max, b.max))


@dataclass(frozen=True, slots=True)
class Size:
    """Two-axis sizing contract: what a node needs and how it grows."""
    height: SizeComponent
    width: SizeComponent

    @classmethod
    def fixed(cls, height: int, width: int) -> Size:
        return cls(Fixed(height), Fixed(width))

    def minimal(self) -> Size:
        """This size with both axes pinned to their minimum."""
        return Size(Fixed(self.height.min), Fixed(self.width.min))

    def to_dict(self) -> dict[str, Any]:
        return {"height": self.height.to_dict(), "width": self.width.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Size:
        try:
            height, width = data["height"], data["width"]
        except (KeyError, TypeError) as e:
            raise InvalidSizeError(f"Size needs 'height' and 'width': {data!r}") from e
        return cls(SizeComponent.from_dict(height), SizeComponent.from_dict(width))

    def __str__(self) -> str:
        return f"{self.height} x {self.width}"
