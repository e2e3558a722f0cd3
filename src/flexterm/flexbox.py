"""Flexbox - a container laying out child elements along one axis.

A Flexbox reports its size by folding its children's sizes (sequentially
along the flow axis, in parallel across it) and, when rendered, splits the
offered rectangle among them according to its justify and align policies.

Rendering recurses once per nesting level, so very deep trees are limited
by the interpreter's recursion limit; keeping trees shallow is up to the
caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Iterable

from flexterm.block import (
    blank_block,
    fit_block,
    join_horizontal,
    place_block,
    stack_vertical,
)
from flexterm.distribute import align_offset, allocate_leftover, justify_gaps
from flexterm.element import Element, as_element, check_space
from flexterm.policy import ContentAlign, ContentJustify, Flow
from flexterm.size import (
    Fixed,
    Size,
    SizeComponent,
    Stretch,
    combine_parallel,
    combine_sequential,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Flexbox(Element):
    """
    A container for an arbitrary number of elements.

    ``justify_content`` controls where children sit along the flow axis
    when there is room to spare, ``align_content`` where they sit across
    it. See ContentJustify and ContentAlign.

    Build one with ``vertical()`` / ``horizontal()`` or FlexboxBuilder:
        >>> box = (vertical()
        ...     .justify_content(ContentJustify.SPACE_BETWEEN)
        ...     .add_item("top")
        ...     .add_item("bottom")
        ...     .build())
        >>> box.render(4, 6)
        ['top   ', '      ', '      ', 'bottom']
    """
    children: tuple[Element, ...] = ()
    flow: Flow = Flow.VERTICAL
    justify_content: ContentJustify = ContentJustify.START
    align_content: ContentAlign = ContentAlign.START

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(as_element(c) for c in self.children))

    @property
    def is_vertical(self) -> bool:
        return self.flow is Flow.VERTICAL

    def size(self) -> Size:
        flow_base = Stretch(0) if self.justify_content.is_flexible else Fixed(0)
        cross_base = Stretch(0) if self.align_content.is_flexible else Fixed(0)

        sizes = [child.size() for child in self.children]
        flow_size = reduce(combine_sequential, (self._flow_of(s) for s in sizes), flow_base)
        cross_size = reduce(combine_parallel, (self._cross_of(s) for s in sizes), cross_base)

        if self.is_vertical:
            return Size(height=flow_size, width=cross_size)
        return Size(height=cross_size, width=flow_size)

    def render(self, height: int, width: int) -> list[str]:
        check_space(self.size(), height, width)
        if not self.children:
            return blank_block(height, width)

        flow_extent, cross_extent = (height, width) if self.is_vertical else (width, height)
        sizes = [child.size() for child in self.children]

        # Flow axis: minimums first, then leftover to flexible children
        flow_components = [self._flow_of(s) for s in sizes]
        leftover = flow_extent - sum(c.min for c in flow_components)
        extras, remaining = allocate_leftover(flow_components, leftover)
        gaps = justify_gaps(self.justify_content, remaining, len(self.children))
        logger.debug(
            "%s flexbox %dx%d: leftover=%d extras=%s gaps=%s",
            self.flow.value, height, width, leftover, extras, gaps,
        )

        pieces: list[list[str]] = []
        for index, (child, size) in enumerate(zip(self.children, sizes)):
            child_flow = flow_components[index].min + extras[index]
            if self.align_content.is_flexible:
                child_cross = cross_extent
            else:
                child_cross = self._cross_of(size).min

            pieces.append(self._gap(gaps[index], cross_extent))
            pieces.append(self._render_child(child, child_flow, child_cross, cross_extent))
        pieces.append(self._gap(gaps[-1], cross_extent))

        if self.is_vertical:
            return stack_vertical(pieces)
        return join_horizontal(pieces, height)

    def _render_child(
        self,
        child: Element,
        child_flow: int,
        child_cross: int,
        cross_extent: int,
    ) -> list[str]:
        """Render one child and position it within its full cross-axis slot."""
        if self.is_vertical:
            block = fit_block(child.render(child_flow, child_cross), child_flow, child_cross)
        else:
            block = fit_block(child.render(child_cross, child_flow), child_cross, child_flow)

        spare = cross_extent - child_cross
        before = align_offset(self.align_content, spare)
        after = spare - before
        if self.is_vertical:
            return place_block(block, child_cross, left=before, right=after)
        return place_block(block, child_flow, top=before, bottom=after)

    def _gap(self, extent: int, cross_extent: int) -> list[str]:
        """Blank space of ``extent`` cells along the flow axis."""
        if self.is_vertical:
            return blank_block(extent, cross_extent)
        return blank_block(cross_extent, extent)

    def _flow_of(self, size: Size) -> SizeComponent:
        return size.height if self.is_vertical else size.width

    def _cross_of(self, size: Size) -> SizeComponent:
        return size.width if self.is_vertical else size.height


@dataclass
class FlexboxBuilder:
    """
    Fluent API for assembling a Flexbox.

    Example:
        >>> box = (FlexboxBuilder()
        ...     .flow(Flow.HORIZONTAL)
        ...     .align_content(ContentAlign.CENTER)
        ...     .add_item("left")
        ...     .add_item(VerticalRule())
        ...     .add_item("right")
        ...     .build())
    """
    _flow: Flow = Flow.VERTICAL
    _justify: ContentJustify = ContentJustify.START
    _align: ContentAlign = ContentAlign.START
    _items: list[Element] = field(default_factory=list)

    def flow(self, flow: Flow) -> FlexboxBuilder:
        """Set the direction children are laid out in."""
        self._flow = flow
        return self

    def justify_content(self, justify: ContentJustify) -> FlexboxBuilder:
        """Set placement along the flow axis."""
        self._justify = justify
        return self

    def align_content(self, align: ContentAlign) -> FlexboxBuilder:
        """Set placement across the flow axis."""
        self._align = align
        return self

    def add_item(self, item: Any) -> FlexboxBuilder:
        """Append a child; non-Element values become Text."""
        self._items.append(as_element(item))
        return self

    def add_items(self, items: Iterable[Any]) -> FlexboxBuilder:
        """Append several children in order."""
        for item in items:
            self.add_item(item)
        return self

    def build(self) -> Flexbox:
        """Freeze the current configuration into a Flexbox."""
        return Flexbox(
            children=tuple(self._items),
            flow=self._flow,
            justify_content=self._justify,
            align_content=self._align,
        )


def vertical() -> FlexboxBuilder:
    """Start building a top-to-bottom Flexbox."""
    return FlexboxBuilder(_flow=Flow.VERTICAL)


def horizontal() -> FlexboxBuilder:
    """Start building a left-to-right Flexbox."""
    return FlexboxBuilder(_flow=Flow.HORIZONTAL)
