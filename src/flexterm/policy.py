"""Flow direction and content distribution policies for containers."""

from enum import Enum


class Flow(Enum):
    """Direction children are laid out in."""
    VERTICAL = "vertical"      # Top to bottom, flow axis = height
    HORIZONTAL = "horizontal"  # Left to right, flow axis = width


class ContentJustify(Enum):
    """
    Placement of children along the flow axis when there is spare room.

    - START: at the top for vertical flow, at the left for horizontal flow
    - END: at the bottom for vertical flow, at the right for horizontal flow
    - CENTER: in the middle of the container
    - SPACE_BETWEEN: spare room goes in between children
    - SPACE_AROUND: spare room goes before and after each child
    - SPACE_EVEN: spare room goes in between and around children equally
    - STRETCH: the container itself becomes flexible along the flow axis
    """
    START = "start"
    CENTER = "center"
    END = "end"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVEN = "space-even"
    STRETCH = "stretch"

    @property
    def is_flexible(self) -> bool:
        return self is ContentJustify.STRETCH


class ContentAlign(Enum):
    """
    Placement of children across the flow axis.

    - START: at the left for vertical flow, at the top for horizontal flow
    - END: at the right for vertical flow, at the bottom for horizontal flow
    - CENTER: in the middle, the leading side takes the odd cell
    - STRETCH: every child gets the full cross extent
    """
    START = "start"
    CENTER = "center"
    END = "end"
    STRETCH = "stretch"

    @property
    def is_flexible(self) -> bool:
        return self is ContentAlign.STRETCH
