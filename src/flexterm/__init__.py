"""
flexterm: flexbox-style layout for terminal text blocks

Compose rectangular blocks of text into a tree, compute how much space
each node needs, and render the tree into a fixed-size character grid.

Quick Start:
    >>> import flexterm as ft
    >>> box = (ft.horizontal()
    ...     .justify_content(ft.ContentJustify.SPACE_EVEN)
    ...     .align_content(ft.ContentAlign.STRETCH)
    ...     .add_item("left")
    ...     .add_item(ft.VerticalRule())
    ...     .add_item("right")
    ...     .build())
    >>> print(box.render_text(1, 16))
      left  │ right

Features:
    - Size algebra with Fixed, Stretch and MinMax components
    - Vertical and horizontal containers with justify/align policies
    - Text, spacer, rule and size-pinning leaf elements
    - JSON layout files and a small CLI (`flexterm render layout.json`)
"""

__version__ = "0.1.0"

# Size algebra
from flexterm.size import (
    Fixed,
    MinMax,
    Size,
    SizeComponent,
    Stretch,
    combine_parallel,
    combine_sequential,
)

# Elements
from flexterm.element import (
    Element,
    HorizontalRule,
    Minimal,
    Spacer,
    Text,
    VerticalRule,
    as_element,
)
from flexterm.flexbox import Flexbox, FlexboxBuilder, horizontal, vertical
from flexterm.policy import ContentAlign, ContentJustify, Flow

# Errors
from flexterm.errors import (
    FlexError,
    InsufficientSpaceError,
    InvalidSizeError,
    LayoutFileError,
)

# Layout files
from flexterm.layout_file import dumps_layout, load_layout, loads_layout

__all__ = [
    # Version
    "__version__",
    # Size algebra
    "Fixed",
    "MinMax",
    "Size",
    "SizeComponent",
    "Stretch",
    "combine_parallel",
    "combine_sequential",
    # Elements
    "Element",
    "HorizontalRule",
    "Minimal",
    "Spacer",
    "Text",
    "VerticalRule",
    "as_element",
    "Flexbox",
    "FlexboxBuilder",
    "horizontal",
    "vertical",
    "ContentAlign",
    "ContentJustify",
    "Flow",
    # Errors
    "FlexError",
    "InsufficientSpaceError",
    "InvalidSizeError",
    "LayoutFileError",
    # Layout files
    "dumps_layout",
    "load_layout",
    "loads_layout",
]
