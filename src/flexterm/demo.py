"""Demo tree - a column of title cards separated by double rules."""

from __future__ import annotations

from typing import Optional

from flexterm.config import Settings
from flexterm.element import HorizontalRule, Spacer, VerticalRule
from flexterm.flexbox import Flexbox, horizontal, vertical
from flexterm.policy import ContentAlign
from flexterm.size import Fixed, Size, Stretch

DEMO_TITLES = (
    "nuh-uh!",
    "Layouts all the way down",
    "No you...\nNo you don't!",
)


def title_card(text: str, settings: Optional[Settings] = None) -> Flexbox:
    """
    Text framed by one blank column on each side, a rule on the right and a
    bottom line ending in a rounded corner.
    """
    settings = settings or Settings()
    padding = Size(Stretch(0), Fixed(1))

    content = (horizontal()
        .align_content(ContentAlign.STRETCH)
        .add_item(Spacer(padding))
        .add_item(text)
        .add_item(Spacer(padding))
        .add_item(VerticalRule(settings.vertical_rule))
        .build())

    last_line = (horizontal()
        .align_content(ContentAlign.STRETCH)
        .add_item(HorizontalRule(settings.horizontal_rule))
        .add_item('╯')
        .build())

    return (vertical()
        .align_content(ContentAlign.STRETCH)
        .add_item(content)
        .add_item(last_line)
        .build())


def build_demo(settings: Optional[Settings] = None, heading: str = "flexterm demo") -> Flexbox:
    """Heading and title cards stacked between full-width double rules."""
    builder = (vertical()
        .align_content(ContentAlign.STRETCH)
        .add_item(HorizontalRule('═'))
        .add_item(heading))

    for title in DEMO_TITLES:
        builder.add_item(HorizontalRule('═')).add_item(title_card(title, settings))

    return builder.add_item(HorizontalRule('═')).build()
