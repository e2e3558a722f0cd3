"""Typer CLI application: render layout files and the demo tree."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from flexterm.config import Settings
from flexterm.element import Element
from flexterm.errors import FlexError
from flexterm.log import configure_logging

logger = logging.getLogger(__name__)


def create_app(console: Optional[Console] = None) -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="flexterm",
        help="Lay out and render flexbox trees of text blocks.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = console or Console(stderr=True)

    @app.callback()
    def setup(
        ctx: typer.Context,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log layout decisions")] = False,
    ) -> None:
        """Lay out and render flexbox trees of text blocks."""
        try:
            settings = Settings.from_env()
        except ValueError as e:
            console.print(f"[red]Invalid environment settings: {escape(str(e))}[/]")
            raise typer.Exit(1)
        if verbose:
            settings.with_log_level("DEBUG")
        configure_logging(settings.log_level, console)
        ctx.obj = settings

    def emit(element: Element, height: Optional[int], width: Optional[int]) -> None:
        try:
            print(element.render_text(height, width))
        except FlexError as e:
            console.print(f"[red]Cannot render: {escape(str(e))}[/]")
            raise typer.Exit(1)

    def load(path: Path, settings: Settings) -> Element:
        from flexterm.layout_file import load_layout

        try:
            return load_layout(path, settings)
        except FlexError as e:
            console.print(f"[red]Invalid layout file {escape(str(path))}:[/] {escape(str(e))}")
            raise typer.Exit(1)

    @app.command()
    def render(
        ctx: typer.Context,
        path: Annotated[Path, typer.Argument(help="JSON layout file", exists=True, dir_okay=False)],
        height: Annotated[Optional[int], typer.Option("--height", "-H", min=0, help="Lines to render (default: minimum)")] = None,
        width: Annotated[Optional[int], typer.Option("--width", "-W", min=0, help="Columns to render (default: minimum)")] = None,
    ) -> None:
        """Render a layout file to standard output."""
        element = load(path, ctx.obj)
        logger.info("Rendering %s at %sx%s", path, height, width)
        emit(element, height, width)

    @app.command()
    def size(
        ctx: typer.Context,
        path: Annotated[Path, typer.Argument(help="JSON layout file", exists=True, dir_okay=False)],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the computed size of a layout file's tree."""
        tree_size = load(path, ctx.obj).size()
        if json_output:
            print(json.dumps(tree_size.to_dict(), indent=2))
        else:
            print(f"height: {tree_size.height}")
            print(f"width:  {tree_size.width}")

    @app.command()
    def demo(
        ctx: typer.Context,
        height: Annotated[Optional[int], typer.Option("--height", "-H", min=0, help="Lines to render")] = None,
        width: Annotated[Optional[int], typer.Option("--width", "-W", min=0, help="Columns to render")] = None,
        show_size: Annotated[bool, typer.Option("--size", "-s", help="Print the tree size instead")] = False,
        export: Annotated[Optional[Path], typer.Option("--export", "-e", help="Write the demo tree as a layout file")] = None,
    ) -> None:
        """Render the built-in title card demo."""
        from flexterm.demo import build_demo
        from flexterm.layout_file import dumps_layout

        tree = build_demo(ctx.obj)
        if export is not None:
            export.write_text(dumps_layout(tree) + "\n", encoding="utf-8")
            console.print(f"[green]Wrote demo layout to {export}[/]")
            return
        if show_size:
            print(tree.size())
            return
        emit(tree, height, width)

    return app
