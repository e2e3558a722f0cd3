"""Command line front end for flexterm."""

from flexterm.cli.app import create_app
from flexterm.cli.main import main

__all__ = ["create_app", "main"]
