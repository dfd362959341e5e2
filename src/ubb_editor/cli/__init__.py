"""Command line front end for ubb-editor."""

from ubb_editor.cli.main import main

__all__ = ["main"]
