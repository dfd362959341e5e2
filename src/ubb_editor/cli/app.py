"""Typer CLI application."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ubb_editor.edit.options import EditorOptions
from ubb_editor.edit.upload import UploadFile


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ubb-editor",
        help="Insert UBB markup into text files the way the forum editor does.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def main_options(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log editor events")] = False,
    ) -> None:
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(message)s",
                handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
            )

    @app.command()
    def tags() -> None:
        """List the known tags and how they treat a selection."""
        from ubb_editor.core.tags import TagRegistry

        table = Table(title="UBB tags")
        table.add_column("Tag", style="bold cyan")
        table.add_column("Label")
        table.add_column("Policy")
        table.add_column("Needs value")
        for spec in TagRegistry():
            table.add_row(
                spec.name,
                spec.label,
                spec.policy.name.lower().replace("_", "-"),
                "yes" if spec.needs_value else "",
            )
        console.print(table)

    @app.command()
    def emoji(
        category: Annotated[str, typer.Argument(help="Emoji set: em, ac, mj or tb")] = "ac",
    ) -> None:
        """List the emoticon fragments of one set."""
        from ubb_editor.core.emoji import EmojiCategory, fragments

        try:
            chosen = EmojiCategory.from_prefix(category)
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        console.print(f"[bold]{chosen.value.label}[/] ({chosen.value.count})")
        console.print(" ".join(fragments(chosen)), markup=False)

    @app.command()
    def keys() -> None:
        """List the editor's keyboard shortcuts."""
        from ubb_editor.edit.keys import help_lines

        console.print("[bold]Shortcuts[/]")
        for line in help_lines(width=60):
            console.print(line, markup=False)

    @app.command()
    def wrap(
        path: Annotated[Path, typer.Argument(help="Text file to edit")],
        tag: Annotated[str, typer.Argument(help="Tag name, e.g. b, url, img")],
        value: Annotated[str, typer.Option("--value", "-V", help="Tag value (link target, color, ...)")] = "",
        start: Annotated[int, typer.Option("--start", "-s", help="Selection start offset")] = 0,
        end: Annotated[Optional[int], typer.Option("--end", "-e", help="Selection end offset (default: end of text)")] = None,
        in_place: Annotated[bool, typer.Option("--in-place", "-i", help="Overwrite the file")] = False,
        config: Annotated[Optional[Path], typer.Option("--config", "-c", help="Editor options JSON file")] = None,
    ) -> None:
        """Apply a tag to a range of a text file."""
        from ubb_editor.edit.editor import UbbEditor

        text = _read_text(console, path)
        editor = UbbEditor(text, options=_load_options(console, config))
        editor.blur(start, len(text) if end is None else end)
        if not editor.insert_tag(tag, value):
            console.print(f"[red]{escape(editor.message)}[/]")
            raise typer.Exit(1)

        if in_place:
            path.write_text(editor.value, encoding="utf-8")
            sel = editor.selection
            console.print(f"[green]Wrote {path.name}[/] (selection {sel.start}-{sel.end})")
        else:
            print(editor.value, end="")

    @app.command()
    def upload(
        file: Annotated[Path, typer.Argument(help="File to upload")],
        target: Annotated[Path, typer.Argument(help="Text file to insert the reference into")],
        store: Annotated[Path, typer.Option("--store", help="Directory the upload is stored in")] = Path("uploads"),
        base_url: Annotated[str, typer.Option("--base-url", help="Prefix for the inserted reference")] = "",
        tag: Annotated[str, typer.Option("--tag", "-t", help="upload or img")] = "upload",
        at: Annotated[Optional[int], typer.Option("--at", help="Insert offset (default: end of text)")] = None,
        config: Annotated[Optional[Path], typer.Option("--config", "-c", help="Editor options JSON file")] = None,
    ) -> None:
        """Upload a file to a local store and insert a tag referencing it."""
        from ubb_editor.edit.editor import UbbEditor
        from ubb_editor.edit.upload import LocalUploader

        if tag not in ("upload", "img"):
            console.print(f"[red]--tag must be upload or img, got {tag}[/]")
            raise typer.Exit(1)

        upload_file = _read_upload(console, file)
        text = _read_text(console, target) if target.exists() else ""
        editor = UbbEditor(
            text,
            options=_load_options(console, config),
            uploader=LocalUploader(store, base_url),
        )
        offset = len(text) if at is None else at
        editor.blur(offset, offset)
        if tag == "upload":
            editor.open_upload()
        else:
            editor.press_tag(tag)

        if not asyncio.run(editor.handle_upload(upload_file)):
            console.print(f"[red]{escape(editor.message or 'Upload failed')}[/]")
            raise typer.Exit(1)

        target.write_text(editor.value, encoding="utf-8")
        console.print(f"[green]Uploaded {file.name}[/] → {target.name}")

    return app


def _load_options(console: Console, path: Optional[Path]) -> EditorOptions:
    """Read editor options, exiting with a message on a bad file."""
    if path is None:
        return EditorOptions()
    try:
        return EditorOptions.load(path)
    except (OSError, ValueError) as e:
        console.print(f"[red]Invalid config {path}: {escape(str(e))}[/]")
        raise typer.Exit(1)


def _read_text(console: Console, path: Path) -> str:
    """Read a text file, exiting with a message if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Cannot read {escape(str(path))}: {escape(str(e))}[/]")
        raise typer.Exit(1)


def _read_upload(console: Console, path: Path) -> UploadFile:
    try:
        return UploadFile.from_path(path)
    except OSError as e:
        console.print(f"[red]Cannot read {escape(str(path))}: {escape(str(e))}[/]")
        raise typer.Exit(1)
