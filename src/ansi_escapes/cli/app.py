"""Typer CLI application for inspecting escape sequences."""

from pathlib import Path
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.table import Table
    from rich.text import Text
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: uv pip install ansi-escapes[cli]")

    app = typer.Typer(
        name="ansi-escapes",
        help="Inspect the ANSI escape sequences produced by ansi-escapes.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def emit(sequence: str, raw: bool) -> None:
        # rich would interpret the escapes, and click strips them off a tty
        if raw:
            typer.echo(sequence, nl=False, color=True)
        else:
            typer.echo(repr(sequence))

    @app.command("list")
    def list_sequences() -> None:
        """List every named parameterless sequence."""
        from ansi_escapes.catalog import SEQUENCES

        table = Table(title="Escape sequences")
        table.add_column("Name", style="bold cyan")
        table.add_column("Sequence")
        for name, sequence in SEQUENCES.items():
            table.add_row(name, Text(repr(sequence)))
        console.print(table)

    @app.command()
    def show(
        name: Annotated[str, typer.Argument(help="Sequence name, e.g. cursor-hide")],
        raw: Annotated[bool, typer.Option("--raw", "-r", help="Write the sequence itself instead of its repr")] = False,
    ) -> None:
        """Show a named sequence."""
        from ansi_escapes.catalog import lookup

        try:
            sequence = lookup(name)
        except KeyError:
            console.print(f"[red]Unknown sequence: {name}[/]")
            console.print("Run [bold]ansi-escapes list[/] for available names")
            raise typer.Exit(1)
        emit(sequence, raw)

    @app.command()
    def link(
        url: Annotated[str, typer.Argument(help="Link target")],
        text: Annotated[str, typer.Argument(help="Link text")],
        raw: Annotated[bool, typer.Option("--raw", "-r", help="Write the sequence itself instead of its repr")] = False,
    ) -> None:
        """Format an OSC 8 hyperlink."""
        import ansi_escapes as ansi

        emit(ansi.link(url, text), raw)

    @app.command()
    def image(
        path: Annotated[Path, typer.Argument(help="Image file")],
        width: Annotated[Optional[str], typer.Option("--width", "-w", help="Width in cells, px, % or auto")] = None,
        height: Annotated[Optional[str], typer.Option("--height", "-H", help="Height in cells, px, % or auto")] = None,
        preserve_aspect_ratio: Annotated[Optional[bool], typer.Option("--preserve-aspect-ratio/--stretch", help="Keep or drop the aspect ratio (terminal default if omitted)")] = None,
        raw: Annotated[bool, typer.Option("--raw", "-r", help="Write the sequence itself instead of its repr")] = False,
    ) -> None:
        """Format an iTerm2 inline image."""
        import ansi_escapes as ansi

        if not path.is_file():
            console.print(f"[red]No such file: {path}[/]")
            raise typer.Exit(1)
        emit(
            ansi.image_from_file(
                path,
                width=width,
                height=height,
                preserve_aspect_ratio=preserve_aspect_ratio,
            ),
            raw,
        )

    return app
