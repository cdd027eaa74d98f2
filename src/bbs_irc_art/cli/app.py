"""Typer CLI application."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from bbs_irc_art.codec.detect import SNIFF_SIZE, ArtFormat, detect_format
from bbs_irc_art.config import Settings
from bbs_irc_art.errors import ArtError
from bbs_irc_art.io.reader import STDIN, load
from bbs_irc_art.io.writer import STDOUT, save_image, save_text, thumbnail_path
from bbs_irc_art.render.glyphs import FontGlyphSource
from bbs_irc_art.sauce.reader import parse_sauce


class TextFormat(str, Enum):
    """Text formats accepted on the command line."""
    ANSI = "ansi"
    MIRC = "mirc"


OPPOSITE = {ArtFormat.ANSI: ArtFormat.MIRC, ArtFormat.MIRC: ArtFormat.ANSI}


def configure_logging(verbose: bool, console: Console) -> None:
    """Send library logging through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="bbs-irc-art",
        help="Convert between ANSI art and mIRC art, or render either to PNG.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    # Converted text goes to stdout, so messages go to stderr
    console = Console(stderr=True)

    @app.command()
    def convert(
        source: Annotated[Path, typer.Argument(help="Source art file, or - for stdin")],
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output file (default: stdout)")] = None,
        width: Annotated[Optional[int], typer.Option("--width", "-w", min=1, help="Canvas width in columns")] = None,
        from_format: Annotated[Optional[TextFormat], typer.Option("--from", "-f", help="Input format (default: detected)")] = None,
        to_format: Annotated[Optional[TextFormat], typer.Option("--to", "-t", help="Output format (default: the other one)")] = None,
        png: Annotated[bool, typer.Option("--png", help="Render a PNG image instead of text")] = False,
        thumb: Annotated[bool, typer.Option("--thumb", help="Also write a <name>_thumb.png thumbnail")] = False,
        thumb_scale: Annotated[Optional[float], typer.Option("--thumb-scale", min=0.01, help="Thumbnail scale")] = None,
        font: Annotated[Optional[Path], typer.Option("--font", help="TrueType font for image output")] = None,
        force_16: Annotated[bool, typer.Option("--16", help="Restrict colors to the 16-color palette")] = False,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
    ) -> None:
        """Convert ANSI art to mIRC art, mIRC art to ANSI art, or either to PNG."""
        configure_logging(verbose, console)
        try:
            settings = Settings.from_env()
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        force_16 = force_16 or settings.force_16

        try:
            doc = load(
                source,
                width=width,
                fmt=ArtFormat(from_format.value) if from_format else None,
                force_16=force_16,
                default_width=settings.width,
            )
        except (ArtError, OSError) as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

        is_stdin = str(source) == STDIN
        as_image = png or (output is not None and output.suffix.lower() == ".png")

        image_path = output
        if as_image or thumb:
            if image_path is None or not as_image:
                if is_stdin and output is None:
                    console.print("[red]An output path is required to write images from stdin[/]")
                    raise typer.Exit(1)
                image_path = (output or source).with_suffix(".png")
            glyphs = FontGlyphSource(
                str(font) if font else settings.font_path,
                settings.bold_font_path,
            )
            image_options = {"glyphs": glyphs, "font_size": settings.font_size, "force_16": force_16}

        if as_image:
            save_image(doc, image_path, **image_options)
            console.print(f"[green]Rendered {source} → {image_path}[/]")
        else:
            out_format = ArtFormat(to_format.value) if to_format else OPPOSITE[doc.format]
            save_text(doc, output or STDOUT, out_format, force_16=force_16)
            if output is not None:
                console.print(f"[green]Converted {source} → {output} ({out_format.value})[/]")

        if thumb:
            scale = thumb_scale or settings.thumbnail_scale
            thumb_path = save_image(doc, thumbnail_path(image_path), scale=scale, **image_options)
            console.print(f"[green]Thumbnail → {thumb_path}[/]")

    @app.command()
    def detect(
        path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="Art file to inspect")],
    ) -> None:
        """Print the detected format of a file."""
        with open(path, "rb") as f:
            fmt = detect_format(f.read(SNIFF_SIZE))
        typer.echo(fmt.value)
        if fmt is ArtFormat.UNKNOWN:
            raise typer.Exit(1)

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="Art file to inspect")],
    ) -> None:
        """Show SAUCE metadata for an art file."""
        sauce = parse_sauce(path)

        if not sauce:
            console.print(f"[yellow]No SAUCE metadata found in {path}[/]")
            raise typer.Exit(1)

        out = Console()
        out.print(f"[bold cyan]SAUCE Metadata for {path.name}[/]")
        out.print(f"  [bold]Title:[/]  {sauce.title or '(none)'}")
        out.print(f"  [bold]Author:[/] {sauce.author or '(none)'}")
        out.print(f"  [bold]Group:[/]  {sauce.group or '(none)'}")
        if sauce.date:
            out.print(f"  [bold]Date:[/]   {sauce.date.strftime('%Y-%m-%d')}")
        out.print(f"  [bold]Size:[/]   {sauce.tinfo1}x{sauce.tinfo2}")
        if sauce.comments:
            out.print("  [bold]Comments:[/]")
            for comment in sauce.comments:
                out.print(f"    {comment}")

    return app
