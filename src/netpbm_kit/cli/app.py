"""Typer CLI application."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from netpbm_kit.core.image import Image
from netpbm_kit.errors import FormatError


class Encoding(str, Enum):
    ascii = "ascii"
    binary = "binary"


class Target(str, Enum):
    gray = "gray"
    bitmap = "bitmap"


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="netpbm-kit",
        help="Inspect, transform and convert PBM, PGM and PPM images.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def _load(path: Path) -> Image:
        try:
            return Image.load(path)
        except (FormatError, OSError) as exc:
            err_console.print(f"[red]Cannot read {path}: {exc}[/]")
            raise typer.Exit(1) from exc

    def _save(image: Image, path: Path) -> None:
        try:
            image.save(path)
        except OSError as exc:
            err_console.print(f"[red]Cannot write {path}: {exc}[/]")
            raise typer.Exit(1) from exc
        console.print(f"[green]Wrote {path}[/] ({image.magic}, {image.width}x{image.height})")

    @app.callback()
    def configure(
        log_level: Annotated[str, typer.Option(
            "--log-level", "-l",
            envvar="NETPBM_KIT_LOG_LEVEL",
            help="Logging level (DEBUG, INFO, WARNING, ERROR)",
        )] = "WARNING",
    ) -> None:
        logging.basicConfig(
            level=log_level.upper(),
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
            force=True,
        )

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="Netpbm file to inspect")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the header fields of a Netpbm file."""
        image = _load(path)
        data = {
            "magic": str(image.magic),
            "family": image.family.value,
            "binary": image.magic.is_binary,
            "width": image.width,
            "height": image.height,
            "max_value": image.max_value,
        }
        if json_output:
            print(json.dumps(data, indent=2))
        else:
            console.print(f"[bold cyan]{path.name}[/]")
            for key, value in data.items():
                console.print(f"  [bold]{key}:[/] {value}")

    @app.command()
    def show(
        path: Annotated[Path, typer.Argument(help="Netpbm file to display")],
    ) -> None:
        """Print an image to the terminal using half-block characters."""
        from netpbm_kit.render.terminal import render_text
        console.print(render_text(_load(path)), end="")

    @app.command()
    def invert(
        source: Annotated[Path, typer.Argument(help="Source image")],
        dest: Annotated[Path, typer.Argument(help="Destination file")],
    ) -> None:
        """Invert every sample (max - value)."""
        image = _load(source)
        image.invert()
        _save(image, dest)

    @app.command()
    def flip(
        source: Annotated[Path, typer.Argument(help="Source image")],
        dest: Annotated[Path, typer.Argument(help="Destination file")],
    ) -> None:
        """Mirror left to right."""
        image = _load(source)
        image.flip()
        _save(image, dest)

    @app.command()
    def flop(
        source: Annotated[Path, typer.Argument(help="Source image")],
        dest: Annotated[Path, typer.Argument(help="Destination file")],
    ) -> None:
        """Mirror top to bottom."""
        image = _load(source)
        image.flop()
        _save(image, dest)

    @app.command()
    def rotate(
        source: Annotated[Path, typer.Argument(help="Source image")],
        dest: Annotated[Path, typer.Argument(help="Destination file")],
        turns: Annotated[int, typer.Option("--turns", "-t", help="Quarter turns clockwise")] = 1,
    ) -> None:
        """Rotate in quarter turns clockwise."""
        image = _load(source)
        for _ in range(turns % 4):
            image.rotate_90_cw()
        _save(image, dest)

    @app.command()
    def convert(
        source: Annotated[Path, typer.Argument(help="Source image")],
        dest: Annotated[Path, typer.Argument(help="Destination file")],
        encoding: Annotated[Optional[Encoding], typer.Option("--encoding", "-e", help="Output sub-variant")] = None,
        to: Annotated[Optional[Target], typer.Option("--to", help="Convert to another family")] = None,
        max_value: Annotated[Optional[int], typer.Option("--max", "-m", help="Rescale to a new max value")] = None,
    ) -> None:
        """Change encoding, family or max value."""
        image = _load(source)
        binary = image.magic.is_binary if encoding is None else encoding is Encoding.binary

        try:
            if to is Target.gray:
                image = image.to_graymap(binary=binary)
            elif to is Target.bitmap:
                image = image.to_bitmap(binary=binary)
            if max_value is not None:
                image.set_max_value(max_value)
        except ValueError as exc:
            err_console.print(f"[red]{exc}[/]")
            raise typer.Exit(1) from exc

        image.set_magic(image.magic.with_binary(binary))
        _save(image, dest)

    return app
