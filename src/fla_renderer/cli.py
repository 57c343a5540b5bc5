"""CLI interface for fla-renderer."""

import os
import sys
import time
from pathlib import Path

import typer
from dotenv import load_dotenv
from PIL import ImageColor
from rich.console import Console
from rich.table import Table

from .constants import DEFAULT_PADDING_PER_SCALE, DEFAULT_SCALE
from .errors import FlaError, SymbolNotFoundError
from .fla import Fla
from .output import PngSequenceOutputProvider, resolve_output_provider, supported_output_formats
from .output.base import OutputProvider
from .render.renderer import SymbolRenderer
from .render_pipeline import export_symbol

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def list_symbols(
    fla_path: str = typer.Argument(..., help="Path to an .fla file or unpacked XFL folder"),
) -> None:
    """List the renderable symbols in the library with their frame count and bounds."""
    try:
        fla = _open_fla(fla_path)

        table = Table(title=f"Symbols in {fla_path}")
        table.add_column("Symbol")
        table.add_column("Frames", justify="right")
        table.add_column("Bounding box")
        for name in fla.symbol_names():
            symbol = fla.get_symbol(name)
            box = symbol.bounding_box()
            bounds = (
                f"({box.min_x:g}, {box.min_y:g}) - ({box.max_x:g}, {box.max_y:g})"
                if box is not None
                else "[dim]no geometry[/dim]"
            )
            table.add_row(name, str(symbol.num_frames), bounds)
        console.print(table)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def render(
    fla_path: str = typer.Argument(..., help="Path to an .fla file or unpacked XFL folder"),
    symbol: str = typer.Option(..., "--symbol", "-s", help="Library symbol to render"),
    scale: float = typer.Option(DEFAULT_SCALE, "--scale", help="Scale of the symbol"),
    padding: float | None = typer.Option(
        None,
        "--padding",
        "-p",
        help=f"Padding in pixels (default {DEFAULT_PADDING_PER_SCALE:g} x scale)",
    ),
    out: str = typer.Option(
        None,
        "--output",
        "-o",
        help=f"Output path ({SUPPORTED_OUTPUT_FORMATS_TEXT}); no extension or .png writes PNG frames to a folder",
    ),
    workers: int | None = typer.Option(
        None,
        "--workers",
        "-w",
        help="Render frames on this many threads (env FLA_RENDER_WORKERS)",
    ),
    max_frames: int | None = typer.Option(
        None,
        "--max-frame",
        help="Maximum number of frames to render",
    ),
    background: str | None = typer.Option(
        None,
        "--background",
        "-b",
        help="Flatten frames onto this color instead of keeping transparency",
    ),
) -> None:
    """
    Render a library symbol into a sequence of raster frames.

    Examples:
      # PNG frames in ./Symbol 1/
      fla-renderer render movie.fla --symbol "Symbol 1.xml"

      # Animated GIF at half size
      fla-renderer render movie.fla -s "Symbol 1.xml" --scale 0.5 -o symbol.gif
    """
    try:
        if scale <= 0:
            raise CLIError("Scale must be positive")
        if padding is None:
            padding = DEFAULT_PADDING_PER_SCALE * scale
        if background is not None:
            _validate_color(background)
        workers = workers if workers is not None else _load_workers_from_env()

        fla = _open_fla(fla_path)
        provider: OutputProvider
        if out:
            provider = _resolve_provider(out)
            output_path = out
        else:
            output_path = str(Path(symbol).with_suffix(""))
            provider = PngSequenceOutputProvider(output_path)

        _print_render_settings(fla, symbol, scale, padding)

        console.print("[bold blue]Beginning render...[/bold blue]")
        started = time.perf_counter()
        written = export_symbol(
            fla,
            symbol,
            output_path,
            scale=scale,
            padding=padding,
            workers=workers,
            max_frames=max_frames,
            background=background,
            provider=provider,
        )
        elapsed = time.perf_counter() - started

        console.print(f"Finished render in {elapsed:.3f} secs")
        console.print(f"[green]✓[/green] Wrote {len(written)} file(s) to {output_path}")

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except FlaError as e:
        err_console.print(f"[bold red]Failed to render:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _open_fla(fla_path: str) -> Fla:
    """Open the container, turning load failures into CLI errors."""
    console.print(f"[bold blue]Opening fla file '{fla_path}'...[/bold blue]")
    if not Path(fla_path).exists():
        raise CLIError(f"File '{fla_path}' not found")
    try:
        return Fla.open(fla_path)
    except FlaError as e:
        raise CLIError(f"Failed to parse fla: {e}")


def _print_render_settings(fla: Fla, symbol_name: str, scale: float, padding: float) -> None:
    try:
        renderer = SymbolRenderer(fla.get_symbol(symbol_name), scale, padding)
    except SymbolNotFoundError as e:
        raise CLIError(str(e))
    except FlaError:
        # The render itself reports the failure.
        return

    box = renderer.bounding_box
    console.print("Symbol Bounding Box")
    console.print(f"  Start: {box.min_x:g} x {box.min_y:g}")
    console.print(f"  End: {box.max_x:g} x {box.max_y:g}")
    console.print(f"Using scale: {scale:g}x")
    console.print(f"Using padding: {padding:g}px")
    console.print(f"Frames: {renderer.num_frames} at {renderer.width}x{renderer.height}px")


def _resolve_provider(output_path: str) -> OutputProvider:
    try:
        return resolve_output_provider(output_path)
    except ValueError as exc:
        raise CLIError(str(exc))


def _validate_color(value: str) -> None:
    try:
        ImageColor.getrgb(value)
    except ValueError:
        raise CLIError(f"Invalid background color '{value}'")


def _load_workers_from_env() -> int | None:
    """Read the default worker count from FLA_RENDER_WORKERS."""
    value = os.getenv("FLA_RENDER_WORKERS")
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise CLIError(f"FLA_RENDER_WORKERS must be an integer, got '{value}'")


app = typer.Typer()
app.command("symbols")(list_symbols)
app.command("render")(render)

if __name__ == "__main__":
    app()
