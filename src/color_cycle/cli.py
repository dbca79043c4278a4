"""CLI interface for color-cycle."""

import sys
from datetime import datetime
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from .animation_pipeline import encode_animation
from .console_printer import ImageConsolePrinter
from .constants import DAY_SECONDS, DEFAULT_DURATION, DEFAULT_FPS, DEFAULT_SCALE
from .errors import ColorCycleError
from .loader import load_engine
from .output import resolve_output_provider, supported_output_formats
from .palette.engines import ColorCycleEngine

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    filename: str = typer.Argument(..., help="Color cycle image description (JSON)"),
    raw_time: str = typer.Option(
        "",
        "--time",
        "-t",
        envvar="COLOR_CYCLE_TIME",
        help="Set the time to display, if applicable (HH:MM, 24h time)",
    ),
    out: str = typer.Option(
        None,
        "--output",
        "-out",
        "-o",
        help=f"Generate animated visualization ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    fps: int = typer.Option(
        DEFAULT_FPS,
        "--fps",
        help="Frames per second for the animation",
    ),
    duration: int = typer.Option(
        DEFAULT_DURATION,
        "--duration",
        "-d",
        help="Seconds of animation to render",
    ),
    max_frames: int | None = typer.Option(
        None,
        "--max-frame",
        help="Maximum number of frames to generate (overrides --duration)",
    ),
    scale: int = typer.Option(
        DEFAULT_SCALE,
        "--scale",
        help="Pixel scale factor of the output",
    ),
) -> None:
    """
    Render a color cycling image to an animated GIF or WebP.

    Timeline images fade between their named palettes according to the
    time of day given with --time, or the current local time otherwise.

    Examples:
      # Render ten seconds of a scene at dusk
      color-cycle scene.json --time 19:30 --output scene.gif

      # Render the first 60 frames as WebP
      color-cycle scene.json --max-frame 60 -o scene.webp
    """
    try:
        if fps <= 0:
            raise CLIError("FPS must be a positive number")
        if scale <= 0:
            raise CLIError("Scale must be a positive number")
        if max_frames is None:
            if duration <= 0:
                raise CLIError("Duration must be a positive number of seconds")
            max_frames = duration * fps

        if not out:
            out = f"{Path(filename).stem}.gif"

        engine = _load_engine(filename)

        printer = ImageConsolePrinter(console)
        printer.display_stats(engine)
        printer.display_cycles(engine)
        printer.display_timeline(engine)

        time_of_day = parse_time(raw_time)
        _generate_output(engine, out, fps, max_frames, time_of_day, scale)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def parse_time(raw_time: str) -> int:
    """Parse HH:MM into seconds since midnight, falling back to the current time."""
    parts = raw_time.split(":")
    if len(parts) == 2:
        try:
            hour = int(parts[0])
            minute = int(parts[1])
        except ValueError:
            pass
        else:
            if hour >= 0 and minute >= 0:
                return (hour * 3600 + minute * 60) % DAY_SECONDS

    err_console.print("[yellow]Rendering at current time[/yellow]")
    return _current_time_of_day()


def _current_time_of_day() -> int:
    now = datetime.now()
    return now.hour * 3600 + now.minute * 60 + now.second


def _load_engine(file_path: str) -> ColorCycleEngine:
    """Load an engine from a JSON image description."""
    console.print(f"[bold blue]Loading image from {file_path}...[/bold blue]")
    try:
        return load_engine(file_path)
    except ColorCycleError as e:
        raise CLIError(str(e))


def _generate_output(
    engine: ColorCycleEngine,
    output_path: str,
    fps: int,
    max_frames: int,
    time_of_day: int,
    scale: int,
) -> None:
    """Generate animation in the format specified by output_path."""
    # Warn about GIF FPS limitation
    if output_path.lower().endswith(".gif") and fps > 50:
        console.print(
            f"[yellow]Warning:[/yellow] FPS > 50 may not display correctly in browsers "
            f"(GIF delay will be {1000 // fps}ms, but browsers clamp delays < 20ms to ~100ms)"
        )

    ext = Path(output_path).suffix[1:].upper()
    console.print(f"\n[bold blue]Generating {ext} animation...[/bold blue]")

    try:
        provider = resolve_output_provider(output_path)
        encoded = encode_animation(
            engine,
            output_path,
            fps=fps,
            max_frames=max_frames,
            time_of_day=time_of_day,
            scale=scale,
            provider=provider,
        )
    except ValueError as e:
        raise CLIError(f"Failed to generate output: {e}")

    console.print(f"[bold blue]Saving to {output_path}...[/bold blue]")
    try:
        provider.write(encoded)
    except OSError as e:
        raise CLIError(f"Failed to save file '{output_path}': {e}")
    console.print(f"[green]✓[/green] {ext} saved to {output_path}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
