"""Console summaries of loaded color cycle images."""

from rich.console import Console
from rich.table import Table

from .palette.engines import ColorCycleEngine, CycleEngine, TimelineEngine
from .palette.models import CycleStyle


class ImageConsolePrinter:
    """Prints image statistics and cycle tables to the console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def display_stats(self, engine: ColorCycleEngine) -> None:
        width, height = engine.size
        animated = engine.animated_indices
        animated_pixels = sum(1 for index in engine.indices if index in animated)

        self.console.print(f"[bold]Size:[/bold] {width}x{height}")
        self.console.print(
            f"[bold]Animated pixels:[/bold] {animated_pixels} of {width * height}"
        )

    def display_cycles(self, engine: ColorCycleEngine) -> None:
        base = engine.base if isinstance(engine, TimelineEngine) else engine
        if not isinstance(base, CycleEngine):
            return

        self.console.print(f"[bold]Palette:[/bold] {len(base.base_palette)} colors")
        table = Table(title="Cycles")
        table.add_column("Low", justify="right")
        table.add_column("High", justify="right")
        table.add_column("Rate", justify="right")
        table.add_column("Style")
        for cycle in base.cycles:
            table.add_row(
                str(cycle.low), str(cycle.high), str(cycle.rate), _style_name(cycle.style)
            )
        self.console.print(table)

    def display_timeline(self, engine: ColorCycleEngine) -> None:
        if not isinstance(engine, TimelineEngine):
            return

        table = Table(title="Timeline")
        table.add_column("Time", justify="right")
        table.add_column("Palette")
        for marker, name in sorted(engine.resolver.schedule.items()):
            hours, remainder = divmod(marker, 3600)
            table.add_row(f"{hours:02d}:{remainder // 60:02d}", name)
        self.console.print(table)


def _style_name(style: int) -> str:
    try:
        return CycleStyle(style).name.lower()
    except ValueError:
        return str(style)
