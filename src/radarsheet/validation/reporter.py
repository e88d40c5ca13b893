"""
Console reporter for ingestion results.

Formats radars and ingestion errors using Rich for clear, colored output.
"""

from rich.console import Console
from rich.table import Table

from radarsheet.domain.models import Radar
from radarsheet.validation import messages
from radarsheet.validation.headers import ColumnBindings
from radarsheet.validation.result import ErrorKind, IngestionError


def format_error(error: IngestionError) -> str:
    """
    Build the user-facing text for an ingestion error.

    Data errors get a generic lead-in and FAQ guidance; a missing sheet
    is reported on its own.
    """
    if error.kind is ErrorKind.SHEET_NOT_FOUND:
        return error.message
    return f"{messages.LOAD_PROBLEM_PREFIX} {error.message}\n{messages.FAQ_GUIDANCE}"


class ConsoleReporter:
    """Formats and displays ingestion results to the console."""

    def __init__(self, console: Console) -> None:
        """
        Initialize console reporter.

        Args:
            console: Rich Console instance for output.
        """
        self.console = console

    def print_radar(self, radar: Radar, title: str = "Radar") -> None:
        """
        Print rings and blips per quadrant.

        Args:
            radar: Radar to display.
            title: Heading for the blip table.
        """
        rings = Table(title="Rings", show_header=True)
        rings.add_column("Order", justify="right")
        rings.add_column("Ring", style="cyan")
        rings.add_column("Blips", justify="right")
        for ring in radar.rings:
            count = sum(1 for blip in radar.blips if blip.ring is ring)
            rings.add_row(str(ring.order), ring.name, str(count))
        self.console.print(rings)

        table = Table(title=title, show_header=True)
        table.add_column("Quadrant", style="cyan", no_wrap=True)
        table.add_column("Blip", style="bold")
        table.add_column("Ring", style="blue")
        table.add_column("New", justify="center")
        table.add_column("Topic", style="dim")
        table.add_column("Description", style="dim")
        for quadrant in radar.quadrants:
            for blip in quadrant.blips:
                table.add_row(
                    quadrant.name,
                    blip.name,
                    blip.ring.name,
                    "[green]yes[/green]" if blip.is_new else "-",
                    blip.topic or "-",
                    blip.description or "-",
                )
        self.console.print(table)

        self.console.print()
        self.console.print("[bold]Summary:[/bold]")
        self.console.print(f"  Quadrants: {len(radar.quadrants)}")
        self.console.print(f"  Rings: {len(radar.rings)}")
        self.console.print(f"  Blips: {len(radar.blips)}")

    def print_bindings(self, bindings: ColumnBindings) -> None:
        """
        Print which sheet column feeds each recognized field.

        Args:
            bindings: Field -> header label.
        """
        table = Table(title="Header Check", show_header=True)
        table.add_column("Field", style="cyan")
        table.add_column("Column", style="green")
        for field, label in bindings.items():
            table.add_row(field.value, label)
        self.console.print(table)
        self.console.print("[green]Headers OK[/green]")

    def print_error(self, error: IngestionError) -> None:
        """
        Print an ingestion error.

        Args:
            error: First failure reported by the pipeline.
        """
        self.console.print(f"[bold red]{error.kind.value}[/bold red]")
        for line in format_error(error).split("\n"):
            self.console.print(f"  {line}", markup=False)
        if error.fields:
            self.console.print(f"  Fields: {', '.join(error.fields)}", markup=False)
        if error.row is not None:
            self.console.print(f"  Row: {error.row}")
