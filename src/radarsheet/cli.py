"""Command-line interface for the radarsheet pipeline."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console

if TYPE_CHECKING:
    from radarsheet.config.settings import RadarConfig

app = typer.Typer(
    name="radarsheet",
    help="Build a technology radar from a spreadsheet.",
    no_args_is_help=True,
)

console = Console()

SheetArgument = Annotated[
    Path,
    typer.Argument(
        help="CSV, .xlsx or .xlsm file with one radar item per row.",
        exists=True,
        dir_okay=False,
    ),
]
SheetOption = Annotated[
    str | None,
    typer.Option(
        "--sheet",
        "-s",
        help="Worksheet name (defaults to the first sheet).",
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file.",
        exists=True,
        dir_okay=False,
    ),
]


def _load_settings(config: Path | None, sheet: str | None) -> "RadarConfig":
    """Load config, apply the --sheet override and set up logging."""
    from radarsheet.config.loader import load_config
    from radarsheet.utils.logging import configure_logging

    radar_config = load_config(config)
    if sheet is not None:
        radar_config = radar_config.model_copy(update={"sheet_name": sheet})

    configure_logging(
        level=radar_config.logging.level.value,
        json_output=radar_config.logging.json_output,
    )
    return radar_config


@app.command()
def build(
    file: SheetArgument,
    sheet: SheetOption = None,
    config: ConfigOption = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the radar to a .json or .csv file.",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Build a radar from a sheet and display it."""
    from radarsheet.assembly.pipeline import ingest_sheet
    from radarsheet.domain.export import write_radar
    from radarsheet.validation.reporter import ConsoleReporter

    radar_config = _load_settings(config, sheet)
    reporter = ConsoleReporter(console)

    console.print(f"[blue]Building your radar from {file}...[/blue]")

    try:
        result = ingest_sheet(file, radar_config)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e

    if not result.ok:
        reporter.print_error(result.error)
        raise typer.Exit(code=1)

    reporter.print_radar(result.value, title=file.stem)

    if output is not None:
        try:
            written = write_radar(result.value, output)
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1) from e
        console.print(f"\n[green]Saved to: {written}[/green]")


@app.command()
def check(
    file: SheetArgument,
    sheet: SheetOption = None,
    config: ConfigOption = None,
) -> None:
    """Check the header row of a sheet without building the radar."""
    from radarsheet.assembly.pipeline import check_headers
    from radarsheet.ingestion.reader import read_sheet
    from radarsheet.validation.reporter import ConsoleReporter

    radar_config = _load_settings(config, sheet)
    reporter = ConsoleReporter(console)

    try:
        read = read_sheet(file, radar_config.sheet_name, radar_config.placeholder_prefix)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e

    if not read.ok:
        reporter.print_error(read.error)
        raise typer.Exit(code=1)

    checked = check_headers(read.value.headers, radar_config)
    if not checked.ok:
        reporter.print_error(checked.error)
        raise typer.Exit(code=1)

    reporter.print_bindings(checked.value)


@app.command()
def version() -> None:
    """Show version information."""
    from radarsheet import __version__

    console.print(f"radarsheet version {__version__}")


if __name__ == "__main__":
    app()
