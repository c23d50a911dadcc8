"""Rich-formatted output for created images."""

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.table import Table

from image_select.formats import EXTENSION_ALIASES, SUPPORTED_FORMATS


@dataclass
class CreatedImage:
    """One image written by the CLI."""

    destination: Path
    source: Path
    format: str


def results_table(results: list[CreatedImage]) -> Table:
    """Build a table with one row per created image."""
    table = Table(title="Created images")
    table.add_column("Output", style="cyan")
    table.add_column("Source", style="dim")
    table.add_column("Format", style="green")
    for result in results:
        table.add_row(str(result.destination), result.source.name, result.format)
    return table


def print_results(results: list[CreatedImage], console: Console | None = None) -> None:
    """Print created images, or a notice when there are none."""
    c = console or Console()
    if not results:
        c.print("[yellow]No images created.[/]")
        return
    c.print(results_table(results))


def print_formats(console: Console | None = None) -> None:
    """Print the supported format identifiers."""
    c = console or Console()
    table = Table(title="Supported formats")
    table.add_column("Format", style="cyan")
    table.add_column("Extensions", style="dim")
    for fmt in SUPPORTED_FORMATS:
        aliases = [alias for alias, target in EXTENSION_ALIASES.items() if target == fmt]
        extensions = ", ".join(f".{ext}" for ext in [fmt, *aliases])
        table.add_row(fmt, extensions)
    c.print(table)
