"""CLI entry point and orchestration."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TaskProgressColumn

from image_select.config import SelectorConfig, config_paths, read_config_file
from image_select.errors import ImageSelectError
from image_select.formats import SUPPORTED_FORMATS
from image_select.output import CreatedImage, print_formats, print_results
from image_select.selector import Selector


def _configure_logging(console: Console) -> None:
    """Send image_select debug logging to console."""
    logger = logging.getLogger("image_select")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=console, show_path=False))
    logger.setLevel(logging.DEBUG)


def _collect_params(args: argparse.Namespace, console: Console) -> dict:
    """Merge config file options with CLI overrides."""
    params: dict = {}
    # Config file only when asked for, or when there is no --source to go on
    if args.config is not None or args.source is None:
        params = read_config_file(args.config)
        if args.verbose:
            console.print(f"[dim]Config options:[/] {', '.join(sorted(params)) or '(none)'}")
    # CLI flags win over file values
    if args.source is not None:
        params["source_directory"] = str(args.source)
    if args.type is not None:
        params["format"] = args.type
    if args.width is not None:
        params["width"] = args.width
    if args.height is not None:
        params["height"] = args.height
    return params


def main() -> None:
    """Run the image-select CLI."""
    if len(sys.argv) > 1 and sys.argv[1] == "formats":
        print_formats(Console())
        return

    parser = argparse.ArgumentParser(
        description="Copy images from a folder, one per output path, in a supported format.",
    )
    parser.add_argument(
        "outputs",
        nargs="+",
        type=Path,
        help="Output paths; each one receives the next image from the source folder",
    )
    parser.add_argument(
        "-s",
        "--source",
        type=Path,
        default=None,
        help="Folder to select images from (overrides source_directory in config)",
    )
    parser.add_argument(
        "-t",
        "--type",
        choices=SUPPORTED_FORMATS,
        default=None,
        help="Output format (default: inferred from each output extension)",
    )
    parser.add_argument("--width", type=int, default=None, help="Target width (stored, not applied)")
    parser.add_argument("--height", type=int, default=None, help="Target height (stored, not applied)")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to config file (optional when --source is given)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output including inputs and processing details",
    )
    args = parser.parse_args()

    console = Console()

    # Show verbose inputs
    if args.verbose:
        _configure_logging(console)
        console.print("[dim]Verbose mode enabled[/]")
        if args.config:
            console.print(f"[dim]Config file:[/] {args.config}")
        elif args.source is None:
            console.print("[dim]Config search paths:[/]")
            for p in config_paths(None):
                exists = "✓" if p.exists() else "✗"
                console.print(f"[dim]  {exists} {p}[/]")
        console.print(f"[dim]Outputs:[/] {len(args.outputs)}")
        console.print("")

    # Load config and scan the source folder; unknown keys are rejected here
    try:
        config = SelectorConfig.from_mapping(_collect_params(args, console))
        selector = Selector.from_config(config)
    except (FileNotFoundError, NotADirectoryError, ImageSelectError) as e:
        console.print(f"[red]Error:[/] {e}")
        raise SystemExit(1) from e

    if not selector.candidates:
        console.print(f"[yellow]No files found in {selector.source_directory}.[/]")
        return

    if args.verbose:
        console.print(f"[dim]Found {len(selector)} candidate file(s)[/]")
        console.print(f"[dim]Format:[/] {selector.type() or '(inferred from output extension)'}")
        console.print("")

    # One image per output; stop at the first failure but keep what was written
    results: list[CreatedImage] = []
    error: ImageSelectError | None = None

    with Progress(
        SpinnerColumn(),
        TaskProgressColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Creating images", total=len(args.outputs))
        for destination in args.outputs:
            try:
                fmt = selector.create(destination)
            except ImageSelectError as e:
                error = e
                break
            source = selector.candidates[selector.cursor - 1]
            results.append(CreatedImage(destination=destination, source=source, format=fmt))
            progress.advance(task)

    # Results table first, then the error that cut the run short (if any)
    print_results(results, console)

    if error is not None:
        console.print(f"[red]Error:[/] {error}")
        raise SystemExit(1) from error
