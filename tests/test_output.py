"""Tests for output module."""

from io import StringIO
from pathlib import Path

from rich.console import Console

from image_select.output import CreatedImage, print_formats, print_results, results_table


def _console() -> Console:
    return Console(file=StringIO(), force_terminal=False, width=200)


def test_results_table_has_one_row_per_image() -> None:
    results = [
        CreatedImage(destination=Path("out/a.bmp"), source=Path("photos/x.png"), format="bmp"),
        CreatedImage(destination=Path("out/b.jpg"), source=Path("photos/y.png"), format="jpeg"),
    ]
    table = results_table(results)
    assert table.row_count == 2
    assert [c.header for c in table.columns] == ["Output", "Source", "Format"]


def test_print_results_shows_destinations_and_formats() -> None:
    console = _console()
    print_results(
        [CreatedImage(destination=Path("out/a.bmp"), source=Path("photos/x.png"), format="bmp")],
        console,
    )
    out = console.file.getvalue()
    assert "Created images" in out
    assert "a.bmp" in out
    assert "x.png" in out
    assert "bmp" in out


def test_print_results_empty() -> None:
    console = _console()
    print_results([], console)
    assert "No images created" in console.file.getvalue()


def test_print_formats_lists_aliases() -> None:
    console = _console()
    print_formats(console)
    out = console.file.getvalue()
    assert "tiff" in out
    assert ".jpeg, .jpg" in out
