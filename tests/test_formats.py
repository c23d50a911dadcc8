"""Tests for formats module."""

from pathlib import Path

import pytest

from image_select.errors import UnsupportedFormatError
from image_select.formats import SUPPORTED_FORMATS, check_format, format_from_path


def test_supported_formats_list() -> None:
    assert SUPPORTED_FORMATS == ("bmp", "gif", "jpeg", "png", "pnm", "raw", "sgi", "tga", "tiff")


@pytest.mark.parametrize("fmt", SUPPORTED_FORMATS)
def test_check_format_accepts_supported(fmt: str) -> None:
    assert check_format(fmt) == fmt


@pytest.mark.parametrize("fmt", ["jpg", "PNG", "webp", "", " png"])
def test_check_format_rejects_others(fmt: str) -> None:
    """Membership is exact and case-sensitive."""
    with pytest.raises(UnsupportedFormatError) as exc_info:
        check_format(fmt)
    assert exc_info.value.format == fmt
    assert f"'{fmt}'" in str(exc_info.value)


def test_format_from_path_maps_jpg_to_jpeg() -> None:
    assert format_from_path("out.jpg") == "jpeg"


def test_format_from_path_lowercases_extension() -> None:
    assert format_from_path(Path("/tmp/OUT.PNG")) == "png"
    assert format_from_path("shot.JPG") == "jpeg"


def test_format_from_path_uses_last_extension() -> None:
    assert format_from_path("archive.png.tiff") == "tiff"


def test_format_from_path_rejects_unknown_extension() -> None:
    with pytest.raises(UnsupportedFormatError) as exc_info:
        format_from_path("out.webp")
    assert exc_info.value.format == "webp"


def test_format_from_path_rejects_missing_extension() -> None:
    with pytest.raises(UnsupportedFormatError) as exc_info:
        format_from_path("/tmp/out")
    assert exc_info.value.format == ""


def test_format_from_path_dotfile_name() -> None:
    """A name that is only an extension still resolves to that format."""
    assert format_from_path("/tmp/.png") == "png"
    assert format_from_path(".JPG") == "jpeg"


def test_format_from_path_trailing_dot() -> None:
    with pytest.raises(UnsupportedFormatError) as exc_info:
        format_from_path("out.")
    assert exc_info.value.format == ""
