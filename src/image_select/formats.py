"""Supported output formats and format inference from file names."""

from pathlib import Path

from image_select.errors import UnsupportedFormatError

SUPPORTED_FORMATS = ("bmp", "gif", "jpeg", "png", "pnm", "raw", "sgi", "tga", "tiff")

# Extensions that name a supported format under a different spelling.
EXTENSION_ALIASES = {"jpg": "jpeg"}


def check_format(fmt: str) -> str:
    """Return fmt unchanged if it is supported. Raises UnsupportedFormatError otherwise.

    The comparison is exact and case-sensitive: "PNG" is rejected.
    """
    if fmt not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(fmt)
    return fmt


def format_from_path(path: Path | str) -> str:
    """Infer the output format from the extension of path.

    The text after the last dot of the file name is lower-cased and "jpg" is
    mapped to "jpeg", so ".png" names a PNG file. A name without a dot
    resolves to "" and is rejected.
    """
    name = Path(path).name
    suffix = name.rsplit(".", 1)[1].lower() if "." in name else ""
    suffix = EXTENSION_ALIASES.get(suffix, suffix)
    return check_format(suffix)
