"""image-select: pick images from a folder one by one and write them in a supported format."""

__version__ = "0.1.0"

from image_select.config import SelectorConfig, load_config
from image_select.errors import (
    ConfigurationError,
    ImageSelectError,
    IndexOutOfRangeError,
    ReadError,
    UnsupportedFormatError,
    WriteError,
)
from image_select.formats import SUPPORTED_FORMATS, check_format, format_from_path
from image_select.selector import Selector

__all__ = [
    "Selector",
    "SelectorConfig",
    "load_config",
    "SUPPORTED_FORMATS",
    "check_format",
    "format_from_path",
    "ImageSelectError",
    "ConfigurationError",
    "UnsupportedFormatError",
    "IndexOutOfRangeError",
    "ReadError",
    "WriteError",
]
