"""Exception types raised by image-select."""

from pathlib import Path


class ImageSelectError(Exception):
    """Base exception for all image-select errors."""


class ConfigurationError(ImageSelectError, ValueError):
    """Raised when a selector option is unknown, missing or invalid."""

    def __init__(self, message: str, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option


class UnsupportedFormatError(ImageSelectError, ValueError):
    """Raised when a requested or inferred image format is not supported."""

    def __init__(self, fmt: str) -> None:
        super().__init__(f"Suffix '{fmt}' is not supported.")
        self.format = fmt


class IndexOutOfRangeError(ImageSelectError, IndexError):
    """Raised when every candidate image has already been selected."""

    def __init__(self, cursor: int, count: int) -> None:
        super().__init__(
            f"No image left to select (cursor {cursor}, {count} candidate(s))."
        )
        self.cursor = cursor
        self.count = count


class ReadError(ImageSelectError):
    """Raised when the codec cannot decode a candidate image."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Cannot read file '{path}'.\nError: {detail}")
        self.path = path
        self.detail = detail


class WriteError(ImageSelectError):
    """Raised when the codec cannot write the selected image."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Cannot write file to '{path}'.\nError: {detail}")
        self.path = path
        self.detail = detail
