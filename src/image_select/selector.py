"""Select images from a directory one by one and write them in a supported format."""

import dataclasses
import logging
import threading
from pathlib import Path
from typing import Any

from image_select.codec import ImageCodec, PillowCodec
from image_select.config import SelectorConfig, check_dimension
from image_select.errors import IndexOutOfRangeError, ReadError, WriteError
from image_select.formats import check_format, format_from_path
from image_select.scan import scan_directory

logger = logging.getLogger(__name__)


class Selector:
    """Hand out the files of a directory in order, re-encoded to a chosen format.

    The directory is scanned once, at construction. Every call to create()
    consumes the next candidate, even when decoding or writing it fails, so
    a failed call is never retried on the same file.

    Options (keyword arguments):
        source_directory: Directory to scan recursively for candidates.
        format: One of SUPPORTED_FORMATS, or None to infer it from the
            extension of each destination path.
        width, height: Target size. Stored only; images are not resized.

    Raises:
        ConfigurationError: Unknown, missing or invalid option.
        UnsupportedFormatError: format is not supported.
        NotADirectoryError: source_directory is not a directory.
    """

    def __init__(self, *, codec: ImageCodec | None = None, **params: Any) -> None:
        config = SelectorConfig.from_mapping(params)
        self._codec = codec if codec is not None else PillowCodec()
        self._source_directory = config.source_directory
        self._format = config.format
        self._width = config.width
        self._height = config.height
        self._candidates = tuple(scan_directory(config.source_directory))
        self._cursor = 0
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: SelectorConfig, codec: ImageCodec | None = None) -> "Selector":
        """Build a Selector from an already loaded SelectorConfig."""
        return cls(codec=codec, **dataclasses.asdict(config))

    def __len__(self) -> int:
        return len(self._candidates)

    def __repr__(self) -> str:
        return (
            f"Selector(source_directory={str(self._source_directory)!r}, "
            f"format={self._format!r}, cursor={self._cursor}/{len(self._candidates)})"
        )

    @property
    def source_directory(self) -> Path:
        return self._source_directory

    @property
    def candidates(self) -> tuple[Path, ...]:
        return self._candidates

    @property
    def cursor(self) -> int:
        """Index of the next candidate create() will use."""
        return self._cursor

    @property
    def remaining(self) -> int:
        """Number of candidates not yet consumed."""
        return len(self._candidates) - self._cursor

    def _next_candidate(self) -> Path:
        with self._lock:
            if self._cursor >= len(self._candidates):
                raise IndexOutOfRangeError(self._cursor, len(self._candidates))
            source = self._candidates[self._cursor]
            self._cursor += 1
        return source

    def create(self, destination: Path | str) -> str:
        """Write the next candidate image to destination. Returns the format used.

        Raises:
            IndexOutOfRangeError: All candidates have been consumed.
            ReadError: The codec could not decode the candidate.
            UnsupportedFormatError: No format was set and the destination
                extension does not name a supported one.
            WriteError: The codec could not write destination.
        """
        destination = Path(destination)
        source = self._next_candidate()
        logger.debug("Selected %s (%d left)", source, self.remaining)

        try:
            image = self._codec.decode(source)
        except (OSError, ValueError) as exc:
            raise ReadError(source, str(exc)) from exc

        fmt = self._format if self._format is not None else format_from_path(destination)

        # TODO: scale to (self._width, self._height) once resizing is supported.
        try:
            self._codec.encode(image, destination, fmt)
        except (OSError, ValueError) as exc:
            raise WriteError(destination, str(exc)) from exc

        logger.debug("Wrote %s as %s", destination, fmt)
        return fmt

    def sizes(self, width: int | None = None, height: int | None = None) -> tuple[int, int]:
        """Set the target size when both width and height are given. Returns (width, height)."""
        if width and height:
            self._width, self._height = (
                check_dimension("width", width),
                check_dimension("height", height),
            )
        return self._width, self._height

    def type(self, fmt: str | None = None) -> str | None:
        """Set the output format when fmt is given. Returns the current format (None = inferred)."""
        if fmt:
            self._format = check_format(fmt)
        return self._format
