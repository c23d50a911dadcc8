"""Decode and encode images through Pillow."""

import logging
from pathlib import Path
from typing import Any, Protocol

from PIL import Image

logger = logging.getLogger(__name__)

# Supported format identifier -> Pillow format name. "raw" has no Pillow plugin.
PILLOW_FORMATS = {
    "bmp": "BMP",
    "gif": "GIF",
    "jpeg": "JPEG",
    "png": "PNG",
    "pnm": "PPM",
    "sgi": "SGI",
    "tga": "TGA",
    "tiff": "TIFF",
}

# Modes each writer accepts as-is; anything else is converted before saving.
# PNG leaves out "I": Pillow deprecates saving it.
# GIF and TIFF writers handle their own conversion.
SAVE_MODES = {
    "bmp": ("1", "L", "P", "RGB", "RGBA"),
    "jpeg": ("L", "RGB", "CMYK"),
    "png": ("1", "L", "LA", "P", "RGB", "RGBA"),
    "pnm": ("1", "L", "RGB"),
    "sgi": ("L", "RGB", "RGBA"),
    "tga": ("1", "L", "LA", "P", "RGB", "RGBA"),
}


class ImageCodec(Protocol):
    """Decode/encode capability the selector depends on.

    encode() reports failure by raising OSError or ValueError; the exception
    text is passed on to the caller as the codec error message.
    """

    def decode(self, path: Path) -> Any: ...

    def encode(self, image: Any, path: Path, fmt: str) -> None: ...


def _has_alpha(image: Image.Image) -> bool:
    return "A" in image.getbands() or "transparency" in image.info


def _prepare_mode(image: Image.Image, fmt: str) -> Image.Image:
    """Convert image to a mode the target writer can store."""
    allowed = SAVE_MODES.get(fmt)
    if allowed is None or image.mode in allowed:
        return image
    target = "RGBA" if "RGBA" in allowed and _has_alpha(image) else "RGB"
    logger.debug("Converting %s image to %s for %s", image.mode, target, fmt)
    return image.convert(target)


class PillowCodec:
    """ImageCodec backed by Pillow."""

    def decode(self, path: Path) -> Image.Image:
        """Load path fully into memory and return a detached image.

        Oversized images are reported as ValueError like other decode failures.
        """
        try:
            with Image.open(path) as img:
                img.load()
                return img.copy()
        except Image.DecompressionBombError as exc:
            raise ValueError(str(exc)) from exc

    def encode(self, image: Image.Image, path: Path, fmt: str) -> None:
        """Write image to path in fmt, creating parent directories as needed."""
        path.parent.mkdir(parents=True, exist_ok=True)
        if fmt == "raw":
            # Uncompressed pixel data, no header.
            path.write_bytes(image.tobytes())
            return
        pillow_format = PILLOW_FORMATS.get(fmt)
        if pillow_format is None:
            raise ValueError(f"No encoder for format '{fmt}'")
        _prepare_mode(image, fmt).save(path, format=pillow_format)
