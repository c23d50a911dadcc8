"""Shared pytest fixtures."""

from pathlib import Path

import pytest
from PIL import Image


class FakeCodec:
    """ImageCodec stand-in that records calls instead of touching pixels."""

    def __init__(self) -> None:
        self.decoded: list[Path] = []
        self.encoded: list[tuple[str, Path, str]] = []
        self.read_error: Exception | None = None
        self.write_error: Exception | None = None

    def decode(self, path: Path) -> str:
        self.decoded.append(path)
        if self.read_error is not None:
            raise self.read_error
        return f"image:{path.name}"

    def encode(self, image: str, path: Path, fmt: str) -> None:
        if self.write_error is not None:
            raise self.write_error
        self.encoded.append((image, path, fmt))


@pytest.fixture
def fake_codec() -> FakeCodec:
    return FakeCodec()


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """Create a folder with three small PNG images (one in a subfolder)."""
    folder = tmp_path / "images"
    (folder / "nested").mkdir(parents=True)
    for name, color in [("a.png", "red"), ("b.png", "green"), ("nested/c.png", "blue")]:
        Image.new("RGB", (4, 3), color=color).save(folder / name, "PNG")
    return folder


@pytest.fixture
def single_image_dir(tmp_path: Path) -> Path:
    """Create a folder holding only a.png."""
    folder = tmp_path / "single"
    folder.mkdir()
    Image.new("RGBA", (8, 6), color=(255, 0, 0, 128)).save(folder / "a.png", "PNG")
    return folder


@pytest.fixture
def temp_config(tmp_path: Path, image_dir: Path) -> Path:
    """Create a config file pointing at image_dir through a relative path."""
    config_path = tmp_path / "image-select.yaml"
    config_content = '''source_directory: "images"
width: 800
height: 600
'''
    config_path.write_text(config_content, encoding="utf-8")
    return config_path
