"""Selector options and loading them from a YAML file."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from image_select.errors import ConfigurationError
from image_select.formats import check_format

logger = logging.getLogger(__name__)

CONFIG_NAME = "image-select"
OPTIONS = ("source_directory", "format", "width", "height")
DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080


def check_dimension(name: str, value: Any) -> int:
    """Return value if it is a positive int. Raises ConfigurationError otherwise."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(
            f"Parameter '{name}' must be a positive integer. Got {value!r}.",
            option=name,
        )
    return value


@dataclass(frozen=True)
class SelectorConfig:
    """The four options a Selector accepts."""

    source_directory: Path
    format: str | None = None
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> "SelectorConfig":
        """Validate params and build a config.

        Raises ConfigurationError for unknown, missing or invalid options and
        UnsupportedFormatError for a format outside the supported set.
        """
        for name in params:
            if name not in OPTIONS:
                raise ConfigurationError(f"Unknown parameter '{name}'.", option=name)

        source = params.get("source_directory")
        if source is None or source == "":
            raise ConfigurationError(
                "Parameter 'source_directory' is required.", option="source_directory"
            )

        fmt = params.get("format")
        if fmt is not None:
            check_format(fmt)

        return cls(
            source_directory=Path(source),
            format=fmt,
            width=check_dimension("width", params.get("width", DEFAULT_WIDTH)),
            height=check_dimension("height", params.get("height", DEFAULT_HEIGHT)),
        )


def _find_project_root() -> Path:
    """Find project root by looking for pyproject.toml, walking up from cwd."""
    cwd = Path.cwd()
    current = cwd
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    return cwd


def config_paths(override: Path | None) -> list[Path]:
    """Return search order for the config file."""
    if override is not None:
        return [override]
    return [
        _find_project_root() / "conf" / f"{CONFIG_NAME}.yaml",
        Path.home() / ".config" / CONFIG_NAME / f"{CONFIG_NAME}.yaml",
    ]


def read_config_file(config_path: Path | None = None) -> dict[str, Any]:
    """Read selector options from the first config file found.

    A relative source_directory is resolved against the file's directory.
    Keys are returned unvalidated; pass the result to SelectorConfig.from_mapping.

    Raises:
        FileNotFoundError: No config file exists at any search path.
        ConfigurationError: The file is not valid YAML or not a mapping.
    """
    paths = config_paths(config_path)
    for path in paths:
        if not path.exists():
            continue
        with path.open(encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Invalid config ({path}): file must contain a YAML mapping."
            )
        params = {str(k): v for k, v in data.items()}
        source = params.get("source_directory")
        if isinstance(source, str) and source:
            source_path = Path(source).expanduser()
            if not source_path.is_absolute():
                source_path = path.parent / source_path
            params["source_directory"] = str(source_path)
        logger.debug("Loaded config from %s", path)
        return params

    path_list = "\n".join(f"  - {p}" for p in paths)
    raise FileNotFoundError(
        f"Config not found. Create one of:\n{path_list}\n"
        f"With content:\n"
        '  source_directory: "/path/to/images"\n'
        '  format: "png"  # optional, default: inferred from output extension\n'
        "  width: 1920  # optional\n"
        "  height: 1080  # optional"
    )


def load_config(config_path: Path | None = None) -> SelectorConfig:
    """Load and validate selector options from a YAML config file."""
    return SelectorConfig.from_mapping(read_config_file(config_path))
