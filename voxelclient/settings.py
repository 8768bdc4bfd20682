"""Loading and saving the game settings file."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

logger = logging.getLogger(__name__)


class SettingsError(Exception):
    """Raised when the settings file cannot be read, parsed or written."""


@dataclass
class Settings:
    """Settings of the game."""

    window_size: tuple[int, int] = (1600, 900)
    invert_mouse: bool = False
    render_distance: tuple[int, int, int, int, int, int] = (0, 0, 0, 0, 0, 0)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> Settings:
        """Build settings from parsed TOML; missing fields take their defaults."""
        default = cls()
        invert_mouse = data.get("invert_mouse", default.invert_mouse)
        if not isinstance(invert_mouse, bool):
            raise ValueError("invert_mouse must be a boolean")
        return cls(
            window_size=_int_tuple(data.get("window_size", default.window_size), 2, "window_size"),
            invert_mouse=invert_mouse,
            render_distance=_int_tuple(
                data.get("render_distance", default.render_distance), 6, "render_distance"
            ),
        )

    def to_mapping(self) -> dict[str, Any]:
        return {
            "window_size": list(self.window_size),
            "invert_mouse": self.invert_mouse,
            "render_distance": list(self.render_distance),
        }


def _int_tuple(value: Any, length: int, name: str) -> tuple[int, ...]:
    if not isinstance(value, (list, tuple)) or len(value) != length:
        raise ValueError(f"{name} must be a list of {length} integers")
    for item in value:
        if isinstance(item, bool) or not isinstance(item, int) or item < 0:
            raise ValueError(f"{name} must hold non-negative integers")
    return tuple(value)


def load_settings(folder_path: str | Path, file_path: str | Path) -> Settings:
    """Read the settings file, creating it with defaults when it is missing."""
    folder_path, file_path = Path(folder_path), Path(file_path)
    where = f"from folder path {folder_path} and file path {file_path}..."
    logger.info("Reading settings %s", where)
    if not file_path.is_file():
        folder_path.mkdir(parents=True, exist_ok=True)
        settings = Settings()
        write_settings(file_path, settings)
        return settings
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Failed to read settings file {where}") from exc
    try:
        return Settings.from_mapping(tomllib.loads(text))
    except (tomllib.TOMLDecodeError, ValueError) as exc:
        raise SettingsError(f"Failed to parse settings file {where}") from exc


def write_settings(path: str | Path, settings: Settings) -> None:
    """Write the settings to ``path``, replacing any previous content."""
    path = Path(path)
    logger.info("Writing settings...")
    try:
        path.write_text(tomli_w.dumps(settings.to_mapping()), encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Failed to write settings file {path}") from exc