"""Console colours for report output.

The bundled ``data/theme.toml`` holds the default palette. A
``theme.toml`` in the user config directory may redefine any subset of
its ``[colors]`` table; unknown names or malformed values make the
whole palette fall back to the defaults.
"""

import logging
import re
import tomllib
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from gitprune.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Palette used by the console and the report sink.

    The last four colours render the ref tiers of a report: refs
    matching a rule, refs safe to delete, refs kept for unmerged
    changes, and deletion lines.
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    marked: str = "#faf870"
    safe: str = "#c1ff62"
    unsafe: str = "#f53263"
    deleted: str = "#0e8ac8"

    @field_validator("*")
    @classmethod
    def check_hex(cls, value: str) -> str:
        if not _HEX_COLOR.fullmatch(value):
            msg = f"expected #RGB or #RRGGBB, got {value!r}"
            raise ValueError(msg)
        return value

    def styles(self) -> dict[str, str]:
        """Map every Rich style name used by gitprune to its definition."""
        styles = self.model_dump()
        styles["error"] = f"bold {self.error}"
        styles["bold_header"] = f"bold {self.header}"
        return styles


def read_colors(source: Path | Traversable) -> dict[str, object]:
    """Return the ``[colors]`` table of a theme file.

    A missing or unreadable file yields an empty table.
    """
    try:
        with source.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", source, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", source)
        return {}
    return colors


def load_theme() -> ThemeColors:
    """Merge the user's colour overrides into the bundled palette."""
    bundled = read_colors(resources.files("gitprune.data").joinpath("theme.toml"))
    overrides = read_colors(get_user_theme_path())
    try:
        return ThemeColors.model_validate({**bundled, **overrides})
    except ValidationError as e:
        logger.warning("Invalid theme colours, using defaults: %s", e)
        return ThemeColors()


_theme: Theme | None = None


def get_theme() -> Theme:
    """Return the Rich theme, built once per process."""
    global _theme
    if _theme is None:
        _theme = Theme(load_theme().styles())
    return _theme
