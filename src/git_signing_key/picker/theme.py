"""Configurable theme for the key picker.

The Theme dataclass holds the visual elements of the list (styles, glyphs)
so they can be overridden from the config file.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


@dataclass
class Theme:
    """Visual theme for the picker list.

    All styles use Rich style syntax (e.g. "reverse", "bold cyan", "dim").

    Attributes:
        highlight_style: Style for the line under the cursor.
        current_style: Style for the "currently configured" marker.
        label_style: Style for the key's uid text.
        cursor_icon: Prefix shown on the highlighted line.
        current_marker: Suffix appended to the configured key's line.
    """

    # Styles
    highlight_style: str = "reverse"
    current_style: str = "green"
    label_style: str = ""

    # Icons
    cursor_icon: str = "> "
    current_marker: str = " ← current"

    @classmethod
    def from_config(cls, overrides: dict[str, Any] | None) -> "Theme":
        """Build a theme from a config mapping, ignoring unknown keys and nulls."""
        if not overrides:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{k: str(v) for k, v in overrides.items() if k in known and v is not None})


# Default theme used when none is specified
DEFAULT_THEME = Theme()
