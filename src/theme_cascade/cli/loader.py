"""Read JSON theme files for the CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

from theme_cascade.model.theme import ThemeDefinition


class ThemeFileError(Exception):
    """Raised when a theme file cannot be read or decoded."""


def load_definition(path: str | Path) -> ThemeDefinition:
    """Load a ThemeDefinition from a JSON file."""
    theme_path = Path(path)
    try:
        data = json.loads(theme_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ThemeFileError(f"{theme_path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise ThemeFileError(f"{theme_path.name}: expected a JSON object at top level")
    return ThemeDefinition.from_dict(data)
