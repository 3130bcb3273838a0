"""
Settings management for editkit
"""

import copy
import json
import os
import sys
from pathlib import Path
from typing import Any

from PySide6.QtCore import QLocale

from editkit.constants import (
    DEFAULT_MAX_RESULTS,
    DEFAULT_TAB_WIDTH,
    LOCALE_ENV_VAR,
    SETTINGS_PATH_PARTS,
)


class Settings:
    """Manages application settings"""

    DEFAULT_SETTINGS = {
        "matching": {
            "locale": "",  # Empty means the system locale
            "max_results": DEFAULT_MAX_RESULTS,
        },
        "editor": {
            "tab_width": DEFAULT_TAB_WIDTH,
        },
    }

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize settings"""
        if config_path is None:
            config_path = Path.home().joinpath(*SETTINGS_PATH_PARTS)

        self.config_path = config_path
        self.settings: dict[str, Any] = copy.deepcopy(self.DEFAULT_SETTINGS)
        self.load()

    def load(self) -> None:
        """Load settings from file, keeping defaults if it can't be read"""
        if not self.config_path.exists():
            return
        try:
            with open(self.config_path) as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"[Settings] Failed to load {self.config_path}: {e}", file=sys.stderr)
            return
        if not isinstance(loaded, dict):
            print(f"[Settings] Ignoring {self.config_path}: not a JSON object", file=sys.stderr)
            return
        # Merge with defaults to handle new settings
        self._merge_settings(self.settings, loaded)

    def save(self) -> None:
        """Save settings to file"""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            json.dump(self.settings, f, indent=2)

    def _merge_settings(self, base: dict[str, Any], updates: dict[str, Any]) -> None:
        """Recursively merge settings dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                base_dict: dict[str, Any] = base[key]
                value_dict: dict[str, Any] = value
                self._merge_settings(base_dict, value_dict)
            else:
                base[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get a setting by dot-separated path (e.g., 'matching.locale')"""
        parts = path.split(".")
        value: Any = self.settings

        for part in parts:
            if isinstance(value, dict):
                value_dict: dict[str, Any] = value
                if part in value_dict:
                    value = value_dict[part]
                else:
                    return default
            else:
                return default

        return value

    def set(self, path: str, value: Any) -> None:
        """Set a setting by dot-separated path"""
        parts = path.split(".")
        target: Any = self.settings

        for part in parts[:-1]:
            if part not in target:
                target[part] = {}
            target = target[part]

        target[parts[-1]] = value

    def get_locale(self) -> QLocale:
        """Get the locale used for case folding when matching.

        Falls back to $EDITKIT_LOCALE, then to the system default.
        """
        name: str = str(self.get("matching.locale", "") or "")
        if not name:
            name = os.environ.get(LOCALE_ENV_VAR, "")
        if not name:
            return QLocale()
        return QLocale(name)

    def get_max_results(self) -> int:
        """Get the maximum number of ranked results to show."""
        limit: int = int(self.get("matching.max_results", DEFAULT_MAX_RESULTS))
        return max(1, limit)

    def get_tab_width(self) -> int:
        """Get the column advance of a tab when measuring text."""
        width: int = int(self.get("editor.tab_width", DEFAULT_TAB_WIDTH))
        return max(1, width)
