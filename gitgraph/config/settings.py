"""
Settings management for gitgraph
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any

from gitgraph.config.template import DEFAULT_PRESET, Template, get_template
from gitgraph.constants import DEFAULT_AUTHOR, SETTINGS_FILE
from gitgraph.graph.types import COMPACT_MODE, Orientation

logger = logging.getLogger(__name__)


class Settings:
    """Manages application settings"""

    DEFAULT_SETTINGS: dict[str, Any] = {
        "graph": {
            "template": DEFAULT_PRESET,  # Preset name: "metro" or "blackarrow"
            "mode": None,  # None or "compact"
            "orientation": Orientation.VERTICAL.value,
            "author": DEFAULT_AUTHOR,
        },
        # Overrides applied on top of the preset, same shape as Template.from_dict
        "template": {},
        "ui": {"background": "#FFFFFF"},
    }

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize settings"""
        if config_path is None:
            config_path = Path.home() / SETTINGS_FILE

        self.config_path = config_path
        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        self.load()

    def load(self) -> None:
        """Load settings from file"""
        if self.config_path.exists():
            with open(self.config_path) as f:
                loaded = json.load(f)
                # Merge with defaults to handle new settings
                self._merge_settings(self.settings, loaded)
            logger.debug("Loaded settings from %s", self.config_path)

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
        """Get a setting by dot-separated path (e.g., 'graph.template')"""
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

    def get_template(self) -> Template:
        """Get the configured preset with the user's template overrides applied."""
        name = str(self.get("graph.template", DEFAULT_PRESET))
        overrides = self.get("template", {})
        if not isinstance(overrides, dict):
            logger.warning("Ignoring non-mapping template overrides in %s", self.config_path)
            overrides = {}
        return get_template(name, overrides)

    def get_mode(self) -> str | None:
        """Get the display mode. Anything but "compact" means the normal mode."""
        mode = self.get("graph.mode")
        return COMPACT_MODE if mode == COMPACT_MODE else None

    def get_orientation(self) -> Orientation:
        return Orientation.parse(self.get("graph.orientation"))

    def get_author(self) -> str:
        """Get the default commit author"""
        author: str = str(self.get("graph.author", DEFAULT_AUTHOR) or DEFAULT_AUTHOR)
        return author
