"""
Configuration module for the workout tracker.
Groups map, storage and UI settings behind a single config object.
"""
from dataclasses import dataclass
from typing import Dict, Any, Tuple


@dataclass
class MapSettings:
    """Map widget configuration."""
    zoom: int = 13  # Zoom level used for the initial view and for panning
    tile_url: str = "https://{s}.tile.openstreetmap.fr/hot/{z}/{x}/{y}.png"
    attribution: str = (
        '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
    )
    default_center: Tuple[float, float] = (0.0, 0.0)  # Shown until location is known
    popup_max_width: int = 250
    popup_min_width: int = 100
    pan_transition: str = "flyTo"


@dataclass
class StorageSettings:
    """Workout persistence configuration."""
    backend: str = "browser"  # 'browser' (local storage) or 'file'
    storage_key: str = "workouts"
    data_dir: str = "workout_data"


@dataclass
class UISettings:
    """Page configuration."""
    title: str = "Workout Tracker"
    sidebar_breakpoint_px: int = 580  # Sidebar slides only at or below this width
    default_workout_type: str = "running"


STORAGE_BACKENDS = ("browser", "file")


class TrackerConfig:
    """Main configuration class for the workout tracker."""

    def __init__(self):
        self.map = MapSettings()
        self.storage = StorageSettings()
        self.ui = UISettings()
        self._user_inputs: Dict[str, Any] = {}

    def _update(self, section, prefix: str, **kwargs):
        for key, value in kwargs.items():
            if hasattr(section, key):
                setattr(section, key, value)
                self._user_inputs[f'{prefix}_{key}'] = value
            else:
                raise ValueError(f"Unknown {prefix} setting: {key}")

    def update_map_settings(self, **kwargs):
        """Update map settings dynamically."""
        self._update(self.map, 'map', **kwargs)

    def update_storage_settings(self, **kwargs):
        """Update storage settings dynamically."""
        self._update(self.storage, 'storage', **kwargs)

    def update_ui_settings(self, **kwargs):
        """Update UI settings dynamically."""
        self._update(self.ui, 'ui', **kwargs)

    def get_summary(self) -> Dict[str, Any]:
        """Get configuration summary."""
        return {
            'map': {
                'zoom': self.map.zoom,
                'tile_url': self.map.tile_url,
            },
            'storage': {
                'backend': self.storage.backend,
                'storage_key': self.storage.storage_key,
                'data_dir': self.storage.data_dir,
            },
            'ui': {
                'title': self.ui.title,
                'sidebar_breakpoint_px': self.ui.sidebar_breakpoint_px,
            },
            'user_inputs': self._user_inputs,
        }

    def validate_configuration(self) -> bool:
        """Validate that the configuration is usable."""
        errors = []

        if self.map.zoom < 0:
            errors.append("Map zoom must not be negative")

        if self.storage.backend not in STORAGE_BACKENDS:
            errors.append(f"Storage backend must be one of {', '.join(STORAGE_BACKENDS)}")

        if not self.storage.storage_key:
            errors.append("Storage key must not be empty")

        if errors:
            raise ValueError(f"Configuration errors: {'; '.join(errors)}")

        return True


# Global configuration instance
config = TrackerConfig()


def get_config() -> TrackerConfig:
    """Get the global configuration instance."""
    return config


def reset_config() -> TrackerConfig:
    """Reset configuration to defaults."""
    global config
    config = TrackerConfig()
    return config
