"""
Application controller for the workout tracker.

Wires the location, map click, form submission and list click events to the
workout store, the map adapter and the list renderer. All mutable session
state lives in an explicit ``AppState``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..errors import LocationUnavailable
from ..frontend.list_renderer import ListRenderer
from ..frontend.map_adapter import MapAdapter
from ..storage.data_models import Coords, Workout
from ..storage.workout_store import WorkoutStore
from ..utils.config import TrackerConfig, get_config
from .form_controller import FormController, FormState, FormValues

logger = logging.getLogger(__name__)

LOCATION_ERROR_MESSAGE = "Could not get your location"


def parse_position(position: Optional[Dict[str, Any]]) -> Coords:
    """Coordinates of a ``dcc.Geolocation`` position."""
    if not position or position.get("lat") is None or position.get("lon") is None:
        raise LocationUnavailable("Geolocation returned no coordinates")
    return (float(position["lat"]), float(position["lon"]))


@dataclass
class AppState:
    """Session state owned by the controller."""
    map_enabled: bool = False
    center: Optional[Coords] = None
    zoom: Optional[int] = None
    location_error: Optional[str] = None
    form: FormState = field(default_factory=FormState)

    def map_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.map_enabled,
            "center": list(self.center) if self.center is not None else None,
            "zoom": self.zoom,
            "error": self.location_error,
        }

    @classmethod
    def from_dicts(cls, map_data: Optional[Dict[str, Any]],
                   form_data: Optional[Dict[str, Any]] = None) -> "AppState":
        map_data = map_data or {}
        center = map_data.get("center")
        return cls(
            map_enabled=bool(map_data.get("enabled", False)),
            center=(center[0], center[1]) if center else None,
            zoom=map_data.get("zoom"),
            location_error=map_data.get("error"),
            form=FormState.from_dict(form_data),
        )


class AppController:
    """
    Orchestrates the workout tracker.

    Control flow: location acquired -> map initialized and stored workouts
    replayed as markers -> map click opens the form -> submit builds a
    workout -> store appends and persists -> marker and list entry rendered
    -> form hidden.
    """

    def __init__(self, store: WorkoutStore, state: Optional[AppState] = None,
                 config: Optional[TrackerConfig] = None):
        self.config = config or get_config()
        self.state = state or AppState()
        self.store = store
        self.form = FormController(self.state.form)
        self.map = MapAdapter(self.config.map, form=self.form)
        self.list = ListRenderer()
        self._entries: List = self.list.render_all(self.store.all())

        if self.state.map_enabled and self.state.center is not None:
            self._load_map(self.state.center, self.state.zoom, replay=False)

    def _load_map(self, coords: Coords, zoom: Optional[int] = None,
                  replay: bool = True) -> Dict[str, Any]:
        viewport = self.map.initialize(coords, zoom)
        self.map.on_click(self.form.show)
        if replay:
            self.replay()

        self.state.map_enabled = True
        self.state.center = self.map.center
        self.state.zoom = self.map.zoom
        self.state.location_error = None
        return viewport

    def location_acquired(self, coords: Coords) -> Dict[str, Any]:
        """Initialize the map at the user's location and replay stored workouts."""
        viewport = self._load_map(coords)
        logger.info(f"Location acquired, replayed {len(self.store)} workouts on the map")
        return viewport

    def location_failed(self, message: Optional[str] = None) -> str:
        """
        Record that the location is unavailable.

        The map stays disabled for the rest of the session.

        Returns:
            Notice to show the user
        """
        self.state.map_enabled = False
        self.state.location_error = message or LOCATION_ERROR_MESSAGE
        logger.warning(f"Location unavailable: {self.state.location_error}")
        return LOCATION_ERROR_MESSAGE

    def map_clicked(self, click_data: Any) -> Optional[Coords]:
        """Open the form for a map click; ignored while the map is disabled."""
        return self.map.handle_click(click_data)

    def type_changed(self, workout_type: str) -> None:
        self.form.change_type(workout_type)

    def submit(self, values: Optional[FormValues] = None,
               created_at: Optional[datetime] = None) -> Workout:
        """
        Turn the submitted form into a stored, rendered workout.

        Raises:
            ValidationError: if the input is rejected; nothing is stored
        """
        workout = self.form.submit(values, created_at)
        self.store.append(workout)
        self.map.render_marker(workout)
        self._entries = self.list.insert(self._entries, workout, len(self.store) - 1)
        self.form.hide()
        return workout

    def entry_clicked(self, key: Optional[str]) -> Optional[Dict[str, Any]]:
        """Pan to the workout behind a list entry; None if it can't be found."""
        if not self.map.initialized:
            return None
        workout = self.list.resolve_click(key, self.store)
        if workout is None:
            return None
        return self.map.pan_to(workout.coords)

    def replay(self) -> List:
        """Render every stored workout as a map marker."""
        for workout in self.store.all():
            self.map.render_marker(workout)
        return self.markers()

    def markers(self) -> List:
        return list(self.map.markers)

    def entries(self) -> List:
        return list(self._entries)

    def snapshot(self) -> Dict[str, Any]:
        """Serializable session state for the memory stores."""
        return {"map": self.state.map_dict(), "form": self.state.form.to_dict()}
