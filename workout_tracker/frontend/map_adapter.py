"""
Map Adapter
===========

Thin facade over the dash-leaflet map widget. It turns map clicks into
coordinates, renders workouts as markers with popups and produces the
viewport updates used to centre and pan the map.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

import dash_leaflet as dl

from .utils.data_formatter import DataFormatter
from ..storage.data_models import Coords, Workout
from ..utils.config import MapSettings, get_config

logger = logging.getLogger(__name__)

ClickHandler = Callable[[Coords], None]


def parse_click(click_data: Any) -> Optional[Coords]:
    """
    Extract (lat, lng) from a dash-leaflet click event.

    Accepts ``{"latlng": {"lat": .., "lng": ..}}``, a ``{"lat", "lng"}``
    mapping or a coordinate pair.
    """
    if not click_data:
        return None
    if isinstance(click_data, dict):
        latlng = click_data.get('latlng', click_data)
        if isinstance(latlng, dict):
            if 'lat' not in latlng or 'lng' not in latlng:
                return None
            return (float(latlng['lat']), float(latlng['lng']))
        click_data = latlng
    lat, lng = click_data
    return (float(lat), float(lng))


class MapAdapter:
    """
    Facade over the map widget.

    The adapter stays disabled until ``initialize`` is called with the
    user's location; until then clicks are dropped.
    """

    def __init__(self, settings: Optional[MapSettings] = None, form=None):
        self.settings = settings or get_config().map
        self.form = form
        self.formatter = DataFormatter()
        self.initialized = False
        self.center: Optional[Coords] = None
        self.zoom = self.settings.zoom
        self.markers: List[dl.Marker] = []
        self._click_handlers: List[ClickHandler] = []

    def initialize(self, center: Coords, zoom: Optional[int] = None) -> Dict[str, Any]:
        """Enable the map centred on ``center`` and return the viewport."""
        self.center = (center[0], center[1])
        self.zoom = zoom if zoom is not None else self.settings.zoom
        self.initialized = True
        logger.info(f"Map initialized at {self.center}, zoom {self.zoom}")
        return {'center': list(self.center), 'zoom': self.zoom}

    def on_click(self, handler: ClickHandler) -> None:
        """Register a handler called with the coordinates of every map click."""
        self._click_handlers.append(handler)

    def handle_click(self, click_data: Any) -> Optional[Coords]:
        """Dispatch a map click to the registered handlers, once each."""
        if not self.initialized:
            return None
        coords = parse_click(click_data)
        if coords is None:
            return None
        for handler in self._click_handlers:
            handler(coords)
        return coords

    def popup_content(self, workout: Workout) -> str:
        return f"{self.formatter.workout_emoji(workout.type)} {workout.description}"

    def render_marker(self, workout: Workout) -> dl.Marker:
        """Place a marker with a popup for ``workout``."""
        marker = dl.Marker(
            id={'type': 'workout-marker', 'index': len(self.markers)},
            position=[workout.coords[0], workout.coords[1]],
            children=dl.Popup(
                children=self.popup_content(workout),
                className=f"{workout.type}-popup",
                maxWidth=self.settings.popup_max_width,
                minWidth=self.settings.popup_min_width,
                autoClose=False,
                closeOnClick=False,
            ),
        )
        self.markers.append(marker)

        if self.form is not None:
            self.form.clear_inputs()

        return marker

    def pan_to(self, coords: Coords) -> Dict[str, Any]:
        """Return an animated viewport change to ``coords``."""
        self.center = (coords[0], coords[1])
        return {
            'center': list(self.center),
            'zoom': self.zoom,
            'transition': self.settings.pan_transition,
        }

    def build(self, map_id: str = 'map', markers_id: str = 'workout-markers') -> dl.Map:
        """Create the map component with its tile layer and marker layer."""
        center = self.center or self.settings.default_center
        return dl.Map(
            id=map_id,
            center=list(center),
            zoom=self.zoom,
            children=[
                dl.TileLayer(url=self.settings.tile_url, attribution=self.settings.attribution),
                dl.LayerGroup(id=markers_id, children=list(self.markers)),
            ],
            style={'height': '100%', 'width': '100%'},
        )
