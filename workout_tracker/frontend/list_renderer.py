"""
List Renderer
=============

Turns workouts into entries of the workout log shown under the form.
Entries are kept newest first, and clicking one resolves the workout it
shows so the map can pan to it.
"""

import logging
from typing import Iterable, List, Optional

from dash import html

from .utils.data_formatter import DataFormatter
from ..storage.data_models import Workout

logger = logging.getLogger(__name__)

ENTRY_TYPE = 'workout-entry'


def entry_key(workout: Workout, ordinal: int) -> str:
    """Component key for a list entry.

    Workout IDs may collide, so the key also carries the entry's position
    in the store to keep Dash component IDs unique.
    """
    return f"{ordinal}:{workout.id}"


def parse_entry_key(key: Optional[str]) -> Optional[str]:
    """Workout ID carried by an entry key."""
    if not key or ':' not in key:
        return None
    return key.split(':', 1)[1]


class ListRenderer:
    """Render workouts as ``<li>`` entries of the workout list."""

    def __init__(self):
        self.formatter = DataFormatter()

    def _detail(self, icon: str, value: str, unit: str) -> html.Div:
        return html.Div(
            className='workout__details',
            children=[
                html.Span(icon, className='workout__icon'),
                html.Span(value, className='workout__value'),
                html.Span(unit, className='workout__unit'),
            ],
        )

    def render(self, workout: Workout, ordinal: int = 0) -> html.Li:
        """Build the list entry for a workout."""
        fmt = self.formatter
        details = [
            self._detail(fmt.workout_emoji(workout.type), fmt.format_number(workout.distance), 'km'),
            self._detail('⏱', fmt.format_number(workout.duration), 'min'),
        ]

        if workout.is_running:
            details += [
                self._detail('⚡️', fmt.format_fixed(workout.pace), 'min/km'),
                self._detail('🦶🏼', fmt.format_number(workout.cadence), 'spm'),
            ]
        if workout.is_cycling:
            details += [
                self._detail('⚡️', fmt.format_fixed(workout.speed), 'km/h'),
                self._detail('⛰', fmt.format_number(workout.elevation_gain), 'm'),
            ]

        return html.Li(
            id={'type': ENTRY_TYPE, 'index': entry_key(workout, ordinal)},
            className=f'workout workout--{workout.type}',
            n_clicks=0,
            children=[html.H2(workout.description, className='workout__title')] + details,
            **{'data-id': workout.id},
        )

    def insert(self, entries: List[html.Li], workout: Workout, ordinal: int = 0) -> List[html.Li]:
        """Return ``entries`` with the new workout's entry placed first."""
        return [self.render(workout, ordinal)] + list(entries)

    def render_all(self, workouts: Iterable[Workout]) -> List[html.Li]:
        """Render a whole collection, newest first."""
        entries: List[html.Li] = []
        for ordinal, workout in enumerate(workouts):
            entries = self.insert(entries, workout, ordinal)
        return entries

    def resolve_click(self, key: Optional[str], store) -> Optional[Workout]:
        """Find the workout behind a clicked entry, or None."""
        workout_id = parse_entry_key(key)
        if workout_id is None:
            return None
        workout = store.find_by_id(workout_id)
        if workout is None:
            logger.debug(f"No workout with id {workout_id}")
        return workout
