"""
Workout Tracker - log runs and rides by clicking where they happened.

A Dash application that records running and cycling workouts at a map
location, persists them across sessions and shows them as a list and as
map markers.
"""

from .core.controller import AppController, AppState
from .core.form_controller import FormController, FormState, FormValues
from .frontend.list_renderer import ListRenderer
from .frontend.map_adapter import MapAdapter
from .storage.data_models import (
    Workout,
    create_workout,
    create_running_workout,
    create_cycling_workout
)
from .storage.workout_store import WorkoutStore, MemoryStorage, BrowserStorage, JSONFileStorage
from .storage.export import export_workouts_csv
from .utils.config import get_config, reset_config

__version__ = "1.0.0"

__all__ = [
    # Controllers
    "AppController",
    "AppState",
    "FormController",
    "FormState",
    "FormValues",

    # Rendering
    "ListRenderer",
    "MapAdapter",

    # Data
    "Workout",
    "create_workout",
    "create_running_workout",
    "create_cycling_workout",
    "WorkoutStore",
    "MemoryStorage",
    "BrowserStorage",
    "JSONFileStorage",
    "export_workouts_csv",

    # Configuration
    "get_config",
    "reset_config"
]
