"""Workout data models and persistence."""

from .data_models import (
    Workout,
    RunningDetails,
    CyclingDetails,
    RUNNING,
    CYCLING,
    WORKOUT_TYPES,
    calculate_pace,
    calculate_speed,
    derive_metric,
    describe,
    create_workout_id,
    create_workout,
    create_running_workout,
    create_cycling_workout
)
from .workout_store import WorkoutStore, MemoryStorage, BrowserStorage, JSONFileStorage
from .export import workouts_to_dataframe, export_workouts_csv

__all__ = [
    # Data models
    "Workout",
    "RunningDetails",
    "CyclingDetails",
    "RUNNING",
    "CYCLING",
    "WORKOUT_TYPES",
    "calculate_pace",
    "calculate_speed",
    "derive_metric",
    "describe",
    "create_workout_id",
    "create_workout",
    "create_running_workout",
    "create_cycling_workout",

    # Persistence
    "WorkoutStore",
    "MemoryStorage",
    "BrowserStorage",
    "JSONFileStorage",

    # Export
    "workouts_to_dataframe",
    "export_workouts_csv"
]
