from __future__ import annotations

from typing import Iterable

import pandas as pd

from .data_models import Workout

EXPORT_COLUMNS = [
    "id", "date", "type", "description", "lat", "lng",
    "distance_km", "duration_min", "cadence_spm", "pace_min_per_km",
    "elevation_gain_m", "speed",
]


def workouts_to_dataframe(workouts: Iterable[Workout]) -> pd.DataFrame:
    rows = []
    for w in workouts:
        row = {
            "id": w.id,
            "date": w.date,
            "type": w.type,
            "description": w.description,
            "lat": w.coords[0],
            "lng": w.coords[1],
            "distance_km": w.distance,
            "duration_min": w.duration,
            "cadence_spm": w.cadence,
            "pace_min_per_km": w.pace,
            "elevation_gain_m": w.elevation_gain,
            "speed": w.speed,
        }
        rows.append(row)
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_workouts_csv(workouts: Iterable[Workout], path: str) -> None:
    df = workouts_to_dataframe(workouts)
    df.to_csv(path, index=False)
