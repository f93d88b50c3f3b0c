"""
Data models for the workout tracker.
Defines the workout record, its running/cycling payloads and the
persisted (flat) representation.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Any, Tuple, Union

import numpy as np

from ..errors import CorruptWorkoutData, UnknownWorkoutType

RUNNING = 'running'
CYCLING = 'cycling'
WORKOUT_TYPES = (RUNNING, CYCLING)

MONTHS = (
    'January', 'February', 'March', 'April', 'May', 'June', 'July',
    'August', 'September', 'October', 'November', 'December',
)

ID_WIDTH = 10  # Trailing digits of the epoch-millisecond timestamp

Coords = Tuple[float, float]


@dataclass(frozen=True)
class RunningDetails:
    """Running-specific payload."""
    cadence: float  # steps per minute
    pace: float  # min/km


@dataclass(frozen=True)
class CyclingDetails:
    """Cycling-specific payload."""
    elevation_gain: float  # metres
    speed: float  # distance / duration


WorkoutDetails = Union[RunningDetails, CyclingDetails]


@dataclass(frozen=True)
class Workout:
    """A single logged workout at a map location."""
    id: str
    date: datetime
    coords: Coords
    distance: float  # km
    duration: float  # min
    type: str
    description: str
    details: WorkoutDetails

    @property
    def is_running(self) -> bool:
        return self.type == RUNNING

    @property
    def is_cycling(self) -> bool:
        return self.type == CYCLING

    @property
    def pace(self) -> Optional[float]:
        return self.details.pace if self.is_running else None

    @property
    def cadence(self) -> Optional[float]:
        return self.details.cadence if self.is_running else None

    @property
    def speed(self) -> Optional[float]:
        return self.details.speed if self.is_cycling else None

    @property
    def elevation_gain(self) -> Optional[float]:
        return self.details.elevation_gain if self.is_cycling else None

    @property
    def metric(self) -> float:
        """Derived metric of the variant: pace for running, speed for cycling."""
        return self.pace if self.is_running else self.speed

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the flat dictionary used for persistence."""
        data = {
            'id': self.id,
            'date': self.date.isoformat(),
            'coords': [self.coords[0], self.coords[1]],
            'distance': self.distance,
            'duration': self.duration,
            'type': self.type,
            'description': self.description,
        }
        if self.is_running:
            data['cadence'] = self.details.cadence
            data['pace'] = self.details.pace
        else:
            data['elevationGain'] = self.details.elevation_gain
            data['speed'] = self.details.speed
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Workout':
        """Rebuild a workout from its persisted form.

        Derived values (pace/speed, description) are taken as stored and
        never recomputed.
        """
        try:
            workout_type = data['type']
            if workout_type == RUNNING:
                details = RunningDetails(
                    cadence=float(data['cadence']),
                    pace=float(data['pace']),
                )
            elif workout_type == CYCLING:
                details = CyclingDetails(
                    elevation_gain=float(data['elevationGain']),
                    speed=float(data['speed']),
                )
            else:
                raise UnknownWorkoutType(f"Unknown workout type: {workout_type!r}")

            lat, lng = data['coords']
            return cls(
                id=str(data['id']),
                date=datetime.fromisoformat(data['date']),
                coords=(float(lat), float(lng)),
                distance=float(data['distance']),
                duration=float(data['duration']),
                type=workout_type,
                description=str(data['description']),
                details=details,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise CorruptWorkoutData(f"Malformed workout record: {e}") from e


def _divide(numerator: float, denominator: float) -> float:
    # IEEE division: x/0 gives inf or nan instead of raising
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def calculate_pace(distance: float, duration: float) -> float:
    """Running pace in minutes per kilometre."""
    return _divide(duration, distance)


def calculate_speed(distance: float, duration: float) -> float:
    """Cycling speed as distance over duration."""
    return _divide(distance, duration)


def derive_metric(workout_type: str, distance: float, duration: float) -> float:
    """Compute the derived metric for a workout type."""
    if workout_type == RUNNING:
        return calculate_pace(distance, duration)
    if workout_type == CYCLING:
        return calculate_speed(distance, duration)
    raise UnknownWorkoutType(f"Unknown workout type: {workout_type!r}")


def describe(workout_type: str, created_at: datetime) -> str:
    """Build a description such as 'Running on March 3'."""
    return f"{workout_type[0].upper()}{workout_type[1:]} on {MONTHS[created_at.month - 1]} {created_at.day}"


def create_workout_id(created_at: datetime) -> str:
    """Create a workout ID from the creation timestamp.

    The ID is the epoch-millisecond timestamp truncated to its last
    ID_WIDTH digits, so workouts created in the same millisecond share an ID.
    """
    millis = int(created_at.timestamp()) * 1000 + created_at.microsecond // 1000
    return str(millis)[-ID_WIDTH:]


def create_workout(workout_type: str, coords: Coords, distance: float, duration: float,
                   secondary: float, created_at: Optional[datetime] = None) -> Workout:
    """
    Create a workout of the given type.

    Args:
        workout_type: 'running' or 'cycling'
        coords: (latitude, longitude) of the workout
        distance: Distance in km
        duration: Duration in minutes
        secondary: Cadence for running, elevation gain for cycling
        created_at: Creation time, defaults to now

    Returns:
        Workout with its derived metric and description computed
    """
    if workout_type not in WORKOUT_TYPES:
        raise UnknownWorkoutType(f"Unknown workout type: {workout_type!r}")

    created_at = created_at or datetime.now()
    metric = derive_metric(workout_type, distance, duration)

    if workout_type == RUNNING:
        details = RunningDetails(cadence=secondary, pace=metric)
    else:
        details = CyclingDetails(elevation_gain=secondary, speed=metric)

    return Workout(
        id=create_workout_id(created_at),
        date=created_at,
        coords=(coords[0], coords[1]),
        distance=distance,
        duration=duration,
        type=workout_type,
        description=describe(workout_type, created_at),
        details=details,
    )


def create_running_workout(coords: Coords, distance: float, duration: float,
                           cadence: float, created_at: Optional[datetime] = None) -> Workout:
    """Create a running workout."""
    return create_workout(RUNNING, coords, distance, duration, cadence, created_at)


def create_cycling_workout(coords: Coords, distance: float, duration: float,
                           elevation_gain: float, created_at: Optional[datetime] = None) -> Workout:
    """Create a cycling workout."""
    return create_workout(CYCLING, coords, distance, duration, elevation_gain, created_at)
