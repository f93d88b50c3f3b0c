"""
Form controller for the workout tracker.

Owns the input workflow for a new workout: opening the form on a map click,
switching the secondary field with the workout type, validating the raw
input and building the workout record.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..errors import FormNotOpen, UnknownWorkoutType, ValidationError
from ..storage.data_models import (
    CYCLING,
    RUNNING,
    WORKOUT_TYPES,
    Coords,
    Workout,
    create_cycling_workout,
    create_running_workout,
)

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Inputs have to be positive numbers!"

# Secondary input shown for each workout type
SECONDARY_FIELDS = {RUNNING: "cadence", CYCLING: "elevation"}


def to_number(raw: Any) -> float:
    """Convert a raw input value to a float the way a browser's unary + does.

    Blank input is 0 and anything unparseable is NaN.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw)

    text = str(raw).strip()
    if not text:
        return 0.0
    if "_" in text:
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def all_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def all_positive(*values: float) -> bool:
    return all(v > 0 for v in values)


@dataclass
class FormValues:
    """Raw values of the form inputs, as typed."""
    distance: Any = ""
    duration: Any = ""
    cadence: Any = ""
    elevation: Any = ""


@dataclass
class FormState:
    """Hidden, or Visible(workout_type) with the captured map coordinates."""
    visible: bool = False
    workout_type: str = RUNNING
    coords: Optional[Coords] = None
    values: FormValues = field(default_factory=FormValues)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "visible": self.visible,
            "workout_type": self.workout_type,
            "coords": list(self.coords) if self.coords is not None else None,
            "values": asdict(self.values),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FormState":
        if not data:
            return cls()
        coords = data.get("coords")
        return cls(
            visible=bool(data.get("visible", False)),
            workout_type=data.get("workout_type", RUNNING),
            coords=(coords[0], coords[1]) if coords else None,
            values=FormValues(**data.get("values", {})),
        )


class FormController:
    """State machine behind the new-workout form."""

    def __init__(self, state: Optional[FormState] = None):
        self.state = state or FormState()

    @property
    def visible(self) -> bool:
        return self.state.visible

    @property
    def workout_type(self) -> str:
        return self.state.workout_type

    @property
    def active_field(self) -> str:
        """Secondary input shown for the current type."""
        return SECONDARY_FIELDS[self.state.workout_type]

    @property
    def hidden_field(self) -> str:
        """Secondary input hidden for the current type."""
        other = CYCLING if self.state.workout_type == RUNNING else RUNNING
        return SECONDARY_FIELDS[other]

    def show(self, coords: Coords) -> None:
        """Open the form for a map click at ``coords``."""
        if not self.state.visible:
            self.state.workout_type = RUNNING
        self.state.visible = True
        self.state.coords = (coords[0], coords[1])
        logger.debug(f"Form opened at {self.state.coords}")

    def change_type(self, workout_type: str) -> None:
        """Switch the workout type, toggling cadence/elevation."""
        if workout_type not in WORKOUT_TYPES:
            raise UnknownWorkoutType(f"Unknown workout type: {workout_type!r}")
        self.state.workout_type = workout_type

    def clear_inputs(self) -> None:
        self.state.values = FormValues()

    def hide(self) -> None:
        """Close the form and clear every input."""
        self.state.visible = False
        self.clear_inputs()

    def validate(self) -> Dict[str, float]:
        """
        Parse and validate the current inputs.

        Running requires distance, duration and cadence to be finite and
        positive. Cycling requires all three to be finite but only distance
        and duration to be positive; elevation gain may be zero or negative.

        Returns:
            Parsed numbers keyed by field name

        Raises:
            ValidationError: listing the offending fields
        """
        values = self.state.values
        secondary = self.active_field
        numbers = {
            "distance": to_number(values.distance),
            "duration": to_number(values.duration),
            secondary: to_number(getattr(values, secondary)),
        }

        must_be_positive = ["distance", "duration"]
        if self.state.workout_type == RUNNING:
            must_be_positive.append(secondary)

        invalid: List[str] = [
            name for name, value in numbers.items()
            if not all_finite(value) or (name in must_be_positive and not all_positive(value))
        ]
        if invalid:
            raise ValidationError(INVALID_INPUT_MESSAGE, fields=invalid)

        return numbers

    def submit(self, values: Optional[FormValues] = None,
               created_at: Optional[datetime] = None) -> Workout:
        """
        Validate the form and build the workout.

        The form stays open either way; the caller hides it once the workout
        has been stored and rendered. On failure the inputs are untouched.
        """
        if values is not None:
            self.state.values = values

        if not self.state.visible or self.state.coords is None:
            raise FormNotOpen("Pick a location on the map before adding a workout")

        numbers = self.validate()
        coords = self.state.coords

        if self.state.workout_type == RUNNING:
            workout = create_running_workout(
                coords, numbers["distance"], numbers["duration"], numbers["cadence"], created_at
            )
        else:
            workout = create_cycling_workout(
                coords, numbers["distance"], numbers["duration"], numbers["elevation"], created_at
            )

        return workout
