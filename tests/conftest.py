from datetime import datetime

import pytest

from workout_tracker.storage.data_models import create_cycling_workout, create_running_workout
from workout_tracker.storage.workout_store import MemoryStorage, WorkoutStore
from workout_tracker.utils.config import reset_config

MARCH_3 = datetime(2024, 3, 3, 10, 30, 0)
LISBON = (38.7223, -9.1393)


@pytest.fixture(autouse=True)
def fresh_config():
    config = reset_config()
    yield config
    reset_config()


@pytest.fixture
def created_at():
    return MARCH_3


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return WorkoutStore(storage)


@pytest.fixture
def run_workout():
    return create_running_workout(LISBON, 5, 25, 178, created_at=MARCH_3)


@pytest.fixture
def ride_workout():
    return create_cycling_workout((38.75, -9.2), 20, 60, 300, created_at=datetime(2024, 3, 4, 8, 0, 0))
