"""
Workout store for the workout tracker.
Holds the ordered workout collection and writes it through to a
key-value persistence backend.
"""
import json
import logging
import threading
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple

from .data_models import Workout
from ..errors import CorruptWorkoutData, PersistenceUnavailable
from ..utils.config import get_config

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Key-value storage held in a plain dict."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        if data is not None and not isinstance(data, dict):
            logger.warning(f"Ignoring stored data of type {type(data).__name__}")
            data = None
        self.data: Dict[str, str] = dict(data or {})

    def read(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def write(self, key: str, value: str) -> None:
        self.data[key] = value


class BrowserStorage(MemoryStorage):
    """
    Key-value storage backed by the browser's local storage.

    Wraps the ``data`` of a ``dcc.Store(storage_type="local")``. Writes land
    in ``self.data``, which a callback returns to the browser to persist.
    """


class JSONFileStorage:
    """Key-value storage with one JSON file per key under a data directory."""

    _lock = threading.Lock()

    def __init__(self, data_dir: Optional[str] = None):
        config = get_config()
        self.data_dir = Path(data_dir) if data_dir else Path(config.storage.data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path(key)
        with self._lock:
            if not path.exists():
                return None
            try:
                return path.read_text(encoding='utf-8')
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Could not read {path}: {e}")
                return None

    def write(self, key: str, value: str) -> None:
        path = self._path(key)
        with self._lock:
            try:
                self.data_dir.mkdir(parents=True, exist_ok=True)
                path.write_text(value, encoding='utf-8')
            except OSError as e:
                raise PersistenceUnavailable(f"Could not write {path}: {e}") from e


class WorkoutStore:
    """
    Ordered collection of workouts, persisted write-through.

    The collection is saved as a JSON array of flat workout records under a
    single storage key. Loading never fails: a missing or corrupt value
    leaves the store empty.
    """

    def __init__(self, storage, key: Optional[str] = None):
        self.storage = storage
        self.key = key or get_config().storage.storage_key
        self._workouts = []
        self._load()

    def _load(self) -> None:
        raw = self.storage.read(self.key)
        if raw is None:
            return

        try:
            records = json.loads(raw)
            if not isinstance(records, list):
                raise CorruptWorkoutData(f"Expected a list of workouts, got {type(records).__name__}")
            workouts = [Workout.from_dict(record) for record in records]
        except (json.JSONDecodeError, TypeError, CorruptWorkoutData) as e:
            logger.warning(f"Ignoring persisted workouts under '{self.key}': {e}")
            return

        self._workouts = workouts
        logger.info(f"Loaded {len(workouts)} workouts")

    def serialize(self) -> str:
        """Serialize the collection to its persisted JSON form."""
        return json.dumps([workout.to_dict() for workout in self._workouts])

    def _persist(self) -> None:
        try:
            self.storage.write(self.key, self.serialize())
        except (PersistenceUnavailable, OSError) as e:
            logger.warning(f"Could not persist workouts: {e}")

    def append(self, workout: Workout) -> None:
        """Add a workout and persist the whole collection."""
        self._workouts.append(workout)
        logger.info(f"Added workout {workout.id}: {workout.description}")
        self._persist()

    def all(self) -> Tuple[Workout, ...]:
        """Return all workouts in insertion order."""
        return tuple(self._workouts)

    def find_by_id(self, workout_id: str) -> Optional[Workout]:
        """Return the first workout with this ID, or None."""
        for workout in self._workouts:
            if workout.id == workout_id:
                return workout
        return None

    def __len__(self) -> int:
        return len(self._workouts)

    def __iter__(self) -> Iterator[Workout]:
        return iter(self._workouts)
