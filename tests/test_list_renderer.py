from datetime import datetime

import pytest

from workout_tracker.frontend.list_renderer import ListRenderer, entry_key, parse_entry_key
from workout_tracker.frontend.utils.data_formatter import DataFormatter
from workout_tracker.storage.data_models import create_cycling_workout, create_running_workout

from conftest import LISBON


@pytest.fixture
def renderer():
    return ListRenderer()


def _rows(entry):
    """(icon, value, unit) of each detail row."""
    return [tuple(span.children for span in row.children) for row in entry.children[1:]]


def test_running_entry(renderer, run_workout):
    entry = renderer.render(run_workout)
    props = entry.to_plotly_json()["props"]
    assert entry.className == "workout workout--running"
    assert props["data-id"] == run_workout.id
    assert entry.children[0].children == "Running on March 3"
    assert entry.children[0].className == "workout__title"
    assert _rows(entry) == [
        ("🏃‍♂️", "5", "km"),
        ("⏱", "25", "min"),
        ("⚡️", "5.0", "min/km"),
        ("🦶🏼", "178", "spm"),
    ]


def test_cycling_entry_rounds_speed_for_display(renderer, ride_workout):
    entry = renderer.render(ride_workout)
    assert entry.className == "workout workout--cycling"
    assert _rows(entry) == [
        ("🚴‍♀️", "20", "km"),
        ("⏱", "60", "min"),
        ("⚡️", "0.3", "km/h"),
        ("⛰", "300", "m"),
    ]


def test_fractional_inputs_are_shown_as_entered(renderer):
    workout = create_running_workout(LISBON, 7.3, 41.9, 165.5, created_at=datetime(2024, 1, 9))
    values = [value for _, value, _ in _rows(renderer.render(workout))]
    assert values == ["7.3", "41.9", "5.7", "165.5"]


def test_insert_puts_newest_first(renderer, run_workout, ride_workout):
    entries = renderer.insert([], run_workout, 0)
    entries = renderer.insert(entries, ride_workout, 1)
    assert [e.className for e in entries] == ["workout workout--cycling", "workout workout--running"]


def test_render_all_is_reverse_chronological(renderer, run_workout, ride_workout):
    entries = renderer.render_all([run_workout, ride_workout])
    assert [e.id["index"] for e in entries] == [entry_key(ride_workout, 1), entry_key(run_workout, 0)]


def test_entry_keys_stay_unique_for_colliding_ids(renderer, run_workout):
    twin = create_cycling_workout(LISBON, 1, 1, 1, created_at=run_workout.date)
    assert twin.id == run_workout.id
    entries = renderer.render_all([run_workout, twin])
    assert len({e.id["index"] for e in entries}) == 2


def test_parse_entry_key(run_workout):
    assert parse_entry_key(entry_key(run_workout, 3)) == run_workout.id
    assert parse_entry_key(None) is None
    assert parse_entry_key("garbage") is None


def test_resolve_click(renderer, store, run_workout):
    store.append(run_workout)
    assert renderer.resolve_click(entry_key(run_workout, 0), store) is run_workout
    assert renderer.resolve_click("0:0000000000", store) is None
    assert renderer.resolve_click(None, store) is None


@pytest.mark.parametrize("value,expected", [
    (5.0, "5"),
    (5, "5"),
    (5.5, "5.5"),
    (0.1 + 0.2, "0.30000000000000004"),
    (-15.0, "-15"),
    (1e-6, "0.000001"),
    (1e-7, "1e-7"),
    (-2.5e-8, "-2.5e-8"),
    (1e21, "1e+21"),
    (123.456, "123.456"),
    (-0.0, "0"),
    (float("nan"), "NaN"),
    (float("inf"), "Infinity"),
])
def test_format_number(value, expected):
    assert DataFormatter().format_number(value) == expected


@pytest.mark.parametrize("value,expected", [
    (20 / 60, "0.3"),
    (5.0, "5.0"),
    (0.25, "0.3"),
    (1.45, "1.4"),
    (-0.04, "-0.0"),
    (0.0, "0.0"),
    (12.96, "13.0"),
])
def test_format_fixed_matches_to_fixed(value, expected):
    assert DataFormatter().format_fixed(value) == expected
