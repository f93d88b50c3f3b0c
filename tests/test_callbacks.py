import json

import pytest
from dash import no_update

from workout_tracker.callbacks import (
    HIDDEN_FORM,
    HIDDEN_ROW,
    VISIBLE_FORM,
    VISIBLE_ROW,
    form_classes,
    form_update,
    location_update,
    open_store,
    pan_update,
    sidebar_update,
)
from workout_tracker.core.controller import LOCATION_ERROR_MESSAGE
from workout_tracker.core.form_controller import INVALID_INPUT_MESSAGE, FormValues
from workout_tracker.frontend.list_renderer import ENTRY_TYPE, entry_key

from conftest import LISBON, MARCH_3

CLICK = {"latlng": {"lat": 38.71, "lng": -9.14}}
MAP_ON = {"enabled": True, "center": list(LISBON), "zoom": 13}


@pytest.fixture
def open_form(fresh_config):
    """Form state after a click on an enabled map."""
    outputs = form_update(fresh_config, "map", CLICK, "running", FormValues(), None, MAP_ON, None)
    return outputs[0]


def _stored(config, *workouts):
    store = open_store(config, None)
    for workout in workouts:
        store.append(workout)
    return store.storage.data


# Location

def test_location_enables_map(fresh_config):
    map_data, viewport, displayed, message = location_update(
        fresh_config, "position", {"lat": 38.7223, "lon": -9.1393}, None, None, {"enabled": False}
    )
    assert map_data["enabled"] is True
    assert viewport == {"center": [38.7223, -9.1393], "zoom": 13}
    assert displayed is False
    assert message is no_update


def test_location_error_raises_notice(fresh_config):
    map_data, viewport, displayed, message = location_update(
        fresh_config, "position_error", None, {"code": 1, "message": "User denied Geolocation"},
        None, {"enabled": False}
    )
    assert map_data["enabled"] is False
    assert map_data["error"] == "User denied Geolocation"
    assert viewport is no_update
    assert displayed is True
    assert message == LOCATION_ERROR_MESSAGE


def test_position_without_coordinates_raises_notice(fresh_config):
    outputs = location_update(fresh_config, "position", {"accuracy": 10}, None, None, None)
    assert outputs[0]["enabled"] is False
    assert outputs[2:] == (True, LOCATION_ERROR_MESSAGE)


def test_location_ignored_once_map_enabled(fresh_config):
    outputs = location_update(fresh_config, "position", {"lat": 1.0, "lon": 2.0}, None, None, MAP_ON)
    assert outputs == (no_update,) * 4


# Form

def test_map_click_opens_form(open_form):
    assert open_form["visible"] is True
    assert open_form["coords"] == [38.71, -9.14]
    assert open_form["workout_type"] == "running"


def test_map_click_ignored_while_map_disabled(fresh_config):
    outputs = form_update(fresh_config, "map", CLICK, "running", FormValues(), None, {"enabled": False}, None)
    assert outputs[0]["visible"] is False
    assert outputs[2:6] == (no_update,) * 4
    assert outputs[6] is no_update


def test_type_change_switches_secondary_field(fresh_config, open_form):
    outputs = form_update(fresh_config, "input-type", None, "cycling", FormValues(distance=3),
                          None, MAP_ON, open_form)
    assert outputs[0]["workout_type"] == "cycling"
    assert outputs[2:6] == (no_update,) * 4
    assert form_classes(outputs[0]) == (VISIBLE_FORM, HIDDEN_ROW, VISIBLE_ROW)


def test_unknown_type_keeps_form(fresh_config, open_form):
    outputs = form_update(fresh_config, "input-type", None, "rowing", FormValues(), None, MAP_ON, open_form)
    assert outputs[0]["workout_type"] == "running"
    assert outputs[7] is False


def test_submit_stores_workout_and_clears_inputs(fresh_config, open_form):
    outputs = form_update(fresh_config, "form-submit", None, "running",
                          FormValues(distance=5, duration=25, cadence=178),
                          None, MAP_ON, open_form, created_at=MARCH_3)

    form_state, _type, *inputs, workouts_data, displayed, message = outputs
    assert form_state["visible"] is False
    assert inputs == [None, None, None, None]
    assert displayed is False

    persisted = json.loads(workouts_data["workouts"])
    assert len(persisted) == 1
    assert persisted[0]["coords"] == [38.71, -9.14]
    assert persisted[0]["description"] == "Running on March 3"


def test_enter_in_a_field_submits(fresh_config, open_form):
    outputs = form_update(fresh_config, "input-cadence", None, "running",
                          FormValues(distance=5, duration=25, cadence=178), None, MAP_ON, open_form)
    assert outputs[0]["visible"] is False
    assert "workouts" in outputs[6]


def test_invalid_submit_shows_alert_and_keeps_inputs(fresh_config, open_form):
    outputs = form_update(fresh_config, "form-submit", None, "running",
                          FormValues(distance=0, duration=25, cadence=178), None, MAP_ON, open_form)
    assert outputs[0]["visible"] is True
    assert outputs[0]["values"]["distance"] == 0
    assert outputs[2:6] == (no_update,) * 4
    assert outputs[6] is no_update
    assert outputs[7:] == (True, INVALID_INPUT_MESSAGE)


def test_submit_without_open_form_does_nothing(fresh_config):
    outputs = form_update(fresh_config, "form-submit", None, "running",
                          FormValues(distance=5, duration=25, cadence=178), None, MAP_ON, None)
    assert outputs[:7] == (no_update,) * 7
    assert outputs[7] is False


def test_corrupt_browser_data_still_accepts_workouts(fresh_config, open_form):
    outputs = form_update(fresh_config, "form-submit", None, "running",
                          FormValues(distance=5, duration=25, cadence=178), "garbage", MAP_ON, open_form)
    assert len(json.loads(outputs[6]["workouts"])) == 1


@pytest.mark.parametrize("data", ["garbage", ["workouts"], 42])
def test_open_store_tolerates_non_dict_browser_data(fresh_config, data):
    assert open_store(fresh_config, data).all() == ()


def test_form_classes_default_to_hidden_running():
    assert form_classes(None) == (HIDDEN_FORM, VISIBLE_ROW, HIDDEN_ROW)


# Pan

def test_entry_click_pans_to_workout(fresh_config, run_workout, ride_workout):
    data = _stored(fresh_config, run_workout, ride_workout)
    trigger = {"type": ENTRY_TYPE, "index": entry_key(ride_workout, 1)}
    viewport = pan_update(fresh_config, trigger, 1, data, MAP_ON)
    assert viewport["center"] == [38.75, -9.2]
    assert viewport["zoom"] == 13


@pytest.mark.parametrize("clicked_value", [0, None])
def test_entry_render_does_not_pan(fresh_config, run_workout, clicked_value):
    data = _stored(fresh_config, run_workout)
    trigger = {"type": ENTRY_TYPE, "index": entry_key(run_workout, 0)}
    assert pan_update(fresh_config, trigger, clicked_value, data, MAP_ON) is no_update


def test_entry_click_without_map_does_not_pan(fresh_config, run_workout):
    data = _stored(fresh_config, run_workout)
    trigger = {"type": ENTRY_TYPE, "index": entry_key(run_workout, 0)}
    assert pan_update(fresh_config, trigger, 1, data, {"enabled": False}) is no_update
    assert pan_update(fresh_config, None, 1, data, MAP_ON) is no_update


# Sidebar

def test_sidebar_toggles_when_form_opens_on_narrow_screen(fresh_config):
    data, style, icon = sidebar_update(fresh_config, "form-state", {"visible": True}, None, 400)
    assert data == {"sidebar": {"side": "back", "offset": "0"}, "form_visible": True}
    assert style == {"transform": "translateX(0)"}
    assert icon == "chevron-back-outline"


def test_sidebar_ignores_form_changes_without_visibility_change(fresh_config):
    data, _, _ = sidebar_update(fresh_config, "form-state", {"visible": True}, None, 400)
    outputs = sidebar_update(fresh_config, "form-state", {"visible": True}, data, 400)
    assert outputs == (no_update, no_update, no_update)


def test_sidebar_button_always_toggles(fresh_config):
    data, _, _ = sidebar_update(fresh_config, "form-state", {"visible": True}, None, 400)
    data, style, icon = sidebar_update(fresh_config, "sidebar-toggle", {"visible": True}, data, 400)
    assert data["sidebar"] == {"side": "forward", "offset": "-100%"}
    assert style == {"transform": "translateX(-100%)"}
    assert icon == "chevron-forward-outline"


def test_sidebar_stays_put_on_wide_screen(fresh_config):
    data, style, _ = sidebar_update(fresh_config, "sidebar-toggle", None, None, 1200)
    assert data["sidebar"] == {"side": "forward", "offset": "0"}
    assert style == {"transform": "translateX(0)"}
