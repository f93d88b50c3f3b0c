"""Callbacks registration for the Workout Tracker app.

Each callback rebuilds an ``AppController`` from the Dash stores, runs the
operation matching the event that fired and writes the resulting state back.
The update functions take the triggering component explicitly and are
registered as thin wrappers in ``register_callbacks``.
"""

import logging

from dash import ALL, Dash, Input, Output, State, callback_context, no_update

from .core.controller import AppController, AppState, parse_position
from .core.form_controller import FormValues
from .errors import FormNotOpen, LocationUnavailable, UnknownWorkoutType, ValidationError
from .frontend.list_renderer import ENTRY_TYPE
from .frontend.sidebar import SidebarState
from .storage.workout_store import BrowserStorage, JSONFileStorage, WorkoutStore
from .utils.config import TrackerConfig, get_config

logger = logging.getLogger(__name__)

HIDDEN_FORM = "form hidden"
VISIBLE_FORM = "form"
HIDDEN_ROW = "form__row form__row--hidden"
VISIBLE_ROW = "form__row"


def open_store(config: TrackerConfig, data) -> WorkoutStore:
    """Workout store over the configured persistence backend."""
    if config.storage.backend == "file":
        storage = JSONFileStorage(config.storage.data_dir)
    else:
        storage = BrowserStorage(data)
    return WorkoutStore(storage, config.storage.storage_key)


def store_payload(store: WorkoutStore, data):
    """Data to write back to the ``workouts-store`` component."""
    if isinstance(store.storage, BrowserStorage):
        return store.storage.data
    # File-backed: the component only signals that the collection changed
    revision = data.get("revision", 0) if isinstance(data, dict) else 0
    return {"revision": revision + 1}


def controller_for(config: TrackerConfig, workouts_data, map_data, form_data=None) -> AppController:
    state = AppState.from_dicts(map_data, form_data)
    return AppController(open_store(config, workouts_data), state, config)


def location_update(config, trigger_prop, position, position_error, workouts_data, map_data):
    """
    Enable the map at the user's location, or report that it's unavailable.

    Returns:
        (map-state data, map viewport, location-alert displayed, location-alert message)
    """
    controller = controller_for(config, workouts_data, map_data)
    if controller.state.map_enabled:
        return no_update, no_update, no_update, no_update

    try:
        if trigger_prop == "position_error":
            detail = (position_error or {}).get("message")
            raise LocationUnavailable(detail or "Permission denied")
        viewport = controller.location_acquired(parse_position(position))
    except LocationUnavailable as e:
        notice = controller.location_failed(str(e))
        return controller.state.map_dict(), no_update, True, notice

    return controller.state.map_dict(), viewport, False, no_update


def form_update(config, trigger, click_data, workout_type, values: FormValues,
                workouts_data, map_data, form_data, created_at=None):
    """
    Map click opens the form, type change toggles fields, submit logs a workout.

    Returns:
        (form-state data, type value, distance, duration, cadence, elevation,
        workouts-store data, form-alert displayed, form-alert message)
    """
    controller = controller_for(config, workouts_data, map_data, form_data)
    form = controller.form
    form.state.values = values
    unchanged_inputs = (no_update,) * 4

    if trigger == "map":
        controller.map_clicked(click_data)
        return (form.state.to_dict(), form.workout_type) + unchanged_inputs + (no_update, False, no_update)

    if trigger == "input-type":
        try:
            controller.type_changed(workout_type)
        except UnknownWorkoutType as e:
            logger.warning(f"Ignoring workout type change: {e}")
        return (form.state.to_dict(), no_update) + unchanged_inputs + (no_update, False, no_update)

    try:
        workout = controller.submit(values, created_at)
    except ValidationError as e:
        logger.info(f"Rejected workout input ({', '.join(e.fields)})")
        return (form.state.to_dict(), no_update) + unchanged_inputs + (no_update, True, str(e))
    except FormNotOpen as e:
        logger.debug(f"Ignoring submit: {e}")
        return (no_update,) * 7 + (False, no_update)

    logger.info(f"Logged {workout.description} ({workout.id})")
    cleared = (None, None, None, None)
    return ((form.state.to_dict(), no_update) + cleared
            + (store_payload(controller.store, workouts_data), False, no_update))


def pan_update(config, trigger, clicked_value, workouts_data, map_data):
    """Viewport for the workout whose list entry was clicked."""
    if not trigger or not clicked_value:
        return no_update

    controller = controller_for(config, workouts_data, map_data)
    viewport = controller.entry_clicked(trigger["index"])
    return viewport if viewport is not None else no_update


def form_classes(form_data):
    """Class names of the form and its cadence/elevation rows."""
    state = AppState.from_dicts(None, form_data).form
    running = state.workout_type == "running"
    return (
        VISIBLE_FORM if state.visible else HIDDEN_FORM,
        VISIBLE_ROW if running else HIDDEN_ROW,
        HIDDEN_ROW if running else VISIBLE_ROW,
    )


def sidebar_update(config, trigger, form_data, sidebar_data, viewport_width):
    """
    Slide the sidebar in or out on narrow screens.

    The toggle button always flips it; a form-state change flips it only when
    the form's visibility changed.
    """
    sidebar_data = sidebar_data or {}
    sidebar = SidebarState.from_dict(sidebar_data.get("sidebar"))
    form_visible = bool((form_data or {}).get("visible", False))

    if trigger == "form-state" and form_visible == sidebar_data.get("form_visible", False):
        return no_update, no_update, no_update

    sidebar.toggle(viewport_width, config.ui.sidebar_breakpoint_px)
    data = {"sidebar": sidebar.to_dict(), "form_visible": form_visible}
    return data, sidebar.style(), sidebar.icon()


def _triggered_prop():
    triggered = callback_context.triggered
    if not triggered:
        return None
    return triggered[0]["prop_id"].rsplit(".", 1)[-1]


def register_callbacks(app: Dash, config: TrackerConfig = None) -> None:
    """Register all application callbacks."""
    config = config or get_config()

    @app.callback(
        Output("map-state", "data"),
        Output("map", "viewport"),
        Output("location-alert", "displayed"),
        Output("location-alert", "message"),
        Input("geolocation", "position"),
        Input("geolocation", "position_error"),
        State("workouts-store", "data"),
        State("map-state", "data"),
        prevent_initial_call=True,
    )
    def handle_location(position, position_error, workouts_data, map_data):
        return location_update(config, _triggered_prop(), position, position_error,
                               workouts_data, map_data)

    @app.callback(
        Output("form-state", "data"),
        Output("input-type", "value"),
        Output("input-distance", "value"),
        Output("input-duration", "value"),
        Output("input-cadence", "value"),
        Output("input-elevation", "value"),
        Output("workouts-store", "data"),
        Output("form-alert", "displayed"),
        Output("form-alert", "message"),
        Input("map", "clickData"),
        Input("input-type", "value"),
        Input("form-submit", "n_clicks"),
        Input("input-distance", "n_submit"),
        Input("input-duration", "n_submit"),
        Input("input-cadence", "n_submit"),
        Input("input-elevation", "n_submit"),
        State("input-distance", "value"),
        State("input-duration", "value"),
        State("input-cadence", "value"),
        State("input-elevation", "value"),
        State("workouts-store", "data"),
        State("map-state", "data"),
        State("form-state", "data"),
        prevent_initial_call=True,
    )
    def handle_form(click_data, workout_type, _n_clicks, _n1, _n2, _n3, _n4,
                    distance, duration, cadence, elevation,
                    workouts_data, map_data, form_data):
        values = FormValues(distance, duration, cadence, elevation)
        return form_update(config, callback_context.triggered_id, click_data, workout_type,
                           values, workouts_data, map_data, form_data)

    @app.callback(
        Output("workout-list", "children"),
        Input("workouts-store", "modified_timestamp"),
        State("workouts-store", "data"),
    )
    def render_workouts(_ts, workouts_data):
        """Render the stored workouts, newest first."""
        return controller_for(config, workouts_data, None).entries()

    @app.callback(
        Output("workout-markers", "children"),
        Input("workouts-store", "modified_timestamp"),
        Input("map-state", "data"),
        State("workouts-store", "data"),
    )
    def render_markers(_ts, map_data, workouts_data):
        """Replay the stored workouts as map markers once the map is enabled."""
        controller = controller_for(config, workouts_data, map_data)
        if not controller.state.map_enabled:
            return []
        return controller.replay()

    @app.callback(
        Output("map", "viewport", allow_duplicate=True),
        Input({"type": ENTRY_TYPE, "index": ALL}, "n_clicks"),
        State("workouts-store", "data"),
        State("map-state", "data"),
        prevent_initial_call=True,
    )
    def pan_to_workout(_n_clicks, workouts_data, map_data):
        triggered = callback_context.triggered
        clicked_value = triggered[0].get("value") if triggered else None
        return pan_update(config, callback_context.triggered_id, clicked_value,
                          workouts_data, map_data)

    @app.callback(
        Output("workout-form", "className"),
        Output("row-cadence", "className"),
        Output("row-elevation", "className"),
        Input("form-state", "data"),
    )
    def update_form_classes(form_data):
        return form_classes(form_data)

    app.clientside_callback(
        "function(pathname) { return document.body.clientWidth; }",
        Output("viewport-width", "data"),
        Input("url", "pathname"),
    )

    @app.callback(
        Output("sidebar-state", "data"),
        Output("sidebar", "style"),
        Output("sidebar-icon", "className"),
        Input("sidebar-toggle", "n_clicks"),
        Input("form-state", "data"),
        State("sidebar-state", "data"),
        State("viewport-width", "data"),
        prevent_initial_call=True,
    )
    def toggle_sidebar(_n_clicks, form_data, sidebar_data, viewport_width):
        return sidebar_update(config, callback_context.triggered_id, form_data,
                              sidebar_data, viewport_width)
