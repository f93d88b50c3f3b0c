"""UI layout for the Workout Tracker Dash app."""

from dash import dcc, html
import dash_bootstrap_components as dbc

from .frontend.map_adapter import MapAdapter
from .storage.data_models import CYCLING, RUNNING
from .utils.config import TrackerConfig, get_config


def _form_row(label, control, row_id=None, hidden=False):
    class_name = "form__row form__row--hidden" if hidden else "form__row"
    kwargs = {"id": row_id} if row_id else {}
    return html.Div(
        className=class_name,
        children=[html.Label(label, className="form__label"), control],
        **kwargs,
    )


def _number_input(input_id, placeholder):
    return dcc.Input(
        id=input_id,
        type="number",
        placeholder=placeholder,
        className="form__input",
        n_submit=0,
    )


def build_form(default_type=RUNNING):
    """Form used to log a workout at the clicked map location."""
    return html.Div(
        id="workout-form",
        className="form hidden",
        children=[
            _form_row(
                "Type",
                dcc.Dropdown(
                    id="input-type",
                    options=[
                        {"label": "Running", "value": RUNNING},
                        {"label": "Cycling", "value": CYCLING},
                    ],
                    value=default_type,
                    clearable=False,
                    searchable=False,
                    className="form__input form__input--type",
                ),
            ),
            _form_row("Distance", _number_input("input-distance", "km")),
            _form_row("Duration", _number_input("input-duration", "min")),
            _form_row(
                "Cadence",
                _number_input("input-cadence", "step/min"),
                row_id="row-cadence",
                hidden=default_type != RUNNING,
            ),
            _form_row(
                "Elev Gain",
                _number_input("input-elevation", "meters"),
                row_id="row-elevation",
                hidden=default_type != CYCLING,
            ),
            html.Button("OK", id="form-submit", className="form__btn", n_clicks=0),
        ],
    )


def build_layout(config: TrackerConfig = None):
    """Construct the base application layout."""
    config = config or get_config()
    storage_type = "local" if config.storage.backend == "browser" else "memory"

    return dbc.Container(
        fluid=True,
        className="app",
        children=[
            dcc.Location(id="url"),
            dcc.Geolocation(id="geolocation"),

            # Persisted workouts and per-session state
            dcc.Store(id="workouts-store", storage_type=storage_type),
            dcc.Store(id="map-state", data={"enabled": False}),
            dcc.Store(id="form-state"),
            dcc.Store(id="sidebar-state"),
            dcc.Store(id="viewport-width"),

            dcc.ConfirmDialog(id="location-alert"),
            dcc.ConfirmDialog(id="form-alert"),

            dbc.Row(
                className="g-0",
                children=[
                    dbc.Col(
                        width=12,
                        md=4,
                        children=html.Div(
                            id="sidebar",
                            className="sidebar",
                            children=[
                                html.Button(
                                    id="sidebar-toggle",
                                    className="toggle-btn",
                                    n_clicks=0,
                                    children=html.I(id="sidebar-icon", className="chevron-forward-outline"),
                                ),
                                html.H1(config.ui.title, className="logo"),
                                build_form(config.ui.default_workout_type),
                                html.Ul(id="workout-list", className="workouts", children=[]),
                                html.P(
                                    "Click on the map to log a workout.",
                                    className="copyright text-muted small",
                                ),
                            ],
                        ),
                    ),
                    dbc.Col(
                        width=12,
                        md=8,
                        children=html.Div(
                            id="map-container",
                            style={"height": "100vh"},
                            children=MapAdapter(config.map).build("map", "workout-markers"),
                        ),
                    ),
                ],
            ),
        ],
    )
