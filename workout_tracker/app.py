"""Dash app factory for the Workout Tracker UI."""

from dash import Dash
import dash_bootstrap_components as dbc

from .layout import build_layout
from .callbacks import register_callbacks
from .utils.config import TrackerConfig, get_config


def create_app(config: TrackerConfig = None) -> Dash:
    """Create and configure the Dash application instance.

    Returns:
        Dash: Configured Dash application.
    """
    config = config or get_config()
    config.validate_configuration()

    app = Dash(
        __name__,
        title=config.ui.title,
        external_stylesheets=[dbc.themes.BOOTSTRAP],
        suppress_callback_exceptions=True,
        meta_tags=[
            {"name": "viewport", "content": "width=device-width, initial-scale=1"}
        ],
    )

    app.layout = build_layout(config)
    register_callbacks(app, config)

    return app


if __name__ == "__main__":
    _app = create_app()
    _app.run(debug=True, host="0.0.0.0", port=8050)
