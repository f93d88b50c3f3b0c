"""Entrypoint to run the Workout Tracker Dash application."""

import logging

from workout_tracker.app import create_app

logging.basicConfig(level=logging.INFO)

app = create_app()


if __name__ == "__main__":
    app.run(debug=True, host="0.0.0.0", port=8050)
