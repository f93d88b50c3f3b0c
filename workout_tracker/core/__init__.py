"""Form workflow and application controller."""

from .form_controller import FormController, FormState, FormValues, to_number
from .controller import AppController, AppState, parse_position

__all__ = [
    "FormController",
    "FormState",
    "FormValues",
    "to_number",
    "AppController",
    "AppState",
    "parse_position"
]
