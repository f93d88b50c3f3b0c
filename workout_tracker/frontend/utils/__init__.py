"""Display helpers for the workout tracker frontend."""

from .data_formatter import DataFormatter, WORKOUT_EMOJI

__all__ = ['DataFormatter', 'WORKOUT_EMOJI']
