"""
Frontend module for the Workout Tracker
======================================

Dash-facing pieces of the workout tracker:

- map_adapter: facade over the dash-leaflet map (markers, popups, panning)
- list_renderer: workout log entries, newest first
- sidebar: slide-in state of the sidebar on narrow screens
- utils/: number formatting shared by the map and the list
"""

from .map_adapter import MapAdapter, parse_click
from .list_renderer import ListRenderer, entry_key, parse_entry_key
from .sidebar import SidebarState

__all__ = ['MapAdapter', 'parse_click', 'ListRenderer', 'entry_key', 'parse_entry_key', 'SidebarState']
