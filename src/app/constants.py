"""
Application Constants.
Stores default values for UI configuration and magic numbers.
"""

# Window Configuration
WINDOW_TITLE = "Project Agenda - v0.1.0 (Alpha)"
DEFAULT_WINDOW_WIDTH = 960
DEFAULT_WINDOW_HEIGHT = 640
WINDOW_SETTINGS_KEY = "ProjektAgenda"
WINDOW_SETTINGS_APP = "ProjektAgenda"

# Command Box
COMMAND_PLACEHOLDER = "Enter command here..."
ERROR_PROPERTY = "error"
HELPER_MAX_VISIBLE_ROWS = 6

# Panel Titles
TITLE_PERSONS = "Persons"
TITLE_MEETINGS = "Meetings"
TITLE_HISTORY = "Recent Commands"
