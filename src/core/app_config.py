"""
Application Configuration Module.

Reads runtime settings from the environment. Front-ends call
``load_dotenv()`` first so values from a local ``.env`` file apply.
"""

import os
from dataclasses import dataclass

TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUE_VALUES


@dataclass
class AppConfig:
    """
    Runtime settings.

    Attributes:
        debug_mode: Log at DEBUG instead of INFO (AGENDA_DEBUG).
        log_dir: Directory for the rotating log file (AGENDA_LOG_DIR).
        log_to_console: Also log to stderr (AGENDA_LOG_TO_CONSOLE).
        history_preview: Number of recent inputs the main window lists
            (AGENDA_HISTORY_PREVIEW).
    """

    debug_mode: bool = False
    log_dir: str = "logs"
    log_to_console: bool = True
    history_preview: int = 10

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Builds a config from environment variables, falling back to defaults.

        Returns:
            AppConfig: The resolved configuration.
        """
        defaults = cls()
        try:
            history_preview = int(
                os.getenv("AGENDA_HISTORY_PREVIEW", str(defaults.history_preview))
            )
        except ValueError:
            history_preview = defaults.history_preview
        return cls(
            debug_mode=_env_flag("AGENDA_DEBUG", defaults.debug_mode),
            log_dir=os.getenv("AGENDA_LOG_DIR", defaults.log_dir),
            log_to_console=_env_flag("AGENDA_LOG_TO_CONSOLE", defaults.log_to_console),
            history_preview=max(0, history_preview),
        )
