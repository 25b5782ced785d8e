"""
CLI Utilities Module.

Common utility functions for CLI tools.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def validate_script_path(script_path: str) -> bool:
    """
    Validate that a command script exists and is a regular file.

    Args:
        script_path: Path to the script file.

    Returns:
        True if valid, False otherwise.
    """
    path = Path(script_path)

    if not path.exists():
        logger.error(f"Script file not found: {script_path}")
        return False
    if not path.is_file():
        logger.error(f"Script path is not a file: {script_path}")
        return False

    return True
