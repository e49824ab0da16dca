"""
Path utilities for graphselect.

Handles path resolution for both development mode and frozen (PyInstaller) executables.
- In development: paths are relative to the project root
- When frozen: paths are relative to the executable location

The settings file (selection.json / selection.yaml) lives NEXT TO the executable, not bundled inside.
"""

import sys
from pathlib import Path

SETTINGS_FILENAMES = ("selection.json", "selection.yaml", "selection.yml")


def get_app_dir() -> Path:
    """
    Get the application directory.

    - In development: the project root (parent of graphselect/)
    - When frozen: the directory containing the executable
    """
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    else:
        return Path(__file__).parent.parent


def get_settings_path() -> Path:
    """
    Get the path to the selection settings file.

    Returns the first existing candidate, or selection.json when none exists.
    """
    app_dir = get_app_dir()
    for name in SETTINGS_FILENAMES:
        candidate = app_dir / name
        if candidate.exists():
            return candidate
    return app_dir / SETTINGS_FILENAMES[0]
