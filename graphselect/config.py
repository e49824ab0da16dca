"""
Configuration management for graphselect.

Selection settings are resolved from three layers, later ones winning:
1. selection.json / selection.yaml next to the project root
2. Environment variables (GRAPHSELECT_*)
3. Explicit overrides passed by the caller

Callbacks can only be supplied as explicit overrides.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from graphselect.paths import get_settings_path
from graphselect.selection.settings import SelectionSettings, create_settings

logger = logging.getLogger(__name__)

ENV_DEBUG = "GRAPHSELECT_DEBUG"
ENV_MODIFIER_KEY = "GRAPHSELECT_MODIFIER_KEY"
ENV_THROTTLE_MS = "GRAPHSELECT_THROTTLE_MS"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in (".yaml", ".yml")


def load_settings_file(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load raw settings from a JSON or YAML file. Missing or unreadable files give {}."""
    settings_path = Path(path) if path is not None else get_settings_path()
    if not settings_path.exists():
        return {}
    try:
        with open(settings_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) if _is_yaml(settings_path) else json.load(f)
    except (json.JSONDecodeError, yaml.YAMLError, OSError) as e:
        logger.warning(f"Failed to load settings file {settings_path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Settings file {settings_path} does not contain a mapping, ignoring")
        return {}
    return data


def save_settings_file(values: Dict[str, Any], path: Optional[Path] = None) -> Path:
    """Save settings to JSON (or YAML by suffix). Callback entries are dropped."""
    settings_path = Path(path) if path is not None else get_settings_path()
    serializable = {k: v for k, v in values.items() if not callable(v)}
    with open(settings_path, 'w', encoding='utf-8') as f:
        if _is_yaml(settings_path):
            yaml.safe_dump(serializable, f, sort_keys=True)
        else:
            json.dump(serializable, f, indent=2)
    return settings_path


def env_overrides() -> Dict[str, Any]:
    """Read GRAPHSELECT_* environment variables into settings overrides."""
    overrides: Dict[str, Any] = {}

    debug = os.environ.get(ENV_DEBUG)
    if debug is not None:
        overrides["debug"] = debug.strip().lower() in _TRUE_VALUES

    modifier = os.environ.get(ENV_MODIFIER_KEY)
    if modifier is not None:
        modifier = modifier.strip()
        overrides["modifier_key"] = None if modifier.lower() in ("", "none") else modifier

    throttle = os.environ.get(ENV_THROTTLE_MS)
    if throttle is not None:
        try:
            overrides["throttle_updates"] = float(throttle)
        except ValueError:
            logger.warning(f"Ignoring non-numeric {ENV_THROTTLE_MS}={throttle!r}")

    return overrides


def load_selection_settings(path: Optional[Path] = None, **overrides) -> SelectionSettings:
    """
    Build SelectionSettings from file, environment and explicit overrides.

    Args:
        path: Settings file, defaults to get_settings_path()
        **overrides: Explicit settings (callbacks included)
    """
    merged = load_settings_file(path)
    merged.update(env_overrides())
    merged.update(overrides)
    return create_settings(merged)
