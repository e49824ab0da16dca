"""
Selection tool settings.

A SelectionSettings instance is built once per tool from the defaults and
the caller's overrides and is never mutated afterwards.
"""

import logging
import math
import re
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionSettings:
    # General
    debug: bool = False
    modifier_key: Optional[str] = 'shift'  # 'shift', 'ctrl', 'alt' or None for any press

    # Appearance
    z_index: int = 1000
    border_style: str = '1px dashed gray'
    background: str = 'rgba(155, 155, 255, 0.1)'

    # Selection behavior
    select_only_complete: bool = False
    node_size_multiplier: float = 2
    select_on_release: bool = True

    # Performance
    performance_mode: bool = True
    throttle_updates: float = 0  # ms between processed moves, 0 disables

    # Callbacks
    on_selection_start: Optional[Callable[[Dict[str, Any]], None]] = None
    on_selection_change: Optional[Callable[[Dict[str, Any]], None]] = None
    on_selection_complete: Optional[Callable[[List[Any]], None]] = None

    def to_dict(self, include_callbacks: bool = True) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        if not include_callbacks:
            data = {k: v for k, v in data.items() if k not in CALLBACK_FIELDS}
        return data


DEFAULT_SETTINGS = SelectionSettings()

FIELD_NAMES = frozenset(f.name for f in fields(SelectionSettings))
CALLBACK_FIELDS = frozenset({'on_selection_start', 'on_selection_change', 'on_selection_complete'})

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])([A-Z])')


def to_snake_case(key: str) -> str:
    """'selectOnlyComplete' -> 'select_only_complete'. snake_case keys pass through."""
    return _CAMEL_BOUNDARY.sub(r'_\1', key).lower()


def normalize_overrides(overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Map override keys onto SelectionSettings fields.

    Accepts snake_case and camelCase keys. Unknown keys are dropped with a warning.
    """
    normalized = {}
    for key, value in overrides.items():
        name = to_snake_case(key)
        if name not in FIELD_NAMES:
            logger.warning(f"Ignoring unknown selection setting '{key}'")
            continue
        normalized[name] = value
    return normalized


def _clamp_throttle(value: Any) -> float:
    """Throttle interval in ms; None, negative or non-numeric values disable throttling."""
    if value is None:
        return 0
    try:
        throttle = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric throttle_updates={value!r}")
        return 0
    if throttle < 0 or math.isnan(throttle):
        return 0
    return throttle


def create_settings(overrides: Optional[Mapping[str, Any]] = None, **kwargs) -> SelectionSettings:
    """
    Merge caller overrides over DEFAULT_SETTINGS.

    Args:
        overrides: Partial settings mapping (snake_case or camelCase keys)
        **kwargs: Same as overrides, applied last

    Returns:
        A new immutable SelectionSettings
    """
    merged = dict(overrides or {})
    merged.update(kwargs)
    values = normalize_overrides(merged)

    if 'throttle_updates' in values:
        values['throttle_updates'] = _clamp_throttle(values['throttle_updates'])

    return replace(DEFAULT_SETTINGS, **values)
