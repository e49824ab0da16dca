"""
Pointer event types and payload helpers.

Hosts deliver pointer payloads in several shapes: our own dataclasses,
plain dicts coming from a browser bridge (camelCase keys), or a wrapper
holding the event under 'event'. The helpers here read all of them.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class NativePointerEvent:
    """Raw input event, client coordinates are page-relative."""
    client_x: float = 0.0
    client_y: float = 0.0
    shift_key: bool = False
    ctrl_key: bool = False
    meta_key: bool = False
    alt_key: bool = False


@dataclass
class PointerEvent:
    """Pointer sample in viewport coordinates (relative to the container)."""
    x: Optional[float] = None
    y: Optional[float] = None
    original: Optional[NativePointerEvent] = None
    shift_key: bool = False
    ctrl_key: bool = False
    meta_key: bool = False
    alt_key: bool = False


@dataclass
class PressEvent:
    """Payload of 'down_stage' / 'down_node'. node is None on the empty canvas."""
    event: PointerEvent
    node: Any = None


_MISSING = object()


def get_field(obj: Any, *names: str, default: Any = None) -> Any:
    """Read the first present key/attribute of `names` from a dict or an object."""
    if obj is None:
        return default
    for name in names:
        if isinstance(obj, dict):
            value = obj.get(name, _MISSING)
        else:
            value = getattr(obj, name, _MISSING)
        if value is not _MISSING and value is not None:
            return value
    return default


def unwrap_event(payload: Any) -> Any:
    """Return the pointer event carried by a press payload, or the payload itself."""
    inner = get_field(payload, 'event')
    return inner if inner is not None else payload


def native_event(payload: Any) -> Any:
    """Return the native event of a payload (looking through a wrapper), if any."""
    original = get_field(payload, 'original')
    if original is not None:
        return original
    return get_field(get_field(payload, 'event'), 'original')


def modifier_satisfied(payload: Any, modifier_key: Optional[str]) -> bool:
    """
    Check whether a press starts a selection under the configured modifier.

    'ctrl' accepts either ctrl or meta. No modifier, or an unknown one,
    always starts.
    """
    if not modifier_key:
        return True

    event = unwrap_event(payload)
    source = get_field(event, 'original') or event

    def flag(*names: str) -> bool:
        return bool(get_field(source, *names, default=False))

    key = modifier_key.lower()
    if key == 'shift':
        return flag('shift_key', 'shiftKey')
    if key == 'ctrl':
        return flag('ctrl_key', 'ctrlKey') or flag('meta_key', 'metaKey')
    if key == 'alt':
        return flag('alt_key', 'altKey')
    return True
