"""
Viewport <-> graph coordinate translation.

The projection itself belongs to the renderer; this module only calls
through to it at sample time and extracts viewport points from pointer
payloads.
"""

import logging
from typing import Any, Optional

from graphselect.geometry import Point
from graphselect.selection.events import get_field
from graphselect.selection.protocol import Container, Renderer

logger = logging.getLogger(__name__)


class CoordinateTranslator:
    """Converts points between viewport and graph space through the renderer."""

    def __init__(self, renderer: Renderer):
        self._renderer = renderer

    def to_graph(self, point: Point) -> Point:
        gx, gy = self._renderer.viewport_to_graph((point.x, point.y))
        return Point(gx, gy)

    def to_viewport(self, point: Point) -> Point:
        vx, vy = self._renderer.graph_to_viewport((point.x, point.y))
        return Point(vx, vy)


def _to_point(x: Any, y: Any) -> Optional[Point]:
    """Point from two coordinate values, None when either is not a number."""
    if x is None or y is None:
        return None
    try:
        return Point(float(x), float(y))
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-numeric pointer coordinates ({x!r}, {y!r})")
        return None


def _xy(obj: Any) -> Optional[Point]:
    return _to_point(get_field(obj, 'x'), get_field(obj, 'y'))


def pointer_position(payload: Any, container: Optional[Container] = None) -> Optional[Point]:
    """
    Resolve the viewport position of a pointer payload.

    Tries, in order:
    1. [x, y] list/tuple or top-level x / y
    2. nested event.x / event.y
    3. native client coordinates minus the container's bounding box

    Returns None when no position can be determined.
    """
    if isinstance(payload, (list, tuple)):
        if len(payload) >= 2:
            return _to_point(payload[0], payload[1])
        return None

    point = _xy(payload)
    if point is not None:
        return point

    event = get_field(payload, 'event')
    point = _xy(event)
    if point is not None:
        return point

    original = get_field(payload, 'original') or get_field(event, 'original')
    if original is None or container is None:
        return None

    client = _to_point(get_field(original, 'client_x', 'clientX'),
                       get_field(original, 'client_y', 'clientY'))
    if client is None:
        return None

    box = container.bounding_client_rect()
    return Point(client.x - box.get('left', 0.0), client.y - box.get('top', 0.0))
