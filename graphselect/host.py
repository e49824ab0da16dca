"""
Headless rendering host.

A pure-Python implementation of the renderer collaborators the selection
tool depends on: a pan/zoom camera, a mouse captor, a container element and
the renderer tying them to a graph store. The NiceGUI demo drives it with
browser events; tests drive it directly.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from graphselect.emitter import EventEmitter
from graphselect.selection.constants import (
    EVENT_DOWN_NODE,
    EVENT_DOWN_STAGE,
    EVENT_KILL,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_UP,
)
from graphselect.selection.events import PointerEvent, PressEvent
from graphselect.selection.protocol import GraphStore

logger = logging.getLogger(__name__)


class Camera:
    """
    View state: graph point at the viewport center and graph units per pixel.

    While disabled, pan and zoom requests are ignored.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, ratio: float = 1.0):
        self.x = x
        self.y = y
        self.ratio = ratio
        self.enabled = True

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def pan(self, dx: float, dy: float) -> bool:
        """Move the view by (dx, dy) pixels. Returns False when disabled."""
        if not self.enabled:
            return False
        self.x -= dx * self.ratio
        self.y -= dy * self.ratio
        return True

    def zoom_at(self, factor: float, graph_point: Tuple[float, float]) -> bool:
        """
        Zoom by `factor` (>1 zooms in) keeping `graph_point` fixed on screen.

        Returns False when disabled or the factor is not positive.
        """
        if not self.enabled or factor <= 0:
            return False
        gx, gy = graph_point
        self.x = gx + (self.x - gx) / factor
        self.y = gy + (self.y - gy) / factor
        self.ratio /= factor
        return True

    def fit(self, bounds: Tuple[float, float, float, float], width: float, height: float,
            padding: float = 20.0) -> None:
        """Center on (min_x, min_y, max_x, max_y) so it fits the viewport."""
        min_x, min_y, max_x, max_y = bounds
        self.x = (min_x + max_x) / 2
        self.y = (min_y + max_y) / 2
        span_x = max(max_x - min_x, 1e-9)
        span_y = max(max_y - min_y, 1e-9)
        usable_w = max(width - 2 * padding, 1.0)
        usable_h = max(height - 2 * padding, 1.0)
        self.ratio = max(span_x / usable_w, span_y / usable_h)


class MouseCaptor(EventEmitter):
    """Emits 'mousemove' and 'mouseup' pointer payloads."""


class Container:
    """Box hosting the rendered graph; children are overlay elements."""

    def __init__(self, width: float = 800, height: float = 600,
                 left: float = 0.0, top: float = 0.0):
        self.width = width
        self.height = height
        self.left = left
        self.top = top
        self.style: Dict[str, Any] = {'position': 'static'}
        self.children: List[Any] = []

    def bounding_client_rect(self) -> Dict[str, float]:
        return {'left': self.left, 'top': self.top, 'width': self.width, 'height': self.height}

    def append_child(self, child: Any) -> None:
        self.children.append(child)

    def remove_child(self, child: Any) -> None:
        self.children.remove(child)


class GraphRenderer(EventEmitter):
    """
    Renderer over a graph store.

    Emits 'down_stage' / 'down_node' on press, 'kill' when destroyed, and
    relays generic events such as 'select_nodes' to any listener.
    """

    def __init__(self, graph: GraphStore, container: Optional[Container] = None,
                 camera: Optional[Camera] = None):
        super().__init__()
        self._graph = graph
        self._container = container or Container()
        self._camera = camera or Camera()
        self._mouse = MouseCaptor()
        self._is_killed = False

    def get_camera(self) -> Camera:
        return self._camera

    def get_mouse_captor(self) -> MouseCaptor:
        return self._mouse

    def get_graph(self) -> GraphStore:
        return self._graph

    def get_container(self) -> Container:
        return self._container

    @property
    def is_killed(self) -> bool:
        return self._is_killed

    # --- Projection ---

    def viewport_to_graph(self, point: Tuple[float, float]) -> Tuple[float, float]:
        vx, vy = point
        cam = self._camera
        return (
            cam.x + (vx - self._container.width / 2) * cam.ratio,
            cam.y + (vy - self._container.height / 2) * cam.ratio,
        )

    def graph_to_viewport(self, point: Tuple[float, float]) -> Tuple[float, float]:
        gx, gy = point
        cam = self._camera
        return (
            (gx - cam.x) / cam.ratio + self._container.width / 2,
            (gy - cam.y) / cam.ratio + self._container.height / 2,
        )

    def fit_to_graph(self, padding: float = 20.0) -> bool:
        """Fit the camera to the positioned nodes. Returns False if there are none."""
        xs, ys = [], []
        for _, attrs in self._graph.iter_nodes():
            x, y = attrs.get('x'), attrs.get('y')
            if isinstance(x, (int, float)) and isinstance(y, (int, float)):
                xs.append(x)
                ys.append(y)
        if not xs:
            return False
        self._camera.fit((min(xs), min(ys), max(xs), max(ys)),
                         self._container.width, self._container.height, padding)
        return True

    # --- Input dispatch ---

    def press(self, event: PointerEvent, node: Any = None) -> None:
        """Dispatch a pointer press on a node (node given) or the empty stage."""
        payload = PressEvent(event=event, node=node)
        self.emit(EVENT_DOWN_NODE if node is not None else EVENT_DOWN_STAGE, payload)

    def mouse_move(self, event: Any) -> None:
        self._mouse.emit(EVENT_MOUSE_MOVE, event)

    def mouse_up(self, event: Any = None) -> None:
        self._mouse.emit(EVENT_MOUSE_UP, event)

    def kill(self) -> None:
        """Destroy the surface. Listeners of 'kill' run once."""
        if self._is_killed:
            return
        self._is_killed = True
        logger.info("Renderer killed")
        self.emit(EVENT_KILL)
