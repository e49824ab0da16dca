"""
Selection Controller - drag lifecycle of the rectangular selection.

The controller cycles between IDLE and SELECTING and coordinates:
- pointer events from the host (press / move / release)
- the render camera, disabled for the whole drag
- the overlay box mirroring the rectangle
- hit testing and notifications via the CallbackBridge

All work happens synchronously inside the event call.
"""

import logging
import time
from enum import Enum
from typing import Any, Callable, List, Optional

from graphselect.geometry import Point, Rectangle, normalize_rectangle
from graphselect.selection.bridge import CallbackBridge
from graphselect.selection.events import modifier_satisfied, unwrap_event
from graphselect.selection.hit_test import find_nodes_in_rectangle, is_degenerate
from graphselect.selection.overlay import SelectionOverlay
from graphselect.selection.protocol import Camera, Container, GraphStore, NodeId
from graphselect.selection.settings import SelectionSettings
from graphselect.selection.state import SelectionState
from graphselect.selection.translator import CoordinateTranslator, pointer_position

logger = logging.getLogger(__name__)


def monotonic_ms() -> float:
    return time.monotonic() * 1000


class SelectionPhase(Enum):
    IDLE = 'idle'
    SELECTING = 'selecting'


class SelectionController:
    """State machine for one selection tool instance."""

    def __init__(
        self,
        settings: SelectionSettings,
        camera: Camera,
        translator: CoordinateTranslator,
        graph: GraphStore,
        overlay: SelectionOverlay,
        bridge: CallbackBridge,
        container: Optional[Container] = None,
        clock: Callable[[], float] = monotonic_ms,
    ):
        self.settings = settings
        self._camera = camera
        self._translator = translator
        self._graph = graph
        self._overlay = overlay
        self._bridge = bridge
        self._container = container
        self._clock = clock
        self.state = SelectionState()

    @property
    def phase(self) -> SelectionPhase:
        return SelectionPhase.SELECTING if self.state.is_selecting else SelectionPhase.IDLE

    # --- Rectangles ---

    def viewport_rectangle(self) -> Rectangle:
        return normalize_rectangle(self.state.viewport_start, self.state.viewport_current)

    def graph_rectangle(self) -> Rectangle:
        return normalize_rectangle(self.state.graph_start, self.state.graph_current)

    # --- Transitions ---

    def pointer_down(self, payload: Any) -> bool:
        """
        IDLE -> SELECTING when the modifier is satisfied.

        Returns True if a selection started.
        """
        if self.state.is_selecting:
            return False
        if not modifier_satisfied(payload, self.settings.modifier_key):
            return False

        position = pointer_position(unwrap_event(payload), self._container)
        if position is None:
            logger.warning("Pointer press without coordinates, selection not started")
            return False

        self.state.reset()
        self.state.viewport_start = position
        self.state.viewport_current = position
        graph_point = self._translator.to_graph(position)
        self.state.graph_start = graph_point
        self.state.graph_current = graph_point

        self._camera.disable()
        self.state.is_selecting = True
        self._overlay.show()
        self._overlay.move_to(self.viewport_rectangle())

        self._bridge.selection_started({
            'viewport': self.state.viewport_start,
            'graph': self.state.graph_start,
        })

        if self.settings.debug:
            logger.info(f"Selection started: viewport={self.viewport_rectangle().as_dict()}, "
                        f"graph={self.graph_rectangle().as_dict()}")
        return True

    def pointer_move(self, payload: Any) -> bool:
        """
        Update the rectangle while SELECTING.

        Returns True if the sample was applied, False if ignored or throttled.
        """
        if not self.state.is_selecting:
            return False

        now = None
        if self.settings.throttle_updates > 0:
            now = self._clock()
            last = self.state.last_update_time
            if last is not None and now - last < self.settings.throttle_updates:
                return False

        position = pointer_position(payload, self._container)
        if position is None:
            return False

        if now is not None:
            self.state.last_update_time = now
        self.state.viewport_current = position
        self.state.graph_current = self._translator.to_graph(position)

        viewport_rect = self.viewport_rectangle()
        graph_rect = self.graph_rectangle()
        self._overlay.move_to(viewport_rect)

        if self.settings.debug:
            logger.info(f"Selection rectangle: viewport={viewport_rect.as_dict()}, "
                        f"graph={graph_rect.as_dict()}")

        self._bridge.selection_changed({
            'viewport': viewport_rect,
            'graph': graph_rect,
            'state': self.state.snapshot(),
        })

        if not self.settings.select_on_release:
            self.select_nodes_in_rectangle()
        return True

    def pointer_up(self, payload: Any = None) -> Optional[List[NodeId]]:
        """
        SELECTING -> IDLE.

        Returns the selected ids in release mode, otherwise None.
        """
        if not self.state.is_selecting:
            return None

        self._camera.enable()
        self.state.is_selecting = False
        self._overlay.hide()

        if self.settings.debug:
            logger.info(f"Selection finished: viewport={self.viewport_rectangle().as_dict()}, "
                        f"graph={self.graph_rectangle().as_dict()}")

        if self.settings.select_on_release:
            return self.select_nodes_in_rectangle()
        return None

    def reset(self) -> None:
        """Force IDLE, re-enabling the camera if a drag was in progress."""
        if self.state.is_selecting:
            self._camera.enable()
            if self.settings.debug:
                logger.info("Selection aborted")
        self.state.is_selecting = False
        self._overlay.hide()

    # --- Hit testing ---

    def select_nodes_in_rectangle(self) -> List[NodeId]:
        """
        Hit test the current graph rectangle and notify the host.

        A degenerate rectangle (click without drag) selects nothing and
        sends no notification.
        """
        graph_rect = self.graph_rectangle()
        if is_degenerate(graph_rect):
            return []

        if self.settings.debug:
            logger.info(f"Final selection rectangle: viewport={self.viewport_rectangle().as_dict()}, "
                        f"graph={graph_rect.as_dict()}")

        selected = find_nodes_in_rectangle(graph_rect, self._graph.iter_nodes(), self.settings)
        self._bridge.selection_completed(selected)
        return selected
