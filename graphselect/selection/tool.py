"""
Selection Tool - attaches the selection controller to a renderer.

This module wires the host's event subscriptions to the controller and
owns teardown, keeping the controller itself free of host plumbing.

Usage:
    from graphselect.selection import attach_selection_tool

    cleanup = attach_selection_tool(renderer, modifier_key='ctrl',
                                    on_selection_complete=print)
    ...
    cleanup()
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from graphselect.selection.bridge import CallbackBridge
from graphselect.selection.constants import (
    EVENT_DOWN_NODE,
    EVENT_DOWN_STAGE,
    EVENT_KILL,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_UP,
)
from graphselect.selection.controller import SelectionController, monotonic_ms
from graphselect.selection.overlay import SelectionOverlay
from graphselect.selection.protocol import Renderer
from graphselect.selection.settings import SelectionSettings, create_settings
from graphselect.selection.translator import CoordinateTranslator

logger = logging.getLogger(__name__)


class SelectionTool:
    """
    One rectangular-selection tool bound to one renderer.

    Several tools may coexist on different renderers; each owns its state.
    """

    def __init__(
        self,
        renderer: Renderer,
        settings: Optional[SelectionSettings] = None,
        clock: Callable[[], float] = monotonic_ms,
        on_overlay_render: Optional[Callable[[Dict[str, Any]], None]] = None,
    ):
        self.settings = settings or create_settings()
        self._renderer = renderer
        self._mouse = renderer.get_mouse_captor()
        self._container = renderer.get_container()
        self._is_attached = False
        self._subscriptions: List[Tuple[Any, str, Callable]] = []

        if self._container.style.get('position', 'static') == 'static':
            self._container.style['position'] = 'relative'

        self.overlay = SelectionOverlay(self.settings, on_render=on_overlay_render)
        self.controller = SelectionController(
            settings=self.settings,
            camera=renderer.get_camera(),
            translator=CoordinateTranslator(renderer),
            graph=renderer.get_graph(),
            overlay=self.overlay,
            bridge=CallbackBridge(self.settings, renderer),
            container=self._container,
            clock=clock,
        )

    @property
    def is_attached(self) -> bool:
        return self._is_attached

    def attach(self) -> 'SelectionTool':
        """Mount the overlay and subscribe to the host events."""
        if self._is_attached:
            return self

        self.overlay.mount(self._container)
        self._subscribe(self._renderer, EVENT_DOWN_STAGE, self._handle_press)
        self._subscribe(self._renderer, EVENT_DOWN_NODE, self._handle_press)
        self._subscribe(self._mouse, EVENT_MOUSE_MOVE, self._handle_move)
        self._subscribe(self._mouse, EVENT_MOUSE_UP, self._handle_release)
        self._subscribe(self._renderer, EVENT_KILL, self._handle_kill)
        self._is_attached = True

        if self.settings.debug:
            logger.info(f"Selection tool initialized with settings {self.settings.to_dict(include_callbacks=False)}")
        return self

    def cleanup(self) -> None:
        """
        Detach everything exactly once.

        A drag in progress is aborted and the camera is left enabled.
        Safe to call repeatedly and from the renderer's 'kill' event.
        """
        if not self._is_attached:
            return
        self._is_attached = False

        self.controller.reset()
        self.overlay.unmount()
        subscriptions, self._subscriptions = self._subscriptions, []
        for source, event, handler in subscriptions:
            source.remove_listener(event, handler)

        if self.settings.debug:
            logger.info("Selection tool cleanup complete")

    def _subscribe(self, source, event: str, handler: Callable):
        source.on(event, handler)
        self._subscriptions.append((source, event, handler))

    def _handle_press(self, payload: Any):
        self.controller.pointer_down(payload)

    def _handle_move(self, payload: Any):
        self.controller.pointer_move(payload)

    def _handle_release(self, payload: Any = None):
        self.controller.pointer_up(payload)

    def _handle_kill(self, payload: Any = None):
        self.cleanup()


def attach_selection_tool(
    renderer: Renderer,
    overrides: Optional[Mapping[str, Any]] = None,
    **kwargs,
) -> Callable[[], None]:
    """
    Add rectangular selection to a renderer.

    Args:
        renderer: Rendering host implementing the Renderer protocol
        overrides: Partial settings merged over the defaults
        **kwargs: Settings given as keyword arguments

    Returns:
        Cleanup function removing the tool
    """
    tool = SelectionTool(renderer, create_settings(overrides, **kwargs)).attach()
    return tool.cleanup
