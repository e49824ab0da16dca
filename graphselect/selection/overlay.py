"""
Selection Overlay - the visible box mirroring the selection rectangle.

This is a style model, not a drawing routine: the overlay keeps a dict of
CSS properties that the hosting container (or a mirror callback, e.g. a
NiceGUI element) applies. It never influences which nodes get selected.
"""

import logging
from typing import Any, Callable, Dict, Optional

from graphselect.geometry import Rectangle
from graphselect.selection.constants import MIN_OVERLAY_SIZE, OVERLAY_CLASS
from graphselect.selection.protocol import Container
from graphselect.selection.settings import SelectionSettings

logger = logging.getLogger(__name__)


class SelectionOverlay:
    """
    Absolute-positioned box drawn over the graph container during a drag.

    Call mount() once the container exists, unmount() on teardown.
    """

    def __init__(self, settings: SelectionSettings,
                 on_render: Optional[Callable[[Dict[str, Any]], None]] = None):
        self.class_name = OVERLAY_CLASS
        self.style: Dict[str, Any] = {
            'display': 'none',
            'position': 'absolute',
            'pointer-events': 'none',
            'z-index': settings.z_index,
            'border': settings.border_style,
            'background': settings.background,
        }
        self._on_render = on_render
        self._container: Optional[Container] = None

    @property
    def is_visible(self) -> bool:
        return self.style['display'] != 'none'

    @property
    def is_mounted(self) -> bool:
        return self._container is not None

    def mount(self, container: Container) -> None:
        if self._container is not None:
            return
        container.append_child(self)
        self._container = container

    def unmount(self) -> bool:
        """Remove the overlay from its container. Returns False if it was not mounted."""
        if self._container is None:
            return False
        container, self._container = self._container, None
        container.remove_child(self)
        return True

    def show(self) -> None:
        self.style['display'] = 'block'
        self._render()

    def hide(self) -> None:
        self.style['display'] = 'none'
        self._render()

    def move_to(self, rect: Rectangle) -> Rectangle:
        """
        Position the box over `rect` (viewport space).

        Returns the drawn rectangle, at least MIN_OVERLAY_SIZE on each axis.
        """
        drawn = Rectangle(
            rect.x,
            rect.y,
            max(rect.width, MIN_OVERLAY_SIZE),
            max(rect.height, MIN_OVERLAY_SIZE),
        )
        self.style['left'] = f"{drawn.x}px"
        self.style['top'] = f"{drawn.y}px"
        self.style['width'] = f"{drawn.width}px"
        self.style['height'] = f"{drawn.height}px"
        self._render()
        return drawn

    def css(self) -> str:
        """Style as a CSS declaration string."""
        return '; '.join(f"{key}: {value}" for key, value in self.style.items())

    def _render(self):
        if self._on_render:
            self._on_render(dict(self.style))
