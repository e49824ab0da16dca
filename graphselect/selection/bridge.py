"""
Callback bridge between the selection controller and the host application.
"""

from typing import Any, Dict, List, Optional

from graphselect.selection.constants import EVENT_SELECT_NODES
from graphselect.selection.protocol import NodeId, Renderer
from graphselect.selection.settings import SelectionSettings


class CallbackBridge:
    """
    Fires the optional settings hooks and the renderer's 'select_nodes' event.

    Hooks left as None are skipped. Exceptions raised by host hooks propagate.
    """

    def __init__(self, settings: SelectionSettings, renderer: Optional[Renderer] = None):
        self._settings = settings
        self._renderer = renderer

    def selection_started(self, data: Dict[str, Any]) -> None:
        if self._settings.on_selection_start:
            self._settings.on_selection_start(data)

    def selection_changed(self, data: Dict[str, Any]) -> None:
        if self._settings.on_selection_change:
            self._settings.on_selection_change(data)

    def selection_completed(self, nodes: List[NodeId]) -> None:
        if self._settings.on_selection_complete:
            self._settings.on_selection_complete(list(nodes))
        if self._renderer is not None:
            self._renderer.emit(EVENT_SELECT_NODES, {'nodes': list(nodes)})
