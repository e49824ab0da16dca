"""
Rectangular node selection for force-graph renderers.

This package provides modifier+drag box selection:
- SelectionController: drag lifecycle and coordinate tracking
- find_nodes_in_rectangle: broad/narrow-phase node hit testing
- SelectionOverlay: style model of the visible selection box
- SelectionTool / attach_selection_tool: wiring to a renderer and teardown

Usage:
    from graphselect.selection import attach_selection_tool, create_settings
"""

from graphselect.selection.constants import (
    MIN_OVERLAY_SIZE,
    DEGENERATE_EPSILON,
    DEFAULT_NODE_SIZE,
    EVENT_SELECT_NODES,
)
from graphselect.selection.events import NativePointerEvent, PointerEvent, PressEvent
from graphselect.selection.settings import SelectionSettings, DEFAULT_SETTINGS, create_settings
from graphselect.selection.state import SelectionState
from graphselect.selection.translator import CoordinateTranslator, pointer_position
from graphselect.selection.hit_test import find_nodes_in_rectangle, evaluate_node
from graphselect.selection.overlay import SelectionOverlay
from graphselect.selection.bridge import CallbackBridge
from graphselect.selection.controller import SelectionController, SelectionPhase
from graphselect.selection.tool import SelectionTool, attach_selection_tool

__all__ = [
    'SelectionController',
    'SelectionPhase',
    'SelectionState',
    'SelectionSettings',
    'SelectionOverlay',
    'SelectionTool',
    'CallbackBridge',
    'CoordinateTranslator',
    'PointerEvent',
    'NativePointerEvent',
    'PressEvent',
    'DEFAULT_SETTINGS',
    'create_settings',
    'attach_selection_tool',
    'find_nodes_in_rectangle',
    'evaluate_node',
    'pointer_position',
    'MIN_OVERLAY_SIZE',
    'DEGENERATE_EPSILON',
    'DEFAULT_NODE_SIZE',
    'EVENT_SELECT_NODES',
]
