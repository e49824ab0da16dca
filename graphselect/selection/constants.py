"""
Shared constants for the selection tool.

The overlay values are mirrored by the demo page styling. Keep them in sync!
"""

# Overlay box is drawn at least this many pixels wide/high so a click
# without drag is still visible. Cosmetic only, never used for hit testing.
MIN_OVERLAY_SIZE = 2

# Rectangles smaller than this on both axes (graph units) select nothing
DEGENERATE_EPSILON = 0.0001

# Node size assumed when the node has no `size` attribute
DEFAULT_NODE_SIZE = 5

# CSS class applied to the overlay element
OVERLAY_CLASS = 'graph-selection-rectangle'

# Event names on the rendering host
EVENT_DOWN_STAGE = 'down_stage'
EVENT_DOWN_NODE = 'down_node'
EVENT_MOUSE_MOVE = 'mousemove'
EVENT_MOUSE_UP = 'mouseup'
EVENT_KILL = 'kill'
EVENT_SELECT_NODES = 'select_nodes'
