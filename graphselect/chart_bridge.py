"""
Helpers connecting browser chart events to the headless renderer.

NiceGUI delivers DOM events as plain dicts of the requested keys
(camelCase, as in the browser). These helpers turn them into pointer
events and keep the ECharts view in step with the renderer's camera.
"""

from typing import Any, Dict, Iterable, Optional, Tuple

from graphselect.graph_viz import GraphVisualizer
from graphselect.host import GraphRenderer
from graphselect.selection.events import NativePointerEvent, PointerEvent

# DOM event keys we request from the chart wrapper
MOUSE_EVENT_KEYS = ['offsetX', 'offsetY', 'clientX', 'clientY',
                    'shiftKey', 'ctrlKey', 'metaKey', 'altKey', 'button']
WHEEL_EVENT_KEYS = ['offsetX', 'offsetY', 'deltaY']

# Zoom speed: one wheel notch (deltaY 100) scales by this factor
WHEEL_ZOOM_STEP = 1.1


def normalize_mouse_payload(raw: Any) -> Optional[PointerEvent]:
    """
    Convert a NiceGUI mouse event payload into a PointerEvent.

    Accepts the event arguments object, a dict of DOM keys, or an
    [x, y] list. Returns None for anything else.
    """
    args = raw.args if hasattr(raw, 'args') else raw

    if isinstance(args, (list, tuple)) and len(args) >= 2:
        return PointerEvent(x=float(args[0]), y=float(args[1]))

    if not isinstance(args, dict):
        return None

    native = NativePointerEvent(
        client_x=float(args.get('clientX') or 0.0),
        client_y=float(args.get('clientY') or 0.0),
        shift_key=bool(args.get('shiftKey', False)),
        ctrl_key=bool(args.get('ctrlKey', False)),
        meta_key=bool(args.get('metaKey', False)),
        alt_key=bool(args.get('altKey', False)),
    )
    x = args.get('offsetX', args.get('x'))
    y = args.get('offsetY', args.get('y'))
    return PointerEvent(
        x=float(x) if x is not None else None,
        y=float(y) if y is not None else None,
        original=native,
    )


def wheel_zoom_factor(delta_y: float) -> float:
    """Scrolling up (negative delta) zooms in."""
    return WHEEL_ZOOM_STEP ** (-delta_y / 100.0)


def view_bounds(renderer: GraphRenderer) -> Tuple[float, float, float, float]:
    """Graph-space (min_x, min_y, max_x, max_y) visible in the container."""
    container = renderer.get_container()
    x0, y0 = renderer.viewport_to_graph((0.0, 0.0))
    x1, y1 = renderer.viewport_to_graph((container.width, container.height))
    return min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1)


def build_chart_options(renderer: GraphRenderer, visualizer: GraphVisualizer,
                        selected: Optional[Iterable[Any]] = None) -> Dict[str, Any]:
    """ECharts options for the renderer's graph as currently framed by its camera."""
    store = renderer.get_graph()
    return visualizer.generate_echarts(
        store.G,
        view_bounds(renderer),
        selected=selected,
        pixel_ratio=renderer.get_camera().ratio,
    )
