"""
NiceGUI demo for graphselect.

Renders a force-laid-out networkx graph with ui.echart and adds
rectangular selection on top of it: hold the modifier key (Shift by
default) and drag to select nodes. Plain drag pans, the wheel zooms;
both are blocked while a selection is in progress.

Settings come from selection.json / selection.yaml, GRAPHSELECT_* environment
variables and .env (see graphselect.config).
"""

import logging
import sys

import networkx as nx
from dotenv import load_dotenv
from nicegui import ui

from graphselect.chart_bridge import (
    MOUSE_EVENT_KEYS,
    WHEEL_EVENT_KEYS,
    build_chart_options,
    normalize_mouse_payload,
    wheel_zoom_factor,
)
from graphselect.config import load_selection_settings
from graphselect.graph_store import NetworkXGraphStore, apply_force_layout
from graphselect.graph_viz import GraphVisualizer
from graphselect.host import Container, GraphRenderer
from graphselect.selection import EVENT_SELECT_NODES, SelectionPhase, SelectionTool

load_dotenv()
logging.basicConfig(level=logging.INFO, format='%(asctime)s %(name)s %(levelname)s: %(message)s')
logger = logging.getLogger(__name__)

CHART_WIDTH = 960
CHART_HEIGHT = 640


def build_demo_graph(seed: int = 42) -> nx.Graph:
    """Les Misérables co-occurrence network with force-directed positions."""
    G = nx.les_miserables_graph()
    for node_id in G.nodes:
        G.nodes[node_id]['label'] = node_id
    return apply_force_layout(G, seed=seed)


@ui.page('/')
def index():
    state = {
        'selected': [],
        'pan_from': None,
    }

    store = NetworkXGraphStore(build_demo_graph())
    renderer = GraphRenderer(store, Container(CHART_WIDTH, CHART_HEIGHT))
    renderer.fit_to_graph()
    visualizer = GraphVisualizer()

    def refresh_chart():
        chart.options.clear()
        chart.options.update(build_chart_options(renderer, visualizer, state['selected']))
        chart.update()

    def on_selection_complete(nodes):
        state['selected'] = nodes
        status.set_text(f'{len(nodes)} node(s) selected')
        refresh_chart()

    def render_overlay(style):
        css = '; '.join(f'{key}: {value}' for key, value in style.items())
        overlay_el.style(replace=css)

    settings = load_selection_settings(on_selection_complete=on_selection_complete)
    tool = SelectionTool(renderer, settings, on_overlay_render=render_overlay)
    renderer.on(EVENT_SELECT_NODES, lambda payload: logger.info(f"select_nodes: {payload['nodes']}"))

    # --- Event handlers ---

    def handle_mouse_down(event):
        pointer = normalize_mouse_payload(event)
        if pointer is None:
            return
        renderer.press(pointer)
        if tool.controller.phase is SelectionPhase.IDLE:
            state['pan_from'] = (pointer.x, pointer.y)

    def handle_mouse_move(event):
        pointer = normalize_mouse_payload(event)
        if pointer is None:
            return
        if state['pan_from'] is not None and pointer.x is not None:
            last_x, last_y = state['pan_from']
            if renderer.get_camera().pan(pointer.x - last_x, pointer.y - last_y):
                state['pan_from'] = (pointer.x, pointer.y)
                refresh_chart()
            return
        renderer.mouse_move(pointer)

    def handle_mouse_up(event):
        state['pan_from'] = None
        renderer.mouse_up(normalize_mouse_payload(event))

    def handle_wheel(event):
        args = event.args or {}
        anchor = renderer.viewport_to_graph((args.get('offsetX', 0), args.get('offsetY', 0)))
        if renderer.get_camera().zoom_at(wheel_zoom_factor(args.get('deltaY', 0)), anchor):
            refresh_chart()

    # --- Layout ---

    with ui.column().classes('items-center w-full gap-2 p-4'):
        ui.label('graphselect').classes('text-xl font-bold')
        modifier = settings.modifier_key or 'no modifier'
        ui.label(f'Hold {modifier} and drag to select nodes. Drag to pan, scroll to zoom.').classes('text-gray-500')

        wrapper = ui.element('div').style(
            f'width: {CHART_WIDTH}px; height: {CHART_HEIGHT}px; position: relative; '
            'border: 1px solid #e2e8f0; user-select: none;'
        )
        with wrapper:
            chart = ui.echart(build_chart_options(renderer, visualizer)).style(
                f'width: {CHART_WIDTH}px; height: {CHART_HEIGHT}px; position: absolute; top: 0; left: 0;'
            )
            overlay_el = ui.element('div')
            render_overlay(tool.overlay.style)

        status = ui.label('No selection').classes('text-sm text-gray-600')

    wrapper.on('mousedown', handle_mouse_down, MOUSE_EVENT_KEYS)
    wrapper.on('mousemove', handle_mouse_move, MOUSE_EVENT_KEYS, throttle=0.02)
    wrapper.on('mouseup', handle_mouse_up, MOUSE_EVENT_KEYS)
    wrapper.on('mouseleave', handle_mouse_up, MOUSE_EVENT_KEYS)
    wrapper.on('wheel.prevent', handle_wheel, WHEEL_EVENT_KEYS)

    tool.attach()
    ui.context.client.on_disconnect(renderer.kill)


if __name__ in {"__main__", "__mp_main__"}:
    ui.run(
        title='graphselect',
        port=8081,
        reload=not getattr(sys, 'frozen', False),
    )
