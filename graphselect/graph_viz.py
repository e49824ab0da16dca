"""
Graph visualizer that produces an ECharts-compatible configuration for a
positioned force graph, highlighting the currently selected nodes.

Node positions are graph-space attributes ('x', 'y', 'size') on a networkx
graph. The chart uses a cartesian2d coordinate system whose axis ranges are
the camera's visible bounds, so ECharts draws nodes exactly where the
headless renderer projects them.
"""

from typing import Any, Dict, Hashable, Iterable, Optional, Set, Tuple

import networkx as nx

from graphselect.selection.constants import DEFAULT_NODE_SIZE

NODE_COLOR = '#5b8ff9'
SELECTED_COLOR = '#ffd700'
EDGE_COLOR = '#bdbdbd'


class GraphVisualizer:
    """
    Build an ECharts option dict for a networkx graph.

    Expected node attributes:
      {"x": <float>, "y": <float>, "size": <float, optional>, "label": <str, optional>}

    The returned dict has a single 'graph' series on a cartesian2d grid:
      {
        "grid": {...},
        "xAxis": {...}, "yAxis": {...},
        "series": [{"type": "graph", "coordinateSystem": "cartesian2d", ...}]
      }
    """

    @staticmethod
    def _is_selected(node_id: Hashable, selected: Set[Hashable]) -> bool:
        return node_id in selected

    def generate_echarts(
        self,
        G: nx.Graph,
        view_bounds: Tuple[float, float, float, float],
        selected: Optional[Iterable[Hashable]] = None,
        pixel_ratio: float = 1.0,
    ) -> Dict[str, Any]:
        """
        Construct the ECharts option dict.

        Args:
            G: Graph with positioned nodes
            view_bounds: (min_x, min_y, max_x, max_y) visible graph-space area
            selected: Ids of currently selected nodes
            pixel_ratio: Graph units per screen pixel, used for symbol sizes

        Returns:
            ECharts options dict ready for ui.echart()
        """
        selected_set = set(selected or [])
        min_x, min_y, max_x, max_y = view_bounds

        data = []
        for n, attrs in G.nodes(data=True):
            x, y = attrs.get('x'), attrs.get('y')
            if x is None or y is None:
                continue
            size = attrs.get('size') or DEFAULT_NODE_SIZE
            is_selected = self._is_selected(n, selected_set)
            data.append({
                "id": str(n),
                "name": attrs.get("label", str(n)),
                "value": [x, y],
                "symbolSize": max(2.0, 2 * size / pixel_ratio),
                "itemStyle": {
                    "color": SELECTED_COLOR if is_selected else NODE_COLOR,
                    "borderColor": "#ffffff" if is_selected else NODE_COLOR,
                    "borderWidth": 2 if is_selected else 0,
                },
            })

        # Edges whose both endpoints are selected get the highlighted style
        links = []
        for src, tgt in G.edges():
            both_selected = self._is_selected(src, selected_set) and self._is_selected(tgt, selected_set)
            if both_selected:
                line_style = {
                    "color": SELECTED_COLOR,
                    "width": 3,
                    "opacity": 1.0,
                    # Use shadow to emulate a glow
                    "shadowColor": SELECTED_COLOR,
                    "shadowBlur": 8,
                }
            else:
                line_style = {
                    "color": EDGE_COLOR,
                    "width": 1,
                    "opacity": 0.6,
                }
            links.append({"source": str(src), "target": str(tgt), "lineStyle": line_style})

        axis = {"type": "value", "show": False, "scale": True}
        option = {
            "animation": False,
            "grid": {"left": 0, "right": 0, "top": 0, "bottom": 0},
            "xAxis": {**axis, "min": min_x, "max": max_x},
            # Screen y grows downward, like graph space
            "yAxis": {**axis, "min": min_y, "max": max_y, "inverse": True},
            "series": [
                {
                    "type": "graph",
                    "coordinateSystem": "cartesian2d",
                    "roam": False,
                    "data": data,
                    "links": links,
                    "label": {"show": False},
                    "emphasis": {"focus": "adjacency"},
                }
            ],
        }
        return option
