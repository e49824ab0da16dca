import networkx as nx
import pytest

from graphselect.graph_viz import EDGE_COLOR, NODE_COLOR, SELECTED_COLOR, GraphVisualizer


def find_link(links, src, tgt):
    for l in links:
        if l.get("source") == src and l.get("target") == tgt:
            return l
    return None


@pytest.fixture
def graph():
    G = nx.Graph()
    G.add_node("a", x=0.0, y=0.0, size=5, label="Alpha")
    G.add_node("b", x=10.0, y=0.0, size=5)
    G.add_node("c", x=20.0, y=5.0)
    G.add_node("unplaced")
    G.add_edge("a", "b")
    G.add_edge("b", "c")
    return G


def test_selection_colors_and_edges(graph):
    """
    Selected nodes are gold, and edges joining two selected nodes are
    highlighted (thicker + glow).
    """
    viz = GraphVisualizer()
    echarts_opt = viz.generate_echarts(graph, (0, 0, 100, 100), selected=["a", "b"])

    series = echarts_opt["series"][0]
    color_map = {d["id"]: d["itemStyle"]["color"] for d in series["data"]}
    assert color_map == {"a": SELECTED_COLOR, "b": SELECTED_COLOR, "c": NODE_COLOR}

    highlighted = find_link(series["links"], "a", "b")
    assert highlighted is not None
    assert highlighted["lineStyle"]["width"] > 1
    assert highlighted["lineStyle"]["shadowBlur"] > 0

    plain = find_link(series["links"], "b", "c")
    assert plain["lineStyle"]["color"] == EDGE_COLOR
    assert plain["lineStyle"]["width"] == 1
    assert "shadowBlur" not in plain["lineStyle"]


def test_nodes_without_position_are_skipped(graph):
    option = GraphVisualizer().generate_echarts(graph, (0, 0, 1, 1))
    ids = [d["id"] for d in option["series"][0]["data"]]
    assert "unplaced" not in ids
    assert ids == ["a", "b", "c"]


def test_axes_follow_view_bounds(graph):
    option = GraphVisualizer().generate_echarts(graph, (-50, -20, 150, 80))

    assert option["xAxis"]["min"] == -50
    assert option["xAxis"]["max"] == 150
    assert option["yAxis"]["min"] == -20
    assert option["yAxis"]["max"] == 80
    assert option["yAxis"]["inverse"] is True
    series = option["series"][0]
    assert series["coordinateSystem"] == "cartesian2d"
    assert series["roam"] is False


def test_symbol_size_scales_with_zoom(graph):
    viz = GraphVisualizer()
    near = viz.generate_echarts(graph, (0, 0, 1, 1), pixel_ratio=0.5)["series"][0]["data"]
    far = viz.generate_echarts(graph, (0, 0, 1, 1), pixel_ratio=100)["series"][0]["data"]

    assert near[0]["symbolSize"] == 20
    # never smaller than 2px
    assert far[0]["symbolSize"] == 2.0
    # missing size falls back to the default node size
    assert near[2]["symbolSize"] == 20


def test_labels_and_values(graph):
    data = GraphVisualizer().generate_echarts(graph, (0, 0, 1, 1))["series"][0]["data"]
    by_id = {d["id"]: d for d in data}
    assert by_id["a"]["name"] == "Alpha"
    assert by_id["b"]["name"] == "b"
    assert by_id["c"]["value"] == [20.0, 5.0]
