import networkx as nx
import pytest

from graphselect.emitter import EventEmitter
from graphselect.graph_store import NetworkXGraphStore, apply_force_layout
from graphselect.host import Camera, Container, GraphRenderer
from graphselect.selection.events import PointerEvent, PressEvent


class TestEventEmitter:

    def test_emit_calls_listeners_in_order(self):
        emitter = EventEmitter()
        calls = []
        emitter.on("ping", lambda p: calls.append(("first", p)))
        emitter.on("ping", lambda p: calls.append(("second", p)))

        assert emitter.emit("ping", 1) == 2
        assert calls == [("first", 1), ("second", 1)]

    def test_remove_listener(self):
        emitter = EventEmitter()
        handler = lambda p: None
        emitter.on("ping", handler)

        assert emitter.remove_listener("ping", handler) is True
        assert emitter.remove_listener("ping", handler) is False
        assert emitter.listener_count("ping") == 0
        assert emitter.emit("ping") == 0

    def test_listener_removed_during_emit_still_runs_once(self):
        emitter = EventEmitter()
        calls = []

        def first(_):
            calls.append("first")
            emitter.remove_listener("ping", second)

        def second(_):
            calls.append("second")

        emitter.on("ping", first)
        emitter.on("ping", second)
        emitter.emit("ping")
        emitter.emit("ping")

        assert calls == ["first", "second", "first"]


class TestCamera:

    def test_pan_moves_against_drag(self):
        camera = Camera(x=0, y=0, ratio=2.0)
        assert camera.pan(10, -5) is True
        assert (camera.x, camera.y) == (-20, 10)

    def test_zoom_keeps_anchor_on_screen(self, store):
        renderer = GraphRenderer(store, Container(800, 600), Camera(x=400, y=300, ratio=1.0))
        anchor = renderer.viewport_to_graph((100, 100))

        renderer.get_camera().zoom_at(2.0, anchor)

        assert renderer.graph_to_viewport(anchor) == pytest.approx((100, 100))
        assert renderer.get_camera().ratio == 0.5

    def test_disabled_camera_ignores_requests(self):
        camera = Camera(x=1, y=2, ratio=1.0)
        camera.disable()
        assert camera.pan(5, 5) is False
        assert camera.zoom_at(2.0, (0, 0)) is False
        assert (camera.x, camera.y, camera.ratio) == (1, 2, 1.0)
        camera.enable()
        assert camera.pan(5, 5) is True

    def test_non_positive_zoom_is_rejected(self):
        assert Camera().zoom_at(0, (0, 0)) is False

    def test_fit_centers_bounds(self):
        camera = Camera()
        camera.fit((0, 0, 100, 50), 120, 120, padding=10)
        assert (camera.x, camera.y) == (50, 25)
        assert camera.ratio == 1.0


class TestGraphRenderer:

    def test_projection_round_trip(self, store):
        renderer = GraphRenderer(store, Container(800, 600), Camera(x=10, y=-20, ratio=0.25))
        point = renderer.viewport_to_graph((123, 456))
        assert renderer.graph_to_viewport(point) == pytest.approx((123, 456))

    def test_press_routes_by_target(self, renderer):
        stage, node = [], []
        renderer.on("down_stage", stage.append)
        renderer.on("down_node", node.append)

        renderer.press(PointerEvent(x=1, y=2))
        renderer.press(PointerEvent(x=3, y=4), node="a")

        assert stage == [PressEvent(event=PointerEvent(x=1, y=2))]
        assert node[0].node == "a"

    def test_mouse_events_go_through_captor(self, renderer):
        moves = []
        renderer.get_mouse_captor().on("mousemove", moves.append)
        renderer.mouse_move({"x": 1, "y": 1})
        assert moves == [{"x": 1, "y": 1}]
        assert renderer.listener_count("mousemove") == 0

    def test_kill_fires_once(self, renderer):
        kills = []
        renderer.on("kill", kills.append)
        renderer.kill()
        renderer.kill()
        assert renderer.is_killed
        assert kills == [None]

    def test_fit_to_graph(self, renderer):
        assert renderer.fit_to_graph(padding=0) is True
        assert (renderer.get_camera().x, renderer.get_camera().y) == (250, 200)

    def test_fit_to_empty_graph(self):
        renderer = GraphRenderer(NetworkXGraphStore())
        assert renderer.fit_to_graph() is False


class TestGraphStore:

    def test_from_records_skips_dangling_edges(self):
        store = NetworkXGraphStore.from_records(
            [{"id": "a", "x": 0, "y": 0}, {"id": "b", "x": 1, "y": 1}],
            [{"source": "a", "target": "b"}, {"source": "a", "target": "ghost"}],
        )
        assert len(store) == 2
        assert list(store.G.edges()) == [("a", "b")]
        assert dict(store.iter_nodes())["b"] == {"x": 1, "y": 1}

    def test_force_layout_positions_and_sizes(self):
        G = nx.path_graph(4)
        G.nodes[0]["size"] = 42

        apply_force_layout(G, scale=100, seed=7)

        for node_id, attrs in G.nodes(data=True):
            assert abs(attrs["x"]) <= 100 + 1e-6
            assert abs(attrs["y"]) <= 100 + 1e-6
        assert G.nodes[0]["size"] == 42
        assert G.nodes[1]["size"] == 4.0 + 2

    def test_force_layout_is_seeded(self):
        first = apply_force_layout(nx.cycle_graph(5), seed=3)
        second = apply_force_layout(nx.cycle_graph(5), seed=3)
        assert first.nodes[2]["x"] == pytest.approx(second.nodes[2]["x"])

    def test_force_layout_on_empty_graph(self):
        G = nx.Graph()
        assert apply_force_layout(G) is G
