"""Shared fixtures: a headless renderer whose camera maps viewport 1:1 onto graph space."""

import pytest

from graphselect.graph_store import NetworkXGraphStore
from graphselect.host import Camera, Container, GraphRenderer


@pytest.fixture
def store():
    return NetworkXGraphStore.from_records([
        {"id": "a", "x": 100, "y": 100, "size": 5},
        {"id": "b", "x": 200, "y": 150, "size": 5},
        {"id": "c", "x": 500, "y": 400, "size": 5},
        {"id": "origin", "x": 0, "y": 0, "size": 1},
    ])


@pytest.fixture
def renderer(store):
    # Camera centered on (400, 300) of an 800x600 container: identity projection
    return GraphRenderer(store, Container(800, 600), Camera(x=400, y=300, ratio=1.0))
