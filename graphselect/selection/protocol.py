"""
Collaborator Protocol Definitions.

The selection tool never talks to a concrete renderer. It depends on the
interfaces below, which any rendering surface (the headless host in
graphselect.host, a NiceGUI page, a test fake) must implement.
"""

from typing import (
    Any, Callable, Dict, Hashable, Iterable, Mapping, Protocol, Tuple, runtime_checkable,
)


NodeId = Hashable
NodeAttributes = Mapping[str, Any]


@runtime_checkable
class Camera(Protocol):
    """The render camera. Disabled while a rectangle is being drawn."""

    def enable(self) -> None:
        ...

    def disable(self) -> None:
        ...


@runtime_checkable
class MouseCaptor(Protocol):
    """
    Pointer input source.

    Emits 'mousemove' and 'mouseup' with a payload carrying viewport
    coordinates (or a native event with client coordinates).
    """

    def on(self, event: str, handler: Callable) -> None:
        ...

    def remove_listener(self, event: str, handler: Callable) -> bool:
        ...


@runtime_checkable
class GraphStore(Protocol):
    """Read-only node store."""

    def iter_nodes(self) -> Iterable[Tuple[NodeId, NodeAttributes]]:
        """
        Iterate over (node_id, attributes) pairs.

        attributes has at least 'x' and 'y' in graph space and optionally 'size'.
        """
        ...


@runtime_checkable
class Container(Protocol):
    """The visual element hosting the graph and the selection overlay."""

    style: Dict[str, Any]

    def bounding_client_rect(self) -> Dict[str, float]:
        """Return {'left', 'top', 'width', 'height'} in page coordinates."""
        ...

    def append_child(self, child: Any) -> None:
        ...

    def remove_child(self, child: Any) -> None:
        ...


@runtime_checkable
class Renderer(Protocol):
    """
    The rendering surface.

    Emits 'down_stage' / 'down_node' (pointer pressed on empty canvas / on a
    node) and 'kill' (surface destroyed). Accepts generic emits such as
    'select_nodes'.
    """

    def get_camera(self) -> Camera:
        ...

    def get_mouse_captor(self) -> MouseCaptor:
        ...

    def get_graph(self) -> GraphStore:
        ...

    def get_container(self) -> Container:
        ...

    def viewport_to_graph(self, point: Tuple[float, float]) -> Tuple[float, float]:
        ...

    def graph_to_viewport(self, point: Tuple[float, float]) -> Tuple[float, float]:
        ...

    def on(self, event: str, handler: Callable) -> None:
        ...

    def remove_listener(self, event: str, handler: Callable) -> bool:
        ...

    def emit(self, event: str, payload: Any = None) -> Any:
        ...
