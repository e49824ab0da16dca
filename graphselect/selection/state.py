"""
Mutable drag state owned by a single SelectionController.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from graphselect.geometry import Point


@dataclass
class SelectionState:
    is_selecting: bool = False
    viewport_start: Point = field(default_factory=lambda: Point(0.0, 0.0))
    viewport_current: Point = field(default_factory=lambda: Point(0.0, 0.0))
    graph_start: Point = field(default_factory=lambda: Point(0.0, 0.0))
    graph_current: Point = field(default_factory=lambda: Point(0.0, 0.0))
    last_update_time: Optional[float] = None

    def reset(self) -> None:
        """Return to the initial values in place."""
        self.is_selecting = False
        self.viewport_start = Point(0.0, 0.0)
        self.viewport_current = Point(0.0, 0.0)
        self.graph_start = Point(0.0, 0.0)
        self.graph_current = Point(0.0, 0.0)
        self.last_update_time = None

    def snapshot(self) -> Dict[str, Any]:
        """Plain-dict copy handed to callbacks, detached from later mutations."""
        return asdict(self)
