"""
Geometry helpers for rectangular selection.

Pure functions only: rectangle normalization and circle/rectangle
collision tests. Coordinates are plain floats, the same in viewport
and graph space.
"""

from dataclasses import dataclass
from typing import Any, Dict, NamedTuple


class Point(NamedTuple):
    x: float
    y: float


class Circle(NamedTuple):
    x: float
    y: float
    r: float


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle with top-left origin and non-negative size."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains_point(self, x: float, y: float) -> bool:
        return self.x <= x <= self.right and self.y <= y <= self.bottom

    def expanded(self, margin: float) -> "Rectangle":
        """Grow the rectangle by `margin` on all four sides."""
        return Rectangle(
            self.x - margin,
            self.y - margin,
            self.width + 2 * margin,
            self.height + 2 * margin,
        )

    def as_dict(self) -> Dict[str, Any]:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}


def normalize_rectangle(p1, p2) -> Rectangle:
    """
    Build the canonical rectangle spanned by two corner points.

    Works for any ordering of the points: swapping p1 and p2 yields the
    same rectangle.
    """
    x1, y1 = p1
    x2, y2 = p2
    return Rectangle(
        x=min(x1, x2),
        y=min(y1, y2),
        width=abs(x2 - x1),
        height=abs(y2 - y1),
    )


def point_in_rectangle(point, rect: Rectangle) -> bool:
    """Inclusive point-in-rectangle test (the boundary counts as inside)."""
    px, py = point
    return rect.contains_point(px, py)


def circle_intersects_rectangle(circle: Circle, rect: Rectangle) -> bool:
    """
    Closest-point collision test between a circle and a rectangle.

    Touching edges count as a collision. With r == 0 this reduces to an
    inclusive point-in-rectangle test.
    """
    half_w = rect.width / 2
    half_h = rect.height / 2
    dist_x = abs(circle.x - rect.x - half_w)
    dist_y = abs(circle.y - rect.y - half_h)

    if dist_x > half_w + circle.r:
        return False
    if dist_y > half_h + circle.r:
        return False
    if dist_x <= half_w:
        return True
    if dist_y <= half_h:
        return True

    # Corner region
    dx = dist_x - half_w
    dy = dist_y - half_h
    return dx * dx + dy * dy <= circle.r * circle.r


def circle_inside_rectangle(circle: Circle, rect: Rectangle) -> bool:
    """True when the whole circle (center +/- radius on both axes) lies in the rectangle."""
    return (
        circle.x - circle.r >= rect.x
        and circle.x + circle.r <= rect.right
        and circle.y - circle.r >= rect.y
        and circle.y + circle.r <= rect.bottom
    )
