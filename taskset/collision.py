"""Triangle collision detection using the separating axis theorem."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence


@dataclass
class Vec2:
    """A point or direction in the plane."""

    x: float
    y: float

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y


@dataclass
class Triangle:
    """A triangle given by its three vertices, which may be moved in place."""

    points: list[Vec2] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.points = [
            point if isinstance(point, Vec2) else Vec2(*point) for point in self.points
        ]
        if len(self.points) != 3:
            raise ValueError(f"a triangle needs 3 points, got {len(self.points)}")

    def edges(self) -> Iterable[tuple[Vec2, Vec2]]:
        """Yield each edge as a pair (vertex, next vertex)."""
        return zip(self.points, self.points[1:] + self.points[:1])


def compute_normal(p1: Vec2, p2: Vec2) -> Vec2:
    """Return a vector perpendicular to the edge running from ``p1`` to ``p2``."""
    edge_x = p2.x - p1.x
    edge_y = p2.y - p1.y
    return Vec2(edge_y, -edge_x)


def is_separating_axis(
    tri1: Sequence[Vec2], tri2: Sequence[Vec2], axis: Vec2
) -> bool:
    """Tell whether the projections of the two point sets onto ``axis`` are disjoint."""
    projected1 = [axis.dot(point) for point in tri1]
    projected2 = [axis.dot(point) for point in tri2]
    return max(projected1) < min(projected2) or max(projected2) < min(projected1)


def is_colliding(t1: Triangle, t2: Triangle) -> bool:
    """Tell whether two triangles overlap or touch."""
    for (a1, b1), (a2, b2) in zip(t1.edges(), t2.edges()):
        if is_separating_axis(t1.points, t2.points, compute_normal(b1, a1)):
            return False
        if is_separating_axis(t1.points, t2.points, compute_normal(b2, a2)):
            return False
    return True