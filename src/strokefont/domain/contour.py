"""Outline types in font design space.

This module defines the boundary representation produced by the geometry
capability and consumed by the outline encoder:
- Node: An on-curve point with incoming and outgoing handle offsets
- Segment: One edge between two consecutive nodes
- Contour: A closed loop of nodes
- WindingDirection: Enum for contour winding direction

Design space has y growing upward, so a negative signed area means the
contour winds clockwise.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

from strokefont.domain.stroke import ORIGIN, Point


class WindingDirection(Enum):
    """Contour winding direction.

    In TrueType convention, which the generated fonts follow:
    - Outer contours wind clockwise
    - Inner contours (holes) wind counter-clockwise
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


class SegmentPen(Protocol):
    """The subset of the fontTools pen protocol used to draw contours."""

    def moveTo(self, pt: tuple[float, float]) -> None: ...  # noqa: N802

    def lineTo(self, pt: tuple[float, float]) -> None: ...  # noqa: N802

    def curveTo(self, *points: tuple[float, float]) -> None: ...  # noqa: N802

    def closePath(self) -> None: ...  # noqa: N802


@dataclass(frozen=True, slots=True)
class Node:
    """An on-curve point with Bezier handles stored as offsets.

    A zero offset on both sides of an edge means the edge is straight.

    Attributes:
        point: Position of the node
        handle_in: Offset of the incoming control point
        handle_out: Offset of the outgoing control point
    """

    point: Point
    handle_in: Point = ORIGIN
    handle_out: Point = ORIGIN


@dataclass(frozen=True, slots=True)
class Segment:
    """An edge of a contour from one node to the next.

    Attributes:
        start: Starting node
        end: Ending node
    """

    start: Node
    end: Node

    @property
    def is_straight(self) -> bool:
        """True when neither side of the edge carries a handle."""
        return self.start.handle_out.is_zero() and self.end.handle_in.is_zero()

    def control_points(self) -> tuple[Point, Point]:
        """Absolute positions of the two cubic control points."""
        return (
            self.start.point + self.start.handle_out,
            self.end.point + self.end.handle_in,
        )


@dataclass
class Contour:
    """A closed boundary loop.

    Attributes:
        nodes: Nodes in boundary order, the closing edge is implied
    """

    nodes: list[Node]
    _cached_area: float | None = field(default=None, repr=False, init=False, compare=False)

    @classmethod
    def from_points(cls, points: list[Point]) -> "Contour":
        """Build a polygon contour with straight edges only."""
        return cls(nodes=[Node(p) for p in points])

    @property
    def points(self) -> list[Point]:
        """On-curve positions of the nodes."""
        return [node.point for node in self.nodes]

    def signed_area(self) -> float:
        """Calculate signed area of the node polygon (shoelace formula).

        Positive area means counter-clockwise, negative means clockwise.
        Result is cached.
        """
        if self._cached_area is not None:
            return self._cached_area

        points = self.points
        n = len(points)
        if n < 3:
            self._cached_area = 0.0
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += points[i].x * points[j].y
            area -= points[j].x * points[i].y

        self._cached_area = area / 2.0
        return self._cached_area

    def winding(self) -> WindingDirection:
        """Compute the winding direction from the signed area."""
        if self.signed_area() < 0:
            return WindingDirection.CLOCKWISE
        return WindingDirection.COUNTER_CLOCKWISE

    def is_clockwise(self) -> bool:
        """Check if the contour winds clockwise."""
        return self.winding() == WindingDirection.CLOCKWISE

    def reversed(self) -> "Contour":
        """Return the same loop traversed in the opposite direction.

        Handles swap sides so that every edge keeps its shape.
        """
        nodes = [
            Node(node.point, handle_in=node.handle_out, handle_out=node.handle_in)
            for node in reversed(self.nodes)
        ]
        return Contour(nodes=nodes)

    def segments(self) -> Iterator[Segment]:
        """Iterate edges in order, wrapping from the last node to the first."""
        n = len(self.nodes)
        for i in range(n):
            yield Segment(self.nodes[i], self.nodes[(i + 1) % n])

    def draw(self, pen: SegmentPen) -> None:
        """Draw the contour with exact coordinates onto a fontTools pen."""
        if not self.nodes:
            return

        pen.moveTo(self.nodes[0].point.to_tuple())
        for segment in self.segments():
            if segment.is_straight:
                pen.lineTo(segment.end.point.to_tuple())
            else:
                c1, c2 = segment.control_points()
                pen.curveTo(c1.to_tuple(), c2.to_tuple(), segment.end.point.to_tuple())
        pen.closePath()
