"""Geometry capability backed by skia-pathops.

The synthesis engine needs a handful of polygon operations it does not
implement itself: self-union (removing self-intersections), boolean union,
winding queries and bounding boxes. This module defines that contract as
GeometryBackend and provides PathopsGeometry, which performs the boolean
work with skia-pathops.

Domain contours are drawn into a pathops.Path through its pen, and results
are read back through ContourPen, a fontTools BasePen that records nodes with
handle offsets.
"""

from typing import Any, Protocol, runtime_checkable

import pathops
from fontTools.pens.basePen import BasePen

from strokefont.domain import ORIGIN, Contour, Node, Point
from strokefont.exceptions import GeometryError, SelfUnionError, UnionError

BoundingBox = tuple[float, float, float, float]


@runtime_checkable
class GeometryBackend(Protocol):
    """Operations the engine requires from a 2-D geometry library.

    Implementations may also provide
    ``reorient(contours, outer_clockwise, holes_opposite)``; the merger uses
    it when present.
    """

    ready: bool

    def self_union(self, contours: list[Contour]) -> list[Contour]: ...

    def union(self, a: list[Contour], b: list[Contour]) -> list[Contour]: ...

    def is_clockwise(self, contour: Contour) -> bool: ...

    def reverse(self, contour: Contour) -> Contour: ...

    def bounding_box(self, contours: list[Contour]) -> BoundingBox | None: ...


class ContourPen(BasePen):
    """A pen collecting drawn outlines as domain contours.

    Cubic control points are stored as handle offsets on the adjacent
    nodes. Quadratic curves are converted to cubics by BasePen. A closing
    node that repeats the first node is folded into it.
    """

    def __init__(self, glyphSet: Any = None) -> None:  # noqa: N803
        super().__init__(glyphSet)
        self.contours: list[Contour] = []
        self._nodes: list[list[Point]] | None = None

    def _moveTo(self, pt: tuple[float, float]) -> None:  # noqa: N802
        self._flush()
        self._nodes = [[Point(*pt), ORIGIN, ORIGIN]]

    def _lineTo(self, pt: tuple[float, float]) -> None:  # noqa: N802
        assert self._nodes is not None
        self._nodes.append([Point(*pt), ORIGIN, ORIGIN])

    def _curveToOne(  # noqa: N802
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        assert self._nodes is not None
        previous = self._nodes[-1]
        previous[2] = Point(*pt1) - previous[0]
        end = Point(*pt3)
        self._nodes.append([end, Point(*pt2) - end, ORIGIN])

    def _closePath(self) -> None:  # noqa: N802
        self._flush()

    def _endPath(self) -> None:  # noqa: N802
        self._flush()

    def _flush(self) -> None:
        nodes, self._nodes = self._nodes, None
        if not nodes:
            return

        if len(nodes) > 1 and nodes[-1][0] == nodes[0][0]:
            closing = nodes.pop()
            nodes[0][1] = closing[1]

        # a single node encloses nothing
        if len(nodes) < 2:
            return

        self.contours.append(
            Contour(nodes=[Node(point, handle_in=h_in, handle_out=h_out) for point, h_in, h_out in nodes])
        )


def contours_to_path(contours: list[Contour]) -> pathops.Path:
    """Draw domain contours into a new pathops.Path."""
    path = pathops.Path()
    pen = path.getPen()
    for contour in contours:
        contour.draw(pen)
    return path


def path_to_contours(path: pathops.Path) -> list[Contour]:
    """Read the contours of a pathops.Path back into domain contours."""
    pen = ContourPen()
    path.draw(pen)
    return pen.contours


class PathopsGeometry:
    """GeometryBackend implemented with skia-pathops.

    Results of self_union, union and reorient have their winding fixed by
    pathops: outer contours follow ``clockwise`` and holes run the other
    way.

    Example:
        geometry = PathopsGeometry()
        outline = geometry.union(geometry.self_union(a), geometry.self_union(b))
    """

    ready = True

    def __init__(self, clockwise: bool = True) -> None:
        """Initialize the backend.

        Args:
            clockwise: Orientation given to outer contours of results
        """
        self.clockwise = clockwise

    def self_union(self, contours: list[Contour]) -> list[Contour]:
        """Union a shape with itself to remove self-intersections.

        Raises:
            SelfUnionError: If pathops fails or the result is empty
        """
        try:
            result = pathops.simplify(
                contours_to_path(contours),
                fix_winding=True,
                keep_starting_points=False,
                clockwise=self.clockwise,
            )
        except pathops.PathOpsError as e:
            raise SelfUnionError(str(e)) from e

        resolved = path_to_contours(result)
        if not resolved:
            raise SelfUnionError("operation produced an empty shape")
        return resolved

    def union(self, a: list[Contour], b: list[Contour]) -> list[Contour]:
        """Boolean union of two shapes.

        Raises:
            UnionError: If pathops fails or the result is empty
        """
        try:
            result = pathops.op(
                contours_to_path(a),
                contours_to_path(b),
                pathops.PathOp.UNION,
                fix_winding=True,
                keep_starting_points=False,
                clockwise=self.clockwise,
            )
        except pathops.PathOpsError as e:
            raise UnionError(str(e)) from e

        merged = path_to_contours(result)
        if not merged:
            raise UnionError("operation produced an empty shape")
        return merged

    def reorient(
        self,
        contours: list[Contour],
        outer_clockwise: bool = True,
        holes_opposite: bool = True,
    ) -> list[Contour]:
        """Orient every contour of an outline in one operation.

        Args:
            contours: Outline to reorient
            outer_clockwise: Whether outer contours should wind clockwise
            holes_opposite: Whether holes wind opposite to outer contours;
                when False every contour gets the outer orientation

        Raises:
            GeometryError: If pathops fails
        """
        if not holes_opposite:
            return [
                c if c.is_clockwise() == outer_clockwise else c.reversed()
                for c in contours
            ]

        try:
            result = pathops.simplify(
                contours_to_path(contours),
                fix_winding=True,
                keep_starting_points=True,
                clockwise=outer_clockwise,
            )
        except pathops.PathOpsError as e:
            raise GeometryError(f"Reorient failed: {e}") from e
        return path_to_contours(result)

    def is_clockwise(self, contour: Contour) -> bool:
        """Check if a contour winds clockwise in design space."""
        return contour.is_clockwise()

    def reverse(self, contour: Contour) -> Contour:
        """Reverse the traversal direction of a contour."""
        return contour.reversed()

    def bounding_box(self, contours: list[Contour]) -> BoundingBox | None:
        """Tight bounding box of a shape, None if it has no contours or no finite extent."""
        if not any(c.nodes for c in contours):
            return None
        bounds = contours_to_path(contours).bounds
        if not bounds:
            return None
        x_min, y_min, x_max, y_max = bounds
        return (x_min, y_min, x_max, y_max)
