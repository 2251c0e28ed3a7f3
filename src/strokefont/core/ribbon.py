"""Ribbon construction from stroke centerlines.

A ribbon is the closed polygon covering the ink of one stroke. It is built
by offsetting every centerline point to both sides and joining the left edge
with the reversed right edge. Offsetting self-intersects at sharp turns, so
every ribbon is passed through the geometry backend's self-union before it
is merged with other strokes.
"""

import math

import structlog

from strokefont.config import StrokeConfig
from strokefont.core.geometry import GeometryBackend
from strokefont.core.normalizer import CoordinateTransform
from strokefont.domain import Contour, PenType, Point, Ribbon, Stroke
from strokefont.exceptions import GeometryError

logger = structlog.get_logger(__name__)


class RibbonBuilder:
    """Turns strokes into self-unioned ribbons.

    Example:
        builder = RibbonBuilder(PathopsGeometry())
        ribbon = builder.build(stroke, transform, weight_multiplier=1.0)
    """

    def __init__(self, geometry: GeometryBackend, config: StrokeConfig | None = None) -> None:
        """Initialize the builder.

        Args:
            geometry: Backend used to resolve self-intersections
            config: Stroke width and nib settings
        """
        self.geometry = geometry
        self.config = config or StrokeConfig()

    def nominal_width(self, stroke: Stroke) -> float:
        """Stroke width on the drawing surface, falling back to the pen default."""
        if stroke.width:
            return stroke.width
        if stroke.pen_type == PenType.CALLIGRAPHY:
            return self.config.calligraphy_width
        return self.config.normal_width

    def effective_width(self, stroke: Stroke, scale: float, weight_multiplier: float = 1.0) -> float:
        """Ribbon width in design units."""
        return self.nominal_width(stroke) * scale * self.config.base_weight * weight_multiplier

    def offset_edges(
        self,
        points: list[Point],
        width: float,
        pen_type: PenType,
    ) -> tuple[list[Point], list[Point]]:
        """Offset a design-space centerline to both sides.

        The direction at each point runs toward the next point, or from the
        previous point for the last one. Points whose direction is shorter
        than the minimum direction length are skipped on both sides.

        Args:
            points: Centerline in design space
            width: Full ribbon width
            pen_type: NORMAL offsets along the local normal, CALLIGRAPHY along
                a fixed nib vector

        Returns:
            Tuple of (left edge, right edge), both in centerline order
        """
        left: list[Point] = []
        right: list[Point] = []
        half = width / 2.0

        angle = math.radians(self.config.nib_angle)
        nib = Point(math.cos(angle) * half, math.sin(angle) * half)

        for i, p in enumerate(points):
            dx, dy = 1.0, 0.0
            if i < len(points) - 1:
                dx = points[i + 1].x - p.x
                dy = points[i + 1].y - p.y
            elif i > 0:
                dx = p.x - points[i - 1].x
                dy = p.y - points[i - 1].y

            length = math.hypot(dx, dy)
            if length < self.config.min_direction_length:
                continue

            if pen_type == PenType.CALLIGRAPHY:
                left.append(p - nib)
                right.append(p + nib)
            else:
                nx, ny = -dy / length, dx / length
                left.append(Point(p.x + nx * half, p.y + ny * half))
                right.append(Point(p.x - nx * half, p.y - ny * half))

        return left, right

    def outline_polygon(self, points: list[Point], width: float, pen_type: PenType) -> Contour | None:
        """Raw ribbon polygon before self-intersection removal.

        Returns:
            The closed polygon, or None when fewer than two points survive
        """
        left, right = self.offset_edges(points, width, pen_type)
        if len(left) < 2:
            return None
        return Contour.from_points(left + list(reversed(right)))

    def build(
        self,
        stroke: Stroke,
        transform: CoordinateTransform,
        weight_multiplier: float = 1.0,
    ) -> Ribbon | None:
        """Build the ribbon of one stroke.

        Args:
            stroke: Stroke in drawing-surface coordinates
            transform: Transform of the stroke's character into design space
            weight_multiplier: Extra width factor (bold simulation)

        Returns:
            The ribbon, or None for eraser strokes and strokes that are too
            short. When self-union fails the raw polygon is returned with
            ``resolved`` set to False.
        """
        if not stroke.is_drawable():
            return None

        width = self.effective_width(stroke, transform.scale, weight_multiplier)
        polygon = self.outline_polygon(transform.apply_all(stroke.points), width, stroke.pen_type)
        if polygon is None:
            return None

        try:
            contours = self.geometry.self_union([polygon])
        except GeometryError as e:
            logger.warning(
                "Self-union failed, keeping unresolved ribbon",
                pen=stroke.pen_type.value,
                points=len(stroke.points),
                error=str(e),
            )
            return Ribbon(contours=[polygon], resolved=False)

        return Ribbon(contours=contours)
