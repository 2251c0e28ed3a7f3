"""Stroke input types.

Strokes are captured on the drawing surface, whose origin is the top-left
corner with y growing downward. They are pure input to the synthesis engine
and are never mutated by it.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PenType(str, Enum):
    """Pen used to draw a stroke.

    - NORMAL: round pen, ribbon offset along the local normal
    - CALLIGRAPHY: flat nib held at a constant angle
    - ERASER: only edits the live drawing, ignored by synthesis
    """

    NORMAL = "normal"
    CALLIGRAPHY = "calligraphy"
    ERASER = "eraser"


@dataclass(frozen=True, slots=True)
class Point:
    """A 2D point.

    Used for drawing-surface points, design-space points and handle
    offsets alike.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def is_zero(self) -> bool:
        """Check if this point is the zero vector."""
        return self.x == 0 and self.y == 0

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Raises:
            ValueError: If a coordinate is not a finite number
        """
        x, y = float(data["x"]), float(data["y"])
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"non-finite coordinate ({x}, {y})")
        return cls(x=x, y=y)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Stroke:
    """One pen stroke: an ordered, non-empty list of points.

    Attributes:
        points: Centerline points in drawing order
        pen_type: Pen used for the stroke
        width: Nominal width, None to use the pen's default width
    """

    points: list[Point] = field(default_factory=list)
    pen_type: PenType = PenType.NORMAL
    width: float | None = None

    @property
    def is_eraser(self) -> bool:
        """Check if this stroke was drawn with the eraser."""
        return self.pen_type == PenType.ERASER

    def is_drawable(self) -> bool:
        """Check if the stroke can become a ribbon.

        Eraser strokes and strokes with fewer than two points contribute
        nothing to the outline.
        """
        return not self.is_eraser and len(self.points) >= 2

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the editor's stroke shape."""
        data: dict[str, Any] = {
            "points": [p.to_dict() for p in self.points],
            "type": self.pen_type.value,
        }
        if self.width is not None:
            data["width"] = self.width
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Stroke":
        """Deserialize from the editor's stroke shape.

        Raises:
            KeyError: If points are missing
            ValueError: If the pen type is unknown
        """
        width = data.get("width")
        return cls(
            points=[Point.from_dict(p) for p in data["points"]],
            pen_type=PenType(data.get("type", PenType.NORMAL.value)),
            width=float(width) if width is not None else None,
        )


GlyphData = dict[str, list[Stroke]]
