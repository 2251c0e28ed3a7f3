"""Coordinate normalization from the drawing surface into design space.

The drawing surface has its origin at the top-left with y growing downward.
Font design space (1000 units per em) has y growing upward with the baseline
at y = 0. This module computes, for the full stroke set of one character,
the transform between the two:

- Manual mode: fixed scale (1000 / surface height); the leftmost ink is moved
  to a small left padding and the surface baseline maps to design y = 0.
- Auto-scale mode: the centerline bounding box is scaled to a target height
  chosen by the character's class, capped so the width stays within limits,
  and anchored either to the baseline or, for descenders, from the top.
"""

from dataclasses import dataclass

from strokefont.config import AutoScaleConfig, CanvasConfig, FontConfig
from strokefont.domain import CharacterClass, Point, Stroke

TALL_LOWERCASE = frozenset("bdfhiklt")
SHORT_LOWERCASE = frozenset("acemnorsuvwxz")
DESCENDER_LOWERCASE = frozenset("gjpqy")

# (first code point, last code point) ranges that are always tall
_TALL_RANGES: tuple[tuple[int, int], ...] = (
    (ord("A"), ord("Z")),
    (ord("0"), ord("9")),
)


def classify_character(char: str) -> CharacterClass:
    """Classify a character for auto-scaling.

    Total over all strings: anything that is not a known Latin letter or
    digit falls back to DEFAULT.

    Args:
        char: A single character

    Returns:
        The character's class
    """
    if len(char) == 1:
        code = ord(char)
        if any(low <= code <= high for low, high in _TALL_RANGES):
            return CharacterClass.TALL
    if char in TALL_LOWERCASE:
        return CharacterClass.TALL
    if char in SHORT_LOWERCASE:
        return CharacterClass.SHORT
    if char in DESCENDER_LOWERCASE:
        return CharacterClass.DESCENDER
    return CharacterClass.DEFAULT


def stroke_bounding_box(strokes: list[Stroke]) -> tuple[float, float, float, float]:
    """Bounding box of every point of the non-eraser strokes.

    Returns:
        Tuple of (min_x, min_y, max_x, max_y), all zero if there are no points
    """
    xs: list[float] = []
    ys: list[float] = []
    for stroke in strokes:
        if stroke.is_eraser:
            continue
        for p in stroke.points:
            xs.append(p.x)
            ys.append(p.y)

    if not xs:
        return (0.0, 0.0, 0.0, 0.0)
    return (min(xs), min(ys), max(xs), max(ys))


@dataclass(frozen=True)
class CoordinateTransform:
    """Maps drawing-surface points into design space.

    x' = (x - origin_x) * scale + padding
    y' = anchor_y + (reference_y - y) * scale

    Attributes:
        scale: Design units per drawing-surface unit
        origin_x: Surface x mapped onto the left padding
        padding: Design x of origin_x
        reference_y: Surface y mapped onto anchor_y
        anchor_y: Design y of reference_y
        char_class: Class the transform was derived for
        auto_scaled: Whether auto-scale mode produced this transform
    """

    scale: float
    origin_x: float
    padding: float
    reference_y: float
    anchor_y: float
    char_class: CharacterClass = CharacterClass.DEFAULT
    auto_scaled: bool = False

    def __call__(self, x: float, y: float) -> tuple[float, float]:
        return (
            (x - self.origin_x) * self.scale + self.padding,
            self.anchor_y + (self.reference_y - y) * self.scale,
        )

    def apply(self, point: Point) -> Point:
        """Transform one point."""
        return Point(*self(point.x, point.y))

    def apply_all(self, points: list[Point]) -> list[Point]:
        """Transform a sequence of points."""
        return [self.apply(p) for p in points]


class CoordinateNormalizer:
    """Derives the design-space transform of a character's strokes.

    Pure and deterministic: the same strokes and mode always give the same
    transform, and input strokes are never modified.

    Example:
        normalizer = CoordinateNormalizer()
        transform = normalizer.normalize("A", strokes, auto_scale=True)
        x, y = transform(120.0, 80.0)
    """

    def __init__(
        self,
        canvas: CanvasConfig | None = None,
        auto_scale: AutoScaleConfig | None = None,
        font: FontConfig | None = None,
    ) -> None:
        self.canvas = canvas or CanvasConfig()
        self.auto_scale = auto_scale or AutoScaleConfig()
        self.font = font or FontConfig()

    @property
    def manual_scale(self) -> float:
        """Fixed scale used in manual mode."""
        return self.font.units_per_em / self.canvas.height

    def normalize(self, char: str, strokes: list[Stroke], auto_scale: bool) -> CoordinateTransform:
        """Compute the transform for one character.

        Args:
            char: The character the strokes were drawn for
            strokes: All strokes of the character (eraser strokes are ignored)
            auto_scale: Use per-class auto-scaling instead of the fixed scale

        Returns:
            Transform into design space
        """
        char_class = classify_character(char)
        min_x, min_y, max_x, max_y = stroke_bounding_box(strokes)
        padding = self.canvas.left_padding

        if not auto_scale:
            return CoordinateTransform(
                scale=self.manual_scale,
                origin_x=min_x,
                padding=padding,
                reference_y=self.canvas.baseline_y,
                anchor_y=0.0,
                char_class=char_class,
            )

        scale = self.auto_scale_factor(char_class, max_x - min_x, max_y - min_y)

        if char_class == CharacterClass.DESCENDER:
            reference_y, anchor_y = min_y, self.auto_scale.descender_top
        else:
            reference_y, anchor_y = max_y, 0.0

        return CoordinateTransform(
            scale=scale,
            origin_x=min_x,
            padding=padding,
            reference_y=reference_y,
            anchor_y=anchor_y,
            char_class=char_class,
            auto_scaled=True,
        )

    def auto_scale_factor(self, char_class: CharacterClass, width: float, height: float) -> float:
        """Scale bringing a bounding box to its class's target height.

        Width and height are floored at the configured minimum extent so that
        flat or point-like drawings keep a finite scale. Width takes
        precedence: the scaled width never exceeds the maximum width.
        """
        cfg = self.auto_scale
        h = max(height, cfg.min_extent)
        w = max(width, cfg.min_extent)

        if char_class == CharacterClass.TALL:
            scale = cfg.tall_height / h
        elif char_class == CharacterClass.SHORT:
            scale = cfg.short_height / h
        elif char_class == CharacterClass.DESCENDER:
            scale = cfg.descender_height / h
        else:
            scale = min(cfg.default_height / h, self.manual_scale * cfg.default_scale_cap)

        if w * scale > cfg.max_width:
            scale = cfg.max_width / w

        return scale
