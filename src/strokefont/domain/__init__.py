"""Domain models for strokefont.

This module contains the core domain models representing strokes, outline
contours and per-character synthesis results. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of fonttools and pathops implementation details

Key classes:
- Point: A 2D point or offset
- Stroke: One pen stroke with its pen type and width
- Node: An on-curve outline point with handle offsets
- Contour: A closed boundary loop
- Ribbon: The self-unioned polygon of one stroke
- MergeResult: Merged outline or unmerged fallback for one character
- EncodedGlyph: Path commands and metrics for one glyph
"""

from strokefont.domain.contour import (
    Contour,
    Node,
    Segment,
    WindingDirection,
)
from strokefont.domain.glyph import (
    CharacterClass,
    EncodedGlyph,
    MergeResult,
    MergeStatus,
    PathCommand,
    Ribbon,
)
from strokefont.domain.stroke import ORIGIN, GlyphData, PenType, Point, Stroke

__all__: list[str] = [
    # Enums
    "CharacterClass",
    "MergeStatus",
    "PenType",
    "WindingDirection",
    # Core types
    "ORIGIN",
    "Point",
    "Stroke",
    "GlyphData",
    "Node",
    "Segment",
    "Contour",
    "Ribbon",
    "MergeResult",
    "EncodedGlyph",
    "PathCommand",
]
