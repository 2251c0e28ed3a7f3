"""Glyph merger folding a character's ribbons into one outline.

The ribbons are united left to right in drawing order. If any union fails
the character falls back to its unmerged ribbons instead of being dropped.
Merged outlines follow the TrueType winding convention: outer contours
clockwise, holes counter-clockwise.
"""

import structlog

from strokefont.core.geometry import GeometryBackend
from strokefont.domain import Contour, MergeResult, Ribbon
from strokefont.exceptions import GeometryError

logger = structlog.get_logger(__name__)


class GlyphMerger:
    """Unions ribbons and normalizes winding.

    The fold is sequential: each union depends on the accumulated result.
    """

    def __init__(self, geometry: GeometryBackend) -> None:
        self.geometry = geometry

    def merge(self, ribbons: list[Ribbon], char: str | None = None) -> MergeResult | None:
        """Merge the ribbons of one character.

        Args:
            ribbons: Ribbons in stroke-drawing order
            char: Character being merged (for log context)

        Returns:
            MERGED result with the oriented outline, UNMERGED result with the
            original ribbons if a boolean operation failed, or None when there
            are no ribbons
        """
        if not ribbons:
            return None

        try:
            merged = ribbons[0].contours
            if len(ribbons) == 1:
                merged = self.geometry.self_union(merged)

            for index, ribbon in enumerate(ribbons[1:], start=1):
                merged = self.geometry.union(merged, ribbon.contours)
                logger.debug("Union succeeded", char=char, index=index)

            merged = self.enforce_winding(merged)
        except GeometryError as e:
            logger.warning(
                "Union failed, using unmerged ribbons",
                char=char,
                ribbons=len(ribbons),
                error=str(e),
            )
            return MergeResult.unmerged(ribbons)

        return MergeResult.merged(merged)

    def enforce_winding(self, outline: list[Contour]) -> list[Contour]:
        """Make outer contours clockwise and holes counter-clockwise.

        Uses the backend's combined reorient operation when it has one.
        Otherwise only the outer boundary (the contour of largest area) is
        checked and reversed; holes are left as the union produced them.
        """
        reorient = getattr(self.geometry, "reorient", None)
        if callable(reorient):
            return reorient(outline, outer_clockwise=True, holes_opposite=True)

        if not outline:
            return outline

        outer_index = max(range(len(outline)), key=lambda i: abs(outline[i].signed_area()))
        outer = outline[outer_index]
        if self.geometry.is_clockwise(outer):
            return outline

        logger.debug("Reversed outer contour to clockwise")
        oriented = list(outline)
        oriented[outer_index] = self.geometry.reverse(outer)
        return oriented
