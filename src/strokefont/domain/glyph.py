"""Per-character synthesis results.

This module defines the intermediate and final shapes one character goes
through: self-unioned ribbons, the merge result and the encoded glyph handed
to the font compiler. The degraded outcomes of the best-effort steps are
explicit so that later stages never have to guess what happened.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from strokefont.domain.contour import Contour

PathCommand = tuple[str, tuple[tuple[int, int], ...]]


class CharacterClass(Enum):
    """Bucket deciding auto-scale target height and vertical anchor."""

    TALL = "tall"
    SHORT = "short"
    DESCENDER = "descender"
    DEFAULT = "default"


@dataclass
class Ribbon:
    """Closed polygon approximating the ink of one stroke.

    Attributes:
        contours: Boundary loops of the ribbon
        resolved: False when self-intersections could not be removed and the
            raw offset polygon is kept instead
    """

    contours: list[Contour]
    resolved: bool = True


class MergeStatus(Enum):
    """Outcome of folding a character's ribbons together."""

    MERGED = "merged"
    UNMERGED = "unmerged"


@dataclass
class MergeResult:
    """Merged outline of a character, or its unmerged ribbons on failure.

    Attributes:
        status: Whether the boolean union succeeded
        outline: Merged boundary loops (MERGED only)
        ribbons: The ribbons that could not be merged (UNMERGED only)
    """

    status: MergeStatus
    outline: list[Contour] = field(default_factory=list)
    ribbons: list[Ribbon] = field(default_factory=list)

    @classmethod
    def merged(cls, outline: list[Contour]) -> "MergeResult":
        """Create a successful result."""
        return cls(status=MergeStatus.MERGED, outline=outline)

    @classmethod
    def unmerged(cls, ribbons: list[Ribbon]) -> "MergeResult":
        """Create a fallback result keeping every ribbon as is."""
        return cls(status=MergeStatus.UNMERGED, ribbons=list(ribbons))

    @property
    def is_merged(self) -> bool:
        """Check if the ribbons were merged into one outline."""
        return self.status == MergeStatus.MERGED

    def loops(self) -> list[Contour]:
        """All boundary loops to encode, in order."""
        if self.is_merged:
            return list(self.outline)
        return [contour for ribbon in self.ribbons for contour in ribbon.contours]

    def bounds_source(self) -> list[Contour]:
        """Contours that determine the advance width.

        The merged outline, or the first ribbon when merging failed.
        """
        if self.is_merged:
            return list(self.outline)
        if self.ribbons:
            return list(self.ribbons[0].contours)
        return []


@dataclass
class EncodedGlyph:
    """A glyph ready for the font compiler.

    Attributes:
        name: Glyph name
        unicode: Unicode code point
        advance_width: Horizontal advance in design units
        commands: Path commands in fontTools RecordingPen form
        merged: False when the glyph was encoded from unmerged ribbons
    """

    name: str
    unicode: int
    advance_width: int
    commands: list[PathCommand] = field(default_factory=list)
    merged: bool = True

    def is_empty(self) -> bool:
        """Check if the glyph has no outline."""
        return len(self.commands) == 0

    @property
    def contour_count(self) -> int:
        """Number of closed sub-paths."""
        return sum(1 for command, _ in self.commands if command == "moveTo")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "name": self.name,
            "unicode": self.unicode,
            "advance_width": self.advance_width,
            "commands": [[command, [list(p) for p in points]] for command, points in self.commands],
            "merged": self.merged,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EncodedGlyph":
        """Deserialize from dictionary."""
        commands = [
            (command, tuple((int(p[0]), int(p[1])) for p in points))
            for command, points in data["commands"]
        ]
        return cls(
            name=data["name"],
            unicode=data["unicode"],
            advance_width=data["advance_width"],
            commands=commands,
            merged=data.get("merged", True),
        )
