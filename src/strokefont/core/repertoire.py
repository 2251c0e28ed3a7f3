"""Character repertoire offered by the editor and drawing coverage."""

from dataclasses import dataclass, field

from strokefont.domain import GlyphData

CHARACTER_SETS: dict[str, str] = {
    "Uppercase": "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "Lowercase": "abcdefghijklmnopqrstuvwxyz",
    "Numbers": "0123456789",
    "Symbols": "!@#$%^&*()_+-=[]{}|;':\",./<>?`~",
}


@dataclass
class CategoryCoverage:
    """Drawn and missing characters of one category."""

    name: str
    drawn: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of characters in the category."""
        return len(self.drawn) + len(self.missing)

    @property
    def ratio(self) -> float:
        """Fraction of the category that has been drawn."""
        return len(self.drawn) / self.total if self.total else 0.0


def is_drawn(glyph_data: GlyphData, char: str) -> bool:
    """A character counts as drawn when it has at least one non-eraser stroke."""
    return any(not s.is_eraser for s in glyph_data.get(char, []))


def coverage(glyph_data: GlyphData) -> list[CategoryCoverage]:
    """Per-category coverage of the editor's repertoire, in category order."""
    report = []
    for name, chars in CHARACTER_SETS.items():
        entry = CategoryCoverage(name=name)
        for char in chars:
            (entry.drawn if is_drawn(glyph_data, char) else entry.missing).append(char)
        report.append(entry)
    return report
