"""Font-encoding capability backed by fontTools.

FontToolsCompiler turns encoded glyphs plus metadata into the bytes of a
TrueType-flavoured font using fontTools' FontBuilder. Cubic curves are
converted to quadratic ones on the way into the glyf table.
"""

import io
import math
from typing import Protocol, runtime_checkable

from fontTools.fontBuilder import FontBuilder
from fontTools.misc.timeTools import timestampSinceEpoch
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.recordingPen import replayRecording
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib.tables._g_l_y_f import Glyph

from strokefont.config import FontConfig, FontMetadata
from strokefont.domain import EncodedGlyph
from strokefont.exceptions import FontEncodingError


@runtime_checkable
class FontCompiler(Protocol):
    """Serializes glyphs and font-level metadata into font bytes."""

    ready: bool

    def compile(self, glyphs: list[EncodedGlyph], metadata: FontMetadata) -> bytes: ...


def postscript_name(family: str, style: str) -> str:
    """PostScript name: family and style without whitespace, joined by a hyphen."""
    return f"{''.join(family.split())}-{''.join(style.split())}"


def font_revision(version: str) -> float:
    """Parse the head table revision from a version string, 1.0 if unparsable."""
    try:
        revision = float(version.strip())
    except ValueError:
        return 1.0
    return revision if math.isfinite(revision) else 1.0


class FontToolsCompiler:
    """FontCompiler producing TrueType fonts with fontTools.

    Example:
        compiler = FontToolsCompiler(FontConfig())
        data = compiler.compile(glyphs, FontMetadata())
    """

    ready = True

    def __init__(self, config: FontConfig | None = None) -> None:
        self.config = config or FontConfig()

    def _validate(self, glyphs: list[EncodedGlyph]) -> None:
        seen: set[str] = set()
        for glyph in glyphs:
            if glyph.name in seen:
                raise FontEncodingError(f"duplicate glyph name '{glyph.name}'")
            seen.add(glyph.name)
            if not isinstance(glyph.advance_width, int) or glyph.advance_width < 0:
                raise FontEncodingError(
                    f"invalid advance width {glyph.advance_width!r} for '{glyph.name}'"
                )

    def _draw_glyph(self, glyph: EncodedGlyph) -> Glyph:
        pen = TTGlyphPen(None)
        replayRecording(
            glyph.commands,
            Cu2QuPen(pen, self.config.cu2qu_max_error, reverse_direction=False),
        )
        return pen.glyph()

    def compile(self, glyphs: list[EncodedGlyph], metadata: FontMetadata) -> bytes:
        """Build the font and return its bytes.

        Args:
            glyphs: Glyphs in final order, .notdef first
            metadata: Naming options

        Raises:
            FontEncodingError: If the input is invalid
        """
        self._validate(glyphs)
        cfg = self.config

        family = metadata.family_name
        style = metadata.style_name
        ps_name = postscript_name(family, style)
        version = f"Version {metadata.version}"

        fb = FontBuilder(unitsPerEm=cfg.units_per_em, isTTF=True)
        fb.setupGlyphOrder([g.name for g in glyphs])
        fb.setupCharacterMap({g.unicode: g.name for g in glyphs})
        fb.setupGlyf({g.name: self._draw_glyph(g) for g in glyphs})
        fb.setupMaxp()

        glyf_table = fb.font["glyf"]
        fb.setupHorizontalMetrics(
            {g.name: (g.advance_width, getattr(glyf_table[g.name], "xMin", 0)) for g in glyphs}
        )
        fb.setupHorizontalHeader(ascent=cfg.ascender, descent=cfg.descender)
        fb.setupNameTable(
            {
                "familyName": family,
                "styleName": style,
                "uniqueFontIdentifier": f"{metadata.version};{ps_name}",
                "fullName": f"{family} {style}",
                "psName": ps_name,
                "version": version,
                "designer": metadata.author,
            }
        )
        fb.setupOS2(
            sTypoAscender=cfg.ascender,
            sTypoDescender=cfg.descender,
            usWinAscent=cfg.ascender,
            usWinDescent=abs(cfg.descender),
            usWeightClass=700 if style.strip().lower() == "bold" else 400,
        )
        fb.setupPost()

        timestamp = timestampSinceEpoch(cfg.build_timestamp)
        fb.updateHead(
            created=timestamp,
            modified=timestamp,
            fontRevision=font_revision(metadata.version),
        )

        buffer = io.BytesIO()
        fb.save(buffer)
        return buffer.getvalue()
