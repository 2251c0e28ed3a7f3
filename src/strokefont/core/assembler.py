"""Font assembler collecting glyphs and metadata into one font.

The assembler adds the two glyphs every font gets regardless of the
drawings (.notdef and space), computes advance widths from merged outlines
and hands everything to the font compiler capability.
"""

import math

import structlog
from fontTools.agl import UV2AGL
from fontTools.misc.roundTools import otRound

from strokefont.config import FontConfig, FontMetadata
from strokefont.core.geometry import GeometryBackend
from strokefont.domain import EncodedGlyph, MergeResult
from strokefont.exceptions import FontEncodingError
from strokefont.io.compiler import FontCompiler

logger = structlog.get_logger(__name__)

NOTDEF_NAME = ".notdef"
SPACE_NAME = "space"
RESERVED_CODE_POINTS = frozenset({0, 32})


def glyph_name(char: str) -> str:
    """Production glyph name of a character (Adobe Glyph List or uniXXXX)."""
    code = ord(char)
    name = UV2AGL.get(code)
    if name:
        return name
    if code <= 0xFFFF:
        return f"uni{code:04X}"
    return f"u{code:05X}"


def notdef_glyph(config: FontConfig) -> EncodedGlyph:
    """The .notdef glyph: a plain rectangle."""
    x_min, y_min, x_max, y_max = config.notdef_box
    commands = [
        ("moveTo", ((x_min, y_min),)),
        ("lineTo", ((x_min, y_max),)),
        ("lineTo", ((x_max, y_max),)),
        ("lineTo", ((x_max, y_min),)),
        ("closePath", ()),
    ]
    return EncodedGlyph(
        name=NOTDEF_NAME,
        unicode=0,
        advance_width=config.notdef_advance,
        commands=commands,
    )


def space_glyph(config: FontConfig) -> EncodedGlyph:
    """The space glyph: no outline."""
    return EncodedGlyph(name=SPACE_NAME, unicode=32, advance_width=config.space_advance)


def advance_width(result: MergeResult, geometry: GeometryBackend, config: FontConfig) -> int:
    """Advance width of a character.

    The rounded ink width of the merged outline (or of the first ribbon when
    merging failed) plus the side padding. Falls back to the default advance
    when no finite positive width can be measured.
    """
    bounds = geometry.bounding_box(result.bounds_source())
    if bounds is None:
        logger.debug("No bounds, using default advance width")
        return config.default_advance

    width = bounds[2] - bounds[0]
    if not math.isfinite(width) or width <= 0:
        logger.debug("Degenerate bounds, using default advance width", width=width)
        return config.default_advance

    advance = otRound(width + config.side_padding)
    if advance <= 0:
        return config.default_advance
    return advance


class FontAssembler:
    """Aggregates encoded glyphs into a serialized font.

    Example:
        assembler = FontAssembler(FontToolsCompiler())
        buffer = assembler.assemble(glyphs, FontMetadata(family_name="Hand"))
    """

    def __init__(self, compiler: FontCompiler, config: FontConfig | None = None) -> None:
        self.compiler = compiler
        self.config = config or FontConfig()

    def collect(self, glyphs: list[EncodedGlyph]) -> list[EncodedGlyph]:
        """Mandatory glyphs followed by the drawn ones.

        Drawn glyphs claiming a reserved code point (NUL or space) are
        dropped so the mandatory glyphs keep their fixed shape and metrics.
        """
        collected = [notdef_glyph(self.config), space_glyph(self.config)]
        for glyph in glyphs:
            if glyph.unicode in RESERVED_CODE_POINTS:
                logger.warning(
                    "Drawn glyph replaces a mandatory glyph, skipping",
                    glyph=glyph.name,
                    unicode=glyph.unicode,
                )
                continue
            collected.append(glyph)
        return collected

    def assemble(self, glyphs: list[EncodedGlyph], metadata: FontMetadata) -> bytes:
        """Serialize the font.

        Raises:
            FontEncodingError: If the compiler rejects the input
        """
        collected = self.collect(glyphs)
        try:
            buffer = self.compiler.compile(collected, metadata)
        except FontEncodingError:
            raise
        except Exception as e:
            raise FontEncodingError(str(e)) from e

        logger.info(
            "Font compiled",
            family=metadata.family_name,
            style=metadata.style_name,
            glyphs=len(collected),
            size=len(buffer),
        )
        return buffer
