"""Core synthesis algorithms for strokefont.

This module contains the glyph outline synthesis engine:

- Coordinate normalization (manual and per-class auto-scale)
- Ribbon construction from stroke centerlines
- Glyph merging (boolean union, winding convention)
- Outline encoding (straight vs cubic edges)
- Font assembly (mandatory glyphs, advance widths)

All per-character services are:
- Stateless (safe for use in worker processes)
- Pure (input strokes are never modified)

Key classes:
- CoordinateNormalizer: Maps drawing-surface points into design space
- RibbonBuilder: Turns strokes into self-unioned ribbons
- GlyphMerger: Unions ribbons into one outline
- FontAssembler: Collects glyphs into a font
- FontSynthesizer: Orchestrates the whole pipeline
- PathopsGeometry: Geometry capability on skia-pathops
"""

from strokefont.core.assembler import FontAssembler, advance_width, glyph_name
from strokefont.core.encoder import encode_contour, encode_contours, encode_merge_result
from strokefont.core.geometry import GeometryBackend, PathopsGeometry
from strokefont.core.merger import GlyphMerger
from strokefont.core.normalizer import (
    CoordinateNormalizer,
    CoordinateTransform,
    classify_character,
)
from strokefont.core.repertoire import CHARACTER_SETS, coverage
from strokefont.core.ribbon import RibbonBuilder
from strokefont.core.synthesizer import (
    FontSynthesizer,
    SynthesisResult,
    process_character,
    synthesize_character,
)

__all__ = [
    "CHARACTER_SETS",
    # Normalizer
    "CoordinateNormalizer",
    "CoordinateTransform",
    # Assembler
    "FontAssembler",
    # Orchestration
    "FontSynthesizer",
    # Geometry
    "GeometryBackend",
    # Merger
    "GlyphMerger",
    "PathopsGeometry",
    # Ribbons
    "RibbonBuilder",
    "SynthesisResult",
    "advance_width",
    "classify_character",
    "coverage",
    # Encoder
    "encode_contour",
    "encode_contours",
    "encode_merge_result",
    "glyph_name",
    "process_character",
    "synthesize_character",
]
