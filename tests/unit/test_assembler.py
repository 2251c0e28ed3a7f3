"""Unit tests for the font assembler."""

from unittest.mock import Mock, patch

import pytest

from strokefont.config import FontConfig, FontMetadata
from strokefont.core.assembler import (
    FontAssembler,
    advance_width,
    glyph_name,
    notdef_glyph,
    space_glyph,
)
from strokefont.domain import Contour, EncodedGlyph, MergeResult, Point, Ribbon
from strokefont.exceptions import FontEncodingError


def rectangle(x0, width, height=100):
    return Contour.from_points(
        [Point(x0, 0), Point(x0, height), Point(x0 + width, height), Point(x0 + width, 0)]
    )


class TestGlyphName:
    """Tests for glyph_name."""

    @pytest.mark.parametrize(
        ("char", "name"),
        [
            ("A", "A"),
            ("a", "a"),
            ("0", "zero"),
            ("!", "exclam"),
            ("é", "eacute"),
            ("€", "Euro"),
            ("中", "uni4E2D"),
            ("😀", "u1F600"),
        ],
    )
    def test_names(self, char, name):
        """Test AGL names and the uni/u fallbacks."""
        assert glyph_name(char) == name


class TestMandatoryGlyphs:
    """Tests for .notdef and space."""

    def test_notdef(self):
        """Test the .notdef rectangle and metrics."""
        glyph = notdef_glyph(FontConfig())

        assert glyph.name == ".notdef"
        assert glyph.unicode == 0
        assert glyph.advance_width == 600
        assert glyph.commands == [
            ("moveTo", ((100, 0),)),
            ("lineTo", ((100, 700),)),
            ("lineTo", ((500, 700),)),
            ("lineTo", ((500, 0),)),
            ("closePath", ()),
        ]

    def test_space(self):
        """Test the empty space glyph."""
        glyph = space_glyph(FontConfig())
        assert (glyph.name, glyph.unicode, glyph.advance_width) == ("space", 32, 250)
        assert glyph.is_empty()


class TestAdvanceWidth:
    """Tests for advance_width."""

    def test_ink_width_plus_padding(self, geometry):
        """Test the rounded ink width plus side padding."""
        result = MergeResult.merged([rectangle(5, 120.4)])
        assert advance_width(result, geometry, FontConfig()) == 130

    def test_unmerged_uses_first_ribbon(self, geometry):
        """Test that a fallback result is measured by its first ribbon only."""
        result = MergeResult.unmerged(
            [Ribbon(contours=[rectangle(0, 50)]), Ribbon(contours=[rectangle(300, 50)])]
        )
        assert advance_width(result, geometry, FontConfig()) == 60

    def test_no_bounds(self, geometry):
        """Test the default when nothing can be measured."""
        assert advance_width(MergeResult.merged([]), geometry, FontConfig()) == 600

    def test_path_without_finite_bounds(self, geometry):
        """Test the default when pathops reports no bounds for the outline."""
        result = MergeResult.merged([rectangle(0, 10)])
        with patch("strokefont.core.geometry.contours_to_path", return_value=Mock(bounds=None)):
            assert geometry.bounding_box(result.loops()) is None
            assert advance_width(result, geometry, FontConfig()) == 600

    @pytest.mark.parametrize(
        "bounds",
        [(10.0, 0.0, 10.0, 50.0), (0.0, 0.0, float("nan"), 10.0), (0.0, 0.0, float("inf"), 1.0)],
    )
    def test_degenerate_bounds(self, bounds):
        """Test the default for zero or non-finite widths."""
        geometry = Mock()
        geometry.bounding_box.return_value = bounds
        result = MergeResult.merged([rectangle(0, 10)])
        assert advance_width(result, geometry, FontConfig()) == 600


class TestFontAssembler:
    """Tests for FontAssembler."""

    def test_collect_order(self):
        """Test that mandatory glyphs come first, then drawn ones in order."""
        drawn = [
            EncodedGlyph(name="B", unicode=66, advance_width=300),
            EncodedGlyph(name="A", unicode=65, advance_width=300),
        ]
        names = [g.name for g in FontAssembler(Mock()).collect(drawn)]
        assert names == [".notdef", "space", "B", "A"]

    def test_collect_skips_reserved(self):
        """Test that a drawn space does not replace the mandatory one."""
        drawn = [EncodedGlyph(name="space", unicode=32, advance_width=900)]
        collected = FontAssembler(Mock()).collect(drawn)
        assert len(collected) == 2
        assert collected[1].advance_width == 250

    def test_assemble_passes_glyphs_to_compiler(self):
        """Test that the compiler receives the collected glyphs."""
        compiler = Mock()
        compiler.compile.return_value = b"font"
        metadata = FontMetadata()

        buffer = FontAssembler(compiler).assemble([], metadata)

        assert buffer == b"font"
        glyphs, passed_metadata = compiler.compile.call_args.args
        assert [g.name for g in glyphs] == [".notdef", "space"]
        assert passed_metadata is metadata

    def test_assemble_wraps_compiler_errors(self):
        """Test that unexpected compiler errors become FontEncodingError."""
        compiler = Mock()
        compiler.compile.side_effect = KeyError("glyf")

        with pytest.raises(FontEncodingError):
            FontAssembler(compiler).assemble([], FontMetadata())

    def test_assemble_keeps_encoding_errors(self):
        """Test that FontEncodingError passes through unchanged."""
        error = FontEncodingError("bad")
        compiler = Mock()
        compiler.compile.side_effect = error

        with pytest.raises(FontEncodingError) as exc_info:
            FontAssembler(compiler).assemble([], FontMetadata())
        assert exc_info.value is error
