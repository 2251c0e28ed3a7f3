"""End-to-end test that synthesizes fonts and verifies the output file."""

import io

import pytest
from fontTools.ttLib import TTFont

from strokefont.config import FontMetadata
from strokefont.core import FontSynthesizer
from strokefont.core.normalizer import CoordinateNormalizer
from strokefont.domain import PenType, Point, Stroke


def contour_areas(font, glyph_name):
    """Signed areas of every contour of a glyph, read straight from glyf."""
    glyph = font["glyf"][glyph_name]
    if glyph.numberOfContours <= 0:
        return []

    coords = glyph.coordinates
    areas = []
    start = 0
    for end in glyph.endPtsOfContours:
        contour = coords[start : end + 1]
        start = end + 1
        n = len(contour)
        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += contour[i][0] * contour[j][1]
            area -= contour[j][0] * contour[i][1]
        areas.append(area / 2.0)
    return areas


def load(buffer):
    return TTFont(io.BytesIO(buffer))


@pytest.fixture(scope="module")
def synthesizer():
    return FontSynthesizer.default()


class TestEndToEndOutput:
    """Test the structure and geometry of synthesized fonts."""

    def test_capital_a_auto_scaled(self, synthesizer, capital_a_stroke):
        """Test a single-stroke A with auto-scale on."""
        metadata = FontMetadata(auto_scale=True)
        font = load(synthesizer.build_font_buffer({"A": [capital_a_stroke]}, metadata))

        assert font.getGlyphOrder() == [".notdef", "space", "A"]
        cmap = font.getBestCmap()
        assert set(cmap) - {0} == {32, 65}
        assert cmap[32] == "space"
        assert font["hmtx"]["space"][0] == 250

        # centerline spans exactly the tall target height
        transform = CoordinateNormalizer().normalize("A", [capital_a_stroke], auto_scale=True)
        ys = [transform(p.x, p.y)[1] for p in capital_a_stroke.points]
        assert max(ys) - min(ys) == pytest.approx(700.0, abs=1)

        # ink height is not normalized, only the centerline is (see
        # "Auto-scale height" in DESIGN.md); the ribbon adds up to one width
        ribbon_width = 8 * transform.scale * 1.6
        glyph = font["glyf"]["A"]
        assert 699 <= glyph.yMax - glyph.yMin <= 700 + ribbon_width + 1

        areas = contour_areas(font, "A")
        outer = max(areas, key=abs)
        assert outer < 0

    def test_descender_alignment(self, synthesizer, polyline):
        """Test that a descender's top sits at 500 units."""
        stroke = Stroke(points=polyline([(200, 100), (200, 500), (120, 520)], 30))
        metadata = FontMetadata(auto_scale=True)

        font = load(synthesizer.build_font_buffer({"g": [stroke]}, metadata))

        transform = CoordinateNormalizer().normalize("g", [stroke], auto_scale=True)
        half_width = 8 * transform.scale * 1.6 / 2
        glyph = font["glyf"]["g"]
        assert glyph.yMax == pytest.approx(500, abs=half_width + 1)
        assert glyph.yMin < 0

    def test_ring_has_hole(self, synthesizer, ring_stroke):
        """Test that a closed stroke produces an outer contour and a hole."""
        font = load(synthesizer.build_font_buffer({"o": [ring_stroke]}))

        areas = contour_areas(font, "o")
        outer = max(areas, key=abs)
        assert outer < 0
        assert any(a > 0 for a in areas)

    def test_disjoint_strokes(self, synthesizer):
        """Test that two disjoint strokes give two outer contours."""
        strokes = [
            Stroke(points=[Point(100, 100), Point(100, 400)]),
            Stroke(points=[Point(300, 100), Point(300, 400)]),
        ]

        font = load(synthesizer.build_font_buffer({"H": strokes}))

        areas = contour_areas(font, "H")
        assert len(areas) == 2
        assert all(a < 0 for a in areas)

    def test_eraser_only_character_absent(self, synthesizer, capital_a_stroke):
        """Test that an eraser-only character is not in the font."""
        eraser = Stroke(points=[Point(0, 0), Point(50, 50)], pen_type=PenType.ERASER)

        font = load(synthesizer.build_font_buffer({"A": [capital_a_stroke], "x": [eraser]}))

        assert "x" not in font.getGlyphOrder()
        assert ord("x") not in font.getBestCmap()

    def test_notdef_first(self, synthesizer):
        """Test the .notdef glyph shape and position."""
        font = load(synthesizer.build_font_buffer({}))

        assert font.getGlyphOrder()[0] == ".notdef"
        notdef = font["glyf"][".notdef"]
        assert (notdef.xMin, notdef.yMin, notdef.xMax, notdef.yMax) == (100, 0, 500, 700)
        assert font["hmtx"][".notdef"][0] == 600

    def test_bold_advances(self, synthesizer, capital_a_stroke):
        """Test that bold glyphs are never narrower than regular ones."""
        data = {"A": [capital_a_stroke]}
        regular = load(synthesizer.build_font_buffer(data, FontMetadata()))
        bold = load(synthesizer.build_font_buffer(data, FontMetadata().bold()))

        assert bold["hmtx"]["A"][0] >= regular["hmtx"]["A"][0]
        assert bold["name"].getDebugName(2) == "Bold"

    def test_idempotent_bytes(self, synthesizer, capital_a_stroke, ring_stroke):
        """Test that the same snapshot always yields the same file."""
        data = {"A": [capital_a_stroke], "o": [ring_stroke]}
        assert synthesizer.build_font_buffer(data) == synthesizer.build_font_buffer(data)
