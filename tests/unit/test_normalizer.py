"""Unit tests for character classification and coordinate normalization."""

import math

import pytest

from strokefont.core.normalizer import (
    CoordinateNormalizer,
    CoordinateTransform,
    classify_character,
    stroke_bounding_box,
)
from strokefont.domain import CharacterClass, PenType, Point, Stroke


def stroke(*coords, pen_type=PenType.NORMAL):
    return Stroke(points=[Point(x, y) for x, y in coords], pen_type=pen_type)


def transformed_height(transform, strokes):
    ys = [transform(p.x, p.y)[1] for s in strokes for p in s.points]
    return max(ys) - min(ys)


class TestClassifyCharacter:
    """Tests for classify_character."""

    @pytest.mark.parametrize("char", ["A", "Z", "0", "9", "b", "k", "t"])
    def test_tall(self, char):
        """Test capitals, digits and ascender lowercase letters."""
        assert classify_character(char) == CharacterClass.TALL

    @pytest.mark.parametrize("char", ["a", "o", "x", "z"])
    def test_short(self, char):
        """Test x-height lowercase letters."""
        assert classify_character(char) == CharacterClass.SHORT

    @pytest.mark.parametrize("char", ["g", "j", "p", "q", "y"])
    def test_descender(self, char):
        """Test lowercase letters with descenders."""
        assert classify_character(char) == CharacterClass.DESCENDER

    @pytest.mark.parametrize("char", ["!", "@", "é", "Ω", "中"])
    def test_default(self, char):
        """Test symbols and non-ASCII characters."""
        assert classify_character(char) == CharacterClass.DEFAULT


class TestStrokeBoundingBox:
    """Tests for stroke_bounding_box."""

    def test_eraser_ignored(self):
        """Test that eraser strokes do not widen the box."""
        strokes = [
            stroke((10, 20), (30, 40)),
            stroke((0, 0), (500, 500), pen_type=PenType.ERASER),
        ]
        assert stroke_bounding_box(strokes) == (10, 20, 30, 40)

    def test_no_points(self):
        """Test the empty box."""
        assert stroke_bounding_box([]) == (0.0, 0.0, 0.0, 0.0)


class TestCoordinateTransform:
    """Tests for CoordinateTransform."""

    def test_flips_and_scales(self):
        """Test that y is flipped around the reference line."""
        transform = CoordinateTransform(
            scale=2.0, origin_x=10.0, padding=5.0, reference_y=100.0, anchor_y=0.0
        )
        assert transform(10.0, 100.0) == (5.0, 0.0)
        assert transform(20.0, 50.0) == (25.0, 100.0)
        assert transform.apply(Point(20.0, 50.0)) == Point(25.0, 100.0)


class TestManualScale:
    """Tests for manual (fixed scale) normalization."""

    def test_baseline_maps_to_zero(self):
        """Test that the surface baseline lands on design y = 0."""
        normalizer = CoordinateNormalizer()
        strokes = [stroke((100, 450), (100, 150))]

        transform = normalizer.normalize("l", strokes, auto_scale=False)

        assert transform.scale == pytest.approx(1000 / 600)
        assert transform(100, 450) == pytest.approx((5.0, 0.0))
        assert transform(100, 150) == pytest.approx((5.0, 500.0))
        assert not transform.auto_scaled

    def test_left_edge_at_padding(self):
        """Test that the leftmost point lands on the left padding."""
        normalizer = CoordinateNormalizer()
        strokes = [stroke((250, 300), (400, 300)), stroke((220, 100), (230, 400))]

        transform = normalizer.normalize("A", strokes, auto_scale=False)

        assert transform(220, 0)[0] == pytest.approx(5.0)

    def test_input_not_modified(self):
        """Test that normalization leaves the strokes untouched."""
        strokes = [stroke((100, 450), (100, 150))]
        before = [s.to_dict() for s in strokes]

        CoordinateNormalizer().normalize("l", strokes, auto_scale=True)

        assert [s.to_dict() for s in strokes] == before


class TestAutoScale:
    """Tests for per-class auto-scaling."""

    def test_tall_height(self):
        """Test that a tall character spans 0..700."""
        normalizer = CoordinateNormalizer()
        strokes = [stroke((100, 100), (200, 400), (300, 100))]

        transform = normalizer.normalize("A", strokes, auto_scale=True)

        assert transform.scale == pytest.approx(700 / 300)
        assert transform(200, 400)[1] == pytest.approx(0.0)
        assert transform(100, 100)[1] == pytest.approx(700.0)
        assert transformed_height(transform, strokes) == pytest.approx(700.0, abs=1)

    def test_short_height(self):
        """Test that a short character spans 0..500."""
        strokes = [stroke((100, 200), (150, 400))]
        transform = CoordinateNormalizer().normalize("o", strokes, auto_scale=True)
        assert transformed_height(transform, strokes) == pytest.approx(500.0)

    def test_descender_top_anchor(self):
        """Test that a descender's top lands at 500 and its bottom at -250."""
        strokes = [stroke((100, 100), (120, 400))]
        transform = CoordinateNormalizer().normalize("g", strokes, auto_scale=True)

        assert transform.char_class == CharacterClass.DESCENDER
        assert transform(100, 100)[1] == pytest.approx(500.0)
        assert transform(120, 400)[1] == pytest.approx(-250.0)

    def test_width_cap(self):
        """Test that width takes precedence over the target height."""
        strokes = [stroke((0, 100), (600, 200))]
        transform = CoordinateNormalizer().normalize("A", strokes, auto_scale=True)

        assert transform.scale == pytest.approx(800 / 600)
        assert transform(600, 100)[0] - transform(0, 100)[0] == pytest.approx(800.0)

    def test_default_class_capped(self):
        """Test that small symbols are not blown up past 1.5x manual scale."""
        normalizer = CoordinateNormalizer()
        strokes = [stroke((100, 100), (100, 120))]

        transform = normalizer.normalize("!", strokes, auto_scale=True)

        assert transform.scale == pytest.approx(normalizer.manual_scale * 1.5)

    def test_flat_stroke_has_finite_scale(self):
        """Test that a horizontal line does not produce an infinite scale."""
        strokes = [stroke((100, 300), (140, 300))]
        transform = CoordinateNormalizer().normalize("T", strokes, auto_scale=True)

        assert math.isfinite(transform.scale)
        # height floored to 10 gives 70, then the 800 width cap wins
        assert transform.scale == pytest.approx(800 / 40)

    def test_single_point_has_finite_scale(self):
        """Test that a point-like drawing still gets a finite scale."""
        strokes = [stroke((100, 300), (100, 300))]
        transform = CoordinateNormalizer().normalize("T", strokes, auto_scale=True)

        assert transform.scale == pytest.approx(70.0)
