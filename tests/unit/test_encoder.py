"""Unit tests for the outline encoder."""

from strokefont.core.encoder import encode_contour, encode_contours, encode_merge_result
from strokefont.domain import Contour, MergeResult, Node, Point, Ribbon


def triangle(dx=0.0):
    return Contour.from_points([Point(0 + dx, 0), Point(50 + dx, 100), Point(100 + dx, 0)])


class TestEncodeContour:
    """Tests for encode_contour."""

    def test_polygon(self):
        """Test a straight-edged loop: move, one line per edge, close."""
        commands = encode_contour(triangle())

        assert commands == [
            ("moveTo", ((0, 0),)),
            ("lineTo", ((50, 100),)),
            ("lineTo", ((100, 0),)),
            ("lineTo", ((0, 0),)),
            ("closePath", ()),
        ]

    def test_rounding(self):
        """Test that coordinates are rounded to whole units."""
        contour = Contour.from_points([Point(10.4, 10.5), Point(20.6, 0.2)])
        commands = encode_contour(contour)
        assert commands[0] == ("moveTo", ((10, 11),))
        assert commands[1] == ("lineTo", ((21, 0),))

    def test_curve(self):
        """Test that handles produce a cubic edge."""
        contour = Contour(
            nodes=[
                Node(Point(0, 0), handle_out=Point(0, 40)),
                Node(Point(100, 0), handle_in=Point(0, 40)),
            ]
        )

        commands = encode_contour(contour)

        assert commands[1] == ("curveTo", ((0, 40), (100, 40), (100, 0)))
        assert commands[2] == ("lineTo", ((0, 0),))

    def test_empty_loop(self):
        """Test that a loop without nodes emits nothing."""
        assert encode_contour(Contour(nodes=[])) == []


class TestEncodeMany:
    """Tests for multi-loop encoding."""

    def test_one_subpath_per_loop(self):
        """Test that every loop becomes its own closed sub-path."""
        commands = encode_contours([triangle(), triangle(200)])
        assert [c for c, _ in commands].count("moveTo") == 2
        assert [c for c, _ in commands].count("closePath") == 2

    def test_unmerged_ribbons_encoded_independently(self):
        """Test that a fallback result encodes every ribbon loop."""
        result = MergeResult.unmerged(
            [Ribbon(contours=[triangle()]), Ribbon(contours=[triangle(50)], resolved=False)]
        )
        commands = encode_merge_result(result)
        assert [c for c, _ in commands].count("moveTo") == 2
        assert commands[5] == ("moveTo", ((50, 0),))
