"""Outline encoder emitting path commands for the font compiler.

Each boundary loop becomes one closed sub-path: a move to its first node,
one straight or cubic edge per pair of consecutive nodes (wrapping back to
the first node), then a close. Coordinates are rounded to whole design
units.
"""

from fontTools.misc.roundTools import otRound

from strokefont.domain import Contour, MergeResult, PathCommand, Point


def _round_point(point: Point) -> tuple[int, int]:
    return (otRound(point.x), otRound(point.y))


def encode_contour(contour: Contour) -> list[PathCommand]:
    """Encode one boundary loop.

    An edge is straight when the start node has no outgoing handle and the
    end node has no incoming handle; otherwise it is a cubic curve whose
    control points are the nodes offset by those handles.

    Returns:
        Commands in RecordingPen form, empty for a loop without nodes
    """
    if not contour.nodes:
        return []

    commands: list[PathCommand] = [("moveTo", (_round_point(contour.nodes[0].point),))]
    for segment in contour.segments():
        end = _round_point(segment.end.point)
        if segment.is_straight:
            commands.append(("lineTo", (end,)))
        else:
            c1, c2 = segment.control_points()
            commands.append(("curveTo", (_round_point(c1), _round_point(c2), end)))
    commands.append(("closePath", ()))
    return commands


def encode_contours(contours: list[Contour]) -> list[PathCommand]:
    """Encode several loops into one path."""
    commands: list[PathCommand] = []
    for contour in contours:
        commands.extend(encode_contour(contour))
    return commands


def encode_merge_result(result: MergeResult) -> list[PathCommand]:
    """Encode a merged outline, or each unmerged ribbon independently."""
    return encode_contours(result.loops())
