"""Shared fixtures for strokefont tests."""

import math

import pytest

from strokefont.config import StrokeFontSettings
from strokefont.core.geometry import PathopsGeometry
from strokefont.domain import PenType, Point, Stroke


def sample_polyline(vertices, count):
    """Sample ``count`` points evenly by arc length along a polyline."""
    lengths = [math.dist(vertices[i], vertices[i + 1]) for i in range(len(vertices) - 1)]
    total = sum(lengths)
    points = []
    for k in range(count):
        target = total * k / (count - 1)
        for i, length in enumerate(lengths):
            if target <= length or i == len(lengths) - 1:
                t = min(target / length, 1.0) if length else 0.0
                (x0, y0), (x1, y1) = vertices[i], vertices[i + 1]
                points.append(Point(x0 + (x1 - x0) * t, y0 + (y1 - y0) * t))
                break
            target -= length
    return points


def sample_circle(cx, cy, radius, count):
    """A closed circular centerline; the last point repeats the first."""
    points = [
        Point(
            cx + radius * math.cos(2 * math.pi * k / count),
            cy + radius * math.sin(2 * math.pi * k / count),
        )
        for k in range(count)
    ]
    return [*points, points[0]]


@pytest.fixture
def geometry():
    """Real skia-pathops geometry backend."""
    return PathopsGeometry()


@pytest.fixture
def settings():
    """Default settings."""
    return StrokeFontSettings()


@pytest.fixture
def polyline():
    """Factory sampling points along a polyline."""
    return sample_polyline


@pytest.fixture
def circle():
    """Factory building a closed circular centerline."""
    return sample_circle


@pytest.fixture
def capital_a_stroke():
    """A single 50-point normal stroke shaped like a capital A."""
    vertices = [(150, 500), (300, 100), (450, 500), (375, 300), (225, 300)]
    return Stroke(points=sample_polyline(vertices, 50), pen_type=PenType.NORMAL, width=8)


@pytest.fixture
def ring_stroke():
    """A single closed circular stroke, drawn like a lowercase o."""
    return Stroke(points=sample_circle(300, 300, 100, 48), pen_type=PenType.NORMAL, width=8)
