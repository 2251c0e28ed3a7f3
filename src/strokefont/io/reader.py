"""Stroke snapshot reader.

A snapshot is the editor's persisted drawing state: a JSON object mapping
each character to its strokes in drawing order, for example::

    {"A": [{"points": [{"x": 120, "y": 400}, {"x": 300, "y": 80}],
            "type": "normal", "width": 8}]}
"""

import json
from pathlib import Path
from typing import Any

from strokefont.domain import GlyphData, Stroke
from strokefont.exceptions import InvalidCharacterError, SnapshotError, SnapshotLoadError


def parse_snapshot(data: Any) -> GlyphData:
    """Convert decoded snapshot JSON into glyph data.

    Args:
        data: Decoded JSON

    Returns:
        Mapping of character to strokes, in snapshot order

    Raises:
        InvalidCharacterError: If a key is not exactly one code point
        SnapshotError: If the structure is invalid
    """
    if not isinstance(data, dict):
        raise SnapshotError("Snapshot must be an object mapping characters to strokes")

    glyph_data: GlyphData = {}
    for char, strokes in data.items():
        if not isinstance(char, str) or len(char) != 1:
            raise InvalidCharacterError(str(char))
        if not isinstance(strokes, list):
            raise SnapshotError(f"Strokes of {char!r} must be a list")
        for stroke in strokes:
            if not isinstance(stroke, dict):
                raise SnapshotError(f"Invalid stroke for {char!r}: expected an object")
        try:
            glyph_data[char] = [Stroke.from_dict(s) for s in strokes]
        except (KeyError, TypeError, ValueError) as e:
            raise SnapshotError(f"Invalid stroke for {char!r}: {e}") from e

    return glyph_data


def load_snapshot(path: Path) -> GlyphData:
    """Load a stroke snapshot file.

    Raises:
        SnapshotLoadError: If the file is missing, unreadable or invalid
    """
    if not path.exists():
        raise SnapshotLoadError(str(path), "file not found")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SnapshotLoadError(str(path), str(e)) from e

    try:
        return parse_snapshot(data)
    except SnapshotError as e:
        raise SnapshotLoadError(str(path), str(e)) from e


def dump_snapshot(glyph_data: GlyphData) -> dict[str, Any]:
    """Convert glyph data back to the snapshot JSON shape."""
    return {char: [s.to_dict() for s in strokes] for char, strokes in glyph_data.items()}
