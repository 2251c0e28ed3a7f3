"""I/O layer for strokefont.

This module handles everything that crosses the engine boundary: reading
stroke snapshots, serializing fonts with fonttools, writing font files and
issuing in-memory previews.

Key classes:
- FontToolsCompiler: Font-encoding capability
- FontWriter: Download path, writes <Family>-<Style>.ttf
- PreviewSession: Preview path with revocable handles
"""

from strokefont.io.compiler import FontCompiler, FontToolsCompiler
from strokefont.io.preview import PreviewHandle, PreviewSession
from strokefont.io.reader import dump_snapshot, load_snapshot, parse_snapshot
from strokefont.io.writer import FontWriter, font_filename

__all__ = [
    "FontCompiler",
    "FontToolsCompiler",
    "FontWriter",
    "PreviewHandle",
    "PreviewSession",
    "dump_snapshot",
    "font_filename",
    "load_snapshot",
    "parse_snapshot",
]
