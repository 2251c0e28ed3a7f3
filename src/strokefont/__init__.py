"""StrokeFont - Synthesize installable outline fonts from hand-drawn strokes.

StrokeFont takes the pen strokes drawn for each character of a repertoire,
turns every stroke into a filled ribbon, merges the ribbons of a character
into one clean outline and assembles all outlines into a TrueType font.

Example:
    $ strokefont build strokes.json --auto-scale

This will create MyCustomFont-Regular.ttf in the current directory.
"""

__version__ = "0.1.0"
__author__ = "Font Maker"

__all__ = ["__author__", "__version__"]
