"""Font writer for the download path.

Writes a serialized font to disk under the name ``<Family>-<Style>.ttf``.
"""

from pathlib import Path

from strokefont.config import FontMetadata
from strokefont.config.settings import DEFAULT_FAMILY_NAME, DEFAULT_STYLE_NAME
from strokefont.exceptions import FontSaveError


def font_filename(family: str | None, style: str | None) -> str:
    """Download filename for a font.

    All whitespace is removed from the family and style names; blank names
    fall back to the defaults.

    Examples:
        >>> font_filename("My Hand", "Semi Bold")
        'MyHand-SemiBold.ttf'
        >>> font_filename("", None)
        'MyCustomFont-Regular.ttf'
    """
    family_part = "".join((family or "").split()) or DEFAULT_FAMILY_NAME
    style_part = "".join((style or "").split()) or DEFAULT_STYLE_NAME
    return f"{family_part}-{style_part}.ttf"


class FontWriter:
    """Writes font buffers into an output directory.

    Example:
        writer = FontWriter(Path("dist"))
        path = writer.write(buffer, metadata)
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the font writer.

        Args:
            output_dir: Directory the fonts are written to (created if missing)
        """
        self._output_dir = output_dir

    def get_output_path(self, metadata: FontMetadata) -> Path:
        """Path the font for the given metadata will be written to."""
        return self._output_dir / font_filename(metadata.family_name, metadata.style_name)

    def write(self, buffer: bytes, metadata: FontMetadata) -> Path:
        """Write the font file.

        Raises:
            FontSaveError: If the file cannot be written
        """
        path = self.get_output_path(metadata)
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(buffer)
        except OSError as e:
            raise FontSaveError(str(path), str(e)) from e
        return path
