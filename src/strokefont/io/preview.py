"""In-memory preview references.

A preview hands a freshly built font to a renderer without touching the
file system. Each PreviewHandle is revocable; a PreviewSession releases the
previous handle before issuing the next so that repeated refreshes do not
accumulate buffers.
"""

import base64

import structlog

from strokefont.exceptions import PreviewReleasedError

logger = structlog.get_logger(__name__)

FONT_MIME_TYPE = "font/ttf"


class PreviewHandle:
    """A revocable reference to a font buffer."""

    def __init__(self, buffer: bytes, mime_type: str = FONT_MIME_TYPE) -> None:
        self._buffer: bytes | None = buffer
        self.mime_type = mime_type

    @property
    def released(self) -> bool:
        """Check if the handle has been released."""
        return self._buffer is None

    @property
    def buffer(self) -> bytes:
        """The font bytes.

        Raises:
            PreviewReleasedError: If the handle has been released
        """
        if self._buffer is None:
            raise PreviewReleasedError()
        return self._buffer

    @property
    def data_url(self) -> str:
        """The font as a ``data:`` URL usable in an @font-face rule."""
        encoded = base64.b64encode(self.buffer).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    def release(self) -> None:
        """Drop the buffer. Releasing twice is a no-op."""
        if self._buffer is not None:
            logger.debug("Preview released", size=len(self._buffer))
        self._buffer = None

    def __enter__(self) -> "PreviewHandle":
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        self.release()


class PreviewSession:
    """Holds at most one live preview at a time.

    Example:
        with PreviewSession() as session:
            handle = session.refresh(buffer)
            render(handle.data_url)
    """

    def __init__(self) -> None:
        self._current: PreviewHandle | None = None

    @property
    def current(self) -> PreviewHandle | None:
        """The live preview, if any."""
        return self._current

    def refresh(self, buffer: bytes) -> PreviewHandle:
        """Release the previous preview and issue a new one."""
        self.release()
        self._current = PreviewHandle(buffer)
        return self._current

    def release(self) -> None:
        """Release the live preview."""
        if self._current is not None:
            self._current.release()
            self._current = None

    def __enter__(self) -> "PreviewSession":
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        self.release()
