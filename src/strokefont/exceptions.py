"""Exception hierarchy for StrokeFont."""


class StrokeFontError(Exception):
    """Base exception for all StrokeFont errors."""

    pass


class CapabilityUnavailableError(StrokeFontError):
    """A required capability (geometry or font compiler) is not ready."""

    def __init__(self, capability: str, reason: str = "not ready") -> None:
        self.capability = capability
        self.reason = reason
        super().__init__(f"Capability '{capability}' unavailable: {reason}")


class GeometryError(StrokeFontError):
    """Errors raised by the geometry capability."""

    pass


class SelfUnionError(GeometryError):
    """Self-intersections of a ribbon could not be resolved."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Self-union failed: {reason}")


class UnionError(GeometryError):
    """Boolean union of two shapes failed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Union failed: {reason}")


class FontEncodingError(StrokeFontError):
    """The font could not be serialized."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Font encoding failed: {reason}")


class SnapshotError(StrokeFontError):
    """Errors related to stroke snapshot input."""

    pass


class SnapshotLoadError(SnapshotError):
    """Error loading a stroke snapshot file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load snapshot '{path}': {reason}")


class InvalidCharacterError(SnapshotError):
    """Snapshot key is not exactly one code point."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Invalid character key {key!r}: expected a single code point")


class FontSaveError(StrokeFontError):
    """Error saving a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")


class PreviewReleasedError(StrokeFontError):
    """A preview reference was used after it was released."""

    def __init__(self) -> None:
        super().__init__("Preview has been released")
