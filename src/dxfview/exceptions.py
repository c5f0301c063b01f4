"""Exception hierarchy for dxfview."""


class DxfViewError(Exception):
    """Base exception for all dxfview errors."""

    pass


class DocumentError(DxfViewError):
    """Errors related to loading drawing documents."""

    pass


class DocumentReadError(DocumentError):
    """Error reading a drawing file from disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read drawing '{path}': {reason}")


class DocumentEmptyError(DocumentError):
    """Drawing contains no renderable entities."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No entities found in '{path}'")


class EntityError(DxfViewError, ValueError):
    """Entity constructed with values that violate its invariants."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Invalid {kind}: {reason}")


class RenderError(DxfViewError):
    """Errors related to rendering or image output."""

    pass


class ImageSaveError(RenderError):
    """Error saving a rendered image."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save image '{path}': {reason}")
