"""Errors raised while reading AFM documents."""


class AfmFormatError(ValueError):
    """A document does not have the shape of an execute-AFM payload."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
