"""Exceptions raised by the health and workout readers."""

from pathlib import Path


class ReaderError(Exception):
    """Base class for file-level reader failures."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class ReadError(ReaderError):
    """Raised when a data file cannot be opened or read."""

    pass


class ParseError(ReaderError):
    """Raised when a data file is readable but not valid in its format."""

    pass
