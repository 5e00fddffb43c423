"""
exceptions.py

Closed, typed exception hierarchy raised by the from_file loading pipeline.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import ClassVar, Iterable


class ErrorKind(str, Enum):
    """The failure kinds a load can end in."""

    INVALID_INPUT = "InvalidInput"
    INVALID_EXTENSION = "InvalidExtension"
    FILE_OPEN = "FileOpen"
    FILE_READ = "FileRead"
    SERDE_ERROR = "SerdeError"


# --------------------------------------------------------------------------- #
#                              Base hierarchy                                 #
# --------------------------------------------------------------------------- #


class FromFileError(Exception):
    """
    Root of all errors raised while loading a typed value from a file.

    Every subclass pins a ``kind`` and renders a fixed, kind-specific
    message prefixed with that kind.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str) -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.kind.value}] {super().__str__()}"


class InvalidInputError(FromFileError):
    """Raised when an input reference is not ``path`` or ``scheme:path``."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self) -> None:
        super().__init__("expected 'path' or 'scheme:path'")


class InvalidExtensionError(FromFileError):
    """Raised when the path has no extension or an unsupported one."""

    kind = ErrorKind.INVALID_EXTENSION

    def __init__(self, supported: Iterable[str]) -> None:
        super().__init__(f"expected one of {', '.join(sorted(supported))}")


class FileOpenError(FromFileError):
    """
    Raised by the I/O layer when the file cannot be opened.

    Examples
    --------
    * File does not exist
    * Permission denied
    * Path is a directory
    """

    kind = ErrorKind.FILE_OPEN

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"couldn't open '{path}'")


class FileReadError(FromFileError):
    """Raised when an opened file cannot be read as text."""

    kind = ErrorKind.FILE_READ

    def __init__(self) -> None:
        super().__init__("couldn't read file contents")


class SerdeError(FromFileError):
    """
    Raised when a decoder rejects the content.

    This wraps:
        * JSON or YAML syntax errors
        * Pydantic validation failures against the target type

    ``message`` is the decoder's own diagnostic, kept verbatim.
    """

    kind = ErrorKind.SERDE_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
