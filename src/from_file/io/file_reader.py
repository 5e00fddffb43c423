"""Read a whole file from disk as text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

from ..exceptions import FileOpenError, FileReadError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING: Final[str] = "utf-8"


def read_file(path: str, *, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Open ``path`` relative to the working directory and return its contents.

    Args:
        path: Resolved file path (no scheme prefix)
        encoding: Text encoding used to decode the file

    Returns:
        Full file content as a string

    Raises:
        FileOpenError: If the file cannot be opened; carries the absolute path
        FileReadError: If reading or decoding the content fails
    """
    try:
        handle = open(path, encoding=encoding)
    except (OSError, ValueError) as exc:
        # ValueError: embedded NUL byte in the path
        attempted = Path.cwd() / path
        logger.debug("Cannot open %s: %s", attempted, exc)
        raise FileOpenError(attempted) from exc

    with handle:
        try:
            contents = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Cannot read %s with encoding %s: %s", path, encoding, exc)
            raise FileReadError() from exc

    logger.debug("Read %d characters from %s", len(contents), path)
    return contents
