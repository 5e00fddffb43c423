"""Extract the filesystem path from an input reference like ``file:conf/app.yaml``."""

from __future__ import annotations

import logging
from typing import Final

from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)

SCHEME_DELIMITER: Final[str] = ":"


def resolve_path(reference: str) -> str:
    """
    Return the path portion of a ``[scheme:]path`` reference.

    The scheme, when present, is discarded without being checked.

    Args:
        reference: Reference such as ``conf/app.yaml`` or ``file:conf/app.yaml``

    Returns:
        The path segment

    Raises:
        InvalidInputError: If the reference holds more than one delimiter
    """
    segments = reference.split(SCHEME_DELIMITER)

    if len(segments) == 1:
        return segments[0]
    if len(segments) == 2:
        logger.debug("Discarding scheme %r from %r", segments[0], reference)
        return segments[1]

    logger.debug("Rejecting input reference with %d segments", len(segments))
    raise InvalidInputError()


# Name used by the FromFile capability.
get_file_path = resolve_path
