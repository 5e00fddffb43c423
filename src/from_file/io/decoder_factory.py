"""Choose the decoder for a file path from its extension."""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import cast

from ..exceptions import InvalidExtensionError
from .decoders import DecoderProtocol, JsonDecoder, YamlDecoder

logger = logging.getLogger(__name__)


class DecoderFactory:
    """Extension → decoder dispatch table."""

    # Order matters: first match wins.
    _DECODERS = (JsonDecoder, YamlDecoder)

    @classmethod
    def supported_exts(cls) -> frozenset[str]:
        exts: frozenset[str] = frozenset()
        for decoder in cls._DECODERS:
            exts |= decoder.supported_exts
        return exts

    @classmethod
    def resolve(cls, path: str) -> type[DecoderProtocol]:
        """
        Return the decoder registered for the extension of ``path``.

        Only the final path segment is inspected; the match is case-sensitive.

        Raises:
            InvalidExtensionError: If the extension is missing or unknown
        """
        suffix = PurePath(path).suffix
        for decoder in cls._DECODERS:
            if suffix in decoder.supported_exts:
                logger.debug("Using %s for %s", decoder.__name__, path)
                return cast(type[DecoderProtocol], decoder)

        logger.debug("No decoder for extension %r of %s", suffix, path)
        raise InvalidExtensionError(cls.supported_exts())
