"""Filesystem and decoder collaborators of the loader."""

from .decoder_factory import DecoderFactory
from .decoders import DecoderProtocol, JsonDecoder, YamlDecoder
from .file_reader import DEFAULT_ENCODING, read_file

__all__ = [
    "DEFAULT_ENCODING",
    "DecoderFactory",
    "DecoderProtocol",
    "JsonDecoder",
    "YamlDecoder",
    "read_file",
]
