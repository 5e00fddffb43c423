"""
Loader – resolve, read and decode a file into a caller-chosen type.

Responsibilities
----------------
1.   Strip the optional scheme from the input reference.
2.   Pick a decoder from the file extension before touching the disk.
3.   Read the whole file as text.
4.   Decode it and validate the result into the target type with pydantic.

Every stage raises a FromFileError subclass on failure; nothing is retried
and nothing is cached between calls.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from .exceptions import SerdeError
from .io.decoder_factory import DecoderFactory
from .io.decoders import DecoderProtocol, JsonDecoder, YamlDecoder
from .io.file_reader import DEFAULT_ENCODING, read_file
from .path_resolver import resolve_path

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _materialize(target: type[T], data: Any) -> T:
    try:
        return TypeAdapter(target).validate_python(data)
    except ValidationError as exc:
        raise SerdeError(str(exc)) from exc


def _decode_into(target: type[T], text: str, decoder: type[DecoderProtocol]) -> T:
    data = decoder.decode(text)
    value = _materialize(target, data)
    logger.debug("Decoded %s with %s", _type_name(target), decoder.__name__)
    return value


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", repr(target))


def from_json_string(target: type[T], text: str) -> T:
    """Parse a JSON document directly into ``target``."""
    return _decode_into(target, text, JsonDecoder)


def from_yaml_string(target: type[T], text: str) -> T:
    """Parse a YAML document directly into ``target``."""
    return _decode_into(target, text, YamlDecoder)


def load_json(
    target: type[T], reference: str, *, encoding: str = DEFAULT_ENCODING
) -> T:
    """
    Read ``reference`` (``path`` or ``scheme:path``) and decode it as JSON.

    The extension is not checked; the caller has already chosen the format.
    """
    path = resolve_path(reference)
    return from_json_string(target, read_file(path, encoding=encoding))


def load_yaml(
    target: type[T], reference: str, *, encoding: str = DEFAULT_ENCODING
) -> T:
    """
    Read ``reference`` (``path`` or ``scheme:path``) and decode it as YAML.

    The extension is not checked; the caller has already chosen the format.
    """
    path = resolve_path(reference)
    return from_yaml_string(target, read_file(path, encoding=encoding))


def load_file(
    target: type[T], reference: str, *, encoding: str = DEFAULT_ENCODING
) -> T:
    """
    Load a value of type ``target`` from a ``.json``, ``.yml`` or ``.yaml`` file.

    Parameters
    ----------
    target
        Any type pydantic can validate into (BaseModel, dataclass, TypedDict…).
    reference
        File reference, either ``conf/app.yaml`` or ``file:conf/app.yaml``.
        Relative paths are resolved against the working directory.
    encoding
        Text encoding of the file (default UTF-8).

    Raises
    ------
    InvalidInputError
        The reference holds more than one ``:``.
    InvalidExtensionError
        The extension is missing or not json/yml/yaml; no I/O is attempted.
    FileOpenError
        The file cannot be opened.
    FileReadError
        The file cannot be read as text.
    SerdeError
        The content is malformed or does not match ``target``.
    """
    path = resolve_path(reference)
    decoder = DecoderFactory.resolve(path)
    logger.debug("Loading %s from %s", _type_name(target), path)
    return _decode_into(target, read_file(path, encoding=encoding), decoder)
