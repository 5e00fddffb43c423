"""Concrete decoders that turn JSON / YAML text into plain Python data."""

from __future__ import annotations

import json
import logging
from typing import Any, ClassVar, Final, NoReturn, Protocol, runtime_checkable

from ruamel.yaml import YAML
from ruamel.yaml.constructor import SafeConstructor
from ruamel.yaml.error import YAMLError

from ..exceptions import SerdeError

logger = logging.getLogger(__name__)

YAML_EXTS: Final[frozenset[str]] = frozenset({".yaml", ".yml"})
JSON_EXTS: Final[frozenset[str]] = frozenset({".json"})


@runtime_checkable
class DecoderProtocol(Protocol):
    """Required signature for every concrete decoder."""

    supported_exts: ClassVar[frozenset[str]]

    @staticmethod
    def decode(text: str) -> Any: ...


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not valid JSON")


class JsonDecoder:
    """Strict JSON: ``NaN`` and ``Infinity`` literals are refused."""

    supported_exts: ClassVar[frozenset[str]] = JSON_EXTS

    @staticmethod
    def decode(text: str) -> Any:
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except ValueError as exc:
            # json.JSONDecodeError is a ValueError subclass
            raise SerdeError(str(exc)) from exc


class _TextTimestampConstructor(SafeConstructor):
    """YAML 1.2 core schema has no timestamps: dates stay text."""


_TextTimestampConstructor.add_constructor(
    "tag:yaml.org,2002:timestamp", SafeConstructor.construct_yaml_str
)


class YamlDecoder:
    """Safe loader, YAML 1.2."""

    supported_exts: ClassVar[frozenset[str]] = YAML_EXTS

    @staticmethod
    def decode(text: str) -> Any:
        # YAML instances keep parser state, so one per call
        parser = YAML(typ="safe", pure=True)
        parser.Constructor = _TextTimestampConstructor
        try:
            return parser.load(text)
        except YAMLError as exc:
            raise SerdeError(str(exc)) from exc
