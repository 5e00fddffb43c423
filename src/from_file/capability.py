"""
The FromFile capability.

A type opts in either by inheriting the ``FromFile`` mixin::

    class Person(FromFile, BaseModel):
        name: str

or by decorating it with ``derive_from_file``::

    @derive_from_file
    @dataclass
    class Person:
        name: str

Both give ``Person.from_file("conf/person.yaml")`` and friends; the
behaviour is identical.
"""

from __future__ import annotations

from abc import ABC
from typing import Final, Protocol, Self, TypeVar, runtime_checkable

from . import loader
from .io.file_reader import DEFAULT_ENCODING
from .path_resolver import resolve_path

C = TypeVar("C", bound=type)

_CAPABILITY_METHODS: Final[tuple[str, ...]] = (
    "from_file",
    "from_json_file",
    "from_yml_file",
    "from_json_string",
    "from_yaml_string",
    "get_file_path",
)


@runtime_checkable
class Loadable(Protocol):
    """Anything exposing ``from_file``."""

    @classmethod
    def from_file(cls, reference: str, *, encoding: str = ...) -> Self: ...


class FromFile(ABC):
    """
    Mixin that lets a schema-bearing type load itself from a file.

    The extension picks the format: ``.json`` for JSON, ``.yml``/``.yaml``
    for YAML. References may carry a scheme, e.g. ``file:conf/app.yaml``.
    """

    @classmethod
    def from_file(cls, reference: str, *, encoding: str = DEFAULT_ENCODING) -> Self:
        return loader.load_file(cls, reference, encoding=encoding)

    @classmethod
    def from_json_file(
        cls, reference: str, *, encoding: str = DEFAULT_ENCODING
    ) -> Self:
        return loader.load_json(cls, reference, encoding=encoding)

    @classmethod
    def from_yml_file(
        cls, reference: str, *, encoding: str = DEFAULT_ENCODING
    ) -> Self:
        return loader.load_yaml(cls, reference, encoding=encoding)

    @classmethod
    def from_json_string(cls, text: str) -> Self:
        return loader.from_json_string(cls, text)

    @classmethod
    def from_yaml_string(cls, text: str) -> Self:
        return loader.from_yaml_string(cls, text)

    @staticmethod
    def get_file_path(reference: str) -> str:
        return resolve_path(reference)


def derive_from_file(cls: C) -> C:
    """
    Class decorator that attaches the ``FromFile`` methods to ``cls``.

    Methods ``cls`` defines itself are left alone. The class is also
    registered as a virtual subclass of ``FromFile``.
    """
    for name in _CAPABILITY_METHODS:
        if name not in vars(cls):
            setattr(cls, name, vars(FromFile)[name])
    FromFile.register(cls)
    return cls
