"""
Package façade – load strongly-typed values from JSON / YAML files.

    >>> from pydantic import BaseModel
    >>> from from_file import FromFile, load_file
    >>> class Person(FromFile, BaseModel):
    ...     name: str
    >>> Person.from_file("tests/fixtures/person.json")  # doctest: +SKIP
    Person(name='Shane')
    >>> load_file(Person, "file:tests/fixtures/person.yaml")  # doctest: +SKIP
    Person(name='Shane')
"""

from .capability import FromFile, Loadable, derive_from_file
from .exceptions import (
    ErrorKind,
    FileOpenError,
    FileReadError,
    FromFileError,
    InvalidExtensionError,
    InvalidInputError,
    SerdeError,
)
from .io.file_reader import read_file
from .loader import (
    from_json_string,
    from_yaml_string,
    load_file,
    load_json,
    load_yaml,
)
from .path_resolver import get_file_path, resolve_path

__all__ = [
    "ErrorKind",
    "FileOpenError",
    "FileReadError",
    "FromFile",
    "FromFileError",
    "InvalidExtensionError",
    "InvalidInputError",
    "Loadable",
    "SerdeError",
    "derive_from_file",
    "from_json_string",
    "from_yaml_string",
    "get_file_path",
    "load_file",
    "load_json",
    "load_yaml",
    "read_file",
    "resolve_path",
]
