"""Unit tests for the FromFile mixin and the derive_from_file decorator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest
from pydantic import BaseModel

from from_file.capability import FromFile, Loadable, derive_from_file
from from_file.exceptions import InvalidExtensionError, InvalidInputError

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"


class MixinPerson(FromFile, BaseModel):
    name: str


@derive_from_file
class DerivedPerson(BaseModel):
    name: str


@derive_from_file
@dataclass
class DerivedRecord:
    name: str
    age: int = 0


@derive_from_file
class OverridingPerson(BaseModel):
    name: str

    @classmethod
    def from_json_string(cls, text: str) -> "OverridingPerson":
        return cls(name="overridden")


class Plain:
    pass


@pytest.fixture(autouse=True)
def in_fixtures(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(FIXTURES)


@pytest.mark.parametrize("cls", [MixinPerson, DerivedPerson, DerivedRecord])
class TestCapability:
    """Mixin and decorator behave identically."""

    def test_from_file_json(self, cls: type) -> None:
        person = cls.from_file("person.json")
        assert isinstance(person, cls)
        assert person.name == "Shane"

    def test_from_file_yaml_with_scheme(self, cls: type) -> None:
        assert cls.from_file("file:person.yaml").name == "Shane"

    def test_from_json_file(self, cls: type) -> None:
        assert cls.from_json_file("person.json").name == "Shane"

    def test_from_yml_file(self, cls: type) -> None:
        assert cls.from_yml_file("person.yaml").name == "Shane"

    def test_from_strings(self, cls: type) -> None:
        assert cls.from_json_string('{"name": "Shane"}').name == "Shane"
        assert cls.from_yaml_string("name: Shane").name == "Shane"

    def test_get_file_path(self, cls: type) -> None:
        assert cls.get_file_path("file:conf/app.yaml") == "conf/app.yaml"
        with pytest.raises(InvalidInputError):
            cls.get_file_path("a:b:c")

    def test_errors_propagate(self, cls: type) -> None:
        with pytest.raises(InvalidExtensionError):
            cls.from_file("person.txt")

    def test_is_from_file(self, cls: type) -> None:
        assert issubclass(cls, FromFile)
        assert isinstance(cls, Loadable)


def test_dataclass_keeps_extra_fields() -> None:
    record = DerivedRecord.from_file("person_with_age.yml")
    assert record == DerivedRecord(name="Shane", age=42)


def test_decorator_keeps_own_methods() -> None:
    assert OverridingPerson.from_json_string("{}").name == "overridden"
    assert OverridingPerson.from_yaml_string("name: Shane").name == "Shane"


def test_decorator_returns_same_class() -> None:
    class Thing(BaseModel):
        name: str

    assert derive_from_file(Thing) is Thing


def test_plain_class_is_not_loadable() -> None:
    assert not isinstance(Plain, Loadable)
    assert not issubclass(Plain, FromFile)
