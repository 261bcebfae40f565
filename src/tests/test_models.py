"""Tests for record models and the kind registry."""

import json
from datetime import datetime, timezone
from typing import ClassVar

import pytest

from exceptions import InvalidKeyEncoding, MalformedPayload, UnknownObjectKind
from models import Animal, ObjectRecord, Person, decode_record, record_class, register_kind, registered_kinds
from models.person import ZERO_TIME


class TestRecordAccessors:
    def test_set_name(self):
        person = Person(name="alice")
        person.set_name("")
        assert person.get_name() == ""
        person.set_name("ab:c:")
        assert person.get_name() == "ab:c:"

    def test_set_name_rejects_delimiter(self):
        person = Person(name="alice")
        with pytest.raises(InvalidKeyEncoding):
            person.set_name("ab::c")
        assert person.get_name() == "alice"

    def test_id_accessors(self):
        animal = Animal(name="fluffy")
        assert animal.get_id() == ""
        animal.set_id("42")
        assert animal.get_id() == "42"

    def test_kind_is_stable_tag(self):
        assert Person().get_kind() == "Person"
        assert Animal().get_kind() == "Animal"
        assert "kind" not in Person().to_dict()

    def test_zero_values(self):
        person = Person()
        assert person.birthdate == ZERO_TIME
        assert person.last_name == ""


class TestWireFormat:
    def test_payload_is_field_tagged_json(self):
        person = Person(
            name="alice",
            id="1",
            last_name="Johnson",
            birthday="01-02-1990",
            birthdate=datetime(1989, 2, 1, tzinfo=timezone.utc),
        )
        data = json.loads(person.to_payload())
        assert data == {
            "id": "1",
            "name": "alice",
            "last_name": "Johnson",
            "birthday": "01-02-1990",
            "birthdate": "1989-02-01T00:00:00Z",
        }

    def test_animal_payload(self):
        animal = Animal(name="tiger", id="7", type="wild-animal", owner_id="alice")
        data = json.loads(animal.to_payload())
        assert data["type"] == "wild-animal"
        assert data["owner_id"] == "alice"


class TestRegistry:
    def test_known_kinds(self):
        assert {"Animal", "Person"} <= set(registered_kinds())
        assert record_class("Person") is Person
        assert record_class("Animal") is Animal

    def test_decode(self):
        payload = Animal(name="tiger", id="7", type="wild-animal").to_payload()
        obj = decode_record("Animal", payload)
        assert isinstance(obj, Animal)
        assert obj.type == "wild-animal"

    def test_decode_accepts_str(self):
        obj = decode_record("Person", '{"name": "bob", "id": "9"}')
        assert isinstance(obj, Person)
        assert obj.id == "9"

    def test_unknown_kind(self):
        with pytest.raises(UnknownObjectKind) as exc:
            decode_record("Dragon", b"{}")
        assert exc.value.kind == "Dragon"

    def test_malformed_payload_is_surfaced(self):
        with pytest.raises(MalformedPayload):
            decode_record("Person", b"{not json")

    def test_wrong_field_type(self):
        with pytest.raises(MalformedPayload):
            decode_record("Person", b'{"birthdate": "yesterday-ish"}')

    def test_duplicate_kind_rejected(self):
        with pytest.raises(ValueError):
            @register_kind
            class Impostor(ObjectRecord):
                kind: ClassVar[str] = "Person"

    def test_delimiter_in_kind_rejected(self):
        with pytest.raises(InvalidKeyEncoding):
            @register_kind
            class Broken(ObjectRecord):
                kind: ClassVar[str] = "a::b"

    def test_missing_kind_rejected(self):
        with pytest.raises(ValueError):
            @register_kind
            class Anonymous(ObjectRecord):
                pass
