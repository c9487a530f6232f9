"""
Spec model and serialization tests.
"""
import copy
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Annotated

import pytest
from pydantic import ValidationError

from jsonspec import Field, Spec, Tag, Type, derive_schema


@dataclass
class Address:
    Street: Annotated[str, Tag('required:"true" description:"Street and number"')]
    Tags: Annotated[list[str], Tag('tags:"pii,address"')]


@dataclass
class Profile:
    Name: Annotated[str, Tag('default:"anonymous"')]
    Joined: Annotated[datetime, Tag('default:"2024-03-07T11:38:47Z"')]
    Score: Annotated[float, Tag('default:"3"')]
    Home: Address


PERSON_SPEC = Spec(
    type=Type.OBJECT,
    description="Object describing a person",
    fields={
        "first_name": Field(type=Type.STRING, description="First (given) name", required=True),
    },
)


def test_json_round_trip():
    assert Spec.from_json(PERSON_SPEC.to_json()) == PERSON_SPEC


def test_dict_round_trip():
    assert Spec.from_dict(PERSON_SPEC.to_dict()) == PERSON_SPEC


def test_derived_round_trip():
    spec = derive_schema(Profile).unwrap()
    assert Spec.from_json(spec.to_json()) == spec


def test_empty_members_omitted():
    assert Spec(type=Type.STRING).to_dict() == {"type": "string"}
    assert PERSON_SPEC.to_dict() == {
        "type": "object",
        "description": "Object describing a person",
        "fields": {
            "first_name": {"type": "string", "description": "First (given) name", "required": True},
        },
    }


def test_json_text():
    assert json.loads(derive_schema(list[Address]).unwrap().to_json()) == {
        "type": "array",
        "elements": {
            "type": "object",
            "fields": {
                "street": {"type": "string", "description": "Street and number", "required": True},
                "tags": {"type": "array", "elements": {"type": "string"}, "tags": ["pii", "address"]},
            },
        },
    }


def test_datetime_default_restored():
    field = Field(type=Type.DATETIME, default=datetime(2024, 3, 7, 11, 38, 47, tzinfo=timezone.utc))
    restored = Field.from_json(field.to_json())
    assert restored.default == field.default
    assert isinstance(restored.default, datetime)


def test_number_default_restored_as_float():
    restored = Field.from_dict({"type": "number", "default": 3})
    assert restored.default == 3.0
    assert isinstance(restored.default, float)


def test_tags_are_tuples():
    assert Field.from_dict({"type": "string", "tags": ["a", "b"]}).tags == ("a", "b")


def test_empty_fields_is_open():
    spec = Spec(type=Type.OBJECT, fields={})
    assert spec.fields is None
    assert spec == Spec(type=Type.OBJECT)
    assert spec.to_dict() == {"type": "object"}


def test_type_values():
    assert [t.value for t in Type] == ["boolean", "string", "integer", "number", "datetime", "object", "array"]
    assert str(Type.DATETIME) == "datetime"


def test_unknown_type_rejected():
    with pytest.raises(ValidationError):
        Spec.from_dict({"type": "null"})


def test_frozen():
    with pytest.raises(ValidationError):
        PERSON_SPEC.description = "changed"


def test_tag_number_default_round_trip():
    spec = Spec(type=Type.OBJECT, fields={"ratio": Field(type=Type.NUMBER, default=1e300)})
    assert Spec.from_json(spec.to_json()) == spec


def test_copies_keep_fields_read_only():
    spec = derive_schema(Address).unwrap()
    for copied in (copy.deepcopy(spec), spec.model_copy(deep=True)):
        assert copied == spec
        with pytest.raises(TypeError):
            copied.fields["street"] = Field(type=Type.INTEGER)
