"""
JSON Schema export tests.
"""
import json
from dataclasses import dataclass
from datetime import datetime
from typing import Annotated

from jsonspec import JSONSchemaGenerator, Tag, derive_schema, to_json_schema
from jsonspec.json_schema import DRAFT_2020_12


@dataclass
class Event:
    Name: Annotated[str, Tag('required:"true" description:"Event name"')]
    StartsAt: Annotated[datetime, Tag('default:"2024-03-07T11:38:47Z"')]
    Attendees: Annotated[list[str], Tag('tags:"pii"')]
    Capacity: int


def test_document():
    schema = to_json_schema(derive_schema(Event).unwrap(), title="Event")
    assert schema == {
        "$schema": DRAFT_2020_12,
        "title": "Event",
        "type": "object",
        "properties": {
            "name": {"type": "string", "description": "Event name"},
            "starts_at": {"type": "string", "format": "date-time", "default": "2024-03-07T11:38:47Z"},
            "attendees": {"type": "array", "items": {"type": "string"}, "x-tags": ["pii"]},
            "capacity": {"type": "integer"},
        },
        "required": ["name"],
    }


def test_without_dialect():
    schema = JSONSchemaGenerator(include_dialect=False).generate(derive_schema(float).unwrap())
    assert schema == {"type": "number"}


def test_open_schemas():
    generator = JSONSchemaGenerator(include_dialect=False)
    assert generator.generate(derive_schema(dict).unwrap()) == {"type": "object"}
    assert generator.generate(derive_schema(list).unwrap()) == {"type": "array"}


def test_generate_json():
    text = JSONSchemaGenerator().generate_json(derive_schema(list[int]).unwrap())
    assert json.loads(text)["items"] == {"type": "integer"}
