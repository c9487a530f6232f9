"""jsonspec: schemas derived from Python types

Derive a declarative schema from a dataclass or pydantic model, validate
decoded JSON against it with precise path-qualified messages, and load
validated data into typed values with defaults and name translation.

Key Features:
- Schemas (Spec/Field trees) derived from type hints, serializable to JSON
- Struct-tag style declarative field tags: description, required, tags, default
- Fail-fast validation with nested messages ("customers: element 0: name is required")
- Loading with default substitution and numeric/datetime coercion
- JSON Schema export
- Result-based error handling: nothing raises unless you unwrap

Usage:
    from dataclasses import dataclass
    from typing import Annotated
    from jsonspec import Tag, derive_schema, load_json

    @dataclass
    class Person:
        FirstName: Annotated[str, Tag('required:"true"')]
        LastName: Annotated[str, Tag('default:"Smith"')] = ""

    spec = derive_schema(Person).unwrap()
    spec.validate({"first_name": 123})   # Err: "first_name: expected a string"

    person = load_json(b'{"first_name": "Jane"}', Person).unwrap()
    # Person(FirstName='Jane', LastName='Smith')
"""

from .spec import Type, Spec, Field
from .names import translate_name
from .tags import Tag, TAG_METADATA_KEY, parse_tag, apply_tag, parse_default_value
from .generate import derive_schema, spec_for, schema_for
from .validator import validate, validate_json
from .loader import load, load_json, load_value, zero_value
from .json_schema import JSONSchemaGenerator, to_json_schema
from .coercion import ZERO_DATETIME

from .core.errors import Result, Ok, Err, AppError, AppErrorException, ErrorCode
from .core.logging import configure_logging, get_logger
from .core.config import settings, get_settings

__all__ = [
    # Type model
    "Type",
    "Spec",
    "Field",
    # Names and tags
    "translate_name",
    "Tag",
    "TAG_METADATA_KEY",
    "parse_tag",
    "apply_tag",
    "parse_default_value",
    # Derivation
    "derive_schema",
    "spec_for",
    "schema_for",
    # Validation
    "validate",
    "validate_json",
    # Loading
    "load",
    "load_json",
    "load_value",
    "zero_value",
    "ZERO_DATETIME",
    # Export
    "JSONSchemaGenerator",
    "to_json_schema",
    # Errors
    "Result",
    "Ok",
    "Err",
    "AppError",
    "AppErrorException",
    "ErrorCode",
    # Ambient
    "configure_logging",
    "get_logger",
    "settings",
    "get_settings",
]
