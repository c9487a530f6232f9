"""Declarative Field Tags

Per-field annotations written as key:"value" struct tags:

    @dataclass
    class Account:
        UserID: Annotated[int, Tag('required:"true" description:"Unique identifier"')]
        Password: Annotated[str, Tag('required:"true" tags:"secret"')]
        Plan: str = field(default="", metadata={"jsonspec": 'default:"basic"'})

Recognised keys are `description`, `required`, `tags` and `default`.
Pairs are applied left to right, so a later key overrides an earlier one.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import ast
import re

from jsonspec.core.errors import (
    AppError,
    Ok,
    Result,
    default_not_supported,
    invalid_boolean,
    invalid_tag,
    invalid_tag_value,
    unknown_tag_key,
)
from jsonspec.coercion import PARSE_BOOL, PARSE_DATETIME, PARSE_FLOAT, PARSE_INT
from jsonspec.spec import Field, Type

# Dataclass field metadata key holding tag text
TAG_METADATA_KEY = "jsonspec"

# The first key:"value" pair of a tag, and whatever follows it
TAG_PATTERN = re.compile(r'([a-z]+):("[^"]+")(\s+.*)?', re.DOTALL)

DEFAULT_PARSERS = {
    Type.BOOLEAN: PARSE_BOOL,
    Type.INTEGER: PARSE_INT,
    Type.NUMBER: PARSE_FLOAT,
    Type.DATETIME: PARSE_DATETIME,
}


@dataclass(frozen=True, slots=True)
class Tag:
    """Marker carrying tag text inside typing.Annotated."""
    text: str


def parse_tag(field: Field, tag: str) -> Result[Field, AppError]:
    """Apply every key:"value" pair of `tag` to `field`, returning the updated field."""
    remaining = tag
    while remaining := remaining.strip():
        if not (match := TAG_PATTERN.fullmatch(remaining)):
            return invalid_tag(tag, origin="tags")
        key, quoted, remaining = match.group(1), match.group(2), match.group(3) or ""
        try:
            value = ast.literal_eval(quoted)
        except (SyntaxError, ValueError) as e:
            return invalid_tag_value(quoted, origin="tags", cause=e)
        match apply_tag(field, key, value):
            case Ok(updated):
                field = updated
            case failure:
                return failure
    return Ok(field)


def apply_tag(field: Field, key: str, value: str) -> Result[Field, AppError]:
    match key:
        case "description":
            return Ok(field.model_copy(update={"description": value}))
        case "required":
            if not PARSE_BOOL.can_coerce(value):
                return invalid_boolean(value, origin="tags")
            return Ok(field.model_copy(update={"required": PARSE_BOOL.parse(value)}))
        case "tags":
            return Ok(field.model_copy(update={"tags": tuple(value.split(","))}))
        case "default":
            return parse_default_value(field.type, value).map(
                lambda default: field.model_copy(update={"default": default})
            )
    return unknown_tag_key(key, origin="tags")


def parse_default_value(kind: Type, value: str) -> Result[Any, AppError]:
    """Coerce a default literal according to the field's type."""
    if kind is Type.STRING:
        return Ok(value)
    if (parser := DEFAULT_PARSERS.get(kind)) is None:
        # setting a default for an object or array is not supported
        return default_not_supported(kind.value, origin="tags")
    return parser.coerce(value)


def tag_text(metadata: Any) -> str:
    """Join the tag text carried by Annotated extras, in declaration order."""
    return " ".join(m.text for m in metadata if isinstance(m, Tag))
