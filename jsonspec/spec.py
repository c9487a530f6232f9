"""Schema Type Model

A Spec describes the shape of one JSON value; a Field is a Spec attached
to a named member of an object, with per-field metadata. Both are frozen
pydantic models so a derived tree can be shared freely and serialized to
and from its JSON representation:

    {
        "type": "object",
        "description": "Object describing a person",
        "fields": {
            "first_name": {"type": "string", "required": true, "tags": ["pii"]}
        }
    }

Empty descriptions, absent fields/elements, false `required`, absent
defaults and empty tag lists are omitted.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from jsonspec.core.errors import AppError, Result


class Type(str, Enum):
    """The closed set of value types a Spec can describe."""
    BOOLEAN = "boolean"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    DATETIME = "datetime"
    OBJECT = "object"
    ARRAY = "array"

    def __str__(self) -> str:
        return self.value


class FieldMap(dict):
    """Read-only mapping of field names to Fields.

    Derived trees are cached and shared, so a Spec's fields cannot be
    changed in place. Build a new Spec instead.
    """

    def _read_only(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError(f"{type(self).__name__} is read-only")

    __setitem__ = __delitem__ = __ior__ = _read_only
    clear = pop = popitem = setdefault = update = _read_only

    def __reduce__(self):
        return type(self), (dict(self),)


class Spec(BaseModel):
    """Shape of a JSON value. It can be used to validate data.

    `fields` is only meaningful for OBJECT and `elements` only for ARRAY.
    None in either means an open schema: any object (or array) is accepted
    without looking inside it. An empty `fields` mapping is normalised to
    None, so both spellings describe the same open schema. A non-empty
    mapping is stored as a read-only FieldMap.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        use_enum_values=False,
    )

    type: Type
    description: str = ""
    fields: dict[str, Field] | None = None
    elements: Spec | None = None

    @field_validator("fields")
    @classmethod
    def _open_when_empty(cls, v: dict[str, Field] | None) -> FieldMap | None:
        return FieldMap(v) if v else None

    def validate(self, value: Any) -> Result[None, AppError]:
        """Return Err if `value` (an already decoded JSON tree) doesn't match this Spec."""
        from .validator import validate

        return validate(self, value)

    def validate_json(self, data: bytes | str) -> Result[None, AppError]:
        """Decode `data` as JSON, then validate it."""
        from .validator import validate_json

        return validate_json(self, data)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the schema representation, omitting empty members."""
        return self.model_dump(mode="json", exclude_defaults=True)

    def to_json(self, *, indent: int | None = None) -> str:
        return self.model_dump_json(exclude_defaults=True, indent=indent)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Spec:
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, data: bytes | str) -> Spec:
        return cls.model_validate_json(data)


class Field(Spec):
    """One field in a JSON object: a Spec plus per-field metadata."""

    # Required is true if the field has to be set for the object to be valid.
    required: bool = False

    # Default is loaded when the field is absent or null.
    default: Any = None

    # Tags is a list of custom tags, carried through for downstream consumers.
    tags: tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _restore_default(cls, data: Any) -> Any:
        """Give a default read back from JSON its native type again."""
        if not isinstance(data, dict) or data.get("default") is None:
            return data
        default, kind = data["default"], data.get("type")
        if kind in (Type.DATETIME, Type.DATETIME.value) and isinstance(default, str):
            from .coercion import PARSE_DATETIME

            if (parsed := PARSE_DATETIME.coerce(default)).is_ok():
                return {**data, "default": parsed.unwrap()}
        if kind in (Type.NUMBER, Type.NUMBER.value) and isinstance(default, int) and not isinstance(default, bool):
            return {**data, "default": float(default)}
        return data


Spec.model_rebuild()
Field.model_rebuild()
