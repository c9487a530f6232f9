"""JSON Schema Export

Render a Spec as a JSON Schema (draft 2020-12) document so other tooling
(OpenAPI, editors, other languages) can consume a derived schema.

Features:
- datetime as string with format date-time
- required lists from required fields
- defaults carried over, datetimes as RFC 3339 text
- tags exposed under the x-tags extension
"""
from __future__ import annotations

from datetime import datetime
from typing import Any
import json

from .coercion import format_rfc3339
from .spec import Field, Spec, Type

DRAFT_2020_12 = "https://json-schema.org/draft/2020-12/schema"


class JSONSchemaGenerator:
    """Generate JSON Schema documents from Specs."""

    TYPE_MAP: dict[Type, dict[str, Any]] = {
        Type.BOOLEAN: {"type": "boolean"},
        Type.STRING: {"type": "string"},
        Type.INTEGER: {"type": "integer"},
        Type.NUMBER: {"type": "number"},
        Type.DATETIME: {"type": "string", "format": "date-time"},
        Type.OBJECT: {"type": "object"},
        Type.ARRAY: {"type": "array"},
    }

    def __init__(self, include_dialect: bool = True):
        self.include_dialect = include_dialect

    def generate(self, spec: Spec, *, title: str | None = None) -> dict[str, Any]:
        """Generate the root schema document."""
        schema: dict[str, Any] = {}
        if self.include_dialect:
            schema["$schema"] = DRAFT_2020_12
        if title:
            schema["title"] = title
        schema.update(self._node(spec))
        return schema

    def generate_json(self, spec: Spec, *, title: str | None = None, indent: int = 2) -> str:
        return json.dumps(self.generate(spec, title=title), indent=indent)

    def _node(self, spec: Spec) -> dict[str, Any]:
        node = dict(self.TYPE_MAP[spec.type])
        if spec.description:
            node["description"] = spec.description

        if isinstance(spec, Field):
            if spec.default is not None:
                node["default"] = self._default(spec.default)
            if spec.tags:
                node["x-tags"] = list(spec.tags)

        if spec.type is Type.OBJECT and spec.fields:
            node["properties"] = {name: self._node(field) for name, field in spec.fields.items()}
            if required := [name for name, field in spec.fields.items() if field.required]:
                node["required"] = required
        elif spec.type is Type.ARRAY and spec.elements is not None:
            node["items"] = self._node(spec.elements)
        return node

    @staticmethod
    def _default(value: Any) -> Any:
        return format_rfc3339(value) if isinstance(value, datetime) else value


def to_json_schema(spec: Spec, *, title: str | None = None) -> dict[str, Any]:
    """Convenience function using a default generator."""
    return JSONSchemaGenerator().generate(spec, title=title)
