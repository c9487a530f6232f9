"""Strict Literal Coercion

Coercion rules used for tag defaults, datetime validation and datetime
loading. Every rule is strict: no whitespace trimming, no alternative
spellings. A rule reports failure through a Result, never by raising.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Generic, TypeVar
import math
import re

from jsonspec.core.errors import AppError, Ok, Result, invalid_default

T = TypeVar("T")
S = TypeVar("S")

# Zero value of the datetime type: 0001-01-01T00:00:00Z
ZERO_DATETIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, slots=True)
class CoercionRule(ABC, Generic[S, T]):
    """Base class for coercion rules.

    Each rule defines the type it coerces to, a feasibility check, and the
    coercion itself.
    """

    @property
    @abstractmethod
    def target_type(self) -> type[T]:
        """Type this rule coerces to."""

    @property
    @abstractmethod
    def kind(self) -> str:
        """Name used in error messages."""

    @abstractmethod
    def parse(self, value: str) -> T:
        """Parse value, raising ValueError when it is not acceptable."""

    def can_coerce(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        try:
            self.parse(value)
            return True
        except ValueError:
            return False

    def coerce(self, value: Any) -> Result[T, AppError]:
        """Coerce value to target type. Returns Result."""
        if not isinstance(value, str):
            return invalid_default(self.kind, repr(value), origin="coercion")
        try:
            return Ok(self.parse(value))
        except ValueError as e:
            return invalid_default(self.kind, value, origin="coercion", cause=e)

    def __call__(self, value: Any) -> Result[T, AppError]:
        return self.coerce(value)


@dataclass(frozen=True, slots=True)
class StringToBool(CoercionRule[str, bool]):
    """Only the exact literals "true" and "false"."""

    @property
    def target_type(self) -> type[bool]:
        return bool

    @property
    def kind(self) -> str:
        return "boolean"

    def parse(self, value: str) -> bool:
        if value == "true":
            return True
        if value == "false":
            return False
        raise ValueError(f"not a boolean literal: {value!r}")


@dataclass(frozen=True, slots=True)
class StringToInt(CoercionRule[str, int]):
    """Base-10 integer with an optional sign."""
    PATTERN = re.compile(r"[+-]?[0-9]+")

    @property
    def target_type(self) -> type[int]:
        return int

    @property
    def kind(self) -> str:
        return "integer"

    def parse(self, value: str) -> int:
        if not self.PATTERN.fullmatch(value):
            raise ValueError(f"not a base-10 integer: {value!r}")
        return int(value)


@dataclass(frozen=True, slots=True)
class StringToFloat(CoercionRule[str, float]):
    """Finite floating-point literal; surrounding whitespace and digit separators are rejected."""

    @property
    def target_type(self) -> type[float]:
        return float

    @property
    def kind(self) -> str:
        return "number"

    def parse(self, value: str) -> float:
        if not value or value != value.strip() or "_" in value:
            raise ValueError(f"not a number: {value!r}")
        result = float(value)
        if not math.isfinite(result):
            raise ValueError(f"number out of range: {value!r}")
        return result


@dataclass(frozen=True, slots=True)
class RFC3339ToDateTime(CoercionRule[str, datetime]):
    """RFC 3339 timestamp with an uppercase T separator and a mandatory offset.

    Fractional seconds of any length are accepted and truncated to
    microseconds.
    """
    PATTERN = re.compile(
        r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
    )

    @property
    def target_type(self) -> type[datetime]:
        return datetime

    @property
    def kind(self) -> str:
        return "datetime"

    def parse(self, value: str) -> datetime:
        if not (m := self.PATTERN.fullmatch(value)):
            raise ValueError(f"not an RFC 3339 datetime: {value!r}")
        year, month, day, hour, minute, second = (int(g) for g in m.groups()[:6])
        fraction, offset = m.group(7), m.group(8)
        micros = int(fraction[:6].ljust(6, "0")) if fraction else 0
        return datetime(year, month, day, hour, minute, second, micros, tzinfo=self._tz(offset))

    @staticmethod
    def _tz(offset: str) -> timezone:
        if offset == "Z":
            return timezone.utc
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        if hours > 23 or minutes > 59:
            raise ValueError(f"offset out of range: {offset}")
        delta = timedelta(hours=hours, minutes=minutes)
        return timezone(-delta if offset[0] == "-" else delta)


def is_whole_number(value: float) -> bool:
    """True for finite floats without a fractional part."""
    return math.isfinite(value) and value.is_integer()


def format_rfc3339(value: datetime) -> str:
    """Render a datetime the way it is accepted back: UTC as 'Z', naive as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.isoformat()
    return text[:-6] + "Z" if text.endswith("+00:00") else text


PARSE_BOOL = StringToBool()
PARSE_INT = StringToInt()
PARSE_FLOAT = StringToFloat()
PARSE_DATETIME = RFC3339ToDateTime()
