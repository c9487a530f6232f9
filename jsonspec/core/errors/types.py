"""Monadic Error Handling Types

Result/Either types for deterministic, composable error propagation.
Schema derivation, tag parsing, decoding and validation all return a
Result instead of raising, so callers decide where failures stop.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Numbered error taxonomy; the thousands digit is the category.

    E1xxx: schema derivation
    E2xxx: decoding and validation
    E3xxx: declarative tags
    E9xxx: broken internal contracts
    """
    E1000_SCHEMA_GENERIC = 1000
    E1001_UNSUPPORTED_TYPE = 1001
    E1002_RECURSIVE_TYPE = 1002

    E2000_VALIDATION_GENERIC = 2000
    E2001_REQUIRED_FIELD_MISSING = 2001
    E2004_INVALID_TYPE = 2004
    E2012_INVALID_DATE = 2012
    E2021_INVALID_JSON = 2021

    E3000_TAG_GENERIC = 3000
    E3001_INVALID_TAG = 3001
    E3002_INVALID_TAG_VALUE = 3002
    E3003_UNKNOWN_TAG_KEY = 3003
    E3010_INVALID_BOOLEAN = 3010
    E3011_INVALID_DEFAULT = 3011
    E3012_DEFAULT_NOT_SUPPORTED = 3012

    E9000_INTERNAL_GENERIC = 9000
    E9003_CONTRACT_VIOLATION = 9003

    @property
    def category(self) -> str:
        return {1: "schema", 2: "validation", 3: "tag"}.get(self.value // 1000, "internal")


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where and when an error was created."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""


@dataclass(frozen=True, slots=True)
class AppError:
    """A failure from any stage of the engine.

    `message` is the human-readable compatibility surface. For validation
    failures it already carries the path ("customers: element 0: name is
    required"); `metadata["path"]` holds the same path as keys and indices.
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    @property
    def path(self) -> list[str | int]:
        return list(self.metadata.get("path", []))

    def with_metadata(self, **kwargs) -> AppError:
        return replace(self, metadata={**self.metadata, **kwargs})

    def within(self, segment: str | int, label: str) -> AppError:
        """The same failure seen from one level up: `label: message`, path grown by `segment`."""
        return replace(
            self,
            message=f"{label}: {self.message}",
            metadata={**self.metadata, "path": [segment, *self.path]},
        )

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message} (correlation_id={self.context.correlation_id})"


class AppErrorException(Exception):
    """Raised when an Err is unwrapped, or when the loader is given input
    its schema rules out."""

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(error.message)


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> Result[U, AppError]:
        return Ok(f(self.value))

    def and_then(self, f: Callable[[T], Result[U, AppError]]) -> Result[U, AppError]:
        return f(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result. map and and_then pass it through untouched."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise AppErrorException(self.error)

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        return self  # type: ignore

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return self  # type: ignore


Result = Union[Ok[T], Err[E]]
