"""Optional Values — tagged Present(value) | Absent variant with null-safety operations.

Invariants:
    - ABSENT is the only Absent instance; Present(None) is rejected
    - Presence never depends on the value: Present(0) is present and truthy
    - unwrap() never substitutes a default, it raises NullDereferenceError
    - let()/map() run their block only when present (safe call)
    - A block that returns a Maybe is not wrapped again: chained safe calls stay flat

Design Decisions:
    - Explicit variant types over bare None: absence is a value the type checker sees
    - Frozen dataclass for Present: immutable, equality by value, hashable
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from nullsafe.core.domain_types import NULL_TEXT
from nullsafe.core.errors import ErrorContext, NullDereferenceError

T = TypeVar("T")
U = TypeVar("U")


class Maybe(ABC, Generic[T]):
    """Either Present(value) or ABSENT."""

    @staticmethod
    def of(value: T | None) -> "Maybe[T]":
        """Lift a raw value: None becomes ABSENT, a Maybe is returned as is."""
        if value is None:
            return ABSENT
        if isinstance(value, Maybe):
            return value
        return Present(value)

    @abstractmethod
    def is_present(self) -> bool:
        ...

    def is_absent(self) -> bool:
        return not self.is_present()

    @abstractmethod
    def unwrap(
        self, label: str | None = None, context: ErrorContext | None = None,
    ) -> T:
        """Forced unwrap: the value, or NullDereferenceError when absent."""

    @abstractmethod
    def let(self, block: Callable[[T], U]) -> "Maybe[U]":
        """Safe call: run block(value) only when present."""

    def map(self, fn: Callable[[T], U]) -> "Maybe[U]":
        return self.let(fn)

    @abstractmethod
    def or_else(self, default: T) -> T:
        """Elvis: the value, or default when absent."""

    @abstractmethod
    def render(self) -> str:
        """String template rendering: 'null' when absent."""

    def render_required(
        self, label: str | None = None, context: ErrorContext | None = None,
    ) -> str:
        """Render via forced unwrap (fails when absent)."""
        return str(self.unwrap(label, context))

    def __bool__(self) -> bool:
        return self.is_present()


@dataclass(frozen=True)
class Present(Maybe[T]):
    value: T

    def __post_init__(self):
        if self.value is None:
            raise TypeError("Present requires a value, use ABSENT for None")

    def is_present(self) -> bool:
        return True

    def unwrap(self, label=None, context=None) -> T:
        return self.value

    def let(self, block):
        return Maybe.of(block(self.value))

    def or_else(self, default):
        return self.value

    def render(self) -> str:
        return str(self.value)


class Absent(Maybe[Any]):
    _instance: "Absent | None" = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_present(self) -> bool:
        return False

    def unwrap(self, label=None, context=None):
        raise NullDereferenceError(label, context)

    def let(self, block):
        return self

    def or_else(self, default):
        return default

    def render(self) -> str:
        return NULL_TEXT

    def __repr__(self) -> str:
        return "ABSENT"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Absent)

    def __hash__(self) -> int:
        return hash(Absent)


ABSENT = Absent()
