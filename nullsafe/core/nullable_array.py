"""Nullable Array — fixed-size sequence of optional integer slots.

Invariants:
    - Size is fixed at creation; a fresh array_of_nulls() has every slot ABSENT
    - Slot presence is independent per index
    - Valid indices are 0 <= index < size (no negative wrap-around)
    - Slots hold Maybe[int]; bool values are rejected
    - IntArray is the non-nullable counterpart: every slot starts at 0

Design Decisions:
    - slots()/render_lines() are generators: single-pass, lazy, in index order
    - set(index, None) stores ABSENT rather than a raw None
"""

from typing import Iterator

from nullsafe.core.domain_types import ARRAY_NAME, SlotIndex
from nullsafe.core.errors import (
    ErrorContext, InvalidArraySizeError, SlotIndexError, SlotTypeError,
)
from nullsafe.core.optional import ABSENT, Maybe, Present


def _check_size(size: int) -> None:
    if size < 0:
        raise InvalidArraySizeError(size)


class NullableArray:
    """Fixed-size array of Maybe[int] slots."""

    def __init__(self, size: int, name: str = ARRAY_NAME):
        _check_size(size)
        self.name = name
        self._slots: list[Maybe[int]] = [ABSENT] * size

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Maybe[int]]:
        return self.slots()

    def _check_index(self, index: int) -> SlotIndex:
        if not 0 <= index < len(self._slots):
            raise SlotIndexError(
                index, len(self._slots),
                ErrorContext(array_name=self.name, index=index),
            )
        return SlotIndex(index)

    def get(self, index: int) -> Maybe[int]:
        return self._slots[self._check_index(index)]

    def set(self, index: int, value: int | None) -> None:
        slot = self._check_index(index)
        if value is None:
            self._slots[slot] = ABSENT
            return
        if isinstance(value, bool) or not isinstance(value, int):
            raise SlotTypeError(
                value, ErrorContext(array_name=self.name, index=index),
            )
        self._slots[slot] = Present(value)

    def slots(self) -> Iterator[Maybe[int]]:
        """Lazy pass over the slots in index order."""
        for slot in self._slots:
            yield slot

    def render_lines(self) -> Iterator[str]:
        """Lazy rendering of each slot: 'null' when absent."""
        return (slot.render() for slot in self.slots())

    def label(self, index: int) -> str:
        """Source-style label for a slot, e.g. nullableInts[3]."""
        return f"{self.name}[{index}]"

    def render_required(self, index: int) -> str:
        """Render a slot via forced unwrap; absent slots raise NullDereferenceError."""
        return self.get(index).render_required(
            self.label(index),
            ErrorContext(array_name=self.name, index=index),
        )


class IntArray:
    """Non-nullable int array: slots default to 0, never absent."""

    def __init__(self, size: int):
        _check_size(size)
        self._values = [0] * size

    def __len__(self) -> int:
        return len(self._values)

    def get(self, index: int) -> int:
        if not 0 <= index < len(self._values):
            raise SlotIndexError(index, len(self._values))
        return self._values[index]

    def render_lines(self) -> Iterator[str]:
        return (str(v) for v in self._values)


def array_of_nulls(size: int, name: str = ARRAY_NAME) -> NullableArray:
    """New nullable array with every slot absent."""
    return NullableArray(size, name)


def int_array(size: int) -> IntArray:
    """New zero-initialised int array."""
    return IntArray(size)
