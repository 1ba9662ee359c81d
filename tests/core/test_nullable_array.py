"""Nullable Array — tests for fixed-size optional slots.

Tests cover:
    - array_of_nulls(5) has every slot absent, never 0
    - render_lines yields exactly 5 'null' lines, lazily and in order
    - set/get keep presence independent per index
    - bounds, size and type validation
    - render_required on an absent slot raises NullDereferenceError
    - int_array is zero-initialised
"""

import types

import pytest

from nullsafe.core.errors import (
    InvalidArraySizeError, NullDereferenceError, SlotIndexError, SlotTypeError,
)
from nullsafe.core.nullable_array import array_of_nulls, int_array
from nullsafe.core.optional import ABSENT, Present


def test_fresh_array_all_absent():
    arr = array_of_nulls(5)
    assert len(arr) == 5
    for i in range(5):
        assert arr.get(i) is ABSENT


def test_render_lines_are_null():
    assert list(array_of_nulls(5).render_lines()) == ["null"] * 5


def test_render_lines_is_lazy_generator():
    lines = array_of_nulls(5).render_lines()
    assert isinstance(lines, types.GeneratorType)
    assert next(lines) == "null"


def test_slots_single_pass():
    slots = array_of_nulls(2).slots()
    assert list(slots) == [ABSENT, ABSENT]
    assert list(slots) == []


def test_set_is_independent_per_index():
    arr = array_of_nulls(5)
    arr.set(1, 7)
    assert arr.get(1) == Present(7)
    assert arr.get(0) is ABSENT
    assert arr.get(2) is ABSENT
    assert list(arr.render_lines()) == ["null", "7", "null", "null", "null"]


def test_set_none_clears_slot():
    arr = array_of_nulls(3)
    arr.set(0, 0)
    arr.set(0, None)
    assert arr.get(0) is ABSENT


def test_set_rejects_bool_and_str():
    arr = array_of_nulls(3)
    with pytest.raises(SlotTypeError):
        arr.set(0, True)
    with pytest.raises(SlotTypeError):
        arr.set(0, "1")


@pytest.mark.parametrize("index", [-1, 5, 99])
def test_get_out_of_bounds(index):
    with pytest.raises(SlotIndexError) as exc_info:
        array_of_nulls(5).get(index)
    assert exc_info.value.code == "SLOT_INDEX_OUT_OF_BOUNDS"
    assert exc_info.value.http_status == 400


def test_negative_size_rejected():
    with pytest.raises(InvalidArraySizeError):
        array_of_nulls(-1)


def test_zero_size_renders_nothing():
    assert list(array_of_nulls(0).render_lines()) == []


def test_render_required_absent_slot_raises():
    arr = array_of_nulls(5)
    with pytest.raises(NullDereferenceError) as exc_info:
        arr.render_required(3)
    assert exc_info.value.context.array_name == "nullableInts"
    assert exc_info.value.context.index == 3
    assert "nullableInts[3]" in exc_info.value.message


def test_render_required_present_slot():
    arr = array_of_nulls(5)
    arr.set(3, 9)
    assert arr.render_required(3) == "9"


def test_label():
    assert array_of_nulls(5).label(3) == "nullableInts[3]"


def test_int_array_defaults_to_zero():
    arr = int_array(5)
    assert arr.get(4) == 0
    assert list(arr.render_lines()) == ["0"] * 5


def test_int_array_bounds():
    with pytest.raises(SlotIndexError):
        int_array(2).get(2)
