"""Nullable Array Demo — tests for both variants of the demo run.

Tests cover:
    - CAUGHT prints 5 'null' lines then the pt-BR diagnostic
    - each run reports only its own lines, even on a reused demo or printer
    - a probe index outside the array raises ProbeIndexError
    - UNCHECKED prints 5 'null' lines then raises NullDereferenceError
    - argv is ignored
    - locale and size are honoured
"""

import pytest

from nullsafe.core.domain_types import DemoVariant, Locale
from nullsafe.core.errors import NullDereferenceError, ProbeIndexError
from nullsafe.services.demo_runner import NullableArrayDemo
from nullsafe.services.text_printer import BufferPrinter

EXPECTED_CAUGHT = [
    "null",
    "null",
    "null",
    "null",
    "null",
    "NullPointerException ao acessar nullableInts[3]",
]


def test_caught_variant_stdout(capsys):
    result = NullableArrayDemo().run()
    assert capsys.readouterr().out == "\n".join(EXPECTED_CAUGHT) + "\n"
    assert result.caught is True
    assert result.lines == EXPECTED_CAUGHT


def test_unchecked_variant_raises_after_five_lines(capsys):
    demo = NullableArrayDemo(variant=DemoVariant.UNCHECKED)
    with pytest.raises(NullDereferenceError) as exc_info:
        demo.run()
    assert capsys.readouterr().out == "null\n" * 5
    assert exc_info.value.context.index == 3
    assert exc_info.value.context.printed_lines == ["null"] * 5


def test_argv_is_ignored():
    printer = BufferPrinter()
    NullableArrayDemo(printer=printer).run(["--anything", "x"])
    assert printer.lines == EXPECTED_CAUGHT


def test_english_locale():
    result = NullableArrayDemo(printer=BufferPrinter(), locale=Locale.EN).run()
    assert result.lines[-1] == "NullPointerException accessing nullableInts[3]"


def test_custom_size():
    result = NullableArrayDemo(printer=BufferPrinter(), size=4).run()
    assert result.lines[:4] == ["null"] * 4
    assert len(result.lines) == 5


def test_caught_logs_warning(caplog):
    with caplog.at_level("WARNING", logger="nullsafe.services.demo_runner"):
        NullableArrayDemo(printer=BufferPrinter()).run()
    assert any(
        getattr(r, "error_code", None) == "NULL_DEREFERENCE" for r in caplog.records
    )


def test_probe_outside_array_is_configuration_fault():
    demo = NullableArrayDemo(printer=BufferPrinter(), size=2)
    with pytest.raises(ProbeIndexError) as exc_info:
        demo.run()
    assert exc_info.value.http_status == 500
    assert exc_info.value.context.printed_lines == ["null", "null"]


def test_same_demo_run_twice_reports_six_lines_each():
    demo = NullableArrayDemo(printer=BufferPrinter())
    first = demo.run()
    second = demo.run()
    assert first.lines == EXPECTED_CAUGHT
    assert second.lines == EXPECTED_CAUGHT


def test_shared_printer_keeps_full_history():
    printer = BufferPrinter()
    NullableArrayDemo(printer=printer).run()
    result = NullableArrayDemo(printer=printer, locale=Locale.EN).run()
    assert result.lines[-1] == "NullPointerException accessing nullableInts[3]"
    assert len(result.lines) == 6
    assert len(printer.lines) == 12


def test_unchecked_after_caught_reports_only_its_own_lines():
    printer = BufferPrinter()
    NullableArrayDemo(printer=printer).run()
    with pytest.raises(NullDereferenceError) as exc_info:
        NullableArrayDemo(printer=printer, variant=DemoVariant.UNCHECKED).run()
    assert exc_info.value.context.printed_lines == ["null"] * 5
