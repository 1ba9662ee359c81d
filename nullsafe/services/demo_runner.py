"""Nullable Array Demo — allocate, print every slot, then force-unwrap an absent slot.

Invariants:
    - Slots are printed lazily, in index order, before the forced unwrap
    - The forced unwrap of an absent slot always raises NullDereferenceError
    - UNCHECKED: the error propagates, nothing printed after the slot lines
    - CAUGHT: the error is caught, one diagnostic line printed
    - DemoResult.lines holds only the lines of its own run, even when a printer is reused
    - A probe index outside the array raises ProbeIndexError (a configuration fault)

Design Decisions:
    - Returns DemoResult instead of exiting: CLI and HTTP route share one code path
    - A present probe slot prints its value in both variants
"""

import logging
from dataclasses import dataclass, field

from nullsafe.core.domain_types import (
    ARRAY_NAME, DEFAULT_ARRAY_SIZE, DEFAULT_PROBE_INDEX, DemoVariant, Locale,
)
from nullsafe.core.errors import (
    ErrorContext, NullDereferenceError, ProbeIndexError, SlotIndexError,
)
from nullsafe.core.language_strings import get_dereference_message
from nullsafe.core.nullable_array import NullableArray, array_of_nulls
from nullsafe.services.text_printer import TextPrinter

logger = logging.getLogger(__name__)


@dataclass
class DemoResult:
    lines: list[str] = field(default_factory=list)
    caught: bool = False


class NullableArrayDemo:
    """Straight-line nullable array demo."""

    def __init__(
        self,
        printer: TextPrinter | None = None,
        size: int = DEFAULT_ARRAY_SIZE,
        probe_index: int = DEFAULT_PROBE_INDEX,
        variant: DemoVariant = DemoVariant.CAUGHT,
        locale: Locale = Locale.PT_BR,
    ):
        self.printer = printer or TextPrinter()
        self.size = size
        self.probe_index = probe_index
        self.variant = variant
        self.locale = locale

    def run(self, argv: list[str] | None = None) -> DemoResult:
        """Run the demo. argv is accepted and ignored."""
        logger.info(
            "Demo started",
            extra={"variant": self.variant.value, "locale": self.locale.value},
        )
        start = len(self.printer.lines)
        nullable_ints = array_of_nulls(self.size, ARRAY_NAME)
        self._print_slots(nullable_ints)

        try:
            self.printer.print_text(self._render_probe(nullable_ints, start))
        except NullDereferenceError as e:
            if self.variant == DemoVariant.UNCHECKED:
                e.context.printed_lines = self.printer.lines[start:]
                raise
            logger.warning(
                f"Caught {e.message}",
                extra={"error_code": e.code, "index": self.probe_index},
            )
            self.printer.print_text(get_dereference_message(
                self.locale, nullable_ints.name, self.probe_index,
            ))
            return self._finish(start, caught=True)
        return self._finish(start, caught=False)

    def _print_slots(self, nullable_ints: NullableArray) -> None:
        for index, text in enumerate(nullable_ints.render_lines()):
            logger.debug("Printing slot", extra={"index": index})
            self.printer.print_text(text)

    def _render_probe(self, nullable_ints: NullableArray, start: int) -> str:
        try:
            return nullable_ints.render_required(self.probe_index)
        except SlotIndexError as e:
            raise ProbeIndexError(
                self.probe_index, len(nullable_ints),
                ErrorContext(
                    array_name=nullable_ints.name, index=self.probe_index,
                    printed_lines=self.printer.lines[start:],
                ),
            ) from e

    def _finish(self, start: int, caught: bool) -> DemoResult:
        logger.info("Demo finished", extra={"variant": self.variant.value})
        return DemoResult(lines=self.printer.lines[start:], caught=caught)
