"""Demo Route — runs the nullable array demo into an in-memory printer.

Invariants:
    - Each request builds a fresh array; nothing shared between requests
    - CAUGHT variant → 200 with the printed lines
    - UNCHECKED variant → NullDereferenceError reaches the global handler
      (500 envelope carrying the slot lines printed before the fault)
    - Probe index outside the configured array → ProbeIndexError (500)
    - Query parameters default to the configured variant and locale
"""

from fastapi import APIRouter

from nullsafe.config import get_settings
from nullsafe.core.domain_types import DemoVariant, Locale
from nullsafe.schemas.demo import DemoResponse
from nullsafe.services.demo_runner import NullableArrayDemo
from nullsafe.services.text_printer import BufferPrinter

router = APIRouter(prefix="/api/v1/demo", tags=["demo"])


@router.get("", response_model=DemoResponse)
def run_demo(
    variant: DemoVariant | None = None,
    locale: Locale | None = None,
):
    settings = get_settings()
    variant = variant or settings.variant
    locale = locale or settings.locale
    demo = NullableArrayDemo(
        printer=BufferPrinter(),
        size=settings.array_size,
        probe_index=settings.probe_index,
        variant=variant,
        locale=locale,
    )
    result = demo.run()
    return DemoResponse(
        variant=variant,
        locale=locale,
        lines=result.lines,
        caught=result.caught,
    )
