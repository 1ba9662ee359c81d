"""Demo Schemas — public shape of a demo run over HTTP."""

from pydantic import BaseModel

from nullsafe.core.domain_types import DemoVariant, Locale


class DemoResponse(BaseModel):
    """Lines a caught-variant run printed, in order."""
    variant: DemoVariant
    locale: Locale
    lines: list[str]
    caught: bool
