"""Language Strings — centralized locale-specific text for the demo diagnostics.

Invariants:
    - All strings are pure data (no IO, no computation beyond formatting)
    - Covers every locale in the Locale enum
    - PT_BR text is the default diagnostic line

Design Decisions:
    - Templates keyed by Locale over inline f-strings at call sites: one place to translate
"""

from nullsafe.core.domain_types import Locale


_DEREFERENCE_MESSAGE: dict[Locale, str] = {
    Locale.PT_BR: "NullPointerException ao acessar {label}",
    Locale.EN: "NullPointerException accessing {label}",
}


def get_dereference_message(locale: Locale, array_name: str, index: int) -> str:
    """Diagnostic line printed when a forced unwrap on a slot is caught."""
    template = _DEREFERENCE_MESSAGE.get(locale, _DEREFERENCE_MESSAGE[Locale.PT_BR])
    return template.format(label=f"{array_name}[{index}]")
