"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - SlotIndex wraps int — never a negative or Python-style wrapped index in domain logic
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and env vars without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

SlotIndex = NewType("SlotIndex", int)       # 0 <= index < size
ArraySize = NewType("ArraySize", int)       # >= 0


# ─── Constants ───────────────────────────────────────────────────

NULL_TEXT = "null"
ARRAY_NAME = "nullableInts"
DEFAULT_ARRAY_SIZE = ArraySize(5)
DEFAULT_PROBE_INDEX = SlotIndex(3)


# ─── Enums ───────────────────────────────────────────────────────

class DemoVariant(str, Enum):
    """How the final forced unwrap is handled."""
    UNCHECKED = "unchecked"   # fault propagates, process terminates
    CAUGHT = "caught"         # fault caught, diagnostic printed, exit 0


class Locale(str, Enum):
    """Locales for the diagnostic line printed by the caught variant."""
    PT_BR = "pt-BR"
    EN = "en"
