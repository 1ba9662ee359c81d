"""Error Hierarchy — typed, categorized exceptions for all NullSafe failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - NullDereferenceError is the only fault the demo itself produces
    - Container misuse errors (400-level) are distinct from the dereference fault
    - A bad probe index from settings is a server fault (ProbeIndexError, 500), not a client one
    - to_response() produces the REST envelope

Design Decisions:
    - Single hierarchy with NullSafeError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    NULL_SAFETY = "null_safety"
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    array_name: str | None = None
    index: int | None = None
    debug_info: dict[str, Any] | None = None
    printed_lines: list[str] | None = None   # demo output produced before the fault


class NullSafeError(Exception):
    """Base exception for all NullSafe errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "array_name": self.context.array_name,
                    "index": self.context.index,
                },
            }
        }


# ─── Null Safety (the demo fault) ───────────────────────────────

class NullDereferenceError(NullSafeError):
    """An absent value was used as though it were present."""
    def __init__(self, label: str | None = None, context: ErrorContext | None = None):
        target = label or "value"
        super().__init__(
            f"Null dereference: {target} is absent",
            "NULL_DEREFERENCE", ErrorCategory.NULL_SAFETY,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.label = label


# ─── Demo Configuration (500-level) ─────────────────────────────

class ProbeIndexError(NullSafeError):
    """Configured probe index does not address a slot of the demo array."""
    def __init__(self, index: int, size: int, context: ErrorContext | None = None):
        super().__init__(
            f"Probe index {index} out of bounds for demo array of length {size}",
            "PROBE_INDEX_OUT_OF_BOUNDS", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.index = index
        self.size = size


# ─── Container Misuse (400-level) ───────────────────────────────

class SlotIndexError(NullSafeError):
    """Slot index outside [0, size)."""
    def __init__(self, index: int, size: int, context: ErrorContext | None = None):
        super().__init__(
            f"Index {index} out of bounds for length {size}",
            "SLOT_INDEX_OUT_OF_BOUNDS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.index = index
        self.size = size


class InvalidArraySizeError(NullSafeError):
    """Array size must be zero or positive."""
    def __init__(self, size: int, context: ErrorContext | None = None):
        super().__init__(
            f"Array size must be >= 0, got {size}",
            "INVALID_ARRAY_SIZE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.size = size


class SlotTypeError(NullSafeError):
    """Only int or None may be stored in a slot."""
    def __init__(self, value: Any, context: ErrorContext | None = None):
        super().__init__(
            f"Slot accepts int or None, got {type(value).__name__}",
            "SLOT_TYPE_MISMATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
