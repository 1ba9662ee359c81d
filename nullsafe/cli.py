"""Command-Line Entry Point — runs the nullable array demo on stdout.

Invariants:
    - Command-line arguments are accepted and ignored
    - CAUGHT variant returns exit code 0 after the diagnostic line
    - UNCHECKED variant re-raises NullDereferenceError (interpreter exits non-zero)

Design Decisions:
    - Settings and logging resolved here, not in the demo: the demo stays testable with plain args
"""

import logging
import sys

from nullsafe.config import get_settings
from nullsafe.core.errors import NullDereferenceError
from nullsafe.infrastructure.observability import setup_logging
from nullsafe.services.demo_runner import NullableArrayDemo

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    demo = NullableArrayDemo(
        size=settings.array_size,
        probe_index=settings.probe_index,
        variant=settings.variant,
        locale=settings.locale,
    )
    try:
        result = demo.run(argv if argv is not None else sys.argv[1:])
    except NullDereferenceError as e:
        logger.error(
            f"Unrecovered {e.message}",
            extra={"error_code": e.code, "index": e.context.index},
        )
        raise
    logger.info("Demo printed %d lines", len(result.lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
