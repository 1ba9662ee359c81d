"""Module entry point: `python -m nullsafe` runs the demo through the CLI."""

import sys

from nullsafe.cli import main

sys.exit(main())
