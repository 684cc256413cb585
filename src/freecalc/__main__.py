"""Entry point for ``python -m freecalc``."""

import sys

from freecalc.cli import main

sys.exit(main())
