"""Allow ``python -m labcalc <operation> key=value ...``."""

import logging
import sys

from .cli import main

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

raise SystemExit(main())
