#!/usr/bin/env python3
"""
Main script for running laboratory calculations from the command line.
"""

# Pipeline overview:
# 1) Parse the operation name and key=value fields.
# 2) Route the request through labcalc.engine.evaluate, which returns either
#    a result record or a typed error (never a partial result).
# 3) Print a one-line summary or JSON, optionally with a confidence interval
#    for the mean and a distribution figure for statistics requests.

import logging
import os
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr),
        logging.FileHandler("labcalc.log", mode="w"),
    ],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from labcalc.cli import main


if __name__ == "__main__":
    sys.exit(main())
