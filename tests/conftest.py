"""Pytest configuration for labcalc: repository-root imports and the Agg backend."""

import os
import sys

import matplotlib

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

matplotlib.use("Agg")
