"""
Statistical utilities for laboratory samples.

This subpackage provides numerical routines over one-dimensional samples.
All functions operate on iterables of primitive numbers; no unit or
chemistry-specific logic is included.

Modules:
    descriptive:
        Count, mean, median, population and Bessel-corrected dispersion,
        standard error, and type-7 interpolated percentiles.

    intervals:
        Student-t confidence interval for the sample mean (scipy when
        available, normal approximation at 95% otherwise).

Design Principle:
    This subpackage has no dependencies on chemistry/, units, or plotting.
    It provides pure numerical utilities that can be independently tested.
"""

from .descriptive import (
    PERCENTILES,
    SampleStatistics,
    describe,
    extract_sample,
    median,
    percentile,
)
from .intervals import mean_confidence_interval

__all__ = [
    "PERCENTILES",
    "SampleStatistics",
    "describe",
    "extract_sample",
    "median",
    "percentile",
    "mean_confidence_interval",
]
