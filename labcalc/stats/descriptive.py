"""Descriptive statistics for a one-dimensional numeric sample.

Percentiles use linear interpolation between order statistics (Hyndman and
Fan type 7, the default in R and in ``numpy.percentile``), written out
explicitly so results are reproducible bit for bit:

    rank = p / 100 * (n - 1)
    P(p) = x[lo] * (hi - rank) + x[hi] * (rank - lo)

with ``lo = floor(rank)`` and ``hi = ceil(rank)``; when ``rank`` is integral
the order statistic ``x[rank]`` is returned unchanged.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

import numpy as np

from ..errors import EmptySample

PERCENTILES: Tuple[int, ...] = (25, 50, 75, 90, 95, 99)


@dataclass(frozen=True)
class SampleStatistics:
    """Summary of one sample.

    ``std_dev``/``variance`` are population values (divide by n);
    ``sample_std_dev``/``sample_variance`` apply Bessel's correction and are
    0 for a single observation. ``sem`` is ``sample_std_dev / sqrt(n)``.
    """

    n: int
    mean: float
    median: float
    std_dev: float
    sample_std_dev: float
    sem: float
    variance: float
    sample_variance: float
    min: float
    max: float
    range: float
    sum: float
    p25: float
    p50: float
    p75: float
    p90: float
    p95: float
    p99: float
    iqr: float

    @property
    def percentiles(self) -> Dict[str, float]:
        return {f"p{p}": getattr(self, f"p{p}") for p in PERCENTILES}

    def as_dict(self) -> Dict[str, object]:
        return {
            "n": self.n,
            "mean": self.mean,
            "median": self.median,
            "std_dev": self.std_dev,
            "sample_std_dev": self.sample_std_dev,
            "sem": self.sem,
            "variance": self.variance,
            "sample_variance": self.sample_variance,
            "min": self.min,
            "max": self.max,
            "range": self.range,
            "sum": self.sum,
            **self.percentiles,
            "percentiles": self.percentiles,
            "iqr": self.iqr,
        }


def _is_real_number(value: object) -> bool:
    # bool is an int subclass but never a measurement
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def extract_sample(values: Iterable[object]) -> np.ndarray:
    """Keep the finite real numbers of ``values`` in their original order.

    Strings, ``None``, booleans, NaN and infinities are dropped silently,
    as are integers too large to represent as a float.
    """
    kept = []
    for v in values:
        if not _is_real_number(v):
            continue
        try:
            kept.append(float(v))
        except OverflowError:
            continue
    arr = np.asarray(kept, dtype=float)
    return arr[np.isfinite(arr)]


def percentile(sorted_values: np.ndarray, p: float) -> float:
    """Return the type-7 percentile ``p`` (0-100) of an ascending array."""
    n = len(sorted_values)
    if n == 0:
        raise EmptySample()
    rank = p / 100.0 * (n - 1)
    lower = math.floor(rank)
    upper = math.ceil(rank)
    if lower == upper:
        return float(sorted_values[lower])
    return float(
        sorted_values[lower] * (upper - rank) + sorted_values[upper] * (rank - lower)
    )


def median(sorted_values: np.ndarray) -> float:
    n = len(sorted_values)
    if n == 0:
        raise EmptySample()
    mid = n // 2
    if n % 2 == 0:
        return float((sorted_values[mid - 1] + sorted_values[mid]) / 2.0)
    return float(sorted_values[mid])


def describe(values: Iterable[object]) -> SampleStatistics:
    """Compute descriptive statistics over the usable values of a sample.

    Args:
        values (Iterable): Raw observations. Non-numeric and non-finite
            entries are ignored rather than rejected.

    Returns:
        SampleStatistics: Count, central tendency, dispersion, and the
        25/50/75/90/95/99th percentiles with the interquartile range.

    Raises:
        EmptySample: If no finite numeric value remains.
    """
    data = extract_sample(values)
    n = int(len(data))
    if n == 0:
        raise EmptySample()

    total = float(np.sum(data))
    mean = total / n
    ss = float(np.sum((data - mean) ** 2))

    variance = ss / n
    sample_variance = ss / (n - 1) if n > 1 else 0.0
    sample_std_dev = math.sqrt(sample_variance)

    ordered = np.sort(data, kind="stable")
    pct = {p: percentile(ordered, p) for p in PERCENTILES}
    lo = float(ordered[0])
    hi = float(ordered[-1])

    return SampleStatistics(
        n=n,
        mean=mean,
        median=median(ordered),
        std_dev=math.sqrt(variance),
        sample_std_dev=sample_std_dev,
        sem=sample_std_dev / math.sqrt(n),
        variance=variance,
        sample_variance=sample_variance,
        min=lo,
        max=hi,
        range=hi - lo,
        sum=total,
        p25=pct[25],
        p50=pct[50],
        p75=pct[75],
        p90=pct[90],
        p95=pct[95],
        p99=pct[99],
        iqr=pct[75] - pct[25],
    )
