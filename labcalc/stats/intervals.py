"""Confidence intervals for the mean of a sample.

The half-width is ``t_crit * sem`` with ``dof = n - 1``. When scipy is not
installed only the 95% level is supported, using the normal critical value.
"""

from __future__ import annotations

import importlib.util
import math
from typing import Dict, Iterable

from .descriptive import describe

HAVE_SCIPY = importlib.util.find_spec("scipy") is not None
if HAVE_SCIPY:
    from scipy.stats import t as student_t

DEFAULT_CONFIDENCE = 0.95
Z_95 = 1.959963984540054


def critical_value(confidence: float, dof: int) -> tuple[float, str]:
    """Return the two-sided critical value and the distribution used."""
    if not 0.0 < confidence < 1.0:
        raise ValueError(f"confidence must be in (0, 1), got {confidence}")
    if HAVE_SCIPY:
        return float(student_t.ppf(0.5 + confidence / 2.0, dof)), "student_t"
    if not math.isclose(confidence, DEFAULT_CONFIDENCE):
        raise ValueError("scipy is required for confidence levels other than 0.95")
    return Z_95, "normal"


def mean_confidence_interval(
    values: Iterable[object], confidence: float = DEFAULT_CONFIDENCE
) -> Dict[str, object]:
    """Two-sided confidence interval for the population mean.

    Args:
        values (Iterable): Raw observations; non-finite and non-numeric
            entries are ignored as in :func:`describe`.
        confidence (float, optional): Coverage level in (0, 1).
            Defaults to ``0.95``.

    Returns:
        dict: ``mean``, ``sem``, ``half_width``, ``lower``, ``upper``,
        ``dof``, ``confidence`` and ``method``. A single observation has no
        spread estimate, so its bounds are ``nan``.

    Raises:
        EmptySample: If the sample has no usable values.
        ValueError: If ``confidence`` is outside (0, 1).
    """
    if not 0.0 < confidence < 1.0:
        raise ValueError(f"confidence must be in (0, 1), got {confidence}")

    stats = describe(values)
    dof = stats.n - 1
    if dof < 1:
        half_width = math.nan
        method = "undefined"
    else:
        t_crit, method = critical_value(confidence, dof)
        half_width = t_crit * stats.sem

    return {
        "mean": stats.mean,
        "sem": stats.sem,
        "half_width": half_width,
        "lower": stats.mean - half_width,
        "upper": stats.mean + half_width,
        "dof": dof,
        "confidence": confidence,
        "method": method,
    }
