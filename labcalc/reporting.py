"""Format calculation results for human-readable reports.

This module sits after the engine: it never changes a computed number, it
only decides how many digits to show and how to lay results out in text or
tables. Uncertainties are rounded to one significant figure (two when the
leading digit is 1) and the paired value is rounded to the same decimal
place.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd

from .errors import EmptySample
from .schema import SUMMARY_COLUMNS
from .stats.descriptive import describe


def round_uncertainty(uncertainty: float) -> tuple[float, int]:
    """Round an uncertainty to its reporting significant figures.

    Args:
        uncertainty (float): Absolute uncertainty value.

    Returns:
        tuple[float, int]: Rounded uncertainty and the ``ndigits`` argument
        to use with :func:`round` for the paired value (may be negative).

    Raises:
        ValueError: If uncertainty is non-finite or non-positive.
    """
    u = float(uncertainty)
    if not np.isfinite(u) or u <= 0:
        raise ValueError(f"Uncertainty must be finite and > 0, got {uncertainty!r}")

    exponent = math.floor(math.log10(abs(u)))
    leading = abs(u) / (10**exponent)
    sig_figs = 2 if 1.0 <= leading < 2.0 else 1
    ndigits = sig_figs - 1 - exponent
    rounded_u = round(abs(u), ndigits)

    # 0.95 -> 1.0 crosses into a new decade; keep the wider place value
    if rounded_u >= 10 ** (exponent + 1) and sig_figs == 1:
        ndigits -= 1
        rounded_u = round(abs(u), ndigits)
    return float(rounded_u), int(ndigits)


def _format_number(x: float, ndigits: int) -> str:
    xr = round(float(x), ndigits)
    if ndigits > 0:
        return f"{xr:.{ndigits}f}"
    return f"{xr:.0f}"


def format_value_with_uncertainty(
    value: float, uncertainty: float, unit: str = ""
) -> str:
    """Return ``"value ± uncertainty unit"`` with matched precision.

    Falls back to six significant figures for both numbers when the
    uncertainty is zero or not finite, since no precision can be implied.

    Example:
        >>> format_value_with_uncertainty(4.5678, 0.023, "M")
        '4.57 ± 0.02 M'
    """
    u = abs(float(uncertainty))
    if u == 0 or not math.isfinite(u):
        return f"{value:.6g} ± {uncertainty:.6g} {unit}".strip()

    ru, ndigits = round_uncertainty(u)
    return f"{_format_number(value, ndigits)} ± {_format_number(ru, ndigits)} {unit}".strip()


def summary_table(samples: Mapping[str, Sequence[Any]]) -> pd.DataFrame:
    """Build one summary row per named sample.

    Args:
        samples (Mapping[str, Sequence]): Sample name to raw observations.

    Returns:
        pandas.DataFrame: Columns from :data:`labcalc.schema.SUMMARY_COLUMNS`
        in insertion order of ``samples``. Samples without usable values are
        kept with ``n = 0`` and NaN statistics.
    """
    cols = SUMMARY_COLUMNS
    rows = []
    for name, values in samples.items():
        try:
            stats = describe(values)
        except EmptySample:
            rows.append(
                {
                    cols.sample: name,
                    cols.n: 0,
                    cols.mean: np.nan,
                    cols.sem: np.nan,
                    cols.sd: np.nan,
                    cols.median: np.nan,
                    cols.iqr: np.nan,
                    cols.min: np.nan,
                    cols.max: np.nan,
                    cols.reported: "",
                }
            )
            continue

        reported = (
            format_value_with_uncertainty(stats.mean, stats.sem) if stats.sem > 0 else ""
        )
        rows.append(
            {
                cols.sample: name,
                cols.n: stats.n,
                cols.mean: stats.mean,
                cols.sem: stats.sem,
                cols.sd: stats.sample_std_dev,
                cols.median: stats.median,
                cols.iqr: stats.iqr,
                cols.min: stats.min,
                cols.max: stats.max,
                cols.reported: reported,
            }
        )

    return pd.DataFrame.from_records(rows, columns=cols.ordered())


def format_result(operation: str, data: Mapping[str, Any]) -> str:
    """Render a successful engine result as a one-line summary."""
    if operation == "statistics":
        return (
            f"n={data['n']}, mean={data['mean']:.6g}, median={data['median']:.6g}, "
            f"SD={data['sample_std_dev']:.6g}, SEM={data['sem']:.6g}, "
            f"range=[{data['min']:.6g}, {data['max']:.6g}], IQR={data['iqr']:.6g}"
        )
    if operation == "unit_convert":
        return (
            f"{data['input']:.6g} {data['from_unit']} = "
            f"{data['result']:.6g} {data['to_unit']}"
        )
    if operation == "constants":
        return f"{data['name']} ({data['symbol']}) = {data['value']:.10g} {data['unit']}"
    if operation == "dilution":
        return (
            f"{data['formula']}: C1={data['c1']:.6g}, V1={data['v1']:.6g}, "
            f"C2={data['c2']:.6g}, V2={data['v2']:.6g} (solved for {data['solved_for']})"
        )
    if operation == "molarity":
        return (
            f"{data['moles']:.6g} mol in {data['volume_liters']:.6g} L = "
            f"{data['molarity_mol_per_l']:.6g} mol/L "
            f"({data['molarity_mmol_per_l']:.6g} mmol/L)"
        )
    return ", ".join(f"{k}={v}" for k, v in data.items())
