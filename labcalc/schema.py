"""Define standardized column names for summary DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryColumns:
    """Container for standardized column labels.

    These column names are used by :func:`labcalc.reporting.summary_table`
    so tables built from different samples can be concatenated and exported
    without renaming.

    Attributes:
        sample: Name the caller gave the sample (e.g. a condition label).
        n: Number of finite numeric observations kept.
        mean: Arithmetic mean.
        sem: Standard error of the mean (Bessel-corrected SD / sqrt(n)).
        sd: Bessel-corrected sample standard deviation.
        median: Middle order statistic (mean of the two middle values for
            even n).
        iqr: Interquartile range, type-7 p75 - p25.
        min: Smallest observation.
        max: Largest observation.
        reported: ``"mean ± SEM"`` string rounded to the SEM's significant
            figures; empty when SEM is zero or undefined.
    """

    sample: str = "Sample"
    n: str = "n"
    mean: str = "Mean"
    sem: str = "SEM"
    sd: str = "Sample SD"
    median: str = "Median"
    iqr: str = "IQR"
    min: str = "Min"
    max: str = "Max"
    reported: str = "Mean ± SEM (reported)"

    def ordered(self) -> list[str]:
        return [
            self.sample,
            self.n,
            self.mean,
            self.sem,
            self.sd,
            self.median,
            self.iqr,
            self.min,
            self.max,
            self.reported,
        ]


SUMMARY_COLUMNS = SummaryColumns()
