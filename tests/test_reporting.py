"""Tests for reporting-layer formatting."""

import math

import pandas as pd
import pytest

from labcalc.reporting import (
    format_result,
    format_value_with_uncertainty,
    round_uncertainty,
    summary_table,
)
from labcalc.engine import evaluate
from labcalc.schema import SUMMARY_COLUMNS


def test_round_uncertainty_one_significant_figure():
    assert round_uncertainty(0.023) == (0.02, 2)
    assert round_uncertainty(0.3) == (0.3, 1)
    assert round_uncertainty(7.0) == (7.0, 0)


def test_round_uncertainty_keeps_two_figures_for_leading_one():
    assert round_uncertainty(0.15) == (0.15, 2)


def test_round_uncertainty_rounding_up_into_next_decade():
    ru, ndigits = round_uncertainty(0.96)
    assert ru == 1.0
    assert ndigits == 0


@pytest.mark.parametrize("bad", [0.0, -0.1, math.nan, math.inf])
def test_round_uncertainty_rejects_invalid(bad):
    with pytest.raises(ValueError, match="finite and > 0"):
        round_uncertainty(bad)


def test_format_value_matches_uncertainty_decimals():
    assert format_value_with_uncertainty(4.5678, 0.023) == "4.57 ± 0.02"
    assert format_value_with_uncertainty(12.345, 0.3, "mL") == "12.3 ± 0.3 mL"


def test_format_value_zero_uncertainty_falls_back():
    assert format_value_with_uncertainty(1.23456789, 0.0) == "1.23457 ± 0"


def test_summary_table_rows_and_columns():
    df = summary_table({"control": [1, 2, 3, 4, 5], "treated": [2.0, 2.0], "blank": []})

    assert list(df.columns) == SUMMARY_COLUMNS.ordered()
    assert list(df[SUMMARY_COLUMNS.sample]) == ["control", "treated", "blank"]

    control = df.iloc[0]
    assert control[SUMMARY_COLUMNS.n] == 5
    assert math.isclose(control[SUMMARY_COLUMNS.mean], 3.0)
    assert math.isclose(control[SUMMARY_COLUMNS.iqr], 2.0)
    assert control[SUMMARY_COLUMNS.reported] == "3.0 ± 0.7"

    treated = df.iloc[1]
    assert treated[SUMMARY_COLUMNS.sem] == 0.0
    assert treated[SUMMARY_COLUMNS.reported] == ""

    blank = df.iloc[2]
    assert blank[SUMMARY_COLUMNS.n] == 0
    assert pd.isna(blank[SUMMARY_COLUMNS.mean])


def test_summary_table_empty_mapping():
    df = summary_table({})
    assert df.empty
    assert list(df.columns) == SUMMARY_COLUMNS.ordered()


@pytest.mark.parametrize(
    "operation, fields, expected",
    [
        ("unit_convert", {"value": 1, "from_unit": "km", "to_unit": "m"}, "1 km = 1000 m"),
        ("constants", {"constant": "NA"}, "Avogadro's number (NA) = 6.02214076e+23 mol⁻¹"),
        ("dilution", {"c1": 10, "v1": 5, "c2": 2}, "solved for V2"),
        ("molarity", {"mass_grams": 58.44, "molecular_weight": 58.44, "volume_liters": 1}, "1 mol/L"),
        ("statistics", {"data": [1, 2, 3]}, "n=3, mean=2"),
    ],
)
def test_format_result(operation, fields, expected):
    text = format_result(operation, evaluate(operation, fields).unwrap())
    assert expected in text
