"""
A Python package for everyday quantitative laboratory calculations.

Converts units, summarises replicate measurements, looks up physical
constants and solves solution-preparation formulas. Every calculator is a
pure function; :func:`evaluate` is the single tagged entry point.

Modules:
    - constants: CODATA physical/chemical constants with case-insensitive aliases.
    - units: Unit conversion through each category's base unit.
    - stats: Descriptive statistics, type-7 percentiles, mean confidence interval.
    - chemistry: Dilution (C1·V1 = C2·V2) and molarity solvers.
    - engine: Dispatch facade returning uniform success/error results.
    - reporting: Uncertainty-aware formatting and summary tables.
    - plotting: Sample distribution figures.
"""

__version__ = "1.0.0"

from .chemistry import dilution, molarity
from .constants import Constant, available_constants, lookup_constant
from .engine import OPERATIONS, ComputeResult, evaluate, execute, parameters_schema
from .errors import (
    ComputeError,
    EmptySample,
    IncompatibleCategories,
    InvalidCombination,
    InvalidFieldType,
    MissingField,
    NonFiniteValue,
    NonPositive,
    NonPositiveDivisor,
    UnknownConstant,
    UnknownOperation,
    UnknownUnit,
)
from .stats import SampleStatistics, describe, mean_confidence_interval, percentile
from .units import Category, convert, from_base, resolve_unit, to_base

__all__ = [
    # Engine
    "OPERATIONS",
    "ComputeResult",
    "evaluate",
    "execute",
    "parameters_schema",
    # Calculators
    "Constant",
    "available_constants",
    "lookup_constant",
    "Category",
    "convert",
    "from_base",
    "resolve_unit",
    "to_base",
    "SampleStatistics",
    "describe",
    "mean_confidence_interval",
    "percentile",
    "dilution",
    "molarity",
    # Errors
    "ComputeError",
    "EmptySample",
    "IncompatibleCategories",
    "InvalidCombination",
    "InvalidFieldType",
    "MissingField",
    "NonFiniteValue",
    "NonPositive",
    "NonPositiveDivisor",
    "UnknownConstant",
    "UnknownOperation",
    "UnknownUnit",
]
