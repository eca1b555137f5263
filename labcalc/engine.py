"""Single entry point that routes a tagged request to one calculator.

A request is an operation name plus a flat mapping of fields, the shape an
agent tool call or a parsed command line naturally produces::

    >>> evaluate("dilution", {"c1": 10, "v1": 5, "c2": 2}).unwrap()["v2"]
    25.0

The facade only checks that the fields each operation needs are present and
of the right kind; domain checks (positive divisors, known units, ...) stay
in the calculators. Fields an operation does not use are ignored.

:func:`evaluate` never raises a :class:`~labcalc.errors.ComputeError`; it
returns a :class:`ComputeResult` whose ``error`` holds it instead.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

import numpy as np

from .chemistry.solutions import dilution, molarity
from .constants import available_constants, lookup_constant
from .errors import (
    ComputeError,
    InvalidFieldType,
    MissingField,
    NonFiniteValue,
    UnknownOperation,
)
from .stats.descriptive import describe
from .units import convert, resolve_unit

TOOL_NAME = "science_compute"
TOOL_DESCRIPTION = (
    "Perform scientific computations: descriptive statistics (mean, median, std dev, "
    "percentiles), unit conversions (SI, imperial, scientific), physical/chemical "
    "constants, dilution (C1×V1 = C2×V2) and molarity. Use this for quantitative "
    "analysis during experiments and simulations."
)


@dataclass(frozen=True)
class ComputeResult:
    """Outcome of one request: either ``data`` or ``error`` is set."""

    operation: str
    data: Optional[Dict[str, Any]] = None
    error: Optional[ComputeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Dict[str, Any]:
        if self.error is not None:
            raise self.error
        return self.data

    def as_dict(self) -> Dict[str, Any]:
        if self.error is not None:
            return {
                "operation": self.operation,
                "ok": False,
                "error": self.error.as_dict(),
            }
        return {"operation": self.operation, "ok": True, "result": self.data}


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _as_float(name: str, value: Any) -> float:
    if not _is_number(value):
        raise InvalidFieldType(name, "a number")
    try:
        return float(value)
    except OverflowError:
        # ints past the float range, e.g. long JSON integer literals
        raise NonFiniteValue(name, math.inf if value > 0 else -math.inf) from None


def _require_number(fields: Mapping[str, Any], name: str, operation: str) -> float:
    value = fields.get(name)
    if value is None:
        raise MissingField(name, operation)
    return _as_float(name, value)


def _optional_number(fields: Mapping[str, Any], name: str) -> Optional[float]:
    value = fields.get(name)
    if value is None:
        return None
    return _as_float(name, value)


def _require_str(fields: Mapping[str, Any], name: str, operation: str) -> str:
    value = fields.get(name)
    if value is None:
        raise MissingField(name, operation)
    if not isinstance(value, str):
        raise InvalidFieldType(name, "a string")
    return value


def _run_statistics(fields: Mapping[str, Any]) -> Dict[str, Any]:
    data = fields.get("data")
    if data is None:
        raise MissingField("data", "statistics")
    if isinstance(data, (str, bytes, Mapping)) or not isinstance(
        data, (Sequence, np.ndarray)
    ):
        raise InvalidFieldType("data", "an array of numbers")
    return describe(data).as_dict()


def _run_unit_convert(fields: Mapping[str, Any]) -> Dict[str, Any]:
    value = _require_number(fields, "value", "unit_convert")
    from_unit = _require_str(fields, "from_unit", "unit_convert")
    to_unit = _require_str(fields, "to_unit", "unit_convert")
    result = convert(value, from_unit, to_unit)
    return {
        "input": value,
        "from_unit": from_unit,
        "to_unit": to_unit,
        "result": result,
        "category": resolve_unit(from_unit).category.value,
    }


def _run_constants(fields: Mapping[str, Any]) -> Dict[str, Any]:
    name = _require_str(fields, "constant", "constants")
    return lookup_constant(name).as_dict(symbol=name)


def _run_dilution(fields: Mapping[str, Any]) -> Dict[str, Any]:
    v2 = _optional_number(fields, "v2")
    if v2 is None:
        v2 = _optional_number(fields, "value")
    return dilution(
        c1=_optional_number(fields, "c1"),
        v1=_optional_number(fields, "v1"),
        c2=_optional_number(fields, "c2"),
        v2=v2,
    ).as_dict()


def _run_molarity(fields: Mapping[str, Any]) -> Dict[str, Any]:
    return molarity(
        _require_number(fields, "mass_grams", "molarity"),
        _require_number(fields, "molecular_weight", "molarity"),
        _require_number(fields, "volume_liters", "molarity"),
    ).as_dict()


_HANDLERS: Dict[str, Callable[[Mapping[str, Any]], Dict[str, Any]]] = {
    "statistics": _run_statistics,
    "unit_convert": _run_unit_convert,
    "constants": _run_constants,
    "dilution": _run_dilution,
    "molarity": _run_molarity,
}

OPERATIONS = tuple(_HANDLERS)


def evaluate(operation: str, fields: Optional[Mapping[str, Any]] = None) -> ComputeResult:
    """Run one tagged request.

    Args:
        operation (str): One of :data:`OPERATIONS`.
        fields (Mapping, optional): Operation inputs. Unknown keys are
            ignored.

    Returns:
        ComputeResult: The operation's result record on success, or the
        :class:`~labcalc.errors.ComputeError` describing why it failed.
    """
    fields = {} if fields is None else fields
    handler = _HANDLERS.get(operation) if isinstance(operation, str) else None
    operation = str(operation)
    try:
        if handler is None:
            raise UnknownOperation(operation, OPERATIONS)
        return ComputeResult(operation, data=handler(fields))
    except ComputeError as exc:
        return ComputeResult(operation, error=exc)


def execute(params: Mapping[str, Any]) -> ComputeResult:
    """Run a request whose operation tag is carried in ``params["operation"]``."""
    operation = params.get("operation")
    if not isinstance(operation, str):
        return ComputeResult(
            str(operation), error=MissingField("operation", TOOL_NAME)
        )
    return evaluate(operation, params)


def parameters_schema() -> Dict[str, Any]:
    """JSON schema of the fields accepted by :func:`execute`."""
    number = {"type": "number"}
    return {
        "type": "object",
        "properties": {
            "operation": {
                "type": "string",
                "enum": list(OPERATIONS),
                "description": "The computation to perform",
            },
            "data": {
                "type": "array",
                "items": number,
                "description": "Array of numeric data points (for 'statistics')",
            },
            "value": {
                **number,
                "description": "Numeric value to convert (for 'unit_convert'); "
                "V2 when 'v2' is absent (for 'dilution')",
            },
            "from_unit": {"type": "string", "description": "Source unit (for 'unit_convert')"},
            "to_unit": {"type": "string", "description": "Target unit (for 'unit_convert')"},
            "constant": {
                "type": "string",
                "description": "Constant name (for 'constants'): "
                + ", ".join(available_constants()),
            },
            "c1": {**number, "description": "Initial concentration (for 'dilution', C1)"},
            "v1": {**number, "description": "Initial volume (for 'dilution', V1)"},
            "c2": {**number, "description": "Final concentration (for 'dilution', C2)"},
            "v2": {**number, "description": "Final volume (for 'dilution', V2)"},
            "mass_grams": {**number, "description": "Mass in grams (for 'molarity')"},
            "molecular_weight": {
                **number,
                "description": "Molecular weight in g/mol (for 'molarity')",
            },
            "volume_liters": {**number, "description": "Volume in liters (for 'molarity')"},
        },
        "required": ["operation"],
    }
