"""Typed failures raised by the computation engine.

Every error derives from :class:`ComputeError`, itself a ``ValueError``, so
callers that already guard numerical code with ``except ValueError`` keep
working. Each class stores the offending field, unit, or category as
attributes so a caller can build its own message without parsing ours.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional


class ComputeError(ValueError):
    """Base class for every expected, recoverable engine failure."""

    kind = "ComputeError"

    def details(self) -> Dict[str, Any]:
        return {}

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "message": str(self), **self.details()}


class UnknownOperation(ComputeError):
    kind = "UnknownOperation"

    def __init__(self, operation: str, available: Iterable[str] = ()):
        self.operation = operation
        self.available = tuple(available)
        msg = f"unknown operation: '{operation}'"
        if self.available:
            msg += ". Use " + ", ".join(f"'{op}'" for op in self.available)
        super().__init__(msg)

    def details(self) -> Dict[str, Any]:
        return {"operation": self.operation}


class UnknownUnit(ComputeError):
    kind = "UnknownUnit"

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"unknown unit: '{unit}'")

    def details(self) -> Dict[str, Any]:
        return {"unit": self.unit}


class IncompatibleCategories(ComputeError):
    """Source and target units measure different physical quantities."""

    kind = "IncompatibleCategories"

    def __init__(self, from_category: str, to_category: str, unit: str = ""):
        self.from_category = from_category
        self.to_category = to_category
        self.unit = unit
        target = f"'{unit}' ({to_category})" if unit else to_category
        super().__init__(
            f"cannot convert {from_category} to {target}. "
            "Units must be in the same category."
        )

    def details(self) -> Dict[str, Any]:
        return {
            "from_category": self.from_category,
            "to_category": self.to_category,
            "unit": self.unit,
        }


class UnknownConstant(ComputeError):
    kind = "UnknownConstant"

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = tuple(available)
        msg = f"unknown constant: '{name}'"
        if self.available:
            msg += ". Available: " + ", ".join(self.available)
        super().__init__(msg)

    def details(self) -> Dict[str, Any]:
        return {"name": self.name}


class EmptySample(ComputeError):
    kind = "EmptySample"

    def __init__(self, message: str = "'data' must contain at least one number"):
        super().__init__(message)


class MissingField(ComputeError):
    kind = "MissingField"

    def __init__(self, field: str, operation: Optional[str] = None):
        self.field = field
        self.operation = operation
        where = f" for {operation}" if operation else ""
        super().__init__(f"'{field}' required{where}")

    def details(self) -> Dict[str, Any]:
        return {"field": self.field, "operation": self.operation}


class InvalidFieldType(ComputeError):
    kind = "InvalidFieldType"

    def __init__(self, field: str, expected: str):
        self.field = field
        self.expected = expected
        super().__init__(f"'{field}' must be {expected}")

    def details(self) -> Dict[str, Any]:
        return {"field": self.field, "expected": self.expected}


class InvalidCombination(ComputeError):
    """The supplied set of optional solver fields does not pick one unknown."""

    kind = "InvalidCombination"

    def __init__(self, supplied: Iterable[str], message: str):
        self.supplied = tuple(supplied)
        super().__init__(message)

    def details(self) -> Dict[str, Any]:
        return {"supplied": list(self.supplied)}


class NonPositive(ComputeError):
    kind = "NonPositive"

    def __init__(self, field: str, value: float, message: Optional[str] = None):
        self.field = field
        self.value = value
        super().__init__(message or f"{field} must be > 0, got {value}")

    def details(self) -> Dict[str, Any]:
        return {"field": self.field, "value": self.value}


class NonPositiveDivisor(NonPositive):
    kind = "NonPositiveDivisor"

    def __init__(self, field: str, value: float, solving_for: str):
        self.solving_for = solving_for
        super().__init__(
            field, value, f"{field.upper()} must be > 0 to solve for {solving_for}, got {value}"
        )

    def details(self) -> Dict[str, Any]:
        return {**super().details(), "solving_for": self.solving_for}


class NonFiniteValue(ComputeError):
    kind = "NonFiniteValue"

    def __init__(self, field: str, value: float):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be finite, got {value}")

    def details(self) -> Dict[str, Any]:
        return {"field": self.field, "value": self.value}
