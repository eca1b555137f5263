"""Solution-preparation formulas: dilution and molarity.

Dilution:
    C1 × V1 = C2 × V2

    Any three of the four quantities determine the fourth. Concentrations and
    volumes only need consistent units on each side (e.g. mol dm^-3 and
    cm^3), because the relation is a pure ratio.

Molarity:
    n = m / M_r
    c = n / V

    with m in g, M_r in g mol^-1 and V in dm^3 (L), giving c in mol dm^-3.
    The same concentration is also reported in mmol dm^-3.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict, Optional

from ..errors import (
    InvalidCombination,
    MissingField,
    NonFiniteValue,
    NonPositive,
    NonPositiveDivisor,
)

MMOL_PER_MOL: float = 1000.0
DILUTION_FORMULA = "C1×V1 = C2×V2"
MOLARITY_FORMULA = "M = (mass / MW) / volume"


@dataclass(frozen=True)
class DilutionResult:
    c1: float
    v1: float
    c2: float
    v2: float
    solved_for: str
    formula: str = DILUTION_FORMULA

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class MolarityResult:
    mass_grams: float
    molecular_weight: float
    volume_liters: float
    moles: float
    molarity_mol_per_l: float
    molarity_mmol_per_l: float
    formula: str = MOLARITY_FORMULA

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


def _finite(field: str, value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    try:
        v = float(value)
    except OverflowError:
        raise NonFiniteValue(field, math.inf if value > 0 else -math.inf) from None
    if not math.isfinite(v):
        raise NonFiniteValue(field, v)
    return v


def _require_positive_divisor(field: str, value: float, solving_for: str) -> None:
    if value <= 0:
        raise NonPositiveDivisor(field, value, solving_for)


def dilution(
    c1: Optional[float] = None,
    v1: Optional[float] = None,
    c2: Optional[float] = None,
    v2: Optional[float] = None,
) -> DilutionResult:
    """Solve C1·V1 = C2·V2 for the single quantity left as ``None``.

    Args:
        c1 (float, optional): Stock concentration.
        v1 (float, optional): Stock volume.
        c2 (float, optional): Final concentration.
        v2 (float, optional): Final volume.

    Returns:
        DilutionResult: All four quantities and the label of the solved one.

    Raises:
        InvalidCombination: Unless exactly three quantities are supplied.
        NonPositiveDivisor: If the quantity divided by is not > 0.
        NonFiniteValue: If a supplied quantity is NaN or infinite.

    Example:
        >>> dilution(c1=10, v1=5, c2=2).v2
        25.0
    """
    c1 = _finite("c1", c1)
    v1 = _finite("v1", v1)
    c2 = _finite("c2", c2)
    v2 = _finite("v2", v2)

    present = (c1 is not None, v1 is not None, c2 is not None, v2 is not None)

    if present == (True, True, True, False):
        _require_positive_divisor("c2", c2, "V2")
        return DilutionResult(c1, v1, c2, (c1 * v1) / c2, "V2")
    if present == (True, True, False, True):
        _require_positive_divisor("v2", v2, "C2")
        return DilutionResult(c1, v1, (c1 * v1) / v2, v2, "C2")
    if present == (True, False, True, True):
        _require_positive_divisor("c1", c1, "V1")
        return DilutionResult(c1, (c2 * v2) / c1, c2, v2, "V1")
    if present == (False, True, True, True):
        _require_positive_divisor("v1", v1, "C1")
        return DilutionResult((c2 * v2) / v1, v1, c2, v2, "C1")

    supplied = [
        name for name, flag in zip(("c1", "v1", "c2", "v2"), present) if flag
    ]
    raise InvalidCombination(
        supplied,
        "provide exactly 3 of: c1, v1, c2, v2. The fourth will be solved "
        f"(got {len(supplied)}: {', '.join(supplied) or 'none'}).",
    )


def molarity(
    mass_grams: Optional[float],
    molecular_weight: Optional[float],
    volume_liters: Optional[float],
) -> MolarityResult:
    """Compute the molar concentration of a weighed solute.

    Args:
        mass_grams (float): Solute mass in g. Zero is allowed.
        molecular_weight (float): Molar mass in g mol^-1.
        volume_liters (float): Solution volume in dm^3 (L).

    Returns:
        MolarityResult: Inputs, amount in mol, and concentration in
        mol dm^-3 and mmol dm^-3.

    Raises:
        MissingField: If any argument is ``None``.
        NonPositive: If ``molecular_weight`` or ``volume_liters`` is <= 0, or
            ``mass_grams`` is negative.
        NonFiniteValue: If any argument is NaN or infinite.

    Example:
        >>> molarity(58.44, 58.44, 1.0).molarity_mol_per_l
        1.0
    """
    fields = {
        "mass_grams": mass_grams,
        "molecular_weight": molecular_weight,
        "volume_liters": volume_liters,
    }
    for name, value in fields.items():
        if value is None:
            raise MissingField(name, "molarity")

    mass = _finite("mass_grams", mass_grams)
    mw = _finite("molecular_weight", molecular_weight)
    vol = _finite("volume_liters", volume_liters)

    if mw <= 0:
        raise NonPositive("molecular_weight", mw)
    if vol <= 0:
        raise NonPositive("volume_liters", vol)
    if mass < 0:
        raise NonPositive(
            "mass_grams", mass, f"mass_grams cannot be negative, got {mass}"
        )

    moles = mass / mw
    conc = moles / vol
    return MolarityResult(
        mass_grams=mass,
        molecular_weight=mw,
        volume_liters=vol,
        moles=moles,
        molarity_mol_per_l=conc,
        molarity_mmol_per_l=conc * MMOL_PER_MOL,
    )
