"""
Chemistry-specific formulas for solution preparation.

This subpackage solves the closed-form relations used at the bench when
making up and diluting solutions.

Modules:
    solutions:
        Dilution (C1·V1 = C2·V2, solve for any one unknown) and molarity
        (M = (mass / MW) / volume) with input-domain checks.

Interpretation Guardrails:
    Concentrations here are nominal, concentration-based quantities. Activity
    corrections are out of scope, so results describe what was weighed and
    measured, not the thermodynamic behaviour of the solution.

Design Principle:
    This subpackage has no dependencies on plotting/ or matplotlib.
    It provides pure chemistry models that can be independently tested.
"""

from .solutions import (
    DilutionResult,
    MMOL_PER_MOL,
    MolarityResult,
    dilution,
    molarity,
)

__all__ = ["DilutionResult", "MolarityResult", "MMOL_PER_MOL", "dilution", "molarity"]
