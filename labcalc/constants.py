"""Physical and chemical constants used in laboratory calculations.

Values are CODATA 2018 recommended values (exact where the 2019 SI
redefinition fixed them). Unit strings are for display only; nothing in the
package computes with them.

Lookup is case-insensitive over the canonical key and every alias, so
``"avogadro"``, ``"NA"`` and ``"na"`` all return the same record.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .errors import UnknownConstant


@dataclass(frozen=True)
class Constant:
    """Immutable registry entry.

    Attributes:
        key: Canonical lowercase name.
        aliases: Alternative lowercase spellings (symbols).
        value: Numerical value in ``unit``.
        unit: Display unit string.
        label: Human-readable description.
    """

    key: str
    aliases: Tuple[str, ...]
    value: float
    unit: str
    label: str

    def as_dict(self, symbol: str | None = None) -> Dict[str, object]:
        return {
            "name": self.label,
            "symbol": self.key if symbol is None else symbol,
            "value": self.value,
            "unit": self.unit,
        }


_CONSTANTS: Tuple[Constant, ...] = (
    Constant("avogadro", ("na",), 6.02214076e23, "mol⁻¹", "Avogadro's number"),
    Constant("boltzmann", ("kb",), 1.380649e-23, "J/K", "Boltzmann constant"),
    Constant("planck", ("h",), 6.62607015e-34, "J·s", "Planck constant"),
    Constant(
        "hbar",
        ("reduced_planck",),
        1.054571817e-34,
        "J·s",
        "Reduced Planck constant (ℏ)",
    ),
    Constant("gas_constant", ("r",), 8.314462618, "J/(mol·K)", "Universal gas constant"),
    Constant("speed_of_light", ("c",), 2.99792458e8, "m/s", "Speed of light in vacuum"),
    Constant("faraday", ("f",), 96485.33212, "C/mol", "Faraday constant"),
    Constant("electron_mass", ("me",), 9.1093837015e-31, "kg", "Electron mass"),
    Constant("proton_mass", ("mp",), 1.67262192369e-27, "kg", "Proton mass"),
    Constant("neutron_mass", ("mn",), 1.67492749804e-27, "kg", "Neutron mass"),
    Constant("elementary_charge", ("e",), 1.602176634e-19, "C", "Elementary charge"),
    Constant(
        "gravitational", ("g",), 6.67430e-11, "m³/(kg·s²)", "Gravitational constant"
    ),
    Constant(
        "standard_gravity",
        ("g0",),
        9.80665,
        "m/s²",
        "Standard acceleration of gravity",
    ),
    Constant(
        "vacuum_permittivity",
        ("epsilon0",),
        8.8541878128e-12,
        "F/m",
        "Vacuum permittivity (ε₀)",
    ),
    Constant(
        "vacuum_permeability",
        ("mu0",),
        1.25663706212e-6,
        "H/m",
        "Vacuum permeability (μ₀)",
    ),
    Constant(
        "stefan_boltzmann",
        ("sigma",),
        5.670374419e-8,
        "W/(m²·K⁴)",
        "Stefan–Boltzmann constant",
    ),
    Constant("water_molar_mass", (), 18.01528, "g/mol", "Molar mass of water"),
)


def _build_index(constants: Tuple[Constant, ...]) -> Mapping[str, Constant]:
    index: Dict[str, Constant] = {}
    for const in constants:
        for name in (const.key, *const.aliases):
            if name in index:
                raise RuntimeError(
                    f"Constant name '{name}' is claimed by both "
                    f"'{index[name].key}' and '{const.key}'"
                )
            index[name] = const
    return MappingProxyType(index)


CONSTANTS: Mapping[str, Constant] = _build_index(_CONSTANTS)


def available_constants() -> Tuple[str, ...]:
    """Return canonical constant keys in registry order."""
    return tuple(const.key for const in _CONSTANTS)


def lookup_constant(name: str) -> Constant:
    """Return the registry entry for a canonical name or alias.

    Args:
        name (str): Constant key or alias, any letter case.

    Returns:
        Constant: The matching immutable record.

    Raises:
        UnknownConstant: If no key or alias matches.
    """
    const = CONSTANTS.get(str(name).lower())
    if const is None:
        raise UnknownConstant(name, available_constants())
    return const
