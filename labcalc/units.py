"""Centralized unit conversion utilities.

Every conversion pivots through the base unit of its category::

    base   = value * scale + offset
    target = (base - offset_target) / scale_target

so the table holds one entry per spelling instead of one per unit pair.
Only temperature carries a non-zero offset; every other category is purely
proportional.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from .errors import IncompatibleCategories, UnknownUnit


class Category(str, Enum):
    LENGTH = "length"
    MASS = "mass"
    VOLUME = "volume"
    TEMPERATURE = "temperature"
    TIME = "time"
    PRESSURE = "pressure"
    MOLAR_CONCENTRATION = "molar_concentration"
    ENERGY = "energy"

    @property
    def base_unit(self) -> str:
        return BASE_UNITS[self]


BASE_UNITS: Mapping[Category, str] = MappingProxyType(
    {
        Category.LENGTH: "m",
        Category.MASS: "kg",
        Category.VOLUME: "l",
        Category.TEMPERATURE: "k",
        Category.TIME: "s",
        Category.PRESSURE: "pa",
        Category.MOLAR_CONCENTRATION: "mol/l",
        Category.ENERGY: "j",
    }
)

KELVIN_OFFSET_C: float = 273.15
FAHRENHEIT_SCALE: float = 5.0 / 9.0
FAHRENHEIT_OFFSET: float = KELVIN_OFFSET_C - 32.0 * FAHRENHEIT_SCALE
DALTON_KG: float = 1.66053906660e-27
ELECTRONVOLT_J: float = 1.602176634e-19


@dataclass(frozen=True)
class UnitDefinition:
    """One recognised unit and its affine map onto the category base unit."""

    symbol: str
    category: Category
    scale: float
    offset: float = 0.0

    def to_base(self, value: float) -> float:
        return value * self.scale + self.offset

    def from_base(self, base_value: float) -> float:
        return (base_value - self.offset) / self.scale


# (spellings, category, scale, offset); the first spelling is the symbol.
_UNIT_ROWS: Tuple[Tuple[Tuple[str, ...], Category, float, float], ...] = (
    (("m", "meter", "meters"), Category.LENGTH, 1.0, 0.0),
    (("km", "kilometer", "kilometers"), Category.LENGTH, 1000.0, 0.0),
    (("cm", "centimeter", "centimeters"), Category.LENGTH, 0.01, 0.0),
    (("mm", "millimeter", "millimeters"), Category.LENGTH, 0.001, 0.0),
    (
        ("um", "micrometer", "micrometers", "micron", "microns"),
        Category.LENGTH,
        1e-6,
        0.0,
    ),
    (("nm", "nanometer", "nanometers"), Category.LENGTH, 1e-9, 0.0),
    (("pm", "picometer", "picometers"), Category.LENGTH, 1e-12, 0.0),
    (("angstrom", "angstroms", "å"), Category.LENGTH, 1e-10, 0.0),
    (("in", "inch", "inches"), Category.LENGTH, 0.0254, 0.0),
    (("ft", "foot", "feet"), Category.LENGTH, 0.3048, 0.0),
    (("mi", "mile", "miles"), Category.LENGTH, 1609.344, 0.0),
    (("kg", "kilogram", "kilograms"), Category.MASS, 1.0, 0.0),
    (("g", "gram", "grams"), Category.MASS, 0.001, 0.0),
    (("mg", "milligram", "milligrams"), Category.MASS, 1e-6, 0.0),
    (("ug", "microgram", "micrograms"), Category.MASS, 1e-9, 0.0),
    (("ng", "nanogram", "nanograms"), Category.MASS, 1e-12, 0.0),
    (("lb", "pound", "pounds"), Category.MASS, 0.453592, 0.0),
    (("oz", "ounce", "ounces"), Category.MASS, 0.0283495, 0.0),
    (("dalton", "daltons", "da", "amu"), Category.MASS, DALTON_KG, 0.0),
    (("l", "liter", "liters", "litre", "litres"), Category.VOLUME, 1.0, 0.0),
    (("ml", "milliliter", "milliliters"), Category.VOLUME, 0.001, 0.0),
    (("ul", "microliter", "microliters"), Category.VOLUME, 1e-6, 0.0),
    (("nl", "nanoliter", "nanoliters"), Category.VOLUME, 1e-9, 0.0),
    (("gal", "gallon", "gallons"), Category.VOLUME, 3.78541, 0.0),
    (("k", "kelvin"), Category.TEMPERATURE, 1.0, 0.0),
    (("c", "celsius"), Category.TEMPERATURE, 1.0, KELVIN_OFFSET_C),
    (("f", "fahrenheit"), Category.TEMPERATURE, FAHRENHEIT_SCALE, FAHRENHEIT_OFFSET),
    (("s", "sec", "second", "seconds"), Category.TIME, 1.0, 0.0),
    (("ms", "millisecond", "milliseconds"), Category.TIME, 0.001, 0.0),
    (("us", "microsecond", "microseconds"), Category.TIME, 1e-6, 0.0),
    (("ns", "nanosecond", "nanoseconds"), Category.TIME, 1e-9, 0.0),
    (("min", "minute", "minutes"), Category.TIME, 60.0, 0.0),
    (("h", "hr", "hour", "hours"), Category.TIME, 3600.0, 0.0),
    (("day", "days"), Category.TIME, 86400.0, 0.0),
    (("pa", "pascal", "pascals"), Category.PRESSURE, 1.0, 0.0),
    (("kpa", "kilopascal", "kilopascals"), Category.PRESSURE, 1000.0, 0.0),
    (("bar",), Category.PRESSURE, 100000.0, 0.0),
    (("atm", "atmosphere", "atmospheres"), Category.PRESSURE, 101325.0, 0.0),
    (("mmhg", "torr"), Category.PRESSURE, 133.322, 0.0),
    (("psi",), Category.PRESSURE, 6894.76, 0.0),
    (("mol/l", "molar", "mol/liter"), Category.MOLAR_CONCENTRATION, 1.0, 0.0),
    (("mmol/l", "millimolar"), Category.MOLAR_CONCENTRATION, 0.001, 0.0),
    (("umol/l", "micromolar"), Category.MOLAR_CONCENTRATION, 1e-6, 0.0),
    (("nmol/l", "nanomolar"), Category.MOLAR_CONCENTRATION, 1e-9, 0.0),
    (("j", "joule", "joules"), Category.ENERGY, 1.0, 0.0),
    (("kj", "kilojoule", "kilojoules"), Category.ENERGY, 1000.0, 0.0),
    (("cal", "calorie", "calories"), Category.ENERGY, 4.184, 0.0),
    (("kcal", "kilocalorie", "kilocalories"), Category.ENERGY, 4184.0, 0.0),
    (("ev", "electronvolt", "electronvolts"), Category.ENERGY, ELECTRONVOLT_J, 0.0),
)


def _build_unit_table(
    rows: Iterable[Tuple[Tuple[str, ...], Category, float, float]],
) -> Mapping[str, UnitDefinition]:
    table: Dict[str, UnitDefinition] = {}
    for spellings, category, scale, offset in rows:
        unit = UnitDefinition(spellings[0], category, float(scale), float(offset))
        for spelling in spellings:
            if spelling in table:
                raise RuntimeError(f"Unit spelling '{spelling}' is defined twice")
            table[spelling] = unit
    return MappingProxyType(table)


UNITS: Mapping[str, UnitDefinition] = _build_unit_table(_UNIT_ROWS)


def resolve_unit(unit: str) -> UnitDefinition:
    """Look up a unit spelling, ignoring letter case.

    Args:
        unit (str): Symbol, name, or plural, e.g. ``"km"``, ``"Kilometers"``.
            Surrounding whitespace is not stripped.

    Returns:
        UnitDefinition: The unit's category and affine map to base.

    Raises:
        UnknownUnit: If the spelling is not in the table.
    """
    definition = UNITS.get(str(unit).lower())
    if definition is None:
        raise UnknownUnit(unit)
    return definition


def units_for(category: Category | str) -> Tuple[str, ...]:
    """Return every accepted spelling for one category, in table order."""
    cat = Category(category)
    return tuple(spelling for spelling, u in UNITS.items() if u.category is cat)


def to_base(value: float, unit: str) -> Tuple[float, Category]:
    """Convert ``value`` in ``unit`` to its category base unit."""
    definition = resolve_unit(unit)
    return definition.to_base(float(value)), definition.category


def from_base(base_value: float, category: Category, unit: str) -> float:
    """Convert a base-unit value of ``category`` into ``unit``.

    Raises:
        UnknownUnit: If ``unit`` is not recognised.
        IncompatibleCategories: If ``unit`` belongs to another category.
    """
    cat = Category(category)
    definition = resolve_unit(unit)
    if definition.category is not cat:
        raise IncompatibleCategories(cat.value, definition.category.value, unit=unit)
    return definition.from_base(float(base_value))


def convert(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a scalar between two units of the same category.

    Args:
        value (float): Quantity expressed in ``from_unit``.
        from_unit (str): Source unit spelling.
        to_unit (str): Target unit spelling.

    Returns:
        float: Quantity expressed in ``to_unit``.

    Raises:
        UnknownUnit: If either spelling is unrecognised.
        IncompatibleCategories: If the units measure different quantities.

    Example:
        >>> convert(1, "km", "m")
        1000.0
    """
    base_value, category = to_base(value, from_unit)
    return from_base(base_value, category, to_unit)
