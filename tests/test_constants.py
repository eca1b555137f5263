"""Test the physical/chemical constants registry."""

import math

import pytest

from labcalc.constants import CONSTANTS, available_constants, lookup_constant
from labcalc.errors import UnknownConstant


class TestLookup:
    def test_avogadro_value_and_unit(self):
        const = lookup_constant("avogadro")
        assert const.value == 6.02214076e23
        assert const.unit == "mol⁻¹"
        assert const.label == "Avogadro's number"

    def test_alias_resolves_to_same_record(self):
        assert lookup_constant("NA") == lookup_constant("avogadro")
        assert lookup_constant("na") is lookup_constant("Avogadro")

    @pytest.mark.parametrize(
        "alias, key",
        [
            ("kB", "boltzmann"),
            ("h", "planck"),
            ("REDUCED_PLANCK", "hbar"),
            ("R", "gas_constant"),
            ("c", "speed_of_light"),
            ("F", "faraday"),
            ("me", "electron_mass"),
            ("mp", "proton_mass"),
            ("mn", "neutron_mass"),
            ("e", "elementary_charge"),
            ("G", "gravitational"),
            ("g0", "standard_gravity"),
            ("epsilon0", "vacuum_permittivity"),
            ("mu0", "vacuum_permeability"),
            ("sigma", "stefan_boltzmann"),
        ],
    )
    def test_aliases_case_insensitive(self, alias, key):
        assert lookup_constant(alias).key == key

    def test_water_molar_mass(self):
        const = lookup_constant("water_molar_mass")
        assert math.isclose(const.value, 18.01528)
        assert const.unit == "g/mol"

    def test_unknown_constant_names_the_input(self):
        with pytest.raises(UnknownConstant, match="unknown constant: 'unobtainium'") as exc:
            lookup_constant("unobtainium")
        assert exc.value.name == "unobtainium"
        assert "avogadro" in str(exc.value)

    def test_unknown_constant_is_value_error(self):
        with pytest.raises(ValueError):
            lookup_constant("unknown")


class TestRegistry:
    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            CONSTANTS["avogadro"] = None  # type: ignore[index]

    def test_available_constants_order_and_coverage(self):
        keys = available_constants()
        assert keys[0] == "avogadro"
        assert len(keys) == 17
        assert set(keys) <= set(CONSTANTS)

    def test_as_dict_echoes_symbol(self):
        record = lookup_constant("NA").as_dict(symbol="NA")
        assert record == {
            "name": "Avogadro's number",
            "symbol": "NA",
            "value": 6.02214076e23,
            "unit": "mol⁻¹",
        }


@pytest.mark.parametrize(
    "key, codata_name",
    [
        ("avogadro", "Avogadro constant"),
        ("boltzmann", "Boltzmann constant"),
        ("planck", "Planck constant"),
        ("hbar", "reduced Planck constant"),
        ("gas_constant", "molar gas constant"),
        ("speed_of_light", "speed of light in vacuum"),
        ("faraday", "Faraday constant"),
        ("electron_mass", "electron mass"),
        ("proton_mass", "proton mass"),
        ("neutron_mass", "neutron mass"),
        ("elementary_charge", "elementary charge"),
        ("gravitational", "Newtonian constant of gravitation"),
        ("standard_gravity", "standard acceleration of gravity"),
        ("vacuum_permittivity", "vacuum electric permittivity"),
        ("vacuum_permeability", "vacuum mag. permeability"),
        ("stefan_boltzmann", "Stefan-Boltzmann constant"),
    ],
)
def test_values_agree_with_codata(key, codata_name):
    """Registry values match scipy's CODATA table to within revision drift."""
    scipy_constants = pytest.importorskip("scipy.constants")
    expected = scipy_constants.physical_constants[codata_name][0]
    assert math.isclose(lookup_constant(key).value, expected, rel_tol=1e-7)
