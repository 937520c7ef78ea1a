"""
Tests for the DeltaG calculator object.
"""

import pytest

from deltag import (
    DeltaG,
    Conditions,
    InvalidSequenceError,
    InvalidSaltConcentrationError,
    InvalidTemperatureError,
)
from deltag.thermo.params import DELTA_H, DELTA_S


class TestConstruction:
    """Tests for DeltaG construction."""

    def test_defaults(self, calculator):
        assert calculator.temperature == 37.0
        assert calculator.salt_conc == 1.0
        assert calculator.conditions == Conditions()

    def test_table_built_on_construction(self, calculator):
        assert len(calculator.delta_g_table) == 21
        assert calculator.delta_g_table["AA"] == pytest.approx(-0.993805, abs=1e-9)

    def test_custom_conditions(self):
        calc = DeltaG(temperature=25.0, salt_conc=0.5)
        assert calc.conditions == Conditions(25.0, 0.5)
        assert calc.delta_g_table.conditions == Conditions(25.0, 0.5)

    def test_invalid_salt(self):
        with pytest.raises(InvalidSaltConcentrationError):
            DeltaG(salt_conc=0)

    def test_invalid_temperature(self):
        with pytest.raises(InvalidTemperatureError):
            DeltaG(temperature=float("nan"))

    def test_reference_tables_exposed(self, calculator):
        assert calculator.delta_h is DELTA_H
        assert calculator.delta_s is DELTA_S

    def test_repr(self, calculator):
        assert repr(calculator) == "DeltaG(temperature=37.0, salt_conc=1.0)"


class TestConditionChanges:
    """Changing conditions rebuilds the table."""

    def test_temperature_setter_rebuilds(self, calculator):
        calculator.temperature = 25.0
        assert calculator.temperature == 25.0
        assert calculator.delta_g_table["AA"] == pytest.approx(-1.249405, abs=1e-9)

    def test_salt_setter_rebuilds(self, calculator):
        before = calculator.delta_g_table["AA"]
        calculator.salt_conc = 0.1
        assert calculator.salt_conc == 0.1
        assert calculator.delta_g_table["AA"] > before

    def test_set_conditions_both(self, calculator):
        calculator.set_conditions(temperature=30.0, salt_conc=0.1)
        assert calculator.conditions == Conditions(30.0, 0.1)
        assert calculator.delta_g_table.conditions == Conditions(30.0, 0.1)

    def test_set_conditions_keeps_unspecified(self, calculator):
        calculator.set_conditions(salt_conc=0.5)
        assert calculator.temperature == 37.0

    def test_table_replaced_not_patched(self, calculator):
        old_table = calculator.delta_g_table
        calculator.temperature = 50.0
        assert calculator.delta_g_table is not old_table
        assert old_table["AA"] == pytest.approx(-0.993805, abs=1e-9)

    def test_restoring_defaults_reproduces_table(self, calculator):
        original = calculator.delta_g_table.to_dict()
        calculator.set_conditions(temperature=30.0, salt_conc=0.1)
        calculator.set_conditions(temperature=37.0, salt_conc=1.0)
        assert calculator.delta_g_table.to_dict() == original

    def test_rebuild(self, calculator):
        original = calculator.delta_g_table.to_dict()
        calculator.rebuild()
        assert calculator.delta_g_table.to_dict() == original

    def test_invalid_salt_leaves_state_intact(self, calculator):
        table = calculator.delta_g_table
        with pytest.raises(InvalidSaltConcentrationError):
            calculator.salt_conc = 0
        with pytest.raises(InvalidSaltConcentrationError):
            calculator.set_conditions(temperature=20.0, salt_conc=-1.0)
        assert calculator.conditions == Conditions()
        assert calculator.delta_g_table is table

    def test_out_of_range_salt_accepted(self, calculator):
        calculator.salt_conc = 2.0
        assert calculator.salt_conc == 2.0


class TestPolymerDeltaG:
    """Sequence evaluation through the calculator."""

    def test_reference_sequence(self, calculator, sample_sequences):
        result = calculator.polymer_delta_g(sample_sequences["reference"])
        assert result.unwrap() == pytest.approx(-39.2702, abs=1e-6)

    def test_camel_case_alias(self, calculator, sample_sequences):
        seq = sample_sequences["reference"]
        assert calculator.polymer_deltaG(seq).unwrap() == calculator.polymer_delta_g(seq).unwrap()

    def test_invalid_sequence(self, calculator):
        result = calculator.polymer_delta_g("AXGT")
        assert result.is_err()
        assert isinstance(result.unwrap_err(), InvalidSequenceError)

    def test_follows_condition_change(self, calculator, sample_sequences):
        seq = sample_sequences["reference"]
        at_37 = calculator.polymer_delta_g(seq).unwrap()
        calculator.set_conditions(temperature=30.0, salt_conc=0.1)
        changed = calculator.polymer_delta_g(seq).unwrap()
        assert changed != at_37
        assert changed == pytest.approx(DeltaG(30.0, 0.1).polymer_delta_g(seq).unwrap())

    def test_palindrome_includes_sym(self, calculator, sample_sequences):
        t = calculator.delta_g_table
        seq = sample_sequences["palindrome"]  # GAATTC
        without_sym = (
            t["GA"] + t["AA"] + t["AT"] + t["TT"] + t["TC"] + t["initG"] + t["initC"]
        )
        assert calculator.polymer_delta_g(seq).unwrap() == pytest.approx(without_sym + t["sym"])
