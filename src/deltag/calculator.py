"""
Stateful deltaG calculator.

Keeps one free-energy table for the current solution conditions and
evaluates sequences against it. Changing temperature or salt rebuilds the
table in one step: the new table (which carries its own conditions) is
derived first and only then swapped in, so readers always see a consistent
pair and a rejected value leaves the calculator untouched.

Usage:
    >>> calc = DeltaG()                      # 37 °C, 1 M [Na+]
    >>> calc.polymer_delta_g("TAACAAGCAATGAGATAGAGAAAGAAATATATCCA").unwrap()
    -39.2702  # approximate value

    >>> calc.set_conditions(temperature=30, salt_conc=0.1)
"""

from __future__ import annotations
import logging
from typing import Optional

from deltag.core.errors import InvalidSequenceError
from deltag.core.models import Conditions, FreeEnergyTable, ThermoTable
from deltag.core.result import Result
from deltag.thermo.free_energy import derive_delta_g
from deltag.thermo.params import load_thermodynamic_data
from deltag.thermo.polymer import polymer_delta_g

logger = logging.getLogger(__name__)


class DeltaG:
    """
    Calculate deltaG of polymer DNA sequences using the NN model.

    Args:
        temperature: Temperature in °C (default: 37.0)
        salt_conc: [Na+] in mol/L (default: 1.0); should lie between
            0.05 and 1.1 M for the salt correction to hold

    Raises:
        InvalidSaltConcentrationError: salt_conc <= 0
        InvalidTemperatureError: temperature not finite or below absolute zero
    """

    def __init__(self, temperature: float = 37.0, salt_conc: float = 1.0) -> None:
        self._delta_h, self._delta_s = load_thermodynamic_data()
        self._table = self._derive(Conditions(temperature, salt_conc))

    def _derive(self, conditions: Conditions) -> FreeEnergyTable:
        return derive_delta_g(conditions, self._delta_h, self._delta_s)

    @property
    def conditions(self) -> Conditions:
        return self._table.conditions

    @property
    def temperature(self) -> float:
        """Temperature in °C."""
        return self._table.conditions.temperature

    @temperature.setter
    def temperature(self, value: float) -> None:
        self.set_conditions(temperature=value)

    @property
    def salt_conc(self) -> float:
        """[Na+] in mol/L."""
        return self._table.conditions.salt_conc

    @salt_conc.setter
    def salt_conc(self, value: float) -> None:
        self.set_conditions(salt_conc=value)

    @property
    def delta_h(self) -> ThermoTable:
        """Reference enthalpy table (kcal/mol)."""
        return self._delta_h

    @property
    def delta_s(self) -> ThermoTable:
        """Reference entropy table (cal/(K·mol))."""
        return self._delta_s

    @property
    def delta_g_table(self) -> FreeEnergyTable:
        """Free-energy table (kcal/mol) for the current conditions."""
        return self._table

    def set_conditions(
        self,
        temperature: Optional[float] = None,
        salt_conc: Optional[float] = None,
    ) -> None:
        """
        Change temperature and/or salt and rebuild the deltaG table.

        Fields left as None keep their current value. On error the previous
        conditions and table stay in place.
        """
        conditions = self.conditions.replace(temperature=temperature, salt_conc=salt_conc)
        self._table = self._derive(conditions)
        logger.debug(f"Conditions set to {conditions}")

    def rebuild(self) -> None:
        """Re-derive the deltaG table from the current conditions."""
        self._table = self._derive(self.conditions)

    def polymer_delta_g(self, sequence: str) -> Result[float, InvalidSequenceError]:
        """
        Calculate deltaG (kcal/mol) of a sequence under current conditions.

        Returns:
            Ok(delta_g) on success
            Err(InvalidSequenceError) if the sequence is empty or has
            characters other than A/C/G/T
        """
        return polymer_delta_g(self._table, sequence)

    # camelCase alias
    polymer_deltaG = polymer_delta_g

    def __repr__(self) -> str:
        return f"DeltaG(temperature={self.temperature!r}, salt_conc={self.salt_conc!r})"
