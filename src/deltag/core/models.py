"""
Core data models for deltag.

Solution conditions and the free-energy table derived from them. Both are
immutable: changing conditions means building a new table, never patching
an old one.
"""

from __future__ import annotations
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Iterator, Optional

from deltag.core.errors import InvalidSaltConcentrationError, InvalidTemperatureError


# Offset between degrees Celsius and Kelvin
KELVIN_OFFSET = 273.15

# Range of total [Na+] (M) for which the salt correction is calibrated
RECOMMENDED_SALT_RANGE = (0.05, 1.1)

# Reference tables map a token (dinucleotide or special key) to a float
ThermoTable = Mapping[str, float]


@dataclass(frozen=True, slots=True)
class Conditions:
    """
    Solution conditions for a deltaG calculation.

    Attributes:
        temperature: Temperature in degrees Celsius
        salt_conc: Monovalent cation ([Na+]) concentration in mol/L
    """
    temperature: float = 37.0
    salt_conc: float = 1.0

    def __post_init__(self) -> None:
        """Validate conditions on creation."""
        if not math.isfinite(self.temperature) or self.temperature < -KELVIN_OFFSET:
            raise InvalidTemperatureError(self.temperature)
        if not math.isfinite(self.salt_conc) or self.salt_conc <= 0:
            raise InvalidSaltConcentrationError(self.salt_conc)

    @property
    def kelvin(self) -> float:
        """Absolute temperature in Kelvin."""
        return KELVIN_OFFSET + self.temperature

    @property
    def salt_in_recommended_range(self) -> bool:
        low, high = RECOMMENDED_SALT_RANGE
        return low <= self.salt_conc <= high

    def replace(
        self,
        temperature: Optional[float] = None,
        salt_conc: Optional[float] = None,
    ) -> Conditions:
        """Return new conditions with the given fields changed."""
        return Conditions(
            temperature=self.temperature if temperature is None else temperature,
            salt_conc=self.salt_conc if salt_conc is None else salt_conc,
        )


@dataclass(frozen=True, eq=False)
class FreeEnergyTable(Mapping):
    """
    Read-only deltaG values (kcal/mol) keyed by dinucleotide or special token.

    Holds the conditions it was derived for, so a table and its conditions
    can never drift apart.
    """

    conditions: Conditions
    _values: Mapping[str, float] = field(repr=False)

    def __getitem__(self, key: str) -> float:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def to_dict(self) -> dict[str, float]:
        """Plain dict copy of the table."""
        return dict(self._values)
