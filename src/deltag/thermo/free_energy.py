"""
Derivation of nearest-neighbor free energies for given solution conditions.

    ΔG°(T) = ΔH° - T·ΔS°

ΔS° of every dinucleotide step is first corrected for [Na+]:

    ΔS°([Na+]) = ΔS°(1 M) + 0.368 · (N/2) · ln[Na+]

with N/2 = 1 phosphate per NN step. Initiation and symmetry terms keep
their tabulated 37 °C values.
"""

from __future__ import annotations
import logging
import math
from types import MappingProxyType

from deltag.core.errors import InvalidSaltConcentrationError
from deltag.core.models import Conditions, FreeEnergyTable, ThermoTable, RECOMMENDED_SALT_RANGE
from deltag.thermo.params import DELTA_H, DELTA_S, DINUCLEOTIDES, FIXED_DELTA_G

logger = logging.getLogger(__name__)

# Salt-dependence coefficient of ΔS° (cal·mol⁻¹·K⁻¹ per phosphate)
SALT_ENTROPY_COEFFICIENT = 0.368


def entropy_salt_adjustment(salt_conc: float) -> float:
    """
    Entropy correction (cal·mol⁻¹·K⁻¹) applied to one NN step.

    Raises:
        InvalidSaltConcentrationError: salt_conc is not positive and finite
    """
    if not math.isfinite(salt_conc) or salt_conc <= 0:
        raise InvalidSaltConcentrationError(salt_conc)
    return SALT_ENTROPY_COEFFICIENT * math.log(salt_conc)


def nn_delta_g(dh: float, ds: float, kelvin: float, entropy_adjust: float = 0.0) -> float:
    """ΔG° (kcal/mol) from ΔH° (kcal/mol) and salt-adjusted ΔS° (cal/(K·mol))."""
    return dh - kelvin * ((ds + entropy_adjust) / 1000)


def derive_delta_g(
    conditions: Conditions,
    enthalpy: ThermoTable = DELTA_H,
    entropy: ThermoTable = DELTA_S,
) -> FreeEnergyTable:
    """
    Build the free-energy table for the given conditions.

    Args:
        conditions: Temperature (°C) and [Na+] (M)
        enthalpy: ΔH° per dinucleotide step
        entropy: ΔS° per dinucleotide step

    Returns:
        FreeEnergyTable with the 16 dinucleotide keys plus the fixed
        initA/initC/initG/initT/sym values

    Raises:
        InvalidSaltConcentrationError: before any entry is computed
    """
    entropy_adjust = entropy_salt_adjustment(conditions.salt_conc)

    if not conditions.salt_in_recommended_range:
        low, high = RECOMMENDED_SALT_RANGE
        logger.warning(
            f"[Na+] of {conditions.salt_conc} M is outside {low}-{high} M; "
            f"salt correction may be inaccurate"
        )

    kelvin = conditions.kelvin
    logger.debug(
        f"Deriving deltaG table at {conditions.temperature} °C, "
        f"[Na+] {conditions.salt_conc} M (entropy adjust {entropy_adjust:.4f})"
    )

    values = dict(FIXED_DELTA_G)
    for key in DINUCLEOTIDES:
        values[key] = nn_delta_g(enthalpy[key], entropy[key], kelvin, entropy_adjust)

    return FreeEnergyTable(conditions, MappingProxyType(values))
