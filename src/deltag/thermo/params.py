"""
Nearest-neighbor thermodynamic parameters for DNA/DNA duplexes.

Stacking values are the unified parameters of SantaLucia & Hicks (2004);
the terminal initiation terms are keyed by the terminal base rather than by
A·T / G·C pair, so every lookup is a plain ``"init" + base``.

Reference:
    SantaLucia J Jr. (1998)
    A unified view of polymer, dumbbell, and oligonucleotide DNA
    nearest-neighbor thermodynamics.
    Proc Natl Acad Sci U S A. 95(4):1460-1465.

    SantaLucia J Jr, Hicks D. (2004)
    The thermodynamics of DNA structural motifs.
    Annu Rev Biophys Biomol Struct. 33:415-440.

Units:
    ΔH° in kcal·mol⁻¹
    ΔS° in cal·mol⁻¹·K⁻¹
    ΔG° in kcal·mol⁻¹
"""

from __future__ import annotations
from types import MappingProxyType

from deltag.core.models import ThermoTable


# All 16 ordered dinucleotide steps, written 5'->3'
DINUCLEOTIDES = tuple(a + b for a in "ACGT" for b in "ACGT")

# Terminal initiation (one per end, keyed by base) and symmetry correction
SPECIAL_KEYS = ("initA", "initC", "initG", "initT", "sym")

# Each step XY shares its values with its complement step Y'X'
DELTA_H: ThermoTable = MappingProxyType({
    "AA": -7.6, "TT": -7.6,
    "AT": -7.2,
    "TA": -7.2,
    "CA": -8.5, "TG": -8.5,
    "GT": -8.4, "AC": -8.4,
    "CT": -7.8, "AG": -7.8,
    "GA": -8.2, "TC": -8.2,
    "CG": -10.6,
    "GC": -9.8,
    "GG": -8.0, "CC": -8.0,
    "initC": 0.2, "initG": 0.2,
    "initA": 2.2, "initT": 2.2,
    "sym": 0.0,
})

DELTA_S: ThermoTable = MappingProxyType({
    "AA": -21.3, "TT": -21.3,
    "AT": -20.4,
    "TA": -21.3,
    "CA": -22.7, "TG": -22.7,
    "GT": -22.4, "AC": -22.4,
    "CT": -21.0, "AG": -21.0,
    "GA": -22.2, "TC": -22.2,
    "CG": -27.2,
    "GC": -24.4,
    "GG": -19.9, "CC": -19.9,
    "initC": -5.7, "initG": -5.7,
    "initA": 6.9, "initT": 6.9,
    "sym": -1.4,
})

# Initiation and symmetry ΔG° are tabulated directly at 37 °C and are not
# corrected for temperature or salt.
FIXED_DELTA_G: ThermoTable = MappingProxyType({
    "initC": 1.96, "initG": 1.96,
    "initA": 0.05, "initT": 0.05,
    "sym": 0.43,
})


def load_thermodynamic_data() -> tuple[ThermoTable, ThermoTable]:
    """
    Return the reference (enthalpy, entropy) tables.

    Both are read-only mappings with the 16 dinucleotide keys plus
    initA/initC/initG/initT/sym.
    """
    return DELTA_H, DELTA_S
