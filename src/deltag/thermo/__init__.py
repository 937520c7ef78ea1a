"""
Nearest-neighbor thermodynamics for DNA/DNA duplexes.

- params: reference ΔH°/ΔS° tables and fixed initiation/symmetry ΔG°
- free_energy: salt- and temperature-corrected ΔG° table
- polymer: ΔG° of a whole sequence from a ΔG° table

All functions are pure; tables are read-only and safe to share.
"""

from deltag.thermo.params import (
    DELTA_H,
    DELTA_S,
    FIXED_DELTA_G,
    DINUCLEOTIDES,
    SPECIAL_KEYS,
    load_thermodynamic_data,
)
from deltag.thermo.free_energy import (
    derive_delta_g,
    entropy_salt_adjustment,
    nn_delta_g,
)
from deltag.thermo.polymer import polymer_delta_g, nn_steps

__all__ = [
    # Reference tables
    "DELTA_H",
    "DELTA_S",
    "FIXED_DELTA_G",
    "DINUCLEOTIDES",
    "SPECIAL_KEYS",
    "load_thermodynamic_data",
    # Free-energy derivation
    "derive_delta_g",
    "entropy_salt_adjustment",
    "nn_delta_g",
    # Sequence evaluation
    "polymer_delta_g",
    "nn_steps",
]
