"""
deltag: nearest-neighbor Gibbs free energy (ΔG°) of polymer DNA sequences.

Computes the free-energy change of a DNA strand binding its complement
from SantaLucia nearest-neighbor parameters, corrected for temperature and
monovalent salt concentration.
"""

__version__ = "1.0.0"

from deltag.core.result import Result, Ok, Err
from deltag.core.errors import (
    DeltaGError,
    InvalidSequenceError,
    InvalidSaltConcentrationError,
    InvalidTemperatureError,
)
from deltag.core.models import Conditions, FreeEnergyTable
from deltag.core.sequence import reverse_complement
from deltag.calculator import DeltaG

__all__ = [
    "__version__",
    "Result",
    "Ok",
    "Err",
    "DeltaGError",
    "InvalidSequenceError",
    "InvalidSaltConcentrationError",
    "InvalidTemperatureError",
    "Conditions",
    "FreeEnergyTable",
    "reverse_complement",
    "DeltaG",
]
