"""
Core data models, error kinds and sequence utilities.
"""

from deltag.core.result import Result, Ok, Err
from deltag.core.errors import (
    DeltaGError,
    InvalidSequenceError,
    InvalidSaltConcentrationError,
    InvalidTemperatureError,
)
from deltag.core.models import Conditions, FreeEnergyTable, ThermoTable
from deltag.core.sequence import (
    normalize,
    reverse_complement,
    is_self_complementary,
    validate_sequence,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "DeltaGError",
    "InvalidSequenceError",
    "InvalidSaltConcentrationError",
    "InvalidTemperatureError",
    "Conditions",
    "FreeEnergyTable",
    "ThermoTable",
    "normalize",
    "reverse_complement",
    "is_self_complementary",
    "validate_sequence",
]
