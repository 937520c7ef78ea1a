"""
Error kinds raised or returned by the deltaG calculator.

All errors derive from ValueError: every one of them describes a bad input
value, never an internal failure.
"""

from __future__ import annotations


class DeltaGError(ValueError):
    """Base class for deltag input errors."""


class InvalidSequenceError(DeltaGError):
    """Sequence is empty or contains characters outside A/C/G/T."""

    def __init__(self, sequence: str, invalid: frozenset[str] = frozenset()) -> None:
        self.sequence = sequence
        self.invalid = invalid
        if not sequence:
            message = "Empty sequence provided"
        else:
            message = f"Invalid bases in sequence: {sorted(invalid)}"
        super().__init__(message)


class InvalidSaltConcentrationError(DeltaGError):
    """Salt concentration is not a positive, finite molarity."""

    def __init__(self, salt_conc: float) -> None:
        self.salt_conc = salt_conc
        super().__init__(
            f"Salt concentration must be a positive number of mol/L, got {salt_conc}"
        )


class InvalidTemperatureError(DeltaGError):
    """Temperature is not finite or lies below absolute zero."""

    def __init__(self, temperature: float) -> None:
        self.temperature = temperature
        super().__init__(
            f"Temperature must be a finite value above -273.15 °C, got {temperature}"
        )
