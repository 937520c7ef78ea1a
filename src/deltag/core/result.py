"""
Result type for functional error handling.

Per-sequence calculations return ``Ok(value)`` or ``Err(error)`` instead of
raising, so a caller looping over many oligos can keep going after a bad one
and can never mistake a failure for a legitimate 0.0 kcal/mol.

Usage:
    >>> result = calc.polymer_delta_g("ACGT")
    >>> if result.is_ok():
    ...     dg = result.unwrap()
    >>> else:
    ...     error = result.unwrap_err()

    >>> match result:
    ...     case Ok(dg):
    ...         print(f"deltaG: {dg}")
    ...     case Err(error):
    ...         print(f"Rejected: {error}")
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TypeVar, Generic, Callable, Union, Any

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Transformed type


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result holding a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> Any:
        """Raises ValueError since this is Ok."""
        raise ValueError("Called unwrap_err on Ok value")

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        """Applies function to contained value."""
        return Ok(fn(self.value))

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result holding an error (usually a DeltaGError instance)."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """
        Raise the contained error.

        Exception instances are re-raised as-is so callers can catch the
        specific kind (e.g. InvalidSequenceError); anything else is wrapped
        in a ValueError.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        """Returns self (no value to map)."""
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
Result = Union[Ok[T], Err[E]]
