"""
Nucleotide sequence helpers: normalization, validation, reverse complement.
"""

from __future__ import annotations

from deltag.core.errors import InvalidSequenceError
from deltag.core.result import Result, Ok, Err

# Bases accepted by the nearest-neighbor evaluator
DNA_BASES = frozenset("ACGT")

# Complement of each base and IUPAC ambiguity code, position-aligned
IUPAC_BASES = "ACGTMRWSYKVHDBN"
IUPAC_COMPLEMENTS = "TGCAKYSWRMBDHVN"

_COMPLEMENT_TABLE = str.maketrans(IUPAC_BASES, IUPAC_COMPLEMENTS)


def normalize(sequence) -> str:
    """Uppercase a sequence; accepts str or anything str() turns into one (Bio.Seq)."""
    return str(sequence).upper()


def reverse_complement(sequence: str) -> str:
    """
    Reverse a sequence and complement every base.

    Covers the 15 IUPAC letters in uppercase. Any other character
    (lowercase, gaps) is reversed but otherwise passed through unchanged.

    Example:
        >>> reverse_complement("AACG")
        'CGTT'
        >>> reverse_complement("MRWN")
        'NSYK'
    """
    return sequence[::-1].translate(_COMPLEMENT_TABLE)


def is_self_complementary(sequence: str) -> bool:
    """Check if sequence equals its own reverse complement (palindromic)."""
    sequence = normalize(sequence)
    return sequence == reverse_complement(sequence)


def validate_sequence(sequence) -> Result[str, InvalidSequenceError]:
    """
    Normalize a sequence and check it only contains A/C/G/T.

    Args:
        sequence: DNA sequence, any case

    Returns:
        Ok(normalized_sequence) on success
        Err(InvalidSequenceError) for empty input or non-ACGT characters
    """
    normalized = normalize(sequence)
    if not normalized:
        return Err(InvalidSequenceError(normalized))

    invalid = set(normalized) - DNA_BASES
    if invalid:
        return Err(InvalidSequenceError(normalized, frozenset(invalid)))

    return Ok(normalized)
