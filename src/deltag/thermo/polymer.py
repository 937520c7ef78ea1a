"""
Nearest-neighbor deltaG of a polymer DNA sequence.

    ΔG°(total) = Σ ΔG°(NN steps) + ΔG°(init 5') + ΔG°(init 3') [+ ΔG°(sym)]

The symmetry term is added once when the sequence is its own reverse
complement, accounting for self-association of identical strands.
"""

from __future__ import annotations
from typing import Iterator, Mapping

from deltag.core.errors import InvalidSequenceError
from deltag.core.result import Result
from deltag.core.sequence import reverse_complement, validate_sequence


def nn_steps(sequence: str) -> Iterator[str]:
    """
    Yield overlapping dinucleotide steps, 5'->3'.

    Example:
        >>> list(nn_steps("ACGT"))
        ['AC', 'CG', 'GT']
    """
    for i in range(len(sequence) - 1):
        yield sequence[i:i + 2]


def _sum_delta_g(table: Mapping[str, float], sequence: str) -> float:
    delta_g = 0.0

    for step in nn_steps(sequence):
        delta_g += table[step]

    # Terminal corrections; a single base is both ends
    delta_g += table["init" + sequence[0]]
    delta_g += table["init" + sequence[-1]]

    if sequence == reverse_complement(sequence):
        delta_g += table["sym"]

    return delta_g


def polymer_delta_g(
    table: Mapping[str, float],
    sequence: str,
) -> Result[float, InvalidSequenceError]:
    """
    Calculate ΔG° of a sequence binding its complement.

    Args:
        table: Free-energy table (see derive_delta_g)
        sequence: DNA sequence 5'->3', any case, A/C/G/T only

    Returns:
        Ok(delta_g) in kcal·mol⁻¹ on success
        Err(InvalidSequenceError) for empty input or non-ACGT bases;
        nothing is summed in that case

    Example:
        >>> table = derive_delta_g(Conditions())
        >>> polymer_delta_g(table, "AT").unwrap()
        -0.34294  # approximate value

    Note:
        More negative ΔG° indicates a more stable duplex.
    """
    return validate_sequence(sequence).map(lambda seq: _sum_delta_g(table, seq))
