"""
numseq — immutable numeric sequence utilities.

Membership, filtering, mapping, sorting, aggregates and JSON encoding
over homogeneous sequences of numbers.
"""

from src.numseq.sequences import (
    DEFAULT_ENCODING_CONFIG,
    EncodingConfig,
    Float64s,
    Ints,
    NonFinitePolicy,
    NumericSequence,
    SequenceEncodingError,
)

__all__ = [
    "NumericSequence",
    "Float64s",
    "Ints",
    "DEFAULT_ENCODING_CONFIG",
    "EncodingConfig",
    "NonFinitePolicy",
    "SequenceEncodingError",
]
