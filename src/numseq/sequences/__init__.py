"""
Numeric sequences.

Immutable homogeneous sequences with query, transform and JSON operations.
"""

from src.numseq.sequences.base import NumericSequence
from src.numseq.sequences.config import (
    DEFAULT_ENCODING_CONFIG,
    EncodingConfig,
    NonFinitePolicy,
    SequenceEncodingError,
)
from src.numseq.sequences.float64s import Float64s
from src.numseq.sequences.ints import Ints

__all__ = [
    # Sequence types
    "NumericSequence",
    "Float64s",
    "Ints",
    # Encoding config
    "DEFAULT_ENCODING_CONFIG",
    "EncodingConfig",
    "NonFinitePolicy",
    "SequenceEncodingError",
]
