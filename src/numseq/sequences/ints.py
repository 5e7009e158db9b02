"""
Ints — последовательность целых чисел

Элементы валидируются строго как int (float и bool отклоняются).
Целые всегда конечны, поэтому json_string() никогда не бросает
SequenceEncodingError.
"""

from typing import Tuple

from pydantic import ConfigDict, TypeAdapter

from src.numseq.contracts import IntsValidator
from src.numseq.sequences.base import NumericSequence


class Ints(NumericSequence[int]):
    """Неизменяемая последовательность int."""

    __slots__ = ()

    _zero = 0
    _adapter = TypeAdapter(Tuple[int, ...], config=ConfigDict(strict=True))
    _contract = IntsValidator
