"""Bit-vector individuals and solution/cost pairs.

Individuals are DEAP ``creator`` types: a ``list`` of 0/1 ints carrying a
single-objective maximizing fitness.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from deap import base, creator

from evodemos.utils.validation import ValidationError

if not hasattr(creator, "BitVectorFitness"):
    creator.create("BitVectorFitness", base.Fitness, weights=(1.0,))

if not hasattr(creator, "BitVector"):
    creator.create("BitVector", list, fitness=creator.BitVectorFitness)


def get32(bits: Sequence[int], block: int = 0) -> int:
    """Return bits ``32*block`` through ``32*block + 31`` as an unsigned int.

    Bit ``j`` of the block is bit ``j`` of the result (least significant
    first). Bits past the end of the vector read as 0.
    """
    if block < 0:
        raise ValidationError('out_of_range', f"block must be >= 0, got {block}", block=block)
    start = 32 * block
    chunk = np.zeros(32, dtype=np.uint8)
    window = np.asarray(bits[start:start + 32], dtype=np.uint8)
    chunk[:len(window)] = window
    return int.from_bytes(np.packbits(chunk, bitorder='little').tobytes(), 'little')


@dataclass(frozen=True)
class SolutionCostPair:
    """A candidate solution together with its cost.

    Attributes:
        solution: The bit vector
        cost: Cost of the solution under the problem being minimized
    """

    solution: Any
    cost: int

    def __lt__(self, other: "SolutionCostPair") -> bool:
        return self.cost < other.cost


__all__ = ["SolutionCostPair", "get32"]
