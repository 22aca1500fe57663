"""Bit-vector initialization, mutation, crossover and selection operators.

The operators themselves are DEAP's. The classes here only bind them to a
length or rate and to a ``RandomStream`` split from an ``RNGManager`` when
they are constructed, so a seeded manager makes their output replayable.
"""

from __future__ import annotations

import random
from functools import partial
from typing import Any, Callable

from deap import creator, tools

import evodemos.evolution.representation  # noqa: F401  (registers creator.BitVector)
from evodemos.utils.rng_manager import RNGManager, get_rng_manager
from evodemos.utils.validation import ValidationError, require_positive_int, require_probability


CROSSOVER_OPERATORS: dict[str, Callable[..., Any]] = {
    'single_point': tools.cxOnePoint,
    'two_point': tools.cxTwoPoint,
    'uniform': partial(tools.cxUniform, indpb=0.5),
}

SELECTION_OPERATORS: dict[str, Callable[..., Any]] = {
    'fitness_proportional': tools.selRoulette,
    'stochastic_universal_sampling': tools.selStochasticUniversalSampling,
    'tournament': tools.selTournament,
}


def crossover_operator(name: str) -> Callable[..., Any]:
    try:
        return CROSSOVER_OPERATORS[name]
    except KeyError:
        raise ValidationError(
            'unknown_operator',
            f"Unknown crossover {name!r}; expected one of {sorted(CROSSOVER_OPERATORS)}",
            name=name,
        ) from None


def selection_operator(name: str, tournament_size: int = 4) -> Callable[..., Any]:
    """Look up a selection operator; tournament selection is bound to ``tournament_size``."""
    try:
        op = SELECTION_OPERATORS[name]
    except KeyError:
        raise ValidationError(
            'unknown_operator',
            f"Unknown selection {name!r}; expected one of {sorted(SELECTION_OPERATORS)}",
            name=name,
        ) from None
    if op is tools.selTournament:
        return partial(op, tournsize=require_positive_int('tournament_size', tournament_size))
    return op


class BitVectorInitializer:
    """Creates random bit vectors of a fixed length."""

    def __init__(self, bit_length: int, rng_manager: RNGManager | None = None) -> None:
        self.bit_length = require_positive_int('bit_length', bit_length)
        self._stream = (rng_manager or get_rng_manager()).split()

    def create_candidate_solution(self):
        with self._stream.activate():
            return tools.initRepeat(creator.BitVector, partial(random.randint, 0, 1), self.bit_length)


class BitFlipMutation:
    """Flips each bit independently with probability ``mutation_rate``."""

    def __init__(self, mutation_rate: float, rng_manager: RNGManager | None = None) -> None:
        self.mutation_rate = require_probability('mutation_rate', mutation_rate, allow_zero=False)
        self._stream = (rng_manager or get_rng_manager()).split()

    def mutate(self, bits):
        """Mutate ``bits`` in place and return it."""
        with self._stream.activate():
            tools.mutFlipBit(bits, indpb=self.mutation_rate)
        return bits


__all__ = [
    "CROSSOVER_OPERATORS",
    "SELECTION_OPERATORS",
    "BitFlipMutation",
    "BitVectorInitializer",
    "crossover_operator",
    "selection_operator",
]
