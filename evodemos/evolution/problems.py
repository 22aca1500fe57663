"""OneMax problem and the cost-to-fitness transformation used by the GAs."""

from __future__ import annotations

from typing import Sequence

from evodemos.utils.validation import ValidationError


class OneMax:
    """Maximize the number of 1 bits.

    Expressed as a minimization: the cost of a bit vector is its number of
    0 bits, so the optimum (all ones) has cost 0. The length is set by
    whatever creates the bit vectors.
    """

    def cost(self, bits: Sequence[int]) -> int:
        return len(bits) - self.value(bits)

    def value(self, bits: Sequence[int]) -> int:
        return int(sum(bits))

    def min_cost(self) -> int:
        return 0

    def is_min_cost(self, cost: int) -> bool:
        return cost == self.min_cost()


class InverseCostFitnessFunction:
    """Fitness ``c / (c + cost - min_cost)``.

    The result lies in (0, 1] and equals 1 for an optimal solution, so it can
    be used with fitness-proportional selection and stochastic universal
    sampling, which both require positive fitness.
    """

    def __init__(self, problem, c: float = 1.0) -> None:
        if c <= 0:
            raise ValidationError('out_of_range', f"c must be positive, got {c}", c=c)
        self.problem = problem
        self.c = float(c)

    def fitness(self, bits: Sequence[int]) -> float:
        return self.c / (self.c + self.problem.cost(bits) - self.problem.min_cost())

    def evaluate(self, bits: Sequence[int]) -> tuple[float]:
        return (self.fitness(bits),)


__all__ = ["OneMax", "InverseCostFitnessFunction"]
