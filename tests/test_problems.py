import pytest

from evodemos.evolution.problems import InverseCostFitnessFunction, OneMax
from evodemos.evolution.representation import SolutionCostPair, get32
from evodemos.utils.validation import ValidationError


def test_onemax_cost_and_value():
    problem = OneMax()
    bits = [1, 0, 1, 1, 0]
    assert problem.cost(bits) == 2
    assert problem.value(bits) == 3
    assert problem.cost(bits) + problem.value(bits) == len(bits)
    assert problem.is_min_cost(problem.cost([1] * 8))
    assert not problem.is_min_cost(problem.cost([0] * 8))


def test_inverse_cost_fitness():
    problem = OneMax()
    fitness = InverseCostFitnessFunction(problem)
    assert fitness.fitness([1, 1, 1, 1]) == 1.0
    assert fitness.fitness([0, 0, 0, 0]) == pytest.approx(0.2)
    assert fitness.evaluate([1, 0]) == (0.5,)

    scaled = InverseCostFitnessFunction(problem, c=2.0)
    assert scaled.fitness([0, 0, 1]) == pytest.approx(0.5)


def test_inverse_cost_fitness_rejects_non_positive_constant():
    with pytest.raises(ValidationError):
        InverseCostFitnessFunction(OneMax(), c=0)


def test_get32_bit_order_and_padding():
    assert get32([1] + [0] * 31) == 1
    assert get32([0] * 31 + [1]) == 2 ** 31
    assert get32([1] * 8) == 255
    assert get32([1] * 32) == 2 ** 32 - 1

    bits = [0] * 32 + [0, 1] + [0] * 30
    assert get32(bits, 0) == 0
    assert get32(bits, 1) == 2
    assert get32(bits, 2) == 0


def test_get32_rejects_negative_block():
    with pytest.raises(ValidationError):
        get32([1] * 64, -1)


def test_solution_cost_pair_ordering():
    better = SolutionCostPair(solution=[1, 1], cost=0)
    worse = SolutionCostPair(solution=[0, 1], cost=1)
    assert better < worse
    assert min([worse, better]) is better
