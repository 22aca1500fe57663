import pytest
from deap import creator, tools

from evodemos.evolution.operators import (
    BitFlipMutation,
    BitVectorInitializer,
    crossover_operator,
    selection_operator,
)
from evodemos.evolution.representation import get32
from evodemos.utils.rng_manager import RNGManager
from evodemos.utils.validation import ValidationError


def test_initializer_creates_bit_vectors():
    init = BitVectorInitializer(40, rng_manager=RNGManager(seed=1))
    x = init.create_candidate_solution()
    assert isinstance(x, creator.BitVector)
    assert len(x) == 40
    assert set(x) <= {0, 1}
    assert not x.fitness.valid


def test_full_rate_mutation_flips_every_bit():
    init = BitVectorInitializer(16, rng_manager=RNGManager(seed=2))
    mutation = BitFlipMutation(1.0, rng_manager=RNGManager(seed=2))
    x = init.create_candidate_solution()
    original = list(x)
    result = mutation.mutate(x)
    assert result is x
    assert x == [1 - b for b in original]


def test_seeded_pipeline_replays_exactly():
    def run(seed):
        manager = RNGManager(seed=seed)
        init = BitVectorInitializer(32, rng_manager=manager)
        mutation = BitFlipMutation(0.25, rng_manager=manager)
        x = init.create_candidate_solution()
        values = [get32(x)]
        for _ in range(9):
            mutation.mutate(x)
            values.append(get32(x))
        return values

    assert run(42) == run(42)
    assert run(42) != run(43)


@pytest.mark.parametrize("rate", [0, 0.0, -0.1, 1.5, "high"])
def test_mutation_rejects_bad_rates(rate):
    with pytest.raises(ValidationError):
        BitFlipMutation(rate, rng_manager=RNGManager(seed=0))


@pytest.mark.parametrize("length", [0, -3, True, 2.5])
def test_initializer_rejects_bad_lengths(length):
    with pytest.raises(ValidationError):
        BitVectorInitializer(length, rng_manager=RNGManager(seed=0))


def test_operator_lookup():
    assert crossover_operator("single_point") is tools.cxOnePoint
    assert crossover_operator("two_point") is tools.cxTwoPoint
    assert selection_operator("stochastic_universal_sampling") is tools.selStochasticUniversalSampling
    assert selection_operator("fitness_proportional") is tools.selRoulette

    tournament = selection_operator("tournament", tournament_size=3)
    assert tournament.func is tools.selTournament
    assert tournament.keywords == {"tournsize": 3}


def test_operator_lookup_rejects_unknown_names():
    with pytest.raises(ValidationError):
        crossover_operator("three_point")
    with pytest.raises(ValidationError):
        selection_operator("rank")
    with pytest.raises(ValidationError):
        selection_operator("tournament", tournament_size=0)
