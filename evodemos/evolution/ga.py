"""Genetic algorithms over bit vectors, assembled from DEAP components.

Implements:
- GeneticAlgorithm: configurable crossover and selection, bit-flip mutation
- SimpleGeneticAlgorithm: single-point crossover, bit-flip mutation,
  fitness-proportional (roulette wheel) selection
- MutationOnlyGeneticAlgorithm: bit-flip mutation with no crossover
- build_genetic_algorithm: construct any of the above from a config dict

The generational loop is ``deap.algorithms.eaSimple``. Bit-flip mutation is
applied to every offspring (``mutpb=1.0``) with a per-bit rate of
``mutation_rate``, and crossover to each consecutive pair with probability
``crossover_rate``. There is no elitism; the best individual of a run is
tracked by a ``tools.HallOfFame``.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Callable

import numpy as np
from deap import algorithms, base, creator, tools

from evodemos.evolution.operators import crossover_operator, selection_operator
from evodemos.evolution.representation import SolutionCostPair
from evodemos.utils.rng_manager import RNGManager, get_rng_manager
from evodemos.utils.validation import ValidationError, require_positive_int, require_probability


class GeneticAlgorithm:
    """Generational GA for bit-vector problems.

    Args:
        population_size: Number of individuals per generation.
        bit_length: Length of every bit vector.
        fitness: Object with ``evaluate(bits) -> (fitness,)`` and a
            ``problem`` exposing ``cost(bits)``,
            e.g. ``InverseCostFitnessFunction``.
        mutation_rate: Per-bit flip probability.
        crossover: Crossover name (see ``CROSSOVER_OPERATORS``) or a DEAP
            mate function ``f(ind1, ind2)``.
        crossover_rate: Probability that a pair of parents is recombined.
        selection: Selection name (see ``SELECTION_OPERATORS``) or a DEAP
            select function ``f(individuals, k)``.
        rng_manager: Manager to split this GA's random stream from; defaults
            to the process-wide one.
    """

    def __init__(
        self,
        population_size: int,
        bit_length: int,
        fitness: Any,
        mutation_rate: float,
        crossover: str | Callable[..., Any],
        crossover_rate: float,
        selection: str | Callable[..., Any],
        rng_manager: RNGManager | None = None,
    ) -> None:
        self.population_size = require_positive_int('population_size', population_size)
        self.bit_length = require_positive_int('bit_length', bit_length)
        self.mutation_rate = require_probability('mutation_rate', mutation_rate, allow_zero=False)
        self.crossover_rate = require_probability('crossover_rate', crossover_rate)
        self.fitness = fitness
        self._stream = (rng_manager or get_rng_manager()).split()

        mate = crossover_operator(crossover) if isinstance(crossover, str) else crossover
        select = selection_operator(selection) if isinstance(selection, str) else selection

        self.toolbox = base.Toolbox()
        self.toolbox.register('attr_bit', random.randint, 0, 1)
        self.toolbox.register('individual', tools.initRepeat, creator.BitVector, self.toolbox.attr_bit, self.bit_length)
        self.toolbox.register('population', tools.initRepeat, list, self.toolbox.individual)
        self.toolbox.register('evaluate', fitness.evaluate)
        self.toolbox.register('mate', mate)
        self.toolbox.register('mutate', tools.mutFlipBit, indpb=self.mutation_rate)
        self.toolbox.register('select', select)

        self.population: list | None = None
        self.logbook: tools.Logbook | None = None
        self.best_so_far: SolutionCostPair | None = None
        self.total_run_length = 0

    def optimize(self, num_generations: int) -> SolutionCostPair:
        """Run from a fresh random population and return the best solution found."""
        self._check_generations(num_generations)
        with self._stream.activate():
            population = self.toolbox.population(n=self.population_size)
        return self._run(population, num_generations)

    def reoptimize(self, num_generations: int) -> SolutionCostPair:
        """Continue evolving the population left by the previous run."""
        if self.population is None:
            return self.optimize(num_generations)
        self._check_generations(num_generations)
        return self._run(self.population, num_generations)

    def _check_generations(self, num_generations: int) -> None:
        if isinstance(num_generations, bool) or not isinstance(num_generations, int) or num_generations < 0:
            raise ValidationError(
                'out_of_range',
                f"num_generations must be a non-negative int, got {num_generations!r}",
                num_generations=num_generations,
            )

    def _run(self, population: list, num_generations: int) -> SolutionCostPair:
        logging.info(
            f"{type(self).__name__}: population_size={self.population_size} bit_length={self.bit_length} "
            f"mutation_rate={self.mutation_rate} crossover_rate={self.crossover_rate} generations={num_generations}"
        )
        hall_of_fame = tools.HallOfFame(1)
        stats = tools.Statistics(key=lambda ind: ind.fitness.values[0])
        stats.register('avg', np.mean)
        stats.register('max', np.max)

        with self._stream.activate():
            population, logbook = algorithms.eaSimple(
                population,
                self.toolbox,
                cxpb=self.crossover_rate,
                mutpb=1.0,
                ngen=num_generations,
                stats=stats,
                halloffame=hall_of_fame,
                verbose=False,
            )

        self.population = population
        self.logbook = logbook
        self.total_run_length += num_generations
        logging.debug(f"{type(self).__name__} run statistics:\n{logbook}")

        best = hall_of_fame[0]
        result = SolutionCostPair(solution=best, cost=self.fitness.problem.cost(best))
        if self.best_so_far is None or result < self.best_so_far:
            self.best_so_far = result
        return result


class SimpleGeneticAlgorithm(GeneticAlgorithm):
    """Single-point crossover, bit-flip mutation and fitness-proportional selection."""

    def __init__(
        self,
        population_size: int,
        bit_length: int,
        fitness: Any,
        mutation_rate: float,
        crossover_rate: float,
        rng_manager: RNGManager | None = None,
    ) -> None:
        super().__init__(
            population_size,
            bit_length,
            fitness,
            mutation_rate,
            'single_point',
            crossover_rate,
            'fitness_proportional',
            rng_manager=rng_manager,
        )


class MutationOnlyGeneticAlgorithm(GeneticAlgorithm):
    """Bit-flip mutation only; the crossover rate is fixed at 0."""

    def __init__(
        self,
        population_size: int,
        bit_length: int,
        fitness: Any,
        mutation_rate: float,
        selection: str | Callable[..., Any] = 'fitness_proportional',
        rng_manager: RNGManager | None = None,
    ) -> None:
        super().__init__(
            population_size,
            bit_length,
            fitness,
            mutation_rate,
            'single_point',
            0.0,
            selection,
            rng_manager=rng_manager,
        )


def build_genetic_algorithm(kind: str, config: dict, fitness: Any, rng_manager: RNGManager | None = None) -> GeneticAlgorithm:
    """Build a GA of the given kind from a resolved config.

    Kinds:
    - 'simple': SimpleGeneticAlgorithm
    - 'generic': GeneticAlgorithm with config['crossover'] (default two_point)
      and config['selection'] (default stochastic_universal_sampling)
    - 'mutation_only': MutationOnlyGeneticAlgorithm at twice the mutation rate
      with config['mutation_only_selection'] (default tournament)
    """
    pop_size = config['population_size']
    bit_length = config['bit_length']
    mutation_rate = config['mutation_rate']
    tournament_size = int(config.get('tournament_size', 4))

    if kind == 'simple':
        return SimpleGeneticAlgorithm(
            pop_size, bit_length, fitness, mutation_rate, config['crossover_rate'], rng_manager=rng_manager
        )
    if kind == 'generic':
        return GeneticAlgorithm(
            pop_size,
            bit_length,
            fitness,
            mutation_rate,
            config.get('crossover', 'two_point'),
            config['crossover_rate'],
            selection_operator(config.get('selection', 'stochastic_universal_sampling'), tournament_size),
            rng_manager=rng_manager,
        )
    if kind == 'mutation_only':
        return MutationOnlyGeneticAlgorithm(
            pop_size,
            bit_length,
            fitness,
            min(1.0, 2.0 * mutation_rate),
            selection_operator(config.get('mutation_only_selection', 'tournament'), tournament_size),
            rng_manager=rng_manager,
        )
    raise ValidationError('unknown_kind', f"Unknown genetic algorithm kind {kind!r}", kind=kind)


__all__ = [
    "GeneticAlgorithm",
    "MutationOnlyGeneticAlgorithm",
    "SimpleGeneticAlgorithm",
    "build_genetic_algorithm",
]
