"""
Genetic Algorithm Tutorial

Goals:
- Turn the OneMax cost function into a fitness function
- Run a simple GA (single-point crossover, bit-flip mutation, roulette wheel)
- Run a GA with two-point crossover and stochastic universal sampling
- Run a mutation-only GA with tournament selection
- Compare cost, value and fitness of the best solutions found
"""

from evodemos.config import PRESET_DEMO, resolve_config
from evodemos.evolution.ga import build_genetic_algorithm
from evodemos.evolution.problems import InverseCostFitnessFunction, OneMax
from evodemos.utils.banner import print_copyright_and_license


def main(config=None):
    print_copyright_and_license()

    # Population size 100, 100 generations, bit vectors of length 100,
    # crossover rate 0.7 and mutation rate 1 / length (one expected bit flip
    # per individual). Pass another preset to main() to change them.
    cfg = resolve_config(config or PRESET_DEMO)
    num_generations = cfg['num_generations']

    # OneMax is a minimization problem: cost is the number of 0 bits. GAs
    # maximize fitness, so transform cost with 1 / (1 + cost). The result is
    # always positive, which roulette wheel selection and stochastic
    # universal sampling both require.
    problem = OneMax()
    fitness = InverseCostFitnessFunction(problem, cfg['fitness_constant'])

    # 'simple': single-point crossover, bit-flip mutation and fitness
    # proportional selection (SimpleGeneticAlgorithm).
    sga = build_genetic_algorithm('simple', cfg, fitness)

    # 'generic': a GeneticAlgorithm with the crossover and selection named in
    # the config, two-point crossover and stochastic universal sampling by
    # default. Set cfg['crossover'] to 'single_point' or 'uniform', or
    # cfg['selection'] to 'fitness_proportional' or 'tournament', to try others.
    ga = build_genetic_algorithm('generic', cfg, fitness)

    # 'mutation_only': no crossover, twice the mutation rate, and tournament
    # selection with cfg['tournament_size'] (4) competitors.
    moga = build_genetic_algorithm('mutation_only', cfg, fitness)

    # optimize() returns the best solution across all generations together
    # with its cost. A cost of 0 means all bits are 1.
    results = [alg.optimize(num_generations) for alg in (sga, ga, moga)]
    costs = [r.cost for r in results]

    # value() is the natural measure being maximized: the number of 1 bits.
    values = [problem.value(r.solution) for r in results]

    # The fitness the GA actually used.
    fitnesses = [fitness.fitness(r.solution) for r in results]

    print("\nComparison of Three GA Variations on a OneMax Problem")
    print(f"{'Metric':>8} {'SimpleGA':>12} {'GA':>12} {'MutationOnly':>12}")
    print(f"{'Cost':>8} {costs[0]:>12d} {costs[1]:>12d} {costs[2]:>12d}")
    print(f"{'Value':>8} {values[0]:>12d} {values[1]:>12d} {values[2]:>12d}")
    print(f"{'Fitness':>8} {fitnesses[0]:>12.8f} {fitnesses[1]:>12.8f} {fitnesses[2]:>12.8f}")
    print()
    return results


if __name__ == "__main__":
    main()
