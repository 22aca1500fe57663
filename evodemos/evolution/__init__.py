"""Genetic algorithm components for the examples."""

from .ga import (
    GeneticAlgorithm,
    MutationOnlyGeneticAlgorithm,
    SimpleGeneticAlgorithm,
    build_genetic_algorithm,
)
from .operators import BitFlipMutation, BitVectorInitializer, crossover_operator, selection_operator
from .problems import InverseCostFitnessFunction, OneMax
from .representation import SolutionCostPair, get32

__all__ = [
    "GeneticAlgorithm",
    "MutationOnlyGeneticAlgorithm",
    "SimpleGeneticAlgorithm",
    "build_genetic_algorithm",
    "BitFlipMutation",
    "BitVectorInitializer",
    "crossover_operator",
    "selection_operator",
    "InverseCostFitnessFunction",
    "OneMax",
    "SolutionCostPair",
    "get32",
]
