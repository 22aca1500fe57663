"""Configuration presets for the genetic algorithm examples.

Configs are plain dicts. Keys:
    population_size, num_generations, bit_length, crossover_rate,
    mutation_rate (defaults to 1 / bit_length), tournament_size,
    fitness_constant, crossover and selection (generic GA), and
    mutation_only_selection (mutation-only GA).
"""

from __future__ import annotations

from typing import Any

from evodemos.utils.validation import require_positive_int, require_probability

DEFAULTS: dict[str, Any] = {
    'population_size': 100,
    'num_generations': 100,
    'bit_length': 100,
    'crossover_rate': 0.7,
    'mutation_rate': None,
    'tournament_size': 4,
    'fitness_constant': 1.0,
}

# Small enough for smoke runs
PRESET_QUICK: dict[str, Any] = {
    'population_size': 20,
    'num_generations': 10,
    'bit_length': 20,
}

PRESET_DEMO: dict[str, Any] = dict(DEFAULTS)


def resolve_config(config: dict | None = None) -> dict[str, Any]:
    """Merge ``config`` over the defaults, fill the mutation rate and validate."""
    merged = dict(DEFAULTS)
    merged.update(config or {})

    merged['population_size'] = require_positive_int('population_size', merged['population_size'])
    merged['bit_length'] = require_positive_int('bit_length', merged['bit_length'])
    merged['num_generations'] = require_positive_int('num_generations', merged['num_generations'])
    merged['tournament_size'] = require_positive_int('tournament_size', merged['tournament_size'])
    merged['crossover_rate'] = require_probability('crossover_rate', merged['crossover_rate'])
    if merged.get('mutation_rate') is None:
        merged['mutation_rate'] = 1.0 / merged['bit_length']
    merged['mutation_rate'] = require_probability('mutation_rate', merged['mutation_rate'], allow_zero=False)
    merged['fitness_constant'] = float(merged['fitness_constant'])
    return merged


__all__ = ["DEFAULTS", "PRESET_DEMO", "PRESET_QUICK", "resolve_config"]
