"""Pseudorandom generator configuration for the example components.

A single root ``numpy.random.Generator`` is held per ``RNGManager``. Every
component (initializer, mutation operator, genetic algorithm) calls
``split()`` once when it is constructed and keeps the resulting
``RandomStream`` for its whole lifetime. Reconfiguring the manager therefore
only affects components constructed afterwards.

DEAP draws from the interpreter-global ``random`` module, so a stream is
consumed by running DEAP code inside ``RandomStream.activate()``.
"""

from __future__ import annotations

import logging
import random
from contextlib import contextmanager
from typing import Any, Iterator

import numpy as np

from evodemos.utils.validation import ValidationError

BIT_GENERATORS = ('PCG64', 'PCG64DXSM', 'Philox', 'SFC64', 'MT19937')


class RandomStream:
    """Private ``random.Random`` state handed to one component."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._state = random.Random(seed).getstate()

    @contextmanager
    def activate(self) -> Iterator[None]:
        """Run the body with this stream installed as the global ``random`` state."""
        outer = random.getstate()
        random.setstate(self._state)
        try:
            yield
        finally:
            self._state = random.getstate()
            random.setstate(outer)


def _generator_from(source: Any) -> np.random.Generator:
    if isinstance(source, np.random.Generator):
        return source
    if isinstance(source, bool):
        raise TypeError("seed must be an int, not bool")
    if isinstance(source, (int, np.integer)):
        return np.random.default_rng(int(source))
    if isinstance(source, str):
        if source not in BIT_GENERATORS:
            raise ValidationError(
                'unknown_algorithm',
                f"Unknown PRNG algorithm {source!r}; expected one of {', '.join(BIT_GENERATORS)}",
                algorithm=source,
            )
        return np.random.Generator(getattr(np.random, source)())
    raise TypeError(f"Cannot configure a random generator from {type(source).__name__}")


class RNGManager:
    """Root splittable generator from which component streams are derived."""

    def __init__(self, seed: int | None = None, generator: np.random.Generator | None = None) -> None:
        if seed is not None and generator is not None:
            raise ValueError("Pass either seed or generator, not both")
        self.seed = seed
        if generator is not None:
            self._root = _generator_from(generator)
        elif seed is not None:
            self._root = _generator_from(seed)
        else:
            self._root = np.random.default_rng()

    @property
    def algorithm(self) -> str:
        return type(self._root.bit_generator).__name__

    def configure(self, source: Any) -> None:
        """Replace the root generator with one built from a seed, algorithm name or Generator."""
        self._root = _generator_from(source)
        self.seed = int(source) if isinstance(source, (int, np.integer)) else None
        logging.info(f"Random generator configured: algorithm={self.algorithm} seed={self.seed}")

    def split(self) -> RandomStream:
        child = self._root.spawn(1)[0]
        return RandomStream(int.from_bytes(child.bytes(16), 'little'))


_default_manager: RNGManager | None = None


def get_rng_manager() -> RNGManager:
    global _default_manager
    if _default_manager is None:
        _default_manager = RNGManager()
    return _default_manager


def configure_random_generator(source: Any) -> RNGManager:
    """Configure the process-wide generator used by components created from now on."""
    manager = get_rng_manager()
    manager.configure(source)
    return manager


def reset_rng_manager() -> None:
    global _default_manager
    _default_manager = None


__all__ = [
    "BIT_GENERATORS",
    "RNGManager",
    "RandomStream",
    "configure_random_generator",
    "get_rng_manager",
    "reset_rng_manager",
]
