"""Shared utilities: randomness configuration, validation, replay checks."""

from .banner import print_copyright_and_license
from .observability import (
    ReplayMismatchError,
    assert_replay_equivalence,
    compare_runs,
    replay_signature,
)
from .rng_manager import (
    RNGManager,
    RandomStream,
    configure_random_generator,
    get_rng_manager,
    reset_rng_manager,
)
from .validation import ValidationError

__all__ = [
    'print_copyright_and_license',
    'ReplayMismatchError',
    'assert_replay_equivalence',
    'compare_runs',
    'replay_signature',
    'RNGManager',
    'RandomStream',
    'configure_random_generator',
    'get_rng_manager',
    'reset_rng_manager',
    'ValidationError',
]
