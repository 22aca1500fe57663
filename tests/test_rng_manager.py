import random

import numpy as np
import pytest

from evodemos.evolution.operators import BitVectorInitializer
from evodemos.utils.rng_manager import (
    RNGManager,
    configure_random_generator,
    get_rng_manager,
    reset_rng_manager,
)
from evodemos.utils.validation import ValidationError


def _draws(stream, n=5):
    with stream.activate():
        return [random.random() for _ in range(n)]


def test_same_seed_gives_same_split_streams():
    a = RNGManager(seed=42)
    b = RNGManager(seed=42)
    assert _draws(a.split()) == _draws(b.split())
    assert _draws(a.split()) == _draws(b.split())


def test_different_seeds_give_different_streams():
    assert _draws(RNGManager(seed=1).split()) != _draws(RNGManager(seed=2).split())


def test_successive_splits_are_distinct():
    manager = RNGManager(seed=7)
    assert _draws(manager.split()) != _draws(manager.split())


def test_streams_do_not_share_consumption():
    m1 = RNGManager(seed=11)
    a1, b1 = m1.split(), m1.split()
    m2 = RNGManager(seed=11)
    a2, b2 = m2.split(), m2.split()
    _draws(a2, n=100)
    assert _draws(b1) == _draws(b2)
    assert _draws(a1) == _draws(RNGManager(seed=11).split())


def test_activate_restores_caller_state():
    stream = RNGManager(seed=3).split()
    random.seed(1234)
    expected = random.Random(1234).random()
    _draws(stream, n=10)
    assert random.random() == expected


def test_activate_restores_caller_state_on_error():
    stream = RNGManager(seed=3).split()
    random.seed(99)
    expected = random.Random(99).random()
    with pytest.raises(RuntimeError):
        with stream.activate():
            random.random()
            raise RuntimeError("boom")
    assert random.random() == expected


def test_configure_by_algorithm_name_and_generator():
    manager = RNGManager(seed=0)
    manager.configure("Philox")
    assert manager.algorithm == "Philox"
    assert manager.seed is None

    manager.configure(np.random.Generator(np.random.SFC64(5)))
    assert manager.algorithm == "SFC64"

    manager.configure(42)
    assert manager.algorithm == "PCG64"
    assert manager.seed == 42


def test_configure_rejects_bad_sources():
    manager = RNGManager(seed=0)
    with pytest.raises(ValidationError):
        manager.configure("NotARealGenerator")
    with pytest.raises(TypeError):
        manager.configure(True)
    with pytest.raises(TypeError):
        manager.configure(1.5)
    with pytest.raises(ValueError):
        RNGManager(seed=1, generator=np.random.default_rng(1))


def test_reconfigure_does_not_affect_existing_components():
    manager = RNGManager(seed=42)
    before = BitVectorInitializer(64, rng_manager=manager)
    manager.configure(7)
    reference = BitVectorInitializer(64, rng_manager=RNGManager(seed=42))
    assert before.create_candidate_solution() == reference.create_candidate_solution()


def test_process_wide_configurator():
    reset_rng_manager()
    try:
        manager = configure_random_generator(5)
        assert manager is get_rng_manager()
        first = BitVectorInitializer(48).create_candidate_solution()
        configure_random_generator(5)
        second = BitVectorInitializer(48).create_candidate_solution()
        assert first == second
    finally:
        reset_rng_manager()
