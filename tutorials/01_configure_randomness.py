"""
Configuring Randomness Tutorial

Goals:
- Choose the pseudorandom generator algorithm used by the components
- Seed it so a program run can be replicated exactly
- Show that a seeded initializer/mutation pipeline replays identically
"""

import numpy as np

from evodemos.evolution.operators import BitFlipMutation, BitVectorInitializer
from evodemos.evolution.representation import get32
from evodemos.utils.banner import print_copyright_and_license
from evodemos.utils.observability import assert_replay_equivalence, compare_runs, replay_signature
from evodemos.utils.rng_manager import configure_random_generator

NUM_STEPS = 10


def record_run(bit_length=32, mutation_rate=0.25, steps=NUM_STEPS):
    # Components split their random stream off the configured generator when
    # they are constructed, so configure first and construct afterwards.
    initializer = BitVectorInitializer(bit_length)
    mutation = BitFlipMutation(mutation_rate)

    # Create a random bit vector, then mutate it repeatedly, reading the
    # first 32 bits as an int after every step.
    x = initializer.create_candidate_solution()
    run = [get32(x, 0)]
    for _ in range(1, steps):
        mutation.mutate(x)
        run.append(get32(x, 0))
    return run


def main():
    print_copyright_and_license()

    # Configuring is optional: without it the components draw from a
    # generator seeded from OS entropy. Reconfiguring only affects components
    # constructed afterwards, so do it once at the start of the program.
    #
    # The generator must be splittable: every initializer, operator and
    # genetic algorithm gets its own child stream. Pick an algorithm by name:
    configure_random_generator("PCG64DXSM")

    # Or keep the default algorithm and just seed it. This replaces the
    # generator configured above.
    configure_random_generator(42)

    # 32-bit vectors and a deliberately high mutation rate of 0.25 make the
    # effect of the seed easy to see.
    first_run = record_run()

    # Reseed with the same value and rebuild the components with the same
    # parameters.
    configure_random_generator(42)
    second_run = record_run()

    print("Demonstrating Configurator for specifying seed to exactly replicate behavior.")
    for a, b, same in compare_runs(first_run, second_run):
        status = "same as expected" if same else "different (uh oh, please report bug)"
        print(f"{a}\t{b}\t{status}")
    print()

    # The same check as a single assertion, plus a digest of the run that
    # can be compared across program executions.
    assert_replay_equivalence(first_run, second_run)
    print(f"Replay signature: {replay_signature(first_run)}")
    print()

    # To choose the algorithm and seed it, pass a pre-seeded Generator.
    configure_random_generator(np.random.default_rng(100))


if __name__ == "__main__":
    main()
