"""
evodemos - Genetic Algorithm Example Programs

Small example programs showing how to configure randomness and assemble
genetic algorithms for bit-vector problems from DEAP components.
"""

__version__ = "0.1.0"

# Expose common submodules for convenience
from .evolution import *  # noqa: F401,F403
from .utils import *  # noqa: F401,F403

from .config import PRESET_DEMO, PRESET_QUICK, resolve_config  # noqa: F401
