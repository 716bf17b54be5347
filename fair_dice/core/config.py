"""
config.py
Defines the GameConfig dataclass, which centralizes the numeric constants used by the fair dice core.
Related modules:
- entropy.py: build_entropy_source picks a seeded or system source from rng_seed.
- sampler.py: max_sample_attempts bounds rejection sampling.
- commitment.py: key_size_bytes sets the secret key length.
- engine.py: first_move_range and min_dice drive the first-move protocol and dice validation.
"""

from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class GameConfig:
    """
    Centralizes all numeric constants for a fair dice game.
    Fields:
        key_size_bytes (int): Length of each commitment key (32 bytes = 256 bits).
        max_sample_attempts (int): Upper bound on rejection-sampling redraws.
        first_move_range (int): Range of the "who moves first" protocol.
        min_dice (int): Minimum number of dice a game must be configured with.
        rng_seed (int|None): Seed for a deterministic, NON-cryptographic entropy source (tests, simulations).
    """
    key_size_bytes: int = 32
    max_sample_attempts: int = 128
    first_move_range: int = 2
    min_dice: int = 3
    # None means the OS CSPRNG; anything else is for reproducible runs only
    rng_seed: Optional[int] = None
