"""
entropy.py
Defines the entropy sources that feed the sampler and the commitment scheme.
The process-wide default source is created lazily and guarded by a lock; callers that need
reproducible runs inject a SeededEntropySource instead.
Related modules:
- sampler.py: SecureRandomSampler draws candidate bytes from an EntropySource.
- commitment.py: CommitmentScheme draws secret keys from an EntropySource.
- config.py: GameConfig.rng_seed selects the source in build_entropy_source.
"""

import random
import secrets
import threading
from abc import ABC, abstractmethod
from typing import Optional

from .config import GameConfig


class EntropySource(ABC):
    """
    Abstract source of random bytes.
    Implementations must be safe to call repeatedly without external synchronization.
    """

    @abstractmethod
    def read(self, n: int) -> bytes:
        """
        Return exactly n random bytes.
        Args:
            n (int): Number of bytes to read (n >= 0).
        Returns:
            bytes: Random bytes of length n.
        """
        raise NotImplementedError


class SystemEntropySource(EntropySource):
    """
    Cryptographically strong source backed by the OS CSPRNG (secrets.token_bytes).
    Stateless from the caller's perspective.
    """

    def read(self, n: int) -> bytes:
        return secrets.token_bytes(n)


class SeededEntropySource(EntropySource):
    """
    Deterministic source for tests and simulations. NOT suitable for real games:
    anyone who knows the seed can predict every committed value.
    """
    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def read(self, n: int) -> bytes:
        with self._lock:
            return self._rng.randbytes(n)


_default_source: Optional[EntropySource] = None
_default_lock = threading.Lock()


def default_entropy_source() -> EntropySource:
    """
    Return the process-wide system entropy source, creating it on first use.
    """
    global _default_source
    if _default_source is None:
        with _default_lock:
            if _default_source is None:
                _default_source = SystemEntropySource()
    return _default_source


def build_entropy_source(config: Optional[GameConfig] = None) -> EntropySource:
    """
    Pick the entropy source described by a configuration.
    Args:
        config (GameConfig|None): Game configuration; None means defaults.
    Returns:
        EntropySource: A SeededEntropySource if config.rng_seed is set, otherwise the shared system source.
    """
    if config is not None and config.rng_seed is not None:
        return SeededEntropySource(config.rng_seed)
    return default_entropy_source()
