"""
sampler.py
Implements SecureRandomSampler: uniform integers in [0, range) with no modulo bias.
Candidates are read as big-endian integers, masked down to the bit length of range - 1, and
rejected while out of range, so each draw succeeds with probability > 1/2.
Related modules:
- entropy.py: supplies the random bytes.
- commitment.py / protocol.py / dice.py: consume sampled integers.
"""

import logging
from typing import Optional

from .config import GameConfig
from .entropy import EntropySource, default_entropy_source
from .errors import InvalidRangeError, EntropySourceError

logger = logging.getLogger(__name__)


def validate_range(range_: int) -> None:
    # bool is an int subclass but never a meaningful range
    if isinstance(range_, bool) or not isinstance(range_, int):
        raise InvalidRangeError(f"range must be an integer, got {type(range_).__name__}")
    if range_ <= 0:
        raise InvalidRangeError(f"range must be positive, got {range_}")


class SecureRandomSampler:
    """
    Draws uniformly distributed integers from an injected entropy source.
    Args:
        source (EntropySource|None): Byte source; defaults to the process-wide system source.
        max_attempts (int|None): Bound on rejection redraws; defaults to GameConfig.max_sample_attempts.
    """
    def __init__(self, source: Optional[EntropySource] = None, max_attempts: Optional[int] = None):
        self.source = source if source is not None else default_entropy_source()
        if max_attempts is None:
            max_attempts = GameConfig().max_sample_attempts
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts

    def sample(self, range_: int) -> int:
        """
        Return an integer uniformly distributed over [0, range_).
        Args:
            range_ (int): Size of the sample space (>= 1).
        Returns:
            int: The sampled value.
        Raises:
            InvalidRangeError: If range_ is not a positive integer.
            EntropySourceError: If the source returns short reads or every attempt is rejected.
        """
        validate_range(range_)
        if range_ == 1:
            return 0
        bits = (range_ - 1).bit_length()
        width = (bits + 7) // 8
        mask = (1 << bits) - 1
        for attempt in range(1, self.max_attempts + 1):
            raw = self.source.read(width)
            if len(raw) != width:
                raise EntropySourceError(f"entropy source returned {len(raw)} bytes, expected {width}")
            candidate = int.from_bytes(raw, "big") & mask
            if candidate < range_:
                return candidate
            logger.debug("rejected candidate %d for range %d (attempt %d)", candidate, range_, attempt)
        raise EntropySourceError(f"no candidate below {range_} after {self.max_attempts} attempts")
