"""
commitment.py
Implements the HMAC commitment scheme used by the fair random protocol.
A commitment is HMAC-SHA3-256(key, str(value)) rendered as lowercase hex; it hides the value
until the key is revealed and binds the committer to it afterwards.
Related modules:
- entropy.py: secret keys are drawn from an EntropySource.
- protocol.py: FairRandomProtocol commits to its hidden value with this scheme.
"""

import hashlib
import hmac
from typing import Optional, Union

from .config import GameConfig
from .entropy import EntropySource, default_entropy_source
from .errors import InvalidCommitmentInputError

DIGEST = hashlib.sha3_256

KeyLike = Union[bytes, bytearray, str]


def _key_bytes(key: KeyLike) -> bytes:
    # hex strings are the displayed form of a revealed key
    if isinstance(key, str):
        try:
            key = bytes.fromhex(key)
        except ValueError:
            raise InvalidCommitmentInputError("key string is not valid hex")
    if not isinstance(key, (bytes, bytearray)):
        raise InvalidCommitmentInputError(f"unsupported key type: {type(key).__name__}")
    if len(key) == 0:
        raise InvalidCommitmentInputError("key must not be empty")
    return bytes(key)


def _value_bytes(value: int) -> bytes:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidCommitmentInputError(f"unsupported value type: {type(value).__name__}")
    return str(value).encode("utf-8")


class CommitmentScheme:
    """
    Generates secret keys and computes keyed commitments over integer values.
    Args:
        source (EntropySource|None): Byte source for keys; defaults to the process-wide system source.
        key_size (int|None): Key length in bytes; defaults to GameConfig.key_size_bytes.
    """
    def __init__(self, source: Optional[EntropySource] = None, key_size: Optional[int] = None):
        self.source = source if source is not None else default_entropy_source()
        self.key_size = key_size if key_size is not None else GameConfig().key_size_bytes
        if self.key_size < 32:
            raise ValueError("key_size must be at least 32 bytes")

    def generate_key(self) -> bytes:
        """Return a fresh random key of key_size bytes."""
        return self.source.read(self.key_size)

    def commit(self, key: KeyLike, value: int) -> str:
        """
        Compute the commitment to value under key.
        Args:
            key (bytes|str): Secret key, raw or hex-encoded.
            value (int): Value to bind.
        Returns:
            str: Lowercase hex digest.
        Raises:
            InvalidCommitmentInputError: If key is empty/malformed or value is not an int.
        """
        return hmac.new(_key_bytes(key), _value_bytes(value), DIGEST).hexdigest()

    def reveal(self, key: KeyLike) -> KeyLike:
        """Return the key unchanged; the verifier pairs it with the revealed value."""
        return key

    def verify(self, key: KeyLike, value: int, commitment: str) -> bool:
        """
        Recompute the commitment for (key, value) and compare it to a published digest.
        Returns:
            bool: True if the digest matches.
        Raises:
            InvalidCommitmentInputError: If commitment is not a string, or key/value are malformed.
        """
        if not isinstance(commitment, str):
            raise InvalidCommitmentInputError(f"commitment must be a hex string, got {type(commitment).__name__}")
        expected = self.commit(key, value)
        # compare_digest refuses non-ASCII str
        if len(commitment) != len(expected) or not commitment.isascii():
            return False
        return hmac.compare_digest(expected, commitment.lower())
