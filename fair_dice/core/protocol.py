"""
protocol.py
Implements FairRandomProtocol, the commit/guess/reveal exchange that yields a value neither party can bias alone.
Phases: INIT (values drawn, nothing published) -> COMMITTED (commitment published)
-> REVEALED (counterpart value fixed, key and value exposed). One instance per exchange; never shared across sessions.
Related modules:
- sampler.py: draws the committed value.
- commitment.py: generates the key and computes the commitment.
- state.py: ProtocolTranscript is returned once revealed.
- engine.py: uses the protocol to decide who moves first.
"""

import logging
from typing import Dict, Optional

from .commitment import CommitmentScheme
from .errors import InvalidCounterpartValueError, ProtocolStateError
from .sampler import SecureRandomSampler, validate_range
from .state import ProtocolTranscript

logger = logging.getLogger(__name__)

INIT = "INIT"
COMMITTED = "COMMITTED"
REVEALED = "REVEALED"


class FairRandomProtocol:
    """
    Commit-reveal exchange over [0, range).
    Args:
        range_ (int): Size of the sample space (>= 1).
        sampler (SecureRandomSampler|None): Sampler for the committed value.
        scheme (CommitmentScheme|None): Commitment scheme; shares the sampler's entropy source by default.
    """
    def __init__(self, range_: int, sampler: Optional[SecureRandomSampler] = None,
                 scheme: Optional[CommitmentScheme] = None):
        validate_range(range_)
        self.range = range_
        self.sampler = sampler if sampler is not None else SecureRandomSampler()
        self.scheme = scheme if scheme is not None else CommitmentScheme(self.sampler.source)
        self._events = []
        # key, value and commitment are created together, before anything is published
        self._key = self.scheme.generate_key()
        self._value = self.sampler.sample(range_)
        self._commitment = self.scheme.commit(self._key, self._value)
        self._counterpart: Optional[int] = None
        self._result: Optional[int] = None
        self._phase = INIT
        logger.debug("protocol initialized over range %d", range_)

    @property
    def phase(self) -> str:
        return self._phase

    def _emit(self, event: Dict):
        self._events.append(event)

    def pop_events(self):
        """
        Return and clear all events emitted since the last call.
        Returns:
            list[dict]: Event dicts (Committed, CounterpartFixed, Revealed).
        """
        ev = list(self._events)
        self._events.clear()
        return ev

    def _require(self, phase: str, operation: str) -> None:
        if self._phase != phase:
            raise ProtocolStateError(f"{operation} requires phase {phase}, protocol is {self._phase}")

    def get_commitment(self) -> str:
        """
        Publish the commitment. The first call moves INIT -> COMMITTED; later calls return the same digest.
        Returns:
            str: Hex digest of the commitment.
        """
        if self._phase == INIT:
            self._phase = COMMITTED
            self._emit({"type": "Committed", "range": self.range, "commitment": self._commitment})
            logger.debug("commitment published")
        return self._commitment

    def finalize(self, counterpart_value: int) -> int:
        """
        Fix the counterpart's value and compute the fair result.
        Args:
            counterpart_value (int): The counterpart's contribution, in [0, range).
        Returns:
            int: (committed_value + counterpart_value) mod range.
        Raises:
            ProtocolStateError: If the commitment has not been published, or the protocol already finished.
            InvalidCounterpartValueError: If counterpart_value is not an int in [0, range).
        """
        self._require(COMMITTED, "finalize")
        if isinstance(counterpart_value, bool) or not isinstance(counterpart_value, int):
            raise InvalidCounterpartValueError(
                f"counterpart value must be an integer, got {type(counterpart_value).__name__}")
        if not (0 <= counterpart_value < self.range):
            raise InvalidCounterpartValueError(
                f"counterpart value must be in [0, {self.range}), got {counterpart_value}")
        self._counterpart = counterpart_value
        self._emit({"type": "CounterpartFixed", "counterpart_value": counterpart_value})
        self._result = (self._value + counterpart_value) % self.range
        self._phase = REVEALED
        self._emit({"type": "Revealed", "key": self._key.hex(), "committed_value": self._value,
                    "result": self._result})
        logger.debug("protocol revealed, result %d", self._result)
        return self._result

    def reveal_key(self) -> str:
        """Return the secret key as lowercase hex. Only available once REVEALED."""
        self._require(REVEALED, "reveal_key")
        return self.scheme.reveal(self._key).hex()

    def get_committed_value(self) -> int:
        """Return the committed value. Only available once REVEALED."""
        self._require(REVEALED, "get_committed_value")
        return self._value

    @property
    def result(self) -> int:
        self._require(REVEALED, "result")
        return self._result

    def transcript(self) -> ProtocolTranscript:
        """
        Build the verifiable record of this run.
        Returns:
            ProtocolTranscript: Commitment, revealed key and value, counterpart value and result.
        """
        self._require(REVEALED, "transcript")
        return ProtocolTranscript(
            range=self.range,
            commitment=self._commitment,
            key=self.reveal_key(),
            committed_value=self._value,
            counterpart_value=self._counterpart,
            result=self._result,
        )
