"""
errors.py
Defines the exception taxonomy for the fair dice core.
All errors are local validation failures raised at the offending call; none are retried.
Related modules:
- sampler.py: raises InvalidRangeError and EntropySourceError.
- commitment.py: raises InvalidCommitmentInputError.
- protocol.py: raises ProtocolStateError and InvalidCounterpartValueError.
- dice.py / engine.py: raise InvalidDieError and IllegalMoveError.
"""


class FairDiceError(Exception):
    """
    Base class for every error raised by the fair_dice package.
    """
    pass


class InvalidRangeError(FairDiceError, ValueError):
    """
    Raised when a sample range is not a positive integer.
    """
    pass


class InvalidDieError(FairDiceError, ValueError):
    """
    Raised when a die has no faces or a face is not an integer.
    """
    pass


class InvalidCommitmentInputError(FairDiceError, ValueError):
    """
    Raised when a commitment key or value is malformed (empty key, unsupported value type).
    """
    pass


class InvalidCounterpartValueError(FairDiceError, ValueError):
    """
    Raised when the counterpart's contribution is not an integer in [0, range).
    """
    pass


class ProtocolStateError(FairDiceError, RuntimeError):
    """
    Raised when protocol operations are invoked out of the INIT -> COMMITTED -> REVEALED order.
    """
    pass


class EntropySourceError(FairDiceError, RuntimeError):
    """
    Raised when the entropy source misbehaves: short reads, or rejection sampling exhausted its attempts.
    """
    pass


class IllegalMoveError(FairDiceError):
    """
    Raised when the engine is asked to do something the game does not allow (unknown die, wrong phase).
    """
    pass
