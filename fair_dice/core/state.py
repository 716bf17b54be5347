"""
state.py
Defines the immutable records produced by the fair dice core: ProtocolTranscript and RoundOutcome.
Related modules:
- protocol.py: FairRandomProtocol.transcript() returns a ProtocolTranscript.
- engine.py: FairDiceEngine.play_round() returns a RoundOutcome.
- persistence/serializer.py: both records serialize to JSON through their __dict__.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProtocolTranscript:
    """
    Everything a counterpart needs to check a finished protocol run.
    Fields:
        range (int): Size of the sample space.
        commitment (str): Hex digest published before the counterpart chose.
        key (str): Revealed secret key, hex-encoded.
        committed_value (int): The committer's hidden value.
        counterpart_value (int): The counterpart's contribution.
        result (int): (committed_value + counterpart_value) mod range.
    """
    range: int
    commitment: str
    key: str
    committed_value: int
    counterpart_value: int
    result: int


@dataclass(frozen=True)
class RoundOutcome:
    """
    Result of one pair of rolls.
    Fields:
        user_roll (int): Face rolled on the user's die.
        computer_roll (int): Face rolled on the computer's die.
        winner (str): "user", "computer" or "draw".
    """
    user_roll: int
    computer_roll: int
    winner: str
