"""
engine.py
Implements FairDiceEngine, the non-interactive collaborator that wires the core together:
it runs the "who moves first" protocol and compares one pair of rolls. All prompting and printing
belongs to callers; the engine takes already-parsed integers and returns plain values.
Related modules:
- config.py: GameConfig supplies first_move_range, min_dice and the entropy settings.
- protocol.py: FairRandomProtocol decides the first mover.
- dice.py: Die rolls for each player.
- state.py: RoundOutcome is returned by play_round.
"""

import logging
from typing import Dict, Optional, Sequence, Union

from .commitment import CommitmentScheme
from .config import GameConfig
from .dice import Die
from .entropy import build_entropy_source
from .errors import IllegalMoveError, InvalidDieError
from .protocol import FairRandomProtocol
from .sampler import SecureRandomSampler
from .state import RoundOutcome

logger = logging.getLogger(__name__)

USER = "user"
COMPUTER = "computer"
DRAW = "draw"


class FairDiceEngine:
    """
    Holds the configured dice and a shared sampler; emits an event dict for every step.
    Args:
        dice (sequence[Die|sequence[int]]): Dice available to both players.
        config (GameConfig|None): Game configuration; defaults to GameConfig().
        sampler (SecureRandomSampler|None): Sampler for protocols and every die, including Die instances.
    Raises:
        InvalidDieError: If fewer than config.min_dice dice are given, or a face list is invalid.
    """
    def __init__(self, dice: Sequence[Union[Die, Sequence[int]]], config: Optional[GameConfig] = None,
                 sampler: Optional[SecureRandomSampler] = None):
        self.config = config if config is not None else GameConfig()
        if sampler is None:
            sampler = SecureRandomSampler(build_entropy_source(self.config), self.config.max_sample_attempts)
        self.sampler = sampler
        if len(dice) < self.config.min_dice:
            raise InvalidDieError(f"at least {self.config.min_dice} dice are required, got {len(dice)}")
        self.scheme = CommitmentScheme(self.sampler.source, self.config.key_size_bytes)
        # Die instances are re-bound so every roll goes through the engine sampler
        self.dice = [Die(d.faces if isinstance(d, Die) else d, sampler=self.sampler) for d in dice]
        self._events = []

    # Events are simple dicts, as in the protocol
    def _emit(self, event: Dict):
        self._events.append(event)

    def pop_events(self):
        """
        Return and clear all emitted events since last call.
        Returns:
            list[dict]: List of event dicts.
        """
        ev = list(self._events)
        self._events.clear()
        return ev

    def get_events(self):
        """
        Return all events emitted so far (does not clear).
        Returns:
            list[dict]: List of event dicts.
        """
        return list(self._events)

    def start_first_move_protocol(self) -> FairRandomProtocol:
        """
        Create the commit-reveal protocol that decides who moves first.
        The caller shows get_commitment() to the user before asking for their value.
        Returns:
            FairRandomProtocol: A fresh protocol over config.first_move_range.
        """
        protocol = FairRandomProtocol(self.config.first_move_range, sampler=self.sampler,
                                      scheme=self.scheme)
        self._emit({"type": "FirstMoveProtocolStarted", "range": protocol.range})
        return protocol

    def decide_first_mover(self, protocol: FairRandomProtocol, user_value: int) -> str:
        """
        Finalize the first-move protocol with the user's value.
        A result of 0 means the user moves first; for a range of 2 that is exactly
        "the user guessed the computer's bit".
        Args:
            protocol (FairRandomProtocol): Protocol whose commitment was already shown.
            user_value (int): The user's value in [0, range).
        Returns:
            str: "user" or "computer".
        """
        result = protocol.finalize(user_value)
        first = USER if result == 0 else COMPUTER
        self._emit({"type": "FirstMoverDecided", "result": result, "first": first,
                    "transcript": protocol.transcript()})
        logger.debug("first mover: %s (result %d)", first, result)
        return first

    def _die(self, index: int) -> Die:
        if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < len(self.dice)):
            raise IllegalMoveError(f"unknown die index: {index!r}")
        return self.dice[index]

    def play_round(self, user_index: int, computer_index: int) -> RoundOutcome:
        """
        Roll the selected dice once each and compare.
        Args:
            user_index (int): Index of the user's die.
            computer_index (int): Index of the computer's die.
        Returns:
            RoundOutcome: Both rolls and the winner ("user", "computer" or "draw").
        Raises:
            IllegalMoveError: If either index does not name a configured die.
        """
        user_die = self._die(user_index)
        computer_die = self._die(computer_index)
        user_roll = user_die.roll()
        computer_roll = computer_die.roll()
        if user_roll > computer_roll:
            winner = USER
        elif user_roll < computer_roll:
            winner = COMPUTER
        else:
            winner = DRAW
        outcome = RoundOutcome(user_roll=user_roll, computer_roll=computer_roll, winner=winner)
        self._emit({"type": "RoundEnded", "user_die": user_index, "computer_die": computer_index,
                    "user_roll": user_roll, "computer_roll": computer_roll, "winner": winner})
        logger.debug("round ended: %s", winner)
        return outcome
