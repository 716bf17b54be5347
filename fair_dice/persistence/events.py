"""
events.py
Defines the GameEvent dataclass for recording protocol runs and rounds.
Used by recorder.py and the fairness script to keep engine events for replay, audit, or persistence.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class GameEvent:
    """
    Represents a single recorded event (e.g., commitment published, first mover decided, round ended).
    Fields:
        game_id (str): Unique game identifier.
        event_type (str): Type of event (e.g., 'Committed').
        payload (dict): Event-specific data.
        actor (str|None): 'user' or 'computer' when the event belongs to one side.
    """
    game_id: str
    event_type: str
    payload: Dict[str, Any]
    actor: Optional[str] = None

    @classmethod
    def from_engine(cls, game_id: str, event: Dict[str, Any], actor: Optional[str] = None) -> "GameEvent":
        """
        Wrap an event dict emitted by the engine or a protocol.
        """
        payload = {k: v for k, v in event.items() if k != "type"}
        return cls(game_id=game_id, event_type=event["type"], payload=payload, actor=actor)
