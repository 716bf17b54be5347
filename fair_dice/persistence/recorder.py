"""
recorder.py
Implements event recording for fair dice games. Stores a stream of GameEvent objects for audit or persistence.
InMemoryRecorder is used for tests and in-memory analysis.
Related modules:
- events.py: Defines GameEvent type.
- serializer.py: Used for saving/loading events.
"""

from typing import Iterable, List, Optional
from .events import GameEvent


class InMemoryRecorder:
    """
    Records GameEvent objects in memory for later retrieval.
    Methods:
        record(event): Add a new event.
        record_all(game_id, events): Wrap and add engine/protocol event dicts.
        events(event_type): Get recorded events, optionally filtered by type.
        flush(): No-op for in-memory; used in file/DB recorders.
    """
    def __init__(self):
        self._events: List[GameEvent] = []

    def record(self, event: GameEvent) -> None:
        """Add a new event to the recorder."""
        self._events.append(event)

    def record_all(self, game_id: str, events: Iterable[dict]) -> None:
        """Wrap each event dict as a GameEvent and record it."""
        for ev in events:
            self.record(GameEvent.from_engine(game_id, ev))

    def events(self, event_type: Optional[str] = None):
        """Return recorded events as a list, optionally only those of one type."""
        if event_type is None:
            return list(self._events)
        return [e for e in self._events if e.event_type == event_type]

    def flush(self):
        """No-op for in-memory recorder."""
        pass
