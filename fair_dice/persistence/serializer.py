"""
serializer.py
Provides utility functions for serializing and deserializing events and transcripts to/from JSON.
Used by recorder.py consumers and the fairness script to save/load data for audit.
"""

import json
from typing import Any

from fair_dice.core.state import ProtocolTranscript


def dumps(obj: Any) -> str:
    """
    Serialize a Python object (including dataclasses) to a JSON string.
    Args:
        obj: Object to serialize.
    Returns:
        str: JSON string.
    """
    return json.dumps(obj, default=lambda o: getattr(o, '__dict__', str(o)))


def loads(s: str):
    """
    Deserialize a JSON string to a Python object (dict/list).
    Args:
        s (str): JSON string.
    Returns:
        object: Deserialized Python object.
    """
    return json.loads(s)


def load_transcript(s: str) -> ProtocolTranscript:
    """
    Rebuild a ProtocolTranscript from its JSON form, so a stored run can be verified later.
    """
    return ProtocolTranscript(**loads(s))
