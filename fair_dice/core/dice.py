"""
dice.py
Defines the Die model and dice rolling utilities.
Each roll picks a face index with SecureRandomSampler, so arbitrary face lists roll without bias.
Related modules:
- sampler.py: supplies the face index.
- engine.py: rolls the user's and the computer's dice.
"""

from typing import Iterable, List, Optional, Tuple

from .errors import InvalidDieError
from .sampler import SecureRandomSampler


class Die:
    """
    An immutable, ordered list of integer faces (length >= 1).
    Args:
        faces (iterable[int]): Face values; duplicates are allowed.
        sampler (SecureRandomSampler|None): Sampler used by roll().
    Raises:
        InvalidDieError: If faces is empty or contains a non-integer.
    """
    def __init__(self, faces: Iterable[int], sampler: Optional[SecureRandomSampler] = None):
        faces = tuple(faces)
        if len(faces) == 0:
            raise InvalidDieError("a die needs at least one face")
        for face in faces:
            if isinstance(face, bool) or not isinstance(face, int):
                raise InvalidDieError(f"die faces must be integers, got {face!r}")
        self._faces = faces
        self._sampler = sampler if sampler is not None else SecureRandomSampler()

    @property
    def faces(self) -> Tuple[int, ...]:
        return self._faces

    def __len__(self) -> int:
        return len(self._faces)

    def __eq__(self, other):
        if not isinstance(other, Die):
            return NotImplemented
        return self._faces == other._faces

    def __hash__(self):
        return hash(self._faces)

    def __repr__(self):
        return f"Die({list(self._faces)})"

    def roll(self) -> int:
        """
        Roll the die once.
        Returns:
            int: A face chosen uniformly by index.
        """
        return self._faces[self._sampler.sample(len(self._faces))]


def roll_n(die: Die, n: int) -> List[int]:
    """
    Roll a die n times.
    Args:
        die (Die): Die to roll.
        n (int): Number of rolls.
    Returns:
        list[int]: Rolled faces.
    """
    return [die.roll() for _ in range(n)]


def parse_die(text: str, sampler: Optional[SecureRandomSampler] = None) -> Die:
    """
    Parse a comma-separated face list such as "2,2,4,4,9,9".
    Args:
        text (str): Face list.
        sampler (SecureRandomSampler|None): Sampler for the resulting die.
    Returns:
        Die: The parsed die.
    Raises:
        InvalidDieError: If any face is not an integer or the list is empty.
    """
    parts = [p.strip() for p in text.split(",")]
    try:
        faces = [int(p) for p in parts]
    except ValueError:
        raise InvalidDieError(f'invalid die format: "{text}"; faces must be integers')
    return Die(faces, sampler=sampler)
