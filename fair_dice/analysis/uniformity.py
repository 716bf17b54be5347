"""
uniformity.py
Chi-square helpers for checking that sampled values are uniform over [0, range).
The critical value uses the Wilson-Hilferty approximation, so no statistics package is needed.
Related modules:
- sampler.py / dice.py / protocol.py: produce the samples being checked.
- scripts/run_fairness_check.py and tests/: call these helpers.
"""

import math
from collections import Counter
from typing import Dict, Iterable, List

# one-sided z-scores for common significance levels
Z_SCORES = {
    0.01: 2.326,
    0.001: 3.090,
    0.0001: 3.719,
}


def count_values(values: Iterable[int], range_: int) -> List[int]:
    """
    Count occurrences of each value in [0, range_).
    Args:
        values (iterable[int]): Sampled values.
        range_ (int): Size of the sample space.
    Returns:
        list[int]: counts[i] is how often i occurred.
    Raises:
        ValueError: If a value falls outside [0, range_).
    """
    counts = Counter(values)
    outside = [v for v in counts if not (0 <= v < range_)]
    if outside:
        raise ValueError(f"values outside [0, {range_}): {sorted(outside)[:5]}")
    return [counts.get(i, 0) for i in range(range_)]


def chi_square(counts: List[int]) -> float:
    """
    Pearson chi-square statistic of counts against a uniform expectation.
    """
    total = sum(counts)
    if total == 0 or len(counts) < 2:
        return 0.0
    expected = total / len(counts)
    return sum((c - expected) ** 2 / expected for c in counts)


def critical_value(df: int, alpha: float = 0.001) -> float:
    """
    Approximate upper critical value of the chi-square distribution (Wilson-Hilferty).
    Args:
        df (int): Degrees of freedom (>= 1).
        alpha (float): Significance level, one of Z_SCORES.
    Returns:
        float: Critical value; statistics above it reject uniformity at level alpha.
    """
    if df < 1:
        raise ValueError("df must be at least 1")
    if alpha not in Z_SCORES:
        raise ValueError(f"unsupported alpha {alpha}; choose from {sorted(Z_SCORES)}")
    z = Z_SCORES[alpha]
    h = 2.0 / (9.0 * df)
    return df * (1.0 - h + z * math.sqrt(h)) ** 3


def uniformity_report(values: Iterable[int], range_: int, alpha: float = 0.001) -> Dict[str, float]:
    """
    Run a chi-square uniformity check.
    Returns:
        dict: samples, chi_square, critical_value and passed.
    """
    counts = count_values(values, range_)
    stat = chi_square(counts)
    crit = critical_value(max(1, range_ - 1), alpha)
    return {
        "samples": sum(counts),
        "chi_square": stat,
        "critical_value": crit,
        "passed": stat <= crit,
    }


def face_report(rolls: Iterable[int], faces: Iterable[int], alpha: float = 0.001) -> Dict[str, float]:
    """
    Chi-square check of die rolls, weighting each distinct face by how often it appears on the die.
    Args:
        rolls (iterable[int]): Rolled faces.
        faces (iterable[int]): The die's faces, duplicates included.
    Returns:
        dict: samples, chi_square, critical_value, passed and missing (faces never rolled).
    """
    weights = Counter(faces)
    observed = Counter(rolls)
    unknown = [f for f in observed if f not in weights]
    if unknown:
        raise ValueError(f"rolled faces not on the die: {sorted(unknown)}")
    total = sum(observed.values())
    n_faces = sum(weights.values())
    stat = 0.0
    if total:
        for face, w in weights.items():
            expected = total * w / n_faces
            stat += (observed.get(face, 0) - expected) ** 2 / expected
    crit = critical_value(max(1, len(weights) - 1), alpha)
    return {
        "samples": total,
        "chi_square": stat,
        "critical_value": crit,
        "passed": stat <= crit,
        "missing": sorted(f for f in weights if f not in observed),
    }
