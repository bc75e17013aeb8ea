import numpy as np

from .types import IntVector


def scalar_measure(s: str) -> IntVector:
    """Width of each character of s, one unit per Unicode scalar value.

    Python strings index by code point, so wide CJK glyphs and combining marks each count as a single unit.
    """
    return np.ones(len(s), dtype=np.int64)
