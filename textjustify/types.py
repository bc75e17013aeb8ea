from typing import TypeAlias, TypeVar

import numpy as np

T = TypeVar("T")

Vector: TypeAlias = np.ndarray[tuple[int, ...], np.dtype[T]]  # type: ignore[type-var]
IntVector: TypeAlias = Vector[np.int64]

Span: TypeAlias = tuple[int, int]

LineSpans: TypeAlias = tuple[
    IntVector,  # first fragment of each line
    IntVector,  # one past the last fragment of each line
]
