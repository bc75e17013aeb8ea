import logging
import re
from typing import Callable

import numpy as np

from .measure import scalar_measure
from .types import IntVector, Span

logger = logging.getLogger(__name__)

re_words = re.compile(r"[^ ]+")  # only the ASCII space separates words, runs of spaces collapse


def word_splitter(s: str) -> list[Span]:
    return [m.span() for m in re_words.finditer(s)]


class TextFragmenter:
    def __init__(
            self,
            splitter: Callable[[str], list[Span]] = None,
    ):
        if splitter is None:
            splitter = word_splitter

        self.splitter = splitter

    def __call__(self, text: str) -> "TextFragments":
        n = len(text)

        widths = scalar_measure(text)

        spans = np.array(self.splitter(text), dtype=np.int64).reshape(-1, 2).T
        start = spans[0]
        end = spans[1]

        if np.any(end <= start) or np.any(start[1:] < end[:-1]) or np.any(end > n):
            raise ValueError("Spans must be non-empty, ordered, non-overlapping and lie within the text.")

        cwidths = np.zeros(n + 1, dtype=np.int64)
        cwidths[1:] = widths.cumsum()
        fragment_widths = cwidths[end] - cwidths[start]

        logger.debug("Split %d characters into %d fragments", n, len(start))

        return TextFragments(
            text=text,
            starts=start,
            ends=end,
            widths=fragment_widths,
        )


class TextFragments:
    """
    A fragment is one word of the input text: a maximal run of non-space characters. Fragments are kept as start and
    end offsets into the original text together with their width, so the words themselves are only sliced out once a
    line is assembled.
    """

    text: str

    starts: IntVector  # Start indices of each fragment in the text
    ends: IntVector  # End indices of each fragment in the text
    widths: IntVector  # Width of each fragment

    def __init__(
        self,
        text: str,
        starts: IntVector,
        ends: IntVector,
        widths: IntVector,
    ):
        self.text = text
        self.starts = starts
        self.ends = ends
        self.widths = widths

    def __len__(self) -> int:
        return len(self.widths)

    def get_fragment_str(self, i: int) -> str:
        """Helper function to get the text representation of the i-th fragment."""
        return self.text[self.starts[i]: self.ends[i]]
