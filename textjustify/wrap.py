"""Greedy line breaking.

Words are packed onto the current line for as long as the line, with a single space between consecutive words, stays
within the target width. The first word that would overflow closes the line and opens the next one. Unlike an optimal
fit the result depends only on the words seen so far, so the text is traversed exactly once.
"""
import logging

import numpy as np

from .errors import WordTooLongError
from .fragment import TextFragments
from .types import IntVector

logger = logging.getLogger(__name__)

SPACE_WIDTH = 1


def wrap(fragments: TextFragments, line_width: int) -> IntVector:
    """Wrap the fragments into lines no wider than line_width.

    Returns the fragment indices at which lines start, followed by the total number of fragments, such that line j
    consists of fragments breaks[j] up to (but excluding) breaks[j + 1]. Text without fragments has no lines.

    Every fragment must be strictly narrower than line_width, leaving room for at least one unit of padding.
    """
    breaks = [0]
    width = 0  # minimal width of the current line, words joined by single spaces

    for i, fragment_width in enumerate(fragments.widths.tolist()):
        if fragment_width >= line_width:
            word = fragments.get_fragment_str(i)
            logger.debug("Rejecting fragment %d of width %d for line width %d", i, fragment_width, line_width)
            raise WordTooLongError(word, fragment_width, line_width)

        candidate = width + fragment_width + (SPACE_WIDTH if i > breaks[-1] else 0)
        if candidate > line_width:
            breaks.append(i)
            candidate = fragment_width

        width = candidate

    if len(fragments):
        breaks.append(len(fragments))

    logger.debug("Wrapped %d fragments into %d lines", len(fragments), len(breaks) - 1)
    return np.array(breaks, dtype=np.int64)
