import numbers
import sys
from functools import cached_property

import numpy as np

from .errors import InvalidWidthError
from .fragment import TextFragments
from .types import IntVector, LineSpans
from .wrap import wrap


def validate_width(line_width) -> int:
    """Return line_width as a plain int, or raise InvalidWidthError if it cannot serve as a line width."""
    if isinstance(line_width, bool) or not isinstance(line_width, numbers.Integral):
        raise InvalidWidthError(line_width)

    line_width = int(line_width)
    if not 0 <= line_width <= sys.maxsize:
        raise InvalidWidthError(line_width)

    return line_width


class TextColumn:
    def __init__(
        self,
        fragments: TextFragments,
        column_width: int,
    ):
        self.fragments = fragments
        self.column_width = validate_width(column_width)

    @cached_property
    def wrap(self) -> LineSpans:
        """Wraps the fragments given the column width.

        Returns a tuple of arrays containing the first fragment of each line and the fragment index one past the last.
        """
        fragment_breaks = wrap(self.fragments, self.column_width)
        return fragment_breaks[:-1], fragment_breaks[1:]

    def __len__(self) -> int:
        line_starts, _ = self.wrap
        return len(line_starts)

    def gaps(self, line: int, justify: bool = True) -> IntVector:
        """Number of spaces following each word on a line, such that the line is exactly as wide as the column.

        With justify the slack is spread over the gaps between words, each gap receiving an even share and the leftmost
        gaps one extra space each until the remainder is used up. A line holding a single word, or a line that is not
        justified, keeps single spaces between words and puts all remaining padding after the last word.
        """
        line_starts, line_ends = self.wrap
        a, b = line_starts[line], line_ends[line]
        k = b - a

        slack = self.column_width - int(self.fragments.widths[a:b].sum())

        gaps = np.zeros(k, dtype=np.int64)
        if k == 1 or not justify:
            gaps[:-1] = 1
            gaps[-1] = slack - (k - 1)
            return gaps

        even, extra = divmod(slack, k - 1)
        gaps[:-1] = even
        gaps[:extra] += 1
        return gaps

    def to_list(self, justify_last: bool = True) -> list[str]:
        """Breaks the text into justified lines.

        Returns a list of strings, each exactly as wide as the column. The last line is justified like all others
        unless justify_last is False, in which case it is left aligned and padded with trailing spaces.
        """
        line_starts, line_ends = self.wrap
        n = len(line_starts)
        get = self.fragments.get_fragment_str

        lines = []
        for line, (a, b) in enumerate(zip(line_starts.tolist(), line_ends.tolist())):
            gaps = self.gaps(line, justify=justify_last or line < n - 1)
            lines.append("".join(get(i) + " " * gap for i, gap in zip(range(a, b), gaps.tolist())))
        return lines

    def to_string(self, justify_last: bool = True) -> str:
        return "\n".join(self.to_list(justify_last=justify_last))
