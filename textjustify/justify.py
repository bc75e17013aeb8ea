import logging

from .fragment import TextFragmenter
from .text import TextColumn, validate_width

logger = logging.getLogger(__name__)


def justify_lines(text: str, line_width: int, justify_last: bool = True) -> list[str]:
    """Fully justify text into lines of exactly line_width characters.

    Words are separated by the space character only; runs of spaces collapse. Lines are filled greedily and the slack
    of every line is spread across its gaps, with the leftmost gaps widened first when it does not divide evenly. A
    line with a single word is padded on the right.

    Raises InvalidWidthError for a width that is not a non-negative integer and WordTooLongError for a word that is not
    strictly shorter than line_width.
    """
    line_width = validate_width(line_width)

    fragments = TextFragmenter()(text)
    column = TextColumn(fragments, column_width=line_width)
    lines = column.to_list(justify_last=justify_last)
    logger.debug("Justified %d lines at width %d", len(lines), line_width)
    return lines


def transform(text: str, line_width: int, justify_last: bool = True) -> str:
    """Fully justify text, returning the lines joined by newlines without a trailing newline.

    >>> transform("test", 5)
    'test '
    >>> transform("Lorem     ipsum    dolor", 17)
    'Lorem ipsum dolor'
    """
    return "\n".join(justify_lines(text, line_width, justify_last=justify_last))
