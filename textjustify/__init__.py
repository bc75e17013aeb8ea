from .errors import InvalidWidthError, JustifyError, WordTooLongError
from .fragment import TextFragmenter, TextFragments
from .justify import justify_lines, transform
from .text import TextColumn
from .wrap import wrap

__all__ = [
    "InvalidWidthError",
    "JustifyError",
    "TextColumn",
    "TextFragmenter",
    "TextFragments",
    "WordTooLongError",
    "justify_lines",
    "transform",
    "wrap",
]
