class JustifyError(ValueError):
    """Base class for input that cannot be justified."""


class InvalidWidthError(JustifyError):
    def __init__(self, line_width):
        self.line_width = line_width
        super().__init__(f"Line width must be a non-negative integer no larger than sys.maxsize, got {line_width!r}")


class WordTooLongError(JustifyError):
    """A word does not fit on a line of its own with at least one unit of padding."""

    def __init__(self, word: str, width: int, line_width: int):
        self.word = word
        self.width = width
        self.line_width = line_width
        super().__init__(
            f"Word {word!r} is {width} characters long, it must be shorter than the line width of {line_width}"
        )
