"""Exception hierarchy for honeycomb parsing and dictionary loading."""


class HoneycombError(Exception):
    """Base exception for solver input failures."""


class MalformedHoneycombError(HoneycombError, ValueError):
    """Raised when a honeycomb description does not match its declared layer count."""


class InvalidCharacterError(HoneycombError, ValueError):
    """Raised when a dictionary word contains a character outside A-Z."""

    def __init__(self, word: str, char: str, line_no: int | None = None):
        self.word = word
        self.char = char
        self.line_no = line_no
        where = f" on line {line_no}" if line_no is not None else ""
        super().__init__(f"Invalid character {char!r} in word {word!r}{where}")
