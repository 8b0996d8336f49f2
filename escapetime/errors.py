"""
Exceptions raised for misuse of the escapetime API.

Inconclusive membership and parse failures are ordinary return values
(``None``) and never show up here.
"""

__all__ = ["EscapeTimeError", "InvalidLimitError", "InvalidSeparatorError"]


class EscapeTimeError(Exception):
    "Base class for all escapetime errors"


class InvalidLimitError(EscapeTimeError, ValueError):
    "Raised when an iteration limit is not a non-negative integer"

    def __init__(self, limit):
        self.limit = limit
        super().__init__(limit)

    def __str__(self):
        return ("iteration limit must be a non-negative integer, got %r"
                % (self.limit,))


class InvalidSeparatorError(EscapeTimeError, ValueError):
    "Raised when a pair separator is not a single character"

    def __init__(self, separator):
        self.separator = separator
        super().__init__(separator)

    def __str__(self):
        return "separator must be a single character, got %r" % (
            self.separator,)
