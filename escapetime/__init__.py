"""
Escape-time evaluation of the Mandelbrot set and parsing of delimited
coordinate pairs.
"""

from escapetime import config
from escapetime.logger import make_logger
from escapetime.errors import (EscapeTimeError, InvalidLimitError,
                               InvalidSeparatorError)
from escapetime.escape import INCONCLUSIVE, escape_time, escape_times
from escapetime.pairs import parse_complex, parse_pair

__version__ = '0.1.0'

__all__ = """
    EscapeTimeError
    INCONCLUSIVE
    InvalidLimitError
    InvalidSeparatorError
    escape_time
    escape_times
    parse_complex
    parse_pair
    test
    """.split()

make_logger()


def test(argv=None, **kwargs):
    """
    Run the escapetime test suite.  Returns True if all tests passed.
    """
    from escapetime.testing import run_tests
    result = run_tests(argv, **kwargs)
    return result.wasSuccessful()
