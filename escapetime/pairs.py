"""
Parsing of delimited pairs such as ``"400x600"`` or ``"1.0,0.5"``.
"""

from escapetime.errors import InvalidSeparatorError


# Exceptions meaning "this text is not a valid T".  decimal.Decimal raises
# InvalidOperation, an ArithmeticError.
_PARSE_ERRORS = (ValueError, ArithmeticError)


def parse_pair(s, separator, ty=int):
    """
    Parse the string *s* as a pair, like ``"400x600"`` or ``"1.0,0.5"``.

    *s* should have the form ``<left><sep><right>``, where ``<sep>`` is the
    character given by *separator* and ``<left>`` and ``<right>`` are both
    strings that ``ty(text)`` accepts.  Only the first occurrence of the
    separator splits the string.

    If *s* has the proper form, return ``(ty(left), ty(right))``.  If it
    doesn't parse correctly, return None.
    """
    if not isinstance(s, str):
        raise TypeError("expected a str, got %s" % type(s).__name__)
    if not isinstance(separator, str) or len(separator) != 1:
        raise InvalidSeparatorError(separator)

    index = s.find(separator)
    if index < 0:
        return None
    try:
        left = ty(s[:index])
        right = ty(s[index + 1:])
    except _PARSE_ERRORS:
        return None
    return left, right


def parse_complex(s):
    """
    Parse a pair of floating-point numbers separated by a comma as a
    complex number, e.g. ``"1.25,-0.0625"``.  Return None on failure.
    """
    pair = parse_pair(s, ',', float)
    if pair is None:
        return None
    real, imag = pair
    return complex(real, imag)
