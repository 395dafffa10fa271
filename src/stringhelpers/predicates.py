"""
Predicates on strings.
"""

# relative
from .symbols import EMPTY
from .regex import REGEX_ALPHA, REGEX_NUMERIC, matches


# ---------------------------------------------------------------------------- #

def is_string(data):
    return isinstance(data, str)


def is_alpha(string):
    """Whether the string is non-empty and contains only ASCII letters."""
    return matches(REGEX_ALPHA, string)


def is_numeric(string):
    """
    Whether the string is non-empty and contains only the digits 1-9.

    Note that '0' is not considered numeric, so neither is any string that
    contains a zero, eg. '10'.
    """
    return matches(REGEX_NUMERIC, string)


def is_empty(string):
    return string == EMPTY


def is_blank(string=None):
    """Whether the string is either `None` or empty."""
    return string is None or is_empty(string)


def equals(string1, string2=None):
    """
    Test whether the two strings are equal once leading and trailing whitespace
    is stripped. Always False when `string2` is None.
    """
    if string2 is None:
        return False
    return string1.strip() == string2.strip()
