"""
Miscellaneous string utilities.
"""

# relative
from .config import CONFIG
from .symbols import EMPTY
from .predicates import is_blank
from .regex import REGEX_EMAIL_DOMAIN


# ---------------------------------------------------------------------------- #

def pad(string, width, char=None):
    """
    Pad `string` to contain at least `abs(width)` characters. Strings that are
    already long enough are returned unchanged (never truncated).

    Parameters
    ----------
    string : str
        The value to format.
    width : int
        The desired minimum number of characters. Negative values pad at the
        start of the string, positive values at the end.
    char : str, optional
        The padding character. Only the first character is used. The default
        is the `pad.char` config setting (an empty string, which means no
        padding is added unless overridden).

    Examples
    --------
    >>> pad('ab', 5, '0')
    'ab000'
    >>> pad('ab', -5, '0')
    '000ab'

    Returns
    -------
    str
        The formatted result.
    """
    size = abs(width)
    if size <= len(string):
        return string

    char = CONFIG.pad.char if char is None else char
    filler = str(char)[:1] * (size - len(string))
    return filler + string if width < 0 else string + filler


def value_or_empty(value=None):
    """
    Convert blank values (and `False`) to an empty string. Any other string is
    returned unaltered.
    """
    if value is False or is_blank(value):
        return EMPTY
    return value


def extract_email_domain(email):
    """
    Extract the domain name (without top level domain) from the given email
    address.

    >>> extract_email_domain('User@Example.com')
    'example'
    >>> extract_email_domain('user@mail.example.co.uk')
    'mail.example.co'
    """
    if match := REGEX_EMAIL_DOMAIN.search(email.lower()):
        return match[1]
