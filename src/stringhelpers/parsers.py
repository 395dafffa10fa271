"""
Parsing values from strings.
"""

# std
import json

# third-party
from loguru import logger


# ---------------------------------------------------------------------------- #

def parse_boolean(string=None):
    """
    Extract a boolean value from the given string. The comparison is case
    insensitive, so 'true', 'True' and 'TRUE' all give `True`.

    Parameters
    ----------
    string : str, optional
        The boolean-string to parse.

    Examples
    --------
    >>> parse_boolean('False')
    False
    >>> parse_boolean('yes') is None
    True

    Returns
    -------
    bool or None
        The boolean value corresponding to the given string. None if the input
        is None or empty, or if it is not a JSON boolean literal.
    """
    if not string:
        return

    try:
        value = json.loads(string.lower())
    except (ValueError, RecursionError):
        # JSONDecodeError, over-long integer literals and deep nesting
        logger.debug('Could not parse {!r:.50} as boolean.', string)
        return

    if isinstance(value, bool):
        return value

    logger.debug('Parsed {!r} as non-boolean value of type {!r}.',
                 string, type(value).__name__)
