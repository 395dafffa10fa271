"""
Special casing for strings.
"""

# relative
from .symbols import SPACE, UNDERSCORE
from .regex import (REGEX_CAPS_BOUNDARY, REGEX_KEBAB_JOIN, REGEX_SNAKE_JOIN,
                    REGEX_WORDS)


# ---------------------------------------------------------------------------- #

def _upper_group(match):
    return match[1].upper()


def camel_to_snake(string):
    """
    Convert a camel case string to snake case.

    >>> camel_to_snake('myVarName')
    'my_var_name'
    >>> camel_to_snake('HTTPCode')
    'h_t_t_p_code'
    """
    return REGEX_CAPS_BOUNDARY.sub(UNDERSCORE, string).lower()


def snake_to_camel(string):
    """
    Convert a snake case string to camel case. A leading underscore is kept.

    >>> snake_to_camel('my_var_name')
    'myVarName'
    >>> snake_to_camel('_private_name')
    '_privateName'
    """
    return REGEX_SNAKE_JOIN.sub(_upper_group, string)


def kebab_to_camel(string):
    """
    Convert a kebab case string to camel case.

    >>> kebab_to_camel('my-var-name')
    'myVarName'
    """
    return REGEX_KEBAB_JOIN.sub(_upper_group, string)


def humanize(string):
    """
    Split `string` into lower case words and numbers separated by single
    spaces. Anything that is neither a letter nor a digit is dropped.

    Parameters
    ----------
    string : str
        The string to humanize.

    Examples
    --------
    >>> humanize('myVarName2')
    'my var name 2'
    >>> humanize('snake_case-and-KEBAB')
    'snake case and k e b a b'

    Returns
    -------
    str
        Space separated words.
    """
    return SPACE.join(word.lower() for word in REGEX_WORDS.findall(string))


def capitalize(string):
    """Upper case the first character, lower case the rest."""
    return string[:1].upper() + string[1:].lower()


def capitalize_each_word(string):
    """
    Capitalize each space separated word.

    >>> capitalize_each_word('hELLO  wORLD')
    'Hello  World'
    """
    return SPACE.join(map(capitalize, string.split(SPACE)))
