"""
Folding accented Latin characters into their plain ASCII brothers.
"""

# std
from types import MappingProxyType

# relative
from .symbols import EMPTY


# ---------------------------------------------------------------------------- #
_SPECIALS = {
    # a
    'á': 'a',
    'à': 'a',
    'â': 'a',
    'æ': 'a',
    'ª': 'a',
    'ä': 'a',
    'ã': 'a',
    'å': 'a',
    'ā': 'a',
    # c
    'ç': 'c',
    'ć': 'c',
    'č': 'c',
    # e
    'é': 'e',
    'è': 'e',
    'ê': 'e',
    'ë': 'e',
    'ę': 'e',
    'ė': 'e',
    'ē': 'e',
    # i
    'î': 'i',
    'ï': 'i',
    'ì': 'i',
    'í': 'i',
    'į': 'i',
    'ī': 'i',
    # n
    'ñ': 'n',
    'ń': 'n',
    # o
    'ô': 'o',
    'œ': 'o',
    'º': 'o',
    'ö': 'o',
    'ò': 'o',
    'ó': 'o',
    'õ': 'o',
    'ø': 'o',
    # u
    'û': 'u',
    'ù': 'u',
    'ü': 'u',
    'ú': 'u',
    'ū': 'u',
    # y
    'ÿ': 'y',
}

# add the upper case forms. The ordinal indicators 'ª' and 'º' are caseless.
SPECIALS_TO_PLAIN = MappingProxyType({
    **_SPECIALS,
    **{special.upper(): plain.upper()
       for special, plain in _SPECIALS.items()
       if special.upper() != special}
})


# ---------------------------------------------------------------------------- #

def plainify(string):
    """
    Plainify the given string, converting every special character into its
    plain brother. Characters that are not in `SPECIALS_TO_PLAIN` are left
    untouched, so the result always has the same length as the input.

    Parameters
    ----------
    string : str
        The string to convert.

    Examples
    --------
    >>> plainify('Crème brûlée')
    'Creme brulee'
    >>> plainify('ÀÉÎ')
    'AEI'
    >>> plainify('Ωmega')
    'Ωmega'

    Returns
    -------
    str
        The plainified string.
    """
    return EMPTY.join(SPECIALS_TO_PLAIN.get(char, char) for char in string)


# alias
normalize = plainify
