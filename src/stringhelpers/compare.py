"""
Natural (human reading order) string comparison.

Both operands are folded to lower case and plainified before being collated,
so that 'Éclair', 'eclair' and 'ECLAIR' compare equal and sort next to each
other. Two collation backends are available:

    uca     The Unicode Collation Algorithm with the default DUCET table (via
            `pyuca`). This gives the same ordering on every platform and is
            the default.
    locale  `locale.strcoll` under the current LC_COLLATE of the process. The
            ordering depends on the platform's collation tables and on the
            locale set by the application (this module never calls
            `locale.setlocale`).

The backend is chosen by the `compare.collation` config setting.
"""

# std
import locale
import functools as ftl

# third-party
from loguru import logger

# relative
from .config import CONFIG
from .unicode import plainify


# ---------------------------------------------------------------------------- #
ORDERS = ('asc', 'desc')


# ---------------------------------------------------------------------------- #

@ftl.lru_cache()
def _uca_collator():
    # building the collator parses the full DUCET table, so do it once
    from pyuca import Collator

    logger.debug('Building UCA collator.')
    return Collator()


def _cmp(a, b):
    return (a > b) - (a < b)


def collate_uca(a, b):
    key = _uca_collator().sort_key
    return _cmp(key(a), key(b))


def collate_locale(a, b):
    return _cmp(locale.strcoll(a, b), 0)


COLLATORS = {
    'uca': collate_uca,
    'locale': collate_locale
}


def resolve_collator(name=None):
    name = CONFIG.compare.collation if name is None else name
    if name not in COLLATORS:
        raise ValueError(f'Unknown collation backend {name!r}. Valid choices '
                         f'are: {tuple(COLLATORS)}.')
    return COLLATORS[name]


def resolve_order(order=None):
    order = CONFIG.compare.order if order is None else order
    if order not in ORDERS:
        raise ValueError(f'Invalid sort order {order!r}. Should be one of: '
                         f'{ORDERS}.')
    return order


# ---------------------------------------------------------------------------- #

def fold(string):
    """Fold case and diacritics of `string` for comparison."""
    return plainify(string.lower())


def natural_comparator(order=None, collation=None):
    """
    Get a natural string comparator function in the given order.

    Parameters
    ----------
    order : {'asc', 'desc'}, optional
        The order of the result. The default (None) uses the `compare.order`
        config setting, which is 'desc' unless overridden by the user.
    collation : {'uca', 'locale'}, optional
        Collation backend. The default (None) uses the `compare.collation`
        config setting.

    Examples
    --------
    >>> from functools import cmp_to_key
    >>> sorted(['banana', 'Apple', 'éclair'],
    ...        key=cmp_to_key(natural_comparator('asc')))
    ['Apple', 'banana', 'éclair']

    Returns
    -------
    callable
        A comparator `(a, b) -> int` returning a negative number, zero or a
        positive number when `a` sorts before, together with, or after `b`.

    Raises
    ------
    ValueError
        If `order` or `collation` is invalid.
    """
    order = resolve_order(order)
    collate = resolve_collator(collation)
    logger.debug('Creating natural comparator: order={!r}, collation={!r}.',
                 order, collate.__name__)

    if order == 'asc':
        def comparator(a, b):
            return collate(fold(a), fold(b))
    else:
        def comparator(a, b):
            return collate(fold(b), fold(a))

    comparator.order = order
    return comparator


def natural_key(order=None, collation=None):
    """Key function for `sorted` / `list.sort` built from `natural_comparator`."""
    return ftl.cmp_to_key(natural_comparator(order, collation))


def natural_sorted(items, order=None, collation=None):
    """Return a new list of strings in `items` in natural order."""
    return sorted(items, key=natural_key(order, collation))


# ---------------------------------------------------------------------------- #
# stock comparators

NATURAL_ASC = natural_comparator('asc')
NATURAL_DESC = natural_comparator('desc')
