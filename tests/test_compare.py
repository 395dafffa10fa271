# std
import functools as ftl

# third-party
import pytest

# local
from stringhelpers.config import CONFIG
from stringhelpers.compare import (NATURAL_ASC, NATURAL_DESC, fold,
                                   natural_comparator, natural_key,
                                   natural_sorted)


# ---------------------------------------------------------------------------- #
WORDS = ['banana', 'Apple', 'éclair']


def sign(n):
    return (n > 0) - (n < 0)


# ---------------------------------------------------------------------------- #

def test_fold():
    assert fold('Éclair') == fold('ECLAIR') == 'eclair'


def test_sort_ascending():
    assert sorted(WORDS, key=ftl.cmp_to_key(NATURAL_ASC)) == \
        ['Apple', 'banana', 'éclair']


def test_sort_descending():
    assert sorted(WORDS, key=ftl.cmp_to_key(NATURAL_DESC)) == \
        ['éclair', 'banana', 'Apple']


def test_default_is_descending(monkeypatch):
    monkeypatch.setitem(CONFIG['compare'], 'order', 'desc')
    comparator = natural_comparator()
    assert comparator.order == 'desc'
    assert natural_sorted(WORDS) == ['éclair', 'banana', 'Apple']


def test_default_order_from_config(monkeypatch):
    monkeypatch.setitem(CONFIG['compare'], 'order', 'asc')
    assert natural_comparator().order == 'asc'
    assert natural_sorted(WORDS) == ['Apple', 'banana', 'éclair']


def test_stock_comparators_ignore_config(monkeypatch):
    monkeypatch.setitem(CONFIG['compare'], 'order', 'asc')
    assert NATURAL_DESC.order == 'desc'
    assert NATURAL_ASC.order == 'asc'


@pytest.mark.parametrize(
    'a, b',
    [('Éclair', 'eclair'),
     ('CAFÉ', 'cafe'),
     ('Ñandú', 'nandu'),
     ('', '')]
)
def test_folded_equal(a, b):
    assert NATURAL_ASC(a, b) == 0
    assert NATURAL_DESC(a, b) == 0


@pytest.mark.parametrize(
    'a, b',
    [('apple', 'banana'),
     ('Zebra', 'apple'),
     ('résumé', 'resume2'),
     ('a', 'aa')]
)
def test_antisymmetric(a, b):
    assert sign(NATURAL_ASC(a, b)) == -sign(NATURAL_ASC(b, a))
    assert sign(NATURAL_DESC(a, b)) == sign(NATURAL_ASC(b, a))


@pytest.mark.parametrize('order', ['asc', 'desc'])
def test_reflexive(order):
    comparator = natural_comparator(order)
    for word in WORDS:
        assert comparator(word, word) == 0


def test_transitive():
    words = ['delta', 'Alpha', 'charlie', 'Bravo', 'écho', 'foxtrot']
    ordered = natural_sorted(words, 'asc')
    assert ordered == ['Alpha', 'Bravo', 'charlie', 'delta', 'écho', 'foxtrot']
    for a, b, c in zip(ordered, ordered[1:], ordered[2:]):
        assert NATURAL_ASC(a, b) <= 0
        assert NATURAL_ASC(b, c) <= 0
        assert NATURAL_ASC(a, c) <= 0


def test_natural_key():
    assert sorted(WORDS, key=natural_key('asc')) == ['Apple', 'banana', 'éclair']


def test_locale_collation():
    comparator = natural_comparator('asc', 'locale')
    assert comparator('apple', 'banana') < 0
    assert comparator('Éclair', 'eclair') == 0
    assert natural_sorted(['b', 'a', 'c'], 'asc', 'locale') == ['a', 'b', 'c']


@pytest.mark.parametrize('order', ['ascending', 'up', 1, ''])
def test_invalid_order(order):
    with pytest.raises(ValueError):
        natural_comparator(order)


def test_invalid_collation():
    with pytest.raises(ValueError):
        natural_comparator('asc', 'icu')
