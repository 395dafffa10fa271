# third-party
import pytest

# local
import stringhelpers
from stringhelpers import helpers


# ---------------------------------------------------------------------------- #

@pytest.mark.parametrize(
    'alias, module',
    [('symbol', 'symbols'),
     ('helper', 'helpers'),
     ('comparator', 'compare'),
     ('parser', 'parsers')]
)
def test_aliases(alias, module):
    assert getattr(stringhelpers, alias) is getattr(stringhelpers, module)


@pytest.mark.parametrize('name', helpers.__all__)
def test_helper_exports(name):
    assert getattr(stringhelpers.helper, name) is getattr(stringhelpers, name)


def test_grouped_access():
    assert stringhelpers.helper.plainify('café') == 'cafe'
    assert stringhelpers.parser.parse_boolean('TRUE') is True
    assert stringhelpers.symbol.HASHTAG == '#'
    assert stringhelpers.regex.REGEX_NUMERIC.pattern == '[1-9]+'
    assert stringhelpers.comparator.NATURAL_ASC('a', 'b') < 0
