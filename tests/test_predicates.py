# local
from stringhelpers.testing import Expected, mock
from stringhelpers.predicates import (equals, is_alpha, is_blank, is_empty,
                                      is_numeric, is_string)


# ---------------------------------------------------------------------------- #
test_is_alpha = Expected(is_alpha)({
    'abc':          True,
    'ABCdef':       True,
    '':             False,
    'abc1':         False,
    'ab cd':        False,
    'café':         False,
    'abc\n':        False,
    # KELVIN SIGN folds to 'k' under unicode case-insensitive matching
    '\u212a':  False,
})

test_is_numeric = Expected(is_numeric)({
    '123':          True,
    '9':            True,
    '0':            False,
    '10':           False,
    '':             False,
    '1.5':          False,
    '-1':           False,
    '12a':          False,
})

test_is_empty = Expected(is_empty)({
    '':             True,
    ' ':            False,
    'a':            False,
})

test_is_blank = Expected(is_blank)({
    mock.is_blank():        True,
    None:                   True,
    '':                     True,
    ' ':                    False,
    'text':                 False,
})

test_is_string = Expected(is_string)({
    'text':         True,
    '':             True,
    b'bytes':       False,
    1:              False,
    None:           False,
})

test_equals = Expected(equals)({
    ('abc', 'abc'):             True,
    ('  abc ', 'abc\t'):        True,
    ('abc', 'ABC'):             False,
    ('abc', None):              False,
    mock.equals('abc'):         False,
    ('', '   '):                True,
})
