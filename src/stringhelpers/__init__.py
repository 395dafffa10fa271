"""
Stateless helpers for everyday string wrangling: diacritic folding, natural
ordering, case conversion, padding and parsing.
"""

# std
from importlib.metadata import PackageNotFoundError, version

# third-party
from loguru import logger

# silence logging by default
logger.disable('stringhelpers')

# relative
from . import (casing, compare, config, helpers, parsers, predicates, regex,
               symbols, unicode)
from .unicode import normalize, plainify
from .parsers import parse_boolean
from .utils import extract_email_domain, pad, value_or_empty
from .predicates import (equals, is_alpha, is_blank, is_empty, is_numeric,
                         is_string)
from .casing import (camel_to_snake, capitalize, capitalize_each_word,
                     humanize, kebab_to_camel, snake_to_camel)
from .compare import (NATURAL_ASC, NATURAL_DESC, natural_comparator,
                      natural_key, natural_sorted)


# ---------------------------------------------------------------------------- #

# version
try:
    __version__ = version('stringhelpers')
except PackageNotFoundError:
    __version__ = '0.0.0'


# aliases
symbol = symbols
helper = helpers
comparator = compare
parser = parsers
