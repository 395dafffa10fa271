"""
The everyday string helpers gathered in one namespace.
"""

# relative
from .unicode import plainify
from .utils import extract_email_domain, pad, value_or_empty
from .predicates import (equals, is_alpha, is_blank, is_empty, is_numeric,
                         is_string)
from .casing import (camel_to_snake, capitalize, capitalize_each_word,
                     humanize, kebab_to_camel, snake_to_camel)


__all__ = ['plainify', 'is_string', 'snake_to_camel', 'kebab_to_camel',
           'camel_to_snake', 'humanize', 'is_alpha', 'is_numeric', 'equals',
           'value_or_empty', 'pad', 'is_empty', 'is_blank',
           'extract_email_domain', 'capitalize', 'capitalize_each_word']
