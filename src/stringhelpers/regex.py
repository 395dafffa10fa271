"""
Compiled patterns used by the string helpers.
"""

# std
import re


# Patterns
# ---------------------------------------------------------------------------- #

# strings containing only alpha characters. Explicit ASCII class, since
# `re.IGNORECASE` on `[a-z]` also admits 'ſ' and 'K' (KELVIN SIGN)
REGEX_ALPHA = re.compile(r'[A-Za-z]+')

# strings containing only numeric characters. NOTE: zero is excluded, so
# `is_numeric('10')` is False.
REGEX_NUMERIC = re.compile(r'[1-9]+')

# casing
REGEX_CAPS_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')
REGEX_SNAKE_JOIN = re.compile(r'(?!^)_(.)')
REGEX_KEBAB_JOIN = re.compile(r'-(.)')
REGEX_WORDS = re.compile(r'[A-Za-z][a-z]*|[0-9]+')

# email: everything between the last '@' and the last '.'
REGEX_EMAIL_DOMAIN = re.compile(r'.*@(.*)\..*')


# utils
# ---------------------------------------------------------------------------- #

def matches(pattern, string):
    """Whether the entire `string` matches the compiled `pattern`."""
    return pattern.fullmatch(string) is not None
