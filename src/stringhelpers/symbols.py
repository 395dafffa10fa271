"""
Symbolic string constants.
"""

EMPTY = ''
FORWARD_SLASH = '/'
HASHTAG = '#'
SPACE = ' '
UNDERSCORE = '_'
MINUS = '-'
PLUS = '+'
DOT = '.'
COLON = ':'
WILDCARD = '*'
PERCENTAGE = '%'
COMMA = ','

# units
UNIT_NORMAL_METRIC = 'Nm'
UNIT_MASS = 'g/m²'
UNIT_WEIGHT = 'g'
