"""
Package configuration. Defaults ship with the package in `config.yaml` and can
be overridden key-by-key from a file of the same name in the user config
folder.
"""

# std
from pathlib import Path
from collections import abc

# third-party
import yaml
from loguru import logger
from platformdirs import user_config_path


# ---------------------------------------------------------------------------- #
PACKAGE = 'stringhelpers'
FILENAME = 'config.yaml'
DEFAULTS = Path(__file__).parent / FILENAME

CACHE = {}

# allowed values for settings with a fixed set of choices
CHOICES = {
    'compare': {'order':      ('asc', 'desc'),
                'collation':  ('uca', 'locale')}
}


# ---------------------------------------------------------------------------- #

def user_config_file():
    """Path to the (possibly non-existent) user config file."""
    return user_config_path(PACKAGE) / FILENAME


# Load
# ---------------------------------------------------------------------------- #

def load_yaml(filename):
    with filename.open('r') as file:
        return yaml.safe_load(file) or {}


CONFIG_PARSERS = {
    'yaml': load_yaml,
    'yml': load_yaml,
}


def load(filename):
    filename = Path(filename)
    if filename not in CACHE:
        CACHE[filename] = _load(filename)

    return CACHE[filename]


def _load(filename):
    if not filename.exists():
        raise FileNotFoundError(f"Non-existent file: '{filename!s}'")

    fmt = filename.suffix.lstrip('.')
    if fmt not in CONFIG_PARSERS:
        raise ValueError(f'Unsupported config format {fmt!r} for file: '
                         f"'{filename!s}'")

    logger.debug("Loading config file: '{!s}'.", filename)
    return CONFIG_PARSERS[fmt](filename)


def merge(base, override):
    """
    Recursively merge mapping `override` into a copy of `base`. Nested mappings
    are merged key-by-key, all other values in `override` replace those in
    `base`.
    """
    merged = dict(base)
    for key, val in override.items():
        if isinstance(val, abc.Mapping) and isinstance(merged.get(key), abc.Mapping):
            val = merge(merged[key], val)
        merged[key] = val
    return merged


def validate(config, defaults):
    """
    Check `config` against the shipped `defaults`. Sections that are not
    mappings, values outside the allowed `CHOICES`, and values of a different
    type than the default are replaced by the default, with a warning.
    """
    valid = dict(config)
    for section, default in defaults.items():
        current = valid.get(section)
        if not isinstance(current, abc.Mapping):
            logger.warning('Invalid config section {!r}: {!r}. Using defaults: '
                           '{}.', section, current, default)
            valid[section] = dict(default)
            continue

        current = dict(current)
        for key, fallback in default.items():
            value = current.get(key, fallback)
            choices = CHOICES.get(section, {}).get(key)
            if (value not in choices) if choices else \
                    not isinstance(value, type(fallback)):
                logger.warning('Invalid config value {}.{} = {!r}. Using '
                               'default: {!r}.', section, key, value, fallback)
                value = fallback
            current[key] = value

        valid[section] = current

    return valid


# Node
# ---------------------------------------------------------------------------- #

class ConfigNode(dict):
    """
    Dictionary with item read access through attribute lookup. Nested mappings
    are converted to `ConfigNode`s.

    >>> node = ConfigNode({'pad': {'char': '0'}})
    >>> node.pad.char
    '0'
    """

    @classmethod
    def load(cls, filename=None, defaults=DEFAULTS):
        assert filename or defaults
        config = load(defaults) if defaults else {}
        if not (filename and Path(filename).exists()):
            return cls(config)

        logger.info("Found user config file for package {!r} at '{!s}'.",
                    PACKAGE, filename)
        try:
            user = load(filename)
        except yaml.YAMLError as err:
            logger.warning("Could not parse user config file '{!s}': {}. "
                           'Using defaults.', filename, err)
            return cls(config)

        if not isinstance(user, abc.Mapping):
            logger.warning("User config file '{!s}' does not contain a mapping. "
                           'Using defaults.', filename)
            return cls(config)

        return cls(validate(merge(config, user), config))

    def __init__(self, *args, **kws):
        super().__init__(*args, **kws)
        for key, val in list(self.items()):
            if isinstance(val, abc.Mapping) and not isinstance(val, ConfigNode):
                self[key] = type(self)(val)

    def __getattr__(self, key):
        """
        Try to get the value in the dict associated with key `key`. If `key`
        is not a key in the dict, try get the attribute from the parent class.
        """
        return self[key] if key in self else super().__getattribute__(key)


# ---------------------------------------------------------------------------- #
CONFIG = ConfigNode.load(user_config_file())
