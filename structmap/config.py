# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Settings that influence how structured data values coerce scalars.

A `MapperConfig` can be created directly (with keyword arguments) or
loaded from the `[structmap]` section of an ini file, e.g.:

    [structmap]
    int_from_integral_float = yes
    double_from_int = yes
    fixed_width_overflow = error

>>> config = MapperConfig(fixed_width_overflow='error')
>>> config.fixed_width_overflow
'error'
>>> config.int_from_integral_float
False
>>> MapperConfig() == DEFAULT_CONFIG
True
"""

import configparser
import os

from structmap.class_helpers import attr_repr
from structmap.common_helpers import ascii_str
from structmap.log_helpers import get_logger


LOGGER = get_logger(__name__)


CONFIG_SECTION_NAME = 'structmap'
CONFIG_PATH_ENV_VAR = 'STRUCTMAP_CONFIG'

FIXED_WIDTH_OVERFLOW_POLICIES = ('truncate', 'error')


class ConfigError(Exception):

    """
    A generic, `MapperConfig`-related, exception class.

    >>> print(ConfigError('Some Message'))
    [configuration-related error] Some Message
    """

    def __str__(self):
        return '[configuration-related error] ' + super().__str__()


def _str_to_bool(s):
    try:
        return configparser.ConfigParser.BOOLEAN_STATES[s.strip().lower()]
    except KeyError:
        raise ValueError('{!a} is not a valid boolean value'.format(s)) from None


def _str_to_overflow_policy(s):
    s = s.strip().lower()
    if s not in FIXED_WIDTH_OVERFLOW_POLICIES:
        raise ValueError('{!a} is not one of: {}'.format(
            s, ', '.join(FIXED_WIDTH_OVERFLOW_POLICIES)))
    return s


class MapperConfig(object):

    """
    An immutable collection of scalar coercion settings.

    Options:

    * `int_from_integral_float` (default: False) -- whether a backend
      should accept a float with an integral value (such as `42.0`)
      where an integer is requested;
    * `double_from_int` (default: True) -- whether a backend should
      accept an integer where a double is requested;
    * `fixed_width_overflow` (default: 'truncate') -- what the default
      fixed-width integer accessors do with out-of-range values:
      'truncate' keeps the low-order bits (two's complement), 'error'
      makes the accessor report that the value cannot be represented.

    >>> MapperConfig(spam=True)
    Traceback (most recent call last):
      ...
    structmap.config.ConfigError: [configuration-related error] unknown option(s): spam

    >>> MapperConfig(fixed_width_overflow='wrap')
    Traceback (most recent call last):
      ...
    structmap.config.ConfigError: [configuration-related error] illegal value of fixed_width_overflow: 'wrap'

    >>> MapperConfig().double_from_int = False
    Traceback (most recent call last):
      ...
    AttributeError: MapperConfig instances are immutable
    """

    DEFAULTS = {
        'int_from_integral_float': False,
        'double_from_int': True,
        'fixed_width_overflow': 'truncate',
    }

    _OPTION_CONVERTERS = {
        'int_from_integral_float': _str_to_bool,
        'double_from_int': _str_to_bool,
        'fixed_width_overflow': _str_to_overflow_policy,
    }

    def __init__(self, **settings):
        unknown = sorted(set(settings).difference(self.DEFAULTS))
        if unknown:
            raise ConfigError('unknown option(s): {}'.format(', '.join(unknown)))
        values = dict(self.DEFAULTS, **settings)
        for opt_name, value in values.items():
            self._verify_value(opt_name, value)
            object.__setattr__(self, opt_name, value)

    @staticmethod
    def _verify_value(opt_name, value):
        if opt_name == 'fixed_width_overflow':
            ok = value in FIXED_WIDTH_OVERFLOW_POLICIES
        else:
            ok = isinstance(value, bool)
        if not ok:
            raise ConfigError('illegal value of {}: {!a}'.format(opt_name, value))

    def __setattr__(self, name, value):
        raise AttributeError('{} instances are immutable'.format(type(self).__qualname__))

    def __eq__(self, other):
        if isinstance(other, MapperConfig):
            return self.as_dict() == other.as_dict()
        return NotImplemented

    def __hash__(self):
        return hash(tuple(sorted(self.as_dict().items())))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    __repr__ = attr_repr(*sorted(DEFAULTS))

    def as_dict(self):
        return {opt_name: getattr(self, opt_name) for opt_name in self.DEFAULTS}

    @classmethod
    def from_file(cls, path, **overrides):
        """
        Load settings from the `[structmap]` section of the given ini
        file (if the section is absent, the defaults are used).

        Keyword arguments, if any, take precedence over the settings
        read from the file.
        """
        parser = configparser.ConfigParser()
        try:
            with open(path, encoding='utf-8') as f:
                parser.read_file(f)
        except (OSError, configparser.Error) as exc:
            raise ConfigError('cannot read config file {!a} ({})'.format(
                path, ascii_str(exc))) from exc
        settings = {}
        if parser.has_section(CONFIG_SECTION_NAME):
            for opt_name, raw_value in parser.items(CONFIG_SECTION_NAME):
                converter = cls._OPTION_CONVERTERS.get(opt_name)
                if converter is None:
                    raise ConfigError('unknown option in section [{}] of {!a}: {}'.format(
                        CONFIG_SECTION_NAME, path, opt_name))
                try:
                    settings[opt_name] = converter(raw_value)
                except ValueError as exc:
                    raise ConfigError('error when converting option {} in {!a} ({})'.format(
                        opt_name, path, ascii_str(exc))) from exc
        LOGGER.info('Config file read properly: %a', path)
        settings.update(overrides)
        return cls(**settings)

    @classmethod
    def from_env(cls, **overrides):
        """
        Load settings from the file whose path is specified by the
        `STRUCTMAP_CONFIG` environment variable (if the variable is not
        set, the defaults are used).
        """
        path = os.environ.get(CONFIG_PATH_ENV_VAR)
        if not path:
            return cls(**overrides)
        if not os.path.isfile(path):
            LOGGER.warning('The %s environment variable points to %a which '
                           'is not a readable file', CONFIG_PATH_ENV_VAR, path)
        return cls.from_file(path, **overrides)


DEFAULT_CONFIG = MapperConfig()
