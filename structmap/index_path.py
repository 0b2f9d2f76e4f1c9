# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Index paths: the addressing scheme of structured data values.

An *index path* is a tuple of `MappingIndex` objects, each wrapping one
string path segment. Mappers accept *keys*, i.e., objects that can be
rendered as exactly one `MappingIndex`:

* plain `str` objects (accepted by the *basic* mappers);
* members of `MappingKey` enumerations (accepted by the mappers scoped
  to that enumeration);
* `MappingIndex` objects themselves.

>>> class Keys(MappingKey, enum.Enum):
...     INT = 'int'
...     NEST = 'nest'
...
>>> Keys.NEST.index
MappingIndex('nest')
>>> make_index_path([Keys.NEST, Keys.INT], Keys)
(MappingIndex('nest'), MappingIndex('int'))
>>> make_index_path(['nest', 'int'], str)
(MappingIndex('nest'), MappingIndex('int'))
>>> make_index_path([], NoKeys)
()
"""

import enum

from structmap.common_helpers import ascii_str


class MappingIndex(object):

    """
    A single path segment (an immutable and hashable value object).

    >>> MappingIndex('spam') == MappingIndex('spam')
    True
    >>> MappingIndex('spam') == MappingIndex('ham')
    False
    >>> len({MappingIndex('spam'), MappingIndex('spam')})
    1
    >>> MappingIndex('spam').raw_value
    'spam'
    >>> MappingIndex(42)
    Traceback (most recent call last):
      ...
    TypeError: a mapping index must be a str (got: 42)
    """

    __slots__ = ('_raw_value',)

    def __init__(self, raw_value):
        if not isinstance(raw_value, str):
            raise TypeError('a mapping index must be a str (got: {})'.format(
                ascii_str(raw_value)))
        object.__setattr__(self, '_raw_value', raw_value)

    @property
    def raw_value(self):
        return self._raw_value

    def __setattr__(self, name, value):
        raise AttributeError('{} instances are immutable'.format(type(self).__qualname__))

    def __eq__(self, other):
        if isinstance(other, MappingIndex):
            return self._raw_value == other._raw_value
        return NotImplemented

    def __hash__(self):
        return hash((MappingIndex, self._raw_value))

    def __repr__(self):
        return '{}({!r})'.format(type(self).__qualname__, self._raw_value)

    def __reduce__(self):
        return (MappingIndex, (self._raw_value,))


class MappingKey(object):

    """
    A mix-in for key enumerations.

    To be used as the first base of an `enum.Enum` subclass whose
    member values are strings (the path segments):

    >>> class Keys(MappingKey, enum.Enum):
    ...     ORANGE_INT = 'orange-int'
    ...
    >>> Keys.ORANGE_INT.index
    MappingIndex('orange-int')

    >>> class BadKeys(MappingKey, enum.Enum):
    ...     FOO = 1
    ...
    >>> BadKeys.FOO.index
    Traceback (most recent call last):
      ...
    TypeError: the value of the key BadKeys.FOO is not a str (got: 1)
    """

    @property
    def index(self):
        value = self.value
        if not isinstance(value, str):
            raise TypeError('the value of the key {}.{} is not a str (got: {})'.format(
                type(self).__qualname__, self.name, ascii_str(value)))
        return MappingIndex(value)


class NoKeys(MappingKey, enum.Enum):

    """
    The key enumeration without any members: a mapper scoped to it
    accepts only the empty index path (i.e., it can operate only on
    the whole structured value).

    >>> list(NoKeys)
    []
    """


def as_index(key):
    """
    Render the given key as a `MappingIndex`.

    >>> as_index('spam')
    MappingIndex('spam')
    >>> as_index(MappingIndex('ham'))
    MappingIndex('ham')
    >>> as_index(3)
    Traceback (most recent call last):
      ...
    TypeError: 3 is not a valid mapping key
    """
    if isinstance(key, MappingIndex):
        return key
    if isinstance(key, MappingKey):
        return key.index
    if isinstance(key, str):
        return MappingIndex(key)
    raise TypeError('{} is not a valid mapping key'.format(ascii_str(key)))


def make_index_path(keys, key_type):
    """
    Convert the given keys to an index path (a tuple of `MappingIndex`),
    verifying that each of them is an instance of `key_type`.

    Args:
        `keys`:
            An iterable of keys.
        `key_type`:
            `str` (for basic mappers) or a `MappingKey` enumeration.

    Returns:
        A tuple of `MappingIndex` instances.

    Raises:
        `TypeError` if any of the keys is not an instance of `key_type`
        (this is a programming error, not a mapping failure).

    >>> class Keys(MappingKey, enum.Enum):
    ...     INT = 'int'
    ...
    >>> make_index_path(['int'], Keys)
    Traceback (most recent call last):
      ...
    TypeError: 'int' is not a key of type Keys
    >>> make_index_path([Keys.INT], NoKeys)
    Traceback (most recent call last):
      ...
    TypeError: <Keys.INT: 'int'> is not a key of type NoKeys
    """
    index_path = []
    for key in keys:
        if not isinstance(key, key_type):
            raise TypeError('{!a} is not a key of type {}'.format(
                key, key_type.__qualname__))
        index_path.append(as_index(key))
    return tuple(index_path)


def index_path_segments(index_path):
    """
    Get the raw string values of the given index path's segments.

    >>> index_path_segments((MappingIndex('nests'), MappingIndex('int')))
    ('nests', 'int')
    """
    return tuple(index.raw_value for index in index_path)
