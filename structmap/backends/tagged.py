# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
A JSON-like tagged-union structured data type.

>>> value = TaggedMap.from_python({'name': 'Bob', 'tags': ['a', 'b']})
>>> value.kind
<TaggedKind.OBJECT: 'object'>
>>> value.get_at((MappingIndex('name'),))
<TaggedMap kind=<TaggedKind.STRING: 'string'>, payload='Bob'>
>>> value.to_python() == {'name': 'Bob', 'tags': ['a', 'b']}
True
"""

import collections.abc as collections_abc
import enum

from structmap.class_helpers import attr_repr
from structmap.common_helpers import type_name
from structmap.exceptions import IncompatibleShapeError
from structmap.index_path import MappingIndex
from structmap.structured_data import (
    BaseInMap,
    BaseOutMap,
)


class TaggedKind(enum.Enum):

    INT = 'int'
    DOUBLE = 'double'
    STRING = 'string'
    BOOL = 'bool'
    ARRAY = 'array'
    OBJECT = 'object'

    def __repr__(self):
        return '<{}.{}: {!r}>'.format(type(self).__qualname__, self.name, self.value)


class TaggedMap(BaseInMap, BaseOutMap):

    """
    A structured data value being a (`kind`, `payload`) pair, where
    `payload` is:

    * for the `INT`, `DOUBLE`, `STRING` and `BOOL` kinds: the respective
      Python scalar;
    * for `ARRAY`: a list of `TaggedMap` instances;
    * for `OBJECT`: a dict that maps strings to `TaggedMap` instances.

    The scalar accessors match the kind exactly (in particular,
    `as_double()` returns `None` for an `INT` value).

    >>> TaggedMap.from_int(3).as_int()
    3
    >>> TaggedMap.from_int(3).as_double() is None
    True
    >>> TaggedMap.from_int(3).set_at_index(TaggedMap.from_int(4), MappingIndex('x'))
    Traceback (most recent call last):
      ...
    structmap.exceptions.IncompatibleShapeError: the value is not of a shape that accepts keyed writes
    """

    def __init__(self, kind, payload):
        if not isinstance(kind, TaggedKind):
            raise TypeError('{!a} is not a TaggedKind'.format(kind))
        self.kind = kind
        self.payload = payload

    __repr__ = attr_repr('kind', 'payload')

    def __eq__(self, other):
        if isinstance(other, TaggedMap):
            return (self.kind, self.payload) == (other.kind, other.payload)
        return NotImplemented

    __hash__ = None

    @classmethod
    def from_python(cls, obj):
        """
        Convert a plain Python object (a JSON-like tree) to a `TaggedMap`.

        >>> TaggedMap.from_python([1, 2.0, True])
        <TaggedMap kind=<TaggedKind.ARRAY: 'array'>, payload=[<TaggedMap kind=<TaggedKind.INT: 'int'>, payload=1>, <TaggedMap kind=<TaggedKind.DOUBLE: 'double'>, payload=2.0>, <TaggedMap kind=<TaggedKind.BOOL: 'bool'>, payload=True>]>
        >>> TaggedMap.from_python({1: 2})
        Traceback (most recent call last):
          ...
        TypeError: object keys must be strings (got: 1)
        >>> TaggedMap.from_python(None)
        Traceback (most recent call last):
          ...
        TypeError: cannot convert an object of type NoneType to a TaggedMap
        """
        if isinstance(obj, bool):
            return cls(TaggedKind.BOOL, obj)
        if isinstance(obj, int):
            return cls(TaggedKind.INT, obj)
        if isinstance(obj, float):
            return cls(TaggedKind.DOUBLE, obj)
        if isinstance(obj, str):
            return cls(TaggedKind.STRING, obj)
        if isinstance(obj, (list, tuple)):
            return cls(TaggedKind.ARRAY, [cls.from_python(item) for item in obj])
        if isinstance(obj, collections_abc.Mapping):
            payload = {}
            for key, item in obj.items():
                if not isinstance(key, str):
                    raise TypeError('object keys must be strings (got: {!a})'.format(key))
                payload[key] = cls.from_python(item)
            return cls(TaggedKind.OBJECT, payload)
        raise TypeError('cannot convert an object of type {} to a {}'.format(
            type_name(obj), cls.__qualname__))

    def to_python(self):
        if self.kind is TaggedKind.ARRAY:
            return [item.to_python() for item in self.payload]
        if self.kind is TaggedKind.OBJECT:
            return {key: item.to_python() for key, item in self.payload.items()}
        return self.payload

    #
    # Readable side

    def get_at_index(self, index):
        if self.kind is TaggedKind.OBJECT:
            return self.payload.get(index.raw_value)
        return None

    def as_array(self):
        if self.kind is TaggedKind.ARRAY:
            return list(self.payload)
        return None

    def as_int(self):
        return self._get_payload_if(TaggedKind.INT)

    def as_double(self):
        return self._get_payload_if(TaggedKind.DOUBLE)

    def as_bool(self):
        return self._get_payload_if(TaggedKind.BOOL)

    def as_string(self):
        return self._get_payload_if(TaggedKind.STRING)

    def _get_payload_if(self, kind):
        return self.payload if self.kind is kind else None

    #
    # Writable side

    @classmethod
    def blank(cls):
        return cls(TaggedKind.OBJECT, {})

    def set_at_index(self, value, index):
        if value is None:
            return
        if self.kind is not TaggedKind.OBJECT:
            raise IncompatibleShapeError()
        self.payload[index.raw_value] = value

    @classmethod
    def from_array(cls, items):
        return cls(TaggedKind.ARRAY, list(items))

    @classmethod
    def from_int(cls, value):
        return cls(TaggedKind.INT, value)

    @classmethod
    def from_double(cls, value):
        return cls(TaggedKind.DOUBLE, value)

    @classmethod
    def from_bool(cls, value):
        return cls(TaggedKind.BOOL, value)

    @classmethod
    def from_string(cls, value):
        return cls(TaggedKind.STRING, value)
