# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Capability traits: the base classes a value type derives from to
declare how its instances are decoded from and/or encoded to
structured data.

Decoding traits (the subclass implements the `from_mapper()` class
method; the `decode()` class method is provided):

* `InMappable` -- `from_mapper()` gets an `InMapper` scoped to the
  class's `MappingKeys` enumeration;
* `BasicInMappable` -- `from_mapper()` gets a `BasicInMapper` (keys
  are plain strings);
* `InMappableWithContext` -- `from_mapper()` gets a `ContextualInMapper`
  carrying a context (an instance of the class's `MappingContext`, if
  the class specifies it).

Encoding traits (the subclass implements the `out_map()` method; the
`encode()` and `encode_into()` methods are provided): `OutMappable`,
`BasicOutMappable`, `OutMappableWithContext`.

A value type derives from the subset of traits it needs, e.g.:

>>> import enum
>>> from structmap.backends.native import NativeMap
>>> from structmap.index_path import MappingKey
>>> class Point(InMappable, OutMappable):
...     class MappingKeys(MappingKey, enum.Enum):
...         X = 'x'
...         Y = 'y'
...     def __init__(self, x, y):
...         self.x = x
...         self.y = y
...     @classmethod
...     def from_mapper(cls, mapper):
...         return cls(x=mapper.map(int, cls.MappingKeys.X),
...                    y=mapper.map(int, cls.MappingKeys.Y))
...     def out_map(self, mapper):
...         mapper.map(self.x, self.MappingKeys.X)
...         mapper.map(self.y, self.MappingKeys.Y)
...
>>> p = Point.decode(NativeMap({'x': 1, 'y': -2}))
>>> p.x, p.y
(1, -2)
>>> p.encode(NativeMap).value == {'x': 1, 'y': -2}
True

Also, there are two generic functions which accept any supported
target/value (including primitives): `decode_value()` and
`encode_value()`.
"""

import contextlib
import copy

from structmap.base_mapper import is_context_compatible
from structmap.common_helpers import (
    NOT_SPECIFIED,
    ascii_str,
    type_name,
)
from structmap.exceptions import MappingError
from structmap.in_mapper import (
    BasicInMapper,
    ContextualInMapper,
    InMapper,
    PlainInMapper,
)
from structmap.index_path import NoKeys
from structmap.log_helpers import get_logger
from structmap.out_mapper import (
    BasicOutMapper,
    ContextualOutMapper,
    OutMapper,
    PlainOutMapper,
)


LOGGER = get_logger(__name__)


@contextlib.contextmanager
def _logging_failure(operation, type_or_value):
    try:
        yield
    except MappingError as exc:
        LOGGER.debug('Could not %s %s: %s', operation, type_name(type_or_value), ascii_str(exc))
        raise


def _verify_context(mappable_class, context):
    if not is_context_compatible(mappable_class, context):
        raise TypeError('{!a} is not a context acceptable for {}'.format(
            context, type_name(mappable_class)))


#
# Decoding traits

class InMappable(object):

    MappingKeys = NoKeys

    in_mapper_class = InMapper

    @classmethod
    def from_mapper(cls, mapper):
        raise NotImplementedError

    @classmethod
    def decode(cls, source):
        """Decode an instance of the class from the given structured value."""
        with _logging_failure('decode', cls):
            return cls.from_mapper(cls.in_mapper_class.for_target(source, cls))


class BasicInMappable(InMappable):

    MappingKeys = str

    in_mapper_class = BasicInMapper


class InMappableWithContext(object):

    """
    A decoding trait of context-aware classes.

    The `MappingContext` class attribute can be set to a type (or a
    tuple of types) the contexts are required to be instances of.
    """

    MappingKeys = NoKeys
    MappingContext = None

    in_mapper_class = ContextualInMapper

    @classmethod
    def from_mapper(cls, mapper):
        raise NotImplementedError

    @classmethod
    def decode(cls, source, context):
        """
        Decode an instance of the class from the given structured value,
        in the given context.
        """
        _verify_context(cls, context)
        with _logging_failure('decode', cls):
            return cls.from_mapper(cls.in_mapper_class.for_target(source, cls, context))


#
# Encoding traits

class OutMappable(object):

    MappingKeys = NoKeys

    out_mapper_class = OutMapper

    def out_map(self, mapper):
        raise NotImplementedError

    def encode(self, map_class):
        """Encode this object as a new instance of `map_class`."""
        return self.encode_into(map_class.blank())

    def encode_into(self, destination):
        """
        Encode this object into a copy of the given structured value
        (which is left intact); return the copy.
        """
        destination = copy.deepcopy(destination)
        with _logging_failure('encode', self):
            self.out_map(self.out_mapper_class.for_target(destination, type(self)))
        return destination


class BasicOutMappable(OutMappable):

    MappingKeys = str

    out_mapper_class = BasicOutMapper


class OutMappableWithContext(object):

    """
    An encoding trait of context-aware classes (see also:
    `InMappableWithContext`).
    """

    MappingKeys = NoKeys
    MappingContext = None

    out_mapper_class = ContextualOutMapper

    def out_map(self, mapper):
        raise NotImplementedError

    def encode(self, map_class, context):
        """Encode this object, in the given context, as a new instance of `map_class`."""
        return self.encode_into(map_class.blank(), context)

    def encode_into(self, destination, context):
        """
        Encode this object, in the given context, into a copy of the
        given structured value (which is left intact); return the copy.
        """
        _verify_context(type(self), context)
        destination = copy.deepcopy(destination)
        with _logging_failure('encode', self):
            self.out_map(self.out_mapper_class.for_target(destination, type(self), context))
        return destination


#
# Generic functions

def decode_value(target, source, context=NOT_SPECIFIED):
    """
    Decode the given structured value as `target` (which can be anything
    that is accepted by the `map()` method of decode mappers, e.g., a
    primitive type, an enumeration or a mappable class).

    >>> from structmap.backends.native import NativeMap
    >>> decode_value(int, NativeMap(42))
    42
    >>> decode_value(str, NativeMap(42))
    Traceback (most recent call last):
      ...
    structmap.exceptions.InWrongTypeError: the value cannot be represented as string
    """
    with _logging_failure('decode', target):
        return PlainInMapper(source).map(target, context=context)


def encode_value(value, map_class, context=NOT_SPECIFIED, kind=None):
    """
    Encode the given value (anything that is accepted by the `map()`
    method of encode mappers) as a new instance of `map_class`.

    >>> from structmap.backends.native import NativeMap
    >>> encode_value(True, NativeMap).value
    True
    """
    destination = map_class.blank()
    with _logging_failure('encode', value):
        PlainOutMapper(destination).map(value, context=context, kind=kind)
    return destination
