# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
The decode engine: *in mappers*, i.e., objects that read typed values
from a structured data value (an `InMap`-compliant object, see:
`structmap.interfaces`).

An in mapper is a short-lived object created (by the machinery of
`structmap.mappable`) for each decoded mappable object and passed to
its `from_mapper()` class method, which reads the object's fields by
calling the mapper's methods:

* `map(target, *index_path, context=NOT_SPECIFIED)` -- read one value;
* `map_array(target, *index_path, context=NOT_SPECIFIED)` -- read an
  array of values;
* `map_optional()`, `map_array_optional()` -- the same as above, but
  `None` is returned if there is no value at the given index path.

The `target` argument specifies what should be obtained; it can be:

* a Python primitive type (`int`, `float`, `bool` or `str`) or a
  `structmap.structured_data.ScalarKind` member;
* an `enum.Enum` subclass (the structured value is expected to be the
  raw value of one of its members);
* a mappable class (see: `structmap.mappable`), e.g., an
  `InMappable` subclass -- then the structured (sub)value is decoded
  with a new mapper, scoped to that class's own keys.

The keys that constitute the `index_path` must be of the mapper's
`key_type` (either the `MappingKeys` enumeration of the decoded class,
or `str` in the case of basic mappers).

The mapper classes:

* `InMapper` -- keys are members of a `MappingKey` enumeration;
* `BasicInMapper` -- keys are plain strings;
* `ContextualInMapper` -- keys are members of a `MappingKey`
  enumeration; the mapper carries a *context* (which is, by default,
  passed on when decoding nested context-aware classes).

There are also two factories of mappers that accept only the empty
index path (i.e., those bound to `structmap.index_path.NoKeys`):
`PlainInMapper()` and `PlainContextualInMapper()`.
"""

from structmap.base_mapper import (
    BaseMapper,
    get_mapper_class,
)
from structmap.class_helpers import attr_repr
from structmap.common_helpers import NOT_SPECIFIED
from structmap.exceptions import (
    CannotRepresentAsArrayError,
    MappingError,
    NoValueError,
)
from structmap.index_path import (
    NoKeys,
    index_path_segments,
)
from structmap.interfaces import (
    Context,
    IndexPath,
    InMap,
)
from structmap.primitives import (
    decode_raw_value,
    decode_scalar,
    is_raw_value_type,
)
from structmap.structured_data import ScalarKind


class _BaseInMapper(BaseMapper):

    def __init__(self, source, key_type):
        # type: (InMap, type) -> None
        super(_BaseInMapper, self).__init__(key_type)
        self._source = source

    __repr__ = attr_repr('source', 'key_type')

    @property
    def source(self):
        return self._source

    def map(self, target, *index_path, context=NOT_SPECIFIED):
        """
        Decode the value at the given index path as `target`.

        Raises:
            `NoValueError` if there is no value at the index path;
            other `InMapperError` subclasses if the value cannot be
            decoded as `target`; `TypeError` if `target` (or `context`)
            is not supported.
        """
        decoder = self._get_decoder(target, context)
        index_path = self._make_index_path(index_path)
        value = self._get_value(index_path)
        with MappingError.sublocation(*index_path_segments(index_path)):
            return decoder(value)

    def map_array(self, target, *index_path, context=NOT_SPECIFIED):
        """
        Decode the array at the given index path as a list of `target`
        instances.

        The first item that cannot be decoded makes the whole operation
        fail (with that item's error; its array index is included in
        the error's location path).
        """
        decoder = self._get_decoder(target, context)
        index_path = self._make_index_path(index_path)
        value = self._get_value(index_path)
        with MappingError.sublocation(*index_path_segments(index_path)):
            return self._decode_array(decoder, value)

    def map_optional(self, target, *index_path, context=NOT_SPECIFIED):
        """
        Like `map()`, but return `None` if there is no value at the
        given index path.
        """
        decoder = self._get_decoder(target, context)
        index_path = self._make_index_path(index_path)
        value = self._source.get_at(index_path)
        if value is None:
            return None
        with MappingError.sublocation(*index_path_segments(index_path)):
            return decoder(value)

    def map_array_optional(self, target, *index_path, context=NOT_SPECIFIED):
        """
        Like `map_array()`, but return `None` if there is no value at
        the given index path.
        """
        decoder = self._get_decoder(target, context)
        index_path = self._make_index_path(index_path)
        value = self._source.get_at(index_path)
        if value is None:
            return None
        with MappingError.sublocation(*index_path_segments(index_path)):
            return self._decode_array(decoder, value)

    def _get_value(self, index_path):
        # type: (IndexPath) -> InMap
        value = self._source.get_at(index_path)
        if value is None:
            raise NoValueError(index_path)
        return value

    @staticmethod
    def _decode_array(decoder, value):
        items = value.as_array()
        if items is None:
            raise CannotRepresentAsArrayError()
        result = []
        for i, item in enumerate(items):
            with MappingError.sublocation(i):
                result.append(decoder(item))
        return result

    def _get_decoder(self, target, context):
        kind = ScalarKind.for_type(target)
        if kind is not None:
            self._verify_no_context(target, context)
            return lambda value: decode_scalar(kind, value)
        if is_raw_value_type(target):
            self._verify_no_context(target, context)
            return lambda value: decode_raw_value(target, value)
        mapper_class = get_mapper_class(target, 'in_mapper_class')
        if mapper_class is not None:
            context = self._resolve_context(target, mapper_class, context)
            return lambda value: target.from_mapper(
                mapper_class.for_target(value, target, context))
        raise TypeError('{!a} is not a supported decoding target'.format(target))


class InMapper(_BaseInMapper):

    """
    The decode mapper whose keys are members of a `MappingKey`
    enumeration.

    >>> import enum
    >>> from structmap.backends.native import NativeMap
    >>> from structmap.index_path import MappingKey
    >>> class Keys(MappingKey, enum.Enum):
    ...     NAME = 'name'
    ...     TAGS = 'tags'
    ...
    >>> mapper = InMapper(NativeMap({'name': 'Bob', 'tags': ['a', 'b']}), Keys)
    >>> mapper.map(str, Keys.NAME)
    'Bob'
    >>> mapper.map_array(str, Keys.TAGS)
    ['a', 'b']
    >>> mapper.map(int, Keys.NAME)
    Traceback (most recent call last):
      ...
    structmap.exceptions.InWrongTypeError: [name] the value cannot be represented as int
    >>> mapper.map('name', str)
    Traceback (most recent call last):
      ...
    TypeError: 'name' is not a supported decoding target
    """

    def __init__(self, source, key_type=NoKeys):
        super(InMapper, self).__init__(source, key_type)

    @classmethod
    def for_target(cls, source, target, context=NOT_SPECIFIED):
        # type: (InMap, type, Context) -> _BaseInMapper
        return cls(source, target.MappingKeys)


class BasicInMapper(_BaseInMapper):

    """
    The decode mapper whose keys are plain strings.

    >>> from structmap.backends.native import NativeMap
    >>> mapper = BasicInMapper(NativeMap({'nest': {'int': 7}}))
    >>> mapper.map(int, 'nest', 'int')
    7
    >>> mapper.map_optional(int, 'nest', 'float') is None
    True
    """

    def __init__(self, source):
        super(BasicInMapper, self).__init__(source, str)

    __repr__ = attr_repr('source')

    @classmethod
    def for_target(cls, source, target, context=NOT_SPECIFIED):
        # type: (InMap, type, Context) -> _BaseInMapper
        return cls(source)


class ContextualInMapper(_BaseInMapper):

    """
    The decode mapper whose keys are members of a `MappingKey`
    enumeration, and which carries a context.

    When the target of `map()` (or of any other mapping method) is a
    context-aware mappable class and no `context` argument is given,
    the mapper's own context is passed on -- provided that it is
    compatible with that class's `MappingContext` (otherwise
    `TypeError` is raised).
    """

    is_contextual = True

    def __init__(self, source, context, key_type=NoKeys):
        super(ContextualInMapper, self).__init__(source, key_type)
        self._context = context

    __repr__ = attr_repr('source', 'key_type', 'context')

    @property
    def context(self):
        return self._context

    @classmethod
    def for_target(cls, source, target, context=NOT_SPECIFIED):
        # type: (InMap, type, Context) -> _BaseInMapper
        return cls(source, context, target.MappingKeys)


def PlainInMapper(source):
    """
    Make an `InMapper` that accepts only the empty index path (so that
    it can map only the whole `source`).

    >>> from structmap.backends.native import NativeMap
    >>> PlainInMapper(NativeMap(3.5)).map(float)
    3.5
    """
    return InMapper(source, NoKeys)


def PlainContextualInMapper(source, context):
    """
    Make a `ContextualInMapper` that accepts only the empty index path.
    """
    return ContextualInMapper(source, context, NoKeys)
