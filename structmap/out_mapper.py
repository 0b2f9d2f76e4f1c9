# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
The encode engine: *out mappers*, i.e., objects that write typed values
into a structured data value (an `OutMap`-compliant object, see:
`structmap.interfaces`).

An out mapper is a short-lived object created (by the machinery of
`structmap.mappable`) for each encoded mappable object and passed to
its `out_map()` method, which writes the object's fields by calling the
mapper's methods:

* `map(value, *index_path, context=NOT_SPECIFIED, kind=None)` -- write
  one value;
* `map_array(values, *index_path, context=NOT_SPECIFIED, kind=None)`
  -- write an array of values.

If the given value is `None`, nothing is written ("absent means
untouched"). Otherwise the value can be:

* a Python primitive (`int`, `float`, `bool` or `str`) -- by default
  written as the structured counterpart of its canonical kind; another
  `structmap.structured_data.ScalarKind` can be specified as `kind`
  (e.g., `kind=ScalarKind.UINT8`);
* an `enum.Enum` member -- its raw value is written;
* an instance of a mappable class (see: `structmap.mappable`) -- it is
  encoded into a new blank structured value, with a new mapper scoped
  to that class's own keys, and then written.

The mapper classes (`OutMapper`, `BasicOutMapper`,
`ContextualOutMapper`) and factories (`PlainOutMapper()`,
`PlainContextualOutMapper()`) mirror those defined in
`structmap.in_mapper`.

Note: only the empty index path and one-segment index paths are
supported when writing (a longer one causes a `CannotSetError` whose
`cause` is a `DeepSetUnsupportedError`).
"""

import enum
from typing import Optional

from structmap.base_mapper import (
    BaseMapper,
    get_mapper_class,
)
from structmap.class_helpers import attr_repr
from structmap.common_helpers import NOT_SPECIFIED
from structmap.exceptions import (
    CannotRepresentArrayError,
    CannotSetError,
    MappingError,
    OutMapError,
    OutWrongTypeError,
)
from structmap.index_path import (
    NoKeys,
    index_path_segments,
)
from structmap.interfaces import (
    Context,
    IndexPath,
    OutMap,
)
from structmap.primitives import (
    make_raw_value,
    make_scalar,
)
from structmap.structured_data import ScalarKind


class _BaseOutMapper(BaseMapper):

    def __init__(self, destination, key_type):
        # type: (OutMap, type) -> None
        super(_BaseOutMapper, self).__init__(key_type)
        self._destination = destination

    __repr__ = attr_repr('destination', 'key_type')

    @property
    def destination(self):
        return self._destination

    def map(self, value, *index_path, context=NOT_SPECIFIED, kind=None):
        """
        Encode the given value and write it at the given index path.

        Raises:
            `OutWrongTypeError` if the value cannot be represented
            by the destination's structured data type;
            `CannotSetError` if the destination rejects the write;
            `TypeError` if the value is a mappable object whose class
            does not accept the given (or ambient) `context`.
        """
        index_path = self._make_index_path(index_path)
        with MappingError.sublocation(*index_path_segments(index_path)):
            if value is None:
                mapped = None
            else:
                mapped = self._encode_item(value, context, kind)
            self._set(mapped, index_path)

    def map_array(self, values, *index_path, context=NOT_SPECIFIED, kind=None):
        """
        Encode the given values as an array and write it at the given
        index path.

        Raises (apart from the exceptions `map()` may raise):
            `CannotRepresentArrayError` if the destination's structured
            data type cannot represent arrays.
        """
        index_path = self._make_index_path(index_path)
        with MappingError.sublocation(*index_path_segments(index_path)):
            if values is None:
                mapped = None
            else:
                items = []
                for i, value in enumerate(values):
                    with MappingError.sublocation(i):
                        items.append(self._encode_item(value, context, kind))
                mapped = self._map_class.from_array(items)
                if mapped is None:
                    raise CannotRepresentArrayError()
            self._set(mapped, index_path)

    @property
    def _map_class(self):
        return type(self._destination)

    def _set(self, mapped, index_path):
        # type: (Optional[OutMap], IndexPath) -> None
        try:
            self._destination.set_at(mapped, index_path)
        except OutMapError as exc:
            raise CannotSetError(exc) from exc

    def _encode_item(self, value, context, kind):
        if isinstance(value, enum.Enum):
            self._verify_no_context(type(value), context)
            self._verify_no_kind(value, kind)
            return make_raw_value(value, self._map_class)
        mappable_class = type(value)
        mapper_class = get_mapper_class(mappable_class, 'out_mapper_class')
        if mapper_class is not None:
            self._verify_no_kind(value, kind)
            context = self._resolve_context(mappable_class, mapper_class, context)
            mapper = mapper_class.for_target(self._map_class.blank(), mappable_class, context)
            value.out_map(mapper)
            return mapper.destination
        if ScalarKind.of_value(value) is not None:
            self._verify_no_context(mappable_class, context)
            return make_scalar(value, self._map_class, kind)
        raise OutWrongTypeError(mappable_class)

    @staticmethod
    def _verify_no_kind(value, kind):
        if kind is not None:
            raise TypeError('the `kind` argument is applicable only to scalar '
                            'values (got: {!a})'.format(value))


class OutMapper(_BaseOutMapper):

    """
    The encode mapper whose keys are members of a `MappingKey`
    enumeration.

    >>> import enum
    >>> from structmap.backends.native import NativeMap
    >>> from structmap.index_path import MappingKey
    >>> class Keys(MappingKey, enum.Enum):
    ...     NAME = 'name'
    ...     TAGS = 'tags'
    ...     AGE = 'age'
    ...
    >>> mapper = OutMapper(NativeMap.blank(), Keys)
    >>> mapper.map('Bob', Keys.NAME)
    >>> mapper.map_array(['a', 'b'], Keys.TAGS)
    >>> mapper.map(None, Keys.AGE)
    >>> mapper.destination.value == {'name': 'Bob', 'tags': ['a', 'b']}
    True
    >>> mapper.map(object(), Keys.AGE)
    Traceback (most recent call last):
      ...
    structmap.exceptions.OutWrongTypeError: [age] the structured data type cannot represent object
    """

    def __init__(self, destination, key_type=NoKeys):
        super(OutMapper, self).__init__(destination, key_type)

    @classmethod
    def for_target(cls, destination, target, context=NOT_SPECIFIED):
        # type: (OutMap, type, Context) -> _BaseOutMapper
        return cls(destination, target.MappingKeys)


class BasicOutMapper(_BaseOutMapper):

    """
    The encode mapper whose keys are plain strings.

    >>> from structmap.backends.native import NativeMap
    >>> mapper = BasicOutMapper(NativeMap.blank())
    >>> mapper.map(7, 'int')
    >>> mapper.map(7, 'nest', 'int')
    Traceback (most recent call last):
      ...
    structmap.exceptions.CannotSetError: [nest.int] cannot set the value (setting a value at a multi-segment index path ("nest.int") is not supported)
    >>> mapper.destination.value
    {'int': 7}
    """

    def __init__(self, destination):
        super(BasicOutMapper, self).__init__(destination, str)

    __repr__ = attr_repr('destination')

    @classmethod
    def for_target(cls, destination, target, context=NOT_SPECIFIED):
        # type: (OutMap, type, Context) -> _BaseOutMapper
        return cls(destination)


class ContextualOutMapper(_BaseOutMapper):

    """
    The encode mapper whose keys are members of a `MappingKey`
    enumeration, and which carries a context (passed on, by default,
    when encoding nested context-aware objects -- provided that it is
    compatible with their classes' `MappingContext`).
    """

    is_contextual = True

    def __init__(self, destination, context, key_type=NoKeys):
        super(ContextualOutMapper, self).__init__(destination, key_type)
        self._context = context

    __repr__ = attr_repr('destination', 'key_type', 'context')

    @property
    def context(self):
        return self._context

    @classmethod
    def for_target(cls, destination, target, context=NOT_SPECIFIED):
        # type: (OutMap, type, Context) -> _BaseOutMapper
        return cls(destination, context, target.MappingKeys)


def PlainOutMapper(destination):
    """
    Make an `OutMapper` that accepts only the empty index path (so that
    it can only replace the whole `destination`).

    >>> from structmap.backends.native import NativeMap
    >>> mapper = PlainOutMapper(NativeMap.blank())
    >>> mapper.map(3.5)
    >>> mapper.destination.value
    3.5
    """
    return OutMapper(destination, NoKeys)


def PlainContextualOutMapper(destination, context):
    """
    Make a `ContextualOutMapper` that accepts only the empty index path.
    """
    return ContextualOutMapper(destination, context, NoKeys)
