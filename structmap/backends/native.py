# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
A structured data backend over plain Python objects: mappings (objects),
lists/tuples (arrays), `int`, `float`, `bool` and `str` (scalars).

>>> source = NativeMap.from_json('{"name": "Bob", "scores": [1, 2.5]}')
>>> source.get_at_index(MappingIndex('name')).as_string()
'Bob'
>>> [item.as_double() for item in source.get_at_index(MappingIndex('scores')).as_array()]
[1.0, 2.5]
>>> source.get_at_index(MappingIndex('spam')) is None
True

Note: `None` (JSON `null`) is treated as an absent value.
"""

import collections.abc as collections_abc
import json

from structmap.class_helpers import attr_repr
from structmap.common_helpers import NOT_SPECIFIED
from structmap.config import DEFAULT_CONFIG
from structmap.exceptions import (
    IncompatibleShapeError,
    OutWrongTypeError,
)
from structmap.index_path import MappingIndex
from structmap.mappable import (
    OutMappable,
    OutMappableWithContext,
    decode_value,
    encode_value,
)
from structmap.structured_data import (
    BaseInMap,
    BaseOutMap,
    int_to_double,
)


class NativeMap(BaseInMap, BaseOutMap):

    """
    A structured data value wrapping a plain Python object (available
    as the `value` attribute).

    The scalar accessors check the types strictly: e.g., `as_int()`
    returns `None` for `True` (a `bool` is not an integer here) and for
    `42.0` (unless the `int_from_integral_float` option of the `config`
    is set); `as_double()` accepts an `int` (unless the
    `double_from_int` option of the `config` is unset).

    >>> NativeMap(True).as_int() is None
    True
    >>> NativeMap(42.0).as_int() is None
    True
    >>> from structmap.config import MapperConfig
    >>> NativeMap(42.0, config=MapperConfig(int_from_integral_float=True)).as_int()
    42
    >>> NativeMap(42).as_double()
    42.0
    >>> NativeMap('42').as_array() is None
    True
    """

    def __init__(self, value, config=None):
        self.value = value
        self.config = config if config is not None else DEFAULT_CONFIG

    __repr__ = attr_repr('value')

    def __eq__(self, other):
        if isinstance(other, NativeMap):
            return self.value == other.value
        return NotImplemented

    __hash__ = None

    @classmethod
    def from_json(cls, text, config=None):
        return cls(json.loads(text), config=config)

    def to_json(self, **json_dumps_kwargs):
        return json.dumps(self.value, **json_dumps_kwargs)

    def _wrap(self, value):
        return type(self)(value, config=self.config)

    #
    # Readable side

    def get_at_index(self, index):
        if not isinstance(self.value, collections_abc.Mapping):
            return None
        value = self.value.get(index.raw_value)
        if value is None:
            return None
        return self._wrap(value)

    def as_array(self):
        if isinstance(self.value, (list, tuple)):
            return [self._wrap(item) for item in self.value]
        return None

    def as_int(self):
        value = self.value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return int(value)
        if (isinstance(value, float)
              and self.config.int_from_integral_float
              and value.is_integer()):
            return int(value)
        return None

    def as_double(self):
        value = self.value
        if isinstance(value, bool):
            return None
        if isinstance(value, float):
            return value
        if isinstance(value, int) and self.config.double_from_int:
            return int_to_double(value)
        return None

    def as_bool(self):
        if isinstance(self.value, bool):
            return self.value
        return None

    def as_string(self):
        if isinstance(self.value, str):
            return self.value
        return None

    #
    # Writable side

    @classmethod
    def blank(cls):
        return cls({})

    def set_at_index(self, value, index):
        if value is None:
            return
        if not isinstance(self.value, collections_abc.MutableMapping):
            raise IncompatibleShapeError()
        self.value[index.raw_value] = value.value

    def replace_with(self, other):
        # (`config` is kept)
        if isinstance(other, NativeMap):
            self.value = other.value
        else:
            super(NativeMap, self).replace_with(other)

    @classmethod
    def from_array(cls, items):
        return cls([item.value for item in items])

    @classmethod
    def from_int(cls, value):
        return cls(value)

    @classmethod
    def from_double(cls, value):
        return cls(value)

    @classmethod
    def from_bool(cls, value):
        return cls(value)

    @classmethod
    def from_string(cls, value):
        return cls(value)


def decode_native(target, data, context=NOT_SPECIFIED, config=None):
    """
    Decode the given plain Python data (e.g., a `dict` obtained by
    deserializing some JSON) as `target` (e.g., a mappable class).

    >>> decode_native(int, 42)
    42
    """
    return decode_value(target, NativeMap(data, config=config), context=context)


def encode_native(value, context=NOT_SPECIFIED, into=None, kind=None):
    """
    Encode the given value as plain Python data (e.g., a `dict`).

    If `into` is specified (it needs to be a `dict`), the value (which
    then needs to be a mappable object; `kind` is not applicable) is
    encoded into a copy of it.

    >>> encode_native(42)
    42
    >>> encode_native(['a', 'b'])
    Traceback (most recent call last):
      ...
    structmap.exceptions.OutWrongTypeError: the structured data type cannot represent list
    """
    if into is None:
        return encode_value(value, NativeMap, context=context, kind=kind).value
    if kind is not None:
        raise TypeError('the `kind` argument is not applicable when encoding '
                        'into an existing value (got: {!a})'.format(kind))
    if not isinstance(value, (OutMappable, OutMappableWithContext)):
        raise OutWrongTypeError(type(value))
    destination = NativeMap(into)
    if context is NOT_SPECIFIED:
        return value.encode_into(destination).value
    return value.encode_into(destination, context).value
