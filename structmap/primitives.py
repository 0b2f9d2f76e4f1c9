# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Intrinsic mapping of primitive values: scalars (`int`, `float`, `bool`,
`str` and the fixed-width kinds enumerated by `ScalarKind`) and
raw-value types (`enum.Enum` subclasses whose members' values are
scalars).

A primitive is always mapped to/from the *whole* structured value it
is given, i.e., at the empty index path.

>>> from structmap.backends.native import NativeMap
>>> decode_scalar(ScalarKind.INT, NativeMap(42))
42
>>> encode_scalar('hello', NativeMap.blank()).value
'hello'
>>> encode_scalar(200, NativeMap.blank(), kind=ScalarKind.UINT8).value
200
"""

import enum

from structmap.common_helpers import type_name
from structmap.exceptions import (
    CannotInitializeFromRawValueError,
    CannotSetError,
    InWrongTypeError,
    OutMapError,
    OutWrongTypeError,
)
from structmap.structured_data import ScalarKind


def is_raw_value_type(tp):
    return isinstance(tp, type) and issubclass(tp, enum.Enum)


def raw_kind_of(enum_class):
    """
    Get the `ScalarKind` of the raw values of the given enumeration.

    All members' values must be of the same canonical scalar kind,
    otherwise `TypeError` is raised.

    >>> class Color(enum.Enum):
    ...     RED = 'red'
    ...     GREEN = 'green'
    ...
    >>> raw_kind_of(Color)
    <ScalarKind.STRING: 'string'>
    >>> class City(enum.IntEnum):
    ...     WARSAW = 1
    ...
    >>> raw_kind_of(City)
    <ScalarKind.INT: 'int'>
    >>> class Mixed(enum.Enum):
    ...     A = 1
    ...     B = 'b'
    ...
    >>> raw_kind_of(Mixed)
    Traceback (most recent call last):
      ...
    TypeError: cannot determine the raw value kind of Mixed (its members' values are of different or unsupported types)
    """
    kinds = {ScalarKind.of_value(member.value) for member in enum_class}
    if len(kinds) != 1 or None in kinds:
        raise TypeError("cannot determine the raw value kind of {} (its members' values "
                        "are of different or unsupported types)".format(type_name(enum_class)))
    (kind,) = kinds
    return kind


def decode_scalar(kind, source):
    """
    Read the given source structured value as a scalar of the given
    kind (`InWrongTypeError` is raised if that is not possible).
    """
    value = source.get_scalar(kind)
    if value is None:
        raise InWrongTypeError(kind)
    return value


def decode_raw_value(enum_class, source):
    """
    Read the given source structured value as a member of the given
    enumeration (`InWrongTypeError` is raised if the raw value cannot be
    read; `CannotInitializeFromRawValueError` if no member matches it).
    """
    raw_value = decode_scalar(raw_kind_of(enum_class), source)
    try:
        return enum_class(raw_value)
    except ValueError:
        raise CannotInitializeFromRawValueError(raw_value) from None


def make_scalar(value, map_class, kind=None):
    """
    Create a new structured value (an instance of `map_class`) from the
    given scalar.

    If `kind` is not specified, the canonical kind of the value is used;
    `OutWrongTypeError` is raised if the value is not a scalar, or
    `map_class` refuses to represent it.
    """
    if kind is None:
        kind = ScalarKind.of_value(value)
        if kind is None:
            raise OutWrongTypeError(type(value))
    mapped = map_class.from_scalar(kind, value)
    if mapped is None:
        raise OutWrongTypeError(kind)
    return mapped


def make_raw_value(member, map_class):
    """
    Create a new structured value (an instance of `map_class`) from the
    raw value of the given enumeration member.
    """
    return make_scalar(member.value, map_class, kind=raw_kind_of(type(member)))


def encode_scalar(value, destination, kind=None):
    """
    Replace the whole given destination structured value with the given
    scalar (or enumeration member); return the destination.
    """
    map_class = type(destination)
    if isinstance(value, enum.Enum):
        mapped = make_raw_value(value, map_class)
    else:
        mapped = make_scalar(value, map_class, kind)
    try:
        destination.set_at(mapped, ())
    except OutMapError as exc:
        raise CannotSetError(exc) from exc
    return destination
