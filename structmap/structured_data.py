# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Base classes of structured data values (backends), together with
`ScalarKind` -- the closed enumeration of the scalar types the mapping
machinery is able to read and write.

A backend class that derives from `BaseInMap` needs to implement only
a few *primitive* operations (see the `structmap.interfaces.InMap`
protocol); the rest is provided by `BaseInMap`, in particular:
navigation along whole index paths (`get_at()`) and the fixed-width
accessors (`as_float()`, `as_int8()` etc.). Similarly, a backend class
that derives from `BaseOutMap` obtains `set_at()`, `from_float()`,
`from_int8()` etc. -- and, in both cases, `ScalarKind`-based dispatch
(`get_scalar()`/`from_scalar()`).

Any of the derived operations can be overridden by a backend which is
able to provide a more precise implementation (e.g., one that keeps
fixed-width numbers natively).
"""

import enum
import math
import struct

from structmap.common_helpers import type_name
from structmap.config import DEFAULT_CONFIG
from structmap.exceptions import DeepSetUnsupportedError


class ScalarKind(enum.Enum):

    """
    The scalar types supported by the mapping machinery.

    The *canonical* kinds are `INT`, `DOUBLE`, `BOOL` and `STRING`
    (each backend must support them); the remaining ones are
    *fixed-width* kinds, by default derived from `INT` or `DOUBLE`.

    >>> ScalarKind.UINT8.label
    'uint8'
    >>> ScalarKind.UINT8.accessor_name, ScalarKind.UINT8.constructor_name
    ('as_uint8', 'from_uint8')
    >>> ScalarKind.UINT8.base_kind
    <ScalarKind.INT: 'int'>
    >>> ScalarKind.FLOAT.base_kind
    <ScalarKind.DOUBLE: 'double'>
    >>> ScalarKind.STRING.base_kind
    <ScalarKind.STRING: 'string'>
    >>> ScalarKind.INT8.min_value, ScalarKind.INT8.max_value
    (-128, 127)
    >>> ScalarKind.UINT16.min_value, ScalarKind.UINT16.max_value
    (0, 65535)
    """

    INT = 'int'
    DOUBLE = 'double'
    BOOL = 'bool'
    STRING = 'string'
    FLOAT = 'float'
    INT8 = 'int8'
    INT16 = 'int16'
    INT32 = 'int32'
    INT64 = 'int64'
    UINT = 'uint'
    UINT8 = 'uint8'
    UINT16 = 'uint16'
    UINT32 = 'uint32'
    UINT64 = 'uint64'

    def __repr__(self):
        return '<{}.{}: {!r}>'.format(type(self).__qualname__, self.name, self.value)

    @classmethod
    def for_type(cls, tp):
        """
        Get the kind that corresponds to the given Python type.

        >>> ScalarKind.for_type(bool)
        <ScalarKind.BOOL: 'bool'>
        >>> ScalarKind.for_type(float)
        <ScalarKind.DOUBLE: 'double'>
        >>> ScalarKind.for_type(ScalarKind.INT16)
        <ScalarKind.INT16: 'int16'>
        >>> ScalarKind.for_type(list) is None
        True
        """
        if isinstance(tp, ScalarKind):
            return tp
        try:
            return _PRIMITIVE_TYPE_TO_KIND.get(tp)
        except TypeError:
            # (unhashable)
            return None

    @classmethod
    def of_value(cls, value):
        """
        Get the canonical kind of the given Python value.

        >>> ScalarKind.of_value(True)
        <ScalarKind.BOOL: 'bool'>
        >>> ScalarKind.of_value(1)
        <ScalarKind.INT: 'int'>
        >>> ScalarKind.of_value(1.5)
        <ScalarKind.DOUBLE: 'double'>
        >>> ScalarKind.of_value('1') is ScalarKind.of_value('') is ScalarKind.STRING
        True
        >>> ScalarKind.of_value(None) is None
        True
        """
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, float):
            return cls.DOUBLE
        if isinstance(value, str):
            return cls.STRING
        return None

    @property
    def label(self):
        return self.value

    @property
    def accessor_name(self):
        return 'as_' + self.value

    @property
    def constructor_name(self):
        return 'from_' + self.value

    @property
    def base_kind(self):
        if self is ScalarKind.FLOAT:
            return ScalarKind.DOUBLE
        if self in _INT_KIND_TO_WIDTH:
            return ScalarKind.INT
        return self

    @property
    def is_fixed_width(self):
        return self.base_kind is not self

    @property
    def min_value(self):
        bits, signed = _INT_KIND_TO_WIDTH[self]
        return -(1 << (bits - 1)) if signed else 0

    @property
    def max_value(self):
        bits, signed = _INT_KIND_TO_WIDTH[self]
        return (1 << (bits - 1)) - 1 if signed else (1 << bits) - 1

    def accepts(self, value):
        """
        Check whether the given Python value is a legal value of this
        kind (numeric kinds do *not* accept `bool` values; the float
        kinds accept also `int` values, provided they can be converted
        to `float`; the fixed-width integer kinds accept only `int`
        values that are within their range).

        >>> ScalarKind.INT.accepts(True), ScalarKind.BOOL.accepts(True)
        (False, True)
        >>> ScalarKind.DOUBLE.accepts(3), ScalarKind.INT.accepts(3.0)
        (True, False)
        >>> ScalarKind.DOUBLE.accepts(10**400), ScalarKind.INT.accepts(10**400)
        (False, True)
        >>> ScalarKind.UINT8.accepts(255), ScalarKind.UINT8.accepts(256)
        (True, False)
        >>> ScalarKind.INT8.accepts(-128), ScalarKind.INT8.accepts(-129)
        (True, False)
        """
        base_kind = self.base_kind
        if base_kind is ScalarKind.BOOL:
            return isinstance(value, bool)
        if base_kind is ScalarKind.STRING:
            return isinstance(value, str)
        if isinstance(value, bool):
            return False
        if base_kind is ScalarKind.DOUBLE:
            return isinstance(value, float) or (
                isinstance(value, int) and int_to_double(value) is not None)
        assert base_kind is ScalarKind.INT
        if not isinstance(value, int):
            return False
        if self is ScalarKind.INT:
            return True
        return self.min_value <= value <= self.max_value

    def truncate(self, value):
        """
        Truncate the given `int` to this fixed-width integer kind (in
        two's complement, i.e., keeping the low-order bits).

        >>> ScalarKind.UINT8.truncate(300)
        44
        >>> ScalarKind.INT8.truncate(200)
        -56
        >>> ScalarKind.UINT8.truncate(-1)
        255
        >>> ScalarKind.INT16.truncate(-5)
        -5
        """
        bits, signed = _INT_KIND_TO_WIDTH[self]
        value &= (1 << bits) - 1
        if signed and value > self.max_value:
            value -= (1 << bits)
        return value


_PRIMITIVE_TYPE_TO_KIND = {
    int: ScalarKind.INT,
    float: ScalarKind.DOUBLE,
    bool: ScalarKind.BOOL,
    str: ScalarKind.STRING,
}

_INT_KIND_TO_WIDTH = {
    ScalarKind.INT8: (8, True),
    ScalarKind.INT16: (16, True),
    ScalarKind.INT32: (32, True),
    ScalarKind.INT64: (64, True),
    ScalarKind.UINT: (64, False),
    ScalarKind.UINT8: (8, False),
    ScalarKind.UINT16: (16, False),
    ScalarKind.UINT32: (32, False),
    ScalarKind.UINT64: (64, False),
}


def int_to_double(value):
    """
    Convert the given `int` to `float` (`None` is returned if it is too
    large to be represented as a `float`).

    >>> int_to_double(-7)
    -7.0
    >>> int_to_double(10**400) is None
    True
    """
    try:
        return float(value)
    except OverflowError:
        return None


def to_single_precision(value):
    """
    Narrow the given number to the nearest IEEE-754 single precision
    value (out-of-range values become infinities).

    >>> to_single_precision(0.5)
    0.5
    >>> to_single_precision(3.14)
    3.140000104904175
    >>> to_single_precision(1e300)
    inf
    >>> to_single_precision(-1e300)
    -inf
    >>> to_single_precision(-10**400)
    -inf
    """
    try:
        return struct.unpack('f', struct.pack('f', value))[0]
    except OverflowError:
        return math.inf if value > 0 else -math.inf


class BaseInMap(object):

    """
    The base class for *readable* structured data values.

    Subclasses need to implement the following methods: `get_at_index()`,
    `as_array()`, `as_int()`, `as_double()`, `as_bool()`, `as_string()`
    -- each returning `None` if the value does not have the requested
    shape or type.

    The `config` attribute (by default set to
    `structmap.config.DEFAULT_CONFIG`) influences the behavior of the
    default fixed-width integer accessors: its `fixed_width_overflow`
    option decides whether out-of-range values are truncated (the
    default) or rejected.
    """

    config = DEFAULT_CONFIG

    def get_at_index(self, index):
        raise NotImplementedError

    def get_at(self, index_path):
        value = self
        for index in index_path:
            value = value.get_at_index(index)
            if value is None:
                return None
        return value

    def as_array(self):
        raise NotImplementedError

    def as_int(self):
        raise NotImplementedError

    def as_double(self):
        raise NotImplementedError

    def as_bool(self):
        raise NotImplementedError

    def as_string(self):
        raise NotImplementedError

    def get_scalar(self, kind):
        return getattr(self, kind.accessor_name)()

    #
    # Fixed-width accessors

    def as_float(self):
        double = self.as_double()
        if double is None:
            return None
        return to_single_precision(double)

    def as_int8(self):
        return self._get_fixed_width_int(ScalarKind.INT8)

    def as_int16(self):
        return self._get_fixed_width_int(ScalarKind.INT16)

    def as_int32(self):
        return self._get_fixed_width_int(ScalarKind.INT32)

    def as_int64(self):
        return self._get_fixed_width_int(ScalarKind.INT64)

    def as_uint(self):
        return self._get_fixed_width_int(ScalarKind.UINT)

    def as_uint8(self):
        return self._get_fixed_width_int(ScalarKind.UINT8)

    def as_uint16(self):
        return self._get_fixed_width_int(ScalarKind.UINT16)

    def as_uint32(self):
        return self._get_fixed_width_int(ScalarKind.UINT32)

    def as_uint64(self):
        return self._get_fixed_width_int(ScalarKind.UINT64)

    def _get_fixed_width_int(self, kind):
        value = self.as_int()
        if value is None:
            return None
        if kind.accepts(value):
            return value
        if self.config.fixed_width_overflow == 'error':
            return None
        return kind.truncate(value)


class BaseOutMap(object):

    """
    The base class for *writable* structured data values.

    Subclasses need to implement the following methods: `blank()`
    (a class method), `set_at_index()`, and the class methods:
    `from_array()`, `from_int()`, `from_double()`, `from_bool()`,
    `from_string()` -- the latter ones returning `None` if the backend
    is not able to represent the given value.

    If the instances of a subclass do not keep their whole state in
    their `__dict__`, the subclass needs to override also the
    `replace_with()` method (used by `set_at()` when the index path is
    empty).
    """

    @classmethod
    def blank(cls):
        raise NotImplementedError

    def set_at_index(self, value, index):
        raise NotImplementedError

    def set_at(self, value, index_path):
        """
        Set the given value (an instance of the same backend class, or
        `None`) at the given index path.

        * empty index path: the whole value is replaced (with `blank()`
          if `value` is `None`);
        * one-segment index path: `set_at_index()` is called;
        * longer index paths are not supported
          (`DeepSetUnsupportedError` is raised).
        """
        index_path = tuple(index_path)
        if not index_path:
            self.replace_with(value if value is not None else self.blank())
        elif len(index_path) == 1:
            self.set_at_index(value, index_path[0])
        else:
            raise DeepSetUnsupportedError(index_path)

    def replace_with(self, other):
        if other is self:
            return
        if not isinstance(other, type(self)):
            raise TypeError('cannot replace the state of {} with the state of {}'.format(
                type_name(self), type_name(other)))
        vars(self).clear()
        vars(self).update(vars(other))

    @classmethod
    def from_array(cls, items):
        raise NotImplementedError

    @classmethod
    def from_int(cls, value):
        raise NotImplementedError

    @classmethod
    def from_double(cls, value):
        raise NotImplementedError

    @classmethod
    def from_bool(cls, value):
        raise NotImplementedError

    @classmethod
    def from_string(cls, value):
        raise NotImplementedError

    @classmethod
    def from_scalar(cls, kind, value):
        """
        Create a new value from the given scalar, using the constructor
        that corresponds to the given `ScalarKind` (`None` is returned
        if `value` is not a legal value of that kind).
        """
        if not kind.accepts(value):
            return None
        if kind.base_kind is ScalarKind.DOUBLE:
            value = float(value)
        return getattr(cls, kind.constructor_name)(value)

    #
    # Fixed-width constructors

    @classmethod
    def from_float(cls, value):
        return cls.from_double(to_single_precision(value))

    @classmethod
    def from_int8(cls, value):
        return cls.from_int(value)

    @classmethod
    def from_int16(cls, value):
        return cls.from_int(value)

    @classmethod
    def from_int32(cls, value):
        return cls.from_int(value)

    @classmethod
    def from_int64(cls, value):
        return cls.from_int(value)

    @classmethod
    def from_uint(cls, value):
        return cls.from_int(value)

    @classmethod
    def from_uint8(cls, value):
        return cls.from_int(value)

    @classmethod
    def from_uint16(cls, value):
        return cls.from_int(value)

    @classmethod
    def from_uint32(cls, value):
        return cls.from_int(value)

    @classmethod
    def from_uint64(cls, value):
        return cls.from_int(value)
