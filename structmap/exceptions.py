# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
The *structmap* package's public exception classes.

The hierarchy::

    MappingError (a ValueError subclass)
     +-- InMapperError                    (decoding: structured data -> objects)
     |    +-- NoValueError
     |    +-- InWrongTypeError            (also a WrongTypeError)
     |    +-- CannotInitializeFromRawValueError
     |    +-- CannotRepresentAsArrayError
     |    +-- UserDefinedError
     +-- OutMapperError                   (encoding: objects -> structured data)
     |    +-- OutWrongTypeError           (also a WrongTypeError)
     |    +-- CannotRepresentArrayError
     |    +-- CannotSetError
     +-- OutMapError                      (raised by structured data backends)
          +-- IncompatibleShapeError
          +-- DeepSetUnsupportedError

Note that programming errors (such as using a key that does not belong
to the key type of a mapper, or trying to map an object of a type that
is not supported at all) are signalled with `TypeError`, *not* with
any of the above exceptions.
"""

import collections
import contextlib

from structmap.class_helpers import attr_repr
from structmap.common_helpers import (
    ascii_str,
    type_name,
)


#
# Generic mix-ins and base classes
#

class MappingError(ValueError):

    """
    The base class of all mapping-related exceptions.

    An additional feature: the `sublocation()` class method that
    returns a (single-use) context manager, which is used by mappers
    when entering conversion of some nested stuff whose *relative
    location* (within its parent structure) is a path segment (`str`)
    or an array index (`int`). Thanks to that the `str()`
    representation of any `MappingError` raised within one or more
    `with` blocks of such context managers is prepended with a
    *location path* pointing to the problematic item in the whole
    structure.

    >>> with MappingError.sublocation('nests'):
    ...     with MappingError.sublocation(3):
    ...         with MappingError.sublocation():  # <- no segments => skipped
    ...             with MappingError.sublocation('peach', 'int'):
    ...                 raise MappingError('Aha!')
    ...
    Traceback (most recent call last):
      ...
    structmap.exceptions.MappingError: [nests.3.peach.int] Aha!

    >>> try:
    ...     with MappingError.sublocation('spam'):
    ...         raise UserDefinedError('Nobody expects it.')
    ... except InMapperError as exc:
    ...     caught = exc
    ...
    >>> caught.location_path
    ('spam',)
    >>> str(caught)
    '[spam] Nobody expects it.'
    >>> caught.message
    'Nobody expects it.'
    """

    def __init__(self, *args):
        super(MappingError, self).__init__(*args)
        self._location_path = collections.deque()

    @classmethod
    @contextlib.contextmanager
    def sublocation(cls, *names_or_indexes):
        for name_or_index in names_or_indexes:
            cls._verify_is_name_or_index(name_or_index)
        try:
            yield
        except MappingError as exc:
            exc._location_path.extendleft(reversed(names_or_indexes))
            raise

    @staticmethod
    def _verify_is_name_or_index(name_or_index):
        if not isinstance(name_or_index, (str, int)):
            raise TypeError('{!a} is neither a name (`str`) nor an '
                            'index (`int`)'.format(name_or_index))

    @property
    def location_path(self):
        return tuple(self._location_path)

    @property
    def message(self):
        """
        The message without the location prefix (subclasses may
        provide it as a property computed from their attributes).
        """
        return super(MappingError, self).__str__()

    __repr__ = attr_repr('args', 'location_path')

    def __str__(self):
        return self._get_location_prefix() + self.message

    def _get_location_prefix(self):
        if self._location_path:
            return '[{}] '.format('.'.join(map(ascii_str, self._location_path)))
        return ''


class WrongTypeError(MappingError):

    """
    The base class for both decoding-related and encoding-related
    *wrong type* errors.

    Instances are initialized with one argument: the expected type
    (a `type` or a `structmap.structured_data.ScalarKind` member); it
    is exposed as the `expected_type` attribute.
    """

    def __init__(self, expected_type):
        self.expected_type = expected_type
        super(WrongTypeError, self).__init__(expected_type)

    @property
    def expected_type_label(self):
        label = getattr(self.expected_type, 'label', None)
        if isinstance(label, str):
            return label
        return type_name(self.expected_type)


#
# Decoding-related exceptions
#

class InMapperError(MappingError):
    """
    The base class for exceptions raised by decode mappers (see:
    `structmap.in_mapper`).
    """


class NoValueError(InMapperError):

    """
    Raised when there is no value at the given index path.

    >>> from structmap.index_path import MappingIndex
    >>> exc = NoValueError((MappingIndex('nest'), MappingIndex('int')))
    >>> exc.index_path == (MappingIndex('nest'), MappingIndex('int'))
    True
    >>> str(exc)
    'no value at index path "nest.int"'
    """

    def __init__(self, index_path):
        self.index_path = tuple(index_path)
        super(NoValueError, self).__init__(self.index_path)

    @property
    def message(self):
        return 'no value at index path "{}"'.format(
            '.'.join(ascii_str(index.raw_value) for index in self.index_path))


class InWrongTypeError(WrongTypeError, InMapperError):

    """
    Raised when the value at the given index path cannot be represented
    as the desired type.

    >>> str(InWrongTypeError(int))
    'the value cannot be represented as int'
    """

    @property
    def message(self):
        return 'the value cannot be represented as {}'.format(self.expected_type_label)


class CannotInitializeFromRawValueError(InMapperError):

    """
    Raised when a raw-value type (an enumeration) has no member
    matching the decoded raw value.

    >>> exc = CannotInitializeFromRawValueError('proton')
    >>> exc.raw_value
    'proton'
    >>> str(exc)
    "no member matches the raw value 'proton'"
    """

    def __init__(self, raw_value):
        self.raw_value = raw_value
        super(CannotInitializeFromRawValueError, self).__init__(raw_value)

    @property
    def message(self):
        return 'no member matches the raw value {}'.format(ascii(self.raw_value))


class CannotRepresentAsArrayError(InMapperError):

    """
    Raised when an array was expected but the value is not array-shaped.

    >>> str(CannotRepresentAsArrayError())
    'the value cannot be represented as an array'
    """

    @property
    def message(self):
        return 'the value cannot be represented as an array'


class UserDefinedError(InMapperError):
    """
    To be raised by custom decoding code (e.g., in implementations of
    `InMappable.from_mapper()`) to signal that the structured data are
    not acceptable for a reason not covered by the other exceptions.
    """


#
# Encoding-related exceptions
#

class OutMapperError(MappingError):
    """
    The base class for exceptions raised by encode mappers (see:
    `structmap.out_mapper`).
    """


class OutWrongTypeError(WrongTypeError, OutMapperError):

    """
    Raised when the given value cannot be converted to the structured
    data type in use.

    >>> str(OutWrongTypeError(float))
    'the structured data type cannot represent float'
    """

    @property
    def message(self):
        return 'the structured data type cannot represent {}'.format(self.expected_type_label)


class CannotRepresentArrayError(OutMapperError):

    """
    Raised when the structured data type in use cannot represent arrays.

    >>> str(CannotRepresentArrayError())
    'the structured data type cannot represent arrays'
    """

    @property
    def message(self):
        return 'the structured data type cannot represent arrays'


class CannotSetError(OutMapperError):

    """
    Wraps an exception raised by a structured data value's `set_at()`,
    so that a failure of the backend ("the write was rejected") can be
    distinguished from a failure of the conversion logic.

    >>> cause = DeepSetUnsupportedError(('a', 'b'))
    >>> exc = CannotSetError(cause)
    >>> exc.cause is cause
    True
    >>> str(exc)
    'cannot set the value (setting a value at a multi-segment index path ("a.b") is not supported)'
    """

    def __init__(self, cause):
        self.cause = cause
        super(CannotSetError, self).__init__(cause)

    @property
    def message(self):
        return 'cannot set the value ({})'.format(ascii_str(self.cause))


#
# Structured-data-backend-related exceptions
#

class OutMapError(MappingError):
    """
    The base class for exceptions raised by the writable structured
    data values (see: `structmap.structured_data.BaseOutMap`).
    """


class IncompatibleShapeError(OutMapError):

    """
    Raised when a keyed write is attempted on a value which is not
    object-shaped (e.g., on an array or a scalar).

    >>> str(IncompatibleShapeError())
    'the value is not of a shape that accepts keyed writes'
    """

    @property
    def message(self):
        return 'the value is not of a shape that accepts keyed writes'


class DeepSetUnsupportedError(OutMapError):

    """
    Raised when a write at an index path consisting of two or more
    segments is attempted (only single-level writes are supported).
    """

    def __init__(self, index_path):
        self.index_path = tuple(index_path)
        super(DeepSetUnsupportedError, self).__init__(self.index_path)

    @property
    def message(self):
        return ('setting a value at a multi-segment index path ("{}") '
                'is not supported'.format('.'.join(
                    ascii_str(getattr(index, 'raw_value', index))
                    for index in self.index_path)))
