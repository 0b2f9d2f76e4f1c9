# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
This submodule contains static typing stuff (defining several abstract
interfaces) used throughout the `structmap` package (and, possibly,
also in any modules that make use of the stuff provided by the
package).

Note: generally, the static typing stuff does *not* affect the runtime
semantics, in particular, does *not* provide runtime type checks.

TL;DR:

* read the *TL;DR* fragments of the docs of:

  `InMap`,
  `OutMap`.

* take a look at the code of the definitions of:

  `InMap`,
  `OutMap`,
  `Key`, `IndexPath`, `Context`.

***

For some object `x` and some abstract interface `Z`, the statements
"`x` is an (implicit) instance of `Z`", "`x` supports `Z`" and "`x` is
`Z`-compliant" are equivalent to each other. Note that the class of
`x` does *not* have to be an *explicit* subclass of `Z` (however,
deriving backend classes from `structmap.structured_data.BaseInMap`
and/or `structmap.structured_data.BaseOutMap` is the most convenient
way to implement these interfaces, as those base classes provide
the default implementations of the derived operations).

***

Additional comment: in some definitions of abstract interfaces
(protocols) there are method parameters whose names start with `__`
(double underscore); as PEP-484 states, it means that the particular
parameter is *positional-only*.
"""

from typing import (
    Any,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    Union,
)

from structmap.index_path import (
    MappingIndex,
    MappingKey,
)


#
# Interfaces/static types related to addressing
#

Key = Union[str, MappingKey, MappingIndex]

IndexPath = Tuple[MappingIndex, ...]

Context = Any

ScalarValue = Union[int, float, bool, str]


#
# Structured data interfaces
#

class InMap(Protocol):

    """
    TL;DR: defines an abstract interface of a *readable* structured
    data value, i.e., of an object that can be navigated with index
    paths and can present itself as an array or as a scalar.

    ***

    Operations that need to be implemented by each backend:

    * `get_at_index()` -- returns the sub-value at the given single
      path segment, or `None` if there is no such sub-value (or the
      value is not of a shape that can be indexed);

    * `as_array()` -- returns a list of sub-values, or `None` if the
      value is not array-shaped;

    * `as_int()`, `as_double()`, `as_bool()`, `as_string()` -- return
      the value as the respective Python scalar, or `None` if the value
      cannot be represented as it.

    Operations derived from those above (and implemented by
    `structmap.structured_data.BaseInMap`):

    * `get_at()` -- navigation along a whole index path;
    * `as_float()`, `as_int8()` ... `as_uint64()` -- fixed-width
      accessors;
    * `get_scalar()` -- accessor dispatch by `ScalarKind`.

    An important expectation: the decode machinery *never* mutates
    an `InMap`-compliant object.
    """

    def get_at_index(self, __index):
        # type: (MappingIndex) -> Optional[InMap]
        raise NotImplementedError

    def get_at(self, __index_path):
        # type: (IndexPath) -> Optional[InMap]
        raise NotImplementedError

    def as_array(self):
        # type: () -> Optional[Sequence[InMap]]
        raise NotImplementedError

    def as_int(self):
        # type: () -> Optional[int]
        raise NotImplementedError

    def as_double(self):
        # type: () -> Optional[float]
        raise NotImplementedError

    def as_bool(self):
        # type: () -> Optional[bool]
        raise NotImplementedError

    def as_string(self):
        # type: () -> Optional[str]
        raise NotImplementedError

    def get_scalar(self, __kind):
        # type: (Any) -> Optional[ScalarValue]
        raise NotImplementedError


class OutMap(Protocol):

    """
    TL;DR: defines an abstract interface of a *writable* structured
    data value, i.e., of an object that can be created from scalars and
    arrays, and can have sub-values written at index paths.

    ***

    Operations that need to be implemented by each backend:

    * `blank()` (a class method) -- returns a new empty (object-shaped)
      value;

    * `set_at_index()` -- writes the given sub-value at the given single
      path segment (writing `None` must be a no-op); raises
      `structmap.exceptions.IncompatibleShapeError` if the value is not
      of a shape that accepts keyed writes;

    * `from_array()` (a class method) -- returns a new array-shaped value
      (or `None` if the backend cannot represent arrays);

    * `from_int()`, `from_double()`, `from_bool()`, `from_string()`
      (class methods) -- return a new scalar value (or `None` if the
      backend cannot represent the respective scalar type).

    Operations derived from those above (and implemented by
    `structmap.structured_data.BaseOutMap`):

    * `set_at()` -- writes at a whole index path (an empty path means
      replacing the whole value; paths longer than one segment are not
      supported);
    * `from_float()`, `from_int8()` ... `from_uint64()`;
    * `from_scalar()` -- constructor dispatch by `ScalarKind`.
    """

    @classmethod
    def blank(cls):
        # type: () -> OutMap
        raise NotImplementedError

    def set_at_index(self, __value, __index):
        # type: (Optional[OutMap], MappingIndex) -> None
        raise NotImplementedError

    def set_at(self, __value, __index_path):
        # type: (Optional[OutMap], IndexPath) -> None
        raise NotImplementedError

    @classmethod
    def from_array(cls, __items):
        # type: (Sequence[OutMap]) -> Optional[OutMap]
        raise NotImplementedError

    @classmethod
    def from_scalar(cls, __kind, __value):
        # type: (Any, ScalarValue) -> Optional[OutMap]
        raise NotImplementedError
