# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
*structmap* -- a bidirectional mapping engine between typed Python
objects and structured data (dicts/lists/scalars, JSON-like trees,
custom tagged-union value types...).

A value type declares, once, how each of its fields corresponds to an
index path in structured data (see: `structmap.mappable`); both the
decoding and the encoding are derived from that declaration.
Structured data types are pluggable (see: `structmap.structured_data`
and the illustrative backends in `structmap.backends`).
"""

from structmap.exceptions import (
    MappingError,
    WrongTypeError,
    InMapperError,
    NoValueError,
    InWrongTypeError,
    CannotInitializeFromRawValueError,
    CannotRepresentAsArrayError,
    UserDefinedError,
    OutMapperError,
    OutWrongTypeError,
    CannotRepresentArrayError,
    CannotSetError,
    OutMapError,
    IncompatibleShapeError,
    DeepSetUnsupportedError,
)
from structmap.index_path import (
    MappingIndex,
    MappingKey,
    NoKeys,
)
from structmap.structured_data import (
    ScalarKind,
    BaseInMap,
    BaseOutMap,
)
from structmap.in_mapper import (
    InMapper,
    BasicInMapper,
    ContextualInMapper,
    PlainInMapper,
    PlainContextualInMapper,
)
from structmap.out_mapper import (
    OutMapper,
    BasicOutMapper,
    ContextualOutMapper,
    PlainOutMapper,
    PlainContextualOutMapper,
)
from structmap.mappable import (
    InMappable,
    BasicInMappable,
    InMappableWithContext,
    OutMappable,
    BasicOutMappable,
    OutMappableWithContext,
    decode_value,
    encode_value,
)
from structmap.config import (
    ConfigError,
    MapperConfig,
)


__all__ = [
    'MappingError',
    'WrongTypeError',
    'InMapperError',
    'NoValueError',
    'InWrongTypeError',
    'CannotInitializeFromRawValueError',
    'CannotRepresentAsArrayError',
    'UserDefinedError',
    'OutMapperError',
    'OutWrongTypeError',
    'CannotRepresentArrayError',
    'CannotSetError',
    'OutMapError',
    'IncompatibleShapeError',
    'DeepSetUnsupportedError',

    'MappingIndex',
    'MappingKey',
    'NoKeys',

    'ScalarKind',
    'BaseInMap',
    'BaseOutMap',

    'InMapper',
    'BasicInMapper',
    'ContextualInMapper',
    'PlainInMapper',
    'PlainContextualInMapper',

    'OutMapper',
    'BasicOutMapper',
    'ContextualOutMapper',
    'PlainOutMapper',
    'PlainContextualOutMapper',

    'InMappable',
    'BasicInMappable',
    'InMappableWithContext',
    'OutMappable',
    'BasicOutMappable',
    'OutMappableWithContext',
    'decode_value',
    'encode_value',

    'ConfigError',
    'MapperConfig',
]
