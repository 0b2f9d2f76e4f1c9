# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Illustrative structured data backends:

* `NativeMap` -- plain Python containers and scalars (with the
  `decode_native()`/`encode_native()` convenience functions);
* `TaggedMap` -- a JSON-like tagged-union value type.
"""

from structmap.backends.native import (
    NativeMap,
    decode_native,
    encode_native,
)
from structmap.backends.tagged import (
    TaggedKind,
    TaggedMap,
)


__all__ = [
    'NativeMap',
    'decode_native',
    'encode_native',
    'TaggedKind',
    'TaggedMap',
]
