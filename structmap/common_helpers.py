# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Small general-purpose helpers used throughout the *structmap* package.
"""

import collections.abc as collections_abc


class _NotSpecifiedType(object):

    """
    The type of the `NOT_SPECIFIED` sentinel (a singleton).

    >>> NOT_SPECIFIED
    NOT_SPECIFIED
    >>> bool(NOT_SPECIFIED)
    False
    >>> _NotSpecifiedType() is NOT_SPECIFIED
    True
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(_NotSpecifiedType, cls).__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'NOT_SPECIFIED'

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return 'NOT_SPECIFIED'


#: A sentinel to be used as the default value of such optional
#: arguments for which `None` is a legitimate value (e.g., a mapping
#: context may be `None`).
NOT_SPECIFIED = _NotSpecifiedType()


def ascii_str(obj):

    r"""
    Safely convert the given object to an ASCII-only :class:`str`.

    Non-ASCII characters are escaped using Python literal notation
    (``\x...``, ``\u...``, ``\U...``); no encoding/decoding exceptions
    are raised (:func:`repr` is the last-resort fallback).

    >>> ascii_str('')
    ''
    >>> ascii_str('peach-int')
    'peach-int'
    >>> ascii_str('Ech, ale błąd!')
    'Ech, ale b\\u0142\\u0105d!'
    >>> ascii_str(b'Ech, ale b\xc5\x82\xc4\x85d!')
    'Ech, ale b\\u0142\\u0105d!'
    >>> ascii_str(42)
    '42'
    >>> ascii_str(ValueError('Zupełnie zły.'))
    'Zupe\\u0142nie z\\u0142y.'

    >>> class Nasty(object):
    ...     def __str__(self): raise ValueError
    ...     def __repr__(self): return 'quite nasŧy'
    ...
    >>> ascii_str(Nasty())
    'quite nas\\u0167y'
    """
    if isinstance(obj, str):
        s = obj
    else:
        if isinstance(obj, memoryview):
            obj = bytes(obj)
        if isinstance(obj, (bytes, bytearray)):
            s = obj.decode('utf-8', 'surrogateescape')
        else:
            try:
                s = str(obj)
            except ValueError:
                s = repr(obj)
    return s.encode('ascii', 'backslashreplace').decode('ascii')


def type_name(obj_or_type):
    """
    Get the (ASCII-safe) qualified name of the given type -- or of the
    type of the given object (if it is not a type).

    >>> type_name(int)
    'int'
    >>> type_name(42)
    'int'
    >>> type_name(collections_abc.Sequence)
    'Sequence'
    """
    tp = obj_or_type if isinstance(obj_or_type, type) else type(obj_or_type)
    return ascii_str(tp.__qualname__)
