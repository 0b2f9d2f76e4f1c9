# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
Class-related helpers.
"""


def attr_repr(*attr_names):
    """
    Make a `__repr__()` implementation that shows the given attributes
    (instance or class ones) together with the qualified class name.

    >>> class Index(object):
    ...    __repr__ = attr_repr('key', 'kind')
    ...    kind = 'string'
    ...    def __init__(self, key):
    ...        self.key = key
    >>> Index('nests')
    <Index key='nests', kind='string'>

    With no attribute names, only the class name is shown:

    >>> class Blank(object):
    ...    __repr__ = attr_repr()
    >>> Blank()
    <Blank>

    An attribute that cannot be obtained makes the implementation
    fall back to `object.__repr__()`:

    >>> class Broken(object):
    ...    __repr__ = attr_repr('nonexistent')
    >>> ' object at ' in repr(Broken())
    True
    """

    def __repr__(self):
        try:
            items = [(name, getattr(self, name)) for name in attr_names]
        except AttributeError:
            return object.__repr__(self)
        class_name = type(self).__qualname__
        if not items:
            return f'<{class_name}>'
        attrs = ', '.join(f'{name}={value!r}' for name, value in items)
        return f'<{class_name} {attrs}>'

    return __repr__
