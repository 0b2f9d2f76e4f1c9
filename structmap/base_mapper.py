# Copyright (c) 2025-2026 NASK. All rights reserved.

"""
The stuff shared by the decode mappers (`structmap.in_mapper`) and the
encode mappers (`structmap.out_mapper`): key verification and context
resolution.
"""

from structmap.common_helpers import (
    NOT_SPECIFIED,
    type_name,
)
from structmap.index_path import make_index_path


def is_context_compatible(mappable_class, context):
    """
    Check whether the given context is acceptable for the given
    mappable class (based on its `MappingContext` attribute, which
    should be a type, a tuple of types, or `None` meaning that any
    context is acceptable).

    >>> class A:
    ...     MappingContext = int
    ...
    >>> is_context_compatible(A, 42), is_context_compatible(A, 'x')
    (True, False)
    >>> class B:
    ...     MappingContext = None
    ...
    >>> is_context_compatible(B, 'x')
    True
    """
    context_type = getattr(mappable_class, 'MappingContext', None)
    return context_type is None or isinstance(context, context_type)


def get_mapper_class(mappable_class, attr_name):
    """
    Get the mapper class declared by the given mappable class (as its
    `attr_name` attribute), or `None` if `mappable_class` is not such
    a class.
    """
    if not isinstance(mappable_class, type):
        return None
    mapper_class = getattr(mappable_class, attr_name, None)
    if isinstance(mapper_class, type) and issubclass(mapper_class, BaseMapper):
        return mapper_class
    return None


class BaseMapper(object):

    """
    The base class of all mappers.

    A mapper is scoped to a *key type*: `str` (basic mappers) or a
    `MappingKey` enumeration; the keys that constitute the index paths
    passed to the mapper's methods need to be instances of that type.

    Subclasses need to implement the `for_target()` class method.
    """

    is_contextual = False

    def __init__(self, key_type):
        self._key_type = key_type

    @property
    def key_type(self):
        return self._key_type

    @classmethod
    def for_target(cls, structured_value, mappable_class, context=NOT_SPECIFIED):
        """
        Make a fresh mapper to convert an instance of `mappable_class`
        (using the given structured value as the source/destination).
        """
        raise NotImplementedError

    def _make_index_path(self, keys):
        return make_index_path(keys, self._key_type)

    def _resolve_context(self, mappable_class, mapper_class, context):
        if not mapper_class.is_contextual:
            self._verify_no_context(mappable_class, context)
            return NOT_SPECIFIED
        if context is NOT_SPECIFIED:
            if not self.is_contextual:
                raise TypeError('{} requires a context (specify the `context` '
                                'argument)'.format(type_name(mappable_class)))
            context = self.context
        if not is_context_compatible(mappable_class, context):
            raise TypeError('{!a} is not a context acceptable for {}'.format(
                context, type_name(mappable_class)))
        return context

    @staticmethod
    def _verify_no_context(target, context):
        if context is not NOT_SPECIFIED:
            raise TypeError('{} does not accept a context'.format(type_name(target)))
