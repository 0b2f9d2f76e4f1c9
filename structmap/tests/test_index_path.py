# Copyright (c) 2025-2026 NASK. All rights reserved.

import enum
import pickle
import unittest

from unittest_expander import (
    expand,
    foreach,
    param,
)

from structmap.index_path import (
    MappingIndex,
    MappingKey,
    NoKeys,
    as_index,
    index_path_segments,
    make_index_path,
)


class Keys(MappingKey, enum.Enum):
    FOO = 'foo'
    BAR_BAZ = 'bar-baz'


class OtherKeys(MappingKey, enum.Enum):
    FOO = 'foo'


class StrKeys(MappingKey, str, enum.Enum):
    SPAM = 'spam'


class TestMappingIndex(unittest.TestCase):

    def test_equality_and_hashing(self):
        self.assertEqual(MappingIndex('foo'), MappingIndex('foo'))
        self.assertNotEqual(MappingIndex('foo'), MappingIndex('bar'))
        self.assertNotEqual(MappingIndex('foo'), 'foo')
        self.assertEqual(len({MappingIndex('foo'), MappingIndex('foo'), MappingIndex('bar')}), 2)

    def test_immutability(self):
        index = MappingIndex('foo')
        with self.assertRaises(AttributeError):
            index.raw_value = 'bar'
        with self.assertRaises(AttributeError):
            index.spam = 'bar'
        self.assertEqual(index.raw_value, 'foo')

    def test_repr(self):
        self.assertEqual(repr(MappingIndex('bar-baz')), "MappingIndex('bar-baz')")

    def test_pickling(self):
        index = MappingIndex('foo')
        self.assertEqual(pickle.loads(pickle.dumps(index)), index)

    def test_non_str_raw_value(self):
        with self.assertRaises(TypeError):
            MappingIndex(1)
        with self.assertRaises(TypeError):
            MappingIndex(b'foo')


@expand
class TestAsIndex(unittest.TestCase):

    @foreach([
        param('foo', MappingIndex('foo')),
        param(Keys.FOO, MappingIndex('foo')),
        param(Keys.BAR_BAZ, MappingIndex('bar-baz')),
        param(StrKeys.SPAM, MappingIndex('spam')),
        param(MappingIndex('x'), MappingIndex('x')),
    ])
    def test_valid(self, key, expected):
        index = as_index(key)
        self.assertEqual(index, expected)
        self.assertIs(type(index.raw_value), str)

    @foreach([
        param(1),
        param(None),
        param(b'foo'),
        param(['foo']),
    ])
    def test_invalid(self, key):
        with self.assertRaises(TypeError):
            as_index(key)


@expand
class TestMakeIndexPath(unittest.TestCase):

    @foreach([
        param([], NoKeys, ()).label('empty path, no keys'),
        param([], Keys, ()).label('empty path, enum keys'),
        param([], str, ()).label('empty path, str keys'),
        param([Keys.FOO], Keys, (MappingIndex('foo'),)),
        param([Keys.FOO, Keys.BAR_BAZ], Keys, (MappingIndex('foo'), MappingIndex('bar-baz'))),
        param(['a', 'b', 'c'], str, (MappingIndex('a'), MappingIndex('b'), MappingIndex('c'))),
    ])
    def test_valid(self, keys, key_type, expected):
        self.assertEqual(make_index_path(keys, key_type), expected)

    @foreach([
        param(['foo'], Keys).label('str instead of enum member'),
        param([OtherKeys.FOO], Keys).label('member of another enum'),
        param([Keys.FOO], str).label('enum member instead of str'),
        param([Keys.FOO], NoKeys).label('any key when no keys allowed'),
        param(['foo'], NoKeys).label('str when no keys allowed'),
        param([Keys.FOO, 'bar'], Keys).label('mixed'),
    ])
    def test_foreign_key(self, keys, key_type):
        with self.assertRaises(TypeError):
            make_index_path(keys, key_type)

    def test_segments(self):
        index_path = make_index_path([Keys.BAR_BAZ, Keys.FOO], Keys)
        self.assertEqual(index_path_segments(index_path), ('bar-baz', 'foo'))


class TestNoKeys(unittest.TestCase):

    def test_has_no_members(self):
        self.assertEqual(list(NoKeys), [])
        self.assertTrue(issubclass(NoKeys, MappingKey))


class TestMappingKeyWithNonStrValue(unittest.TestCase):

    def test_index_raises_type_error(self):
        class IntKeys(MappingKey, enum.Enum):
            ONE = 1
        with self.assertRaises(TypeError):
            IntKeys.ONE.index
        with self.assertRaises(TypeError):
            make_index_path([IntKeys.ONE], IntKeys)
