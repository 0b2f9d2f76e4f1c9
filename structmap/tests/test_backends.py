# Copyright (c) 2025-2026 NASK. All rights reserved.

import unittest

from unittest_expander import (
    expand,
    foreach,
    param,
)

from structmap.backends import (
    NativeMap,
    TaggedKind,
    TaggedMap,
    decode_native,
    encode_native,
)
from structmap.config import MapperConfig
from structmap.exceptions import (
    InWrongTypeError,
    OutWrongTypeError,
)
from structmap.index_path import MappingIndex
from structmap.structured_data import ScalarKind
from structmap.tests._generic_helpers import TestCaseMixin
from structmap.tests._models import (
    Fruit,
    FruitHolder,
    FruitNest,
    Nest,
    Nesting,
    ZewoProject,
)


@expand
class TestNativeMapAccessors(TestCaseMixin, unittest.TestCase):

    @foreach([
        param(42, 'as_int', 42),
        param(True, 'as_int', None),
        param(42.0, 'as_int', None),
        param('42', 'as_int', None),
        param(2.5, 'as_double', 2.5),
        param(2, 'as_double', 2.0),
        param(False, 'as_double', None),
        param(True, 'as_bool', True),
        param(1, 'as_bool', None),
        param('x', 'as_string', 'x'),
        param(b'x', 'as_string', None),
        param(['x'], 'as_string', None),
    ])
    def test_scalar_accessors(self, value, accessor_name, expected):
        self.assertEqualIncludingTypes(getattr(NativeMap(value), accessor_name)(), expected)

    def test_int_too_large_for_double(self):
        self.assertIsNone(NativeMap(10**400).as_double())
        self.assertIsNone(NativeMap(-10**400).as_float())
        self.assertIsNone(NativeMap(10**400).get_scalar(ScalarKind.DOUBLE))
        self.assertEqual(NativeMap(10**400).as_int(), 10**400)
        self.assertIsNone(NativeMap.from_scalar(ScalarKind.DOUBLE, 10**400))
        self.assertIsNone(NativeMap.from_scalar(ScalarKind.FLOAT, 10**400))

    def test_coercion_options(self):
        lenient = MapperConfig(int_from_integral_float=True)
        strict = MapperConfig(double_from_int=False)
        self.assertEqualIncludingTypes(NativeMap(42.0, config=lenient).as_int(), 42)
        self.assertIsNone(NativeMap(42.5, config=lenient).as_int())
        self.assertIsNone(NativeMap(42, config=strict).as_double())

    def test_config_is_inherited_by_subvalues(self):
        config = MapperConfig(int_from_integral_float=True)
        source = NativeMap({'a': [1.0]}, config=config)
        item = source.get_at_index(MappingIndex('a')).as_array()[0]
        self.assertIs(item.config, config)
        self.assertEqual(item.as_int(), 1)

    @foreach([
        param([1, 2]),
        param((1, 2)),
    ])
    def test_as_array(self, value):
        self.assertEqual(NativeMap(value).as_array(), [NativeMap(1), NativeMap(2)])

    @foreach([
        param({'a': 1}),
        param('ab'),
        param(b'ab'),
        param(12),
    ])
    def test_as_array_non_array(self, value):
        self.assertIsNone(NativeMap(value).as_array())

    def test_get_at_index_non_object(self):
        self.assertIsNone(NativeMap([1]).get_at_index(MappingIndex('0')))
        self.assertIsNone(NativeMap('abc').get_at_index(MappingIndex('a')))

    def test_json(self):
        value = NativeMap.from_json('{"a": [1, 2.5, null, true]}')
        self.assertEqual(value.value, {'a': [1, 2.5, None, True]})
        self.assertEqual(value.to_json(sort_keys=True), '{"a": [1, 2.5, null, true]}')

    def test_equality(self):
        self.assertEqual(NativeMap({'a': 1}), NativeMap({'a': 1}))
        self.assertNotEqual(NativeMap({'a': 1}), NativeMap({'a': 2}))
        self.assertNotEqual(NativeMap(1), 1)
        self.assertEqual(repr(NativeMap([1])), '<NativeMap value=[1]>')


class TestTaggedMap(unittest.TestCase):

    def test_from_python_and_back(self):
        data = {'a': [1, 2.5, 'x', False], 'b': {}}
        value = TaggedMap.from_python(data)
        self.assertIs(value.kind, TaggedKind.OBJECT)
        self.assertIs(value.payload['a'].kind, TaggedKind.ARRAY)
        self.assertEqual([item.kind for item in value.payload['a'].payload], [
            TaggedKind.INT,
            TaggedKind.DOUBLE,
            TaggedKind.STRING,
            TaggedKind.BOOL,
        ])
        self.assertEqual(value.to_python(), data)

    def test_from_python_errors(self):
        with self.assertRaises(TypeError):
            TaggedMap.from_python({1: 'a'})
        with self.assertRaises(TypeError):
            TaggedMap.from_python([None])
        with self.assertRaises(TypeError):
            TaggedMap.from_python(object())

    def test_illegal_kind(self):
        with self.assertRaises(TypeError):
            TaggedMap('int', 1)

    def test_accessors_match_kind_exactly(self):
        int_value = TaggedMap.from_int(1)
        self.assertEqual(int_value.as_int(), 1)
        self.assertIsNone(int_value.as_double())
        self.assertIsNone(int_value.as_bool())
        self.assertIsNone(int_value.as_string())
        self.assertIsNone(int_value.as_array())
        self.assertIsNone(int_value.get_at_index(MappingIndex('x')))
        self.assertIsNone(TaggedMap.from_double(1.0).as_int())

    def test_fixed_width_defaults(self):
        self.assertEqual(TaggedMap.from_int(-1).get_scalar(ScalarKind.UINT16), 65535)
        self.assertEqual(TaggedMap.from_scalar(ScalarKind.UINT16, 7), TaggedMap.from_int(7))

    def test_decode_and_encode(self):
        source = TaggedMap.from_python({'string': 'x', 'ints': [1], 'nest': {'int': 2}})
        obj = Nesting.decode(source)
        self.assertEqual(obj, Nesting(string='x', ints=[1], nest=Nest(int=2)))
        self.assertEqual(obj.encode(TaggedMap).to_python(),
                         {'string': 'x', 'ints': [1], 'nest': {'int': 2}})


@expand
class TestNativeFunctions(TestCaseMixin, unittest.TestCase):

    @foreach([
        param(int, 7, 7),
        param(float, 7, 7.0),
        param(ZewoProject, 'annecy', ZewoProject.ANNECY),
        param(Nest, {'int': 3}, Nest(int=3)),
    ])
    def test_decode_native(self, target, data, expected):
        self.assertEqualIncludingTypes(decode_native(target, data), expected)

    def test_decode_native_with_context(self):
        self.assertEqual(decode_native(FruitNest, {'orange-int': 1}, Fruit.ORANGE),
                         FruitNest(int=1))

    def test_decode_native_with_config(self):
        config = MapperConfig(int_from_integral_float=True)
        self.assertEqual(decode_native(Nest, {'int': 3.0}, config=config), Nest(int=3))
        with self.assertRaises(InWrongTypeError):
            decode_native(Nest, {'int': 3.0})

    @foreach([
        param(7, None, 7),
        param(7, ScalarKind.DOUBLE, 7.0),
        param(ZewoProject.QUARK, None, 'quark'),
        param(Nest(int=3), None, {'int': 3}),
    ])
    def test_encode_native(self, value, kind, expected):
        self.assertEqualIncludingTypes(encode_native(value, kind=kind), expected)

    def test_encode_native_with_context(self):
        self.assertEqual(encode_native(FruitNest(int=1), Fruit.APPLE), {'apple-int': 1})

    def test_encode_native_into(self):
        into = {'other': 'stuff'}
        self.assertEqual(encode_native(Nest(int=3), into=into), {'other': 'stuff', 'int': 3})
        self.assertEqual(into, {'other': 'stuff'})
        self.assertEqual(
            encode_native(FruitHolder(nest=FruitNest(int=2)), Fruit.PEACH, into=into),
            {'other': 'stuff', 'nest': {'peach-int': 2}})

    def test_encode_native_failure(self):
        with self.assertRaises(OutWrongTypeError):
            encode_native({'a': 1})

    @foreach([
        param(42),
        param(ZewoProject.QUARK),
        param({'int': 1}),
        param(None),
    ])
    def test_encode_native_into_non_mappable(self, value):
        into = {'other': 'stuff'}
        with self.assertRaises(OutWrongTypeError):
            encode_native(value, into=into)
        self.assertEqual(into, {'other': 'stuff'})

    def test_encode_native_into_with_kind(self):
        with self.assertRaises(TypeError):
            encode_native(Nest(int=1), into={}, kind=ScalarKind.UINT8)
        with self.assertRaises(TypeError):
            encode_native(42, into={}, kind=ScalarKind.INT)

    def test_encode_native_with_double_kind_and_huge_int(self):
        with self.assertRaises(OutWrongTypeError):
            encode_native(10**400, kind=ScalarKind.DOUBLE)
