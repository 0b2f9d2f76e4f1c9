# Copyright (c) 2025-2026 NASK. All rights reserved.

import copy
import os
import os.path
import tempfile
import textwrap
import unittest
import unittest.mock as mock

from unittest_expander import (
    expand,
    foreach,
    param,
)

from structmap.config import (
    CONFIG_PATH_ENV_VAR,
    DEFAULT_CONFIG,
    ConfigError,
    MapperConfig,
)


@expand
class TestMapperConfig(unittest.TestCase):

    def test_defaults(self):
        config = MapperConfig()
        self.assertEqual(config.as_dict(), {
            'int_from_integral_float': False,
            'double_from_int': True,
            'fixed_width_overflow': 'truncate',
        })
        self.assertEqual(config, DEFAULT_CONFIG)
        self.assertEqual(hash(config), hash(DEFAULT_CONFIG))

    def test_settings(self):
        config = MapperConfig(double_from_int=False, fixed_width_overflow='error')
        self.assertIs(config.double_from_int, False)
        self.assertEqual(config.fixed_width_overflow, 'error')
        self.assertNotEqual(config, DEFAULT_CONFIG)

    @foreach([
        param(spam=True).label('unknown option'),
        param(int_from_integral_float='yes').label('bool option given a str'),
        param(double_from_int=1).label('bool option given an int'),
        param(fixed_width_overflow='wrap').label('illegal policy'),
        param(fixed_width_overflow=None).label('policy given None'),
    ])
    def test_illegal_settings(self, **settings):
        with self.assertRaises(ConfigError):
            MapperConfig(**settings)

    def test_immutability(self):
        config = MapperConfig()
        with self.assertRaises(AttributeError):
            config.double_from_int = False
        with self.assertRaises(AttributeError):
            config.spam = 'ham'
        self.assertIs(config.double_from_int, True)

    def test_copying(self):
        config = MapperConfig(fixed_width_overflow='error')
        self.assertIs(copy.copy(config), config)
        self.assertIs(copy.deepcopy(config), config)

    def test_repr(self):
        self.assertEqual(
            repr(MapperConfig()),
            "<MapperConfig double_from_int=True, fixed_width_overflow='truncate', "
            "int_from_integral_float=False>")

    def test_error_message(self):
        with self.assertRaises(ConfigError) as cm:
            MapperConfig(spam=1, ham=2)
        self.assertEqual(str(cm.exception),
                         '[configuration-related error] unknown option(s): ham, spam')


class _ConfigFileMixin(object):

    def setUp(self):
        tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(tmp_dir.cleanup)
        self.tmp_dir_path = tmp_dir.name

    def make_config_file(self, content, filename='structmap.ini'):
        path = os.path.join(self.tmp_dir_path, filename)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(textwrap.dedent(content))
        return path


@expand
class TestMapperConfigFromFile(_ConfigFileMixin, unittest.TestCase):

    def test_full(self):
        path = self.make_config_file('''
            [structmap]
            int_from_integral_float = yes
            double_from_int = off
            fixed_width_overflow = ERROR
        ''')
        with self.assertLogs('structmap.config', level='INFO') as cm:
            config = MapperConfig.from_file(path)
        self.assertEqual(config, MapperConfig(int_from_integral_float=True,
                                              double_from_int=False,
                                              fixed_width_overflow='error'))
        self.assertEqual(cm.output, [
            'INFO:structmap.config:Config file read properly: {!a}'.format(path),
        ])

    def test_partial(self):
        path = self.make_config_file('''
            [structmap]
            fixed_width_overflow = error
        ''')
        config = MapperConfig.from_file(path)
        self.assertEqual(config.fixed_width_overflow, 'error')
        self.assertIs(config.double_from_int, True)

    def test_no_section(self):
        path = self.make_config_file('''
            [other]
            spam = ham
        ''')
        self.assertEqual(MapperConfig.from_file(path), DEFAULT_CONFIG)

    def test_overrides(self):
        path = self.make_config_file('''
            [structmap]
            double_from_int = no
            fixed_width_overflow = error
        ''')
        config = MapperConfig.from_file(path, fixed_width_overflow='truncate')
        self.assertIs(config.double_from_int, False)
        self.assertEqual(config.fixed_width_overflow, 'truncate')

    @foreach([
        param('''
            [structmap]
            spam = 1
        ''').label('unknown option'),
        param('''
            [structmap]
            double_from_int = maybe
        ''').label('illegal bool'),
        param('''
            [structmap]
            fixed_width_overflow = wrap
        ''').label('illegal policy'),
        param('''
            [structmap]
            double_from_int
        ''').label('syntax error'),
        param('''
            [structmap]
            double_from_int = yes
            double_from_int = no
        ''').label('duplicate option'),
    ])
    def test_errors(self, content):
        path = self.make_config_file(content)
        with self.assertRaises(ConfigError):
            MapperConfig.from_file(path)

    def test_missing_file(self):
        with self.assertRaises(ConfigError) as cm:
            MapperConfig.from_file(os.path.join(self.tmp_dir_path, 'nonexistent.ini'))
        self.assertTrue(str(cm.exception).startswith(
            '[configuration-related error] cannot read config file'))


class TestMapperConfigFromEnv(_ConfigFileMixin, unittest.TestCase):

    def test_env_var_not_set(self):
        with mock.patch.dict(os.environ, clear=True):
            self.assertEqual(MapperConfig.from_env(), DEFAULT_CONFIG)
            self.assertEqual(MapperConfig.from_env(double_from_int=False),
                             MapperConfig(double_from_int=False))

    def test_env_var_set(self):
        path = self.make_config_file('''
            [structmap]
            int_from_integral_float = true
        ''')
        with mock.patch.dict(os.environ, {CONFIG_PATH_ENV_VAR: path}):
            config = MapperConfig.from_env()
        self.assertIs(config.int_from_integral_float, True)

    def test_env_var_pointing_to_nothing(self):
        path = os.path.join(self.tmp_dir_path, 'nonexistent.ini')
        with mock.patch.dict(os.environ, {CONFIG_PATH_ENV_VAR: path}), \
             self.assertLogs('structmap.config', level='WARNING') as cm:
            with self.assertRaises(ConfigError):
                MapperConfig.from_env()
        self.assertEqual(len(cm.output), 1)
        self.assertTrue(cm.output[0].startswith('WARNING:structmap.config:'))
        self.assertIn(CONFIG_PATH_ENV_VAR, cm.output[0])
