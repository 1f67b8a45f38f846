#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pytest
import unittest

import numpy as np

from minitype.result import Result
from minitype.validator import (
    UINT_53_MAX, is_object, is_non_empty_string, is_integer,
    validate_uint, validate_pint, validate_big_int, validate_big_uint,
    validate_heximal, validate_heximal_byte_array, validate_uint_decimal, validate_pint_decimal,
    validate_object, validate_array, validate_array_items, validate_instance, inspect_heximal,
)


class PredicateTestCase(unittest.TestCase):

    def test_is_object(self):
        self.assertTrue(is_object({}))
        self.assertTrue(is_object({'a': 1}))
        self.assertFalse(is_object(None))
        self.assertFalse(is_object([]))
        self.assertFalse(is_object('a'))

    def test_is_non_empty_string(self):
        self.assertTrue(is_non_empty_string('a'))
        self.assertTrue(is_non_empty_string(' '))
        self.assertFalse(is_non_empty_string(''))
        self.assertFalse(is_non_empty_string(None))

    def test_is_integer(self):
        for value in (0, 1, -1, 2 ** 100, 3.0, np.int32(5), np.uint64(5)):
            self.assertTrue(is_integer(value), value)
        for value in (1.5, float('inf'), float('nan'), '1', None, True, False):
            self.assertFalse(is_integer(value), value)


class NumberValidatorTestCase(unittest.TestCase):

    def test_validate_uint(self):
        self.assertEqual(validate_uint(0), Result.ok())
        self.assertEqual(validate_uint(UINT_53_MAX), Result.ok())
        self.assertEqual(validate_uint(UINT_53_MAX + 1), Result.type_error('overflow unsigned integer 53 bits'))
        for value in (-1, 1.5, '1', None):
            self.assertEqual(validate_uint(value), Result.type_error('expect a unsigned integer'))

    def test_validate_pint(self):
        self.assertEqual(validate_pint(1), Result.ok())
        self.assertEqual(validate_pint(UINT_53_MAX), Result.ok())
        self.assertEqual(validate_pint(UINT_53_MAX + 1), Result.type_error('overflow positive integer 53 bits'))
        for value in (0, -1, 1.5, '1'):
            self.assertEqual(validate_pint(value), Result.type_error('expect a positive integer'))

    def test_validate_big_int(self):
        self.assertEqual(validate_big_int(-(2 ** 300)), Result.ok())
        self.assertEqual(validate_big_int(np.int64(-1)), Result.ok())
        for value in (1.0, '1', None, True):
            self.assertEqual(validate_big_int(value), Result.type_error('expect type int'))

    def test_validate_big_uint(self):
        self.assertEqual(validate_big_uint(0), Result.ok())
        self.assertEqual(validate_big_uint(2 ** 300), Result.ok())
        self.assertEqual(validate_big_uint(-1), Result.type_error('expect unsigned big integer'))
        self.assertEqual(validate_big_uint(1.0), Result.type_error('expect type int'))


class StringValidatorTestCase(unittest.TestCase):

    def test_validate_heximal(self):
        for value in ('0x0', '0xff', '0xABCdef0123456789'):
            self.assertEqual(validate_heximal(value), Result.ok())
        for value in ('0x', 'ff', '0xfg', '0Xff', ' 0xff', None, 255):
            self.assertEqual(validate_heximal(value), Result.type_error('expect Heximal'))

    def test_validate_heximal_byte_array(self):
        self.assertEqual(validate_heximal_byte_array('0x'), Result.ok())
        self.assertEqual(validate_heximal_byte_array('0x1ffcc'), Result.ok())
        self.assertEqual(validate_heximal_byte_array('1ffcc'), Result.type_error('expect HeximalByteArray'))
        self.assertEqual(validate_heximal_byte_array(b'0x'), Result.type_error('expect HeximalByteArray'))

    def test_validate_uint_decimal(self):
        for value in ('0', '000', '0123', '9' * 100):
            self.assertEqual(validate_uint_decimal(value), Result.ok())
        for value in ('', '-1', '1.0', '1e3', ' 1', 1):
            self.assertEqual(validate_uint_decimal(value), Result.type_error('expect a unsigned integer from decimal'))

    def test_validate_pint_decimal(self):
        self.assertEqual(validate_pint_decimal('1'), Result.ok())
        self.assertEqual(validate_pint_decimal('1000'), Result.ok())
        for value in ('0', '01', '', '-1', 1):
            self.assertEqual(validate_pint_decimal(value), Result.type_error('expect a positive integer from decimal'))


class ContainerValidatorTestCase(unittest.TestCase):

    def test_validate_object(self):
        self.assertEqual(validate_object({}), Result.ok())
        self.assertEqual(validate_object([]), Result.type_error('expect an object'))
        self.assertEqual(validate_object(None), Result.type_error('expect an object'))

    def test_validate_array(self):
        self.assertEqual(validate_array([]), Result.ok())
        self.assertEqual(validate_array((1, 2)), Result.ok())
        self.assertEqual(validate_array('ab'), Result.type_error('expect an array'))
        self.assertEqual(validate_array([], 1), Result.type_error('expect an array has at least 1 items'))
        self.assertEqual(validate_array([1, 2, 3], 0, 2), Result.type_error('expect an array has at most 2 items'))
        self.assertEqual(validate_array([1, 2], 2, 2), Result.ok())

    def test_validate_array_items(self):
        self.assertEqual(validate_array_items([1, 2], int), Result.ok())
        self.assertEqual(validate_array_items([1, 'a'], int), Result.type_error('expect items are int'))
        self.assertEqual(validate_array_items([1, 'a'], (int, str)), Result.ok())
        self.assertEqual(validate_array_items([None], (int, str)), Result.type_error('expect items are int or str'))
        self.assertEqual(validate_array_items([], int, 1), Result.type_error('expect an array has at least 1 items'))

    def test_validate_instance(self):
        self.assertEqual(validate_instance(1, int), Result.ok(1))
        self.assertEqual(validate_instance('1', int), Result.type_error('expect int'))
        with pytest.raises(TypeError, match='^expect dict$'):
            validate_instance([], dict).open()


class InspectHeximalTestCase(unittest.TestCase):

    def test_inspect_heximal(self):
        self.assertEqual(inspect_heximal('0x0'), (0, None))
        self.assertEqual(inspect_heximal('0x0000'), (0, None))
        self.assertEqual(inspect_heximal('0x1'), (1, 1))
        self.assertEqual(inspect_heximal('0x00f0'), (2, 15))
        self.assertEqual(inspect_heximal('0x1fffffffffffff'), (14, 1))


if __name__ == '__main__':
    unittest.main()
