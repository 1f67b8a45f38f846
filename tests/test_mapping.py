#!/usr/bin/env python
# -*- coding: utf-8 -*-

import unittest

from minitype.result import Result
from minitype.number import UInt8, UInt32
from minitype.string import TidyString
from minitype.mapping import map_object, map_array, format_object


class MapObjectTestCase(unittest.TestCase):

    def test_map_object(self):
        result = map_object({'count': '10', 'name': ' Ann ', 'extra': 1}, [
            ('count', UInt32.from_decimal),
            ('name', TidyString.from_string, 'title'),
        ])
        self.assertEqual(result, Result.ok({'count': UInt32(10), 'title': TidyString('Ann')}))

    def test_missing_key(self):
        result = map_object({}, [('count', UInt32.from_decimal)])
        self.assertEqual(result, Result.type_error('count: expect a unsigned integer from decimal'))

    def test_first_failure_wins(self):
        result = map_object({'a': 'x', 'b': ''}, [
            ('a', UInt8.from_decimal),
            ('b', TidyString.from_string),
        ])
        self.assertEqual(result, Result.type_error('a: expect a unsigned integer from decimal'))

    def test_plain_error(self):
        result = map_object({'a': 1}, [('a', lambda value: Result.error('bad'))])
        self.assertEqual(result, Result.error('a: bad'))

    def test_falsy_error(self):
        result = map_object({'a': 1, 'b': 2}, [
            ('a', lambda value: Result.error('')),
            ('b', lambda value: Result.ok(value)),
        ])
        self.assertEqual(result, Result.error('a: '))
        result = map_object({'a': 1}, [('a', lambda value: Result.error(None))])
        self.assertTrue(result.is_error)

    def test_not_an_object(self):
        self.assertEqual(map_object(['a'], []), Result.type_error('expect an object'))
        self.assertIs(format_object, map_object)


class MapArrayTestCase(unittest.TestCase):

    def test_map_array(self):
        self.assertEqual(map_array(['1', '2'], UInt8.from_decimal), Result.ok([UInt8(1), UInt8(2)]))
        self.assertEqual(map_array([], UInt8.from_decimal), Result.ok([]))

    def test_falsy_error(self):
        self.assertEqual(map_array([1], lambda value: Result.error(None)), Result.error('[0]: None'))
        self.assertEqual(map_array([1, 2], lambda value: Result.error('')), Result.error('[0]: '))

    def test_failures(self):
        self.assertEqual(
            map_array(['1', 'x'], UInt8.from_decimal),
            Result.type_error('[1]: expect a unsigned integer from decimal'),
        )
        self.assertEqual(map_array('12', UInt8.from_decimal), Result.type_error('expect an array'))
        self.assertEqual(map_array([], UInt8.from_decimal, 1), Result.type_error('expect an array has at least 1 items'))
        self.assertEqual(
            map_array(['1', '2'], UInt8.from_decimal, 0, 1),
            Result.type_error('expect an array has at most 1 items'),
        )


if __name__ == '__main__':
    unittest.main()
