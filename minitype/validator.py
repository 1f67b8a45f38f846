#!/usr/bin/env python
# -*- coding: utf-8 -*-

import re

import numpy as np

from minitype.result import Result

'''
Stateless checks shared by every value type. Each check returns a `Result`,
an ok result with no data when the input passes.
'''

UINT_53_MAX = 2 ** 53 - 1  # largest integer a double holds exactly

HEXIMAL_PATTERN = re.compile(r'^0x[0-9a-fA-F]+$')
HEXIMAL_BYTE_ARRAY_PATTERN = re.compile(r'^0x[0-9a-fA-F]*$')
UINT_DECIMAL_PATTERN = re.compile(r'^[0-9]+$')
PINT_DECIMAL_PATTERN = re.compile(r'^[1-9][0-9]*$')


def is_object(value):
    return isinstance(value, dict)


def is_non_empty_string(value):
    return isinstance(value, str) and len(value) > 0


def is_integer(value):
    '''
    Is this an integer number, a Python int, a numpy integer or a float with
    no fractional part? Booleans are not numbers here.
    '''
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, np.integer)):
        return True
    if isinstance(value, (float, np.floating)):
        return bool(np.isfinite(value)) and float(value).is_integer()
    return False


def validate_uint(value):
    if not is_integer(value) or value < 0:
        return Result.type_error('expect a unsigned integer')
    if value > UINT_53_MAX:
        return Result.type_error('overflow unsigned integer 53 bits')
    return Result.ok()


def validate_pint(value):
    if not is_integer(value) or value < 1:
        return Result.type_error('expect a positive integer')
    if value > UINT_53_MAX:
        return Result.type_error('overflow positive integer 53 bits')
    return Result.ok()


def validate_big_int(value):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return Result.type_error('expect type int')
    return Result.ok()


def validate_big_uint(value):
    r1 = validate_big_int(value)
    if r1.error:
        return r1
    if value < 0:
        return Result.type_error('expect unsigned big integer')
    return Result.ok()


def validate_heximal(value):
    if not isinstance(value, str) or not HEXIMAL_PATTERN.match(value):
        return Result.type_error('expect Heximal')
    return Result.ok()


def validate_heximal_byte_array(value):
    '''
    Like `validate_heximal()` but `0x` alone passes, it stands for an empty
    sequence of bytes.
    '''
    if not isinstance(value, str) or not HEXIMAL_BYTE_ARRAY_PATTERN.match(value):
        return Result.type_error('expect HeximalByteArray')
    return Result.ok()


def validate_uint_decimal(value):
    if not isinstance(value, str) or not UINT_DECIMAL_PATTERN.match(value):
        return Result.type_error('expect a unsigned integer from decimal')
    return Result.ok()


def validate_pint_decimal(value):
    if not isinstance(value, str) or not PINT_DECIMAL_PATTERN.match(value):
        return Result.type_error('expect a positive integer from decimal')
    return Result.ok()


def validate_object(value):
    if not is_object(value):
        return Result.type_error('expect an object')
    return Result.ok()


def validate_array(value, min_length=0, max_length=None):
    if not isinstance(value, (list, tuple)):
        return Result.type_error('expect an array')
    if len(value) < min_length:
        return Result.type_error(f"expect an array has at least {min_length} items")
    if max_length is not None and len(value) > max_length:
        return Result.type_error(f"expect an array has at most {max_length} items")
    return Result.ok()


def validate_array_items(value, item_type, min_length=0, max_length=None):
    r1 = validate_array(value, min_length, max_length)
    if r1.error:
        return r1
    for item in value:
        if not isinstance(item, item_type):
            return Result.type_error(f"expect items are {_type_name(item_type)}")
    return Result.ok()


def validate_instance(value, expected_type):
    '''
    Check that `value` is an instance of `expected_type` (a class or a tuple of
    classes). On success the ok result carries the value itself.
    '''
    if not isinstance(value, expected_type):
        return Result.type_error(f"expect {_type_name(expected_type)}")
    return Result.ok(value)


def inspect_heximal(value):
    '''
    Count the significant digits of an already validated heximal string, by
    skipping the `0x` prefix and any leading zeros. Returns the count and the
    value of the first significant digit, or `(0, None)` for a zero. Lets the
    number types bound a heximal by bit width before parsing it.
    '''
    digits = value[2:].lstrip('0')
    if len(digits) == 0:
        return 0, None
    return len(digits), int(digits[0], 16)


def _type_name(expected_type):
    if isinstance(expected_type, tuple):
        return ' or '.join(t.__name__ for t in expected_type)
    return expected_type.__name__
