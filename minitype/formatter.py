#!/usr/bin/env python
# -*- coding: utf-8 -*-

from minitype.result import Result
from minitype.validator import (
    UINT_53_MAX, UINT_DECIMAL_PATTERN, validate_heximal, validate_heximal_byte_array,
    validate_uint_decimal, validate_pint_decimal, inspect_heximal,
)

'''
Conversions between heximal strings, decimal strings, integers and bytes, plus
the en-US style digit grouping used by the number types.
'''

MIN_INTEGER_DIGITS = 1
MAX_INTEGER_DIGITS = 9

UINT_53_MAX_DECIMAL = str(UINT_53_MAX)
UINT_53_MAX_NIBBLES = 14  # 53 bits is 13 full nibbles plus a single top bit
UINT_53_MAX_TOP_NIBBLE = 0x1


def heximal_to_uint(value):
    '''
    Parse a heximal string into a native-safe unsigned integer, at most 53
    bits, i.e. `0x1fffffffffffff`.
    '''
    r1 = validate_heximal(value)
    if r1.error:
        return r1
    length, top = inspect_heximal(value)
    if length > UINT_53_MAX_NIBBLES or (length == UINT_53_MAX_NIBBLES and top > UINT_53_MAX_TOP_NIBBLE):
        return Result.type_error('overflow heximal 53 bits')
    return Result.ok(int(value, 16))


def heximal_to_buffer(value):
    '''
    Decode a heximal string into bytes. An odd number of digits is padded
    with a leading zero nibble, so `0x1ffcc` is `01 ff cc`, and `0x` alone is
    an empty byte string.
    '''
    r1 = validate_heximal_byte_array(value)
    if r1.error:
        return r1
    digits = value[2:]
    if len(digits) % 2 == 1:
        digits = '0' + digits
    return Result.ok(bytes.fromhex(digits))


def heximal_to_fixed_buffer(value, size):
    '''
    Decode a heximal string of exactly `size` bytes, two digits each.
    '''
    r1 = validate_heximal(value)
    if r1.error:
        return r1
    digits = value[2:]
    if len(digits) != size * 2:
        return Result.type_error(f"expect a heximal {size} bytes")
    return Result.ok(bytes.fromhex(digits))


def to_tidy_uint_decimal(value):
    '''
    Strip leading zeros from an unsigned decimal, `'001230'` becomes `'1230'`
    and `'000'` becomes `'0'`.
    '''
    r1 = validate_uint_decimal(value)
    if r1.error:
        return r1
    tidy = value.lstrip('0')
    if len(tidy) == 0:
        return Result.ok('0')
    return Result.ok(tidy)


def to_tidy_pint_decimal(value):
    '''
    Strip leading zeros from a positive decimal. A decimal made of zeros only
    is not positive and fails.
    '''
    if not isinstance(value, str) or not UINT_DECIMAL_PATTERN.match(value):
        return Result.type_error('expect a positive integer from decimal')
    tidy = value.lstrip('0')
    if len(tidy) == 0:
        return Result.type_error('expect a decimal of positive integer')
    return Result.ok(tidy)


def decimal_to_uint(value):
    '''
    Parse a decimal string into a native-safe unsigned integer, leading zeros
    allowed. The digits are bounded before they are parsed.
    '''
    if not isinstance(value, str) or not UINT_DECIMAL_PATTERN.match(value):
        return Result.type_error('expect a unsigned integer decimal')
    tidy = value.lstrip('0') or '0'
    if is_decimal_greater(tidy, UINT_53_MAX_DECIMAL):
        return Result.type_error('overflow unsigned integer decimal 53 bits')
    return Result.ok(int(tidy, 10))


def decimal_to_pint(value):
    r1 = validate_pint_decimal(value)
    if r1.error:
        return r1
    if is_decimal_greater(value, UINT_53_MAX_DECIMAL):
        return Result.type_error('overflow positive integer decimal 53 bits')
    return Result.ok(int(value, 10))


def is_decimal_greater(operand1, operand2):
    '''
    Compare two digit-only strings without parsing them. The longer string is
    the greater number; with equal lengths the character order decides.
    Neither operand may carry leading zeros.
    '''
    if len(operand1) > len(operand2):
        return True
    elif len(operand1) < len(operand2):
        return False
    return operand1 > operand2


def format_grouped(value, min_digits=MIN_INTEGER_DIGITS):
    '''
    Render an integer with thousands separators, zero padded to at least
    `min_digits` digits. `format_grouped(1, 4)` is `'0,001'` and
    `format_grouped(1234567)` is `'1,234,567'`.
    '''
    if not MIN_INTEGER_DIGITS <= min_digits <= MAX_INTEGER_DIGITS:
        raise ValueError(f"Minimum digits {min_digits} out-of-range {MIN_INTEGER_DIGITS} to {MAX_INTEGER_DIGITS}")
    # the width counts the separators that fall inside the padding
    width = min_digits + (min_digits - 1) // 3
    return f"{int(value):0{width},d}"
