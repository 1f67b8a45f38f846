#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import re

from minitype.result import Result
from minitype.validator import UINT_53_MAX, validate_uint, validate_big_uint, validate_instance

KILOBYTE = 1024
MEGABYTE = 1024 ** 2

DATA_SIZE_MAX_DIGITS = 256  # significant digits each side of the dot
DATA_SIZE_PATTERN = re.compile(r'^([0-9]+)(\.[0-9]+)?(B|KB|MB|GB|TB|PB|EB|ZB|YB)?$')
DATA_SIZE_MULTIPLIERS = {
    None: 1,
    'B': 1,
    'KB': 1024 ** 1,
    'MB': 1024 ** 2,
    'GB': 1024 ** 3,
    'TB': 1024 ** 4,
    'PB': 1024 ** 5,
    'EB': 1024 ** 6,
    'ZB': 1024 ** 7,
    'YB': 1024 ** 8,
}


class DataSize:
    '''
    Size of some data in bytes, an unsigned integer with no upper bound.
    '''

    __slots__ = ('_value',)

    def __init__(self, value):
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError('DataSize is immutable')

    @property
    def value(self):
        return self._value

    @classmethod
    def from_bytes(cls, value):
        r1 = validate_uint(value)
        if r1.error:
            return r1
        return Result.ok(cls(int(value)))

    @classmethod
    def from_big_int(cls, value):
        r1 = validate_big_uint(value)
        if r1.error:
            return r1
        return Result.ok(cls(int(value)))

    @classmethod
    def from_megabytes(cls, value):
        r1 = validate_uint(value)
        if r1.error:
            return r1
        return Result.ok(cls(MEGABYTE * int(value)))

    @classmethod
    def from_string(cls, value):
        '''
        Parse a human written size, binary multiples and an optional fraction,
        which is truncated to whole bytes:

            DataSize.from_string('1')      # 1 byte
            DataSize.from_string('3.1KB')  # 3174 bytes
            DataSize.from_string('1.5GB')  # 1610612736 bytes

        More than `DATA_SIZE_MAX_DIGITS` significant digits on either side of
        the dot is an overflow.
        '''
        r1 = validate_instance(value, str)
        if r1.error:
            return r1
        matched = DATA_SIZE_PATTERN.match(value)
        if matched is None:
            return Result.type_error('expect data size string')
        integer_part, fraction_part, postfix = matched.groups()
        integer_digits = integer_part.lstrip('0') or '0'
        fraction_digits = fraction_part[1:].rstrip('0') if fraction_part else ''
        if len(integer_digits) > DATA_SIZE_MAX_DIGITS or len(fraction_digits) > DATA_SIZE_MAX_DIGITS:
            return Result.type_error('overflow data size string')
        multiplier = DATA_SIZE_MULTIPLIERS[postfix]
        size = int(integer_digits) * multiplier
        if fraction_digits:
            size += int(fraction_digits) * multiplier // (10 ** len(fraction_digits))
        logging.debug(f"Parsed '{value}' data size as {size:,d} bytes.")
        return Result.ok(cls(size))

    def to_number(self):
        if self._value > UINT_53_MAX:
            return Result.error(OverflowError('overflow unsigned integer 53 bits'))
        return Result.ok(self._value)

    def clone(self):
        return DataSize(self._value)

    def format(self):
        '''
        Short text for humans: bytes below a kilobyte, whole kilobytes below a
        megabyte, megabytes with the leftover kilobytes after the dot above.
        '''
        v = self._value
        if v < KILOBYTE:
            return f"{v}B"
        elif v < MEGABYTE:
            return f"{v // KILOBYTE}KB"
        megabytes, rest = divmod(v, MEGABYTE)
        return f"{megabytes}.{rest // KILOBYTE}MB"

    def __eq__(self, o):
        if not isinstance(o, DataSize):
            return NotImplemented
        return self._value == o._value

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        return f"DataSize({self._value})"
