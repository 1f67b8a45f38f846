#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import math

import numpy as np

from minitype.result import Result
from minitype.validator import (
    UINT_53_MAX, is_integer, validate_uint, validate_pint, validate_big_int,
    validate_heximal, validate_instance, validate_array_items, inspect_heximal,
)
from minitype.formatter import (
    heximal_to_uint, decimal_to_uint, to_tidy_uint_decimal, to_tidy_pint_decimal,
    is_decimal_greater, format_grouped,
)


class BoundInt:
    '''
    Fixed-width unsigned or positive integers, integers that refuse to under- or
    over-flow their particular number of bits. Abstract class that is sub-typed
    in this module, each sub-type fixing its bit width and floor as class
    keywords:

        class UInt32(BoundInt, num_bits=32): ...
        class PInt64(BoundInt, num_bits=64, min_value=1): ...

    Instances are built by the `from_*()` factories, which validate their input
    and return a `Result`. Calling the class directly skips validation and is
    only meant for values already known to be in range.
    '''

    NUM_BITS = None
    MIN_VALUE = 0
    MAX_VALUE = None
    MAX_DECIMAL = None
    SIGN_NAME = 'unsigned'

    __slots__ = ('_value',)

    def __init_subclass__(cls, num_bits=None, min_value=0, **kwargs):
        super().__init_subclass__(**kwargs)
        if num_bits is None:
            return
        cls.NUM_BITS = num_bits
        cls.MIN_VALUE = min_value
        cls.MAX_VALUE = (2 ** num_bits) - 1  # 0xFFF... or 0b111...
        cls.MAX_DECIMAL = str(cls.MAX_VALUE)
        cls.SIGN_NAME = 'positive' if min_value > 0 else 'unsigned'

    def __init__(self, value):
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self):
        return self._value

    @classmethod
    def _is_positive(cls):
        return cls.MIN_VALUE > 0

    @classmethod
    def from_number(cls, value):
        '''
        Wrap a native integer. Types up to 32 bits accept their whole range,
        wider types accept what a double holds exactly, up to 53 bits.
        '''
        if cls.NUM_BITS <= 32:
            if not is_integer(value) or value < 0:
                return Result.type_error('expect a unsigned integer')
            if value > cls.MAX_VALUE:
                return Result.type_error(f"overflow unsigned integer {cls.NUM_BITS} bits")
        else:
            r1 = validate_pint(value) if cls._is_positive() else validate_uint(value)
            if r1.error:
                return r1
        return Result.ok(cls(int(value)))

    @classmethod
    def from_big_int(cls, value):
        r1 = validate_big_int(value)
        if r1.error:
            return r1
        if value < cls.MIN_VALUE:
            if cls._is_positive():
                return Result.type_error('expect a big positive integer')
            return Result.type_error('expect unsigned big integer')
        if value > cls.MAX_VALUE:
            return Result.type_error(f"overflow {cls.SIGN_NAME} integer {cls.NUM_BITS} bits")
        return Result.ok(cls(int(value)))

    @classmethod
    def from_decimal(cls, value):
        '''
        Parse a decimal string, leading zeros allowed. The bound is checked on
        the tidy string before any parsing happens.
        '''
        r1 = to_tidy_pint_decimal(value) if cls._is_positive() else to_tidy_uint_decimal(value)
        if r1.error:
            return r1
        decimal = r1.data
        if is_decimal_greater(decimal, cls.MAX_DECIMAL):
            return Result.type_error(f"overflow decimal {cls.SIGN_NAME} integer {cls.NUM_BITS} bits")
        return Result.ok(cls(int(decimal, 10)))

    @classmethod
    def from_heximal(cls, value):
        '''
        Parse a `0x` prefixed heximal string, leading zeros allowed. The number
        of significant digits is bounded before parsing, and when the width is
        not a whole number of nibbles the top digit is bounded too.
        '''
        r1 = validate_heximal(value)
        if r1.error:
            return r1
        length, top = inspect_heximal(value)
        max_length = math.ceil(cls.NUM_BITS / 4)
        max_top = (2 ** (cls.NUM_BITS - 4 * (max_length - 1))) - 1
        if length > max_length or (length == max_length and top > max_top):
            return Result.type_error(f"overflow heximal {cls.NUM_BITS} bits")
        number = int(value, 16)
        if number < cls.MIN_VALUE:
            return Result.type_error('expect a positive integer from heximal')
        return Result.ok(cls(number))

    @classmethod
    def min(cls, *values):
        '''
        Least of one or more values of this type.
        '''
        validate_array_items(values, cls, 1).open()
        return min(values, key=lambda v: v._value)

    def _check_operand(self, other):
        validate_instance(other, type(self)).open()

    def _bound_result(self, value):
        '''
        Wrap the result of some math, which must still fit this type.
        '''
        cls = type(self)
        if value < cls.MIN_VALUE:
            logging.debug(f"Result {value} of {cls.__name__} math is below {cls.MIN_VALUE}.")
            raise OverflowError('expect positive result' if cls._is_positive() else 'negative result')
        if value > cls.MAX_VALUE:
            logging.debug(f"Result {value} of {cls.__name__} math is above {cls.MAX_VALUE}.")
            raise OverflowError(f"overflow {cls.SIGN_NAME} integer {cls.NUM_BITS} bits")
        return cls(value)

    def add(self, other):
        self._check_operand(other)
        return self._bound_result(self._value + other._value)

    def sub(self, other):
        self._check_operand(other)
        return self._bound_result(self._value - other._value)

    def mul(self, other):
        self._check_operand(other)
        return self._bound_result(self._value * other._value)

    def div(self, other):
        '''
        Integer division, the fraction is dropped.
        '''
        self._check_operand(other)
        if other._value == 0:
            raise ZeroDivisionError('divide by zero')
        return self._bound_result(self._value // other._value)

    def add_number(self, value):
        validate_uint(value).open()
        return self._bound_result(self._value + int(value))

    def sub_number(self, value):
        validate_uint(value).open()
        return self._bound_result(self._value - int(value))

    '''
    Comparisons cannot overflow, so just implement these with the underlying
    Python int() operators, once the operand has the same type.
    '''
    def eq(self, other):
        self._check_operand(other)
        return self._value == other._value

    def lt(self, other):
        self._check_operand(other)
        return self._value < other._value

    def lte(self, other):
        self._check_operand(other)
        return self._value <= other._value

    def gt(self, other):
        self._check_operand(other)
        return self._value > other._value

    def gte(self, other):
        self._check_operand(other)
        return self._value >= other._value

    def is_zero(self):
        return self._value == 0

    def clone(self):
        return type(self)(self._value)

    def to_number(self):
        '''
        The value as a native-safe integer, at most 53 bits.
        '''
        if self._value > UINT_53_MAX:
            raise OverflowError('overflow unsigned integer 53 bits')
        return self._value

    def to_heximal(self):
        return f"0x{self._value:x}"

    def to_decimal(self):
        return str(self._value)

    def format(self, min_digits=1):
        return format_grouped(self._value, min_digits)

    def format2(self): return self.format(2)
    def format3(self): return self.format(3)
    def format4(self): return self.format(4)
    def format5(self): return self.format(5)
    def format6(self): return self.format(6)
    def format7(self): return self.format(7)
    def format8(self): return self.format(8)
    def format9(self): return self.format(9)

    def __eq__(self, o):
        if type(o) is not type(self):
            return NotImplemented
        return self._value == o._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __lt__(self, o): return self.lt(o)
    def __le__(self, o): return self.lte(o)
    def __gt__(self, o): return self.gt(o)
    def __ge__(self, o): return self.gte(o)

    def __add__(self, o): return self.add(o)
    def __sub__(self, o): return self.sub(o)
    def __mul__(self, o): return self.mul(o)
    def __floordiv__(self, o): return self.div(o)

    def __int__(self):
        return self._value

    def __format__(self, *fmt_args):
        '''
        Format specs are those of the wrapped int, e.g. `f"{n:#x}"` or
        `f"{n:,d}"`.
        '''
        return self._value.__format__(*fmt_args)

    def __repr__(self):
        return f"{type(self).__name__}({self._value})"


class BufferInt(BoundInt):
    '''
    Integers that can also be read from big-endian bytes.
    '''

    __slots__ = ()

    @classmethod
    def from_buffer(cls, value):
        '''
        Read from one up to `NUM_BITS / 8` bytes.
        '''
        num_bytes = cls.NUM_BITS // 8
        if not isinstance(value, (bytes, bytearray)):
            return Result.type_error('expect bytes')
        if len(value) == 0 or len(value) > num_bytes:
            return Result.type_error(f"expect buffer 1-{num_bytes} bytes")
        return Result.ok(cls(int.from_bytes(value, 'big')))

    @classmethod
    def from_fixed_buffer(cls, value):
        '''
        Read from exactly `NUM_BITS / 8` bytes.
        '''
        num_bytes = cls.NUM_BITS // 8
        if not isinstance(value, (bytes, bytearray)):
            return Result.type_error('expect bytes')
        if len(value) != num_bytes:
            return Result.type_error(f"expect buffer {num_bytes} bytes")
        return Result.ok(cls(int.from_bytes(value, 'big')))


class UInt(BoundInt, num_bits=53):
    """
    Unsigned integer that a double holds exactly, 53 bits.
    """

    __slots__ = ()

    @classmethod
    def from_decimal(cls, value):
        r1 = decimal_to_uint(value)
        if r1.error:
            return r1
        return Result.ok(cls(r1.data))

    @classmethod
    def from_heximal(cls, value):
        r1 = heximal_to_uint(value)
        if r1.error:
            return r1
        return Result.ok(cls(r1.data))


class UInt8(BoundInt, num_bits=8):
    __slots__ = ()


class UInt16(BufferInt, num_bits=16):
    __slots__ = ()


class UInt32(BoundInt, num_bits=32):
    __slots__ = ()


class UInt64(BufferInt, num_bits=64):
    """
    Class for a common 64-bit unsigned integer type.
    """

    __slots__ = ()

    def add_pint64(self, other):
        validate_instance(other, PInt64).open()
        return self._bound_result(self._value + other._value)


class UInt256(BoundInt, num_bits=256):
    """
    Class for a common 256-bit unsigned integer type, e.g. an EVM word.
    """

    __slots__ = ()


class PInt(BoundInt, num_bits=53, min_value=1):
    """
    Positive integer that a double holds exactly, 53 bits. Zero is excluded.
    """

    __slots__ = ()


class PInt64(BoundInt, num_bits=64, min_value=1):
    __slots__ = ()


class PInt256(BoundInt, num_bits=256, min_value=1):
    __slots__ = ()


FLOAT64_MAX_INT = int(np.finfo(np.float64).max)


class BoundFloat:
    '''
    Finite double precision number. Abstract class, see `Float64` and
    `UFloat64`.
    '''

    __slots__ = ('_value',)

    def __init__(self, value):
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self):
        return self._value

    @staticmethod
    def _to_float(value):
        '''
        Convert a Python or numpy number to a float, or `None` if it is not a
        number at all. Integers too large for a double become infinity.
        '''
        if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
            return None
        if isinstance(value, (int, np.integer)) and abs(int(value)) > FLOAT64_MAX_INT:
            return math.copysign(math.inf, int(value))
        return float(value)

    def __eq__(self, o):
        if type(o) is not type(self):
            return NotImplemented
        return self._value == o._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __float__(self):
        return self._value

    def __format__(self, *fmt_args):
        return self._value.__format__(*fmt_args)

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r})"


class Float64(BoundFloat):

    __slots__ = ()

    @classmethod
    def from_number(cls, value):
        number = cls._to_float(value)
        if number is None or np.isnan(number):
            return Result.type_error('expect a number')
        if not np.isfinite(number):
            return Result.type_error('overflow float number 64 bits')
        return Result.ok(cls(number))


class UFloat64(BoundFloat):

    __slots__ = ()

    @classmethod
    def from_number(cls, value):
        number = cls._to_float(value)
        if number is None or np.isnan(number) or number < 0:
            return Result.type_error('expect a unsigned number')
        if not np.isfinite(number):
            return Result.type_error('overflow float number 64 bits')
        return Result.ok(cls(number))
