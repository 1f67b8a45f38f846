#!/usr/bin/env python
# -*- coding: utf-8 -*-

from minitype.result import Result
from minitype.validator import validate_instance
from minitype.formatter import heximal_to_buffer


class ByteData:
    '''
    Immutable array of bytes. Ordered by length first, then byte by byte, so a
    shorter array is always the lesser one.
    '''

    __slots__ = ('_value',)

    def __init__(self, value):
        object.__setattr__(self, '_value', bytes(value))

    def __setattr__(self, name, value):
        raise AttributeError('ByteData is immutable')

    @property
    def value(self):
        return self._value

    @classmethod
    def from_buffer(cls, value):
        if not isinstance(value, (bytes, bytearray)):
            return Result.type_error('expect bytes')
        return Result.ok(cls(value))

    @classmethod
    def from_heximal(cls, value):
        r1 = heximal_to_buffer(value)
        if r1.error:
            return r1
        return Result.ok(cls(r1.data))

    def eq(self, other):
        validate_instance(other, ByteData).open()
        return self._value == other._value

    def lt(self, other):
        validate_instance(other, ByteData).open()
        if len(self._value) != len(other._value):
            return len(self._value) < len(other._value)
        return self._value < other._value

    def gt(self, other):
        validate_instance(other, ByteData).open()
        if len(self._value) != len(other._value):
            return len(self._value) > len(other._value)
        return self._value > other._value

    def to_heximal(self):
        return '0x' + self._value.hex()

    def __len__(self):
        return len(self._value)

    def __eq__(self, o):
        if not isinstance(o, ByteData):
            return NotImplemented
        return self._value == o._value

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        return f"ByteData({self.to_heximal()})"
