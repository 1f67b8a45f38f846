#!/usr/bin/env python
# -*- coding: utf-8 -*-

from minitype.result import Result


class TidyString:
    '''
    A string with no spaces at either end and at least one symbol.
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
    def _tidy(value):
        return value.strip()

    @classmethod
    def from_string(cls, value):
        if not isinstance(value, str):
            return Result.type_error('expect a non empty string')
        tidy = cls._tidy(value)
        if len(tidy) == 0:
            return Result.type_error('expect a non empty string')
        return Result.ok(cls(tidy))

    def __eq__(self, o):
        if type(o) is not type(self):
            return NotImplemented
        return self._value == o._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __str__(self):
        return self._value

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r})"


class LowerTidyString(TidyString):
    """
    A `TidyString` in lowercase, the input is converted.
    """

    __slots__ = ()

    @staticmethod
    def _tidy(value):
        return value.strip().lower()
