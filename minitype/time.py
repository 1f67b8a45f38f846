#!/usr/bin/env python
# -*- coding: utf-8 -*-

from datetime import datetime, timezone

from minitype.result import Result
from minitype.validator import UINT_53_MAX, validate_uint, validate_instance

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE


def _from_unit(cls, value, ms_per_unit):
    r1 = validate_uint(value)
    if r1.error:
        return r1
    ms = int(value) * ms_per_unit
    if ms > UINT_53_MAX:
        return Result.type_error('overflow unsigned integer 53 bits')
    return Result.ok(cls(ms))


class _Milliseconds:
    '''
    Count of milliseconds, an unsigned integer of at most 53 bits.
    '''

    __slots__ = ('_value',)

    def __init__(self, value):
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self):
        return self._value

    @classmethod
    def from_number(cls, value):
        return _from_unit(cls, value, 1)

    @classmethod
    def from_seconds(cls, value):
        return _from_unit(cls, value, MS_PER_SECOND)

    def to_seconds(self):
        return self._value // MS_PER_SECOND

    def eq(self, other):
        validate_instance(other, type(self)).open()
        return self._value == other._value

    def lt(self, other):
        validate_instance(other, type(self)).open()
        return self._value < other._value

    def gt(self, other):
        validate_instance(other, type(self)).open()
        return self._value > other._value

    def __eq__(self, o):
        if type(o) is not type(self):
            return NotImplemented
        return self._value == o._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __repr__(self):
        return f"{type(self).__name__}({self._value})"


class Timestamp(_Milliseconds):
    """
    Milliseconds since the Unix epoch.
    """

    __slots__ = ()

    @classmethod
    def now(cls):
        return cls(int(datetime.now(timezone.utc).timestamp() * MS_PER_SECOND))

    def add_timespan(self, timespan):
        validate_instance(timespan, Timespan).open()
        value = self._value + timespan.value
        if value > UINT_53_MAX:
            raise OverflowError('overflow unsigned integer 53 bits')
        return Timestamp(value)

    def to_datetime(self):
        return datetime.fromtimestamp(self._value / MS_PER_SECOND, tz=timezone.utc)


class Timespan(_Milliseconds):
    """
    A duration in milliseconds.
    """

    __slots__ = ()

    @classmethod
    def from_minutes(cls, value):
        return _from_unit(cls, value, MS_PER_MINUTE)

    @classmethod
    def from_hours(cls, value):
        return _from_unit(cls, value, MS_PER_HOUR)

    def format(self):
        '''
        Render as `HH:MM:SS.mmm`, hours grow past two digits when needed, e.g.
        `100:01:01.001`.
        '''
        hours, rest = divmod(self._value, MS_PER_HOUR)
        minutes, rest = divmod(rest, MS_PER_MINUTE)
        seconds, ms = divmod(rest, MS_PER_SECOND)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{ms:03d}"
