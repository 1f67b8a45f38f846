#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging


class Result:
    '''
    Outcome of a fallible operation, either an `Ok` carrying data or an `Err`
    carrying an error. Never instantiated directly, use the `ok()`, `error()`
    and `type_error()` constructors.

        result = UInt8.from_number(value)
        if result.error:
            return result
        number = result.data

    Callers that prefer exceptions call `open()`, which returns the data or
    raises the error.
    '''

    __slots__ = ()

    @staticmethod
    def ok(data=None):
        return Ok(data)

    @staticmethod
    def error(error):
        '''
        Failed result, the error can be an exception or any other value such
        as a plain message string.
        '''
        return Err(error)

    @staticmethod
    def type_error(message):
        return Err(TypeError(message))

    @property
    def is_ok(self):
        return isinstance(self, Ok)

    @property
    def is_error(self):
        return isinstance(self, Err)


class Ok(Result):

    __slots__ = ('_data',)

    def __init__(self, data=None):
        self._data = data

    @property
    def data(self):
        return self._data

    @property
    def error(self):
        return None

    def open(self):
        return self._data

    def __eq__(self, o):
        if not isinstance(o, Ok):
            return NotImplemented
        return self._data == o._data

    def __hash__(self):
        return hash(('ok', self._data))

    def __repr__(self):
        return f"Result.ok({self._data!r})"


class Err(Result):

    __slots__ = ('_error',)

    def __init__(self, error):
        self._error = error

    @property
    def data(self):
        return None

    @property
    def error(self):
        return self._error

    def open(self):
        '''
        Raise the wrapped error. Anything that is not an exception is wrapped
        into a generic `Exception` first.
        '''
        logging.debug(f"Opening failed result, {self._error!r}.")
        if isinstance(self._error, BaseException):
            raise self._error
        raise Exception(str(self._error))

    def __eq__(self, o):
        if not isinstance(o, Err):
            return NotImplemented
        mine, other = self._error, o._error
        # exceptions have identity equality, compare what they were built from
        if isinstance(mine, BaseException) and isinstance(other, BaseException):
            return type(mine) is type(other) and mine.args == other.args
        return mine == other

    def __hash__(self):
        if isinstance(self._error, BaseException):
            return hash(('error', type(self._error), self._error.args))
        return hash(('error', self._error))

    def __repr__(self):
        return f"Result.error({self._error!r})"
