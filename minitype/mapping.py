#!/usr/bin/env python
# -*- coding: utf-8 -*-

from minitype.result import Result
from minitype.validator import validate_array, validate_object

'''
Build dicts and lists out of untrusted input, one formatter per item, where a
formatter is any callable taking a value and returning a `Result`.
'''


def _prefix_error(prefix, error):
    '''
    Same kind of error, with a message telling where it came from.
    '''
    if isinstance(error, BaseException):
        return Result.error(type(error)(f"{prefix}: {error}"))
    return Result.error(f"{prefix}: {error}")


def map_object(source, actions):
    '''
    Copy attributes of `source` into a new dict through formatters. Each action
    is `(source_key, formatter)` or `(source_key, formatter, target_key)`:

        map_object({'count': '10'}, [
            ('count', UInt32.from_decimal),
            ('name', TidyString.from_string, 'title'),
        ])

    A missing key is given to its formatter as `None`. The first failing
    formatter stops the mapping, its message prefixed with the source key.
    '''
    r1 = validate_object(source)
    if r1.error:
        return r1
    target = {}
    for action in actions:
        source_key, formatter = action[0], action[1]
        target_key = action[2] if len(action) > 2 and action[2] else source_key
        result = formatter(source.get(source_key))
        if result.is_error:
            return _prefix_error(source_key, result.error)
        target[target_key] = result.data
    return Result.ok(target)


format_object = map_object


def map_array(values, formatter, min_length=0, max_length=None):
    '''
    Format each item of a list, the failing index prefixes the message.
    '''
    r1 = validate_array(values, min_length, max_length)
    if r1.error:
        return r1
    items = []
    for i, value in enumerate(values):
        result = formatter(value)
        if result.is_error:
            return _prefix_error(f"[{i}]", result.error)
        items.append(result.data)
    return Result.ok(items)
