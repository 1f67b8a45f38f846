#!/usr/bin/env python
# -*- coding: utf-8 -*-

from urllib.parse import urlsplit

from minitype.result import Result

HTTP_SCHEMES = ('http', 'https')


def parse_url(value):
    '''
    Split an absolute URL, one with both a scheme and a location.
    '''
    if not isinstance(value, str):
        return Result.type_error('expect an URL')
    try:
        url = urlsplit(value)
    except ValueError:
        return Result.type_error('expect an URL')
    if not url.scheme or not url.netloc:
        return Result.type_error('expect an URL')
    return Result.ok(url)


class HttpEndpoint:
    '''
    Absolute URL served over HTTP or HTTPS.
    '''

    __slots__ = ('_url',)

    def __init__(self, url):
        object.__setattr__(self, '_url', url)

    def __setattr__(self, name, value):
        raise AttributeError('HttpEndpoint is immutable')

    @property
    def url(self):
        return self._url

    @classmethod
    def from_string(cls, value):
        r1 = parse_url(value)
        if r1.error:
            return r1
        url = r1.data
        if url.scheme not in HTTP_SCHEMES:
            return Result.type_error('expect protocol http or https')
        return Result.ok(cls(url))

    def __str__(self):
        return self._url.geturl()

    def __eq__(self, o):
        if not isinstance(o, HttpEndpoint):
            return NotImplemented
        return self._url == o._url

    def __hash__(self):
        return hash(self._url)

    def __repr__(self):
        return f"HttpEndpoint({str(self)!r})"
