"""Routable HTTP methods.

A closed set. ``Method.ANY`` is a registration-time wildcard: a route
registered with it accepts every request method, but it is never a valid
method for an incoming request token.
"""

from __future__ import annotations

from enum import StrEnum

from signpost.errors import UnknownMethod


class Method(StrEnum):
    """HTTP method a route answers to."""

    ANY = "*"
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def parse(cls, token: str) -> Method:
        """Convert a request method token into a member.

        Exact and case-sensitive: ``"get"`` is rejected, as is the
        wildcard ``"*"``.
        """
        if token == cls.ANY.value:
            raise UnknownMethod(token)
        try:
            return cls(token)
        except ValueError:
            raise UnknownMethod(token) from None

    def accepts(self, requested: Method) -> bool:
        """True if a route registered with this method serves *requested*."""
        return self is Method.ANY or self == requested
