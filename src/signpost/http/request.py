"""Immutable request shape consumed by the router.

A server fills in ``method`` and ``path``. Dispatch never mutates the
request it receives: a successful match produces a new Request carrying
the captured parameters.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from signpost.errors import MissingParam
from signpost.http.method import Method


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable routing request.

    ``path`` is raw: it may carry a query suffix and trailing slashes.
    ``params`` is empty until a dispatch returns the matched copy.
    """

    method: Method
    path: str
    params: dict[str, str] = field(default_factory=dict)

    def with_params(self, params: dict[str, str]) -> Request:
        """Return a new Request whose params are exactly *params*."""
        return replace(self, params=dict(params))

    def param(self, name: str) -> str:
        """Return the captured value for *name*.

        Raises ``MissingParam`` (a ``KeyError``) when the matched pattern
        declared no such parameter.
        """
        try:
            return self.params[name]
        except KeyError:
            raise MissingParam(name, tuple(self.params)) from None

    @property
    def path_only(self) -> str:
        """The path without its query suffix."""
        return self.path.partition("?")[0]

    @property
    def query_string(self) -> str:
        """Raw text after the first ``?``, undecoded. Empty if absent."""
        return self.path.partition("?")[2]
