"""Response with chainable .with_*() transformation API.

Each transformation returns a new Response. The router never sets status
or body itself; handlers build the response they want and return it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    """A status code and a body payload.

    Construct with defaults, then chain ``.with_*()`` calls::

        return response.with_status(201).with_body("created")
    """

    status: int = 200
    body: str | bytes = ""

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_body(self, body: str | bytes) -> Response:
        """Return a new Response with a different body."""
        return replace(self, body=body)

    @property
    def text(self) -> str:
        """Body decoded as UTF-8 text."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body
