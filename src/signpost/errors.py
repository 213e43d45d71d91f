"""Signpost exception hierarchy.

Shared across Router, Request, and Method so every module raises and
catches the same types. A path that matches no route is not an error:
``Router.match`` returns ``None`` and ``Router.dispatch`` reports it on
the ``Dispatch`` result.
"""


class SignpostError(Exception):
    """Base for all signpost-specific errors."""


class ConfigurationError(SignpostError):
    """Raised when a route registration is invalid.

    Only raised in opt-in situations: registering after ``Router.freeze()``
    or a repeated parameter name under ``RouterConfig(strict_params=True)``.
    """


class MissingParam(SignpostError, KeyError):  # noqa: N818 — reads like the KeyError it is
    """A parameter was looked up that the matched pattern never declared."""

    def __init__(self, name: str, available: tuple[str, ...] = ()) -> None:
        self.name = name
        self.available = available
        super().__init__(name)

    def __str__(self) -> str:
        if self.available:
            return f"No path parameter {self.name!r}. Available: {', '.join(self.available)}"
        return f"No path parameter {self.name!r}"


class UnknownMethod(SignpostError, ValueError):  # noqa: N818 — mirrors ValueError
    """A method token is not one of the routable HTTP methods."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown HTTP method: {token!r}")
