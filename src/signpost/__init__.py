"""Signpost — a small request router for HTTP-like servers.

Matches a ``(method, path)`` pair against registered patterns and
extracts named path parameters. No sockets, no header parsing: a server
supplies the method and path and gets back a handler and its params.

Basic usage::

    from signpost import Method, Request, Router

    router = Router()

    @router.get("/users/:id")
    def user(request, response):
        return response.with_body("user=" + request.param("id"))

    result = router.dispatch(Request(Method.GET, "/users/42"))
    assert result.response.body == "user=42"
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Dispatch",
    "Method",
    "MissingParam",
    "Request",
    "Response",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "Segment",
    "SegmentKind",
    "SignpostError",
    "UnknownMethod",
    "compile_pattern",
    "split_path",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import signpost`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from signpost.routing.router import Router

        return Router

    if name == "RouterConfig":
        from signpost.config import RouterConfig

        return RouterConfig

    if name == "Method":
        from signpost.http.method import Method

        return Method

    if name == "Request":
        from signpost.http.request import Request

        return Request

    if name == "Response":
        from signpost.http.response import Response

        return Response

    if name in ("Dispatch", "Route", "RouteMatch"):
        from signpost.routing import route as _route

        return getattr(_route, name)

    if name in ("Segment", "SegmentKind", "compile_pattern", "split_path"):
        from signpost.routing import pattern as _pattern

        return getattr(_pattern, name)

    if name in ("SignpostError", "ConfigurationError", "MissingParam", "UnknownMethod"):
        from signpost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
