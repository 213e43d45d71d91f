"""Route table with first-registered, first-matched dispatch.

Routes are kept in registration order and matched by a linear scan.
Overlapping and duplicate patterns are accepted: the earlier route wins.

Thread safety: the router has no internal lock. Concurrent ``match`` and
``dispatch`` calls are safe only while no ``add`` runs; call ``freeze()``
once registration is done to make that contract explicit.
"""

import logging
from collections.abc import Callable, Iterator
from typing import Any

from signpost._internal.invoke import invoke
from signpost._internal.types import Handler
from signpost.config import RouterConfig
from signpost.errors import ConfigurationError, UnknownMethod
from signpost.http.method import Method
from signpost.http.request import Request
from signpost.http.response import Response
from signpost.routing.index import SegmentIndex
from signpost.routing.pattern import compile_pattern, duplicate_params, split_path
from signpost.routing.route import Dispatch, Route, RouteMatch

logger = logging.getLogger("signpost.routing")


def _coerce_method(method: Method | str) -> Method:
    if isinstance(method, Method):
        return method
    try:
        return Method(method)
    except ValueError:
        raise UnknownMethod(method) from None


def _apply_result(result: Any, response: Response, route: Route) -> Response:
    """Turn a handler's return value into the dispatched response."""
    if result is None:
        return response
    if isinstance(result, Response):
        return result
    if isinstance(result, str | bytes):
        return response.with_body(result)
    msg = (
        f"Handler for {route.describe()!r} returned {type(result).__name__}; "
        "expected Response, str, bytes, or None."
    )
    raise TypeError(msg)


class Router:
    """Ordered route table with segment-based matching.

    Usage::

        router = Router()
        router.get("/health", lambda req, res: res.with_body("ok"))
        router.get("/users/:id", lambda req, res: res.with_body("user=" + req.param("id")))

        result = router.dispatch(Request(Method.GET, "/users/42?x=1"))
        if result:
            print(result.response.body)  # user=42
    """

    __slots__ = ("_config", "_frozen", "_index", "_routes")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._routes: list[Route] = []
        self._frozen = False
        self._index: SegmentIndex | None = None

    @property
    def config(self) -> RouterConfig:
        return self._config

    # -- Registration --

    def add(self, method: Method | str, pattern: str, handler: Handler) -> Route:
        """Compile *pattern* and append a route for *method*.

        Never rejects overlaps or duplicates. Raises ``ConfigurationError``
        only after ``freeze()`` or, with ``strict_params``, when a
        parameter name repeats within the pattern.
        """
        if self._frozen:
            msg = f"Cannot add route {pattern!r} after the router is frozen."
            raise ConfigurationError(msg)

        segments = compile_pattern(pattern)
        if self._config.strict_params:
            repeated = duplicate_params(segments)
            if repeated:
                logger.warning("Rejected route %r: repeated params %s", pattern, repeated)
                msg = (
                    f"Route pattern {pattern!r} repeats parameter name(s): "
                    f"{', '.join(repeated)}. Each parameter must be named once."
                )
                raise ConfigurationError(msg)

        route = Route(
            method=_coerce_method(method),
            pattern=pattern,
            segments=segments,
            handler=handler,
            index=len(self._routes),
        )
        self._routes.append(route)
        logger.debug("Route registered: %s", route.describe())
        return route

    def _register(
        self, method: Method, pattern: str, handler: Handler | None
    ) -> Any:
        if handler is not None:
            return self.add(method, pattern, handler)

        def decorator(func: Handler) -> Handler:
            self.add(method, pattern, func)
            return func

        return decorator

    def route(
        self, pattern: str, method: Method | str = Method.ANY
    ) -> Callable[[Handler], Handler]:
        """Register the decorated function::

            @router.route("/users/{id}", method=Method.GET)
            def user(request, response): ...
        """
        return self._register(_coerce_method(method), pattern, None)

    def any(self, pattern: str, handler: Handler | None = None) -> Any:
        return self._register(Method.ANY, pattern, handler)

    def get(self, pattern: str, handler: Handler | None = None) -> Any:
        return self._register(Method.GET, pattern, handler)

    def post(self, pattern: str, handler: Handler | None = None) -> Any:
        return self._register(Method.POST, pattern, handler)

    def put(self, pattern: str, handler: Handler | None = None) -> Any:
        return self._register(Method.PUT, pattern, handler)

    def patch(self, pattern: str, handler: Handler | None = None) -> Any:
        return self._register(Method.PATCH, pattern, handler)

    def delete(self, pattern: str, handler: Handler | None = None) -> Any:
        return self._register(Method.DELETE, pattern, handler)

    def head(self, pattern: str, handler: Handler | None = None) -> Any:
        return self._register(Method.HEAD, pattern, handler)

    def options(self, pattern: str, handler: Handler | None = None) -> Any:
        return self._register(Method.OPTIONS, pattern, handler)

    def freeze(self) -> None:
        """Finish registration. No more routes can be added.

        Builds the segment index when ``RouterConfig.indexed`` is set.
        """
        if self._frozen:
            return
        self._frozen = True
        if self._config.indexed:
            self._index = SegmentIndex(self._routes)
        logger.debug("Router frozen with %d route(s)", len(self._routes))

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -- Introspection --

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes, in registration order."""
        return tuple(self._routes)

    @property
    def route_count(self) -> int:
        return len(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self.routes)

    # -- Matching --

    def match(self, method: Method, path: str) -> RouteMatch | None:
        """Find the first registered route matching *method* and *path*.

        Returns ``None`` when nothing matches; that is an ordinary outcome.
        """
        parts = split_path(path)

        if self._index is not None:
            result = self._index.lookup(method, parts)
        else:
            result = self._scan(method, parts)

        if result is None and self._config.log_misses:
            logger.debug("No route matches %s %r", method, path)
        return result

    def _scan(self, method: Method, parts: list[str]) -> RouteMatch | None:
        for route in self._routes:
            params = route.capture(method, parts)
            if params is not None:
                return RouteMatch(route=route, params=params)
        return None

    # -- Dispatch --

    def dispatch(self, request: Request, response: Response | None = None) -> Dispatch:
        """Match *request* and call the handler.

        The caller's request is never modified: on a hit the handler sees
        (and the result carries) a copy whose params are exactly the
        captured ones. On a miss the inputs come back untouched.
        """
        response = response if response is not None else Response()
        found = self.match(request.method, request.path)
        if found is None:
            return Dispatch(matched=False, request=request, response=response)

        matched_request = request.with_params(found.params)
        result = found.handler(matched_request, response)
        logger.debug("Dispatched %s %r -> %s", request.method, request.path, found.route.pattern)
        return Dispatch(
            matched=True,
            request=matched_request,
            response=_apply_result(result, response, found.route),
            route=found.route,
        )

    async def dispatch_async(
        self, request: Request, response: Response | None = None
    ) -> Dispatch:
        """Like ``dispatch`` but awaits ``async def`` handlers.

        Sync handlers are accepted too, and run in a worker thread when
        ``RouterConfig.offload_sync_handlers`` is set.
        """
        response = response if response is not None else Response()
        found = self.match(request.method, request.path)
        if found is None:
            return Dispatch(matched=False, request=request, response=response)

        matched_request = request.with_params(found.params)
        result = await invoke(
            found.handler,
            matched_request,
            response,
            offload=self._config.offload_sync_handlers,
        )
        logger.debug("Dispatched %s %r -> %s", request.method, request.path, found.route.pattern)
        return Dispatch(
            matched=True,
            request=matched_request,
            response=_apply_result(result, response, found.route),
            route=found.route,
        )
