"""Route, RouteMatch and Dispatch frozen dataclasses."""

from dataclasses import dataclass

from signpost._internal.types import Handler, Params
from signpost.http.method import Method
from signpost.http.request import Request
from signpost.http.response import Response
from signpost.routing.pattern import Segment


@dataclass(frozen=True, slots=True)
class Route:
    """A registered endpoint.

    Created by ``Router.add``; ``index`` is its registration position,
    which is also its match priority (lower wins).
    """

    method: Method
    pattern: str
    segments: tuple[Segment, ...]
    handler: Handler
    index: int = 0

    @property
    def param_names(self) -> list[str]:
        return [seg.text for seg in self.segments if seg.is_param]

    def describe(self) -> str:
        return f"{self.method} {self.pattern}"

    def capture(self, method: Method, parts: list[str]) -> Params | None:
        """Compare against a tokenized path.

        Returns the captured parameters, or ``None`` when the method, the
        segment count, or any static segment disagrees.
        """
        if not self.method.accepts(method):
            return None
        if len(self.segments) != len(parts):
            return None

        params: Params = {}
        for seg, part in zip(self.segments, parts, strict=True):
            if seg.is_param:
                params[seg.text] = part
            elif seg.text != part:
                return None
        return params


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    params: Params

    @property
    def handler(self) -> Handler:
        return self.route.handler


@dataclass(frozen=True, slots=True)
class Dispatch:
    """Outcome of ``Router.dispatch``.

    On a miss, ``request`` and ``response`` are the caller's own values.
    On a hit, ``request`` carries the captured params and ``response`` is
    whatever the handler produced.
    """

    matched: bool
    request: Request
    response: Response
    route: Route | None = None

    def __bool__(self) -> bool:
        return self.matched
