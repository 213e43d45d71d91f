"""Pattern compilation — route strings into typed segments.

Patterns and request paths share one tokenizer, so a query suffix or a
trailing slash is tolerated on either side.

Examples::

    "/health"                        -> [STATIC "health"]
    "/users/:id"                     -> [STATIC "users", PARAM "id"]
    "/posts/{postId}/comments/{id}"  -> [STATIC "posts", PARAM "postId",
                                         STATIC "comments", PARAM "id"]
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class SegmentKind(Enum):
    STATIC = "static"
    PARAM = "param"


@dataclass(frozen=True, slots=True)
class Segment:
    """One ``/``-delimited token of a compiled pattern.

    Static:  ``users``  (text is the literal)
    Param:   ``:id`` or ``{id}``  (text is the parameter name)
    """

    kind: SegmentKind
    text: str

    @property
    def is_param(self) -> bool:
        return self.kind is SegmentKind.PARAM


def split_path(path: str) -> list[str]:
    """Tokenize a path or pattern into its segment texts.

    The query suffix is dropped and edge slashes trimmed, so ``"/a/"``,
    ``"/a"``, ``"//a//"`` and ``"/a?x=1"`` all give ``["a"]``. An interior
    doubled slash is kept as an empty token: ``"/a//b"`` gives
    ``["a", "", "b"]``.
    """
    path = path.partition("?")[0].strip("/")
    if not path:
        return []
    return path.split("/")


def _classify(token: str) -> Segment:
    if len(token) > 1 and token.startswith(":"):
        return Segment(SegmentKind.PARAM, token[1:])
    if len(token) > 2 and token.startswith("{") and token.endswith("}"):
        return Segment(SegmentKind.PARAM, token[1:-1])
    # ":" alone and "{}" stay literal
    return Segment(SegmentKind.STATIC, token)


def compile_pattern(pattern: str) -> tuple[Segment, ...]:
    """Compile a route pattern into segments.

    Total over all strings: anything that is not a parameter is literal
    text, so the worst case is an all-static route.
    """
    return tuple(_classify(token) for token in split_path(pattern))


def param_names(segments: Iterable[Segment]) -> list[str]:
    """Parameter names in pattern order, repeats included."""
    return [seg.text for seg in segments if seg.is_param]


def duplicate_params(segments: Iterable[Segment]) -> list[str]:
    """Parameter names that appear more than once, in first-seen order."""
    counts = Counter(param_names(segments))
    return [name for name, count in counts.items() if count > 1]
