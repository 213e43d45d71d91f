"""Segment-indexed route lookup.

A trie over segment positions that answers the same question as the
router's linear scan. Registration order stays the only priority rule:
every route that fits the path is collected, and the lowest ``index``
wins, so an earlier ``/users/:id`` still beats a later ``/users/me``.
"""

from signpost.http.method import Method
from signpost.routing.route import Route, RouteMatch


class _TrieNode:
    """A node in the segment trie. Mutable during building only."""

    __slots__ = ("children", "param_child", "routes")

    def __init__(self) -> None:
        # Static segment children: "users" -> node
        self.children: dict[str, _TrieNode] = {}
        # Shared by every parameter name at this depth
        self.param_child: _TrieNode | None = None
        # Routes whose last segment ends here, in registration order
        self.routes: list[Route] = []


class SegmentIndex:
    """Trie built from a fixed sequence of routes.

    Usage::

        index = SegmentIndex(router.routes)
        match = index.lookup(Method.GET, split_path("/users/42"))
    """

    __slots__ = ("_root", "_size")

    def __init__(self, routes: tuple[Route, ...] | list[Route] = ()) -> None:
        self._root = _TrieNode()
        self._size = 0
        for route in routes:
            self.insert(route)

    def __len__(self) -> int:
        return self._size

    def insert(self, route: Route) -> None:
        node = self._root
        for seg in route.segments:
            if seg.is_param:
                if node.param_child is None:
                    node.param_child = _TrieNode()
                node = node.param_child
            else:
                node = node.children.setdefault(seg.text, _TrieNode())
        node.routes.append(route)
        self._size += 1

    def lookup(self, method: Method, parts: list[str]) -> RouteMatch | None:
        """Find the earliest-registered route fitting *parts* and *method*."""
        candidates: list[Route] = []
        self._collect(self._root, parts, 0, candidates)

        for route in sorted(candidates, key=lambda r: r.index):
            params = route.capture(method, parts)
            if params is not None:
                return RouteMatch(route=route, params=params)
        return None

    def _collect(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        out: list[Route],
    ) -> None:
        """Recursively gather every route structurally fitting *parts*."""
        if index == len(parts):
            out.extend(node.routes)
            return

        static = node.children.get(parts[index])
        if static is not None:
            self._collect(static, parts, index + 1, out)

        if node.param_child is not None:
            self._collect(node.param_child, parts, index + 1, out)
