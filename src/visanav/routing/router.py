"""Compiled router with trie-based path matching.

Routes are registered during setup and compiled into an immutable
lookup structure before the first match.
"""

import re
from dataclasses import dataclass

from visanav.errors import ConfigurationError, NotFound
from visanav.routing.params import segment_pattern
from visanav.routing.route import PathSegment, Route, RouteMatch


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/news"                   -> [PathSegment("news")]
        "/news/{newsId}"          -> [PathSegment("news"), PathSegment("{newsId}", is_param=True, ...)]
        "/visa-routes/{id:slug}"  -> [..., PathSegment("{id:slug}", is_param=True, param_type="slug")]
    """
    if not path.startswith("/"):
        msg = f"Route path {path!r} must start with '/'."
        raise ConfigurationError(msg)

    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("<") and part.endswith(">"):
            msg = (
                f"Route path {path!r} uses <param> syntax. "
                "Use {param} instead, e.g. /news/{newsId}."
            )
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name = inner
                param_type = "str"
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return segments


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("children", "param_child", "route")

    def __init__(self) -> None:
        # Static segment children: "news" -> node
        self.children: dict[str, _TrieNode] = {}
        # Single parameter child (only one param pattern per level)
        self.param_child: _ParamEdge | None = None
        # Route terminating at this node
        self.route: Route | None = None


@dataclass(slots=True)
class _ParamEdge:
    """A parameter edge in the trie."""

    param_name: str
    param_type: str
    regex: re.Pattern[str]
    node: _TrieNode


class Router:
    """Compiled router with trie-based path matching.

    Usage::

        router = Router()
        router.add(Route("/news", "news"))
        router.add(Route("/news/{newsId}", "news-detail"))
        router.compile()
        match = router.match("/news/7")
    """

    __slots__ = ("_compiled", "_root")

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        node = self._root
        for seg in parse_path(route.path):
            if seg.is_param:
                if node.param_child is None:
                    pattern = segment_pattern(seg.param_type)
                    node.param_child = _ParamEdge(
                        param_name=seg.param_name or "",
                        param_type=seg.param_type,
                        regex=re.compile(f"^{pattern}$"),
                        node=_TrieNode(),
                    )
                elif node.param_child.param_name != seg.param_name:
                    msg = (
                        f"Route {route.path!r} declares parameter {seg.param_name!r} "
                        f"where {node.param_child.param_name!r} is already registered."
                    )
                    raise ConfigurationError(msg)
                node = node.param_child.node
            else:
                if seg.value not in node.children:
                    node.children[seg.value] = _TrieNode()
                node = node.children[seg.value]

        if node.route is not None:
            msg = f"Duplicate route {route.path!r} (already renders {node.route.page!r})."
            raise ConfigurationError(msg)
        node.route = route

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration-independent trie order."""
        result: list[Route] = []
        self._collect_routes(self._root, result)
        return result

    def _collect_routes(self, node: _TrieNode, result: list[Route]) -> None:
        if node.route is not None:
            result.append(node.route)
        for child in node.children.values():
            self._collect_routes(child, result)
        if node.param_child is not None:
            self._collect_routes(node.param_child.node, result)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, path: str) -> RouteMatch:
        """Match a path against compiled routes.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no route matches the path.
        """
        # Matching is exact: "/news/7/" and "/news//7" are not "/news/7"
        if not path.startswith("/") or "//" in path or (path != "/" and path.endswith("/")):
            raise NotFound(path)
        parts = path[1:].split("/") if path != "/" else []

        result = self._match_node(self._root, parts, 0, {})
        if result is None:
            raise NotFound(path)

        node, params = result
        assert node.route is not None
        return RouteMatch(route=node.route, path_params=params)

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str],
    ) -> tuple[_TrieNode, dict[str, str]] | None:
        """Recursively match path parts against the trie."""
        # All parts consumed
        if index == len(parts):
            if node.route is not None:
                return node, params
            return None

        part = parts[index]

        # 1. Try static child first (exact match)
        if part in node.children:
            result = self._match_node(node.children[part], parts, index + 1, params)
            if result is not None:
                return result

        # 2. Try parameter child
        if node.param_child is not None:
            edge = node.param_child
            if edge.regex.match(part):
                new_params = {**params, edge.param_name: part}
                return self._match_node(edge.node, parts, index + 1, new_params)

        return None
