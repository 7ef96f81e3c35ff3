"""Path resolver: location string to ``(logical route, params)``.

The resolver is the only place route parameters are derived from a path.
Both ``Navigator.navigate`` and the popstate handler call it, so the two
can never disagree about what ``/news/7`` means.

Canonicalization (on by default) strips the query string and fragment and
drops a trailing slash::

    >>> canonicalize("/dashboard/?tab=1#top")
    '/dashboard'
    >>> canonicalize("/")
    '/'
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from visanav.errors import NotFound
from visanav.routing.route import Route
from visanav.routing.router import Router


def canonicalize(path: str) -> str:
    """Return the canonical form of *path*.

    Removes ``?query`` and ``#fragment``, collapses repeated slashes and
    trims a trailing slash. An empty result becomes ``/``.
    """
    for sep in ("#", "?"):
        path = path.split(sep, 1)[0]
    parts = [p for p in path.split("/") if p]
    return "/" + "/".join(parts)


@dataclass(frozen=True, slots=True)
class ResolvedPath:
    """A path and the parameters extracted from it.

    ``params`` is ``None`` when the path matches no parameterized route.
    """

    path: str
    params: dict[str, Any] | None = None


class PathResolver:
    """Match paths against the parameterized routes.

    Only routes with a path parameter are registered; static routes are
    looked up by the dispatch table directly.

    Usage::

        resolver = PathResolver(ROUTES)
        resolver.resolve("/visa-routes/student-visa")
        # ResolvedPath(path='/visa-routes/student-visa', params={'routeId': 'student-visa'})
    """

    __slots__ = ("_canonicalize", "_router")

    def __init__(self, routes: Iterable[Route], *, canonical: bool = True) -> None:
        self._canonicalize = canonical
        self._router = Router()
        for route in routes:
            if route.param is not None:
                self._router.add(route)
        self._router.compile()

    @property
    def patterns(self) -> list[Route]:
        """Parameterized routes known to this resolver."""
        return self._router.routes

    def normalize(self, path: str) -> str:
        """Apply the configured canonicalization to *path*."""
        if self._canonicalize:
            return canonicalize(path)
        return path

    def resolve(self, path: str) -> ResolvedPath:
        """Normalize *path* and extract its route parameters."""
        path = self.normalize(path)
        try:
            match = self._router.match(path)
        except NotFound:
            return ResolvedPath(path=path)
        return ResolvedPath(path=path, params=dict(match.path_params) or None)
