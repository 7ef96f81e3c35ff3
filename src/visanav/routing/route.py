"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/news``        (is_param=False)
    Param:   ``/{newsId}``    (is_param=True, param_name="newsId")
    Typed:   ``/{page:int}``  (is_param=True, param_name="page", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition: a path pattern and the page it renders.

    ``props`` names the shared props the page receives (``auth_state``,
    ``navigate``, ...). ``param`` and ``prop`` link a path parameter to
    the page prop that carries it, e.g. ``routeId`` -> ``route_id``.
    """

    path: str
    page: str
    props: frozenset[str] = frozenset()
    name: str | None = None
    param: str | None = None
    prop: str | None = None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]
