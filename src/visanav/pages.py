"""The page table: every route the application renders.

Each ``Route`` names the page it renders and the shared props that page
receives. Detail routes carry a path parameter and the prop it maps to.
Named shortcuts accepted by ``navigate("dashboard")`` come from
``Route.name``.
"""

from collections.abc import Iterable

from visanav.errors import ConfigurationError
from visanav.routing.route import Route

# Prop bundles handed to pages
NAV = frozenset({"navigate"})
VIEWER = frozenset({"auth_state", "user_profile", "navigate"})
SIGN_IN = VIEWER | {"on_sign_in", "on_sign_up"}
SIGNED_IN = SIGN_IN | {"on_sign_out"}

ROUTES: tuple[Route, ...] = (
    Route("/", "home", SIGNED_IN, name="home"),
    Route("/visa-routes", "visa-routes", SIGNED_IN, name="visa-routes"),
    Route(
        "/visa-routes/{routeId}",
        "visa-route-detail",
        SIGNED_IN | {"route_id"},
        param="routeId",
        prop="route_id",
    ),
    Route("/ai-assistant", "ai-assistant", SIGNED_IN, name="ai-assistant"),
    Route(
        "/eligibility-assessment",
        "eligibility-assessment",
        SIGN_IN,
        name="eligibility-assessment",
    ),
    Route("/dashboard", "dashboard", SIGNED_IN, name="dashboard"),
    Route("/eligibility-results", "eligibility-results", VIEWER, name="eligibility-results"),
    Route("/action-plan", "action-plan", frozenset({"auth_state", "navigate"}), name="action-plan"),
    Route(
        "/profile",
        "profile",
        VIEWER | {"update_user_profile", "update_settings", "set_user_profile"},
        name="profile",
    ),
    Route("/news", "news", SIGNED_IN, name="news"),
    Route("/news/{newsId}", "news-detail", VIEWER | {"news_id"}, param="newsId", prop="news_id"),
    Route(
        "/onboarding",
        "onboarding",
        frozenset({"on_complete", "on_skip", "complete_onboarding"}),
    ),
    Route("/email-confirmation", "email-confirmation", NAV, name="email-confirmation"),
    Route("/admin/setup", "admin-setup", name="admin-setup"),
    Route(
        "/admin/login",
        "admin-login",
        frozenset({"on_admin_login", "on_back_to_home"}),
        name="admin-login",
    ),
    Route("/admin", "admin-dashboard", frozenset({"admin_auth", "on_sign_out"}), name="admin"),
)


class PageTable:
    """Lookup structure over a tuple of routes.

    Splits routes into detail routes (checked first, by prefix and
    parameter presence) and exact routes (dict lookup).
    """

    __slots__ = ("_details", "_exact", "_named", "_pages", "routes")

    def __init__(self, routes: Iterable[Route] = ROUTES) -> None:
        self.routes = tuple(routes)
        self._exact: dict[str, Route] = {}
        self._details: list[Route] = []
        self._named: dict[str, str] = {}
        self._pages: dict[str, Route] = {}

        for route in self.routes:
            if route.page in self._pages:
                msg = f"Page {route.page!r} is registered twice."
                raise ConfigurationError(msg)
            self._pages[route.page] = route

            if route.param is not None:
                if route.prop is None or not route.path.endswith("}"):
                    msg = f"Detail route {route.path!r} must end in its parameter and name a prop."
                    raise ConfigurationError(msg)
                self._details.append(route)
            else:
                self._exact[route.path] = route

            if route.name is not None:
                self._named[route.name] = route.path

    @property
    def detail_routes(self) -> tuple[Route, ...]:
        return tuple(self._details)

    @property
    def named_routes(self) -> dict[str, str]:
        return dict(self._named)

    def exact(self, path: str) -> Route | None:
        return self._exact.get(path)

    def page(self, name: str) -> Route:
        """Return the route that renders page *name*."""
        try:
            return self._pages[name]
        except KeyError:
            msg = f"No page named {name!r}."
            raise ConfigurationError(msg) from None

    def named_path(self, name: str) -> str:
        """Resolve a named shortcut; unknown names map to ``/<name>``."""
        return self._named.get(name, f"/{name}")

    @staticmethod
    def detail_prefix(route: Route) -> str:
        """``/visa-routes/{routeId}`` -> ``/visa-routes/``."""
        return route.path[: route.path.rindex("{")]
