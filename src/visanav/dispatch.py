"""Page dispatch: a pure function from route state to a render decision.

``dispatch()`` never navigates. When a path cannot be rendered it returns
a ``Redirect`` and the navigator performs the navigation, then dispatches
again. This keeps every decision testable without a history stack::

    decision = dispatch("/admin", None, ctx)
    # Redirect(path='/admin/login', reason='admin-auth')

Order of evaluation:

1. Access gate (onboarding override; admin paths bypass it).
2. Detail routes, by path prefix plus presence of the matching param.
3. Exact routes. ``/admin`` additionally requires an admin session.
4. Anything else redirects home (or to admin login under ``/admin``).
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from visanav.auth import AuthState, UserProfile
from visanav.config import NavConfig
from visanav.errors import ConfigurationError
from visanav.gate import is_admin_path, onboarding_required
from visanav.pages import PageTable
from visanav.routing.route import Route

logger = logging.getLogger("visanav.dispatch")


@dataclass(frozen=True, slots=True)
class Render:
    """Render *page* with *props*.

    ``gated`` is true when the onboarding gate replaced the requested page.
    """

    page: str
    path: str
    props: dict[str, Any] = field(default_factory=dict)
    gated: bool = False


@dataclass(frozen=True, slots=True)
class Redirect:
    """Navigate to *path* and dispatch again."""

    path: str
    reason: str = ""


Decision: TypeAlias = Render | Redirect


@dataclass(frozen=True, slots=True)
class DispatchContext:
    """Everything a dispatch decision may read.

    ``callbacks`` holds the callable props by name (``navigate``,
    ``on_sign_in``, ``on_admin_login``, ...). Missing optional
    collaborators are passed to pages as ``None``.
    """

    auth_state: AuthState
    user_profile: UserProfile | None
    admin_auth: Any = None
    callbacks: Mapping[str, Callable[..., Any] | None] = field(default_factory=dict)
    config: NavConfig = field(default_factory=NavConfig)


def build_props(route: Route, ctx: DispatchContext, **extra: Any) -> dict[str, Any]:
    """Collect the props *route* declares from *ctx*, plus *extra*."""
    props: dict[str, Any] = {}
    for name in sorted(route.props):
        if name in extra:
            continue
        if name == "auth_state":
            props[name] = ctx.auth_state
        elif name == "user_profile":
            props[name] = ctx.user_profile
        elif name == "admin_auth":
            props[name] = ctx.admin_auth
        else:
            props[name] = ctx.callbacks.get(name)
    props.update(extra)
    return props


def dispatch(
    path: str,
    params: Mapping[str, Any] | None,
    ctx: DispatchContext,
    table: PageTable | None = None,
) -> Decision:
    """Decide what *path* renders under *ctx*."""
    table = table or _DEFAULT_TABLE
    config = ctx.config

    if onboarding_required(path, ctx.auth_state, ctx.user_profile, config):
        onboarding = table.exact(config.onboarding_path)
        if onboarding is None:
            msg = f"No page registered for onboarding path {config.onboarding_path!r}."
            raise ConfigurationError(msg)
        logger.debug("Onboarding incomplete, rendering onboarding instead of %s", path)
        return Render(onboarding.page, path, build_props(onboarding, ctx), gated=True)

    for route in table.detail_routes:
        if route.param is None or route.prop is None:
            continue
        value = params.get(route.param) if params else None
        if value and path.startswith(table.detail_prefix(route)):
            return Render(route.page, path, build_props(route, ctx, **{route.prop: str(value)}))

    route = table.exact(path)
    if route is None:
        target = config.admin_login_path if is_admin_path(path, config) else config.home_path
        logger.debug("Unknown route %s, redirecting to %s", path, target)
        return Redirect(target, reason="unknown")

    if route.path == config.admin_path:
        if ctx.admin_auth is None:
            logger.debug("No admin session, redirecting to %s", config.admin_login_path)
            return Redirect(config.admin_login_path, reason="admin-auth")
        return Render(
            route.page,
            path,
            build_props(route, ctx, on_sign_out=ctx.callbacks.get("on_admin_sign_out")),
        )

    return Render(route.page, path, build_props(route, ctx))


_DEFAULT_TABLE = PageTable()
