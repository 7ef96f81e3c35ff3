"""Navigator: route state, history sync and the render loop.

The navigator owns ``RouteState`` and the admin session. Nothing else
mutates them: every change goes through ``navigate``, the popstate
listener, or the admin callbacks it hands to pages.

Usage::

    from visanav import AuthState, MemoryHistory, Navigator

    nav = Navigator(MemoryHistory("/news/7"))
    with nav:                          # registers the popstate listener
        decision = nav.render(AuthState())
        decision.page                  # "news-detail"
        decision.props["news_id"]      # "7"
        nav.navigate("dashboard")      # named shortcut -> "/dashboard"
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from visanav.admin import AdminSessionStore, admin_session_from_config
from visanav.auth import ANONYMOUS, AuthState, UserProfile
from visanav.config import NavConfig
from visanav.dispatch import DispatchContext, Redirect, Render, dispatch
from visanav.errors import ConfigurationError, RedirectLoopError
from visanav.events import emit_navigation_event
from visanav.history import History, MemoryHistory
from visanav.pages import PageTable
from visanav.routing.resolver import PathResolver

logger = logging.getLogger("visanav.navigation")


@dataclass(frozen=True, slots=True)
class RouteState:
    """Current location. Replaced as a whole, never mutated in place."""

    current_path: str
    route_params: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class Collaborators:
    """Host operations forwarded to pages unchanged.

    All are optional; pages receive ``None`` for anything not supplied.
    """

    on_sign_in: Callable[..., Any] | None = None
    on_sign_up: Callable[..., Any] | None = None
    on_sign_out: Callable[..., Any] | None = None
    complete_onboarding: Callable[..., Any] | None = None
    update_user_profile: Callable[..., Any] | None = None
    update_settings: Callable[..., Any] | None = None
    set_user_profile: Callable[..., Any] | None = None


class Navigator:
    """Client-side router for the application's pages."""

    __slots__ = (
        "_admin",
        "_collaborators",
        "_components",
        "_config",
        "_history",
        "_listener",
        "_mounted",
        "_resolver",
        "_state",
        "_table",
    )

    def __init__(
        self,
        history: History | None = None,
        *,
        config: NavConfig | None = None,
        table: PageTable | None = None,
        collaborators: Collaborators | None = None,
        components: Mapping[str, Callable[..., Any]] | None = None,
        admin_session: AdminSessionStore | None = None,
        storage: MutableMapping[str, str] | None = None,
    ) -> None:
        self._config = config or NavConfig()
        self._config.validate()
        self._table = table or PageTable()
        self._check_table()

        self._history: History = history if history is not None else MemoryHistory()
        self._resolver = PathResolver(self._table.routes, canonical=self._config.canonicalize_paths)
        self._collaborators = collaborators or Collaborators()
        self._components = dict(components or {})
        self._admin = admin_session or admin_session_from_config(self._config, storage)
        # Bound once so add/remove see the same object
        self._listener = self.on_popstate
        self._mounted = False
        self._state = self._read_location()

    def _check_table(self) -> None:
        """Every redirect target must render without redirecting again."""
        cfg = self._config
        for name in ("home_path", "admin_login_path", "onboarding_path", "landing_path"):
            path = getattr(cfg, name)
            if self._table.exact(path) is None:
                msg = f"NavConfig.{name}={path!r} has no page in the route table."
                raise ConfigurationError(msg)
        if cfg.admin_login_path == cfg.admin_path:
            msg = "NavConfig.admin_login_path must differ from admin_path."
            raise ConfigurationError(msg)

    # -- State ------------------------------------------------------------

    @property
    def config(self) -> NavConfig:
        return self._config

    @property
    def table(self) -> PageTable:
        return self._table

    @property
    def history(self) -> History:
        return self._history

    @property
    def state(self) -> RouteState:
        return self._state

    @property
    def current_path(self) -> str:
        return self._state.current_path

    @property
    def route_params(self) -> dict[str, Any] | None:
        return self._state.route_params

    @property
    def admin_auth(self) -> Any | None:
        return self._admin.get()

    @property
    def mounted(self) -> bool:
        return self._mounted

    def _read_location(self) -> RouteState:
        resolved = self._resolver.resolve(self._history.pathname)
        return RouteState(resolved.path, resolved.params)

    # -- Lifecycle --------------------------------------------------------

    def mount(self) -> None:
        """Sync with the current location and start listening for popstate.

        Mounting twice is a no-op; the listener is registered once.
        """
        if self._mounted:
            return
        self._state = self._read_location()
        self._history.add_popstate_listener(self._listener)
        self._mounted = True
        logger.debug("Mounted at %s", self._state.current_path)

    def unmount(self) -> None:
        if not self._mounted:
            return
        self._history.remove_popstate_listener(self._listener)
        self._mounted = False

    def __enter__(self) -> Navigator:
        self.mount()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.unmount()

    # -- Navigation -------------------------------------------------------

    def navigate(self, target: str, data: Mapping[str, Any] | None = None) -> None:
        """Go to an absolute path or a named shortcut.

        ``"/news/7"`` is resolved for params. ``"dashboard"`` maps through
        the page table's named routes (unknown names become ``"/<name>"``);
        *data*, when given, becomes the route params verbatim.

        Always pushes a history entry. A failure while pushing is logged
        and leaves the route state unchanged.
        """
        if target.startswith("/"):
            resolved = self._resolver.resolve(target)
            path, params = resolved.path, resolved.params
        else:
            path = self._resolver.normalize(self._table.named_path(target))
            if data is not None:
                params = dict(data)
            else:
                params = self._resolver.resolve(path).params

        previous = self._state.current_path
        try:
            self._history.push_state(path)
        except Exception:
            logger.exception("Navigation from %s to %s failed", previous, path)
            return

        self._state = RouteState(path, params)
        logger.debug("Navigated %s -> %s params=%r", previous, path, params)
        emit_navigation_event("navigate", path, source=previous, details={"target": target})

    def on_popstate(self) -> None:
        """Browser back/forward: re-read the location and re-derive params."""
        previous = self._state.current_path
        self._state = self._read_location()
        logger.debug("Popstate %s -> %s", previous, self._state.current_path)
        emit_navigation_event("popstate", self._state.current_path, source=previous)

    # -- Callbacks handed to pages ---------------------------------------

    def on_admin_login(self, admin_data: Any) -> None:
        self._admin.set(admin_data)
        emit_navigation_event("admin.login", self._config.admin_path)
        self.navigate(self._config.admin_path)

    def on_admin_sign_out(self) -> None:
        self._admin.clear()
        emit_navigation_event("admin.logout", self._config.home_path)
        self.navigate(self._config.home_path)

    def on_onboarding_complete(self, data: Any = None) -> None:
        logger.debug("Onboarding completed")
        self.navigate(self._config.landing_path)

    def on_onboarding_skip(self) -> None:
        logger.debug("Onboarding skipped")
        self.navigate(self._config.landing_path)

    def _back_to_home(self) -> None:
        self.navigate(self._config.home_path)

    def _callbacks(self) -> dict[str, Callable[..., Any] | None]:
        c = self._collaborators
        return {
            "navigate": self.navigate,
            "on_sign_in": c.on_sign_in,
            "on_sign_up": c.on_sign_up,
            "on_sign_out": c.on_sign_out,
            "complete_onboarding": c.complete_onboarding,
            "update_user_profile": c.update_user_profile,
            "update_settings": c.update_settings,
            "set_user_profile": c.set_user_profile,
            "on_complete": self.on_onboarding_complete,
            "on_skip": self.on_onboarding_skip,
            "on_admin_login": self.on_admin_login,
            "on_admin_sign_out": self.on_admin_sign_out,
            "on_back_to_home": self._back_to_home,
        }

    # -- Rendering --------------------------------------------------------

    def context(
        self,
        auth_state: AuthState = ANONYMOUS,
        user_profile: UserProfile | None = None,
    ) -> DispatchContext:
        return DispatchContext(
            auth_state=auth_state,
            user_profile=user_profile,
            admin_auth=self._admin.get(),
            callbacks=self._callbacks(),
            config=self._config,
        )

    def render(
        self,
        auth_state: AuthState = ANONYMOUS,
        user_profile: UserProfile | None = None,
    ) -> Render:
        """Dispatch the current location, following redirects until a page renders.

        Each redirect is a real ``navigate`` call (a history push). Raises
        ``RedirectLoopError`` if ``NavConfig.max_redirects`` is exceeded.
        """
        ctx = self.context(auth_state, user_profile)
        chain = [self._state.current_path]
        for _ in range(self._config.max_redirects + 1):
            decision = dispatch(self._state.current_path, self._state.route_params, ctx, self._table)
            if isinstance(decision, Render):
                if decision.gated:
                    emit_navigation_event("gate.onboarding", decision.path)
                return decision
            self._follow(decision)
            chain.append(decision.path)
        raise RedirectLoopError(tuple(chain))

    def _follow(self, redirect: Redirect) -> None:
        emit_navigation_event(
            "redirect",
            redirect.path,
            source=self._state.current_path,
            details={"reason": redirect.reason},
        )
        self.navigate(redirect.path)

    def view(
        self,
        auth_state: AuthState = ANONYMOUS,
        user_profile: UserProfile | None = None,
    ) -> Any:
        """Render the current page through its registered component."""
        decision = self.render(auth_state, user_profile)
        return self.render_component(decision)

    def render_component(self, decision: Render) -> Any:
        try:
            component = self._components[decision.page]
        except KeyError:
            msg = f"No component registered for page {decision.page!r}."
            raise ConfigurationError(msg) from None
        return component(**decision.props)
