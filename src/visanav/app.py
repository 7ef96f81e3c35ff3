"""Application shell: auth state, profile and the navigator together.

The shell plays the part of the host page: it holds whatever the session
hook reported, shows a loading page until the session resolves, and
wraps ``complete_onboarding`` so a successful result updates the profile
the access gate reads.

Usage::

    app = App(collaborators=Collaborators(complete_onboarding=api.complete))
    app.set_auth_state(AuthState(user=user))
    app.set_user_profile(UserProfile(name="Ada", completed_onboarding=False))

    with app:
        app.render().page        # "onboarding"
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from visanav._internal.invoke import invoke
from visanav.auth import LOADING, AuthState, UserProfile
from visanav.config import NavConfig
from visanav.dispatch import Render
from visanav.history import History
from visanav.navigator import Collaborators, Navigator
from visanav.pages import PageTable

logger = logging.getLogger("visanav.app")

LOADING_PAGE = "loading"


class App:
    """The application shell."""

    __slots__ = ("_auth_state", "_collaborators", "_components", "_user_profile", "navigator")

    def __init__(
        self,
        *,
        config: NavConfig | None = None,
        history: History | None = None,
        table: PageTable | None = None,
        collaborators: Collaborators | None = None,
        components: Mapping[str, Callable[..., Any]] | None = None,
        storage: MutableMapping[str, str] | None = None,
    ) -> None:
        self._collaborators = collaborators or Collaborators()
        self._components = dict(components or {})
        self._auth_state: AuthState = LOADING
        self._user_profile: UserProfile | None = None

        forwarded = dataclasses.replace(
            self._collaborators,
            complete_onboarding=self.complete_onboarding,
            set_user_profile=self.set_user_profile,
        )
        self.navigator = Navigator(
            history,
            config=config,
            table=table,
            collaborators=forwarded,
            components=self._components,
            storage=storage,
        )

    # -- Session ----------------------------------------------------------

    @property
    def auth_state(self) -> AuthState:
        return self._auth_state

    @property
    def user_profile(self) -> UserProfile | None:
        return self._user_profile

    def set_auth_state(self, auth_state: AuthState) -> None:
        self._auth_state = auth_state
        if not auth_state.is_authenticated:
            self._user_profile = None

    def set_user_profile(self, profile: UserProfile | Mapping[str, Any] | None) -> None:
        if profile is not None and not isinstance(profile, UserProfile):
            profile = UserProfile.from_mapping(profile)
        self._user_profile = profile
        if self._collaborators.set_user_profile is not None:
            self._collaborators.set_user_profile(profile)

    async def complete_onboarding(self, data: dict[str, Any]) -> dict[str, Any]:
        """Call the host's ``complete_onboarding`` and apply the returned profile.

        The profile applied afterwards is always marked as onboarded so the
        access gate releases the user.
        """
        if self._collaborators.complete_onboarding is None:
            return {"success": False, "error": "Onboarding is not configured"}

        result = await invoke(self._collaborators.complete_onboarding, data)
        if result and result.get("success"):
            profile = result.get("profile")
            updated: UserProfile | None = None
            if isinstance(profile, UserProfile):
                updated = dataclasses.replace(profile, completed_onboarding=True)
            elif isinstance(profile, Mapping):
                updated = UserProfile.from_mapping({**profile, "completed_onboarding": True})
            elif self._user_profile is not None:
                updated = dataclasses.replace(self._user_profile, completed_onboarding=True)
            if updated is not None:
                self.set_user_profile(updated)
            logger.info("Onboarding completed")
        return result

    # -- Lifecycle --------------------------------------------------------

    def __enter__(self) -> App:
        self.navigator.mount()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.navigator.unmount()

    # -- Rendering --------------------------------------------------------

    def render(self) -> Render:
        """Render the current page, or the loading page while the session resolves."""
        if self._auth_state.is_loading:
            return Render(LOADING_PAGE, self.navigator.current_path)
        return self.navigator.render(self._auth_state, self._user_profile)

    def view(self) -> Any:
        """Render through the registered page components."""
        return self.navigator.render_component(self.render())
