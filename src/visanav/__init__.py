"""visanav: client-side routing for the UK visa assessment app.

Maps locations to pages, keeps route state in step with browser history,
and gates pages on onboarding and admin sessions.

Basic usage::

    from visanav import AuthState, MemoryHistory, Navigator

    nav = Navigator(MemoryHistory("/visa-routes"))
    with nav:
        nav.navigate("/visa-routes/global-talent")
        decision = nav.render(AuthState())
        decision.page                  # "visa-route-detail"
        decision.props["route_id"]     # "global-talent"

Application shell with loading state and onboarding::

    from visanav import App, Collaborators
    app = App(collaborators=Collaborators(complete_onboarding=api.complete))
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AuthState",
    "Collaborators",
    "ConfigurationError",
    "MemoryHistory",
    "NavConfig",
    "NavigationError",
    "Navigator",
    "OnboardingError",
    "OnboardingFlow",
    "Redirect",
    "RedirectLoopError",
    "Render",
    "User",
    "UserProfile",
    "VisanavError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import visanav`` fast while providing a clean top-level API.
    """
    if name == "App":
        from visanav.app import App

        return App

    if name in ("Navigator", "Collaborators"):
        from visanav import navigator as _nav

        return getattr(_nav, name)

    if name == "NavConfig":
        from visanav.config import NavConfig

        return NavConfig

    if name in ("AuthState", "User", "UserProfile"):
        from visanav import auth as _auth

        return getattr(_auth, name)

    if name == "MemoryHistory":
        from visanav.history import MemoryHistory

        return MemoryHistory

    if name in ("Render", "Redirect"):
        from visanav import dispatch as _dispatch

        return getattr(_dispatch, name)

    if name == "OnboardingFlow":
        from visanav.onboarding import OnboardingFlow

        return OnboardingFlow

    if name in (
        "ConfigurationError",
        "NavigationError",
        "OnboardingError",
        "RedirectLoopError",
        "VisanavError",
    ):
        from visanav import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
