"""visanav exception hierarchy.

Shared across the resolver, navigator, dispatch table and onboarding flow
so every module raises and catches the same types.
"""


class VisanavError(Exception):
    """Base for all visanav-specific errors."""


class ConfigurationError(VisanavError):
    """Raised when navigator configuration or route registration is invalid.

    Typically raised while constructing a ``Navigator`` or compiling the
    route table, never during navigation.
    """


class NotFound(VisanavError):  # noqa: N818
    """No route matches the path.

    Raised by the trie router. The dispatch table converts it into a
    redirect, so users never see it.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"No route matches {path!r}")
        self.path = path


class NavigationError(VisanavError):
    """Base for navigation failures that escape the render loop.

    Failures inside ``navigate`` itself never propagate; they are logged
    and the route state is left as it was.
    """


class RedirectLoopError(NavigationError):
    """The redirect chain did not settle on a renderable page."""

    def __init__(self, chain: tuple[str, ...]) -> None:
        super().__init__("Redirect loop: " + " -> ".join(chain))
        self.chain = chain


class OnboardingError(VisanavError):
    """``complete_onboarding`` reported a failure."""

    def __init__(self, detail: str = "Failed to complete onboarding") -> None:
        super().__init__(detail)
        self.detail = detail
