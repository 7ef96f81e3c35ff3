"""Navigator configuration.

NavConfig is a frozen dataclass: immutable after creation, with typed
fields instead of string-key lookups.
"""

from dataclasses import dataclass

from visanav.errors import ConfigurationError

ADMIN_SESSION_MODES = frozenset({"memory", "signed"})


@dataclass(frozen=True, slots=True)
class NavConfig:
    """Navigator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = NavConfig(admin_session="signed", secret_key="s3cr3t")
    """

    # Fixed routes
    home_path: str = "/"
    landing_path: str = "/visa-routes"  # Target after onboarding completes or is skipped
    onboarding_path: str = "/onboarding"
    admin_prefix: str = "/admin"
    admin_path: str = "/admin"
    admin_login_path: str = "/admin/login"

    # Paths
    canonicalize_paths: bool = True  # Strip query/fragment and trailing slash

    # Redirects
    max_redirects: int = 8

    # Admin session: "memory" (lost on reload) or "signed" (itsdangerous token)
    admin_session: str = "memory"
    secret_key: str = ""
    admin_session_max_age: int = 8 * 3600
    admin_storage_key: str = "visanav_admin"

    def validate(self) -> None:
        """Raise ``ConfigurationError`` for inconsistent settings."""
        if self.admin_session not in ADMIN_SESSION_MODES:
            msg = (
                f"Unknown admin_session {self.admin_session!r}. "
                f"Expected one of: {', '.join(sorted(ADMIN_SESSION_MODES))}"
            )
            raise ConfigurationError(msg)
        if self.admin_session == "signed" and not self.secret_key:
            msg = "NavConfig.secret_key must not be empty when admin_session='signed'."
            raise ConfigurationError(msg)
        if self.max_redirects < 1:
            msg = f"NavConfig.max_redirects must be at least 1, got {self.max_redirects}."
            raise ConfigurationError(msg)
        for name in (
            "home_path",
            "landing_path",
            "onboarding_path",
            "admin_prefix",
            "admin_path",
            "admin_login_path",
        ):
            value = getattr(self, name)
            if not value.startswith("/"):
                msg = f"NavConfig.{name} must start with '/', got {value!r}."
                raise ConfigurationError(msg)
