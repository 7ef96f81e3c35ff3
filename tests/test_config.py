"""Tests for visanav.config: NavConfig frozen dataclass."""

import pytest

from visanav.config import NavConfig
from visanav.errors import ConfigurationError


class TestNavConfig:
    def test_defaults(self) -> None:
        cfg = NavConfig()

        assert cfg.home_path == "/"
        assert cfg.landing_path == "/visa-routes"
        assert cfg.onboarding_path == "/onboarding"
        assert cfg.admin_prefix == "/admin"
        assert cfg.admin_login_path == "/admin/login"
        assert cfg.canonicalize_paths is True
        assert cfg.admin_session == "memory"
        assert cfg.max_redirects == 8
        cfg.validate()

    def test_frozen(self) -> None:
        cfg = NavConfig()

        with pytest.raises(AttributeError):
            cfg.max_redirects = 1  # type: ignore[misc]

    def test_unknown_admin_session(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown admin_session"):
            NavConfig(admin_session="cookie").validate()

    def test_signed_requires_secret(self) -> None:
        with pytest.raises(ConfigurationError, match="secret_key must not be empty"):
            NavConfig(admin_session="signed").validate()

    def test_max_redirects_positive(self) -> None:
        with pytest.raises(ConfigurationError, match="max_redirects"):
            NavConfig(max_redirects=0).validate()

    def test_paths_must_be_absolute(self) -> None:
        with pytest.raises(ConfigurationError, match="landing_path"):
            NavConfig(landing_path="visa-routes").validate()
