"""Tests for visanav.pages: the page table."""

import pytest

from visanav.errors import ConfigurationError
from visanav.pages import ROUTES, PageTable
from visanav.routing.route import Route


class TestNamedRoutes:
    @pytest.mark.parametrize(
        ("name", "path"),
        [
            ("home", "/"),
            ("visa-routes", "/visa-routes"),
            ("ai-assistant", "/ai-assistant"),
            ("dashboard", "/dashboard"),
            ("eligibility-assessment", "/eligibility-assessment"),
            ("eligibility-results", "/eligibility-results"),
            ("action-plan", "/action-plan"),
            ("email-confirmation", "/email-confirmation"),
            ("profile", "/profile"),
            ("news", "/news"),
            ("admin", "/admin"),
            ("admin-login", "/admin/login"),
            ("admin-setup", "/admin/setup"),
        ],
    )
    def test_shortcut(self, name: str, path: str) -> None:
        assert PageTable().named_path(name) == path

    def test_unknown_name_maps_to_slash_name(self) -> None:
        assert PageTable().named_path("pricing") == "/pricing"

    def test_exactly_thirteen_shortcuts(self) -> None:
        assert len(PageTable().named_routes) == 13


class TestTableShape:
    def test_detail_routes(self) -> None:
        table = PageTable()
        assert [r.page for r in table.detail_routes] == ["visa-route-detail", "news-detail"]
        assert [table.detail_prefix(r) for r in table.detail_routes] == ["/visa-routes/", "/news/"]

    def test_exact_lookup(self) -> None:
        table = PageTable()
        assert table.exact("/admin/login").page == "admin-login"
        assert table.exact("/visa-routes/{routeId}") is None
        assert table.exact("/missing") is None

    def test_page_lookup(self) -> None:
        assert PageTable().page("onboarding").path == "/onboarding"
        with pytest.raises(ConfigurationError):
            PageTable().page("pricing")

    def test_admin_setup_gets_no_props(self) -> None:
        assert PageTable().page("admin-setup").props == frozenset()

    def test_email_confirmation_only_navigates(self) -> None:
        assert PageTable().page("email-confirmation").props == frozenset({"navigate"})


class TestTableValidation:
    def test_duplicate_page(self) -> None:
        routes = (*ROUTES, Route("/home", "home"))
        with pytest.raises(ConfigurationError, match="registered twice"):
            PageTable(routes)

    def test_detail_route_needs_prop(self) -> None:
        with pytest.raises(ConfigurationError, match="must end in its parameter"):
            PageTable([Route("/jobs/{jobId}", "job-detail", param="jobId")])
