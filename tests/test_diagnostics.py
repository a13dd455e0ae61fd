"""Tests for the connection test and admin shortcuts."""

import asyncio

import httpx

from app.config import Settings
from app.services import diagnostics
from tests.fakes import API_BASE, API_ROOT


def _check(settings, wp=None):
    return asyncio.run(
        diagnostics.test_connection(settings, transport=wp.transport if wp else None)
    )


class TestConnectionTest:
    def test_success_reports_item_count(self, settings, wp):
        wp.add(f"{API_ROOT}/posts", json=[{"id": 1}])
        status, report = _check(settings, wp)

        assert status == 200
        assert report.status == "success"
        assert report.raw_url == API_BASE
        assert report.formatted_url == f"{API_BASE}{API_ROOT}"
        assert report.data == {"count": 1}

    def test_object_payload_is_passed_through(self, settings, wp):
        wp.add(f"{API_ROOT}/posts", json={"hello": "world"})
        status, report = _check(settings, wp)
        assert status == 200
        assert report.data == {"hello": "world"}

    def test_disabled(self, wp):
        status, report = _check(Settings(wordpress_api_url=API_BASE, disable_wordpress=True), wp)
        assert status == 200
        assert report.status == "error"
        assert report.disabled is True
        assert wp.requests == []

    def test_unconfigured(self, wp):
        status, report = _check(Settings(), wp)
        assert status == 500
        assert report.status == "error"
        assert "WORDPRESS_API_URL" in report.error
        assert report.formatted_url == ""
        assert wp.requests == []

    def test_upstream_status_is_mirrored(self, settings, wp):
        wp.add(f"{API_ROOT}/posts", json={"code": "rest_forbidden"}, status=403)
        status, report = _check(settings, wp)
        assert status == 403
        assert report.response_status == 403
        assert report.response_status_text == "Forbidden"
        assert report.error == "WordPress API returned status: 403"

    def test_network_error_is_500(self, settings, wp):
        wp.fail_with(httpx.ConnectError("connection refused"))
        status, report = _check(settings, wp)
        assert status == 500
        assert report.status == "error"
        assert "connection refused" in report.error

    def test_invalid_json_is_500(self, settings, wp):
        wp.add(f"{API_ROOT}/posts", text="<html>maintenance</html>")
        status, report = _check(settings, wp)
        assert status == 500
        assert report.status == "error"

    def test_ignores_memoised_availability(self, settings, wp):
        wp.add(f"{API_ROOT}/posts", json=[])
        _check(settings, wp)
        _check(settings, wp)
        assert len(wp.requests) == 2


class TestAdminLinks:
    def test_default_admin_url(self):
        links = diagnostics.admin_links(Settings())
        assert links.admin_url == "http://localhost/wordpress/wp-admin"
        assert links.new_post == "http://localhost/wordpress/wp-admin/post-new.php"

    def test_custom_admin_url_trailing_slash(self):
        links = diagnostics.admin_links(Settings(admin_url="https://cms.example.com/wp-admin/"))
        assert links.admin_url == "https://cms.example.com/wp-admin"
        assert links.new_page == "https://cms.example.com/wp-admin/post-new.php?post_type=page"
        assert links.media_library == "https://cms.example.com/wp-admin/upload.php"
        assert links.certifications == "https://cms.example.com/wp-admin/edit.php?post_type=certification"
