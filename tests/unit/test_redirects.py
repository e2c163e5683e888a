"""
Tests for RedirectResolver.

Covers:
- Relative destinations resolve against the request URL
- Self-redirects are rejected
- 301/303 status selection
- HEAD requests get no body
- Scheme allow-list and header injection checks
"""

from __future__ import annotations

import pytest

from webstatus.components.redirects import (
    RedirectConfig,
    RedirectKind,
    RedirectRequest,
    RedirectResolver,
    RedirectTarget,
    create_redirect_resolver,
    render_body,
    resolve_destination,
    validate_location,
)
from webstatus.domain.errors import (
    NullArgumentError,
    RelativeRequestUrlError,
    SelfRedirectError,
    UnsafeRedirectError,
)
from webstatus.domain.urls import canonical_url, is_absolute_url

# --- Fixtures ---


@pytest.fixture
def resolver() -> RedirectResolver:
    return RedirectResolver()


def _get(url: str) -> RedirectRequest:
    return RedirectRequest(request_url=url, request_method="GET")


# --- URL Detection Tests ---


class TestIsAbsoluteUrl:
    def test_http_url(self) -> None:
        assert is_absolute_url("http://example.org/page")

    def test_https_url(self) -> None:
        assert is_absolute_url("https://example.org")

    def test_root_relative_path(self) -> None:
        assert not is_absolute_url("/new")

    def test_relative_path(self) -> None:
        assert not is_absolute_url("other")

    def test_protocol_relative_url(self) -> None:
        assert not is_absolute_url("//cdn.example.org/x")

    def test_scheme_without_authority(self) -> None:
        assert not is_absolute_url("mailto:someone@example.org")

    def test_malformed_ipv6_host(self) -> None:
        assert not is_absolute_url("http://[::1/page")


class TestCanonicalUrl:
    def test_empty_path_becomes_root(self) -> None:
        assert canonical_url("http://example.org") == "http://example.org/"

    def test_scheme_and_host_lowercased(self) -> None:
        assert canonical_url("HTTP://EXAMPLE.ORG/Page") == "http://example.org/Page"

    def test_default_ports_dropped(self) -> None:
        assert canonical_url("http://example.org:80/a") == "http://example.org/a"
        assert canonical_url("https://example.org:443/a") == "https://example.org/a"

    def test_other_ports_kept(self) -> None:
        assert canonical_url("https://example.org:80/a") == "https://example.org:80/a"

    def test_ipv6_host_without_port(self) -> None:
        assert canonical_url("http://[::1]/a") == "http://[::1]/a"

    def test_query_case_kept(self) -> None:
        assert canonical_url("http://example.org/a?Q=1") == "http://example.org/a?Q=1"


class TestRedirectTarget:
    def test_absolute_flag_for_absolute_destination(self) -> None:
        assert RedirectTarget(destination="http://example.org/b").absolute

    def test_absolute_flag_for_relative_destination(self) -> None:
        assert not RedirectTarget(destination="/b").absolute

    def test_default_kind_is_permanent(self) -> None:
        assert RedirectTarget(destination="/b").kind is RedirectKind.PERMANENT


class TestRedirectKind:
    def test_permanent(self) -> None:
        assert RedirectKind.PERMANENT.status_code == 301
        assert RedirectKind.PERMANENT.status == "301 Moved Permanently"

    def test_temporary(self) -> None:
        assert RedirectKind.TEMPORARY.status_code == 303
        assert RedirectKind.TEMPORARY.status == "303 See Other"


# --- Destination Resolution Tests ---


class TestResolveDestination:
    @pytest.mark.parametrize(
        ("destination", "expected"),
        [
            ("/new", "http://example.org/new"),
            ("other", "http://example.org/dir/other"),
            ("../up", "http://example.org/up"),
            ("?q=1", "http://example.org/dir/page?q=1"),
            ("#top", "http://example.org/dir/page#top"),
            ("//cdn.example.org/x", "http://cdn.example.org/x"),
        ],
    )
    def test_relative_references(self, destination: str, expected: str) -> None:
        assert resolve_destination("http://example.org/dir/page", destination) == expected

    def test_absolute_destination_unchanged(self) -> None:
        result = resolve_destination("http://example.org/a", "https://other.example.net/b")
        assert result == "https://other.example.net/b"


# --- Resolver Tests ---


class TestResolve:
    def test_relative_permanent_redirect(self, resolver: RedirectResolver) -> None:
        result = resolver.resolve(
            _get("http://example.org/old"),
            RedirectTarget(destination="/new", kind=RedirectKind.PERMANENT),
        )

        assert result.location == "http://example.org/new"
        assert result.status_code == 301
        assert result.status == "301 Moved Permanently"
        assert result.body is not None
        assert 'href="http://example.org/new"' in result.body

    def test_temporary_redirect(self, resolver: RedirectResolver) -> None:
        result = resolver.resolve(
            _get("http://example.org/form"),
            RedirectTarget(destination="/thanks", kind=RedirectKind.TEMPORARY),
        )

        assert result.status_code == 303
        assert result.status == "303 See Other"
        assert result.location == "http://example.org/thanks"

    def test_head_has_no_body(self, resolver: RedirectResolver) -> None:
        result = resolver.resolve(
            RedirectRequest(request_url="http://example.org/a", request_method="HEAD"),
            RedirectTarget(destination="http://example.org/b", kind=RedirectKind.TEMPORARY),
        )

        assert result.body is None
        assert result.status_code == 303
        assert result.location == "http://example.org/b"

    @pytest.mark.parametrize("method", ["GET", "POST", "PUT", "DELETE"])
    def test_other_methods_have_body(self, resolver: RedirectResolver, method: str) -> None:
        result = resolver.resolve(
            RedirectRequest(request_url="http://example.org/a", request_method=method),
            RedirectTarget(destination="/b"),
        )

        assert result.body is not None
        assert 'href="http://example.org/b"' in result.body

    def test_location_is_absolute(self, resolver: RedirectResolver) -> None:
        result = resolver.resolve(_get("https://example.org/a/b/c"), RedirectTarget(destination="d"))
        assert is_absolute_url(result.location)
        assert result.location == "https://example.org/a/b/d"

    def test_case_differences_are_not_self_redirects(self, resolver: RedirectResolver) -> None:
        result = resolver.resolve(
            _get("http://example.org/page"),
            RedirectTarget(destination="http://example.org/Page"),
        )
        assert result.location == "http://example.org/Page"


class TestSelfRedirect:
    @pytest.mark.parametrize("kind", list(RedirectKind))
    def test_identical_absolute_destination(
        self, resolver: RedirectResolver, kind: RedirectKind
    ) -> None:
        with pytest.raises(SelfRedirectError) as exc_info:
            resolver.resolve(
                _get("http://example.org/page"),
                RedirectTarget(destination="http://example.org/page", kind=kind),
            )

        assert exc_info.value.url == "http://example.org/page"

    @pytest.mark.parametrize("destination", ["/page", "page"])
    def test_relative_destination_resolving_to_request(
        self, resolver: RedirectResolver, destination: str
    ) -> None:
        with pytest.raises(SelfRedirectError):
            resolver.resolve(_get("http://example.org/page"), RedirectTarget(destination=destination))

    @pytest.mark.parametrize(
        ("request_url", "destination"),
        [
            ("http://example.org/", "http://example.org"),
            ("http://example.org/page", "HTTP://EXAMPLE.ORG/page"),
            ("http://example.org/page", "http://example.org:80/page"),
            ("https://example.org/page", "https://example.org:443/page"),
            ("http://example.org:8080/page", "http://Example.org:8080/page"),
        ],
    )
    def test_equivalent_forms_of_request_url(
        self, resolver: RedirectResolver, request_url: str, destination: str
    ) -> None:
        with pytest.raises(SelfRedirectError):
            resolver.resolve(_get(request_url), RedirectTarget(destination=destination))

    def test_non_default_port_is_a_different_url(self, resolver: RedirectResolver) -> None:
        result = resolver.resolve(
            _get("http://example.org/page"),
            RedirectTarget(destination="http://example.org:8080/page"),
        )
        assert result.location == "http://example.org:8080/page"

    def test_self_redirect_is_a_value_error(self, resolver: RedirectResolver) -> None:
        with pytest.raises(ValueError):
            resolver.resolve(
                _get("http://example.org/page"),
                RedirectTarget(destination="http://example.org/page"),
            )


class TestNullArguments:
    def test_missing_destination(self, resolver: RedirectResolver) -> None:
        with pytest.raises(NullArgumentError) as exc_info:
            resolver.resolve(_get("http://example.org/a"), RedirectTarget(destination=None))  # type: ignore[arg-type]

        assert exc_info.value.argument == "destination"

    def test_missing_target(self, resolver: RedirectResolver) -> None:
        with pytest.raises(NullArgumentError):
            resolver.resolve(_get("http://example.org/a"), None)

    def test_missing_request_url(self, resolver: RedirectResolver) -> None:
        with pytest.raises(NullArgumentError) as exc_info:
            resolver.resolve(
                RedirectRequest(request_url=None, request_method="GET"),  # type: ignore[arg-type]
                RedirectTarget(destination="/b"),
            )

        assert exc_info.value.argument == "request_url"

    def test_destination_checked_first(self, resolver: RedirectResolver) -> None:
        with pytest.raises(NullArgumentError) as exc_info:
            resolver.resolve(None, None)

        assert exc_info.value.argument == "destination"

    def test_relative_request_url(self, resolver: RedirectResolver) -> None:
        with pytest.raises(RelativeRequestUrlError):
            resolver.resolve(_get("/old"), RedirectTarget(destination="/new"))


# --- Location Validation Tests ---


class TestUnsafeDestinations:
    def test_javascript_scheme_rejected(self, resolver: RedirectResolver) -> None:
        with pytest.raises(UnsafeRedirectError) as exc_info:
            resolver.resolve(_get("http://example.org/a"), RedirectTarget(destination="javascript:alert(1)"))

        assert "javascript" in exc_info.value.reason

    def test_ftp_rejected_by_default(self, resolver: RedirectResolver) -> None:
        with pytest.raises(UnsafeRedirectError):
            resolver.resolve(_get("http://example.org/a"), RedirectTarget(destination="ftp://files.example.org/x"))

    def test_crlf_rejected(self, resolver: RedirectResolver) -> None:
        with pytest.raises(UnsafeRedirectError):
            resolver.resolve(
                _get("http://example.org/a"),
                RedirectTarget(destination="http://example.org/b\r\nSet-Cookie: x=1"),
            )

    def test_custom_allow_list(self) -> None:
        resolver = create_redirect_resolver(RedirectConfig(allowed_schemes=("https",)))

        with pytest.raises(UnsafeRedirectError):
            resolver.resolve(_get("https://example.org/a"), RedirectTarget(destination="http://example.org/b"))

        result = resolver.resolve(_get("https://example.org/a"), RedirectTarget(destination="/b"))
        assert result.location == "https://example.org/b"

    def test_empty_allow_list_accepts_any_scheme(self) -> None:
        resolver = RedirectResolver(RedirectConfig(allowed_schemes=()))

        result = resolver.resolve(_get("http://example.org/a"), RedirectTarget(destination="javascript:alert(1)"))

        assert result.location == "javascript:alert(1)"

    def test_validate_location_accepts_uppercase_scheme(self) -> None:
        validate_location("HTTPS://example.org/b")


# --- Body Tests ---


class TestRenderBody:
    def test_permanent_heading(self) -> None:
        body = render_body(RedirectKind.PERMANENT, "http://example.org/new")

        assert body.startswith("<!DOCTYPE html>")
        assert "<title>This page has moved</title>" in body
        assert "<h1>This page has moved</h1>" in body
        assert '<a href="http://example.org/new">http://example.org/new</a>' in body

    def test_temporary_heading(self) -> None:
        body = render_body(RedirectKind.TEMPORARY, "http://example.org/new")

        assert "<title>See another page</title>" in body

    def test_location_is_escaped(self) -> None:
        body = render_body(RedirectKind.PERMANENT, 'http://example.org/s?a=1&b="2"')

        assert 'href="http://example.org/s?a=1&amp;b=&quot;2&quot;"' in body
