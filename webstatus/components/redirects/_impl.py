"""
RedirectResolver - Location resolution for 301/303 responses.

Implements the redirect rules of RFC 2616 (10.3.2, 10.3.4):
- The Location header must hold an absolute URI
- The new URI must differ from the Request-URI
- Unless the request method was HEAD, the entity should contain a short
  hypertext note with a hyperlink to the new URI

Key behaviors:
- Relative destinations resolve against the request URL (RFC 3986)
- Destination naming the request URL raises SelfRedirectError (scheme and
  host case, default ports and an empty path are ignored)
- Location schemes are restricted to an allow-list (http/https by default)
- Nothing is written to a response here; see component.apply_redirect
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from urllib.parse import urljoin

from webstatus.domain.errors import (
    NullArgumentError,
    RelativeRequestUrlError,
    SelfRedirectError,
    UnsafeRedirectError,
)
from webstatus.domain.urls import (
    canonical_url,
    has_control_characters,
    is_absolute_url,
    url_scheme,
)

from .models import RedirectKind, RedirectRequest, RedirectResult, RedirectTarget

logger = logging.getLogger(__name__)

# --- Configuration ---


@dataclass(frozen=True)
class RedirectConfig:
    """Redirect configuration from rules."""

    # Empty tuple accepts any scheme
    allowed_schemes: tuple[str, ...] = ("http", "https")


DEFAULT_CONFIG = RedirectConfig()

# Requests that must not receive a body
HEAD_METHOD = "HEAD"

_BODY_TEMPLATE = (
    "<!DOCTYPE html><title>{heading}</title><h1>{heading}</h1>"
    '<p>Please see <a href="{href}">{text}</a> instead.</p>'
)


# --- Pure Functions ---


def resolve_destination(request_url: str, destination: str) -> str:
    """Make destination absolute, using request_url as the base."""
    if is_absolute_url(destination):
        return destination
    return urljoin(request_url, destination)


def render_body(kind: RedirectKind, location: str) -> str:
    """Minimal HTML5 document linking to the new location."""
    escaped = html.escape(location, quote=True)
    return _BODY_TEMPLATE.format(heading=kind.heading, href=escaped, text=escaped)


def validate_location(
    location: str,
    config: RedirectConfig = DEFAULT_CONFIG,
) -> None:
    """Raise UnsafeRedirectError if location cannot be sent as a Location."""
    if has_control_characters(location):
        raise UnsafeRedirectError(location, "contains CR or LF")

    if config.allowed_schemes:
        scheme = url_scheme(location)
        if scheme not in config.allowed_schemes:
            raise UnsafeRedirectError(location, f"scheme '{scheme}' is not allowed")


# --- Resolver ---


class RedirectResolver:
    """Computes the status, Location and body of a 301/303 redirect."""

    def __init__(self, config: RedirectConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> RedirectConfig:
        return self._config

    def resolve(
        self,
        request: RedirectRequest | None,
        target: RedirectTarget | None,
    ) -> RedirectResult:
        """
        Resolve a redirect target for a request.

        Raises:
            NullArgumentError: destination or request URL is None.
            RelativeRequestUrlError: request URL is not absolute.
            SelfRedirectError: destination resolves to the request URL.
            UnsafeRedirectError: destination has a disallowed scheme or
                control characters.
        """
        if target is None or target.destination is None:
            raise NullArgumentError("destination")
        if request is None or request.request_url is None:
            raise NullArgumentError("request_url")

        request_url = str(request.request_url)
        if not is_absolute_url(request_url):
            raise RelativeRequestUrlError(request_url)

        destination = str(target.destination)
        location = destination if target.absolute else resolve_destination(request_url, destination)

        if canonical_url(location) == canonical_url(request_url):
            logger.warning("Rejected self-redirect to %s", location)
            raise SelfRedirectError(location)

        try:
            validate_location(location, self._config)
        except UnsafeRedirectError as e:
            logger.warning("Rejected redirect from %s: %s", request_url, e.reason)
            raise

        kind = target.kind
        body = None
        if request.request_method != HEAD_METHOD:
            body = render_body(kind, location)

        logger.debug("Resolved %s redirect %s -> %s", kind.status_code, request_url, location)

        return RedirectResult(
            status_code=kind.status_code,
            status=kind.status,
            location=location,
            body=body,
        )


# --- Factory ---


def create_redirect_resolver(config: RedirectConfig | None = None) -> RedirectResolver:
    """Create a RedirectResolver."""
    return RedirectResolver(config=config)
