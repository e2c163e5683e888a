"""
Redirects component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from webstatus.domain.urls import is_absolute_url

# --- Redirect Kind ---


class RedirectKind(Enum):
    """Redirect status with its reason phrase and fallback body heading."""

    PERMANENT = (301, "Moved Permanently", "This page has moved")
    TEMPORARY = (303, "See Other", "See another page")

    def __init__(self, status_code: int, reason: str, heading: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.heading = heading

    @property
    def status(self) -> str:
        """Status line, e.g. '301 Moved Permanently'."""
        return f"{self.status_code} {self.reason}"


# --- Core Types ---


@dataclass(frozen=True)
class RedirectRequest:
    """The request being redirected."""

    request_url: str  # absolute
    request_method: str  # "GET", "HEAD", "POST", ...


@dataclass(frozen=True)
class RedirectTarget:
    """Where to redirect to, and how."""

    destination: str  # relative or absolute
    kind: RedirectKind = RedirectKind.PERMANENT

    @property
    def absolute(self) -> bool:
        return is_absolute_url(self.destination)


@dataclass(frozen=True)
class RedirectResult:
    """Status, Location and optional hypertext note to apply to a response."""

    status_code: int
    status: str
    location: str
    body: str | None = None


# --- Validation Error ---


@dataclass(frozen=True)
class RedirectValidationError:
    """Redirect validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ResolveRedirectInput:
    """Input for resolving a redirect without applying it."""

    request_url: str
    request_method: str
    destination: str
    kind: RedirectKind = RedirectKind.PERMANENT


@dataclass(frozen=True)
class MovedPermanentlyInput:
    """Input for a 301 Moved Permanently response."""

    request_url: str
    request_method: str
    destination: str


@dataclass(frozen=True)
class SeeOtherInput:
    """Input for a 303 See Other response."""

    request_url: str
    request_method: str
    destination: str


# --- Output Models ---


@dataclass(frozen=True)
class ResolveRedirectOutput:
    """Output for resolve operation."""

    result: RedirectResult | None
    errors: list[RedirectValidationError] = field(default_factory=list)
    success: bool = True
