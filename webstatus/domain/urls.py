"""URL predicates shared by the redirect models and resolver."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

_CONTROL_CHARS = ("\r", "\n")

_DEFAULT_PORTS = {"http": "80", "https": "443"}


def is_absolute_url(url: str) -> bool:
    """Check if URL is absolute (has scheme and authority)."""
    try:
        parsed = urlsplit(url)
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc)


def url_scheme(url: str) -> str:
    """Lowercased scheme of a URL, or an empty string."""
    try:
        return urlsplit(url).scheme.lower()
    except ValueError:
        return ""


def has_control_characters(url: str) -> bool:
    """CR/LF in a header value would allow response splitting."""
    return any(ch in url for ch in _CONTROL_CHARS)


def canonical_url(url: str) -> str:
    """
    Form of a URL used to decide whether two URLs name the same resource.

    Scheme and host are lowercased, a default port is dropped and an empty
    path becomes "/". Path, query and fragment stay case-sensitive.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return url

    scheme = parts.scheme.lower()
    userinfo, at, hostport = parts.netloc.rpartition("@")
    host, colon, port = hostport.rpartition(":")
    # "[::1]" has colons but no port
    if not colon or "]" in port:
        host, port = hostport, ""

    if port in ("", _DEFAULT_PORTS.get(scheme)):
        hostport = host.lower()
    else:
        hostport = f"{host.lower()}:{port}"
    netloc = f"{userinfo}{at}{hostport}"

    path = parts.path
    if netloc and not path:
        path = "/"

    return urlunsplit((scheme, netloc, path, parts.query, parts.fragment))
