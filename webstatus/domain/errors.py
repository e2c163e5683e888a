"""
Error types raised by the status helpers.

All of these signal programming errors in the caller. They are raised
before anything is written to the response.
"""

from __future__ import annotations


class HttpStatusError(Exception):
    """Base webstatus error."""

    pass


class NullArgumentError(HttpStatusError, ValueError):
    """A required argument was None."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None")


class RelativeRequestUrlError(HttpStatusError, ValueError):
    """The request URL used as the resolution base is not absolute."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Request URL must be absolute: '{url}'")


class SelfRedirectError(HttpStatusError, ValueError):
    """The destination resolves to the request URL itself."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"The request and destination URIs are the same: '{url}'")


class UnsafeRedirectError(HttpStatusError, ValueError):
    """The destination cannot be used as a Location header."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Unsafe redirect destination '{url}': {reason}")


class ResponseFinalizedError(HttpStatusError, RuntimeError):
    """The response was written to after it had been ended."""

    def __init__(self) -> None:
        super().__init__("Response has already been ended")
