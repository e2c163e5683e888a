"""
Status component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus


@dataclass(frozen=True)
class StatusLine:
    """A status code and its reason phrase."""

    status_code: int
    reason: str

    @property
    def status(self) -> str:
        """Status line, e.g. '404 Not Found'."""
        return f"{self.status_code} {self.reason}"

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600

    @classmethod
    def from_http_status(cls, code: HTTPStatus) -> StatusLine:
        return cls(status_code=code.value, reason=code.phrase)


BAD_REQUEST = StatusLine.from_http_status(HTTPStatus.BAD_REQUEST)
NOT_FOUND = StatusLine.from_http_status(HTTPStatus.NOT_FOUND)
GONE = StatusLine.from_http_status(HTTPStatus.GONE)
INTERNAL_SERVER_ERROR = StatusLine.from_http_status(HTTPStatus.INTERNAL_SERVER_ERROR)
BAD_GATEWAY = StatusLine.from_http_status(HTTPStatus.BAD_GATEWAY)
