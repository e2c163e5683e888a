"""
ResponsePort adapter for FastAPI / Starlette.

Starlette responses are immutable once returned from a handler, so the
writer buffers status, headers and body and builds the Response at the end.
"""

from __future__ import annotations

from fastapi import Response

from webstatus.domain.errors import ResponseFinalizedError

HTML_MEDIA_TYPE = "text/html; charset=utf-8"


class StarletteResponseWriter:
    """Buffered ResponsePort producing a fastapi.Response."""

    def __init__(self, media_type: str = HTML_MEDIA_TYPE) -> None:
        self.status = "200 OK"
        self.status_code = 200
        self._media_type = media_type
        self._headers: list[tuple[str, str]] = []
        self._chunks: list[str] = []
        self._ended = False

    @property
    def ended(self) -> bool:
        return self._ended

    @property
    def headers(self) -> list[tuple[str, str]]:
        return list(self._headers)

    @property
    def body(self) -> str:
        return "".join(self._chunks)

    def _check_open(self) -> None:
        if self._ended:
            raise ResponseFinalizedError()

    def add_header(self, name: str, value: str) -> None:
        self._check_open()
        self._headers.append((name, value))

    def write(self, text: str) -> None:
        self._check_open()
        self._chunks.append(text)

    def end(self) -> None:
        self._ended = True

    def to_response(self) -> Response:
        """Build the Response. Content-Type is only set when a body was written."""
        response = Response(
            content=self.body,
            status_code=self.status_code,
            media_type=self._media_type if self._chunks else None,
        )
        for name, value in self._headers:
            response.headers.append(name, value)
        return response
