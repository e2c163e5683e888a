"""
Request-bound status helpers for FastAPI handlers.

The components take the request URL, method and response explicitly; this
facade fills them in from the current Starlette request and returns a
ready Response for the handler to return.

    @app.get("/old")
    def old(http: HttpStatus = Depends(get_http_status)) -> Response:
        return http.moved_permanently("/new")
"""

from __future__ import annotations

from fastapi import Request, Response

from webstatus.adapters.rules import RulesAdapter
from webstatus.adapters.starlette_response import StarletteResponseWriter
from webstatus.components import status
from webstatus.components.redirects import (
    MovedPermanentlyInput,
    SeeOtherInput,
    run_moved_permanently,
    run_see_other,
)
from webstatus.ports.entropy import RandomBytePort, SleepPort
from webstatus.rules.models import Rules


class HttpStatus:
    """Status helpers bound to one request."""

    def __init__(
        self,
        request: Request,
        rules: Rules | None = None,
        sleeper: SleepPort | None = None,
        random_source: RandomBytePort | None = None,
    ) -> None:
        self._request = request
        self._rules = RulesAdapter(rules or Rules())
        self._sleeper = sleeper
        self._random = random_source

    @property
    def request_url(self) -> str:
        return str(self._request.url)

    @property
    def request_method(self) -> str:
        return self._request.method

    # --- Redirects ---

    def moved_permanently(self, url: str) -> Response:
        """301 Moved Permanently to url (relative urls resolve against the request)."""
        writer = StarletteResponseWriter()
        run_moved_permanently(
            MovedPermanentlyInput(
                request_url=self.request_url,
                request_method=self.request_method,
                destination=url,
            ),
            response=writer,
            rules=self._rules,
        )
        return writer.to_response()

    def see_other(self, url: str) -> Response:
        """303 See Other to url (relative urls resolve against the request)."""
        writer = StarletteResponseWriter()
        run_see_other(
            SeeOtherInput(
                request_url=self.request_url,
                request_method=self.request_method,
                destination=url,
            ),
            response=writer,
            rules=self._rules,
        )
        return writer.to_response()

    # --- Errors ---

    def bad_request(self) -> Response:
        writer = StarletteResponseWriter()
        status.bad_request(writer)
        return writer.to_response()

    def not_found(self) -> Response:
        writer = StarletteResponseWriter()
        status.not_found(writer)
        return writer.to_response()

    def gone(self) -> Response:
        writer = StarletteResponseWriter()
        status.gone(writer)
        return writer.to_response()

    def internal_server_error(self) -> Response:
        writer = StarletteResponseWriter()
        status.internal_server_error(
            writer,
            rules=self._rules,
            sleeper=self._sleeper,
            random_source=self._random,
        )
        return writer.to_response()

    def bad_gateway(self) -> Response:
        writer = StarletteResponseWriter()
        status.bad_gateway(
            writer,
            rules=self._rules,
            sleeper=self._sleeper,
            random_source=self._random,
        )
        return writer.to_response()
