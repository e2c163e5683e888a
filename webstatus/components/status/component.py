"""
Status component - 400, 404, 410, 500 and 502 responses.

Each helper sets the status line and code on the supplied response. The
server error helpers (500, 502) add a random delay before returning.
"""

from __future__ import annotations

from ._impl import DelayConfig, StatusService
from .models import (
    BAD_GATEWAY,
    BAD_REQUEST,
    GONE,
    INTERNAL_SERVER_ERROR,
    NOT_FOUND,
    StatusLine,
)
from .ports import DelayRulesPort, RandomBytePort, ResponsePort, SleepPort


def _build_config(rules: DelayRulesPort | None) -> DelayConfig:
    """Build delay config from rules port."""
    if rules is None:
        return DelayConfig()

    return DelayConfig(
        enabled=rules.is_random_delay_enabled(),
        unit_ms=rules.get_random_delay_unit_ms(),
    )


def _create_service(
    rules: DelayRulesPort | None,
    sleeper: SleepPort | None,
    random_source: RandomBytePort | None,
) -> StatusService:
    return StatusService(
        config=_build_config(rules),
        sleeper=sleeper,
        random_source=random_source,
    )


# Shared by the 4xx helpers, which never delay
_client_errors = StatusService(config=DelayConfig(enabled=False))


def bad_request(response: ResponsePort) -> StatusLine:
    """
    Set the response status to '400 Bad Request'.

    RFC 2616: the request could not be understood by the server due to
    malformed syntax. The client SHOULD NOT repeat the request without
    modifications.
    """
    return _client_errors.apply(response, BAD_REQUEST)


def not_found(response: ResponsePort) -> StatusLine:
    """
    Set the response status to '404 Not Found'.

    Use when the page is not found or hidden for some reason. No indication
    is given of whether the condition is temporary or permanent.
    """
    return _client_errors.apply(response, NOT_FOUND)


def gone(response: ResponsePort) -> StatusLine:
    """
    Set the response status to '410 Gone'.

    The resource has been removed permanently and no forwarding address is
    known. If the resource may come back, use 404 Not Found instead.
    """
    return _client_errors.apply(response, GONE)


def internal_server_error(
    response: ResponsePort,
    *,
    rules: DelayRulesPort | None = None,
    sleeper: SleepPort | None = None,
    random_source: RandomBytePort | None = None,
) -> StatusLine:
    """
    Set the response status to '500 Internal Server Error', then delay.

    Blocks the calling thread for the random delay.
    """
    service = _create_service(rules, sleeper, random_source)
    return service.apply(response, INTERNAL_SERVER_ERROR, delay=True)


def bad_gateway(
    response: ResponsePort,
    *,
    rules: DelayRulesPort | None = None,
    sleeper: SleepPort | None = None,
    random_source: RandomBytePort | None = None,
) -> StatusLine:
    """
    Set the response status to '502 Bad Gateway', then delay.

    It's not our fault: a service called while handling the request failed.
    """
    service = _create_service(rules, sleeper, random_source)
    return service.apply(response, BAD_GATEWAY, delay=True)
