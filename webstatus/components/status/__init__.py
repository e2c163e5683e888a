"""
Status component - fixed error statuses with anti-timing delay.
"""

from ._impl import DEFAULT_CONFIG, DelayConfig, StatusService, create_status_service
from .component import (
    bad_gateway,
    bad_request,
    gone,
    internal_server_error,
    not_found,
)
from .models import (
    BAD_GATEWAY,
    BAD_REQUEST,
    GONE,
    INTERNAL_SERVER_ERROR,
    NOT_FOUND,
    StatusLine,
)
from .ports import DelayRulesPort, RandomBytePort, ResponsePort, SleepPort

__all__ = [
    # Entry points
    "bad_gateway",
    "bad_request",
    "gone",
    "internal_server_error",
    "not_found",
    # Models
    "BAD_GATEWAY",
    "BAD_REQUEST",
    "GONE",
    "INTERNAL_SERVER_ERROR",
    "NOT_FOUND",
    "StatusLine",
    # Ports
    "DelayRulesPort",
    "RandomBytePort",
    "ResponsePort",
    "SleepPort",
    # _impl re-exports
    "DEFAULT_CONFIG",
    "DelayConfig",
    "StatusService",
    "create_status_service",
]
