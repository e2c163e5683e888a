"""
Status component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from webstatus.ports.entropy import RandomBytePort, SleepPort
from webstatus.ports.response import ResponsePort

__all__ = ["DelayRulesPort", "RandomBytePort", "ResponsePort", "SleepPort"]


class DelayRulesPort(Protocol):
    """Port for random delay configuration."""

    def is_random_delay_enabled(self) -> bool:
        """Check if 5xx responses are delayed."""
        ...

    def get_random_delay_unit_ms(self) -> float:
        """Milliseconds per unit of the random byte."""
        ...
