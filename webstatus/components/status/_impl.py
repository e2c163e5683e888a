"""
StatusService - fixed error statuses applied to a host response.

Key behaviors:
- 400, 404 and 410 only set the status line and code
- 500 and 502 also sleep for a random 0-255 ms, so the time taken does not
  reveal which error occurred
- The delay byte comes from a cryptographically secure source
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from webstatus.adapters.entropy import SecretsRandomSource, SystemSleeper
from webstatus.domain.errors import NullArgumentError

from .models import StatusLine
from .ports import RandomBytePort, ResponsePort, SleepPort

logger = logging.getLogger(__name__)

# --- Configuration ---


@dataclass(frozen=True)
class DelayConfig:
    """Random delay configuration from rules."""

    enabled: bool = True
    unit_ms: float = 1.0


DEFAULT_CONFIG = DelayConfig()


# --- Service ---


class StatusService:
    """Applies status lines to responses, delaying server errors."""

    def __init__(
        self,
        config: DelayConfig | None = None,
        sleeper: SleepPort | None = None,
        random_source: RandomBytePort | None = None,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        self._sleeper = sleeper or SystemSleeper()
        self._random = random_source or SecretsRandomSource()

    def random_delay(self) -> None:
        """Sleep for a random number of units in [0, 255]."""
        if not self._config.enabled:
            return

        delay_ms = self._random.random_byte() * self._config.unit_ms
        self._sleeper.sleep(delay_ms / 1000.0)

    def apply(
        self,
        response: ResponsePort | None,
        line: StatusLine,
        *,
        delay: bool = False,
    ) -> StatusLine:
        """Set status and status code on the response."""
        if response is None:
            raise NullArgumentError("response")

        response.status = line.status
        response.status_code = line.status_code

        if line.is_server_error:
            logger.warning("Responding %s", line.status)

        if delay:
            self.random_delay()

        return line


# --- Factory ---


def create_status_service(
    config: DelayConfig | None = None,
    sleeper: SleepPort | None = None,
    random_source: RandomBytePort | None = None,
) -> StatusService:
    """Create a StatusService."""
    return StatusService(config=config, sleeper=sleeper, random_source=random_source)
