import logging
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Request

from webstatus.adapters.entropy import SecretsRandomSource, SystemSleeper
from webstatus.api.http_status import HttpStatus
from webstatus.ports.entropy import RandomBytePort, SleepPort
from webstatus.rules.loader import load_rules
from webstatus.rules.models import Rules

logger = logging.getLogger(__name__)

RULES_PATH_ENV = "WEBSTATUS_RULES_PATH"


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        configured = os.environ.get(RULES_PATH_ENV)
        self.rules_path_configured = configured is not None
        self.rules_path = Path(configured) if configured else self.base_dir / "rules.yaml"


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    """
    Load rules once per process.

    An explicitly configured path must exist; without one, a missing
    rules.yaml means defaults.
    """
    settings = get_settings()
    if not settings.rules_path_configured and not settings.rules_path.exists():
        logger.info("No rules file at %s, using defaults", settings.rules_path)
        return Rules()
    return load_rules(settings.rules_path)


# --- Ports ---
def get_sleeper() -> SleepPort:
    return SystemSleeper()


def get_random_source() -> RandomBytePort:
    return SecretsRandomSource()


# --- Facade ---
def get_http_status(
    request: Request,
    rules: Rules = Depends(get_rules),
    sleeper: SleepPort = Depends(get_sleeper),
    random_source: RandomBytePort = Depends(get_random_source),
) -> HttpStatus:
    return HttpStatus(
        request,
        rules=rules,
        sleeper=sleeper,
        random_source=random_source,
    )
