"""
Redirects component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from webstatus.ports.response import ResponsePort

__all__ = ["RedirectRulesPort", "ResponsePort"]


class RedirectRulesPort(Protocol):
    """Port for redirect rules configuration."""

    def get_allowed_schemes(self) -> list[str]:
        """Get the schemes a Location may use. Empty means any."""
        ...
