"""
Redirects component - 301/303 redirect resolution.
"""

from ._impl import (
    DEFAULT_CONFIG,
    RedirectConfig,
    RedirectResolver,
    create_redirect_resolver,
    render_body,
    resolve_destination,
    validate_location,
)
from .component import (
    apply_redirect,
    run,
    run_moved_permanently,
    run_resolve,
    run_see_other,
)
from .models import (
    MovedPermanentlyInput,
    RedirectKind,
    RedirectRequest,
    RedirectResult,
    RedirectTarget,
    RedirectValidationError,
    ResolveRedirectInput,
    ResolveRedirectOutput,
    SeeOtherInput,
)
from .ports import RedirectRulesPort, ResponsePort

__all__ = [
    # Entry points
    "apply_redirect",
    "run",
    "run_moved_permanently",
    "run_resolve",
    "run_see_other",
    # Core types
    "RedirectKind",
    "RedirectRequest",
    "RedirectResult",
    "RedirectTarget",
    # Input models
    "MovedPermanentlyInput",
    "ResolveRedirectInput",
    "SeeOtherInput",
    # Output models
    "RedirectValidationError",
    "ResolveRedirectOutput",
    # Ports
    "RedirectRulesPort",
    "ResponsePort",
    # _impl re-exports
    "DEFAULT_CONFIG",
    "RedirectConfig",
    "RedirectResolver",
    "create_redirect_resolver",
    "render_body",
    "resolve_destination",
    "validate_location",
]
