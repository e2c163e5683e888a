"""
Redirects component - 301 Moved Permanently and 303 See Other.

Resolves redirect destinations and applies them to a host response.

Invariants:
- I1: Location is always an absolute URI
- I2: Location never equals the request URL
- I3: Status code is 301 (permanent) or 303 (temporary)
- I4: HEAD requests get no body
- I5: Invalid input fails before any header is written
"""

from __future__ import annotations

from webstatus.domain.errors import (
    HttpStatusError,
    NullArgumentError,
    RelativeRequestUrlError,
    SelfRedirectError,
    UnsafeRedirectError,
)
from webstatus.domain.results import RESPONSE_COMPLETE, ResponseComplete

from ._impl import RedirectConfig, RedirectResolver
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


def _build_config(rules: RedirectRulesPort | None) -> RedirectConfig:
    """Build redirect config from rules port."""
    if rules is None:
        return RedirectConfig()

    return RedirectConfig(allowed_schemes=tuple(rules.get_allowed_schemes()))


def _create_resolver(rules: RedirectRulesPort | None) -> RedirectResolver:
    return RedirectResolver(config=_build_config(rules))


def _convert_error(error: HttpStatusError) -> RedirectValidationError:
    """Convert a raised error to a component validation error."""
    if isinstance(error, NullArgumentError):
        return RedirectValidationError(
            code="null_argument",
            message=str(error),
            field=error.argument,
        )
    if isinstance(error, RelativeRequestUrlError):
        return RedirectValidationError(
            code="relative_request_url",
            message=str(error),
            field="request_url",
        )
    if isinstance(error, SelfRedirectError):
        return RedirectValidationError(
            code="self_redirect",
            message=str(error),
            field="destination",
        )
    if isinstance(error, UnsafeRedirectError):
        return RedirectValidationError(
            code="unsafe_redirect",
            message=str(error),
            field="destination",
        )
    return RedirectValidationError(code="invalid_redirect", message=str(error))


# --- Applying to a response ---


def apply_redirect(result: RedirectResult, response: ResponsePort) -> ResponseComplete:
    """
    Write a resolved redirect to the response and end it.

    Returns RESPONSE_COMPLETE; the handler should not write anything else.
    """
    response.status = result.status
    response.status_code = result.status_code
    response.add_header("Location", result.location)

    if result.body is not None:
        response.write(result.body)

    response.end()
    return RESPONSE_COMPLETE


def _redirect(
    request_url: str,
    request_method: str,
    destination: str,
    kind: RedirectKind,
    response: ResponsePort | None,
    rules: RedirectRulesPort | None,
) -> ResponseComplete:
    if destination is None:
        raise NullArgumentError("destination")
    if request_url is None:
        raise NullArgumentError("request_url")
    if response is None:
        raise NullArgumentError("response")

    result = _create_resolver(rules).resolve(
        RedirectRequest(request_url=request_url, request_method=request_method),
        RedirectTarget(destination=destination, kind=kind),
    )
    return apply_redirect(result, response)


# --- Component Entry Points ---


def run_resolve(
    inp: ResolveRedirectInput,
    *,
    rules: RedirectRulesPort | None = None,
) -> ResolveRedirectOutput:
    """
    Resolve a redirect without touching a response.

    Args:
        inp: Request URL, method, destination and redirect kind.
        rules: Optional rules port for configuration.

    Returns:
        ResolveRedirectOutput with the result or validation errors.
    """
    resolver = _create_resolver(rules)

    try:
        result = resolver.resolve(
            RedirectRequest(request_url=inp.request_url, request_method=inp.request_method),
            RedirectTarget(destination=inp.destination, kind=inp.kind),
        )
    except HttpStatusError as e:
        return ResolveRedirectOutput(
            result=None,
            errors=[_convert_error(e)],
            success=False,
        )

    return ResolveRedirectOutput(result=result, errors=[], success=True)


def run_moved_permanently(
    inp: MovedPermanentlyInput,
    *,
    response: ResponsePort,
    rules: RedirectRulesPort | None = None,
) -> ResponseComplete:
    """
    Set the response to '301 Moved Permanently' and redirect.

    RFC 2616: the requested resource has been assigned a new permanent URI
    and any future references to this resource SHOULD use the returned URI.
    The response is cacheable unless indicated otherwise.

    Raises:
        NullArgumentError, RelativeRequestUrlError, SelfRedirectError,
        UnsafeRedirectError: before anything is written to the response.
    """
    return _redirect(
        inp.request_url,
        inp.request_method,
        inp.destination,
        RedirectKind.PERMANENT,
        response,
        rules,
    )


def run_see_other(
    inp: SeeOtherInput,
    *,
    response: ResponsePort,
    rules: RedirectRulesPort | None = None,
) -> ResponseComplete:
    """
    Set the response to '303 See Other' and redirect.

    RFC 2616: the response to the request can be found under a different URI
    and SHOULD be retrieved using GET. Used primarily to redirect the output
    of a POST. The 303 response MUST NOT be cached.

    Raises:
        NullArgumentError, RelativeRequestUrlError, SelfRedirectError,
        UnsafeRedirectError: before anything is written to the response.
    """
    return _redirect(
        inp.request_url,
        inp.request_method,
        inp.destination,
        RedirectKind.TEMPORARY,
        response,
        rules,
    )


def run(
    inp: ResolveRedirectInput | MovedPermanentlyInput | SeeOtherInput,
    *,
    response: ResponsePort | None = None,
    rules: RedirectRulesPort | None = None,
) -> ResolveRedirectOutput | ResponseComplete:
    """
    Main entry point for the redirects component.

    Dispatches to appropriate handler based on input type. Inputs that
    write a redirect require a response.
    """
    if isinstance(inp, ResolveRedirectInput):
        return run_resolve(inp, rules=rules)
    elif isinstance(inp, MovedPermanentlyInput):
        return run_moved_permanently(inp, response=response, rules=rules)  # type: ignore[arg-type]
    elif isinstance(inp, SeeOtherInput):
        return run_see_other(inp, response=response, rules=rules)  # type: ignore[arg-type]
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
