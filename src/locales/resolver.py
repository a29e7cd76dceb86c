"""Active locale detection from the first segment of the request path."""
from dataclasses import dataclass

from fastapi import HTTPException, Query, Request, status
from starlette.middleware.base import BaseHTTPMiddleware

from src.locales.registry import LocaleRegistry, get_registry


@dataclass(frozen=True)
class ActiveLocale:
    """Locale selected for a request.

    ``path`` is the request path with the locale segment consumed; it equals
    the original path when no locale prefix was present.
    """

    code: str
    path: str
    prefixed: bool = False


def resolve_locale(request_path: str, registry: LocaleRegistry) -> ActiveLocale:
    """Pick the locale named by the first path segment, or the default locale.

    Unknown or malformed segments are not an error: they simply mean the
    path carries no locale prefix.
    """
    segment, _, rest = request_path.lstrip("/").partition("/")
    if segment and registry.is_supported(segment):
        return ActiveLocale(code=segment, path="/" + rest, prefixed=True)
    return ActiveLocale(code=registry.default_locale(), path=request_path, prefixed=False)


class LocaleMiddleware(BaseHTTPMiddleware):
    """Store the request's ActiveLocale in ``request.state.locale``."""

    def __init__(self, app, registry: LocaleRegistry | None = None):
        super().__init__(app)
        self.registry = registry or get_registry()

    async def dispatch(self, request: Request, call_next):
        active = resolve_locale(request.url.path, self.registry)
        request.state.locale = active
        response = await call_next(request)
        response.headers.setdefault("Content-Language", active.code)
        return response


def get_active_locale(request: Request) -> ActiveLocale:
    """Dependency returning the locale resolved by LocaleMiddleware."""
    active = getattr(request.state, "locale", None)
    if active is None:
        registry = getattr(request.app.state, "registry", None) or get_registry()
        active = resolve_locale(request.url.path, registry)
    return active


def get_requested_locale(
    request: Request,
    locale: str | None = Query(None, description="Locale override (defaults to the path locale)"),
) -> str:
    """Locale code for JSON endpoints: ``?locale=`` when supported, else the active locale."""
    registry = getattr(request.app.state, "registry", None) or get_registry()
    if locale and registry.is_supported(locale):
        return locale
    return get_active_locale(request).code


def require_supported_locale(request: Request, locale: str) -> None:
    """Reject writes addressed to a locale outside the supported set."""
    registry = getattr(request.app.state, "registry", None) or get_registry()
    if not registry.is_supported(locale):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Locale '{locale}' is not supported"
        )
