from src.locales.paths import PATH_TRANSLATIONS, PathTranslator
from src.locales.registry import LocaleRegistry, get_registry
from src.locales.resolver import (
    ActiveLocale,
    LocaleMiddleware,
    get_active_locale,
    get_requested_locale,
    require_supported_locale,
    resolve_locale,
)

__all__ = [
    "ActiveLocale",
    "LocaleMiddleware",
    "LocaleRegistry",
    "PATH_TRANSLATIONS",
    "PathTranslator",
    "get_active_locale",
    "get_registry",
    "get_requested_locale",
    "require_supported_locale",
    "resolve_locale",
]
