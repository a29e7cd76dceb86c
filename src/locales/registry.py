"""Supported locales and the default / fallback locale."""
from dataclasses import dataclass, field
from functools import lru_cache
from typing import FrozenSet, Iterable, Optional, Tuple

from src.config import settings
from src.exceptions import ConfigurationError


@dataclass(frozen=True)
class LocaleRegistry:
    """Immutable, validated set of supported locale codes.

    Order is significant: it is the order in which localized routes are
    registered and alternate URLs are listed.
    """

    locales: Tuple[str, ...]
    default: str
    fallback: Optional[str] = None
    _lookup: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        locales = tuple(self.locales)
        if not locales:
            raise ConfigurationError("At least one locale must be supported")

        for code in locales:
            if not isinstance(code, str) or not code.strip() or "/" in code or code != code.strip():
                raise ConfigurationError(f"Invalid locale code: {code!r}")

        if len(set(locales)) != len(locales):
            raise ConfigurationError(f"Duplicate locale codes in {list(locales)}")

        if self.default not in locales:
            raise ConfigurationError(
                f"Default locale '{self.default}' is not in supported locales {list(locales)}"
            )

        fallback = self.fallback if self.fallback is not None else self.default
        if fallback not in locales:
            raise ConfigurationError(
                f"Fallback locale '{fallback}' is not in supported locales {list(locales)}"
            )

        object.__setattr__(self, "locales", locales)
        object.__setattr__(self, "fallback", fallback)
        object.__setattr__(self, "_lookup", frozenset(locales))

    @classmethod
    def from_codes(cls, codes: Iterable[str], default: str, fallback: Optional[str] = None) -> "LocaleRegistry":
        return cls(tuple(codes), default, fallback)

    def supported_locales(self) -> Tuple[str, ...]:
        return self.locales

    def default_locale(self) -> str:
        return self.default

    def fallback_locale(self) -> str:
        return self.fallback

    def is_supported(self, code: str) -> bool:
        return code in self._lookup


@lru_cache
def get_registry() -> LocaleRegistry:
    """Process-wide registry built from configuration."""
    return LocaleRegistry.from_codes(
        settings.APP_LOCALES,
        default=settings.APP_DEFAULT_LOCALE,
        fallback=settings.APP_FALLBACK_LOCALE,
    )
