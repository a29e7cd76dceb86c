"""Translation store contract and the locale fallback chain."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Mapping, Optional, TypeVar, Union

from src.locales.registry import LocaleRegistry, get_registry
from src.logging_config import get_logger

logger = get_logger(__name__)

EntityId = Union[int, str]
T = TypeVar("T")


def pick_translation(translations: Mapping[str, T], chain: List[str]) -> Optional[T]:
    """Return the first translation present for a locale of ``chain``."""
    for locale in chain:
        translation = translations.get(locale)
        if translation is not None:
            return translation
    return None


class TranslationStore(ABC, Generic[T]):
    """Localized records keyed by (entity id, locale).

    Implementations guarantee a single record per (entity, locale): ``put``
    overwrites an existing record atomically (last writer wins).
    """

    def __init__(self, registry: LocaleRegistry | None = None):
        self.registry = registry or get_registry()

    @abstractmethod
    async def get(self, entity_id: EntityId, locale: str) -> Optional[T]:
        """Return the translation for exactly this locale, or None."""

    @abstractmethod
    async def get_all(self, entity_id: EntityId) -> Dict[str, T]:
        """Return every translation of an entity keyed by locale."""

    @abstractmethod
    async def put(self, entity_id: EntityId, locale: str, fields: Mapping[str, Any]) -> T:
        """Insert or overwrite the translation for (entity, locale)."""

    @abstractmethod
    async def delete(self, entity_id: EntityId, locale: str | None = None) -> int:
        """Delete one translation, or all of them when ``locale`` is None."""

    def fallback_chain(self, locale: str, source_locale: str | None = None) -> List[str]:
        """Locales tried in order when looking up localized content."""
        chain: List[str] = []
        for code in (locale, self.registry.default_locale(), self.registry.fallback_locale(), source_locale):
            if code and code not in chain:
                chain.append(code)
        return chain

    async def get_localized(
        self,
        entity_id: EntityId,
        locale: str,
        source_locale: str | None = None,
    ) -> Optional[T]:
        """Best available translation for ``locale``, or None when there is none at all."""
        translations = await self.get_all(entity_id)
        translation = pick_translation(translations, self.fallback_chain(locale, source_locale))
        if translation is not None and locale not in translations:
            logger.debug("No '%s' translation for %r, serving fallback", locale, entity_id)
        return translation
