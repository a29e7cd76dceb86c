"""Translation store backed by Redis hashes (one hash per entity)."""
import json
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field

from src.locales.registry import LocaleRegistry
from src.logging_config import get_logger
from src.redis.client import redis_client
from src.translations.base import EntityId, TranslationStore

logger = get_logger(__name__)


class Translation(BaseModel):
    """Localized record of a key-value entity."""
    entity_id: EntityId
    locale: str
    fields: Dict[str, Any] = Field(default_factory=dict)


class RedisTranslationStore(TranslationStore[Translation]):
    """Stores ``translations:{namespace}:{entity_id}`` hashes with one JSON field per locale.

    HSET replaces a single hash field atomically, so concurrent writes to the
    same (entity, locale) serialize with last-writer-wins.
    """

    KEY_PREFIX = "translations:"

    def __init__(self, namespace: str, registry: LocaleRegistry | None = None, client=None):
        super().__init__(registry)
        self.namespace = namespace
        self._client = client

    @property
    def redis(self):
        return self._client if self._client is not None else redis_client.client

    def _key(self, entity_id: EntityId) -> str:
        return f"{self.KEY_PREFIX}{self.namespace}:{entity_id}"

    async def get(self, entity_id: EntityId, locale: str) -> Optional[Translation]:
        raw = await self.redis.hget(self._key(entity_id), locale)
        if raw is None:
            return None
        return Translation(entity_id=entity_id, locale=locale, fields=json.loads(raw))

    async def get_all(self, entity_id: EntityId) -> Dict[str, Translation]:
        data = await self.redis.hgetall(self._key(entity_id))
        return {
            locale: Translation(entity_id=entity_id, locale=locale, fields=json.loads(raw))
            for locale, raw in data.items()
        }

    async def put(self, entity_id: EntityId, locale: str, fields: Mapping[str, Any]) -> Translation:
        translation = Translation(entity_id=entity_id, locale=locale, fields=dict(fields))
        await self.redis.hset(self._key(entity_id), locale, json.dumps(translation.fields))
        logger.debug("Stored %s translation for %s:%s", locale, self.namespace, entity_id)
        return translation

    async def delete(self, entity_id: EntityId, locale: str | None = None) -> int:
        if locale is None:
            return await self.redis.delete(self._key(entity_id))
        return await self.redis.hdel(self._key(entity_id), locale)
