from src.translations.base import EntityId, TranslationStore, pick_translation
from src.translations.redis_store import RedisTranslationStore, Translation
from src.translations.sql_store import SqlTranslationStore

__all__ = [
    "EntityId",
    "RedisTranslationStore",
    "SqlTranslationStore",
    "Translation",
    "TranslationStore",
    "pick_translation",
]
