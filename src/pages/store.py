"""Static page content, stored per route key and locale in Redis."""
from src.translations import RedisTranslationStore

PAGES_NAMESPACE = "pages"


def get_page_store() -> RedisTranslationStore:
    """Dependency to get the page content store."""
    return RedisTranslationStore(PAGES_NAMESPACE)
