"""
Seed script to populate the database and page store with sample data.

Creates categories and posts with translations in English, Portuguese,
French and Japanese, and the content of the static pages in Redis.
Japanese is deliberately incomplete so fallbacks can be observed.
"""

import asyncio

from sqlalchemy import delete

from src.categories.models import Category, CategoryTranslation
from src.database import async_session_maker, init_db
from src.logging_config import get_logger, setup_logging
from src.pages.store import PAGES_NAMESPACE
from src.posts.models import Post, PostTranslation
from src.redis.client import redis_client
from src.translations import RedisTranslationStore

logger = get_logger(__name__)


# ========== SEED DATA ==========

PAGES_DATA = {
    "home": {
        "en": {"title": "Welcome", "body": "A multilingual site."},
        "pt": {"title": "Bem-vindo", "body": "Um site multilingue."},
        "fr": {"title": "Bienvenue", "body": "Un site multilingue."},
        "jp": {"title": "ようこそ", "body": "多言語サイトです。"},
    },
    "about": {
        "en": {"title": "About us", "body": "Who we are."},
        "pt": {"title": "Sobre nós", "body": "Quem somos."},
        "fr": {"title": "À propos", "body": "Qui sommes-nous."},
    },
    "contact": {
        "en": {"title": "Contact", "body": "Write to us."},
        "pt": {"title": "Contato", "body": "Escreva-nos."},
        "fr": {"title": "Contact", "body": "Écrivez-nous."},
    },
}

CATEGORIES_DATA = {
    "news": {
        "source_locale": "en",
        "translations": {
            "en": {"name": "News", "slug": "news"},
            "pt": {"name": "Notícias", "slug": "noticias"},
            "fr": {"name": "Nouvelles", "slug": "nouvelles"},
            "jp": {"name": "ニュース", "slug": "nyusu"},
        },
        "posts": {
            "launch": {
                "en": {"title": "We launched", "slug": "we-launched", "content": "The site is live."},
                "pt": {"title": "Lançamos", "slug": "lancamos", "content": "O site está no ar."},
                "fr": {"title": "Lancement", "slug": "lancement", "content": "Le site est en ligne."},
            },
            "four-languages": {
                "en": {"title": "Now in four languages", "slug": "four-languages", "content": "English, Portuguese, French and Japanese."},
                "fr": {"title": "En quatre langues", "slug": "quatre-langues", "content": "Anglais, portugais, français et japonais."},
            },
        },
    },
    "tutorials": {
        "source_locale": "fr",
        "translations": {
            "fr": {"name": "Tutoriels", "slug": "tutoriels"},
            "en": {"name": "Tutorials", "slug": "tutorials"},
        },
        "posts": {
            "localized-routes": {
                "fr": {"title": "Routes localisées", "slug": "routes-localisees", "content": "Une route par langue."},
                "en": {"title": "Localized routes", "slug": "localized-routes", "content": "One route per language."},
            },
        },
    },
}


async def clear_database():
    """Clear all data from the database."""
    async with async_session_maker() as session:
        await session.execute(delete(PostTranslation))
        await session.execute(delete(Post))
        await session.execute(delete(CategoryTranslation))
        await session.execute(delete(Category))
        await session.commit()
    
    logger.info("Database cleared")


async def seed_pages(store: RedisTranslationStore):
    """Store static page content."""
    for page_key, translations in PAGES_DATA.items():
        await store.delete(page_key)
        for locale, fields in translations.items():
            await store.put(page_key, locale, fields)
    logger.info("Seeded %d pages", len(PAGES_DATA))


async def seed_database():
    """Seed the database with sample data."""
    logger.info("Initializing database...")
    await init_db()
    
    # Clear existing data first
    await clear_database()
    
    async with async_session_maker() as session:
        total_categories = 0
        total_posts = 0
        
        for category_key, category_data in CATEGORIES_DATA.items():
            category = Category(key=category_key, source_locale=category_data["source_locale"])
            session.add(category)
            await session.flush()
            
            for locale, fields in category_data["translations"].items():
                session.add(CategoryTranslation(category_id=category.id, locale=locale, **fields))
            
            total_categories += 1
            
            for post_key, translations in category_data["posts"].items():
                post = Post(key=post_key, category_id=category.id, source_locale=category_data["source_locale"])
                session.add(post)
                await session.flush()
                
                for locale, fields in translations.items():
                    session.add(PostTranslation(post_id=post.id, locale=locale, **fields))
                
                total_posts += 1
        
        await session.commit()
    
    logger.info("Seeded %d categories and %d posts", total_categories, total_posts)


async def main(command: str | None = None):
    await redis_client.connect()
    try:
        if command == "clear":
            await clear_database()
            return
        await seed_database()
        await seed_pages(RedisTranslationStore(PAGES_NAMESPACE))
    finally:
        await redis_client.disconnect()


if __name__ == "__main__":
    import sys
    
    setup_logging()
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None))
