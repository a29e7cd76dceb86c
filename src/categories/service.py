"""Category lookups shared by the JSON API and the localized pages."""
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.categories.models import Category, CategoryTranslation
from src.categories.schemas import CategoryLocalized
from src.database import get_db
from src.translations import SqlTranslationStore, pick_translation


def category_translation_store(db: AsyncSession) -> SqlTranslationStore:
    return SqlTranslationStore(db, CategoryTranslation, "category_id", fields=("name", "slug"))


async def get_category_store(db: AsyncSession = Depends(get_db)) -> SqlTranslationStore:
    """Dependency to get the category translation store."""
    return category_translation_store(db)


def localize_category(category: Category, locale: str, store: SqlTranslationStore) -> CategoryLocalized:
    """Build the localized view of a category whose translations are loaded."""
    translations = {t.locale: t for t in category.translations}
    translation = pick_translation(translations, store.fallback_chain(locale, category.source_locale))
    return CategoryLocalized(
        id=category.id,
        key=category.key,
        requested_locale=locale,
        locale=translation.locale if translation else None,
        name=translation.name if translation else None,
        slug=translation.slug if translation else None,
    )


async def get_category(db: AsyncSession, category_id: int) -> Optional[Category]:
    result = await db.execute(
        select(Category)
        .options(selectinload(Category.translations))
        .where(Category.id == category_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def find_category_by_slug(db: AsyncSession, slug: str, locales: List[str]) -> Optional[Category]:
    """Find a category whose slug matches in one of ``locales`` (earliest wins)."""
    result = await db.execute(
        select(CategoryTranslation)
        .where(CategoryTranslation.slug == slug, CategoryTranslation.locale.in_(locales))
    )
    matches = {t.locale: t for t in result.scalars().all()}
    translation = pick_translation(matches, locales)
    if translation is None:
        return None
    return await get_category(db, translation.category_id)
