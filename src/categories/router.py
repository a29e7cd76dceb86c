from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.categories.models import Category, CategoryTranslation
from src.categories.schemas import (
    CategoryCreate,
    CategoryLocalized,
    CategoryTranslationResponse,
    CategoryTranslationUpsert,
    CategoryWithTranslations,
)
from src.categories.service import get_category, get_category_store, localize_category
from src.database import get_db
from src.locales import get_requested_locale, require_supported_locale
from src.logging_config import get_logger
from src.translations import SqlTranslationStore

logger = get_logger(__name__)

router = APIRouter(prefix="/categories", tags=["Categories"])


async def _get_category_or_404(db: AsyncSession, category_id: int) -> Category:
    category = await get_category(db, category_id)
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category with id {category_id} not found"
        )
    return category


@router.post("/", response_model=CategoryWithTranslations, status_code=status.HTTP_201_CREATED)
async def create_category(
    category: CategoryCreate,
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    """Create a new category, optionally with its first translations."""
    if category.source_locale:
        require_supported_locale(request, category.source_locale)
    for translation in category.translations:
        require_supported_locale(request, translation.locale)
    
    locales = [t.locale for t in category.translations]
    if len(set(locales)) != len(locales):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only one translation per locale is allowed"
        )
    
    db_category = Category(key=category.key, source_locale=category.source_locale)
    db_category.translations = [
        CategoryTranslation(locale=t.locale, name=t.name, slug=t.slug)
        for t in category.translations
    ]
    db.add(db_category)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Category key '{category.key}' or one of its slugs is already in use"
        )
    
    logger.info("Created category %s (%s)", db_category.id, db_category.key)
    return await get_category(db, db_category.id)


@router.get("/", response_model=List[CategoryLocalized])
async def list_categories(
    locale: str = Depends(get_requested_locale),
    skip: int = 0,
    limit: int = 100,
    db: AsyncSession = Depends(get_db),
    store: SqlTranslationStore = Depends(get_category_store)
):
    """List all categories localized in the requested locale."""
    result = await db.execute(
        select(Category)
        .options(selectinload(Category.translations))
        .order_by(Category.id)
        .offset(skip)
        .limit(limit)
    )
    categories = result.scalars().all()
    return [localize_category(category, locale, store) for category in categories]


@router.get("/{category_id}", response_model=CategoryWithTranslations)
async def read_category(
    category_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Get a category by ID with all its translations."""
    return await _get_category_or_404(db, category_id)


@router.get("/{category_id}/localized", response_model=CategoryLocalized)
async def read_localized_category(
    category_id: int,
    locale: str = Depends(get_requested_locale),
    db: AsyncSession = Depends(get_db),
    store: SqlTranslationStore = Depends(get_category_store)
):
    """Get a category in one locale, falling back to the default and fallback locales."""
    category = await _get_category_or_404(db, category_id)
    return localize_category(category, locale, store)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Delete a category together with its translations and posts."""
    category = await _get_category_or_404(db, category_id)
    
    await db.delete(category)
    await db.commit()
    logger.info("Deleted category %s", category_id)


# ========== Category Translations Endpoints ==========


@router.put(
    "/{category_id}/translations/{locale}",
    response_model=CategoryTranslationResponse,
)
async def upsert_category_translation(
    category_id: int,
    locale: str,
    translation: CategoryTranslationUpsert,
    request: Request,
    db: AsyncSession = Depends(get_db),
    store: SqlTranslationStore = Depends(get_category_store)
):
    """Create or replace the translation of a category in one locale."""
    require_supported_locale(request, locale)
    await _get_category_or_404(db, category_id)
    
    try:
        return await store.put(category_id, locale, translation.model_dump())
    except IntegrityError:
        await db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Slug '{translation.slug}' is already used by another category in '{locale}'"
        )


@router.get(
    "/{category_id}/translations",
    response_model=List[CategoryTranslationResponse]
)
async def list_category_translations(
    category_id: int,
    db: AsyncSession = Depends(get_db),
    store: SqlTranslationStore = Depends(get_category_store)
):
    """List all translations for a category."""
    await _get_category_or_404(db, category_id)
    translations = await store.get_all(category_id)
    return list(translations.values())


@router.delete("/{category_id}/translations/{locale}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category_translation(
    category_id: int,
    locale: str,
    store: SqlTranslationStore = Depends(get_category_store)
):
    """Delete the translation of a category in one locale."""
    deleted = await store.delete(category_id, locale)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category {category_id} has no '{locale}' translation"
        )
