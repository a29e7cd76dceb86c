from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.categories.models import Category
from src.database import get_db
from src.locales import get_requested_locale, require_supported_locale
from src.logging_config import get_logger
from src.posts.models import Post, PostTranslation
from src.posts.schemas import (
    PostCreate,
    PostLocalized,
    PostTranslationResponse,
    PostTranslationUpsert,
    PostWithTranslations,
)
from src.posts.service import get_post, get_post_store, list_posts, localize_post
from src.translations import SqlTranslationStore

logger = get_logger(__name__)

router = APIRouter(prefix="/posts", tags=["Posts"])


async def _get_post_or_404(db: AsyncSession, post_id: int) -> Post:
    post = await get_post(db, post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Post with id {post_id} not found"
        )
    return post


@router.post("/", response_model=PostWithTranslations, status_code=status.HTTP_201_CREATED)
async def create_post(
    post: PostCreate,
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    """Create a new post in an existing category."""
    if post.source_locale:
        require_supported_locale(request, post.source_locale)
    for translation in post.translations:
        require_supported_locale(request, translation.locale)
    
    locales = [t.locale for t in post.translations]
    if len(set(locales)) != len(locales):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only one translation per locale is allowed"
        )
    
    # Verify category exists
    if await db.get(Category, post.category_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category with id {post.category_id} not found"
        )
    
    db_post = Post(key=post.key, category_id=post.category_id, source_locale=post.source_locale)
    db_post.translations = [
        PostTranslation(locale=t.locale, title=t.title, slug=t.slug, content=t.content)
        for t in post.translations
    ]
    db.add(db_post)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Post key '{post.key}' or one of its slugs is already in use"
        )
    
    logger.info("Created post %s (%s) in category %s", db_post.id, db_post.key, db_post.category_id)
    return await get_post(db, db_post.id)


@router.get("/", response_model=List[PostLocalized])
async def list_localized_posts(
    locale: str = Depends(get_requested_locale),
    skip: int = 0,
    limit: int = 100,
    category_id: int | None = None,
    db: AsyncSession = Depends(get_db),
    store: SqlTranslationStore = Depends(get_post_store)
):
    """List posts localized in the requested locale, optionally filtered by category."""
    posts = await list_posts(db, category_id=category_id, skip=skip, limit=limit)
    return [localize_post(post, locale, store) for post in posts]


@router.get("/{post_id}", response_model=PostWithTranslations)
async def read_post(
    post_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Get a post by ID with all its translations."""
    return await _get_post_or_404(db, post_id)


@router.get("/{post_id}/localized", response_model=PostLocalized)
async def read_localized_post(
    post_id: int,
    locale: str = Depends(get_requested_locale),
    db: AsyncSession = Depends(get_db),
    store: SqlTranslationStore = Depends(get_post_store)
):
    """Get a post in one locale, falling back to the default and fallback locales."""
    post = await _get_post_or_404(db, post_id)
    return localize_post(post, locale, store)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Delete a post and its translations."""
    post = await _get_post_or_404(db, post_id)
    
    await db.delete(post)
    await db.commit()
    logger.info("Deleted post %s", post_id)


# ========== Post Translations Endpoints ==========


@router.put(
    "/{post_id}/translations/{locale}",
    response_model=PostTranslationResponse,
)
async def upsert_post_translation(
    post_id: int,
    locale: str,
    translation: PostTranslationUpsert,
    request: Request,
    db: AsyncSession = Depends(get_db),
    store: SqlTranslationStore = Depends(get_post_store)
):
    """Create or replace the translation of a post in one locale."""
    require_supported_locale(request, locale)
    await _get_post_or_404(db, post_id)
    
    try:
        return await store.put(post_id, locale, translation.model_dump())
    except IntegrityError:
        await db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Slug '{translation.slug}' is already used by another post in '{locale}'"
        )


@router.get(
    "/{post_id}/translations",
    response_model=List[PostTranslationResponse]
)
async def list_post_translations(
    post_id: int,
    db: AsyncSession = Depends(get_db),
    store: SqlTranslationStore = Depends(get_post_store)
):
    """List all translations for a post."""
    await _get_post_or_404(db, post_id)
    translations = await store.get_all(post_id)
    return list(translations.values())


@router.delete("/{post_id}/translations/{locale}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post_translation(
    post_id: int,
    locale: str,
    store: SqlTranslationStore = Depends(get_post_store)
):
    """Delete the translation of a post in one locale."""
    deleted = await store.delete(post_id, locale)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Post {post_id} has no '{locale}' translation"
        )
