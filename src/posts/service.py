"""Post lookups shared by the JSON API and the localized pages."""
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.database import get_db
from src.posts.models import Post, PostTranslation
from src.posts.schemas import PostLocalized
from src.translations import SqlTranslationStore, pick_translation


def post_translation_store(db: AsyncSession) -> SqlTranslationStore:
    return SqlTranslationStore(db, PostTranslation, "post_id", fields=("title", "slug", "content"))


async def get_post_store(db: AsyncSession = Depends(get_db)) -> SqlTranslationStore:
    """Dependency to get the post translation store."""
    return post_translation_store(db)


def localize_post(post: Post, locale: str, store: SqlTranslationStore) -> PostLocalized:
    """Build the localized view of a post whose translations are loaded."""
    translations = {t.locale: t for t in post.translations}
    translation = pick_translation(translations, store.fallback_chain(locale, post.source_locale))
    return PostLocalized(
        id=post.id,
        key=post.key,
        category_id=post.category_id,
        requested_locale=locale,
        locale=translation.locale if translation else None,
        title=translation.title if translation else None,
        slug=translation.slug if translation else None,
        content=translation.content if translation else None,
    )


def _post_query():
    return select(Post).options(selectinload(Post.translations)).execution_options(populate_existing=True)


async def get_post(db: AsyncSession, post_id: int) -> Optional[Post]:
    result = await db.execute(_post_query().where(Post.id == post_id))
    return result.scalar_one_or_none()


async def list_posts(
    db: AsyncSession,
    category_id: int | None = None,
    skip: int = 0,
    limit: int = 100,
) -> List[Post]:
    query = _post_query().order_by(Post.id)
    
    if category_id is not None:
        query = query.where(Post.category_id == category_id)
    
    result = await db.execute(query.offset(skip).limit(limit))
    return list(result.scalars().all())


async def find_post_by_slug(db: AsyncSession, slug: str, locales: List[str]) -> Optional[Post]:
    """Find a post whose slug matches in one of ``locales`` (earliest wins)."""
    result = await db.execute(
        select(PostTranslation)
        .where(PostTranslation.slug == slug, PostTranslation.locale.in_(locales))
    )
    matches = {t.locale: t for t in result.scalars().all()}
    translation = pick_translation(matches, locales)
    if translation is None:
        return None
    return await get_post(db, translation.post_id)
