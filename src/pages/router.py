"""Handlers for the localized page routes of the route table."""
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.categories.service import (
    find_category_by_slug,
    get_category,
    get_category_store,
    localize_category,
)
from src.database import get_db
from src.exceptions import TranslationNotFound
from src.locales import ActiveLocale, get_active_locale
from src.pages.schemas import BlogPage, CategoryPage, ContentPage, PostDetailPage, PostSummary
from src.pages.store import get_page_store
from src.posts.models import Post
from src.posts.schemas import PostPage
from src.posts.service import find_post_by_slug, get_post_store, list_posts, localize_post
from src.routing.deps import get_route_entry, get_route_table
from src.routing.table import RouteEntry, RouteTable
from src.translations import RedisTranslationStore, SqlTranslationStore


def _summaries(
    posts: List[Post],
    active: ActiveLocale,
    table: RouteTable,
    store: SqlTranslationStore,
) -> List[PostSummary]:
    summaries = []
    for post in posts:
        localized = localize_post(post, active.code, store)
        url = table.url_for("post", active.code, slug=localized.slug) if localized.slug else None
        summaries.append(PostSummary(**localized.model_dump(), url=url))
    return summaries


def _post_alternates(post: Post, table: RouteTable, store: SqlTranslationStore) -> Dict[str, str]:
    alternates = {}
    for locale in store.registry.supported_locales():
        slug = localize_post(post, locale, store).slug
        if slug:
            alternates[locale] = table.url_for("post", locale, slug=slug)
    return alternates


async def show_page(
    entry: RouteEntry = Depends(get_route_entry),
    active: ActiveLocale = Depends(get_active_locale),
    table: RouteTable = Depends(get_route_table),
    pages: RedisTranslationStore = Depends(get_page_store),
) -> ContentPage:
    """Static page (home, about, contact) in the active locale."""
    translation = await pages.get_localized(entry.key, active.code)
    if translation is None:
        raise TranslationNotFound(entry.key, active.code)
    
    return ContentPage(
        locale=active.code,
        route=entry.name,
        alternates=table.alternates(entry.key),
        content_locale=translation.locale,
        content=translation.fields,
    )


async def blog_index(
    skip: int = 0,
    limit: int = 20,
    entry: RouteEntry = Depends(get_route_entry),
    active: ActiveLocale = Depends(get_active_locale),
    table: RouteTable = Depends(get_route_table),
    db: AsyncSession = Depends(get_db),
    posts_store: SqlTranslationStore = Depends(get_post_store),
) -> BlogPage:
    """Latest posts localized in the active locale."""
    posts = await list_posts(db, skip=skip, limit=limit)
    return BlogPage(
        locale=active.code,
        route=entry.name,
        alternates=table.alternates(entry.key),
        posts=_summaries(posts, active, table, posts_store),
    )


async def show_category(
    slug: str,
    entry: RouteEntry = Depends(get_route_entry),
    active: ActiveLocale = Depends(get_active_locale),
    table: RouteTable = Depends(get_route_table),
    db: AsyncSession = Depends(get_db),
    categories_store: SqlTranslationStore = Depends(get_category_store),
    posts_store: SqlTranslationStore = Depends(get_post_store),
) -> CategoryPage:
    """Category page looked up by its slug in the active locale (or a fallback)."""
    category = await find_category_by_slug(db, slug, categories_store.fallback_chain(active.code))
    if category is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category '{slug}' not found"
        )
    
    alternates = {}
    for locale in categories_store.registry.supported_locales():
        localized_slug = localize_category(category, locale, categories_store).slug
        if localized_slug:
            alternates[locale] = table.url_for(entry.key, locale, slug=localized_slug)
    
    posts = await list_posts(db, category_id=category.id)
    return CategoryPage(
        locale=active.code,
        route=entry.name,
        alternates=alternates,
        category=localize_category(category, active.code, categories_store),
        posts=_summaries(posts, active, table, posts_store),
    )


async def show_post(
    slug: str,
    entry: RouteEntry = Depends(get_route_entry),
    active: ActiveLocale = Depends(get_active_locale),
    table: RouteTable = Depends(get_route_table),
    db: AsyncSession = Depends(get_db),
    categories_store: SqlTranslationStore = Depends(get_category_store),
    posts_store: SqlTranslationStore = Depends(get_post_store),
) -> PostDetailPage:
    """Single post looked up by its slug in the active locale (or a fallback)."""
    post = await find_post_by_slug(db, slug, posts_store.fallback_chain(active.code))
    if post is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Post '{slug}' not found"
        )
    
    localized = localize_post(post, active.code, posts_store)
    category = await get_category(db, post.category_id)
    category_view = localize_category(category, active.code, categories_store) if category else None
    
    return PostDetailPage(
        locale=active.code,
        route=entry.name,
        alternates=_post_alternates(post, table, posts_store),
        post=PostPage(**localized.model_dump(), category=category_view),
    )


PAGE_HANDLERS = {
    "pages.show": show_page,
    "pages.blog": blog_index,
    "pages.category": show_category,
    "pages.post": show_post,
}


def build_pages_router(table: RouteTable) -> APIRouter:
    """Router with one route per entry of the localized route table."""
    router = APIRouter(tags=["Pages"])
    return table.mount(router, PAGE_HANDLERS)
