from typing import Any, Dict

from pydantic import BaseModel, Field

from src.categories.schemas import CategoryLocalized
from src.posts.schemas import PostLocalized, PostPage


class LocalizedPage(BaseModel):
    """Fields shared by every localized page response."""
    locale: str = Field(..., description="Active locale of the request")
    route: str = Field(..., description="Name of the matched route (e.g. 'about.fr')")
    alternates: Dict[str, str] = Field(default_factory=dict, description="URL of this page per locale")


class ContentPage(LocalizedPage):
    """Static page with content from the page store."""
    content_locale: str = Field(..., description="Locale of the content actually served")
    content: Dict[str, Any] = {}


class PostSummary(PostLocalized):
    """Post listed on a localized page."""
    url: str | None = None


class BlogPage(LocalizedPage):
    posts: list[PostSummary] = []


class CategoryPage(LocalizedPage):
    category: CategoryLocalized
    posts: list[PostSummary] = []


class PostDetailPage(LocalizedPage):
    post: PostPage
